"""Error handling framework for the UPS XML client.

This package provides:
- Error code registry with E-XXXX format codes
- UPS error translation to friendly messages

Error categories:
- E-2xxx: Validation errors
- E-3xxx: UPS API errors
- E-5xxx: Authentication errors
"""

from ups_xml.errors.registry import (
    ErrorCategory,
    ErrorCode,
    ERROR_REGISTRY,
    get_error,
    get_errors_by_category,
)
from ups_xml.errors.ups_translation import (
    UPS_ERROR_MAP,
    extract_ups_error,
    translate_ups_error,
)

__all__ = [
    # Registry
    "ErrorCode",
    "ErrorCategory",
    "ERROR_REGISTRY",
    "get_error",
    "get_errors_by_category",
    # UPS translation
    "translate_ups_error",
    "extract_ups_error",
    "UPS_ERROR_MAP",
]
