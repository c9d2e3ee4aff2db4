"""Error code registry with E-XXXX format codes.

This module defines the error code system for the UPS XML client,
organizing errors into categories:
- E-2xxx: Validation errors
- E-3xxx: UPS API errors
- E-5xxx: Authentication errors

Each error includes a code, title, message template, and remediation steps.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    """Categories for error codes."""

    VALIDATION = "validation"  # E-2xxx: Validation errors
    UPS_API = "ups_api"  # E-3xxx: UPS API errors
    AUTH = "auth"  # E-5xxx: Authentication errors


@dataclass(frozen=True)
class ErrorCode:
    """Definition of an error code with metadata.

    Attributes:
        code: Error code in E-XXXX format.
        category: Error category for grouping.
        title: Short title for display.
        message_template: Message with {placeholders} for context.
        remediation: Action user should take to resolve.
        is_retryable: Whether the operation can be retried without user action.
    """

    code: str  # E-XXXX format
    category: ErrorCategory
    title: str  # Short title for display
    message_template: str  # Message with {placeholders}
    remediation: str  # Action user should take
    is_retryable: bool = False  # Can be retried without user action


# Error registry - all defined error codes
ERROR_REGISTRY: dict[str, ErrorCode] = {
    # Validation errors (E-2xxx)
    "E-2001": ErrorCode(
        code="E-2001",
        category=ErrorCategory.VALIDATION,
        title="Invalid Postal Code",
        message_template="UPS rejected the postal code: {ups_message}",
        remediation="Check the postal code against the country and retry.",
    ),
    "E-2004": ErrorCode(
        code="E-2004",
        category=ErrorCategory.VALIDATION,
        title="Invalid Weight",
        message_template="UPS rejected the package weight or dimensions: {ups_message}",
        remediation="Package weight must be positive and within the 150 lbs limit.",
    ),
    "E-2006": ErrorCode(
        code="E-2006",
        category=ErrorCategory.VALIDATION,
        title="Invalid Tracking Number",
        message_template="UPS could not find tracking data: {ups_message}",
        remediation="Verify the tracking number. New shipments may take a few hours to appear.",
    ),
    # UPS API errors (E-3xxx)
    "E-3001": ErrorCode(
        code="E-3001",
        category=ErrorCategory.UPS_API,
        title="UPS Service Unavailable",
        message_template="UPS is not responding: {ups_message}",
        remediation="Wait a few minutes and retry. Check UPS system status at ups.com if issue persists.",
        is_retryable=True,
    ),
    "E-3003": ErrorCode(
        code="E-3003",
        category=ErrorCategory.UPS_API,
        title="UPS Address Validation Failed",
        message_template="UPS could not validate the address: {ups_message}",
        remediation="Provide a city, postal code, or both. State alone is not accepted.",
    ),
    "E-3004": ErrorCode(
        code="E-3004",
        category=ErrorCategory.UPS_API,
        title="UPS Service Not Available",
        message_template="UPS service is not available for this shipment: {ups_message}",
        remediation="Try a different service level or verify the destination is serviceable.",
    ),
    "E-3005": ErrorCode(
        code="E-3005",
        category=ErrorCategory.UPS_API,
        title="UPS Unknown Error",
        message_template="UPS returned an unexpected error: {ups_message}",
        remediation="Contact support with error code E-3005 and the UPS message for assistance.",
    ),
    "E-3006": ErrorCode(
        code="E-3006",
        category=ErrorCategory.UPS_API,
        title="Malformed UPS Response",
        message_template="UPS {action} response is missing required element '{path}'.",
        remediation="The response did not match the documented schema. Retry, then contact support with the raw response.",
    ),
    # Auth errors (E-5xxx)
    "E-5001": ErrorCode(
        code="E-5001",
        category=ErrorCategory.AUTH,
        title="UPS Authentication Failed",
        message_template="Failed to authenticate with UPS: {ups_message}",
        remediation="Check the access license number, user id, and password in your configuration.",
    ),
}


def get_error(code: str) -> ErrorCode | None:
    """Get error definition by code.

    Args:
        code: Error code in E-XXXX format.

    Returns:
        ErrorCode if found, None otherwise.
    """
    return ERROR_REGISTRY.get(code)


def get_errors_by_category(category: ErrorCategory) -> list[ErrorCode]:
    """Get all errors in a category.

    Args:
        category: The error category to filter by.

    Returns:
        List of ErrorCode objects in the specified category.
    """
    return [e for e in ERROR_REGISTRY.values() if e.category == category]
