"""Shared service-layer error types.

Provides error dataclasses used across service modules (parsers,
normalizer, client facade). Centralised here to avoid circular imports
between service modules.
"""

from dataclasses import dataclass


@dataclass
class UPSServiceError(Exception):
    """Error from UPS service layer.

    Attributes:
        code: Error code (E-XXXX format)
        message: Human-readable error message
        remediation: Suggested fix
        details: Raw error details
    """

    code: str
    message: str
    remediation: str = ""
    details: dict | None = None

    def __str__(self) -> str:
        """Return formatted error message."""
        return f"[{self.code}] {self.message}"


@dataclass
class UPSCarrierError(UPSServiceError):
    """UPS answered with a status code other than "1".

    Attributes:
        carrier_code: UPS ErrorCode, if present
        carrier_message: UPS ErrorDescription, verbatim
    """

    carrier_code: str | None = None
    carrier_message: str | None = None


@dataclass
class UPSMalformedResponseError(UPSServiceError):
    """A response lacked an element the UPS schema guarantees.

    Attributes:
        path: Slash-separated path of the missing element
    """

    path: str = ""
