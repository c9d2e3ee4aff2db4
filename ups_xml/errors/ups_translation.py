"""UPS error code translation to friendly messages.

This module maps UPS XML API error codes and messages to the client's
error code system, providing user-friendly error messages with
actionable remediation steps.
"""

from typing import Any

from ups_xml.errors.registry import get_error


# Map of UPS XML error codes to E-codes
# Source: UPS OnLine Tools XML developer guides
UPS_ERROR_MAP: dict[str, str] = {
    # Authentication errors
    "250001": "E-5001",  # Invalid access license for the tool
    "250002": "E-5001",  # Invalid authentication information
    "250003": "E-5001",  # Invalid access license number
    "250004": "E-5001",  # Incorrect user id or password
    # System/availability errors
    "250000": "E-3001",  # No XML declaration in request
    "250005": "E-3001",  # No access and identification information
    "250006": "E-3001",  # Maximum number of user access attempts exceeded
    "250009": "E-3001",  # License number not found in the UPS database
    # Rating errors
    "111210": "E-3004",  # Service unavailable between locations
    "111280": "E-3004",  # Ship to not serviced
    "111285": "E-2001",  # Postal code invalid for state
    "111500": "E-2004",  # Package weight or dimensions invalid
    "111057": "E-2004",  # Package exceeds maximum weight
    # Tracking errors
    "151018": "E-2006",  # Invalid tracking number
    "151044": "E-2006",  # No tracking information available
    "154030": "E-2006",  # No information found
    # Address validation errors
    "20001": "E-3003",  # Invalid city/state/postal combination
    "20002": "E-3003",  # State code alone is not accepted
    "20007": "E-3003",  # Missing or invalid postal code
    "20008": "E-2001",  # Invalid postal code
}

# Additional UPS error messages that require pattern matching
UPS_MESSAGE_PATTERNS: dict[str, str] = {
    "postal code": "E-2001",
    "invalid zip": "E-2001",
    "weight": "E-2004",
    "tracking number": "E-2006",
    "no tracking information": "E-2006",
    "address validation": "E-3003",
    "service unavailable": "E-3001",
    "authentication": "E-5001",
    "access license": "E-5001",
}


def translate_ups_error(
    ups_code: str | None,
    ups_message: str | None,
    context: dict | None = None,
) -> tuple[str, str, str]:
    """Translate UPS error to an E-code error.

    Args:
        ups_code: UPS error code (e.g., "151018").
        ups_message: UPS error description text.
        context: Additional template context.

    Returns:
        Tuple of (error_code, formatted_message, remediation).
    """
    context = context or {}

    # Try direct code lookup first
    if ups_code and ups_code in UPS_ERROR_MAP:
        error = get_error(UPS_ERROR_MAP[ups_code])
        if error:
            message = _format_message(
                error.message_template,
                ups_message=ups_message or "Unknown error",
                **context,
            )
            return (error.code, message, error.remediation)

    # Try message pattern matching
    if ups_message:
        ups_message_lower = ups_message.lower()
        for pattern, sa_code in UPS_MESSAGE_PATTERNS.items():
            if pattern in ups_message_lower:
                error = get_error(sa_code)
                if error:
                    message = _format_message(
                        error.message_template,
                        ups_message=ups_message,
                        **context,
                    )
                    return (error.code, message, error.remediation)

    # Fallback to generic UPS error
    error = get_error("E-3005")  # UPS Unknown Error
    if error:
        message = _format_message(
            error.message_template,
            ups_message=ups_message or f"Code: {ups_code}",
            **context,
        )
        return (error.code, message, error.remediation)

    return (
        "E-3005",
        f"UPS error: {ups_message or ups_code or 'Unknown'}",
        "Contact support with this error message for assistance.",
    )


def _format_message(template: str, **kwargs: object) -> str:
    """Format a message template with context, ignoring missing keys.

    Args:
        template: Message template with {placeholder} syntax.
        **kwargs: Values to substitute into the template.

    Returns:
        Formatted message string.
    """
    try:
        return template.format(**kwargs)
    except KeyError:
        # Keep template if some placeholders are missing
        return template


def extract_ups_error(response: dict[str, Any]) -> tuple[str | None, str | None]:
    """Extract error code and description from a UPS XML response.

    Expects the unwrapped response mapping (the content of the root
    element). UPS may repeat the Error element; the first one wins.

    Args:
        response: Unwrapped UPS response mapping.

    Returns:
        Tuple of (error_code, error_description), either may be None.
    """
    inner = response.get("Response")
    if not isinstance(inner, dict):
        return (None, None)

    err = inner.get("Error")
    if isinstance(err, list):
        err = err[0] if err else None
    if not isinstance(err, dict):
        return (None, None)

    return (err.get("ErrorCode"), err.get("ErrorDescription"))
