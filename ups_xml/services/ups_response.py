"""UPS XML response normalization.

UPS returns repeatable elements as a single object when there is one
of them and as a list when there are several. xmltodict mirrors that
shape, so every repeatable field goes through ensure_list() before a
parser touches it.

Responses may arrive as raw XML text, as an ElementTree element, or as
an already-parsed mapping. to_mapping() folds all three into the same
mapping view so the rules below apply regardless of representation.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any

import xmltodict

from ups_xml.errors.registry import get_error
from ups_xml.errors.ups_translation import extract_ups_error, translate_ups_error
from ups_xml.services.errors import UPSCarrierError, UPSMalformedResponseError

logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODE = "1"


def _strip_prefix(path: Any, key: str, value: Any) -> tuple[str, Any]:
    """xmltodict postprocessor dropping namespace prefixes from element names.

    ElementTree serializes namespaced elements as ns0:Tag; parsers look
    elements up by local name.
    """
    if not key.startswith("@") and ":" in key:
        key = key.split(":", 1)[1]
    return key, value


def to_mapping(response: str | bytes | ET.Element | dict[str, Any]) -> dict[str, Any]:
    """Return the content of the response's root element as a mapping.

    Args:
        response: Raw XML text/bytes, an ElementTree element, or a mapping.
            A mapping whose only key is the root tag is unwrapped; any
            other mapping is taken to be the root content already.

    Returns:
        Mapping of the root element's children.
    """
    if isinstance(response, ET.Element):
        response = ET.tostring(response, encoding="unicode")
    if isinstance(response, (str, bytes)):
        response = xmltodict.parse(response, postprocessor=_strip_prefix)

    if len(response) == 1 and "Response" not in response:
        (content,) = response.values()
        if isinstance(content, dict):
            return content
    return dict(response)


def ensure_list(value: Any) -> list[Any]:
    """Normalize a single-or-repeated element to a list.

    Args:
        value: A mapping (one element), a list (several), or None (absent).

    Returns:
        [] for None, the list itself for a list, [value] otherwise.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def first_or_only(value: Any) -> Any:
    """Return the first element of a repeated field, or the field itself."""
    if isinstance(value, list):
        return value[0] if value else None
    return value


def dig(node: Any, path: str, default: Any = None) -> Any:
    """Walk a slash-separated path through nested mappings.

    Repeated elements along the way resolve to their first occurrence.

    Args:
        node: Mapping to start from.
        path: Path such as "TotalCharges/MonetaryValue".
        default: Returned when any step is missing.
    """
    for key in path.split("/"):
        node = first_or_only(node)
        if not isinstance(node, dict) or node.get(key) is None:
            return default
        node = node[key]
    return node


def text(node: Any, path: str) -> str | None:
    """Return the text at path, or None when absent or blank."""
    value = first_or_only(dig(node, path))
    if isinstance(value, dict):
        value = value.get("#text")
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def require(node: Any, path: str, action: str) -> Any:
    """Return the value at path, raising if the element is absent.

    Args:
        node: Mapping to start from.
        path: Slash-separated element path.
        action: Operation name for the error message (e.g., "tracking").

    Raises:
        UPSMalformedResponseError: If the element is missing.
    """
    value = dig(node, path)
    if value is None:
        raise malformed(action, path)
    return value


def require_text(node: Any, path: str, action: str) -> str:
    """Return the non-blank text at path, raising if absent."""
    value = text(node, path)
    if value is None:
        raise malformed(action, path)
    return value


def malformed(action: str, path: str) -> UPSMalformedResponseError:
    """Build the error raised for a missing required element."""
    error = get_error("E-3006")
    return UPSMalformedResponseError(
        code=error.code,
        message=error.message_template.format(action=action, path=path),
        remediation=error.remediation,
        path=path,
    )


def is_success(response: dict[str, Any]) -> bool:
    """True when Response/ResponseStatusCode is exactly "1"."""
    return text(response, "Response/ResponseStatusCode") == SUCCESS_STATUS_CODE


def response_message(response: dict[str, Any]) -> str | None:
    """Status description on success, error description otherwise."""
    if is_success(response):
        return text(response, "Response/ResponseStatusDescription")
    return extract_ups_error(response)[1]


def check_response(response: dict[str, Any]) -> str | None:
    """Raise on a carrier-reported failure, else return the status message.

    Args:
        response: Unwrapped response mapping (see to_mapping).

    Returns:
        The ResponseStatusDescription, if any.

    Raises:
        UPSCarrierError: If the status code is not "1".
    """
    if is_success(response):
        return response_message(response)

    ups_code, ups_message = extract_ups_error(response)
    code, message, remediation = translate_ups_error(ups_code, ups_message)
    logger.warning("UPS reported failure %s (%s): %s", code, ups_code, ups_message)
    raise UPSCarrierError(
        code=code,
        message=message,
        remediation=remediation,
        details=response.get("Response"),
        carrier_code=ups_code,
        carrier_message=ups_message,
    )
