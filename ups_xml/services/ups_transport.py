"""HTTP transport for the UPS XML tools.

Thin wrapper around a synchronous httpx client. Posts a rendered
request body to the fixed path for an action on the test or live host
and returns the response text. Network and HTTP status errors are
raised as httpx exceptions, unchanged.
"""

import logging

import httpx

from ups_xml.services.ups_constants import (
    UPS_LIVE_HOST,
    UPS_RESOURCES,
    UPS_TEST_HOST,
    UPSAction,
)

logger = logging.getLogger(__name__)


def endpoint_url(action: UPSAction, test: bool) -> str:
    """Return the full URL for an action on the test or live host."""
    host = UPS_TEST_HOST if test else UPS_LIVE_HOST
    return f"https://{host}{UPS_RESOURCES[action]}"


class UPSTransport:
    """Synchronous HTTPS transport shared by all four operations.

    Safe to share between threads; holds no per-request state.

    Example:
        with UPSTransport(timeout=30.0) as transport:
            body = transport.send_request(UPSAction.TRACK, xml, test=True)
    """

    def __init__(
        self,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds.
            client: Preconfigured httpx client (e.g., with a mock transport).
        """
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "UPSTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def send_request(self, action: UPSAction, body: str, test: bool) -> str:
        """POST an XML body and return the response text.

        Args:
            action: Operation whose endpoint path to use.
            body: Rendered access block plus request XML.
            test: Use the customer integration environment.

        Returns:
            Response body text.

        Raises:
            httpx.HTTPError: On network failure or non-2xx status.
        """
        url = endpoint_url(action, test)
        logger.debug("POST %s (%d bytes)", url, len(body))
        response = self._client.post(
            url,
            content=body.encode("utf-8"),
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        response.raise_for_status()
        return response.text
