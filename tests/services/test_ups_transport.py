"""Tests for the UPS HTTP transport against mocked HTTP responses."""

import httpx
import pytest

from ups_xml.services.ups_constants import UPSAction
from ups_xml.services.ups_transport import UPSTransport, endpoint_url


def _make_transport(handler) -> UPSTransport:
    """Create UPSTransport over an httpx mock transport."""
    return UPSTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestEndpointUrl:
    """Tests for host and path selection."""

    @pytest.mark.parametrize("action,path", [
        (UPSAction.RATES, "/ups.app/xml/Rate"),
        (UPSAction.TRACK, "/ups.app/xml/Track"),
        (UPSAction.TIME_IN_TRANSIT, "/ups.app/xml/TimeInTransit"),
        (UPSAction.ADDRESS_VALIDATION, "/ups.app/xml/AV"),
    ])
    def test_paths(self, action, path):
        assert endpoint_url(action, test=True) == f"https://wwwcie.ups.com{path}"

    def test_live_host(self):
        assert endpoint_url(UPSAction.TRACK, test=False) == (
            "https://onlinetools.ups.com/ups.app/xml/Track"
        )


class TestSendRequest:
    """Tests for UPSTransport.send_request."""

    def test_posts_body_and_returns_text(self):
        """Body is posted as-is to the action endpoint."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["body"] = request.content.decode("utf-8")
            seen["content_type"] = request.headers["Content-Type"]
            return httpx.Response(200, text="<TrackResponse/>")

        transport = _make_transport(handler)
        result = transport.send_request(UPSAction.TRACK, "<TrackRequest/>", test=True)

        assert result == "<TrackResponse/>"
        assert seen["method"] == "POST"
        assert seen["url"] == "https://wwwcie.ups.com/ups.app/xml/Track"
        assert seen["body"] == "<TrackRequest/>"
        assert seen["content_type"] == "application/x-www-form-urlencoded"

    def test_http_error_status_propagates(self):
        """Non-2xx statuses raise httpx.HTTPStatusError unchanged."""
        transport = _make_transport(lambda request: httpx.Response(503, text="down"))

        with pytest.raises(httpx.HTTPStatusError):
            transport.send_request(UPSAction.RATES, "<x/>", test=False)

    def test_network_error_propagates(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        transport = _make_transport(handler)
        with pytest.raises(httpx.ConnectError):
            transport.send_request(UPSAction.RATES, "<x/>", test=False)


class TestLifecycle:
    """Tests for client ownership."""

    def test_does_not_close_injected_client(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        with UPSTransport(client=client):
            pass
        assert client.is_closed is False
        client.close()

    def test_closes_own_client(self):
        transport = UPSTransport(timeout=5.0)
        transport.close()
        assert transport._client.is_closed is True
