"""UPS service layer: the client facade over the XML tools.

Composes request building, the HTTP transport, response normalization
and parsing for the four supported operations. All methods are
synchronous; async callers should use asyncio.to_thread().

Example:
    svc = UPSService(UPSConfig(key=..., login=..., password=...))
    rates = svc.find_rates(origin, destination, [package], test=True)
    cheapest = min(rates.rates, key=lambda r: r.total_price)
"""

import logging
from collections.abc import Callable, Sequence
from datetime import date
from decimal import Decimal
from typing import Any

from ups_xml.config import UPSConfig
from ups_xml.models.location import Location, Package
from ups_xml.models.results import (
    RateResponse,
    TimeInTransitResult,
    TrackingResult,
    ValidatedAddress,
)
from ups_xml.services.ups_constants import (
    DEFAULT_CURRENCY_CODE,
    MAX_WEIGHT_LBS,
    UPSAction,
)
from ups_xml.services.ups_parsers import (
    parse_address_validation_response,
    parse_rate_response,
    parse_time_in_transit_response,
    parse_tracking_response,
)
from ups_xml.services.ups_payload_builder import (
    RateOptions,
    build_access_request,
    build_address_validation_request,
    build_rate_request,
    build_time_in_transit_request,
    build_track_request,
    render_request,
    upsified_location,
)
from ups_xml.services.ups_transport import UPSTransport
from ups_xml.utils.redaction import redact_for_logging

logger = logging.getLogger(__name__)

SendRequest = Callable[[UPSAction, str, bool], str]


class UPSService:
    """Client for the UPS XML rating, tracking, time-in-transit and
    address validation tools.

    The only state is the immutable configuration and the transport, so
    one instance may serve concurrent callers.
    """

    maximum_weight_lbs = MAX_WEIGHT_LBS

    def __init__(
        self,
        config: UPSConfig,
        send_request: SendRequest | None = None,
    ) -> None:
        """Initialize with UPS credentials.

        Args:
            config: Credentials and client defaults.
            send_request: Callable (action, body, test) -> response text.
                Defaults to an httpx-backed UPSTransport.
        """
        self._config = config
        self._transport: UPSTransport | None = None
        if send_request is None:
            self._transport = UPSTransport(timeout=config.timeout)
            send_request = self._transport.send_request
        self._send_request = send_request

    @property
    def config(self) -> UPSConfig:
        return self._config

    def close(self) -> None:
        """Release the default transport, if this service created one."""
        if self._transport is not None:
            self._transport.close()

    def __enter__(self) -> "UPSService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ── Operations ────────────────────────────────────────────────────

    def find_rates(
        self,
        origin: Location,
        destination: Location,
        packages: Package | Sequence[Package],
        *,
        pickup_type: str | None = None,
        shipper: Location | None = None,
        origin_account: str | None = None,
        destination_account: str | None = None,
        test: bool | None = None,
    ) -> RateResponse:
        """Quote every available service for a shipment.

        Args:
            origin: Ship-from location.
                US territories given as a state (e.g., province="PR")
                are quoted as their own country; see upsified_location.
            destination: Ship-to location.
            packages: One package or a sequence of packages.
            pickup_type: Pickup type name; defaults to the configured one.
            shipper: Shipper location when it differs from origin.
            origin_account: Overrides the configured shipper account.
            destination_account: Overrides the configured ship-to account.
            test: Use the test environment; defaults to config.test.

        Returns:
            RateResponse with one estimate per quoted service.

        Raises:
            UPSCarrierError: UPS reported a failure.
            UPSMalformedResponseError: A required element was missing.
            httpx.HTTPError: Transport failure.
        """
        if isinstance(packages, Package):
            packages = [packages]
        origin, destination = upsified_location(origin), upsified_location(destination)
        options = RateOptions(
            pickup_type=pickup_type or self._config.pickup_type,
            shipper=upsified_location(shipper) if shipper is not None else None,
            origin_account=origin_account or self._config.origin_account,
            destination_account=destination_account or self._config.destination_account,
        )
        request = build_rate_request(origin, destination, packages, options)
        raw = self._commit(UPSAction.RATES, request, test)
        return parse_rate_response(raw, origin, destination, packages)

    def find_tracking_info(
        self,
        tracking_number: str,
        *,
        test: bool | None = None,
    ) -> TrackingResult:
        """Fetch and reconcile the tracking history for a shipment.

        Raises:
            UPSCarrierError: UPS reported a failure (e.g., unknown number).
            UPSMalformedResponseError: No Shipment element in the response.
            httpx.HTTPError: Transport failure.
        """
        raw = self._commit(UPSAction.TRACK, build_track_request(tracking_number), test)
        return parse_tracking_response(raw)

    def find_time_in_transit(
        self,
        origin: Location,
        destination: Location,
        pickup_date: date,
        shipment_weight_lbs: float | None = None,
        total_packages: int | None = None,
        monetary_value: Decimal | float | str | None = None,
        documents_only: bool = False,
        maximum_list_size: int | None = None,
        *,
        currency_code: str = DEFAULT_CURRENCY_CODE,
        test: bool | None = None,
    ) -> TimeInTransitResult:
        """Estimate delivery dates per service.

        When UPS finds the origin or destination ambiguous, the result's
        candidate lists hold the locations it would accept instead.
        """
        request = build_time_in_transit_request(
            origin,
            destination,
            pickup_date,
            shipment_weight_lbs=shipment_weight_lbs,
            total_packages=total_packages,
            monetary_value=monetary_value,
            documents_only=documents_only,
            maximum_list_size=maximum_list_size,
            currency_code=currency_code,
        )
        raw = self._commit(UPSAction.TIME_IN_TRANSIT, request, test)
        return parse_time_in_transit_response(raw)

    def validate_address(
        self,
        location: Location,
        *,
        test: bool | None = None,
    ) -> list[ValidatedAddress]:
        """Validate a city/state/postal-code combination.

        Args:
            location: Any combination of city, state and postal code
                except state alone.
            test: Use the test environment; defaults to config.test.

        Returns:
            0-10 matches in UPS order (best first).
        """
        request = build_address_validation_request(location)
        raw = self._commit(UPSAction.ADDRESS_VALIDATION, request, test)
        return parse_address_validation_response(raw)

    # ── Transport ─────────────────────────────────────────────────────

    def _commit(
        self,
        action: UPSAction,
        request: dict[str, Any],
        test: bool | None,
    ) -> str:
        """Render, log (redacted), and send a request; return the raw body."""
        use_test = self._config.test if test is None else test
        access = build_access_request(
            self._config.key, self._config.login, self._config.password,
        )
        logger.info("UPS %s request (%s)", action.value, "test" if use_test else "live")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("UPS %s access: %s", action.value, redact_for_logging(access))
            logger.debug("UPS %s body: %s", action.value, request)
        return self._send_request(action, render_request(access, request), use_test)
