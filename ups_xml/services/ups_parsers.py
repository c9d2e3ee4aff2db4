"""UPS XML response parsers.

One parser per operation. Each takes the raw response (text, element,
or mapping), raises UPSCarrierError on a carrier-reported failure and
UPSMalformedResponseError when a required element is missing, and
otherwise returns a typed result.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from typing import Any

from dateutil import parser as date_parser

from ups_xml.models.location import Location, Package
from ups_xml.models.results import (
    AddressCandidate,
    RateEstimate,
    RateResponse,
    TimeInTransitResult,
    TimeInTransitService,
    TrackingResult,
    ValidatedAddress,
)
from ups_xml.services.ups_constants import AV_MAX_RESULTS, UPS_CARRIER_NAME
from ups_xml.services.ups_response import (
    check_response,
    dig,
    ensure_list,
    first_or_only,
    malformed,
    require,
    require_text,
    text,
    to_mapping,
)
from ups_xml.services.ups_service_codes import service_name_for
from ups_xml.services.ups_tracking import RawActivity, reconcile_events

logger = logging.getLogger(__name__)

# The developer guide documents "1"/"0" but its examples use "Y"/"N"
GUARANTEED_CODES: frozenset[str] = frozenset({"1", "Y"})


def _raw_text(response: Any) -> str:
    if isinstance(response, bytes):
        return response.decode("utf-8", errors="replace")
    return response if isinstance(response, str) else ""


def _number(node: Any, path: str, action: str, cast: type, default: Any = None) -> Any:
    """Cast the text at path with int or float, raising malformed if it is not numeric.

    An absent element yields default, or raises when default is None.
    """
    value = text(node, path)
    if value is None:
        if default is None:
            raise malformed(action, path)
        return default
    try:
        return cast(value)
    except ValueError:
        raise malformed(action, path) from None


# ---------------------------------------------------------------------------
# Rating
# ---------------------------------------------------------------------------


def parse_rate_response(
    response: Any,
    origin: Location,
    destination: Location,
    packages: Sequence[Package],
) -> RateResponse:
    """Parse a rate-shop response into one estimate per RatedShipment.

    Estimates keep the carrier's order.
    """
    data = to_mapping(response)
    message = check_response(data)

    rates = []
    for rated in ensure_list(data.get("RatedShipment")):
        service_code = require_text(rated, "Service/Code", "rating")
        amount = require_text(rated, "TotalCharges/MonetaryValue", "rating")
        try:
            total_price = Decimal(amount)
        except InvalidOperation:
            raise malformed("rating", "TotalCharges/MonetaryValue") from None
        rates.append(RateEstimate(
            origin=origin,
            destination=destination,
            carrier=UPS_CARRIER_NAME,
            service_name=service_name_for(origin.country_code, service_code),
            service_code=service_code,
            total_price=total_price,
            currency=text(rated, "TotalCharges/CurrencyCode") or "",
            packages=tuple(packages),
        ))

    return RateResponse(message=message, rates=tuple(rates), xml=_raw_text(response))


# ---------------------------------------------------------------------------
# Tracking
# ---------------------------------------------------------------------------


def location_from_address(address: Any) -> Location | None:
    """Build a Location from a UPS Address element, or None if absent."""
    address = first_or_only(address)
    if not isinstance(address, dict):
        return None
    return Location(
        country_code=text(address, "CountryCode"),
        postal_code=text(address, "PostalCode"),
        province=text(address, "StateProvinceCode"),
        city=text(address, "City"),
        address1=text(address, "AddressLine1"),
        address2=text(address, "AddressLine2"),
        address3=text(address, "AddressLine3"),
    )


def parse_tracking_response(response: Any) -> TrackingResult:
    """Parse a tracking response for the first shipment it contains."""
    data = to_mapping(response)
    message = check_response(data)

    shipment = first_or_only(require(data, "Shipment", "tracking"))
    if not isinstance(shipment, dict):
        raise malformed("tracking", "Shipment")
    tracking_number = (
        text(shipment, "ShipmentIdentificationNumber")
        or text(shipment, "Package/TrackingNumber")
    )
    if tracking_number is None:
        raise malformed("tracking", "Shipment/ShipmentIdentificationNumber")

    origin = location_from_address(dig(shipment, "Shipper/Address"))
    destination = location_from_address(dig(shipment, "ShipTo/Address"))

    package = first_or_only(dig(shipment, "Package")) or {}
    if not isinstance(package, dict):
        raise malformed("tracking", "Shipment/Package")
    activities = []
    for activity in ensure_list(package.get("Activity")):
        date_text = require_text(activity, "Date", "tracking")
        time_text = require_text(activity, "Time", "tracking")
        activities.append(RawActivity(
            description=text(activity, "Status/StatusType/Description") or "",
            date=date_text,
            time=time_text,
            location=location_from_address(dig(activity, "ActivityLocation/Address")),
        ))

    try:
        events = reconcile_events(activities, origin, destination)
    except ValueError:
        raise malformed("tracking", "Shipment/Package/Activity/Date") from None

    return TrackingResult(
        tracking_number=tracking_number,
        origin=origin,
        destination=destination,
        events=tuple(events),
        message=message,
    )


# ---------------------------------------------------------------------------
# Time in transit
# ---------------------------------------------------------------------------


def _build_candidate_list(candidate_list: Any) -> tuple[AddressCandidate, ...]:
    candidates = []
    for candidate in ensure_list(dig(candidate_list, "Candidate")):
        artifact = dig(candidate, "AddressArtifactFormat") or {}
        candidates.append(AddressCandidate(
            state=text(artifact, "PoliticalDivision1"),
            city=text(artifact, "PoliticalDivision2"),
            town=text(artifact, "PoliticalDivision3"),
            postcode_primary_low=text(artifact, "PostcodePrimaryLow"),
            postcode_primary_high=text(artifact, "PostcodePrimaryHigh"),
            postcode_extended_low=text(artifact, "PostcodeExtendedLow"),
            postcode_extended_high=text(artifact, "PostcodeExtendedHigh"),
            country=text(artifact, "Country"),
            country_code=text(artifact, "CountryCode"),
        ))
    return tuple(candidates)


def _parse_service_summary(summary: Any) -> TimeInTransitService:
    arrival_date = require_text(summary, "EstimatedArrival/Date", "time in transit")
    arrival_time = text(summary, "EstimatedArrival/Time") or "00:00:00"
    try:
        delivery_at = date_parser.parse(f"{arrival_date} {arrival_time}")
    except (ValueError, OverflowError):
        raise malformed("time in transit", "ServiceSummary/EstimatedArrival/Date") from None

    return TimeInTransitService(
        service_code=require_text(summary, "Service/Code", "time in transit"),
        service_name=text(summary, "Service/Description"),
        delivery_at=delivery_at,
        business_days=_number(
            summary, "EstimatedArrival/BusinessTransitDays", "time in transit", int, default=0,
        ),
        guaranteed=text(summary, "Guaranteed/Code") in GUARANTEED_CODES,
        description=text(summary, "Guaranteed/Description"),
    )


def parse_time_in_transit_response(response: Any) -> TimeInTransitResult:
    """Parse a time-in-transit response.

    Candidate lists are only present when UPS found the origin or
    destination ambiguous; otherwise they are empty.
    """
    data = to_mapping(response)
    check_response(data)

    transit = first_or_only(require(data, "TransitResponse", "time in transit"))
    if not isinstance(transit, dict):
        raise malformed("time in transit", "TransitResponse")
    services = tuple(
        _parse_service_summary(summary)
        for summary in ensure_list(transit.get("ServiceSummary"))
    )

    return TimeInTransitResult(
        disclaimer=text(transit, "Disclaimer"),
        services=services,
        origin_candidates=_build_candidate_list(transit.get("TransitFromList")),
        destination_candidates=_build_candidate_list(transit.get("TransitToList")),
    )


# ---------------------------------------------------------------------------
# Address validation
# ---------------------------------------------------------------------------


def parse_address_validation_response(response: Any) -> list[ValidatedAddress]:
    """Parse an address validation response.

    UPS already orders results by descending quality and ascending rank;
    the returned list keeps that order. No match yields an empty list.
    """
    data = to_mapping(response)
    check_response(data)

    entries = ensure_list(data.get("AddressValidationResult"))
    if len(entries) > AV_MAX_RESULTS:
        logger.warning(
            "UPS returned %d address validation results; at most %d are documented",
            len(entries), AV_MAX_RESULTS,
        )

    results = []
    for result in entries:
        results.append(ValidatedAddress(
            rank=_number(result, "Rank", "address validation", int),
            quality=_number(result, "Quality", "address validation", float),
            city=text(result, "Address/City"),
            state_province_code=text(result, "Address/StateProvinceCode"),
            postal_code_low_end=text(result, "PostalCodeLowEnd"),
            postal_code_high_end=text(result, "PostalCodeHighEnd"),
        ))
    return results
