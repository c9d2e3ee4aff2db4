"""UPS payload builder for XML requests.

Transforms Location/Package values into the nested element trees the
UPS XML tools expect. Each builder returns an ordered mapping tree
(element name → text, child mapping, or list of repeated children);
render_request() serializes an access block plus a request tree into
the two concatenated XML documents UPS accepts.

Example:
    from ups_xml.services.ups_payload_builder import (
        build_access_request, build_track_request, render_request,
    )

    body = render_request(
        build_access_request(key, login, password),
        build_track_request("1Z5FX0076803466397"),
    )
"""

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

import xmltodict

from ups_xml.models.location import Location, Package
from ups_xml.services.ups_constants import (
    CUSTOMER_SUPPLIED_PACKAGING_CODE,
    DEFAULT_CURRENCY_CODE,
    DEFAULT_PICKUP_TYPE,
    IMPERIAL_ORIGIN_COUNTRIES,
    MIN_MEASUREMENT,
    PICKUP_CODES,
    US_TERRITORIES_TREATED_AS_COUNTRIES,
)

# Empty element: UPS treats presence as the flag
INDICATOR = None

_THOUSANDTHS = Decimal("0.001")


@dataclass(frozen=True)
class RateOptions:
    """Per-call options for a rate-shop request.

    Attributes:
        pickup_type: Key of PICKUP_CODES (default daily pickup).
        shipper: Shipper location when it differs from the origin.
        origin_account: UPS account number attached as ShipperNumber.
        destination_account: Attached to ShipTo as
            ShipperAssignedIdentificationNumber.
    """

    pickup_type: str = DEFAULT_PICKUP_TYPE
    shipper: Location | None = None
    origin_account: str | None = None
    destination_account: str | None = None


def _blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


def digits_only(value: str | None) -> str:
    """Strip everything except digits from a phone or fax number."""
    if not value:
        return ""
    return re.sub(r"\D", "", value)


def round_measurement(value: float) -> str:
    """Round to 3 decimals (half up) with a floor of MIN_MEASUREMENT.

    UPS rejects zero and negative weights and dimensions. The result is
    plain decimal notation with trailing zeros dropped.

    Raises:
        ValueError: If value is NaN or infinite.
    """
    if not math.isfinite(float(value)):
        raise ValueError(f"Measurement must be a finite number, got {value!r}")
    rounded = Decimal(str(value)).quantize(_THOUSANDTHS, rounding=ROUND_HALF_UP)
    rounded = max(rounded, Decimal(str(MIN_MEASUREMENT)))
    return f"{rounded.normalize():f}"


def is_imperial_origin(origin: Location) -> bool:
    """True when the origin country quotes in inches and pounds."""
    return (origin.country_code or "").upper() in IMPERIAL_ORIGIN_COUNTRIES


def upsified_location(location: Location) -> Location:
    """Rewrite a US territory given as a state into its own country code.

    UPS rates Puerto Rico, Guam and the other territories as countries,
    so Location(country_code="US", province="PR") becomes
    Location(country_code="PR", province="PR"). Other locations are
    returned unchanged.
    """
    country = (location.country_code or "").strip().upper()
    province = (location.province or "").strip().upper()
    if country == "US" and province in US_TERRITORIES_TREATED_AS_COUNTRIES:
        return replace(location, country_code=province)
    return location


# ---------------------------------------------------------------------------
# Shared nodes
# ---------------------------------------------------------------------------


def build_access_request(key: str, login: str, password: str) -> dict[str, Any]:
    """Build the AccessRequest block that prefixes every request."""
    return {
        "AccessRequest": {
            "AccessLicenseNumber": key,
            "UserId": login,
            "Password": password,
        }
    }


def build_location_node(
    location: Location,
    shipper_number: str | None = None,
    assigned_identification_number: str | None = None,
) -> dict[str, Any]:
    """Build a Shipper/ShipTo/ShipFrom body for the rating tool.

    Blank fields are omitted. The residential indicator is emitted
    unless the location is explicitly commercial, so unknown addresses
    are quoted at residential rates.

    Args:
        location: Location to render.
        shipper_number: Account number (Shipper node only).
        assigned_identification_number: Account number (ShipTo node only).

    Returns:
        Mapping for the location element's children.
    """
    node: dict[str, Any] = {}
    if not _blank(location.phone):
        node["PhoneNumber"] = digits_only(location.phone)
    if not _blank(location.fax):
        node["FaxNumber"] = digits_only(location.fax)
    if shipper_number:
        node["ShipperNumber"] = shipper_number
    elif assigned_identification_number:
        node["ShipperAssignedIdentificationNumber"] = assigned_identification_number

    address: dict[str, Any] = {}
    for element, value in (
        ("AddressLine1", location.address1),
        ("AddressLine2", location.address2),
        ("AddressLine3", location.address3),
        ("City", location.city),
        ("StateProvinceCode", location.province),
        ("PostalCode", location.postal_code),
        ("CountryCode", location.country_code),
    ):
        if not _blank(value):
            address[element] = value
    if not location.is_commercial:
        address["ResidentialAddressIndicator"] = INDICATOR

    node["Address"] = address
    return node


def build_address_artifact(location: Location) -> dict[str, Any]:
    """Build an AddressArtifactFormat for the time-in-transit tool."""
    artifact: dict[str, Any] = {}
    if not _blank(location.city):
        artifact["PoliticalDivision2"] = location.city
    if not _blank(location.province):
        artifact["PoliticalDivision1"] = location.province
    artifact["CountryCode"] = location.country_code
    if not _blank(location.postal_code):
        artifact["PostcodePrimaryLow"] = location.postal_code
    if location.is_residential:
        artifact["ResidentialAddressIndicator"] = INDICATOR
    return {"AddressArtifactFormat": artifact}


def build_package_node(package: Package, imperial: bool) -> dict[str, Any]:
    """Build one Package element for the rating tool."""
    dimensions: dict[str, Any] = {
        "UnitOfMeasurement": {"Code": "IN" if imperial else "CM"},
    }
    for axis in ("length", "width", "height"):
        value = package.inches(axis) if imperial else package.cm(axis)
        dimensions[axis.capitalize()] = round_measurement(value)

    weight = package.lbs() if imperial else package.kgs()
    return {
        "PackagingType": {"Code": CUSTOMER_SUPPLIED_PACKAGING_CODE},
        "Dimensions": dimensions,
        "PackageWeight": {
            "UnitOfMeasurement": {"Code": "LBS" if imperial else "KGS"},
            "Weight": round_measurement(weight),
        },
    }


# ---------------------------------------------------------------------------
# Request builders
# ---------------------------------------------------------------------------


def build_rate_request(
    origin: Location,
    destination: Location,
    packages: Sequence[Package],
    options: RateOptions | None = None,
) -> dict[str, Any]:
    """Build a rate-shop request covering every available service.

    Args:
        origin: Where the packages ship from.
        destination: Where the packages ship to.
        packages: Packages in the shipment.
        options: Pickup type, shipper and account numbers.

    Returns:
        RatingServiceSelectionRequest tree.

    Raises:
        ValueError: If options.pickup_type is not a known pickup type.
    """
    options = options or RateOptions()
    if options.pickup_type not in PICKUP_CODES:
        raise ValueError(f"Unknown pickup type: {options.pickup_type!r}")

    shipper = options.shipper or origin
    imperial = is_imperial_origin(origin)

    shipment: dict[str, Any] = {
        "Shipper": build_location_node(shipper, shipper_number=options.origin_account),
        "ShipTo": build_location_node(
            destination, assigned_identification_number=options.destination_account,
        ),
    }
    if options.shipper is not None and options.shipper != origin:
        shipment["ShipFrom"] = build_location_node(origin)
    shipment["Package"] = [build_package_node(p, imperial) for p in packages]

    return {
        "RatingServiceSelectionRequest": {
            "Request": {"RequestAction": "Rate", "RequestOption": "Shop"},
            "PickupType": {"Code": PICKUP_CODES[options.pickup_type]},
            "Shipment": shipment,
        }
    }


def build_track_request(tracking_number: str) -> dict[str, Any]:
    """Build a full-detail (RequestOption 1) tracking request."""
    return {
        "TrackRequest": {
            "Request": {"RequestAction": "Track", "RequestOption": "1"},
            "TrackingNumber": str(tracking_number),
        }
    }


def build_time_in_transit_request(
    origin: Location,
    destination: Location,
    pickup_date: date,
    shipment_weight_lbs: float | None = None,
    total_packages: int | None = None,
    monetary_value: Decimal | float | str | None = None,
    documents_only: bool = False,
    maximum_list_size: int | None = None,
    currency_code: str = DEFAULT_CURRENCY_CODE,
) -> dict[str, Any]:
    """Build a time-in-transit request.

    International shipments and non-document shipments need weight,
    package count and value; the tool rejects them otherwise.

    Args:
        origin: Needs postal code and country at minimum.
        destination: Needs postal code and country at minimum.
        pickup_date: Date UPS picks the shipment up.
        shipment_weight_lbs: Total shipment weight in pounds.
        total_packages: Number of packages in the shipment.
        monetary_value: Declared value of the shipment.
        documents_only: Shipment holds documents with no commercial value.
        maximum_list_size: Cap (1-50) on candidates returned for an
            ambiguous origin or destination.
        currency_code: Currency of monetary_value.

    Returns:
        TimeInTransitRequest tree. Optional elements are omitted when
        their argument is absent.
    """
    root: dict[str, Any] = {
        "Request": {"RequestAction": "TimeInTransit"},
        "TransitFrom": build_address_artifact(origin),
        "TransitTo": build_address_artifact(destination),
        "PickupDate": pickup_date.strftime("%Y%m%d"),
    }
    if shipment_weight_lbs is not None:
        root["ShipmentWeight"] = {
            "UnitOfMeasurement": {"Code": "LBS"},
            "Weight": str(shipment_weight_lbs),
        }
    if total_packages is not None:
        root["TotalPackagesInShipment"] = str(total_packages)
    if monetary_value is not None:
        root["InvoiceLineTotal"] = {
            "CurrencyCode": currency_code,
            "MonetaryValue": f"{Decimal(str(monetary_value)):.2f}",
        }
    if documents_only:
        root["DocumentsOnlyIndicator"] = INDICATOR
    if maximum_list_size is not None:
        root["MaximumListSize"] = str(maximum_list_size)

    return {"TimeInTransitRequest": root}


def build_address_validation_request(location: Location) -> dict[str, Any]:
    """Build a city/state/postal-code validation request.

    Any combination except state alone is accepted by UPS; callers are
    responsible for not sending state alone.
    """
    address: dict[str, Any] = {}
    if not _blank(location.city):
        address["City"] = location.city
    if not _blank(location.province):
        address["StateProvinceCode"] = location.province
    if not _blank(location.postal_code):
        address["PostalCode"] = location.postal_code

    return {
        "AddressValidationRequest": {
            "Request": {"RequestAction": "AV"},
            "Address": address,
        }
    }


def render_request(access: dict[str, Any], request: dict[str, Any]) -> str:
    """Serialize the access block and request as concatenated XML documents."""
    return xmltodict.unparse(access) + xmltodict.unparse(request)
