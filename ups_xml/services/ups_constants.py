"""Canonical UPS XML API constants.

Single source of truth for endpoint hosts and paths, pickup codes,
unit-system and region country sets, and carrier limits. All builder
and parser modules import from here instead of using inline values.
"""

from enum import Enum


# ---------------------------------------------------------------------------
# Carrier identity
# ---------------------------------------------------------------------------

UPS_CARRIER_NAME = "UPS"


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

UPS_TEST_HOST = "wwwcie.ups.com"
UPS_LIVE_HOST = "onlinetools.ups.com"


class UPSAction(str, Enum):
    """Operations supported by the XML client."""

    RATES = "rates"
    TRACK = "track"
    TIME_IN_TRANSIT = "time_in_transit"
    ADDRESS_VALIDATION = "address_validation"


UPS_RESOURCES: dict[UPSAction, str] = {
    UPSAction.RATES: "/ups.app/xml/Rate",
    UPSAction.TRACK: "/ups.app/xml/Track",
    UPSAction.TIME_IN_TRANSIT: "/ups.app/xml/TimeInTransit",
    UPSAction.ADDRESS_VALIDATION: "/ups.app/xml/AV",
}


# ---------------------------------------------------------------------------
# Pickup types
# ---------------------------------------------------------------------------

PICKUP_CODES: dict[str, str] = {
    "daily_pickup": "01",
    "customer_counter": "03",
    "one_time_pickup": "06",
    "on_call_air": "07",
    "suggested_retail_rates": "11",
    "letter_center": "19",
    "air_service_center": "20",
}

DEFAULT_PICKUP_TYPE = "daily_pickup"


# ---------------------------------------------------------------------------
# Packaging and units
# ---------------------------------------------------------------------------

CUSTOMER_SUPPLIED_PACKAGING_CODE = "02"

# Origins quoted in inches/pounds; every other origin is metric
IMPERIAL_ORIGIN_COUNTRIES: frozenset[str] = frozenset({"US", "LR", "MM"})

MIN_MEASUREMENT = 0.1
MAX_WEIGHT_LBS = 150.0

DEFAULT_CURRENCY_CODE = "USD"


# ---------------------------------------------------------------------------
# Country sets
# ---------------------------------------------------------------------------

# EU membership as of November 30, 2007. UPS origin-service names were
# published against this list; keep it frozen unless the carrier changes.
EU_COUNTRY_CODES: frozenset[str] = frozenset({
    "GB", "AT", "BE", "BG", "CY", "CZ", "DK", "EE", "FI", "FR",
    "DE", "GR", "HU", "IE", "IT", "LV", "LT", "LU", "MT", "NL",
    "PL", "PT", "RO", "SK", "SI", "ES", "SE",
})

US_TERRITORIES_TREATED_AS_COUNTRIES: frozenset[str] = frozenset({
    "AS", "FM", "GU", "MH", "MP", "PW", "PR", "VI",
})


# ---------------------------------------------------------------------------
# Address validation
# ---------------------------------------------------------------------------

AV_DISCLAIMER = (
    "NOTICE: UPS assumes no liability for the information provided by the "
    "address validation functionality.  The address validation functionality "
    "does not support the identification or verification of occupants at an "
    "address."
)

AV_MAX_RESULTS = 10
