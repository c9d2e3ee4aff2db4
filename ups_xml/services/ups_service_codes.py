"""Canonical UPS service code definitions.

Single source of truth for the service code enum, the origin-dependent
service name tables, and the resolver that picks a name for a code.
Names depend on where a shipment originates: the same code can mean
different services from Canada, Mexico, or the EU.
"""

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType

from ups_xml.services.ups_constants import EU_COUNTRY_CODES


class ServiceCode(str, Enum):
    """UPS rating service codes.

    These codes correspond to UPS XML Rating Service identifiers.
    """

    NEXT_DAY_AIR = "01"
    SECOND_DAY_AIR = "02"
    GROUND = "03"
    WORLDWIDE_EXPRESS = "07"
    WORLDWIDE_EXPEDITED = "08"
    UPS_STANDARD = "11"
    THREE_DAY_SELECT = "12"
    NEXT_DAY_AIR_SAVER = "13"
    NEXT_DAY_AIR_EARLY = "14"
    WORLDWIDE_EXPRESS_PLUS = "54"
    SECOND_DAY_AIR_AM = "59"
    SAVER = "65"
    TODAY_STANDARD = "82"
    TODAY_DEDICATED_COURIER = "83"
    TODAY_INTERCITY = "84"
    TODAY_EXPRESS = "85"
    TODAY_EXPRESS_SAVER = "86"


# ---------------------------------------------------------------------------
# Origin service tables: code value → human-readable name
# ---------------------------------------------------------------------------

DEFAULT_SERVICES: Mapping[str, str] = MappingProxyType({
    ServiceCode.NEXT_DAY_AIR.value: "UPS Next Day Air",
    ServiceCode.SECOND_DAY_AIR.value: "UPS Second Day Air",
    ServiceCode.GROUND.value: "UPS Ground",
    ServiceCode.WORLDWIDE_EXPRESS.value: "UPS Worldwide Express",
    ServiceCode.WORLDWIDE_EXPEDITED.value: "UPS Worldwide Expedited",
    ServiceCode.UPS_STANDARD.value: "UPS Standard",
    ServiceCode.THREE_DAY_SELECT.value: "UPS Three-Day Select",
    ServiceCode.NEXT_DAY_AIR_SAVER.value: "UPS Next Day Air Saver",
    ServiceCode.NEXT_DAY_AIR_EARLY.value: "UPS Next Day Air Early A.M.",
    ServiceCode.WORLDWIDE_EXPRESS_PLUS.value: "UPS Worldwide Express Plus",
    ServiceCode.SECOND_DAY_AIR_AM.value: "UPS Second Day Air A.M.",
    ServiceCode.SAVER.value: "UPS Saver",
    ServiceCode.TODAY_STANDARD.value: "UPS Today Standard",
    ServiceCode.TODAY_DEDICATED_COURIER.value: "UPS Today Dedicated Courier",
    ServiceCode.TODAY_INTERCITY.value: "UPS Today Intercity",
    ServiceCode.TODAY_EXPRESS.value: "UPS Today Express",
    ServiceCode.TODAY_EXPRESS_SAVER.value: "UPS Today Express Saver",
})

CANADA_ORIGIN_SERVICES: Mapping[str, str] = MappingProxyType({
    "01": "UPS Express",
    "02": "UPS Expedited",
    "14": "UPS Express Early A.M.",
})

MEXICO_ORIGIN_SERVICES: Mapping[str, str] = MappingProxyType({
    "07": "UPS Express",
    "08": "UPS Expedited",
    "54": "UPS Express Plus",
})

EU_ORIGIN_SERVICES: Mapping[str, str] = MappingProxyType({
    "07": "UPS Express",
    "08": "UPS Expedited",
})

OTHER_NON_US_ORIGIN_SERVICES: Mapping[str, str] = MappingProxyType({
    "07": "UPS Express",
})


# Evaluated top-down; the first table whose predicate holds and which
# knows the code wins. The last entry always applies.
ORIGIN_SERVICE_TABLES: tuple[tuple[Callable[[str], bool], Mapping[str, str]], ...] = (
    (lambda origin: origin == "CA", CANADA_ORIGIN_SERVICES),
    (lambda origin: origin == "MX", MEXICO_ORIGIN_SERVICES),
    (lambda origin: origin in EU_COUNTRY_CODES, EU_ORIGIN_SERVICES),
    (lambda origin: origin != "US", OTHER_NON_US_ORIGIN_SERVICES),
    (lambda origin: True, DEFAULT_SERVICES),
)


def service_name_for(origin_country_code: str | None, service_code: str) -> str | None:
    """Resolve a rating service code to its name for a given origin.

    Args:
        origin_country_code: Origin country code (e.g., "CA"). None or
            blank falls through to the default table.
        service_code: UPS rating service code (e.g., "01").

    Returns:
        Service name, or None if no table knows the code.
    """
    origin = (origin_country_code or "").strip().upper()
    for applies, table in ORIGIN_SERVICE_TABLES:
        if applies(origin) and service_code in table:
            return table[service_code]
    return None


# ---------------------------------------------------------------------------
# Time-in-transit → rating service codes
# ---------------------------------------------------------------------------

# Only reliable for US and Canada origins. The Saturday variants and the
# saver codes are closest matches rather than exact equivalents.
TNT_TO_RATING_SERVICE_CODES: Mapping[str, str] = MappingProxyType({
    "1DM": "14",   # Next Day Air Early A.M.
    "1DA": "01",   # Next Day Air
    "1DP": "13",   # Next Day Air Saver
    "2DM": "59",   # Second Day Air A.M.
    "2DA": "02",   # Second Day Air
    "3DS": "12",   # Three-Day Select
    "GND": "03",   # Ground
    "1DMS": "14",  # Next Day Air Early A.M. (Saturday)
    "1DAS": "01",  # Next Day Air (Saturday)
    "2DAS": "59",  # Second Day Air (Saturday)
    "24": "01",    # UPS Express
    "19": "02",    # UPS Expedited
    "01": "07",    # Worldwide Express
    "09": "07",    # Worldwide Express
    "05": "08",    # Worldwide Expedited
    "21": "54",    # Worldwide Express Plus
    "23": "14",    # Express Early A.M.
    "03": "11",    # UPS Standard
    "25": "11",    # UPS Standard
    "68": "11",    # UPS Standard
    "33": "12",    # Three-Day Select
    "20": "65",    # Express Saver
    "28": "65",    # Worldwide Saver
})
