"""Immutable value objects exchanged with the UPS XML client."""

from ups_xml.models.location import Location, Package
from ups_xml.models.results import (
    AddressCandidate,
    RateEstimate,
    RateResponse,
    ShipmentEvent,
    TimeInTransitResult,
    TimeInTransitService,
    TrackingResult,
    ValidatedAddress,
)

__all__ = [
    "Location",
    "Package",
    "RateEstimate",
    "RateResponse",
    "ShipmentEvent",
    "TrackingResult",
    "TimeInTransitService",
    "TimeInTransitResult",
    "AddressCandidate",
    "ValidatedAddress",
]
