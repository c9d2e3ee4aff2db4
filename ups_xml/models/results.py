"""Typed results produced by the UPS response parsers.

All results are created fresh per response and never mutated.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from ups_xml.models.location import Location, Package
from ups_xml.services.ups_service_codes import TNT_TO_RATING_SERVICE_CODES


@dataclass(frozen=True)
class RateEstimate:
    """One quoted service from a rate-shop response."""

    origin: Location
    destination: Location
    carrier: str
    service_name: str | None
    service_code: str
    total_price: Decimal
    currency: str
    packages: tuple[Package, ...] = ()

    @property
    def total_price_cents(self) -> int:
        """Total price in integer cents."""
        return int((self.total_price * 100).to_integral_value())


@dataclass(frozen=True)
class RateResponse:
    """Rate-shop result: carrier message, estimates, and the raw XML."""

    message: str | None
    rates: tuple[RateEstimate, ...] = ()
    xml: str = ""


@dataclass(frozen=True)
class ShipmentEvent:
    """A single tracking event.

    Attributes:
        description: Carrier status description (e.g., "DELIVERED").
        timestamp: Event time, labelled UTC. UPS supplies no zone data,
            so the wall-clock value is kept as-is.
        location: Where the event happened, if known.
    """

    description: str
    timestamp: datetime
    location: Location | None = None


@dataclass(frozen=True)
class TrackingResult:
    """Reconciled tracking history for one shipment."""

    tracking_number: str
    origin: Location | None
    destination: Location | None
    events: tuple[ShipmentEvent, ...] = ()
    message: str | None = None


@dataclass(frozen=True)
class TimeInTransitService:
    service_code: str
    service_name: str | None
    delivery_at: datetime
    business_days: int
    guaranteed: bool
    description: str | None = None

    @property
    def rating_service_code(self) -> str | None:
        """Equivalent rating service code, when one is known.

        The mapping is only reliable for shipments from the US and Canada.
        """
        return TNT_TO_RATING_SERVICE_CODES.get(self.service_code)


@dataclass(frozen=True)
class AddressCandidate:
    """Candidate location suggested for an ambiguous origin or destination.

    Attributes:
        state: Political division 1 (state/province).
        city: Political division 2.
        town: Political division 3 (urbanization/sub-locality).
    """

    state: str | None = None
    city: str | None = None
    town: str | None = None
    postcode_primary_low: str | None = None
    postcode_primary_high: str | None = None
    postcode_extended_low: str | None = None
    postcode_extended_high: str | None = None
    country: str | None = None
    country_code: str | None = None


@dataclass(frozen=True)
class TimeInTransitResult:
    disclaimer: str | None
    services: tuple[TimeInTransitService, ...] = ()
    origin_candidates: tuple[AddressCandidate, ...] = ()
    destination_candidates: tuple[AddressCandidate, ...] = ()


@dataclass(frozen=True)
class ValidatedAddress:
    """A ranked city/state/postal-code match from address validation.

    Attributes:
        rank: Carrier-assigned priority, 1 is best.
        quality: Match confidence between 0.0 and 1.0.
        city: Matched city.
        state_province_code: Matched state/province code.
        postal_code_low_end: Low end of the matching postal-code range.
        postal_code_high_end: High end of the matching postal-code range.
    """

    rank: int
    quality: float
    city: str | None
    state_province_code: str | None
    postal_code_low_end: str | None
    postal_code_high_end: str | None

    @property
    def state(self) -> str | None:
        return self.state_province_code

    @property
    def zip_low(self) -> str | None:
        return self.postal_code_low_end

    @property
    def zip_high(self) -> str | None:
        return self.postal_code_high_end
