"""Location and package value objects.

Both are constructed by callers and only read by the request builders.
Unit conversion for packages lives here so the builders never deal with
raw conversion factors.
"""

from dataclasses import dataclass
from typing import Literal

UnitSystem = Literal["imperial", "metric"]

KGS_PER_LB = 0.45359237
CM_PER_INCH = 2.54

_AXES = ("length", "width", "height")


@dataclass(frozen=True)
class Location:
    """A postal location.

    Attributes:
        country_code: ISO alpha-2 country code (e.g., "US").
        postal_code: Postal or ZIP code.
        province: State/province code.
        city: City name.
        address1: First address line.
        address2: Second address line.
        address3: Third address line.
        phone: Phone number, any formatting.
        fax: Fax number, any formatting.
        address_type: "commercial", "residential", or None when unknown.
    """

    country_code: str | None = None
    postal_code: str | None = None
    province: str | None = None
    city: str | None = None
    address1: str | None = None
    address2: str | None = None
    address3: str | None = None
    phone: str | None = None
    fax: str | None = None
    address_type: Literal["commercial", "residential"] | None = None

    @property
    def state(self) -> str | None:
        """Alias for province."""
        return self.province

    @property
    def is_commercial(self) -> bool:
        return self.address_type == "commercial"

    @property
    def is_residential(self) -> bool:
        return self.address_type == "residential"


@dataclass(frozen=True)
class Package:
    """A physical package.

    Imperial packages are measured in pounds and inches, metric packages
    in kilograms and centimetres. Which system the carrier request uses is
    decided by the origin country, so both views are available.

    Attributes:
        weight: Weight in pounds (imperial) or kilograms (metric).
        dimensions: (length, width, height) in inches or centimetres.
        units: Unit system the values above are expressed in.
    """

    weight: float
    dimensions: tuple[float, float, float] = (0.0, 0.0, 0.0)
    units: UnitSystem = "metric"

    def lbs(self) -> float:
        """Return weight in pounds."""
        if self.units == "imperial":
            return float(self.weight)
        return float(self.weight) / KGS_PER_LB

    def kgs(self) -> float:
        """Return weight in kilograms."""
        if self.units == "metric":
            return float(self.weight)
        return float(self.weight) * KGS_PER_LB

    def inches(self, axis: str) -> float:
        """Return one dimension in inches.

        Args:
            axis: "length", "width", or "height".
        """
        value = float(self.dimensions[_AXES.index(axis)])
        return value if self.units == "imperial" else value / CM_PER_INCH

    def cm(self, axis: str) -> float:
        """Return one dimension in centimetres."""
        value = float(self.dimensions[_AXES.index(axis)])
        return value if self.units == "metric" else value * CM_PER_INCH
