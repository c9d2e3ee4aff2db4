"""UPS XML client: rate shopping, tracking, time-in-transit and address validation."""

from ups_xml.config import UPSConfig, load_config
from ups_xml.services.errors import (
    UPSCarrierError,
    UPSMalformedResponseError,
    UPSServiceError,
)
from ups_xml.services.ups_service import UPSService

__all__ = [
    "UPSConfig",
    "load_config",
    "UPSService",
    "UPSServiceError",
    "UPSCarrierError",
    "UPSMalformedResponseError",
]
