"""Tracking activity reconciliation.

UPS reports tracking activity newest-first, without timezone data, and
often with the pickup scan located at a hub rather than the shipper.
reconcile_events() turns the raw activity log into an ascending event
timeline anchored at the known origin and destination.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from ups_xml.models.location import Location
from ups_xml.models.results import ShipmentEvent

logger = logging.getLogger(__name__)

DELIVERED = "delivered"

_TWO_DIGITS = re.compile(r"\d{2}")


@dataclass(frozen=True)
class RawActivity:
    """One Activity entry as read from the tracking response.

    Attributes:
        description: Status/StatusType/Description.
        date: YYYYMMDD.
        time: HHMMSS.
        location: ActivityLocation/Address, if present.
    """

    description: str
    date: str
    time: str
    location: Location | None = None


def parse_activity_timestamp(date_text: str, time_text: str) -> datetime:
    """Compose a timestamp from UPS date (YYYYMMDD) and time (HHMMSS).

    UPS gives no zone for activity times; the wall-clock value is
    labelled UTC without any shifting.

    Raises:
        ValueError: If either string is not in the expected shape.
    """
    pairs = _TWO_DIGITS.findall(time_text)
    if len(date_text) < 8 or len(pairs) < 2:
        raise ValueError(f"Unparseable activity time: {date_text!r} {time_text!r}")
    hour, minute = int(pairs[0]), int(pairs[1])
    second = int(pairs[2]) if len(pairs) > 2 else 0
    return datetime(
        int(date_text[0:4]),
        int(date_text[4:6]),
        int(date_text[6:8]),
        hour,
        minute,
        second,
        tzinfo=timezone.utc,
    )


def _same_country(a: Location | None, b: Location) -> bool:
    if a is None:
        return False
    return (a.country_code or "").upper() == (b.country_code or "").upper()


def _same_or_blank_city(event_location: Location | None, origin: Location) -> bool:
    if event_location is None:
        return False
    city = (event_location.city or "").strip()
    return not city or city == origin.city


def reconcile_events(
    activities: Iterable[RawActivity],
    origin: Location | None,
    destination: Location | None,
) -> list[ShipmentEvent]:
    """Build an ascending, origin/destination-corrected event list.

    1. Events are stable-sorted by timestamp.
    2. With a known origin, the earliest event is relocated to the
       origin when its country matches and its city is blank or equal;
       otherwise an origin event with the same description and time is
       inserted in front of it.
    3. A final "delivered" event (any case) is relocated to the
       destination.

    Args:
        activities: Raw activities in carrier order.
        origin: Shipper address, if known.
        destination: Ship-to address, if known.

    Returns:
        Reconciled events; empty when there are no activities.
    """
    events = [
        ShipmentEvent(
            description=activity.description,
            timestamp=parse_activity_timestamp(activity.date, activity.time),
            location=activity.location,
        )
        for activity in activities
    ]
    if not events:
        return []

    events.sort(key=lambda event: event.timestamp)

    if origin is not None:
        first = events[0]
        origin_event = replace(first, location=origin)
        if _same_country(first.location, origin) and _same_or_blank_city(first.location, origin):
            events[0] = origin_event
        else:
            logger.debug("Earliest activity is away from origin; adding origin event")
            events.insert(0, origin_event)

    last = events[-1]
    if last.description.lower() == DELIVERED:
        events[-1] = replace(last, location=destination)

    return events
