"""Shared typed models.

This module defines immutable data models produced by the reading
engine: the elapsed clock time, the read policy and one dataclass per
GTFS entity type.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.constants import MINUTES_PER_HOUR, SECONDS_PER_MINUTE
from core.enumerations import (
    BikesAllowed,
    DirectionType,
    DropOffType,
    ExceptionType,
    LocationType,
    PaymentMethodType,
    PickupType,
    RouteType,
    TransferType,
    WheelchairAccessibility,
)


@dataclass(frozen=True)
class TimeOfDay:
    """Elapsed time since the start of a service day.

    Hours are not wrapped at 24 so trips running past midnight keep
    their ordering, for example ``25:30:00``.

    Attributes:
        hours: Elapsed hours, may be 24 or more.
        minutes: Minutes in [0, 59].
        seconds: Seconds in [0, 59].
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def from_total_seconds(cls, total_seconds: int) -> "TimeOfDay":
        """Build a time of day from an elapsed second count."""
        total_minutes, seconds = divmod(total_seconds, SECONDS_PER_MINUTE)
        hours, minutes = divmod(total_minutes, MINUTES_PER_HOUR)
        return cls(hours=hours, minutes=minutes, seconds=seconds)

    @property
    def total_seconds(self) -> int:
        """Elapsed seconds since service-day start."""
        return (self.hours * MINUTES_PER_HOUR + self.minutes) * SECONDS_PER_MINUTE + self.seconds

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"


@dataclass(frozen=True)
class ReadPolicy:
    """Validation policy applied by the row mapper and reading engine.

    Attributes:
        strict: Abort on any row violation when true; drop the row and
            coerce malformed optional values when false.
    """

    strict: bool = True

    @property
    def name(self) -> str:
        """Short policy label used in log events."""
        return "strict" if self.strict else "tolerant"


STRICT_POLICY = ReadPolicy(strict=True)
TOLERANT_POLICY = ReadPolicy(strict=False)


@dataclass(frozen=True)
class Agency:
    """Transit agency (``agency.txt``)."""

    id: str | None
    name: str
    url: str
    timezone: str
    language_code: str | None = None
    phone: str | None = None
    fare_url: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class Stop:
    """Stop or station (``stops.txt``)."""

    id: str
    name: str
    latitude: float
    longitude: float
    code: str | None = None
    description: str = ""
    zone: str | None = None
    url: str = ""
    location_type: LocationType | None = None
    parent_station: str | None = None
    timezone: str | None = None
    wheelchair_boarding: WheelchairAccessibility | None = None
    platform_code: str | None = None


@dataclass(frozen=True)
class Route:
    """Transit route (``routes.txt``).

    Colors are signed packed ``0xFFRRGGBB`` integers.
    """

    id: str
    type: RouteType
    agency_id: str | None = None
    short_name: str = ""
    long_name: str = ""
    description: str = ""
    url: str | None = None
    color: int | None = None
    text_color: int | None = None
    sort_order: int | None = None


@dataclass(frozen=True)
class Trip:
    """Scheduled trip on a route (``trips.txt``)."""

    id: str
    route_id: str
    service_id: str
    headsign: str = ""
    short_name: str = ""
    direction: DirectionType | None = None
    block_id: str = ""
    shape_id: str = ""
    accessibility_type: WheelchairAccessibility | None = None
    bikes_allowed: BikesAllowed | None = None


@dataclass(frozen=True)
class StopTime:
    """Arrival and departure of a trip at a stop (``stop_times.txt``).

    ``shape_dist_travelled`` keeps the raw cell text.
    """

    trip_id: str
    arrival_time: TimeOfDay
    departure_time: TimeOfDay
    stop_id: str
    stop_sequence: int
    stop_headsign: str = ""
    pickup_type: PickupType | None = None
    drop_off_type: DropOffType | None = None
    shape_dist_travelled: str = ""
    timepoint: bool | None = None


@dataclass(frozen=True)
class Calendar:
    """Weekly service pattern (``calendar.txt``)."""

    service_id: str
    monday: bool
    tuesday: bool
    wednesday: bool
    thursday: bool
    friday: bool
    saturday: bool
    sunday: bool
    start_date: date
    end_date: date


@dataclass(frozen=True)
class CalendarDate:
    """Service exception for one date (``calendar_dates.txt``)."""

    service_id: str
    date: date
    exception_type: ExceptionType


@dataclass(frozen=True)
class FareAttribute:
    """Fare class (``fare_attributes.txt``).

    ``transfers`` is ``None`` when unlimited transfers are allowed.
    """

    fare_id: str
    price: str
    currency_type: str
    payment_method: PaymentMethodType
    transfers: int | None = None
    agency_id: str | None = None
    transfer_duration: str = ""


@dataclass(frozen=True)
class FareRule:
    """Rule applying a fare to itineraries (``fare_rules.txt``)."""

    fare_id: str
    route_id: str = ""
    origin_id: str = ""
    destination_id: str = ""
    contains_id: str = ""


@dataclass(frozen=True)
class Shape:
    """One point of a vehicle path (``shapes.txt``)."""

    id: str
    latitude: float
    longitude: float
    sequence: int
    distance_travelled: float | None = None


@dataclass(frozen=True)
class Frequency:
    """Headway-based service window (``frequencies.txt``).

    Times and headway keep the raw cell text.
    """

    trip_id: str
    start_time: str
    end_time: str
    headway_secs: str
    exact_times: bool | None = None


@dataclass(frozen=True)
class Transfer:
    """Connection rule between two stops (``transfers.txt``)."""

    from_stop_id: str
    to_stop_id: str
    transfer_type: TransferType
    min_transfer_time: str = ""


@dataclass(frozen=True)
class FeedInfo:
    """Feed publisher metadata (``feed_info.txt``)."""

    publisher_name: str
    publisher_url: str
    language_code: str
    start_date: date | None = None
    end_date: date | None = None
    version: str | None = None
