"""Closed code tables for enumeration-by-code GTFS fields.

Each enum value is the integer code used in feed files. An absent
optional value is represented by ``None``, never by a member.
"""

from __future__ import annotations

from enum import IntEnum


class RouteType(IntEnum):
    """Vehicle type used on a route (``routes.route_type``)."""

    TRAM = 0
    SUBWAY_METRO = 1
    RAIL = 2
    BUS = 3
    FERRY = 4
    CABLE_TRAM = 5
    AERIAL_LIFT = 6
    FUNICULAR = 7
    TROLLEYBUS = 11
    MONORAIL = 12


class DirectionType(IntEnum):
    """Travel direction of a trip (``trips.direction_id``)."""

    ONE_DIRECTION = 0
    OPPOSITE_DIRECTION = 1


class PickupType(IntEnum):
    """Pickup method at a stop (``stop_times.pickup_type``)."""

    REGULAR = 0
    NO_PICKUP = 1
    PHONE_FOR_PICKUP = 2
    DRIVER_FOR_PICKUP = 3


class DropOffType(IntEnum):
    """Drop-off method at a stop (``stop_times.drop_off_type``)."""

    REGULAR = 0
    NO_DROP_OFF = 1
    PHONE_FOR_DROP_OFF = 2
    DRIVER_FOR_DROP_OFF = 3


class ExceptionType(IntEnum):
    """Service exception kind (``calendar_dates.exception_type``)."""

    ADDED = 1
    REMOVED = 2


class PaymentMethodType(IntEnum):
    """When a fare is paid (``fare_attributes.payment_method``)."""

    ON_BOARD = 0
    BEFORE_BOARDING = 1


class TransferType(IntEnum):
    """Connection kind between two stops (``transfers.transfer_type``)."""

    RECOMMENDED = 0
    TIMED_TRANSFER = 1
    MINIMUM_TIME = 2
    NOT_POSSIBLE = 3


class LocationType(IntEnum):
    """Kind of location a stop row describes (``stops.location_type``)."""

    STOP = 0
    STATION = 1
    ENTRANCE_EXIT = 2
    GENERIC_NODE = 3
    BOARDING_AREA = 4


class WheelchairAccessibility(IntEnum):
    """Wheelchair support for stops and trips."""

    NO_INFORMATION = 0
    ACCESSIBLE = 1
    NOT_ACCESSIBLE = 2


class BikesAllowed(IntEnum):
    """Bicycle support on a trip (``trips.bikes_allowed``)."""

    NO_INFORMATION = 0
    ALLOWED = 1
    NOT_ALLOWED = 2
