"""In-memory GTFS feed aggregate.

This module holds one insertion-ordered collection per entity type.
The reading engine only appends through the ``add_*`` operations; the
lookups are linear scans and enforce no cross-file references.
"""

from __future__ import annotations

from core.types import (
    Agency,
    Calendar,
    CalendarDate,
    FareAttribute,
    FareRule,
    FeedInfo,
    Frequency,
    Route,
    Shape,
    Stop,
    StopTime,
    Transfer,
    Trip,
)


class GtfsFeed:
    """Typed container receiving mapped feed entities."""

    def __init__(self) -> None:
        self.agencies: list[Agency] = []
        self.stops: list[Stop] = []
        self.routes: list[Route] = []
        self.trips: list[Trip] = []
        self.stop_times: list[StopTime] = []
        self.calendars: list[Calendar] = []
        self.calendar_dates: list[CalendarDate] = []
        self.fare_attributes: list[FareAttribute] = []
        self.fare_rules: list[FareRule] = []
        self.shapes: list[Shape] = []
        self.frequencies: list[Frequency] = []
        self.transfers: list[Transfer] = []
        self.feed_info: list[FeedInfo] = []

    def add_agency(self, agency: Agency) -> None:
        self.agencies.append(agency)

    def add_stop(self, stop: Stop) -> None:
        self.stops.append(stop)

    def add_route(self, route: Route) -> None:
        self.routes.append(route)

    def add_trip(self, trip: Trip) -> None:
        self.trips.append(trip)

    def add_stop_time(self, stop_time: StopTime) -> None:
        self.stop_times.append(stop_time)

    def add_calendar(self, calendar: Calendar) -> None:
        self.calendars.append(calendar)

    def add_calendar_date(self, calendar_date: CalendarDate) -> None:
        self.calendar_dates.append(calendar_date)

    def add_fare_attribute(self, fare_attribute: FareAttribute) -> None:
        self.fare_attributes.append(fare_attribute)

    def add_fare_rule(self, fare_rule: FareRule) -> None:
        self.fare_rules.append(fare_rule)

    def add_shape(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def add_frequency(self, frequency: Frequency) -> None:
        self.frequencies.append(frequency)

    def add_transfer(self, transfer: Transfer) -> None:
        self.transfers.append(transfer)

    def add_feed_info(self, feed_info: FeedInfo) -> None:
        self.feed_info.append(feed_info)

    def get_agency(self, agency_id: str) -> Agency | None:
        """Return the first agency with the given id."""
        return next((agency for agency in self.agencies if agency.id == agency_id), None)

    def get_stop(self, stop_id: str) -> Stop | None:
        """Return the first stop with the given id."""
        return next((stop for stop in self.stops if stop.id == stop_id), None)

    def get_route(self, route_id: str) -> Route | None:
        """Return the first route with the given id."""
        return next((route for route in self.routes if route.id == route_id), None)

    def get_trip(self, trip_id: str) -> Trip | None:
        """Return the first trip with the given id."""
        return next((trip for trip in self.trips if trip.id == trip_id), None)

    def get_calendar(self, service_id: str) -> Calendar | None:
        """Return the weekly pattern of a service."""
        return next(
            (calendar for calendar in self.calendars if calendar.service_id == service_id),
            None,
        )

    def get_calendar_dates(self, service_id: str) -> list[CalendarDate]:
        """Return all date exceptions of a service in file order."""
        return [entry for entry in self.calendar_dates if entry.service_id == service_id]

    def get_shapes(self, shape_id: str) -> list[Shape]:
        """Return all points of a shape in file order."""
        return [shape for shape in self.shapes if shape.id == shape_id]

    def get_stop_times(self, trip_id: str) -> list[StopTime]:
        """Return all stop times of a trip in file order."""
        return [stop_time for stop_time in self.stop_times if stop_time.trip_id == trip_id]

    def get_frequencies(self, trip_id: str) -> list[Frequency]:
        """Return all headway windows of a trip in file order."""
        return [frequency for frequency in self.frequencies if frequency.trip_id == trip_id]
