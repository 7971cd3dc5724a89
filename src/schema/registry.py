"""Statically registered entity schemas.

This module wires every supported GTFS file to its entity dataclass.
Registry order is the order in which the reading engine visits files.
"""

from __future__ import annotations

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
from feed.gtfs_feed import GtfsFeed
from fields.converters import enumeration
from schema.descriptors import EntitySchema, FieldDescriptor as Field

AGENCY_SCHEMA = EntitySchema(
    file_name="agency",
    entity_type=Agency,
    add_to_feed=GtfsFeed.add_agency,
    file_required=True,
    fields=(
        Field("agency_id", "id", "nullable_string"),
        Field("agency_name", "name", "string", required=True),
        Field("agency_url", "url", "string", required=True),
        Field("agency_timezone", "timezone", "string", required=True),
        Field("agency_lang", "language_code", "nullable_string"),
        Field("agency_phone", "phone", "nullable_string"),
        Field("agency_fare_url", "fare_url", "nullable_string"),
        Field("agency_email", "email", "nullable_string"),
    ),
)

STOP_SCHEMA = EntitySchema(
    file_name="stops",
    entity_type=Stop,
    add_to_feed=GtfsFeed.add_stop,
    file_required=True,
    fields=(
        Field("stop_id", "id", "string", required=True),
        Field("stop_code", "code", "nullable_string"),
        Field("stop_name", "name", "string", required=True),
        Field("stop_desc", "description", "string"),
        Field("stop_lat", "latitude", "float", required=True),
        Field("stop_lon", "longitude", "float", required=True),
        Field("zone_id", "zone", "nullable_string"),
        Field("stop_url", "url", "string"),
        Field("location_type", "location_type", enumeration(LocationType, nullable=True)),
        Field("parent_station", "parent_station", "nullable_string"),
        Field("stop_timezone", "timezone", "nullable_string"),
        Field(
            "wheelchair_boarding",
            "wheelchair_boarding",
            enumeration(WheelchairAccessibility, nullable=True),
        ),
        Field("platform_code", "platform_code", "nullable_string"),
    ),
)

ROUTE_SCHEMA = EntitySchema(
    file_name="routes",
    entity_type=Route,
    add_to_feed=GtfsFeed.add_route,
    file_required=True,
    fields=(
        Field("route_id", "id", "string", required=True),
        Field("agency_id", "agency_id", "nullable_string"),
        Field("route_short_name", "short_name", "string"),
        Field("route_long_name", "long_name", "string"),
        Field("route_desc", "description", "string"),
        Field("route_type", "type", enumeration(RouteType), required=True),
        Field("route_url", "url", "nullable_string"),
        Field("route_color", "color", "hex_color"),
        Field("route_text_color", "text_color", "hex_color"),
        Field("route_sort_order", "sort_order", "nullable_integer"),
    ),
)

TRIP_SCHEMA = EntitySchema(
    file_name="trips",
    entity_type=Trip,
    add_to_feed=GtfsFeed.add_trip,
    file_required=True,
    fields=(
        Field("route_id", "route_id", "string", required=True),
        Field("service_id", "service_id", "string", required=True),
        Field("trip_id", "id", "string", required=True),
        Field("trip_headsign", "headsign", "string"),
        Field("trip_short_name", "short_name", "string"),
        Field("direction_id", "direction", enumeration(DirectionType, nullable=True)),
        Field("block_id", "block_id", "string"),
        Field("shape_id", "shape_id", "string"),
        Field(
            "wheelchair_accessible",
            "accessibility_type",
            enumeration(WheelchairAccessibility, nullable=True),
        ),
        Field("bikes_allowed", "bikes_allowed", enumeration(BikesAllowed, nullable=True)),
    ),
)

STOP_TIME_SCHEMA = EntitySchema(
    file_name="stop_times",
    entity_type=StopTime,
    add_to_feed=GtfsFeed.add_stop_time,
    file_required=True,
    fields=(
        Field("trip_id", "trip_id", "string", required=True),
        Field("arrival_time", "arrival_time", "time_of_day", required=True),
        Field("departure_time", "departure_time", "time_of_day", required=True),
        Field("stop_id", "stop_id", "string", required=True),
        Field("stop_sequence", "stop_sequence", "integer", required=True),
        Field("stop_headsign", "stop_headsign", "string"),
        Field("pickup_type", "pickup_type", enumeration(PickupType, nullable=True)),
        Field("drop_off_type", "drop_off_type", enumeration(DropOffType, nullable=True)),
        Field("shape_dist_traveled", "shape_dist_travelled", "string"),
        Field("timepoint", "timepoint", "nullable_boolean"),
    ),
)

CALENDAR_SCHEMA = EntitySchema(
    file_name="calendar",
    entity_type=Calendar,
    add_to_feed=GtfsFeed.add_calendar,
    fields=(
        Field("service_id", "service_id", "string", required=True),
        Field("monday", "monday", "boolean", required=True),
        Field("tuesday", "tuesday", "boolean", required=True),
        Field("wednesday", "wednesday", "boolean", required=True),
        Field("thursday", "thursday", "boolean", required=True),
        Field("friday", "friday", "boolean", required=True),
        Field("saturday", "saturday", "boolean", required=True),
        Field("sunday", "sunday", "boolean", required=True),
        Field("start_date", "start_date", "date", required=True),
        Field("end_date", "end_date", "date", required=True),
    ),
)

CALENDAR_DATE_SCHEMA = EntitySchema(
    file_name="calendar_dates",
    entity_type=CalendarDate,
    add_to_feed=GtfsFeed.add_calendar_date,
    fields=(
        Field("service_id", "service_id", "string", required=True),
        Field("date", "date", "date", required=True),
        Field("exception_type", "exception_type", enumeration(ExceptionType), required=True),
    ),
)

FARE_ATTRIBUTE_SCHEMA = EntitySchema(
    file_name="fare_attributes",
    entity_type=FareAttribute,
    add_to_feed=GtfsFeed.add_fare_attribute,
    fields=(
        Field("fare_id", "fare_id", "string", required=True),
        Field("price", "price", "string", required=True),
        Field("currency_type", "currency_type", "string", required=True),
        Field(
            "payment_method",
            "payment_method",
            enumeration(PaymentMethodType),
            required=True,
        ),
        # empty means unlimited transfers
        Field("transfers", "transfers", "nullable_integer"),
        Field("agency_id", "agency_id", "nullable_string"),
        Field("transfer_duration", "transfer_duration", "string"),
    ),
)

FARE_RULE_SCHEMA = EntitySchema(
    file_name="fare_rules",
    entity_type=FareRule,
    add_to_feed=GtfsFeed.add_fare_rule,
    fields=(
        Field("fare_id", "fare_id", "string", required=True),
        Field("route_id", "route_id", "string"),
        Field("origin_id", "origin_id", "string"),
        Field("destination_id", "destination_id", "string"),
        Field("contains_id", "contains_id", "string"),
    ),
)

SHAPE_SCHEMA = EntitySchema(
    file_name="shapes",
    entity_type=Shape,
    add_to_feed=GtfsFeed.add_shape,
    fields=(
        Field("shape_id", "id", "string", required=True),
        Field("shape_pt_lat", "latitude", "float", required=True),
        Field("shape_pt_lon", "longitude", "float", required=True),
        Field("shape_pt_sequence", "sequence", "integer", required=True),
        Field("shape_dist_traveled", "distance_travelled", "nullable_float"),
    ),
)

FREQUENCY_SCHEMA = EntitySchema(
    file_name="frequencies",
    entity_type=Frequency,
    add_to_feed=GtfsFeed.add_frequency,
    fields=(
        Field("trip_id", "trip_id", "string", required=True),
        Field("start_time", "start_time", "string", required=True),
        Field("end_time", "end_time", "string", required=True),
        Field("headway_secs", "headway_secs", "string", required=True),
        Field("exact_times", "exact_times", "nullable_boolean"),
    ),
)

TRANSFER_SCHEMA = EntitySchema(
    file_name="transfers",
    entity_type=Transfer,
    add_to_feed=GtfsFeed.add_transfer,
    fields=(
        Field("from_stop_id", "from_stop_id", "string", required=True),
        Field("to_stop_id", "to_stop_id", "string", required=True),
        Field("transfer_type", "transfer_type", enumeration(TransferType), required=True),
        Field("min_transfer_time", "min_transfer_time", "string"),
    ),
)

FEED_INFO_SCHEMA = EntitySchema(
    file_name="feed_info",
    entity_type=FeedInfo,
    add_to_feed=GtfsFeed.add_feed_info,
    fields=(
        Field("feed_publisher_name", "publisher_name", "string", required=True),
        Field("feed_publisher_url", "publisher_url", "string", required=True),
        Field("feed_lang", "language_code", "string", required=True),
        Field("feed_start_date", "start_date", "nullable_date"),
        Field("feed_end_date", "end_date", "nullable_date"),
        Field("feed_version", "version", "nullable_string"),
    ),
)

ENTITY_SCHEMAS: tuple[EntitySchema, ...] = (
    AGENCY_SCHEMA,
    STOP_SCHEMA,
    ROUTE_SCHEMA,
    TRIP_SCHEMA,
    STOP_TIME_SCHEMA,
    CALENDAR_SCHEMA,
    CALENDAR_DATE_SCHEMA,
    FARE_ATTRIBUTE_SCHEMA,
    FARE_RULE_SCHEMA,
    SHAPE_SCHEMA,
    FREQUENCY_SCHEMA,
    TRANSFER_SCHEMA,
    FEED_INFO_SCHEMA,
)

