"""Integration tests reading the sample transit feed end to end."""

from __future__ import annotations

import zipfile
from datetime import date

import pytest

from core.config import ReaderConfig
from core.enumerations import (
    DirectionType,
    ExceptionType,
    PaymentMethodType,
    RouteType,
    TransferType,
)
from core.types import STRICT_POLICY, TimeOfDay
from feed.gtfs_feed import GtfsFeed
from gtfs_reader import DirectorySource, FeedReader, read_feed
from ingest.header_index import DataRow, HeaderIndex
from ingest.row_mapper import format_entity, map_row
from schema.registry import ENTITY_SCHEMAS
from tests.fixture_paths import fixture_path


@pytest.fixture(scope="module")
def sample_feed() -> GtfsFeed:
    return FeedReader().read(DirectorySource(fixture_path("sample-feed")))


def test_sample_feed_agency_and_routes(sample_feed: GtfsFeed) -> None:
    """Agency and route rows should map with absent columns as null."""
    agency = sample_feed.agencies[0]

    assert len(sample_feed.agencies) == 1
    assert (agency.id, agency.name, agency.url, agency.timezone) == (
        "DTA",
        "Demo Transit Authority",
        "http://google.com",
        "America/Los_Angeles",
    )
    assert agency.fare_url is None
    assert agency.phone is None
    assert agency.language_code is None
    assert [route.id for route in sample_feed.routes] == ["AB", "BFC", "STBA", "CITY", "AAMV"]
    assert all(route.type is RouteType.BUS for route in sample_feed.routes)
    assert [route.color for route in sample_feed.routes] == [-3932017, -1, None, None, None]


def test_sample_feed_stops_and_trips(sample_feed: GtfsFeed) -> None:
    """Stops and trips should keep file order and optional enums."""
    assert len(sample_feed.stops) == 9
    assert sample_feed.stops[0].id == "FUR_CREEK_RES"
    assert sample_feed.stops[-1].longitude == -116.40094
    assert len(sample_feed.trips) == 11
    first_trip = sample_feed.get_trip("AB1")
    shuttle = sample_feed.get_trip("STBA")
    assert first_trip is not None and shuttle is not None
    assert first_trip.direction is DirectionType.ONE_DIRECTION
    assert first_trip.shape_id == "shape_1"
    assert shuttle.direction is None


def test_sample_feed_stop_times_pad_short_rows(sample_feed: GtfsFeed) -> None:
    """Short rows and misspelled optional headers should read as empty cells."""
    stop_times = sample_feed.stop_times

    assert len(stop_times) == 28
    assert stop_times[0].arrival_time == TimeOfDay(hours=6)
    assert stop_times[-1].arrival_time == TimeOfDay(hours=25, minutes=30)
    assert str(stop_times[-1].departure_time) == "25:30:00"
    assert all(stop_time.pickup_type is None for stop_time in stop_times)
    assert all(stop_time.drop_off_type is None for stop_time in stop_times)
    assert all(stop_time.shape_dist_travelled == "" for stop_time in stop_times)
    assert [stop_time.stop_id for stop_time in sample_feed.get_stop_times("AB1")] == [
        "BEATTY_AIRPORT",
        "BULLFROG",
    ]


def test_sample_feed_service_calendar(sample_feed: GtfsFeed) -> None:
    """Calendar and exception rows should parse flags and dates."""
    full_week = sample_feed.get_calendar("FULLW")
    weekend = sample_feed.get_calendar("WE")
    assert full_week is not None and weekend is not None

    assert all(
        [
            full_week.monday,
            full_week.tuesday,
            full_week.wednesday,
            full_week.thursday,
            full_week.friday,
            full_week.saturday,
            full_week.sunday,
        ]
    )
    assert (weekend.monday, weekend.saturday) == (False, True)
    assert full_week.start_date == date(2007, 1, 1)
    assert full_week.end_date == date(2010, 12, 31)
    exception = sample_feed.calendar_dates[0]
    assert exception.date == date(2007, 6, 4)
    assert exception.exception_type is ExceptionType.REMOVED


def test_sample_feed_fares_shapes_and_frequencies(sample_feed: GtfsFeed) -> None:
    """Remaining optional files should all be populated."""
    assert [fare.fare_id for fare in sample_feed.fare_attributes] == ["p", "a"]
    assert sample_feed.fare_attributes[0].price == "1.25"
    assert sample_feed.fare_attributes[0].payment_method is PaymentMethodType.ON_BOARD
    assert sample_feed.fare_attributes[0].transfers == 0
    assert sample_feed.fare_attributes[0].transfer_duration == ""
    assert len(sample_feed.fare_rules) == 4
    assert len(sample_feed.shapes) == 8
    assert [shape.distance_travelled for shape in sample_feed.get_shapes("shape_2")] == [
        0.0,
        1.62,
        3.25,
    ]
    assert sample_feed.get_shapes("shape_1")[0].distance_travelled is None
    assert len(sample_feed.frequencies) == 11
    assert sample_feed.frequencies[8].trip_id == "CITY2"
    assert sample_feed.frequencies[8].start_time == "16:00:00"
    assert sample_feed.frequencies[8].headway_secs == "600"
    assert [transfer.transfer_type for transfer in sample_feed.transfers] == [
        TransferType.MINIMUM_TIME,
        TransferType.RECOMMENDED,
    ]
    assert sample_feed.transfers[0].min_transfer_time == "300"
    feed_info = sample_feed.feed_info[0]
    assert feed_info.publisher_name == "Demo Transit Authority"
    assert feed_info.end_date == date(2010, 12, 31)
    assert feed_info.version == "1.0"


def test_sample_feed_entities_format_back_to_equal_rows(sample_feed: GtfsFeed) -> None:
    """Every mapped entity should survive formatting and re-mapping."""
    collections = {
        "agency": sample_feed.agencies,
        "stops": sample_feed.stops,
        "routes": sample_feed.routes,
        "trips": sample_feed.trips,
        "stop_times": sample_feed.stop_times,
        "calendar": sample_feed.calendars,
        "calendar_dates": sample_feed.calendar_dates,
        "fare_attributes": sample_feed.fare_attributes,
        "fare_rules": sample_feed.fare_rules,
        "shapes": sample_feed.shapes,
        "frequencies": sample_feed.frequencies,
        "transfers": sample_feed.transfers,
        "feed_info": sample_feed.feed_info,
    }
    for schema in ENTITY_SCHEMAS:
        header = HeaderIndex(list(schema.columns))
        for entity in collections[schema.file_name]:
            cells = format_entity(entity, schema)
            row = DataRow(line_number=2, cells=tuple(cells))
            assert map_row(row, header, schema, STRICT_POLICY) == entity


def test_read_feed_from_zip_archive_matches_directory(tmp_path, sample_feed: GtfsFeed) -> None:
    """A zipped feed with a nested folder should read like the directory."""
    archive_path = tmp_path / "sample-feed.zip"
    with zipfile.ZipFile(archive_path, "w") as archive:
        for source_path in sorted(fixture_path("sample-feed").glob("*.txt")):
            archive.write(source_path, f"sample-feed/{source_path.name}")

    zipped_feed = read_feed(archive_path, ReaderConfig(strict=True))

    assert zipped_feed.routes == sample_feed.routes
    assert zipped_feed.stop_times == sample_feed.stop_times
    assert zipped_feed.feed_info == sample_feed.feed_info


def test_read_feed_from_directory_in_tolerant_mode() -> None:
    """A clean feed should read identically under a tolerant policy."""
    feed = read_feed(fixture_path("sample-feed"), ReaderConfig(strict=False))

    assert len(feed.stop_times) == 28
    assert len(feed.shapes) == 8
