"""Public SDK surface for the GTFS reader.

This module provides a stable import path for library users.
It re-exports the reading engine, sources and typed feed models.
"""

from __future__ import annotations

from core.config import ReaderConfig
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
from core.errors import (
    GtfsError,
    GtfsReadError,
    MalformedValueError,
    RequiredFieldMissingError,
    SourceNotFoundError,
)
from core.types import TimeOfDay
from feed.gtfs_feed import GtfsFeed
from ingest.feed_reader import FeedReader, read_feed
from ingest.sources import DirectorySource, InMemorySourceFile, ZipArchiveSource, open_source

__all__ = [
    "BikesAllowed",
    "DirectionType",
    "DirectorySource",
    "DropOffType",
    "ExceptionType",
    "FeedReader",
    "GtfsError",
    "GtfsFeed",
    "GtfsReadError",
    "InMemorySourceFile",
    "LocationType",
    "MalformedValueError",
    "PaymentMethodType",
    "PickupType",
    "ReaderConfig",
    "RequiredFieldMissingError",
    "RouteType",
    "SourceNotFoundError",
    "TimeOfDay",
    "TransferType",
    "WheelchairAccessibility",
    "ZipArchiveSource",
    "open_source",
    "read_feed",
]
