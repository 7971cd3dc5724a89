"""Unit tests for the feed aggregate."""

from __future__ import annotations

from core.enumerations import RouteType
from core.types import Agency, Route, Shape
from feed.gtfs_feed import GtfsFeed


def test_add_operations_preserve_insertion_order() -> None:
    """Collections should iterate in the order entities were added."""
    feed = GtfsFeed()
    feed.add_route(Route(id="B", type=RouteType.BUS))
    feed.add_route(Route(id="A", type=RouteType.TRAM))

    assert [route.id for route in feed.routes] == ["B", "A"]


def test_lookups_find_entities_by_id() -> None:
    """Lookups should return the matching entity or None."""
    feed = GtfsFeed()
    feed.add_agency(Agency(id="DTA", name="Demo", url="http://google.com", timezone="UTC"))

    assert feed.get_agency("DTA") is feed.agencies[0]
    assert feed.get_agency("XYZ") is None


def test_get_shapes_returns_all_points_in_order() -> None:
    """Shape lookups should return every point of the shape."""
    feed = GtfsFeed()
    feed.add_shape(Shape(id="s1", latitude=1.0, longitude=1.0, sequence=1))
    feed.add_shape(Shape(id="s2", latitude=2.0, longitude=2.0, sequence=1))
    feed.add_shape(Shape(id="s1", latitude=3.0, longitude=3.0, sequence=2))

    assert [shape.sequence for shape in feed.get_shapes("s1")] == [1, 2]
