"""Unit tests for the registered entity schemas."""

from __future__ import annotations

from dataclasses import fields

from schema.registry import ENTITY_SCHEMAS, STOP_TIME_SCHEMA


def test_registry_covers_every_feed_file_once() -> None:
    """Each logical file name should be registered exactly once."""
    file_names = [schema.file_name for schema in ENTITY_SCHEMAS]

    assert len(file_names) == len(set(file_names)) == 13
    assert file_names[:5] == ["agency", "stops", "routes", "trips", "stop_times"]


def test_mandatory_files_are_the_core_feed_files() -> None:
    """Only the five core files should be required for a complete feed."""
    required = {schema.file_name for schema in ENTITY_SCHEMAS if schema.file_required}

    assert required == {"agency", "stops", "routes", "trips", "stop_times"}


def test_every_entity_attribute_is_wired() -> None:
    """Each schema should populate every attribute of its entity type."""
    for schema in ENTITY_SCHEMAS:
        attribute_names = {entity_field.name for entity_field in fields(schema.entity_type)}
        wired_names = {descriptor.attribute for descriptor in schema.fields}
        assert wired_names == attribute_names, schema.file_name


def test_stop_time_required_columns() -> None:
    """Stop times should require trip, times, stop and sequence."""
    assert STOP_TIME_SCHEMA.required_columns == (
        "trip_id",
        "arrival_time",
        "departure_time",
        "stop_id",
        "stop_sequence",
    )
