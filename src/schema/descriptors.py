"""Entity schema metadata.

This module defines the per-entity-type field wiring the reading engine
is driven by: which column feeds which dataclass attribute, through
which converter, and whether the column is required.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable

from core.errors import GtfsSchemaError
from fields.converters import FieldConverter, get_converter


@dataclass(frozen=True)
class FieldDescriptor:
    """Mapping of one feed column onto one entity attribute.

    Attributes:
        column: Column name in the feed file header.
        attribute: Dataclass attribute receiving the parsed value.
        converter: Codec applied to the raw cell, or its catalog id.
        required: Whether the column must be present and non-empty.
    """

    column: str
    attribute: str
    converter: FieldConverter
    required: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.converter, str):
            object.__setattr__(self, "converter", _resolve_converter(self.column, self.converter))
        if not self.required and not self.converter.accepts_empty:
            raise GtfsSchemaError(
                f"Optional column '{self.column}' uses converter '{self.converter.name}', "
                "which rejects empty values. Mark the column required or use a nullable converter."
            )


@dataclass(frozen=True)
class EntitySchema:
    """Ordered field wiring for one GTFS entity type.

    Attributes:
        file_name: Logical feed file name, for example ``stop_times``.
        entity_type: Frozen dataclass built for each row.
        fields: Field descriptors in column order.
        add_to_feed: Feed add-operation receiving each mapped entity.
        file_required: Whether a complete feed must contain this file.
    """

    file_name: str
    entity_type: type
    fields: tuple[FieldDescriptor, ...]
    add_to_feed: Callable[[Any, Any], None]
    file_required: bool = False

    def __post_init__(self) -> None:
        attribute_names = {entity_field.name for entity_field in fields(self.entity_type)}
        for descriptor in self.fields:
            if descriptor.attribute not in attribute_names:
                raise GtfsSchemaError(
                    f"Schema for {self.file_name} maps column '{descriptor.column}' to unknown "
                    f"attribute '{descriptor.attribute}' of {self.entity_type.__name__}."
                )

    @property
    def columns(self) -> tuple[str, ...]:
        """Column names in schema order."""
        return tuple(descriptor.column for descriptor in self.fields)

    @property
    def required_columns(self) -> tuple[str, ...]:
        """Columns every row of the file must provide."""
        return tuple(descriptor.column for descriptor in self.fields if descriptor.required)

    def missing_required_columns(self, header_columns: Any) -> list[str]:
        """Return required columns absent from a header.

        Args:
            header_columns: Container of column names present in the file.

        Returns:
            Missing required column names in schema order.
        """
        return [column for column in self.required_columns if column not in header_columns]


def _resolve_converter(column: str, converter_id: str) -> FieldConverter:
    try:
        return get_converter(converter_id)
    except KeyError as error:
        raise GtfsSchemaError(
            f"Column '{column}' names unknown converter '{converter_id}'. "
            "Use a converter id from the field converter catalog."
        ) from error
