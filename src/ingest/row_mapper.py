"""Row to entity mapping.

This module turns one parsed data row into one entity instance using an
entity schema, and formats an entity back into row cells with the same
converters. Both directions are pure functions of their inputs.
"""

from __future__ import annotations

from typing import Any

from core.errors import ConversionError, MalformedValueError, RequiredFieldMissingError
from core.types import ReadPolicy
from ingest.header_index import DataRow, HeaderIndex
from schema.descriptors import EntitySchema, FieldDescriptor


def map_row(
    row: DataRow,
    header: HeaderIndex,
    schema: EntitySchema,
    policy: ReadPolicy,
) -> Any:
    """Map one data row onto the schema's entity type.

    An absent optional column is read as an empty cell. A malformed
    optional value falls back to the converter's empty value under a
    tolerant policy.

    Args:
        row: Raw data row.
        header: Header index of the row's file.
        schema: Entity schema of the file.
        policy: Active read policy.

    Returns:
        Entity instance built from the row.

    Raises:
        RequiredFieldMissingError: If a required column is absent or empty.
        MalformedValueError: If a value fails its converter and cannot
            be coerced under the policy.
    """
    values: dict[str, Any] = {}
    for descriptor in schema.fields:
        raw_value = _resolve_raw_value(row, header, schema, descriptor)
        values[descriptor.attribute] = _convert_value(raw_value, row, schema, descriptor, policy)
    return schema.entity_type(**values)


def format_entity(entity: Any, schema: EntitySchema) -> list[str]:
    """Format an entity into row cells ordered like ``schema.columns``.

    Args:
        entity: Entity instance of the schema's entity type.
        schema: Entity schema used to map the entity.

    Returns:
        Cell text per schema column.
    """
    return [
        descriptor.converter.format(getattr(entity, descriptor.attribute))
        for descriptor in schema.fields
    ]


def _resolve_raw_value(
    row: DataRow,
    header: HeaderIndex,
    schema: EntitySchema,
    descriptor: FieldDescriptor,
) -> str:
    position = header.position(descriptor.column)
    if position is None:
        if descriptor.required:
            raise RequiredFieldMissingError(schema.file_name, descriptor.column, row.line_number)
        return ""
    raw_value = row.cell(position)
    if descriptor.required and not raw_value.strip():
        raise RequiredFieldMissingError(schema.file_name, descriptor.column, row.line_number)
    return raw_value


def _convert_value(
    raw_value: str,
    row: DataRow,
    schema: EntitySchema,
    descriptor: FieldDescriptor,
    policy: ReadPolicy,
) -> Any:
    try:
        return descriptor.converter.parse(raw_value)
    except ConversionError as error:
        if descriptor.required or policy.strict:
            raise MalformedValueError(
                schema.file_name, descriptor.column, raw_value, row.line_number
            ) from error
        return descriptor.converter.empty_value
