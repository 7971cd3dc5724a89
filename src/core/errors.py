"""GTFS reader exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure carries the feed file and field it was raised for.
"""

from __future__ import annotations


class GtfsError(Exception):
    """Base exception for all GTFS reader failures."""


class GtfsConfigError(GtfsError):
    """Raised for invalid runtime configuration."""


class GtfsSchemaError(GtfsError):
    """Raised when an entity schema table is inconsistent."""


class ConversionError(GtfsError):
    """Raised by a field converter for a value it cannot parse.

    Attributes:
        converter_name: Catalog id of the failing converter.
        raw_value: Raw cell text that was rejected.
    """

    def __init__(self, converter_name: str, raw_value: str, reason: str) -> None:
        super().__init__(f"Cannot parse '{raw_value}' as {converter_name}: {reason}.")
        self.converter_name = converter_name
        self.raw_value = raw_value


class GtfsReadError(GtfsError):
    """Raised for feed data that cannot be read into the model."""


class RequiredFieldMissingError(GtfsReadError):
    """Raised when a required field is absent or empty in a feed file.

    Attributes:
        file_name: Logical feed file name, for example ``stops``.
        field_name: Column name of the missing field.
    """

    def __init__(self, file_name: str, field_name: str, line_number: int | None = None) -> None:
        location = file_name if line_number is None else f"{file_name}:{line_number}"
        super().__init__(f"Required field {field_name} not found in {location}.")
        self.file_name = file_name
        self.field_name = field_name
        self.line_number = line_number


class MalformedValueError(GtfsReadError):
    """Raised when a present value fails its field converter.

    Attributes:
        file_name: Logical feed file name.
        field_name: Column name of the rejected value.
        raw_value: Raw cell text.
        line_number: One-based line number in the source file.
    """

    def __init__(
        self,
        file_name: str,
        field_name: str,
        raw_value: str,
        line_number: int | None = None,
    ) -> None:
        location = file_name if line_number is None else f"{file_name}:{line_number}"
        super().__init__(
            f"Malformed value '{raw_value}' for field {field_name} in {location}. "
            "Fix the value or read the feed in tolerant mode."
        )
        self.file_name = file_name
        self.field_name = field_name
        self.raw_value = raw_value
        self.line_number = line_number


class SourceNotFoundError(GtfsReadError):
    """Raised when a feed file is missing or has no registered schema.

    Attributes:
        file_name: Logical feed file name that could not be resolved.
    """

    def __init__(self, file_name: str, reason: str) -> None:
        super().__init__(f"Feed file {file_name} could not be read: {reason}.")
        self.file_name = file_name
