"""Field converter catalog.

This module defines the fixed set of bidirectional value codecs used to
turn raw GTFS cell text into typed values and back. Every converter
pairs a ``parse`` function with a symmetric ``format`` function so a
parsed value always formats to text that parses to the same value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum
from typing import Any, Callable

from core.constants import (
    DATE_FORMAT,
    DATE_TEXT_LENGTH,
    FALSE_FLAG,
    HEX_COLOR_ALPHA_MASK,
    HEX_COLOR_DIGITS,
    HEX_COLOR_PREFIX,
    HEX_COLOR_RGB_MASK,
    INT32_SIGN_BIT,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
    TRUE_FLAG,
    UINT32_RANGE,
)
from core.errors import ConversionError
from core.types import TimeOfDay

_TIME_OF_DAY_PATTERN = re.compile(r"^([0-9]{1,3}):([0-9]{2}):([0-9]{2})$")
_HEX_COLOR_PATTERN = re.compile(rf"^[0-9A-Fa-f]{{{HEX_COLOR_DIGITS}}}$")
_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
_FLOAT_PATTERN = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
_ENUM_CODE_PATTERN = re.compile(r"^(?:0|[1-9][0-9]*)$")


@dataclass(frozen=True)
class FieldConverter:
    """Bidirectional codec between cell text and a typed value.

    Attributes:
        name: Catalog id of the converter.
        parse_text: Function mapping non-empty cell text to a value.
        format_value: Function mapping a non-null value to cell text.
        empty_value: Value produced for an empty cell.
        accepts_empty: Whether an empty cell is a valid input.
        blank_is_empty: Whether whitespace-only text counts as empty.
    """

    name: str
    parse_text: Callable[[str], Any]
    format_value: Callable[[Any], str]
    empty_value: Any = None
    accepts_empty: bool = True
    blank_is_empty: bool = True

    @property
    def nullable(self) -> bool:
        """Whether an empty cell maps to ``None``."""
        return self.accepts_empty and self.empty_value is None

    def parse(self, raw: str) -> Any:
        """Parse raw cell text.

        Args:
            raw: Cell text, possibly empty.

        Returns:
            Typed value, or ``empty_value`` for an empty cell.

        Raises:
            ConversionError: If the text is invalid for this converter.
        """
        if raw == "" or (self.blank_is_empty and not raw.strip()):
            if not self.accepts_empty:
                raise ConversionError(self.name, raw, "value is empty")
            return self.empty_value
        return self.parse_text(raw)

    def format(self, value: Any) -> str:
        """Format a typed value back into cell text."""
        if value is None:
            return ""
        return self.format_value(value)


def _parse_integer_text(raw: str) -> int:
    value = raw.strip()
    if not _INTEGER_PATTERN.match(value):
        raise ConversionError("integer", raw, "not a whole number")
    return int(value)


def _parse_float_text(raw: str) -> float:
    value = raw.strip()
    if not _FLOAT_PATTERN.match(value):
        raise ConversionError("float", raw, "not a decimal number")
    return float(value)


def _parse_boolean_text(raw: str) -> bool:
    value = raw.strip()
    if value == TRUE_FLAG:
        return True
    if value == FALSE_FLAG:
        return False
    raise ConversionError("boolean", raw, f"expected {TRUE_FLAG} or {FALSE_FLAG}")


def _format_boolean(value: bool) -> str:
    return TRUE_FLAG if value else FALSE_FLAG


def _parse_date_text(raw: str) -> date:
    value = raw.strip()
    if len(value) != DATE_TEXT_LENGTH or not value.isdigit():
        raise ConversionError("date", raw, "expected eight digits YYYYMMDD")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as error:
        raise ConversionError("date", raw, "not a calendar date") from error


def _format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def _parse_time_of_day_text(raw: str) -> TimeOfDay:
    """Parse ``H:MM:SS`` or ``HH:MM:SS`` keeping hours past 23."""
    match = _TIME_OF_DAY_PATTERN.match(raw.strip())
    if match is None:
        raise ConversionError("time_of_day", raw, "expected H:MM:SS")
    hours, minutes, seconds = (int(part) for part in match.groups())
    if minutes >= MINUTES_PER_HOUR or seconds >= SECONDS_PER_MINUTE:
        raise ConversionError("time_of_day", raw, "minutes and seconds must be below 60")
    return TimeOfDay(hours=hours, minutes=minutes, seconds=seconds)


def _parse_hex_color_text(raw: str) -> int:
    """Pack an ``RRGGBB`` triplet into a signed ``0xFFRRGGBB`` integer."""
    value = raw.strip()
    if value.startswith(HEX_COLOR_PREFIX):
        value = value[len(HEX_COLOR_PREFIX):]
    if not _HEX_COLOR_PATTERN.match(value):
        raise ConversionError("hex_color", raw, f"expected {HEX_COLOR_DIGITS} hex digits")
    packed = HEX_COLOR_ALPHA_MASK | int(value, 16)
    return packed - UINT32_RANGE if packed >= INT32_SIGN_BIT else packed


def _format_hex_color(value: int) -> str:
    return f"{value & HEX_COLOR_RGB_MASK:06X}"


STRING = FieldConverter(
    name="string", parse_text=str, format_value=str, empty_value="", blank_is_empty=False
)
NULLABLE_STRING = FieldConverter(
    name="nullable_string", parse_text=str, format_value=str, blank_is_empty=False
)
INTEGER = FieldConverter(
    name="integer", parse_text=_parse_integer_text, format_value=str, empty_value=0
)
NULLABLE_INTEGER = FieldConverter(
    name="nullable_integer", parse_text=_parse_integer_text, format_value=str
)
FLOAT = FieldConverter(
    name="float", parse_text=_parse_float_text, format_value=repr, empty_value=0.0
)
NULLABLE_FLOAT = FieldConverter(
    name="nullable_float", parse_text=_parse_float_text, format_value=repr
)
BOOLEAN = FieldConverter(
    name="boolean",
    parse_text=_parse_boolean_text,
    format_value=_format_boolean,
    empty_value=False,
)
NULLABLE_BOOLEAN = FieldConverter(
    name="nullable_boolean", parse_text=_parse_boolean_text, format_value=_format_boolean
)
DATE = FieldConverter(
    name="date", parse_text=_parse_date_text, format_value=_format_date, accepts_empty=False
)
NULLABLE_DATE = FieldConverter(
    name="nullable_date", parse_text=_parse_date_text, format_value=_format_date
)
TIME_OF_DAY = FieldConverter(
    name="time_of_day",
    parse_text=_parse_time_of_day_text,
    format_value=str,
    accepts_empty=False,
)
HEX_COLOR = FieldConverter(
    name="hex_color", parse_text=_parse_hex_color_text, format_value=_format_hex_color
)

CONVERTER_CATALOG: dict[str, FieldConverter] = {
    converter.name: converter
    for converter in (
        STRING,
        NULLABLE_STRING,
        INTEGER,
        NULLABLE_INTEGER,
        FLOAT,
        NULLABLE_FLOAT,
        BOOLEAN,
        NULLABLE_BOOLEAN,
        DATE,
        NULLABLE_DATE,
        TIME_OF_DAY,
        HEX_COLOR,
    )
}


def enumeration(enum_type: type[IntEnum], nullable: bool = False) -> FieldConverter:
    """Build an enumeration-by-code converter for a code table.

    Args:
        enum_type: ``IntEnum`` whose values are the feed codes.
        nullable: Map an empty cell to ``None`` when true, reject it
            otherwise.

    Returns:
        Converter mapping integer codes to enum members.
    """
    prefix = "nullable_enum" if nullable else "enum"
    converter_name = f"{prefix}:{enum_type.__name__}"

    def parse_code(raw: str) -> IntEnum:
        value = raw.strip()
        if not _ENUM_CODE_PATTERN.match(value):
            raise ConversionError(converter_name, raw, "not an integer code")
        try:
            return enum_type(int(value))
        except ValueError as error:
            raise ConversionError(
                converter_name, raw, f"unknown {enum_type.__name__} code"
            ) from error

    return FieldConverter(
        name=converter_name,
        parse_text=parse_code,
        format_value=lambda member: str(int(member)),
        accepts_empty=nullable,
    )


def get_converter(name: str) -> FieldConverter:
    """Return a catalog converter by id.

    Args:
        name: Converter id such as ``nullable_float``.

    Returns:
        Matching converter.

    Raises:
        KeyError: If no converter has that id.
    """
    try:
        return CONVERTER_CATALOG[name]
    except KeyError as error:
        raise KeyError(
            f"Unknown field converter '{name}'. Supported converters: {sorted(CONVERTER_CATALOG)}."
        ) from error
