"""Header index and delimited row iteration.

This module splits a feed file into its header and data rows using
standard double-quote escaping, and resolves column positions by name.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from typing import Any, Iterator, Sequence, TextIO

from core.constants import CSV_DELIMITER, CSV_QUOTE_CHAR
from core.errors import GtfsReadError

_BYTE_ORDER_MARK = "\ufeff"


class HeaderIndex:
    """Column name to zero-based position map of one feed file."""

    def __init__(self, header_cells: Sequence[str]) -> None:
        self._columns = tuple(
            cell.lstrip(_BYTE_ORDER_MARK).strip() for cell in header_cells
        )
        self._positions: dict[str, int] = {}
        for position, column in enumerate(self._columns):
            self._positions.setdefault(column, position)

    @property
    def columns(self) -> tuple[str, ...]:
        return self._columns

    def position(self, column: str) -> int | None:
        """Return the position of a column, or ``None`` when absent."""
        return self._positions.get(column)

    def __contains__(self, column: object) -> bool:
        return column in self._positions

    def __len__(self) -> int:
        return len(self._columns)


@dataclass(frozen=True)
class DataRow:
    """Raw cells of one data line.

    Attributes:
        line_number: One-based line number of the row in its file.
        cells: Raw cell text in file order.
    """

    line_number: int
    cells: tuple[str, ...]

    def cell(self, position: int) -> str:
        """Return the cell at a position, empty for short rows."""
        if position < len(self.cells):
            return self.cells[position]
        return ""


def open_table(stream: TextIO, file_name: str) -> tuple[HeaderIndex | None, Iterator[DataRow]]:
    """Split a feed file stream into header index and data rows.

    Args:
        stream: Text stream positioned at the header line.
        file_name: Logical file name used in error messages.

    Returns:
        Header index, or ``None`` for an empty file, and a lazy iterator
        over non-blank data rows.

    Raises:
        GtfsReadError: If the header line cannot be parsed.
    """
    reader = csv.reader(stream, delimiter=CSV_DELIMITER, quotechar=CSV_QUOTE_CHAR)
    try:
        header_cells = next(reader, None)
    except csv.Error as error:
        raise _table_error(file_name, reader.line_num, error) from error
    if header_cells is None:
        return None, iter(())
    return HeaderIndex(header_cells), _iter_data_rows(reader, file_name)


def _iter_data_rows(reader: Any, file_name: str) -> Iterator[DataRow]:
    """Yield non-blank rows with their line numbers."""
    while True:
        try:
            cells = next(reader)
        except StopIteration:
            return
        except csv.Error as error:
            raise _table_error(file_name, reader.line_num, error) from error
        if not cells or (len(cells) == 1 and not cells[0].strip()):
            continue
        yield DataRow(line_number=reader.line_num, cells=tuple(cells))


def _table_error(file_name: str, line_number: int, error: csv.Error) -> GtfsReadError:
    return GtfsReadError(
        f"Failed to parse {file_name}:{line_number}: {error}. "
        "Fix the delimiter or quoting and retry the read."
    )
