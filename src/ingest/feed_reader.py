"""GTFS feed reading engine.

This module locates each registered feed file in a source, maps its
rows through the entity schemas and appends the resulting entities to
a feed aggregate in file order. Strict reads abort on the first row
violation; tolerant reads drop the offending row and continue.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Sequence

from core.config import ReaderConfig
from core.errors import (
    MalformedValueError,
    RequiredFieldMissingError,
    SourceNotFoundError,
)
from core.logging_config import get_logger
from core.types import ReadPolicy
from feed.gtfs_feed import GtfsFeed
from ingest.header_index import DataRow, HeaderIndex, open_table
from ingest.row_mapper import map_row
from ingest.sources import SourceFile, logical_name, open_source
from schema.descriptors import EntitySchema
from schema.registry import ENTITY_SCHEMAS

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class FileReadSummary:
    """Outcome of reading one feed file.

    Attributes:
        file_name: Logical feed file name.
        mapped_count: Rows added to the feed.
        dropped_count: Rows discarded under a tolerant policy.
    """

    file_name: str
    mapped_count: int
    dropped_count: int


class FeedReader:
    """Schema-driven reader populating a feed aggregate.

    Rows are mapped into per-file staging lists first. The target feed
    only receives entities once every file of the read has been mapped,
    so a failed strict read leaves a supplied feed untouched.
    """

    def __init__(
        self,
        strict: bool = True,
        feed_factory: Callable[[], Any] = GtfsFeed,
        schemas: Sequence[EntitySchema] = ENTITY_SCHEMAS,
        require_core_files: bool = True,
    ) -> None:
        self._policy = ReadPolicy(strict=strict)
        self._feed_factory = feed_factory
        self._schemas = tuple(schemas)
        self._schemas_by_name = {schema.file_name: schema for schema in self._schemas}
        self._require_core_files = require_core_files

    @classmethod
    def from_config(cls, config: ReaderConfig) -> "FeedReader":
        """Build a reader honoring the configured strictness."""
        return cls(strict=config.strict)

    @property
    def policy(self) -> ReadPolicy:
        return self._policy

    def read(self, source: Iterable[SourceFile], feed: Any = None) -> Any:
        """Read every registered feed file present in a source.

        Args:
            source: Named feed files.
            feed: Aggregate to populate; a new one is created when omitted.
                It is only modified when the whole read succeeds.

        Returns:
            The populated feed aggregate.

        Raises:
            SourceNotFoundError: If a file required for a complete feed is missing.
            RequiredFieldMissingError: If a strict read meets a missing required field.
            MalformedValueError: If a strict read meets an unparseable value.
        """
        source_files = _index_source_files(source)
        self._check_core_files(source_files)
        staged: list[tuple[EntitySchema, list[Any]]] = []
        summaries: list[FileReadSummary] = []
        for schema in self._schemas:
            source_file = source_files.get(schema.file_name)
            if source_file is None:
                _LOGGER.info("feed_file_skipped", file_name=schema.file_name, reason="absent")
                continue
            summary, entities = self._read_schema_file(source_file, schema)
            summaries.append(summary)
            staged.append((schema, entities))
        target_feed = self._feed_factory() if feed is None else feed
        for schema, entities in staged:
            _add_entities(schema, entities, target_feed)
        _log_read_completion(self._policy, summaries)
        return target_feed

    def read_file(self, source_file: SourceFile, feed: Any = None) -> Any:
        """Read a single feed file into a feed aggregate.

        Args:
            source_file: Feed file to read.
            feed: Aggregate to populate; a new one is created when omitted.
                It is only modified when the file is read successfully.

        Returns:
            The populated feed aggregate.

        Raises:
            SourceNotFoundError: If no schema is registered for the file.
            RequiredFieldMissingError: If a strict read meets a missing required field.
            MalformedValueError: If a strict read meets an unparseable value.
        """
        file_name = logical_name(source_file.name)
        schema = self._schemas_by_name.get(file_name)
        if schema is None:
            raise SourceNotFoundError(file_name, "no entity schema is registered for this file")
        _, entities = self._read_schema_file(source_file, schema)
        target_feed = self._feed_factory() if feed is None else feed
        _add_entities(schema, entities, target_feed)
        return target_feed

    def _check_core_files(self, source_files: dict[str, SourceFile]) -> None:
        """Fail before any file is opened when a mandatory file is absent."""
        if not self._require_core_files:
            return
        for schema in self._schemas:
            if schema.file_required and schema.file_name not in source_files:
                raise SourceNotFoundError(
                    schema.file_name, "file is required for a complete feed"
                )

    def _read_schema_file(
        self,
        source_file: SourceFile,
        schema: EntitySchema,
    ) -> tuple[FileReadSummary, list[Any]]:
        with source_file.open() as stream:
            header, rows = open_table(stream, schema.file_name)
            if header is None:
                _LOGGER.warning("feed_file_empty", file_name=schema.file_name)
                return FileReadSummary(schema.file_name, mapped_count=0, dropped_count=0), []
            missing_columns = schema.missing_required_columns(header)
            if missing_columns:
                return self._skip_file_rows(schema, missing_columns, rows), []
            summary, entities = self._map_rows(schema, header, rows)
        _LOGGER.info(
            "feed_file_read",
            file_name=schema.file_name,
            mapped_count=summary.mapped_count,
            dropped_count=summary.dropped_count,
        )
        return summary, entities

    def _map_rows(
        self,
        schema: EntitySchema,
        header: HeaderIndex,
        rows: Iterable[DataRow],
    ) -> tuple[FileReadSummary, list[Any]]:
        entities: list[Any] = []
        dropped_count = 0
        for row in rows:
            try:
                entity = map_row(row, header, schema, self._policy)
            except (RequiredFieldMissingError, MalformedValueError) as error:
                if self._policy.strict:
                    raise
                dropped_count += 1
                _LOGGER.warning(
                    "feed_row_dropped",
                    file_name=schema.file_name,
                    line_number=row.line_number,
                    reason=str(error),
                )
                continue
            entities.append(entity)
        return FileReadSummary(schema.file_name, len(entities), dropped_count), entities

    def _skip_file_rows(
        self,
        schema: EntitySchema,
        missing_columns: list[str],
        rows: Iterable[DataRow],
    ) -> FileReadSummary:
        """Reject a file whose header lacks required columns."""
        if self._policy.strict:
            raise RequiredFieldMissingError(schema.file_name, missing_columns[0])
        dropped_count = sum(1 for _ in rows)
        _LOGGER.warning(
            "feed_file_columns_missing",
            file_name=schema.file_name,
            missing_columns=missing_columns,
            dropped_count=dropped_count,
        )
        return FileReadSummary(schema.file_name, mapped_count=0, dropped_count=dropped_count)



def read_feed(source_path: Path | str, config: ReaderConfig | None = None) -> GtfsFeed:
    """Read a feed directory or zip archive into a new ``GtfsFeed``.

    Args:
        source_path: Directory of ``.txt`` files or ``.zip`` archive.
        config: Reader configuration; read from the environment when omitted.

    Returns:
        Populated feed.

    Raises:
        GtfsReadError: If the source cannot be read or the data is invalid.
    """
    resolved_config = ReaderConfig.from_env() if config is None else config
    source = open_source(source_path, resolved_config.encoding)
    return FeedReader.from_config(resolved_config).read(source)


def _index_source_files(source: Iterable[SourceFile]) -> dict[str, SourceFile]:
    """Index source files by logical name, keeping the first of duplicates."""
    indexed: dict[str, SourceFile] = {}
    for source_file in source:
        file_name = logical_name(source_file.name)
        if file_name in indexed:
            _LOGGER.warning("feed_file_duplicated", file_name=file_name)
            continue
        indexed[file_name] = source_file
    return indexed


def _log_read_completion(policy: ReadPolicy, summaries: list[FileReadSummary]) -> None:
    """Log read completion with per-file counts."""
    _LOGGER.info(
        "feed_read_completed",
        policy=policy.name,
        file_count=len(summaries),
        mapped_count=sum(summary.mapped_count for summary in summaries),
        dropped_count=sum(summary.dropped_count for summary in summaries),
    )


def _add_entities(schema: EntitySchema, entities: list[Any], feed: Any) -> None:
    """Append staged entities through the schema's feed add-operation."""
    for entity in entities:
        schema.add_to_feed(feed, entity)
