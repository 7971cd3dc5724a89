"""Unit tests for feed source abstractions."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from core.errors import GtfsReadError
from ingest.sources import (
    DirectorySource,
    InMemorySourceFile,
    ZipArchiveSource,
    logical_name,
    open_source,
)
from tests.fixture_paths import fixture_path


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [("stops.txt", "stops"), ("Stops.TXT", "stops"), ("gtfs/routes.txt", "routes"), ("agency", "agency")],
)
def test_logical_name_strips_one_extension(file_name: str, expected: str) -> None:
    """Logical names should drop the .txt extension case-insensitively."""
    assert logical_name(file_name) == expected


def test_directory_source_lists_feed_files_sorted() -> None:
    """Directory sources should expose every .txt file by logical name."""
    names = [source_file.name for source_file in DirectorySource(fixture_path("sample-feed"))]

    assert names == sorted(names)
    assert "agency" in names
    assert "stop_times" in names


def test_directory_source_ignores_other_extensions(tmp_path: Path) -> None:
    """Files without the feed extension should be skipped."""
    (tmp_path / "agency.txt").write_text("agency_name\n", encoding="utf-8")
    (tmp_path / "README.md").write_text("notes\n", encoding="utf-8")

    names = [source_file.name for source_file in DirectorySource(tmp_path)]

    assert names == ["agency"]


def test_directory_source_raises_for_missing_directory(tmp_path: Path) -> None:
    """Iterating a missing directory should fail with a read error."""
    with pytest.raises(GtfsReadError):
        list(DirectorySource(tmp_path / "missing"))


def test_directory_source_file_strips_byte_order_mark(tmp_path: Path) -> None:
    """The default encoding should drop a leading UTF-8 byte-order mark."""
    (tmp_path / "agency.txt").write_bytes(b"\xef\xbb\xbfagency_name\nDemo\n")

    source_file = next(iter(DirectorySource(tmp_path)))
    with source_file.open() as stream:
        first_line = stream.readline()

    assert first_line.startswith("agency_name")


def test_zip_archive_source_reads_nested_members(tmp_path: Path) -> None:
    """Zip sources should expose members, nested folders included."""
    archive_path = tmp_path / "feed.zip"
    with zipfile.ZipFile(archive_path, "w") as archive:
        archive.writestr("gtfs/agency.txt", "agency_name\nDemo\n")
        archive.writestr("gtfs/license.md", "MIT\n")

    source_files = list(ZipArchiveSource(archive_path))
    with source_files[0].open() as stream:
        text = stream.read()

    assert [source_file.name for source_file in source_files] == ["agency"]
    assert text == "agency_name\nDemo\n"


def test_zip_archive_source_raises_for_bad_archive(tmp_path: Path) -> None:
    """A file that is not a zip archive should fail with a read error."""
    archive_path = tmp_path / "feed.zip"
    archive_path.write_text("not a zip", encoding="utf-8")

    with pytest.raises(GtfsReadError):
        list(ZipArchiveSource(archive_path))


def test_in_memory_source_file_uses_logical_name() -> None:
    """In-memory files should normalize their name and serve their text."""
    source_file = InMemorySourceFile("Routes.txt", "route_id\nAB\n")

    with source_file.open() as stream:
        lines = stream.read().splitlines()

    assert source_file.name == "routes"
    assert lines == ["route_id", "AB"]


def test_open_source_dispatches_on_path_kind(tmp_path: Path) -> None:
    """Directories and archives should map to their source types."""
    archive_path = tmp_path / "feed.zip"
    with zipfile.ZipFile(archive_path, "w") as archive:
        archive.writestr("agency.txt", "agency_name\n")

    assert isinstance(open_source(tmp_path), DirectorySource)
    assert isinstance(open_source(archive_path), ZipArchiveSource)
    with pytest.raises(GtfsReadError):
        open_source(tmp_path / "missing")
