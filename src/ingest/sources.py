"""Feed source abstraction.

This module exposes GTFS files as named, lazily opened text streams.
A source is any iterable of ``SourceFile`` objects; directories and
zip archives are supported out of the box.
"""

from __future__ import annotations

import io
import zipfile
from contextlib import contextmanager
from pathlib import Path, PurePosixPath
from typing import ContextManager, Iterable, Iterator, Protocol, TextIO

from core.constants import DEFAULT_SOURCE_ENCODING, SOURCE_FILE_EXTENSION
from core.errors import GtfsReadError


class SourceFile(Protocol):
    """One named tabular text resource of a feed."""

    @property
    def name(self) -> str:
        """Logical file name, for example ``stops``."""
        ...

    def open(self) -> ContextManager[TextIO]:
        """Open the resource for sequential line-oriented reading."""
        ...


def logical_name(file_name: str) -> str:
    """Derive a logical feed file name from a physical file name.

    Args:
        file_name: File name such as ``stops.txt`` or ``Stops.TXT``.

    Returns:
        Lowercased name with one ``.txt`` extension stripped.
    """
    base_name = PurePosixPath(file_name).name.lower()
    if base_name.endswith(SOURCE_FILE_EXTENSION):
        return base_name[: -len(SOURCE_FILE_EXTENSION)]
    return base_name


class DirectorySourceFile:
    """Feed file stored on the local file system."""

    def __init__(self, path: Path, encoding: str = DEFAULT_SOURCE_ENCODING) -> None:
        self._path = path
        self._encoding = encoding

    @property
    def name(self) -> str:
        return logical_name(self._path.name)

    def open(self) -> ContextManager[TextIO]:
        return self._path.open("r", encoding=self._encoding, newline="")


class DirectorySource:
    """All feed files located in one directory."""

    def __init__(self, directory: Path | str, encoding: str = DEFAULT_SOURCE_ENCODING) -> None:
        self._directory = Path(directory).expanduser()
        self._encoding = encoding

    def __iter__(self) -> Iterator[DirectorySourceFile]:
        if not self._directory.is_dir():
            raise GtfsReadError(
                f"Failed to read feed directory {self._directory}: path is not a directory. "
                "Provide an existing directory containing GTFS .txt files."
            )
        for file_path in sorted(self._directory.iterdir()):
            if file_path.is_file() and _has_feed_extension(file_path.name):
                yield DirectorySourceFile(file_path, self._encoding)


class ZipArchiveSourceFile:
    """Feed file stored as a member of a zip archive."""

    def __init__(
        self,
        archive_path: Path,
        member_name: str,
        encoding: str = DEFAULT_SOURCE_ENCODING,
    ) -> None:
        self._archive_path = archive_path
        self._member_name = member_name
        self._encoding = encoding

    @property
    def name(self) -> str:
        return logical_name(self._member_name)

    @contextmanager
    def open(self) -> Iterator[TextIO]:
        with zipfile.ZipFile(self._archive_path) as archive:
            with archive.open(self._member_name) as member:
                with io.TextIOWrapper(member, encoding=self._encoding, newline="") as stream:
                    yield stream


class ZipArchiveSource:
    """All feed files stored in one zip archive, nested folders included."""

    def __init__(self, archive_path: Path | str, encoding: str = DEFAULT_SOURCE_ENCODING) -> None:
        self._archive_path = Path(archive_path).expanduser()
        self._encoding = encoding

    def __iter__(self) -> Iterator[ZipArchiveSourceFile]:
        try:
            with zipfile.ZipFile(self._archive_path) as archive:
                member_names = sorted(
                    info.filename
                    for info in archive.infolist()
                    if not info.is_dir() and _has_feed_extension(info.filename)
                )
        except (OSError, zipfile.BadZipFile) as error:
            raise GtfsReadError(
                f"Failed to open feed archive {self._archive_path}: {error}. "
                "Provide a readable GTFS zip archive."
            ) from error
        for member_name in member_names:
            yield ZipArchiveSourceFile(self._archive_path, member_name, self._encoding)


class InMemorySourceFile:
    """Feed file backed by a string, for embedding and tests."""

    def __init__(self, name: str, text: str) -> None:
        self._name = logical_name(name)
        self._text = text

    @property
    def name(self) -> str:
        return self._name

    def open(self) -> ContextManager[TextIO]:
        return io.StringIO(self._text, newline="")


def open_source(
    source_path: Path | str,
    encoding: str = DEFAULT_SOURCE_ENCODING,
) -> Iterable[SourceFile]:
    """Build a source for a feed directory or zip archive.

    Args:
        source_path: Directory of ``.txt`` files or ``.zip`` archive.
        encoding: Text encoding of the feed files.

    Returns:
        Iterable of feed source files.

    Raises:
        GtfsReadError: If the path does not exist.
    """
    path = Path(source_path).expanduser()
    if not path.exists():
        raise GtfsReadError(
            f"Failed to read feed at {path}: path does not exist. "
            "Provide an existing directory or zip archive."
        )
    if path.is_file():
        return ZipArchiveSource(path, encoding)
    return DirectorySource(path, encoding)


def _has_feed_extension(file_name: str) -> bool:
    """Return whether a file name carries the feed file extension."""
    return file_name.lower().endswith(SOURCE_FILE_EXTENSION)
