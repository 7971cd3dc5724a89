"""Fixture feed locations for tests."""

from __future__ import annotations

from pathlib import Path

_FIXTURES_ROOT = Path(__file__).resolve().parent / "fixtures"


def fixture_path(relative_path: str) -> Path:
    """Resolve a feed fixture under tests/fixtures.

    Args:
        relative_path: Feed directory or file below the fixtures root,
            for example ``sample-feed``.

    Returns:
        Absolute fixture path.
    """
    return _FIXTURES_ROOT / relative_path
