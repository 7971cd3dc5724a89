"""Runtime configuration model for the GTFS reader.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

from core.constants import (
    DEFAULT_SOURCE_ENCODING,
    ENCODING_ENV_VAR,
    FALSY_CONFIG_VALUES,
    STRICT_ENV_VAR,
    TRUTHY_CONFIG_VALUES,
)
from core.errors import GtfsConfigError


@dataclass(frozen=True)
class ReaderConfig:
    """Validated reader configuration.

    Attributes:
        strict: Abort the whole read on any row violation when true,
            drop only the offending row when false.
        encoding: Text encoding used to decode feed files.
    """

    strict: bool = True
    encoding: str = DEFAULT_SOURCE_ENCODING

    @classmethod
    def from_env(cls) -> "ReaderConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            GtfsConfigError: If environment values are invalid.
        """
        strict_value = os.getenv(STRICT_ENV_VAR, "true")
        encoding_value = os.getenv(ENCODING_ENV_VAR, DEFAULT_SOURCE_ENCODING)
        return cls(
            strict=_parse_strict_flag(strict_value),
            encoding=_parse_encoding(encoding_value),
        )


def _parse_strict_flag(raw_value: str) -> bool:
    """Parse the strictness environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean flag.

    Raises:
        GtfsConfigError: If value is not a recognized boolean word.
    """
    normalized = raw_value.strip().lower()
    if normalized in TRUTHY_CONFIG_VALUES:
        return True
    if normalized in FALSY_CONFIG_VALUES:
        return False
    raise GtfsConfigError(
        f"Invalid {STRICT_ENV_VAR} value: "
        f"expected one of {TRUTHY_CONFIG_VALUES + FALSY_CONFIG_VALUES}, got '{raw_value}'. "
        f"Set {STRICT_ENV_VAR} to true or false."
    )


def _parse_encoding(raw_value: str) -> str:
    """Validate the source encoding environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Encoding name accepted by the codecs registry.

    Raises:
        GtfsConfigError: If the encoding is unknown.
    """
    try:
        codecs.lookup(raw_value)
    except LookupError as error:
        raise GtfsConfigError(
            f"Invalid {ENCODING_ENV_VAR} value: unknown encoding '{raw_value}'. "
            "Use a Python codec name such as utf-8-sig."
        ) from error
    return raw_value
