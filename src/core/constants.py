"""Core constants used across GTFS reader modules.

This module centralizes format-level constants.
Keeping values here avoids magic literals in parsing logic.
"""

from __future__ import annotations

SOURCE_FILE_EXTENSION = ".txt"
DEFAULT_SOURCE_ENCODING = "utf-8-sig"
CSV_DELIMITER = ","
CSV_QUOTE_CHAR = '"'
DATE_FORMAT = "%Y%m%d"
DATE_TEXT_LENGTH = 8
HEX_COLOR_DIGITS = 6
HEX_COLOR_PREFIX = "#"
HEX_COLOR_ALPHA_MASK = 0xFF000000
HEX_COLOR_RGB_MASK = 0x00FFFFFF
INT32_SIGN_BIT = 1 << 31
UINT32_RANGE = 1 << 32
MINUTES_PER_HOUR = 60
SECONDS_PER_MINUTE = 60
TRUE_FLAG = "1"
FALSE_FLAG = "0"
STRICT_ENV_VAR = "GTFS_READER_STRICT"
ENCODING_ENV_VAR = "GTFS_READER_ENCODING"
TRUTHY_CONFIG_VALUES = ("1", "true", "yes", "on")
FALSY_CONFIG_VALUES = ("0", "false", "no", "off")
