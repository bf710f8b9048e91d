"""linecfg - Read-only key/value store for ``Key = Value;`` configuration files."""

from __future__ import annotations

# Store
from linecfg.store import ConfigStore, load

# Options
from linecfg.options import LoaderOptions

# Grammar
from linecfg.parser import is_valid_number, parse_line

# Errors
from linecfg.errors import (
    ConfigFileNotFoundError,
    ConfigReadError,
    ConfigStoreError,
    ErrorCodes,
    IncompatibleFormatError,
    KeyNotFoundError,
    NumberInvalidError,
    ValueNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Store
    "ConfigStore",
    "load",
    # Options
    "LoaderOptions",
    # Grammar
    "parse_line",
    "is_valid_number",
    # Errors
    "ErrorCodes",
    "ConfigStoreError",
    "ConfigFileNotFoundError",
    "ConfigReadError",
    "KeyNotFoundError",
    "ValueNotFoundError",
    "IncompatibleFormatError",
    "NumberInvalidError",
]
