"""ConfigStore: read-only key/value lookups over a configuration file."""

from __future__ import annotations

import logging
import math
import sys
from pathlib import Path
from types import MappingProxyType
from typing import IO, Iterator, Mapping, TypeVar

from linecfg.errors import (
    ConfigFileNotFoundError,
    ConfigReadError,
    KeyNotFoundError,
    NumberInvalidError,
)
from linecfg.options import LoaderOptions
from linecfg.parser import is_valid_number, iter_entries

__all__ = ["ConfigStore", "load"]

logger = logging.getLogger(__name__)

_HEADER = ("Key", "Value")

T = TypeVar("T")


class ConfigStore:
    """Key/value table parsed from a ``Key = Value; comment`` file.

    Built once by :meth:`load` and never mutated afterwards, so a single
    instance may be read from several threads. Values are kept as the raw
    parsed strings; numeric conversion happens on access.
    """

    def __init__(self, source: str | Path, content: Mapping[str, str]) -> None:
        self._source = str(source)
        self._content: Mapping[str, str] = MappingProxyType(dict(content))

    @classmethod
    def load(cls, path: str | Path, options: LoaderOptions | None = None) -> ConfigStore:
        """Read and parse the file at *path*.

        Either the whole file parses or an error is raised; no partially
        filled store is ever returned.

        Raises:
            ConfigFileNotFoundError: The file cannot be opened.
            ConfigReadError: Reading or decoding failed after opening.
            IncompatibleFormatError: A line is missing ``;`` or has a bad ``=`` count.
            KeyNotFoundError: A line has no key before ``=``.
            ValueNotFoundError: A line has no value after ``=``.
        """
        options = options or LoaderOptions()
        source = str(path)
        try:
            handle = open(path, encoding=options.encoding)
        except OSError as exc:
            raise ConfigFileNotFoundError(source, reason=exc.strerror or str(exc), cause=exc) from exc

        content: dict[str, str] = {}
        with handle:
            try:
                for key, value in iter_entries(handle, source=source):
                    if key in content:
                        logger.debug(f"Key '{key}' redefined in {source}; keeping the later value")
                    content[key] = value
            except (OSError, UnicodeDecodeError) as exc:
                logger.error(f"Encountered an error in input: {source}")
                raise ConfigReadError(source, reason=str(exc), cause=exc) from exc

        logger.debug(f"Configuration file is received: {source} ({len(content)} entries)")
        return cls(source, content)

    @property
    def source(self) -> str:
        """Path of the file this store was loaded from."""
        return self._source

    @property
    def content(self) -> Mapping[str, str]:
        """Read-only view of the parsed entries."""
        return self._content

    def get_string(self, key: str) -> str:
        """Return the raw value stored for *key*.

        Raises:
            KeyNotFoundError: *key* is not defined.
        """
        value = self._content.get(key)
        if value is None:
            logger.warning(f"Requesting {key}: not defined in {self._source}")
            raise KeyNotFoundError(key)
        return value

    def get_number(self, key: str, default: float) -> float:
        """Return the value of *key* as a float, or *default* if *key* is absent.

        Raises:
            NumberInvalidError: The stored value is not a plain decimal number.
        """
        value = self._content.get(key)
        if value is None:
            return self._fallback(key, default)
        if not is_valid_number(value):
            raise NumberInvalidError(key, value)
        return float(value)

    def get_integer(self, key: str, default: int, *, non_negative: bool = False) -> int:
        """Return the value of *key* as an int, or *default* if *key* is absent.

        Accepts ``50`` and ``50.0`` but rejects ``50.5``. Negative values are
        accepted unless *non_negative* is set, for counters such as an
        iteration count.

        Raises:
            NumberInvalidError: The value is not a number, is too large to
                represent, has a fractional part, or is negative when
                *non_negative* is set.
        """
        if key not in self._content:
            return self._fallback(key, default)
        raw = self._content[key]
        number = self.get_number(key, float(default))
        if not math.isfinite(number):
            raise NumberInvalidError(key, raw, reason="the parameter is too large to represent")
        if not number.is_integer():
            raise NumberInvalidError(key, raw, reason="the parameter must be an integer")
        if non_negative and number < 0:
            raise NumberInvalidError(key, raw, reason="the parameter cannot be negative")
        return int(number)

    def _fallback(self, key: str, default: T) -> T:
        logger.info(f"The parameter {key} is not defined in {self._source}; the default value of {default} is used")
        return default

    def keys(self) -> list[str]:
        """Return all keys, sorted."""
        return sorted(self._content)

    def render(self) -> str:
        """Render a ``Key | Value`` listing sorted by key."""
        lines = [" | ".join(_HEADER)]
        lines.extend(f"{key} | {self._content[key]}" for key in self.keys())
        return "\n".join(lines) + "\n"

    def print_content(self, file: IO[str] | None = None) -> None:
        """Write the :meth:`render` listing to *file* (stdout by default)."""
        (file or sys.stdout).write(self.render())

    def __contains__(self, key: object) -> bool:
        return key in self._content

    def __len__(self) -> int:
        return len(self._content)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"ConfigStore(source={self._source!r}, entries={len(self._content)})"


def load(path: str | Path, options: LoaderOptions | None = None) -> ConfigStore:
    """Load a configuration file. Shortcut for :meth:`ConfigStore.load`."""
    return ConfigStore.load(path, options)
