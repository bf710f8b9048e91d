"""Line grammar for ``Key = Value; comment`` configuration files."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from linecfg.errors import (
    FORMAT_HINT,
    IncompatibleFormatError,
    KeyNotFoundError,
    ValueNotFoundError,
)

__all__ = ["COMMENT_MARKER", "SEPARATOR", "parse_line", "iter_entries", "is_valid_number"]

logger = logging.getLogger(__name__)

COMMENT_MARKER = ";"
SEPARATOR = "="

_DIGITS = frozenset("0123456789")


def _location(line: str, line_number: int | None, source: str | None) -> dict[str, Any]:
    return {"path": source, "line_number": line_number, "line": line.rstrip("\r\n")}


def _where(line_number: int | None, source: str | None) -> str:
    if line_number is None:
        return ""
    return f" at {source or '<input>'}:{line_number}"


def parse_line(
    line: str,
    line_number: int | None = None,
    source: str | None = None,
) -> tuple[str, str] | None:
    """Parse one line into a ``(key, value)`` pair.

    Returns None for blank lines. Everything from the first ``;`` on is a
    comment, and every whitespace character is removed before splitting, so
    ``My File.txt`` is read as ``MyFile.txt``.

    Raises:
        IncompatibleFormatError: No ``;`` terminator, or not exactly one ``=``.
        KeyNotFoundError: The line starts with ``=``.
        ValueNotFoundError: The line ends with ``=``.
    """
    if not line.strip():
        return None

    details = _location(line, line_number, source)
    where = _where(line_number, source)

    body, marker, _comment = line.partition(COMMENT_MARKER)
    if not marker:
        logger.warning(f"Line must end with '{COMMENT_MARKER}'{where}")
        raise IncompatibleFormatError(f"Missing '{COMMENT_MARKER}'{where}. {FORMAT_HINT}", details=details)

    body = "".join(body.split())

    count = body.count(SEPARATOR)
    if count > 1:
        logger.warning(f"More than one '{SEPARATOR}' found{where}")
        raise IncompatibleFormatError(f"More than one '{SEPARATOR}'{where}. {FORMAT_HINT}", details=details)
    if count == 0:
        logger.warning(f"Use '{SEPARATOR}' between key and value{where}")
        raise IncompatibleFormatError(f"Missing '{SEPARATOR}'{where}. {FORMAT_HINT}", details=details)

    key, _, value = body.partition(SEPARATOR)
    if not key:
        logger.warning(f"Missing key before '{SEPARATOR}'{where}")
        raise KeyNotFoundError(message=f"Key is not found{where}", details=details)
    if not value:
        logger.warning(f"Missing value after '{SEPARATOR}'{where}")
        raise ValueNotFoundError(f"Value is not found{where}", details=details)
    return key, value


def iter_entries(lines: Iterable[str], source: str | None = None) -> Iterator[tuple[str, str]]:
    """Yield ``(key, value)`` pairs for each meaningful line, in file order."""
    for line_number, line in enumerate(lines, start=1):
        entry = parse_line(line, line_number=line_number, source=source)
        if entry is not None:
            yield entry


def is_valid_number(text: str) -> bool:
    """Check whether *text* follows the numeric grammar.

    Digits only, with at most one ``.`` anywhere and an optional ``-`` in
    the first position. At least one digit is required, so ``""``, ``"-"``
    and ``"."`` are rejected.
    """
    dots = 0
    digits = 0
    for i, c in enumerate(text):
        if c == ".":
            dots += 1
            if dots > 1:
                return False
        elif c == "-" and i == 0:
            continue
        elif c in _DIGITS:
            digits += 1
        else:
            return False
    return digits > 0
