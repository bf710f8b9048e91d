"""Error hierarchy for the linecfg package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConfigStoreError",
    "ConfigFileNotFoundError",
    "ConfigReadError",
    "KeyNotFoundError",
    "ValueNotFoundError",
    "IncompatibleFormatError",
    "NumberInvalidError",
    "ErrorCodes",
]

FORMAT_HINT = 'The acceptable format is: "Key = Value; any comment if needed"'


class ConfigStoreError(Exception):
    """Base error for all linecfg errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    @property
    def line_number(self) -> int | None:
        """The 1-based line the error was detected on, for parse errors."""
        return self.details.get("line_number")


class ConfigFileNotFoundError(ConfigStoreError):
    """Raised when a configuration file cannot be opened for reading."""

    _code = "FILE_NOT_FOUND"
    _template = "Cannot open a file with the given name: {path}"

    def __init__(self, path: str, reason: str | None = None, **kwargs: Any) -> None:
        message = self._template.format(path=path)
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            code=self._code,
            message=message,
            details={"path": path, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The path that could not be read."""
        return self.details["path"]


class ConfigReadError(ConfigFileNotFoundError):
    """Raised when reading fails after the file was opened.

    Subclasses :class:`ConfigFileNotFoundError` so callers handling open
    failures also handle mid-read failures.
    """

    _code = "READ_FAILED"
    _template = "Encountered an error while reading {path}"


class KeyNotFoundError(ConfigStoreError):
    """Raised when a key is requested but missing, or a line has no key."""

    def __init__(self, key: str | None = None, message: str | None = None, **kwargs: Any) -> None:
        details = kwargs.pop("details", None) or {}
        if key is not None:
            details["key"] = key
        if message is None:
            message = f"Key is not found: {key}" if key is not None else "Key is not found"
        super().__init__(code="KEY_NOT_FOUND", message=message, details=details, **kwargs)

    @property
    def key(self) -> str | None:
        """The requested key, when raised by a lookup."""
        return self.details.get("key")


class ValueNotFoundError(ConfigStoreError):
    """Raised when a line has a key and '=' but no value."""

    def __init__(self, message: str = "Value is not found", **kwargs: Any) -> None:
        super().__init__(code="VALUE_NOT_FOUND", message=message, **kwargs)


class IncompatibleFormatError(ConfigStoreError):
    """Raised when a line does not follow the ``Key = Value;`` format."""

    def __init__(self, message: str = FORMAT_HINT, **kwargs: Any) -> None:
        super().__init__(code="INCOMPATIBLE_FORMAT", message=message, **kwargs)


class NumberInvalidError(ConfigStoreError):
    """Raised when a stored value cannot be read as a number."""

    def __init__(self, key: str, value: str, reason: str | None = None, **kwargs: Any) -> None:
        message = f"The requested number is not valid and cannot be converted: {key} = {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            code="NUMBER_INVALID",
            message=message,
            details={"key": key, "value": value},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The key whose value was rejected."""
        return self.details["key"]

    @property
    def value(self) -> str:
        """The raw stored value."""
        return self.details["value"]


class ErrorCodes:
    """All linecfg error codes as constants.

    Example:
        if error.code == ErrorCodes.KEY_NOT_FOUND:
            use_fallback()
    """

    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    READ_FAILED = "READ_FAILED"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    VALUE_NOT_FOUND = "VALUE_NOT_FOUND"
    INCOMPATIBLE_FORMAT = "INCOMPATIBLE_FORMAT"
    NUMBER_INVALID = "NUMBER_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
