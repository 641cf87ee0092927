"""Log severity and structured log fields attached to exceptions."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

FieldValue = Union[str, int, float, bool, None]

_FIELD_VALUE_TYPES = (str, int, float, bool, type(None))

TRACE = 5


class LogLevel(Enum):
    """Severity to log an exception at, independent of its error code."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def python_level(self) -> int:
        return _PYTHON_LEVELS[self]

    @classmethod
    def from_python_level(cls, level: int) -> LogLevel | None:
        for member, python_level in _PYTHON_LEVELS.items():
            if python_level == level:
                return member
        return None


_PYTHON_LEVELS: dict[LogLevel, int] = {
    LogLevel.TRACE: TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


# Keys the stdlib refuses in ``extra`` since they would overwrite LogRecord attributes.
RESERVED_KEYS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


@dataclass(frozen=True)
class LogField:
    """Key-value pair included when an exception is logged.

    Values are limited to plain scalars, and keys may not shadow ``LogRecord``
    attributes, so the fields can always be passed as ``extra``.
    """

    key: str
    value: FieldValue

    def __post_init__(self) -> None:
        if not isinstance(self.key, str):
            raise TypeError(f"Log field key must be str, got {type(self.key).__name__}")
        if self.key in RESERVED_KEYS:
            raise ValueError(f"Log field key {self.key!r} is reserved by logging.LogRecord")
        if not isinstance(self.value, _FIELD_VALUE_TYPES):
            raise TypeError(
                f"Log field {self.key!r} must be str, int, float, bool or None, "
                f"got {type(self.value).__name__}"
            )


def field(key: str, value: FieldValue) -> LogField:
    return LogField(key=key, value=value)


class ExceptionWithLoggingContext(Exception):
    """Exception carrying structured fields for whoever ends up logging it.

    Pass the result of ``logging_context()`` as ``extra`` to the stdlib logging
    API to have the fields set as attributes on the log record.
    """

    log_fields: tuple[LogField, ...] = ()

    def __init__(self, *args: object, log_fields: Iterable[LogField] = ()) -> None:
        super().__init__(*args)
        self.log_fields = tuple(log_fields)
        for log_field in self.log_fields:
            if not isinstance(log_field, LogField):
                raise TypeError(
                    f"log_fields must contain LogField instances (see field()), "
                    f"got {type(log_field).__name__}"
                )

    def logging_context(self) -> dict[str, FieldValue]:
        return {log_field.key: log_field.value for log_field in self.log_fields}
