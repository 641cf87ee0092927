"""Closed set of error codes mapped to HTTP status codes.

Error codes are singleton instances on the class rather than an ``Enum`` so
that callers cannot come to depend on member names or ordinal positions, and
new codes can be added without shifting anything that already exists.
"""
from __future__ import annotations

from typing import Any, ClassVar, NoReturn


class ErrorCode:
    """Status code to use when a ``PublicError`` is mapped to an HTTP response.

    Deliberately independent of any web framework's status type, so that the
    error model can be adapted to other frameworks or protocols.
    """

    __slots__ = ("http_status_code",)

    http_status_code: int

    BAD_REQUEST: ClassVar[ErrorCode]
    UNAUTHORIZED: ClassVar[ErrorCode]
    FORBIDDEN: ClassVar[ErrorCode]
    NOT_FOUND: ClassVar[ErrorCode]
    CONFLICT: ClassVar[ErrorCode]
    # Sometimes we want a 500 response that still carries a descriptive message.
    INTERNAL_SERVER_ERROR: ClassVar[ErrorCode]

    entries: ClassVar[tuple[ErrorCode, ...]]

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError("ErrorCode cannot be instantiated; use one of the ErrorCode constants")

    def __init_subclass__(cls, **kwargs: Any) -> NoReturn:
        raise TypeError("ErrorCode cannot be subclassed")

    @classmethod
    def _create(cls, http_status_code: int) -> ErrorCode:
        instance = object.__new__(cls)
        object.__setattr__(instance, "http_status_code", http_status_code)
        return instance

    @classmethod
    def from_http_status_code(cls, status_code: int) -> ErrorCode | None:
        """Return the ErrorCode for an HTTP status code, or None if there is none."""
        for entry in cls.entries:
            if entry.http_status_code == status_code:
                return entry
        return None

    @property
    def label(self) -> str:
        return _LABELS.get(self, "Unknown ErrorCode")

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError("ErrorCode is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError("ErrorCode is immutable")

    def __copy__(self) -> ErrorCode:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> ErrorCode:
        return self

    def __reduce__(self) -> tuple[Any, tuple[int]]:
        return (_restore, (self.http_status_code,))

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        name = _NAMES.get(self)
        if name is None:
            return f"ErrorCode(http_status_code={self.http_status_code})"
        return f"ErrorCode.{name}"


def _restore(http_status_code: int) -> ErrorCode:
    error_code = ErrorCode.from_http_status_code(http_status_code)
    if error_code is None:
        raise ValueError(f"No ErrorCode for HTTP status code {http_status_code}")
    return error_code


ErrorCode.BAD_REQUEST = ErrorCode._create(400)
ErrorCode.UNAUTHORIZED = ErrorCode._create(401)
ErrorCode.FORBIDDEN = ErrorCode._create(403)
ErrorCode.NOT_FOUND = ErrorCode._create(404)
ErrorCode.CONFLICT = ErrorCode._create(409)
ErrorCode.INTERNAL_SERVER_ERROR = ErrorCode._create(500)

# When adding a new error code, add it here and to _LABELS.
ErrorCode.entries = (
    ErrorCode.BAD_REQUEST,
    ErrorCode.UNAUTHORIZED,
    ErrorCode.FORBIDDEN,
    ErrorCode.NOT_FOUND,
    ErrorCode.CONFLICT,
    ErrorCode.INTERNAL_SERVER_ERROR,
)

_LABELS: dict[ErrorCode, str] = {
    ErrorCode.BAD_REQUEST: "Bad Request",
    ErrorCode.UNAUTHORIZED: "Unauthorized",
    ErrorCode.FORBIDDEN: "Forbidden",
    ErrorCode.NOT_FOUND: "Not Found",
    ErrorCode.CONFLICT: "Conflict",
    ErrorCode.INTERNAL_SERVER_ERROR: "Internal Server Error",
}

_NAMES: dict[ErrorCode, str] = {
    value: name for name, value in vars(ErrorCode).items() if isinstance(value, ErrorCode)
}
