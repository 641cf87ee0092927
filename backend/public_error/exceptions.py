"""Exception with a message that is meant to be exposed publicly to users."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Sequence

from .error_codes import ErrorCode
from .log_fields import ExceptionWithLoggingContext, LogField, LogLevel


@dataclass(eq=False)
class PublicError(ExceptionWithLoggingContext):
    """Error whose message is safe to show to the client.

    An HTTP exception handler is expected to catch it, log it and turn it into
    a Problem Details response: ``error_code`` gives the status,
    ``public_message`` the ``title`` and ``public_detail`` the ``detail``.

    When mapping a different exception to a ``PublicError``, set ``cause`` so
    the original exception is included in the logs. Pass ``public_message`` and
    ``public_detail`` as keyword arguments to make it explicit that they are
    exposed publicly::

        raise PublicError(
            ErrorCode.BAD_REQUEST,
            public_message="Invalid request body",
            public_detail="Missing required field 'id'",
        )

    ``internal_detail`` is only part of the logged ``message``, never of the
    response. ``severity`` overrides the level the handler would otherwise pick
    from the error code. ``log_fields`` are included when the error is logged.
    """

    error_code: ErrorCode
    public_message: str
    public_detail: str | None = None
    internal_detail: str | None = None
    cause: BaseException | None = None
    severity: LogLevel | None = None
    log_fields: Sequence[LogField] = ()

    def __post_init__(self) -> None:
        super().__init__(self.message, log_fields=self.log_fields)
        if self.cause is not None:
            self.__cause__ = self.cause

    @property
    def message(self) -> str:
        """Public message, public detail and internal detail, on the format
        ``Public message - Public detail (Internal detail)``.

        Not for clients, since it may include ``internal_detail``. Use
        ``public_message``/``public_detail`` directly instead.
        """
        if self.public_detail is None and self.internal_detail is None:
            return self.public_message

        parts = [self.public_message]
        if self.public_detail is not None:
            parts.append(" - ")
            parts.append(self.public_detail)
        if self.internal_detail is not None:
            parts.append(" (")
            parts.append(self.internal_detail)
            parts.append(")")
        return "".join(parts)

    def __str__(self) -> str:
        return self.message

    def __reduce__(self) -> tuple[Any, tuple[type[PublicError], dict[str, Any]]]:
        # BaseException would rebuild from args, which only holds the message.
        return (_rebuild, (type(self), {f.name: getattr(self, f.name) for f in fields(self)}))


def _rebuild(cls: type[PublicError], kwargs: dict[str, Any]) -> PublicError:
    return cls(**kwargs)
