from __future__ import annotations

import logging

import pytest

from public_error.log_fields import ExceptionWithLoggingContext, LogField, LogLevel, field


@pytest.mark.parametrize(
    ("level", "python_level"),
    [
        (LogLevel.TRACE, 5),
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.WARN, logging.WARNING),
        (LogLevel.ERROR, logging.ERROR),
    ],
)
def test_log_level_maps_to_stdlib_level(level: LogLevel, python_level: int) -> None:
    assert level.python_level == python_level
    assert LogLevel.from_python_level(python_level) is level


def test_from_python_level_returns_none_for_unmapped_level() -> None:
    assert LogLevel.from_python_level(logging.CRITICAL) is None


@pytest.mark.parametrize("value", ["value", 42, 1.5, True, None])
def test_field_accepts_scalar_values(value: object) -> None:
    log_field = field("key", value)

    assert log_field == LogField(key="key", value=value)


@pytest.mark.parametrize("value", [{"nested": 1}, ["a"], object(), b"bytes"])
def test_field_rejects_non_scalar_values(value: object) -> None:
    with pytest.raises(TypeError, match="must be str, int, float, bool or None"):
        field("key", value)  # type: ignore[arg-type]


def test_field_rejects_non_string_key() -> None:
    with pytest.raises(TypeError, match="key must be str"):
        field(1, "value")  # type: ignore[arg-type]


def test_log_field_is_frozen() -> None:
    log_field = field("key", "value")

    with pytest.raises(AttributeError):
        log_field.value = "other"  # type: ignore[misc]


def test_exception_with_logging_context_keeps_field_order() -> None:
    exc = ExceptionWithLoggingContext(
        "failed",
        log_fields=[field("b", 1), field("a", 2), field("c", 3)],
    )

    assert str(exc) == "failed"
    assert [log_field.key for log_field in exc.log_fields] == ["b", "a", "c"]
    assert list(exc.logging_context()) == ["b", "a", "c"]


def test_logging_context_last_duplicate_key_wins() -> None:
    exc = ExceptionWithLoggingContext(log_fields=[field("key", "first"), field("key", "second")])

    assert len(exc.log_fields) == 2
    assert exc.logging_context() == {"key": "second"}


def test_exception_with_logging_context_defaults_to_no_fields() -> None:
    exc = ExceptionWithLoggingContext("failed")

    assert exc.log_fields == ()
    assert exc.logging_context() == {}


def test_logging_context_is_set_on_log_record(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tests.log_fields")
    exc = ExceptionWithLoggingContext("failed", log_fields=[field("orderId", "o-1"), field("attempt", 3)])

    with caplog.at_level(logging.INFO, logger="tests.log_fields"):
        logger.info(str(exc), extra=exc.logging_context())

    record = caplog.records[-1]
    assert record.getMessage() == "failed"
    assert record.orderId == "o-1"
    assert record.attempt == 3


@pytest.mark.parametrize("key", ["message", "msg", "args", "name", "levelno", "exc_info", "asctime"])
def test_field_rejects_keys_reserved_by_log_record(key: str) -> None:
    with pytest.raises(ValueError, match="reserved by logging.LogRecord"):
        field(key, "value")


def test_log_field_constructor_validates_like_field() -> None:
    with pytest.raises(TypeError, match="must be str, int, float, bool or None"):
        LogField(key="payload", value={"id": 1})  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="reserved"):
        LogField(key="message", value="shadowed")


def test_exception_with_logging_context_rejects_non_log_field_items() -> None:
    with pytest.raises(TypeError, match="must contain LogField instances"):
        ExceptionWithLoggingContext("failed", log_fields=[("key", "value")])  # type: ignore[list-item]


def test_every_valid_field_can_be_passed_as_extra(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tests.log_fields")
    exc = ExceptionWithLoggingContext(
        "failed", log_fields=[field("messageId", "m-1"), field("username", "kari")]
    )

    with caplog.at_level(logging.INFO, logger="tests.log_fields"):
        logger.info(str(exc), extra=exc.logging_context())

    record = caplog.records[-1]
    assert record.messageId == "m-1"
    assert record.username == "kari"
