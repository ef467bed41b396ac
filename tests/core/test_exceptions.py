"""Tests for logkeeper.core.exceptions."""

from logkeeper.core.exceptions import (
    ConfigurationError,
    DuplicateNameError,
    LogFileError,
    LogKeeperError,
    NotFoundError,
    RegistryClosedError,
    SinkClosedError,
    TeardownError,
)


def test_hierarchy():
    """All exceptions should inherit from LogKeeperError."""
    for exc_cls in [
        ConfigurationError,
        DuplicateNameError,
        LogFileError,
        NotFoundError,
        RegistryClosedError,
        SinkClosedError,
        TeardownError,
    ]:
        assert issubclass(exc_cls, LogKeeperError)


def test_log_file_error_is_os_error():
    assert issubclass(LogFileError, OSError)
    err = LogFileError("cannot open app.log")
    assert "cannot open" in str(err)


def test_not_found_is_key_error_with_plain_message():
    err = NotFoundError("Logger 'x' does not exist.")
    assert isinstance(err, KeyError)
    assert str(err) == "Logger 'x' does not exist."


def test_teardown_error_collects_failures():
    err = TeardownError({"b": LogFileError("disk full"), "a": OSError("gone")})
    assert set(err.errors) == {"a", "b"}
    assert "2 logger(s): a, b" in str(err)


def test_catch_base():
    """Catching LogKeeperError should catch all subtypes."""
    try:
        raise DuplicateNameError("Logger 'a' already exists")
    except LogKeeperError as e:
        assert "already exists" in str(e)
