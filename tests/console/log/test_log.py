"""
Tests for appconsole/log.

Tests key functionality including:
- Level resolution in LogConfig
- Record formatting with extra fields
- Logger creation by the factory
"""

import io
import logging

import pytest

from appconsole.log import (
    TRACE,
    ColorManager,
    InvalidLogLevelError,
    LogConfig,
    LogFormatter,
    Logger,
    LoggerFactory,
)

# =============================================================================
# Test LogConfig
# =============================================================================


@pytest.mark.unit
class TestLogConfig:
    """Test LogConfig level resolution."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("debug", logging.DEBUG),
            ("WARNING", logging.WARNING),
            ("trace", TRACE),
            ("15", 15),
            (logging.ERROR, logging.ERROR),
            (False, False),
            ("false", False),
            (True, logging.INFO),
        ],
    )
    def test_from_params(self, level, expected):
        """Test names, numbers and booleans are resolved."""
        assert LogConfig.from_params(level).level == expected

    def test_invalid_level(self):
        """Test unknown names raise InvalidLogLevelError."""
        with pytest.raises(InvalidLogLevelError) as exc_info:
            LogConfig.from_params("loud")

        assert exc_info.value.level == "loud"

    def test_from_config(self):
        """Test reading a nested section."""
        config = LogConfig.from_config(
            {"app": {"logging": {"level": "debug", "colors": False}}},
            section="app.logging",
        )

        assert config == LogConfig(level=logging.DEBUG, colors=False)

    def test_from_config_missing_section(self):
        """Test missing sections give defaults."""
        assert LogConfig.from_config({}) == LogConfig(level=logging.INFO, colors=True)


# =============================================================================
# Test LogFormatter
# =============================================================================


def _record(lg: Logger, level: int, msg: str, extra=None) -> logging.LogRecord:
    return lg.makeRecord(lg.name, level, __file__, 1, msg, (), None, extra=extra)


@pytest.mark.unit
class TestLogFormatter:
    """Test LogFormatter output."""

    def test_plain_line(self):
        """Test the line layout without colors."""
        formatter = LogFormatter(LogConfig(colors=False))
        record = _record(Logger("t"), logging.INFO, "hello", {"name": "db"})

        line = formatter.format(record)

        assert line.endswith("] [I] hello [name:db]")
        assert line.startswith("[")

    def test_list_fields(self):
        """Test list values are joined with commas."""
        formatter = LogFormatter(LogConfig(colors=False))
        record = _record(Logger("t"), logging.DEBUG, "x", {"args": ["a", "b"]})

        assert formatter.format(record).endswith("[args:a,b]")

    def test_no_fields(self):
        """Test lines without extra have no trailing fields."""
        formatter = LogFormatter(LogConfig(colors=False))

        assert formatter.format(_record(Logger("t"), logging.ERROR, "x")).endswith("[E] x")

    def test_colors(self):
        """Test the level letter is colored when enabled."""
        formatter = LogFormatter(LogConfig(colors=True))
        line = formatter.format(_record(Logger("t"), logging.ERROR, "x"))

        assert ColorManager.colorize("E", ColorManager.RED, bold=True) in line

    def test_colorize(self):
        """Test the color sequence layout."""
        assert ColorManager.colorize("x", ColorManager.RED) == "\x1b[31mx\x1b[0m"
        assert ColorManager.get_color_for_level(12345) is None


# =============================================================================
# Test LoggerFactory
# =============================================================================


@pytest.mark.unit
class TestLoggerFactory:
    """Test LoggerFactory."""

    def test_writes_to_stream(self):
        """Test records are written to the given stream."""
        stream = io.StringIO()
        lg = LoggerFactory.create("/test", LogConfig.from_params("debug", colors=False), stream)

        lg.debug("registered", extra={"name": "db"})

        assert "[D] registered [name:db]" in stream.getvalue()
        assert isinstance(lg, Logger)
        assert lg.propagate is False

    def test_level_filters(self):
        """Test records below the level are dropped."""
        stream = io.StringIO()
        lg = LoggerFactory.create("/test", LogConfig.from_params("warning", colors=False), stream)

        lg.info("hidden")
        lg.warning("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_trace(self):
        """Test the trace level sits below debug."""
        stream = io.StringIO()
        lg = LoggerFactory.create("/test", LogConfig.from_params("trace", colors=False), stream)

        lg.trace("deep")

        assert "[T] deep" in stream.getvalue()

    def test_disabled(self):
        """Test level False disables the logger."""
        stream = io.StringIO()
        lg = LoggerFactory.create("/test", LogConfig.from_params(False), stream)

        lg.error("nothing")

        assert lg.disabled
        assert stream.getvalue() == ""

    def test_returns_existing(self):
        """Test the same name returns the same logger."""
        config = LogConfig.from_params("info")

        assert LoggerFactory.create("/test", config) is LoggerFactory.create("/test", config)

    def test_configure_existing(self):
        """Test configure updates level and formatting of a cached logger."""
        stream = io.StringIO()
        lg = LoggerFactory.create("/test", LogConfig.from_params("error", colors=False), stream)

        LoggerFactory.configure(lg, LogConfig.from_params("debug", colors=False))
        lg.debug("now visible")

        assert lg.level == logging.DEBUG
        assert "[D] now visible" in stream.getvalue()

    def test_configure_disable_and_enable(self):
        """Test configure can disable and re-enable a logger."""
        lg = LoggerFactory.create("/test", LogConfig.from_params("info"))

        LoggerFactory.configure(lg, LogConfig.from_params(False))
        assert lg.disabled

        LoggerFactory.configure(lg, LogConfig.from_params("info"))
        assert not lg.disabled

    def test_create_root(self):
        """Test the root logger is named '/'."""
        assert LoggerFactory.create_root(LogConfig()).name == "/"
