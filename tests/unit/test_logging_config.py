"""
Tests for the logging configuration helpers.
"""

import logging

import pytest

from fetchfilter.logging_config import (
    get_log_format,
    get_log_level,
    get_logger,
    get_logging_config,
    log_performance,
)


class TestLoggingConfig:
    """Test cases for environment driven logging configuration."""

    def test_default_level(self, monkeypatch):
        """Test the default log level."""
        monkeypatch.delenv("FETCHFILTER_LOG_LEVEL", raising=False)
        assert get_log_level() == "INFO"

    def test_level_from_env(self, monkeypatch):
        """Test reading the log level from the environment."""
        monkeypatch.setenv("FETCHFILTER_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"
        assert get_logging_config()["loggers"]["fetchfilter"]["level"] == "DEBUG"

    def test_production_format(self, monkeypatch):
        """Test the structured format in production."""
        monkeypatch.setenv("FETCHFILTER_ENV", "production")
        assert "%(pathname)s" in get_log_format()

    def test_file_handler(self, monkeypatch, tmp_path):
        """Test that a log file adds a rotating file handler."""
        log_file = tmp_path / "fetchfilter.log"
        monkeypatch.setenv("FETCHFILTER_LOG_FILE", str(log_file))

        config = get_logging_config()

        assert config["handlers"]["file"]["filename"] == str(log_file)
        assert "file" in config["loggers"]["fetchfilter"]["handlers"]

    def test_no_file_handler_by_default(self, monkeypatch):
        """Test that no file handler is configured without a log file."""
        monkeypatch.delenv("FETCHFILTER_LOG_FILE", raising=False)
        assert "file" not in get_logging_config()["handlers"]

    def test_logger_names(self):
        """Test that loggers are placed under the fetchfilter hierarchy."""
        assert get_logger("parser").name == "fetchfilter.parser"
        assert get_logger("fetchfilter.expressions").name == "fetchfilter.expressions"
        assert get_logger("__main__").name == "fetchfilter.main"


class TestLogPerformance:
    """Test cases for the log_performance decorator."""

    def test_returns_result(self):
        """Test that the wrapped function's result is returned."""
        logger = logging.getLogger("fetchfilter.test")

        @log_performance(logger, "add")
        def add(a, b):
            return a + b

        assert add(1, 2) == 3
        assert add.__name__ == "add"

    def test_reraises(self):
        """Test that exceptions propagate."""
        logger = logging.getLogger("fetchfilter.test")

        @log_performance(logger, "fail")
        def fail():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            fail()

    def test_failure_logged_at_debug(self, caplog):
        """Test that failures are logged at DEBUG only."""
        caplog.set_level(logging.DEBUG, logger="fetchfilter")
        logger = logging.getLogger("fetchfilter.test")

        @log_performance(logger, "fail")
        def fail():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            fail()

        records = [r for r in caplog.records if "failed after" in r.getMessage()]
        assert records
        assert all(r.levelno == logging.DEBUG for r in records)


class TestLibraryLogging:
    """Test that importing the package leaves application logging alone."""

    def test_import_does_not_configure_handlers(self):
        """Test that the package logger propagates and writes nowhere itself."""
        import fetchfilter  # noqa: F401

        package_logger = logging.getLogger("fetchfilter")

        assert package_logger.propagate is True
        assert not any(isinstance(h, logging.StreamHandler) for h in package_logger.handlers)
        assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)

    def test_parse_failure_not_printed(self, capsys):
        """Test that a rejected definition prints nothing before raising."""
        from pydantic import ValidationError

        from fetchfilter import FilterParser

        with pytest.raises(ValidationError):
            FilterParser().parse({"operator": "xor"})

        assert capsys.readouterr().out == ""
