"""Tests for logging configuration helpers."""

import inspect
import logging
from dataclasses import fields
from unittest.mock import Mock, patch

import structlog

from fnshapes.config.defaults import LoggingParams
from fnshapes.logging.config import (
    _configure_library_default,
    configure_logging,
    get_logger,
    get_shape_logger,
    log_binding_decision,
)


class TestConfigureLogging:
    """configure_logging sets up structlog over stdlib logging."""

    def teardown_method(self) -> None:
        configure_logging(level="WARNING")

    def test_sets_root_level(self) -> None:
        """The stdlib root level follows the requested level."""
        configure_logging(level="DEBUG", format_json=True)
        assert logging.getLogger().level == logging.DEBUG

        configure_logging(level="error")
        assert logging.getLogger().level == logging.ERROR

    def test_structlog_configured(self) -> None:
        """structlog.configure receives the renderer for the chosen format."""
        with patch("fnshapes.logging.config.structlog.configure") as mock_configure:
            configure_logging(level="INFO", format_json=True, include_timestamp=True)

        processors = mock_configure.call_args.kwargs["processors"]
        names = [type(p).__name__ for p in processors]
        assert names[-1] == "JSONRenderer"
        assert "TimeStamper" in names

    def test_console_renderer_by_default(self) -> None:
        """Human-readable output unless JSON is requested."""
        with patch("fnshapes.logging.config.structlog.configure") as mock_configure:
            configure_logging()

        processors = mock_configure.call_args.kwargs["processors"]
        assert type(processors[-1]).__name__ == "ConsoleRenderer"
        assert "TimeStamper" not in [type(p).__name__ for p in processors]

    def test_parameters_match_logging_params(self) -> None:
        """Every configure_logging option is a logging config field."""
        params = list(inspect.signature(configure_logging).parameters)
        assert params == [f.name for f in fields(LoggingParams)]


class TestLibraryDefault:
    """Before configure_logging, structlog defers to stdlib logging."""

    def test_routes_through_stdlib(self) -> None:
        """The import-time default uses the stdlib logger factory."""
        with patch("fnshapes.logging.config.structlog.is_configured", return_value=False), \
                patch("fnshapes.logging.config.structlog.configure") as mock_configure:
            _configure_library_default()

        kwargs = mock_configure.call_args.kwargs
        assert isinstance(kwargs["logger_factory"], structlog.stdlib.LoggerFactory)
        assert kwargs["processors"][0] is structlog.stdlib.filter_by_level

    def test_keeps_host_configuration(self) -> None:
        """An application that configured structlog first is left alone."""
        with patch("fnshapes.logging.config.structlog.is_configured", return_value=True), \
                patch("fnshapes.logging.config.structlog.configure") as mock_configure:
            _configure_library_default()

        mock_configure.assert_not_called()


class TestLoggers:
    """Logger factories."""

    def test_get_logger(self) -> None:
        """get_logger returns a usable logger."""
        logger = get_logger("fnshapes.test")
        assert hasattr(logger, "info")

    def test_shape_logger_binds_subsystem(self) -> None:
        """Shape loggers are bound to the shapes subsystem."""
        with patch("fnshapes.logging.config.get_logger") as mock_get:
            get_shape_logger("fnshapes.test")

        mock_get.return_value.bind.assert_called_once_with(subsystem="shapes")


class TestLogBindingDecision:
    """Standardized decision records."""

    def test_accept_logs_debug(self) -> None:
        """Accepted decisions log at debug."""
        logger = Mock()
        bound = logger.bind.return_value

        log_binding_decision(logger, "Predicate", True, "<lambda>", "signature matches")

        logger.bind.assert_called_once_with(
            shape_name="Predicate",
            decision="ACCEPT",
            target="<lambda>",
            reason="signature matches",
        )
        bound.debug.assert_called_once()
        bound.warning.assert_not_called()

    def test_reject_logs_warning_with_context(self) -> None:
        """Rejected decisions log at warning and carry context."""
        logger = Mock()
        with_context = logger.bind.return_value.bind.return_value

        log_binding_decision(logger, "Supplier", False, "<lambda>", "arity",
                             context={"signature": "Supplier.get() -> object"})

        logger.bind.return_value.bind.assert_called_once_with(
            context={"signature": "Supplier.get() -> object"}
        )
        with_context.warning.assert_called_once()
