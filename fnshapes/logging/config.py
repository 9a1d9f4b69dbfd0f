"""
Centralized logging configuration for the functional shape library.

This module provides standardized logging configuration using structlog.
Library modules only obtain loggers here; configure_logging is called by
the process entry point before any shape is bound. Until then, structlog
forwards to stdlib logging, whose unconfigured root logger drops anything
below WARNING and writes the rest to stderr.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def _configure_library_default() -> None:
    """Route structlog through stdlib logging unless the host already configured it."""
    if structlog.is_configured():
        return

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = False,
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
    """
    log_level = getattr(logging, level.upper())

    # Demonstration output owns stdout
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s"
    )
    logging.getLogger().setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_shape_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for contract validation and closure binding.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger bound to the shapes subsystem
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="shapes",
    )


def log_binding_decision(
    logger: FilteringBoundLogger,
    shape_name: str,
    accepted: bool,
    target: str,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a contract or binding decision with standardized format.

    Args:
        logger: Structlog logger instance
        shape_name: Name of the shape being declared or bound
        accepted: Whether the declaration or closure was accepted
        target: Name of the contract class or closure under validation
        reason: Detailed reason for the decision
        context: Additional context data
    """
    bound_logger = logger.bind(
        shape_name=shape_name,
        decision="ACCEPT" if accepted else "REJECT",
        target=target,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if accepted:
        bound_logger.debug("Shape decision")
    else:
        bound_logger.warning("Shape decision")


_configure_library_default()
