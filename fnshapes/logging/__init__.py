"""
Logging configuration and utilities for the functional shape library.
"""
from .config import configure_logging, get_logger, get_shape_logger

__all__ = ["configure_logging", "get_logger", "get_shape_logger"]
