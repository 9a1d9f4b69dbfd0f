"""Configuration errors raised by the command line entry point."""

from typing import Optional


class ConfigurationError(Exception):
    """Merged configuration failed validation."""

    def __init__(self, message: str, issues: Optional[list] = None):
        super().__init__(message)
        self.issues = issues or []
        self.recoverable = False
