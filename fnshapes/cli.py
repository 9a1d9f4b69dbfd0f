"""
Command line entry point for the functional shape demonstration.

Loads configuration, configures logging and binding checks, then imports
and runs the demonstration. The import is deferred so the example bindings
are checked and logged with the configured settings.
"""

import sys
from pathlib import Path
from typing import Any, Optional

from .config.defaults import BindingParams, DemoParams
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import ConfigurationError
from .logging.config import configure_logging, get_logger
from .shapes.binding import configure_binding

logger = get_logger(__name__)


def load_config(config_dir: Optional[Path] = None,
                overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Merge and validate configuration, raising ConfigurationError on issues."""
    config = ConfigLoader.create(config_dir).merge_config(overrides)
    errors = ConfigValidator.validate_config(config)
    if errors:
        raise ConfigurationError(
            f"Found {len(errors)} configuration error(s)",
            issues=errors,
        )
    return config


def main(config_dir: Optional[Path] = None) -> int:
    """Run the demonstration; returns the process exit code."""
    try:
        config = load_config(config_dir)
    except ConfigurationError as e:
        configure_logging()
        for issue in e.issues:
            logger.error("Invalid configuration", field=issue.field,
                         message=issue.message, value=issue.value)
        return 2

    log_params = config["logging"]
    configure_logging(
        level=log_params["level"],
        format_json=log_params["format_json"],
        include_timestamp=log_params["include_timestamp"],
    )

    configure_binding(BindingParams(**config["binding"]))

    from .demo.runner import run_demo

    run_demo(DemoParams(**config["demo"]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
