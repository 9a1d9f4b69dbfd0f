"""Default configuration parameters for the functional shape library."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BindingParams:
    """Closure binding checks applied by bind()."""
    check_annotations: bool = True               # Compare annotated returns to the shape
    strict_primitive_params: bool = True         # Compare annotated params of primitive shapes


@dataclass(frozen=True)
class DemoParams:
    """Inputs for the demonstration routine."""
    name: str = "Mohamed Ali"
    other: str = "Ali"
    random_seed: int = 42                        # Reseeded on every call


@dataclass(frozen=True)
class LoggingParams:
    """Logging setup applied by the entry point."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    binding: BindingParams
    demo: DemoParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        binding=BindingParams(),
        demo=DemoParams(),
        logging=LoggingParams(),
    )
