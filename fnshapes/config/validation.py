"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import BindingParams, DemoParams, LoggingParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def _check_bools(params: dict[str, Any], names: tuple[str, ...]) -> list[ValidationError]:
        errors = []
        for name in names:
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))
        return errors

    @staticmethod
    def validate_binding_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate binding parameters."""
        return ConfigValidator._check_bools(
            params, ("check_annotations", "strict_primitive_params")
        )

    @staticmethod
    def validate_demo_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate demonstration parameters."""
        errors = []

        for name in ("name", "other"):
            if name in params and not isinstance(params[name], str):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a string",
                    value=params[name]
                ))

        # bool is an int subclass but not a seed
        if "random_seed" in params:
            value = params["random_seed"]
            if not isinstance(value, int) or isinstance(value, bool):
                errors.append(ValidationError(
                    field="random_seed",
                    message="Must be an integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        errors.extend(ConfigValidator._check_bools(
            params, ("format_json", "include_timestamp")
        ))

        return errors

    @staticmethod
    def validate_known_fields(section: str, params: dict[str, Any],
                              params_type: type) -> list[ValidationError]:
        """Flag keys that no parameter dataclass field accepts."""
        known = {f.name for f in fields(params_type)}
        return [
            ValidationError(
                field=f"{section}.{key}",
                message="Unknown parameter",
                value=value
            )
            for key, value in params.items() if key not in known
        ]

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = (
            ("binding", BindingParams, ConfigValidator.validate_binding_params),
            ("demo", DemoParams, ConfigValidator.validate_demo_params),
            ("logging", LoggingParams, ConfigValidator.validate_logging_params),
        )

        for section, params_type, validate in sections:
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(ConfigValidator.validate_known_fields(section, params, params_type))
            errors.extend(validate(params))

        return errors
