"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

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
    def validate_counter_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate counter parameters."""
        errors = []

        # bool is an int subclass, reject it explicitly
        if "max_groups" in params:
            value = params["max_groups"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                errors.append(ValidationError(
                    field="max_groups",
                    message="Must be a positive integer",
                    value=value
                ))

        if "separator" in params:
            value = params["separator"]
            if not isinstance(value, str) or len(value) != 1 or value.isalnum() or value.isspace():
                errors.append(ValidationError(
                    field="separator",
                    message="Must be a single non-alphanumeric, non-space character",
                    value=value
                ))

        if "strict_parse" in params:
            value = params["strict_parse"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="strict_parse",
                    message="Must be a boolean",
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

        for flag in ("format_json", "include_timestamp"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in ("counter", "logging"):
            if section in config and not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))

        if isinstance(config.get("counter"), dict):
            errors.extend(ConfigValidator.validate_counter_params(config["counter"]))

        if isinstance(config.get("logging"), dict):
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
