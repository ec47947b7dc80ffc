"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import CodecParams

_CODEC_KEYS = tuple(f.name for f in fields(CodecParams))
_SECTIONS = ("codec",)


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_codec_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate codec parameters."""
        errors = []

        for field, value in params.items():
            if field not in _CODEC_KEYS:
                errors.append(ValidationError(
                    field=field,
                    message="Unknown codec parameter",
                    value=value
                ))
            elif not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field=field,
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, value in config.items():
            if section not in _SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=value
                ))
            elif not isinstance(value, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=value
                ))

        if isinstance(config.get("codec"), dict):
            errors.extend(ConfigValidator.validate_codec_params(config["codec"]))

        return errors
