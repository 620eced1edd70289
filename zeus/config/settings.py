"""Typed runtime settings with dotenv support and startup validation."""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENVIRONMENT_PREFIX = "ZEUS_"
LOG_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
PORT_PATTERN = re.compile(r"\+?[0-9]+", re.ASCII)


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class ServiceSettings(BaseSettings):
    """Service settings for listener binding and logging.

    Environment variable names are the field names in uppercase with the
    `ZEUS_` prefix. Example: `http_port` reads from `ZEUS_HTTP_PORT`.

    Attributes:
        http_port: TCP port for the listener, `0` lets the OS pick one.
        bind_addr: IP address the listener binds to.
        log_level: Standard logging level name for process-wide logging.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENVIRONMENT_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    http_port: int = Field(default=8080, ge=0, le=65535)
    bind_addr: str = Field(default="0.0.0.0")
    log_level: str = Field(default="INFO")

    @field_validator("http_port", mode="before")
    @classmethod
    def _validate_port_digits(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("value must be an unsigned integer")
        if isinstance(value, int):
            return value
        if isinstance(value, str) and PORT_PATTERN.fullmatch(value):
            return int(value)
        raise ValueError("value must be an unsigned integer made of digits only")

    @field_validator("bind_addr")
    @classmethod
    def _validate_bind_addr(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in LOG_LEVEL_NAMES:
            raise ValueError(f"value must be one of {', '.join(LOG_LEVEL_NAMES)}")
        return normalized_value


def config_environment_name(field_name: str) -> str:
    """Return the environment variable name that feeds a settings field.

    Args:
        field_name: Settings field name.

    Returns:
        str: Prefixed uppercase environment variable name.
    """

    return f"{ENVIRONMENT_PREFIX}{field_name.upper()}"


def _config_format_validation_error(error: ValidationError) -> str:
    problems = []
    for detail in error.errors():
        location = detail.get("loc") or ("unknown",)
        problems.append(f"{config_environment_name(str(location[0]))}: {detail.get('msg', 'invalid value')}")
    return "; ".join(problems)


def config_parse_settings(environment: Mapping[str, str]) -> ServiceSettings:
    """Build validated settings from an explicit environment mapping.

    Only keys present in `environment` are used, missing keys take field
    defaults. Neither the process environment nor `.env` is consulted.

    Args:
        environment: Mapping of environment variable names to raw values.

    Returns:
        ServiceSettings: Validated settings object.

    Raises:
        SettingsLoadError: Raised when a value is present but invalid.
    """

    values: dict[str, Any] = {}
    for field_name, field_info in ServiceSettings.model_fields.items():
        values[field_name] = environment.get(config_environment_name(field_name), field_info.default)

    try:
        return ServiceSettings(_env_file=None, **values)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. {_config_format_validation_error(error)}"
        ) from error


def config_load_settings() -> ServiceSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        ServiceSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return ServiceSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            "Startup configuration validation failed. Update .env or environment variables. "
            f"{_config_format_validation_error(error)}"
        ) from error
