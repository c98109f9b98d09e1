"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kubedeck.constants.defaults import (
    AUTO_REFRESH_DEFAULT,
    LOG_LEVEL_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)
from kubedeck.constants.limits import LOGS_TAIL_MIN, REFRESH_INTERVAL_MIN
from kubedeck.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from kubedeck.constants.values import KUBECTL_BINARY, LOGS_TAIL


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Cluster access
    context: str | None = None
    kubectl_path: str = KUBECTL_BINARY
    request_timeout: str = CLUSTER_REQUEST_TIMEOUT

    # Detail pane
    logs_tail: int = Field(default=LOGS_TAIL, ge=LOGS_TAIL_MIN)

    # Periodic refresh of Top views
    auto_refresh: bool = AUTO_REFRESH_DEFAULT
    refresh_interval: int = Field(default=REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN)

    # Logging
    log_file: str = ""
    log_level: str = LOG_LEVEL_DEFAULT

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return normalized

    @field_validator("context")
    @classmethod
    def _blank_context_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
