"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kubedeck.constants.defaults import (
    BENCH_STATUS_HOLD_SECONDS_DEFAULT,
    LOG_LEVEL_DEFAULT,
    NAMESPACE_DEFAULT,
    REFRESH_RATE_DEFAULT,
)
from kubedeck.constants.timeouts import KUBECTL_COMMAND_TIMEOUT


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Cluster selection
    current_context: str = ""
    current_cluster: str = ""
    namespace: str = NAMESPACE_DEFAULT

    # Table refresh
    refresh_rate: float = Field(default=REFRESH_RATE_DEFAULT, gt=0)  # seconds

    # kubectl
    kubectl_timeout: int = Field(default=KUBECTL_COMMAND_TIMEOUT, ge=1)

    # Benchmarks
    bench_status_hold_seconds: float = Field(
        default=BENCH_STATUS_HOLD_SECONDS_DEFAULT, ge=0
    )

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT

    @field_validator("namespace")
    @classmethod
    def _normalize_namespace(cls, value: str) -> str:
        value = (value or "").strip()
        if value in ("", "all", "-A"):
            return NAMESPACE_DEFAULT
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return (value or LOG_LEVEL_DEFAULT).strip().upper()

    @property
    def cluster_key(self) -> str:
        """Identifier used to name per-cluster files."""
        return self.current_cluster or self.current_context or "default"


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSaveError",
]
