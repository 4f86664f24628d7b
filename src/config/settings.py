# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Holds detector defaults and logging options. Variables are prefixed with
``LOCALCOMMUNITY_`` (e.g. ``LOCALCOMMUNITY_BAGROW_MAX_SIZE=200``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from localcommunity.graph.models import BridgingMeasure

DetectorName = Literal["neighborhood", "bridge_bounding", "bagrow", "clauset", "lwp"]


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_prefix="LOCALCOMMUNITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Detectors ===
    default_detector: DetectorName = "bridge_bounding"
    neighborhood_hops: int = 1
    bridge_bounding_measure: BridgingMeasure = BridgingMeasure.ELB2
    bridge_bounding_threshold: float = 0.5
    bagrow_max_size: int = 500
    clauset_target_size: int = 100

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_max_bytes: int = 10 * 1024 * 1024
    log_backup_count: int = 5

    # --- Validators ---

    @field_validator("neighborhood_hops")
    @classmethod
    def validate_hops(cls, v: int) -> int:
        if v < 0:
            raise ValueError("neighborhood_hops must be >= 0")
        return v

    @field_validator("bagrow_max_size", "clauset_target_size")
    @classmethod
    def validate_sizes(cls, v: int) -> int:
        if v < 1:
            raise ValueError("community size limits must be >= 1")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Collect cross-field errors and raise them together."""
        errors: list[str] = []

        if not 0.0 <= self.bridge_bounding_threshold <= 1.0:
            errors.append("BRIDGE_BOUNDING_THRESHOLD must lie in [0.0, 1.0]")

        if self.log_file is not None and self.log_max_bytes <= 0:
            errors.append("LOG_MAX_BYTES must be positive when LOG_FILE is set")

        if self.log_backup_count < 0:
            errors.append("LOG_BACKUP_COUNT must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
