"""Typed configuration models for the digit sequence engine.

The config subsystem relies on pydantic to validate YAML files and to provide
strongly-typed objects to :mod:`digitseq.bootstrap`. Every section has
defaults, so an empty file is a valid configuration.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConversionConfig(BaseModel):
    """Radix conversion policy.

    ``strict_truncation`` turns the silent drop of nonzero high-order bits in
    fixed-length conversions into a ``DigitOverflowError``.
    """

    strict_truncation: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")


class TelemetryConfig(BaseModel):
    """Logging switches consumed by ``configure_logging``."""

    log_level: str = Field("INFO")
    log_dir: Optional[str] = Field(None, description="Directory for the rotating JSON log")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level


class EngineConfig(BaseModel):
    """Top-level engine config composed of conversion and telemetry sections."""

    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    model_config = ConfigDict(frozen=True, extra="forbid")
