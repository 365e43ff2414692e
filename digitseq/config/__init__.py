"""Configuration loading and validation package."""

from .loader import load_engine_config
from .models import ConversionConfig, EngineConfig, TelemetryConfig

__all__ = [
    "ConversionConfig",
    "EngineConfig",
    "TelemetryConfig",
    "load_engine_config",
]
