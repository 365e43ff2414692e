"""YAML loader for the config subsystem.

The helper reads one YAML file, validates it via models.py and returns a typed
:class:`EngineConfig`. Every failure surfaces as ``ConfigurationError`` with
the original exception chained.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from digitseq.core.errors import ConfigurationError

from .models import EngineConfig

_DEFAULT_CONFIG_PATH = Path("config") / "digitseq.yml"


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except OSError as exc:
        raise ConfigurationError(f"Failed to read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Malformed YAML in {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"YAML root must be a mapping in {path}")
    return data


def load_engine_config(path: Path | str = _DEFAULT_CONFIG_PATH) -> EngineConfig:
    """Load digitseq.yml (``conversion`` and ``telemetry`` sections).

    Unknown keys are rejected so that typos in switch names do not silently
    fall back to defaults.
    """

    config_path = Path(path)
    data = _read_yaml(config_path)
    try:
        return EngineConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid config in {config_path}: {exc}") from exc
