from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from digitseq.config.loader import load_engine_config
from digitseq.core.errors import ConfigurationError


def _write_yaml(path: Path, content: str) -> Path:
    path.write_text(dedent(content), encoding="utf-8")
    return path


def test_load_engine_config_should_parse_valid_yaml(tmp_path: Path) -> None:
    path = _write_yaml(
        tmp_path / "digitseq.yml",
        """
        conversion:
          strict_truncation: true
        telemetry:
          log_level: debug
          log_dir: data/logs
        """,
    )
    config = load_engine_config(path)
    assert config.conversion.strict_truncation is True
    assert config.telemetry.log_level == "DEBUG"
    assert config.telemetry.log_dir == "data/logs"


def test_load_engine_config_should_default_blank_file(tmp_path: Path) -> None:
    path = _write_yaml(tmp_path / "digitseq.yml", "")
    config = load_engine_config(path)
    assert config.conversion.strict_truncation is False
    assert config.telemetry.log_level == "INFO"
    assert config.telemetry.log_dir is None


def test_load_engine_config_should_require_existing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_engine_config(tmp_path / "missing.yml")


def test_load_engine_config_should_require_mapping_root(tmp_path: Path) -> None:
    path = _write_yaml(tmp_path / "digitseq.yml", "- conversion\n- telemetry\n")
    with pytest.raises(ConfigurationError):
        load_engine_config(path)


def test_load_engine_config_should_wrap_yaml_errors(tmp_path: Path) -> None:
    path = _write_yaml(tmp_path / "digitseq.yml", "conversion: [unclosed\n")
    with pytest.raises(ConfigurationError):
        load_engine_config(path)


def test_load_engine_config_should_wrap_validation_errors(tmp_path: Path) -> None:
    path = _write_yaml(
        tmp_path / "digitseq.yml",
        """
        conversion:
          strict_truncaton: true
        """,
    )
    with pytest.raises(ConfigurationError) as excinfo:
        load_engine_config(path)
    assert "strict_truncaton" in str(excinfo.value)
