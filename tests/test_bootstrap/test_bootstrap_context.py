from __future__ import annotations

import json
from pathlib import Path
from textwrap import dedent

import pytest

from digitseq.bootstrap import EngineContext, bootstrap
from digitseq.config.models import ConversionConfig, EngineConfig, TelemetryConfig
from digitseq.core.errors import ConfigurationError, DigitOverflowError
from digitseq.sequence import DigitSequence


def test_bootstrap_should_use_defaults_without_config() -> None:
    context = bootstrap()
    assert isinstance(context, EngineContext)
    assert context.config == EngineConfig()
    assert context.logger.name == "digitseq"


def test_bootstrap_should_load_config_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "digitseq.yml"
    path.write_text(
        dedent(
            f"""
            conversion:
              strict_truncation: true
            telemetry:
              log_level: WARNING
              log_dir: {tmp_path / 'logs'}
            """
        ),
        encoding="utf-8",
    )
    context = bootstrap(config_path=path)
    assert context.config.conversion.strict_truncation is True
    assert (tmp_path / "logs" / "digitseq.jsonl").exists()


def test_bootstrap_should_surface_config_errors(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        bootstrap(config_path=tmp_path / "missing.yml")


def test_context_convert_bits_should_apply_strict_policy() -> None:
    strict = bootstrap(EngineConfig(conversion=ConversionConfig(strict_truncation=True)))
    seq = DigitSequence.from_bytes(b"\xff\xff")
    with pytest.raises(DigitOverflowError):
        strict.convert_bits(seq, 5, length=2)
    assert strict.convert_bits(seq, 5, length=4).to_digit_list() == [1, 31, 31, 31]


def test_context_convert_bits_should_truncate_by_default() -> None:
    lenient = bootstrap(EngineConfig(telemetry=TelemetryConfig(log_level="ERROR")))
    seq = DigitSequence.from_bytes(b"\xff\xff")
    assert lenient.convert_bits(seq, 5, length=2).to_digit_list() == [31, 31]


def test_engine_records_should_reach_configured_log_file(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    context = bootstrap(EngineConfig(telemetry=TelemetryConfig(log_level="DEBUG", log_dir=str(log_dir))))
    DigitSequence.from_bytes(b"\xff\xff").convert_bits(5, length=2)
    for handler in context.logger.handlers:
        handler.flush()
    lines = (log_dir / "digitseq.jsonl").read_text(encoding="utf-8").splitlines()
    records = [json.loads(line) for line in lines]
    dropped = [r for r in records if r["message"].startswith("Dropping nonzero")]
    assert dropped
    assert dropped[0]["name"] == "digitseq.sequence"
    assert dropped[0]["target_length"] == 2
