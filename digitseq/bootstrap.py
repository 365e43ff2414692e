"""Wire configuration and logging into a ready-to-use engine context.

The sequence package itself holds no configuration; ``EngineContext`` carries
the loaded :class:`EngineConfig` and applies it on behalf of callers that want
the configured conversion policy instead of passing ``strict`` themselves.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from digitseq.config.loader import load_engine_config
from digitseq.config.models import EngineConfig
from digitseq.sequence import DigitSequence
from digitseq.telemetry import configure_logging


@dataclass(frozen=True, slots=True)
class EngineContext:
    """Loaded config plus the configured package logger."""

    config: EngineConfig
    logger: logging.Logger

    def convert_bits(
        self,
        sequence: DigitSequence,
        new_width: int,
        length: int | None = None,
    ) -> DigitSequence:
        """``sequence.convert_bits`` with the configured truncation policy."""

        return sequence.convert_bits(
            new_width,
            length,
            strict=self.config.conversion.strict_truncation,
        )


def bootstrap(
    config: EngineConfig | None = None,
    *,
    config_path: Path | str | None = None,
) -> EngineContext:
    """Load config (unless given), configure logging and return the context."""

    if config is None:
        config = load_engine_config(config_path) if config_path is not None else EngineConfig()
    telemetry = config.telemetry
    logger = configure_logging(
        level=telemetry.log_level,
        log_dir=Path(telemetry.log_dir) if telemetry.log_dir else None,
    )
    logger.info(
        "Engine bootstrapped",
        extra={"strict_truncation": config.conversion.strict_truncation},
    )
    return EngineContext(config=config, logger=logger)


__all__ = ["EngineContext", "bootstrap"]
