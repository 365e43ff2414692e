"""Fixed/variable-radix digit sequence arithmetic for sortable identifiers.

The package is split into subsystems (core, sequence, config, telemetry).
Library callers normally only need :class:`DigitSequence` and the error
classes re-exported here.
"""

from digitseq.core.errors import (
    ConfigurationError,
    DigitOverflowError,
    DigitSeqError,
    IncompatibleWidthError,
    InvalidDigitError,
)
from digitseq.sequence import DigitSequence, max_output_length

__all__ = [
    "ConfigurationError",
    "DigitOverflowError",
    "DigitSeqError",
    "DigitSequence",
    "IncompatibleWidthError",
    "InvalidDigitError",
    "max_output_length",
]
