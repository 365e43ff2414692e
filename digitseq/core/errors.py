"""Error hierarchy shared by the digitseq subsystems.

Callers are expected to catch :class:`DigitOverflowError` routinely (for
example to re-randomize an identifier field once an increment is exhausted).
The remaining errors signal programming or configuration mistakes.
"""
from __future__ import annotations


class DigitSeqError(Exception):
    """Base class for all custom exceptions in the package."""


class InvalidDigitError(DigitSeqError, ValueError):
    """Raised when a digit is outside ``[0, 2**digit_width)``."""


class IncompatibleWidthError(DigitSeqError, ValueError):
    """Raised when two sequences with different digit widths are combined."""


class DigitOverflowError(DigitSeqError, OverflowError):
    """Raised when a result does not fit the fixed digit count."""


class ConfigurationError(DigitSeqError):
    """Raised when configuration files are missing or invalid."""
