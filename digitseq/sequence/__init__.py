"""Digit sequence engine: immutable unsigned numbers in any bit-width base."""

from .arithmetic import max_output_length
from .digit_sequence import DigitSequence

__all__ = ["DigitSequence", "max_output_length"]
