"""Shared type aliases for the digit sequence engine.

Digits and widths travel as plain ints; the aliases below only document
intent at the module boundaries.
"""
from __future__ import annotations

from typing import Iterable, TypeAlias, Union

DigitTuple: TypeAlias = tuple[int, ...]
ByteInput: TypeAlias = Union[bytes, bytearray, memoryview, Iterable[int]]

UINT64_BYTES = 8
BYTE_WIDTH = 8
