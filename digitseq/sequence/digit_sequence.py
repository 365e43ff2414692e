"""Immutable multi-digit unsigned numbers in an arbitrary bit-width base.

``DigitSequence`` is the public face of the engine. It always presents digits
most-significant first, while the carry-propagating work happens on the
least-significant-first tuples handled by :mod:`digitseq.sequence.arithmetic`.

Example::

    >>> a = DigitSequence.from_digits([1, 0], 8)
    >>> a.add_digits([1]).to_digit_list()
    [1, 1]
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from digitseq.core.errors import IncompatibleWidthError, InvalidDigitError
from digitseq.core.types import BYTE_WIDTH, UINT64_BYTES, ByteInput, DigitTuple

from .arithmetic import add_le, convert_le, strip_high_zeros, validate_width

_UINT64_LIMIT = 1 << (8 * UINT64_BYTES)


@dataclass(frozen=True, slots=True, init=False)
class DigitSequence:
    """Unsigned number stored as ``digit_width``-bit digits.

    Every operation returns a new instance. Equality and hashing use the width
    and the digits, so ``[0, 1]`` and ``[1]`` are different sequences even
    though they hold the same value.
    """

    digit_width: int
    _digits: DigitTuple = field(repr=False)

    def __init__(self, digits: Iterable[int] = (), digit_width: int = BYTE_WIDTH) -> None:
        validate_width(digit_width)
        values = tuple(digits)
        limit = 1 << digit_width
        for position, digit in enumerate(values):
            if isinstance(digit, bool) or not isinstance(digit, int):
                raise InvalidDigitError(
                    f"digit {position} must be an int, got {type(digit).__name__}"
                )
            if not 0 <= digit < limit:
                raise InvalidDigitError(
                    f"digit {position} = {digit} is outside [0, {limit}) for width {digit_width}"
                )
        object.__setattr__(self, "digit_width", digit_width)
        object.__setattr__(self, "_digits", values[::-1])

    @classmethod
    def _from_le(cls, digits: DigitTuple, digit_width: int) -> "DigitSequence":
        # Results of the arithmetic helpers are in range by construction.
        instance = cls.__new__(cls)
        object.__setattr__(instance, "digit_width", digit_width)
        object.__setattr__(instance, "_digits", digits)
        return instance

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_digits(cls, digits: Iterable[int], digit_width: int) -> "DigitSequence":
        """Build a sequence from most-significant-first ``digits``."""

        return cls(digits, digit_width)

    @classmethod
    def from_bytes(cls, raw: ByteInput) -> "DigitSequence":
        """Interpret ``raw`` as big-endian 8-bit digits.

        Byte strings are taken as-is; any other iterable goes through the
        same digit checks as :meth:`from_digits`.
        """

        if isinstance(raw, int):
            raise TypeError("from_bytes expects a byte string, use from_uint64 for integers")
        if isinstance(raw, (bytes, bytearray, memoryview)):
            return cls._from_le(tuple(bytes(raw)[::-1]), BYTE_WIDTH)
        return cls(raw, BYTE_WIDTH)

    @classmethod
    def from_uint64(cls, value: int) -> "DigitSequence":
        """Encode ``value`` as 8 big-endian bytes."""

        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be an int, got {type(value).__name__}")
        if not 0 <= value < _UINT64_LIMIT:
            raise ValueError(f"value {value} is outside the unsigned 64-bit range")
        return cls.from_bytes(value.to_bytes(UINT64_BYTES, "big"))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def add(self, other: "DigitSequence") -> "DigitSequence":
        """Return ``self + other`` with the digit count of ``self``.

        Raises :class:`IncompatibleWidthError` for mismatched widths and
        :class:`~digitseq.core.errors.DigitOverflowError` when the sum needs
        more digits than ``self`` has.
        """

        if not isinstance(other, DigitSequence):
            raise TypeError(
                f"add expects a DigitSequence, got {type(other).__name__}; "
                "use add_int or add_digits for plain values"
            )
        self._require_same_width(other, "add")
        return self._from_le(add_le(self._digits, other._digits, self.digit_width), self.digit_width)

    def add_int(self, value: int) -> "DigitSequence":
        """Add an unsigned 64-bit integer (as 8 big-endian bytes)."""

        return self.add(DigitSequence.from_uint64(value))

    def add_digits(self, digits: Iterable[int]) -> "DigitSequence":
        """Add most-significant-first ``digits`` of this sequence's width."""

        return self.add(DigitSequence.from_digits(digits, self.digit_width))

    def convert_bits(
        self,
        new_width: int,
        length: int | None = None,
        *,
        strict: bool = False,
    ) -> "DigitSequence":
        """Re-express the value with ``new_width``-bit digits.

        ``length`` pins the output digit count: short results gain leading
        zero digits, long results keep their ``length`` least-significant
        digits. Dropped nonzero bits raise
        :class:`~digitseq.core.errors.DigitOverflowError` only when ``strict``.
        """

        validate_width(new_width, "new_width")
        if length is not None:
            _validate_count(length, "length")
        converted = convert_le(self._digits, self.digit_width, new_width, length, strict=strict)
        return self._from_le(converted, new_width)

    # ------------------------------------------------------------------
    # Slicing
    # ------------------------------------------------------------------
    def chomp(self, offset: int | None = None, length: int | None = None) -> "DigitSequence":
        """Take ``length`` digits starting ``offset`` digits above the low end."""

        return self._from_le(_window(self._digits, offset, length), self.digit_width)

    def slice(self, offset: int | None = None, length: int | None = None) -> "DigitSequence":
        """Take ``length`` digits starting ``offset`` digits below the high end."""

        window = _window(self._digits[::-1], offset, length)
        return self._from_le(window[::-1], self.digit_width)

    def trim(self) -> "DigitSequence":
        """Drop leading zero digits; an all-zero sequence becomes empty."""

        return self._from_le(strip_high_zeros(self._digits), self.digit_width)

    def concat(self, low: "DigitSequence") -> "DigitSequence":
        """Return ``self`` digits followed by the digits of ``low``."""

        self._require_same_width(low, "concat")
        return self._from_le(low._digits + self._digits, self.digit_width)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_bytes(self) -> bytes:
        """Pack the value as big-endian bytes."""

        octets = convert_le(self._digits, self.digit_width, BYTE_WIDTH)
        return bytes(octets[::-1])

    def to_digit_list(self) -> list[int]:
        """Return the digits, most-significant first."""

        return list(self._digits[::-1])

    def to_int(self) -> int:
        value = 0
        for digit in reversed(self._digits):
            value = (value << self.digit_width) | digit
        return value

    def is_zero(self) -> bool:
        return not any(self._digits)

    def __len__(self) -> int:
        return len(self._digits)

    def __iter__(self) -> Iterator[int]:
        return reversed(self._digits)

    def __repr__(self) -> str:
        return f"DigitSequence(digits={self.to_digit_list()!r}, digit_width={self.digit_width})"

    def _require_same_width(self, other: "DigitSequence", operation: str) -> None:
        if other.digit_width != self.digit_width:
            raise IncompatibleWidthError(
                f"cannot {operation} width {other.digit_width} to width {self.digit_width}"
            )


def _validate_count(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def _window(digits: DigitTuple, offset: int | None, length: int | None) -> DigitTuple:
    start = 0 if offset is None else _validate_count(offset, "offset")
    if length is None:
        return digits[start:]
    return digits[start:start + _validate_count(length, "length")]


__all__ = ["DigitSequence"]
