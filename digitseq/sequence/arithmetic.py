"""Carry-propagating primitives over least-significant-first digit tuples.

Every function in this module takes and returns little-endian tuples: index 0
holds the least-significant digit. Addition and radix conversion both walk the
value from its low end, so keeping that order internally avoids a reversal pass
per operation. :class:`~digitseq.sequence.digit_sequence.DigitSequence` is the
only caller that translates to and from the public big-endian view.
"""
from __future__ import annotations

import logging
from typing import Sequence

from digitseq.core.errors import DigitOverflowError
from digitseq.core.types import DigitTuple

logger = logging.getLogger("digitseq.sequence")


def digit_mask(width: int) -> int:
    """Return ``2**width - 1``."""

    return (1 << width) - 1


def validate_width(width: int, name: str = "digit_width") -> int:
    """Ensure ``width`` is a positive int and return it unchanged."""

    if isinstance(width, bool) or not isinstance(width, int):
        raise TypeError(f"{name} must be an int, got {type(width).__name__}")
    if width <= 0:
        raise ValueError(f"{name} must be positive, got {width}")
    return width


def max_output_length(n_digits: int, from_width: int, to_width: int) -> int:
    """Upper bound on the digits needed to re-express ``n_digits`` digits.

    ``n_digits`` digits of ``from_width`` bits hold ``n_digits * from_width``
    bits, which never need more than ``ceil(bits / to_width)`` target digits.
    """

    total_bits = n_digits * from_width
    return -(-total_bits // to_width)


def strip_high_zeros(digits: Sequence[int]) -> DigitTuple:
    """Drop zero digits from the most-significant (tail) end."""

    end = len(digits)
    while end and digits[end - 1] == 0:
        end -= 1
    return tuple(digits[:end])


def add_le(left: Sequence[int], right: Sequence[int], width: int) -> DigitTuple:
    """Schoolbook addition keeping exactly ``len(left)`` digits.

    Raises :class:`DigitOverflowError` either before any arithmetic, when
    ``right`` has more significant digits than ``left`` can hold, or after the
    last digit, when a carry is left over. The sum is never wrapped.
    """

    addend = strip_high_zeros(right)
    if len(addend) > len(left):
        logger.debug(
            "Addition rejected: addend wider than target",
            extra={"target_digits": len(left), "addend_digits": len(addend), "digit_width": width},
        )
        raise DigitOverflowError(
            f"addend has {len(addend)} significant digits but the target holds only {len(left)}"
        )

    mask = digit_mask(width)
    result: list[int] = []
    carry = 0
    for index, digit in enumerate(left):
        total = digit + carry
        if index < len(addend):
            total += addend[index]
        result.append(total & mask)
        carry = total >> width

    if carry:
        logger.debug(
            "Addition rejected: carry out of the most-significant digit",
            extra={"target_digits": len(left), "digit_width": width},
        )
        raise DigitOverflowError(
            f"sum does not fit in {len(left)} digits of {width} bits"
        )
    return tuple(result)


def convert_le(
    digits: Sequence[int],
    from_width: int,
    to_width: int,
    length: int | None = None,
    *,
    strict: bool = False,
) -> DigitTuple:
    """Re-chunk ``digits`` from ``from_width``-bit to ``to_width``-bit digits.

    The carry register buffers bits that have been read but not yet emitted;
    ``carried_bits`` counts them. New digits enter above the buffered bits, and
    a target digit is emitted every time ``to_width`` bits are available, so
    the output stays aligned to the low end of the value.

    With ``length`` set the output has exactly ``length`` digits: short
    results are padded with high-order zeros and long results keep their
    ``length`` least-significant digits. Without ``length`` the output stops
    at :func:`max_output_length` and a zero leftover carry emits nothing.
    """

    limit = max_output_length(len(digits), from_width, to_width) if length is None else length
    mask = digit_mask(to_width)
    result: list[int] = []
    carry = 0
    carried_bits = 0

    for index, digit in enumerate(digits):
        carry |= digit << carried_bits
        carried_bits += from_width
        while carried_bits >= to_width and len(result) < limit:
            result.append(carry & mask)
            carry >>= to_width
            carried_bits -= to_width
        if len(result) == limit:
            if carry or any(digits[index + 1:]):
                _report_truncation(len(digits), from_width, to_width, limit, strict)
            return tuple(result)

    if length is None:
        if carry:
            result.append(carry)
        return tuple(result)

    while len(result) < length:
        result.append(carry & mask)
        carry >>= to_width
    return tuple(result)


def _report_truncation(n_digits: int, from_width: int, to_width: int, length: int, strict: bool) -> None:
    if strict:
        raise DigitOverflowError(
            f"{n_digits} digits of {from_width} bits do not fit in {length} digits of {to_width} bits"
        )
    logger.debug(
        "Dropping nonzero high-order bits during conversion",
        extra={
            "source_digits": n_digits,
            "source_width": from_width,
            "target_width": to_width,
            "target_length": length,
        },
    )


__all__ = [
    "add_le",
    "convert_le",
    "digit_mask",
    "max_output_length",
    "strip_high_zeros",
    "validate_width",
]
