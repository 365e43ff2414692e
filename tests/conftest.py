from __future__ import annotations

import logging
from typing import Callable, Iterator

import pytest

from digitseq.sequence import DigitSequence


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("digitseq")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(scope="session")
def max_id_bytes() -> bytes:
    return b"\xff" * 16


@pytest.fixture(scope="session")
def sample_id_bytes() -> bytes:
    # 48-bit timestamp followed by 80 bits of randomness.
    return bytes.fromhex("018f3c2a9b10") + bytes.fromhex("7d41c0ffee0123456789")


@pytest.fixture
def sequence_from_int() -> Callable[[int, int, int], DigitSequence]:
    def _factory(value: int, digit_width: int, n_digits: int) -> DigitSequence:
        mask = (1 << digit_width) - 1
        digits = [(value >> (digit_width * (n_digits - 1 - i))) & mask for i in range(n_digits)]
        return DigitSequence.from_digits(digits, digit_width)

    return _factory
