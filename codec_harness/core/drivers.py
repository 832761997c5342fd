"""
Driver implementations.

A driver is the only entropy a generator may consume. Three flavours share
the Driver protocol: a byte-corpus replayer, a seeded PRNG and a bridge to a
Hypothesis ``draw`` callable.
"""

import random
from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from .exceptions import DriverExhausted

# Bytes consumed per integer draw by the corpus replayer
_INT_WIDTH = 8


def _check_range(low: int, high: int) -> None:
    if low > high:
        raise ValueError(f"Empty draw range [{low}, {high}]")


class ByteSliceDriver:
    """
    Replays draws from a fixed byte corpus.

    Integers consume eight little-endian bytes reduced modulo the range,
    booleans one byte. Running out of bytes raises DriverExhausted, so a
    short corpus yields an abandoned draw rather than a fabricated value.
    """

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def _take(self, size: int) -> bytes:
        if size > self.remaining:
            raise DriverExhausted(
                f"Needed {size} bytes at offset {self._offset}, {self.remaining} left"
            )
        chunk = self._data[self._offset : self._offset + size]
        self._offset += size
        return chunk

    def draw_int(self, low: int, high: int) -> int:
        _check_range(low, high)
        raw = int.from_bytes(self._take(_INT_WIDTH), "little")
        return low + raw % (high - low + 1)

    def draw_bool(self) -> bool:
        return bool(self._take(1)[0] & 1)

    def draw_bytes(self, size: int) -> bytes:
        return self._take(size)


class SeededDriver:
    """Seeded pseudo-random driver; never exhausts."""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._random = random.Random(seed)

    def draw_int(self, low: int, high: int) -> int:
        _check_range(low, high)
        return self._random.randint(low, high)

    def draw_bool(self) -> bool:
        return self._random.random() < 0.5

    def draw_bytes(self, size: int) -> bytes:
        return self._random.randbytes(size)


class HypothesisDriver:
    """
    Bridges generators onto a Hypothesis ``draw`` callable.

    Hypothesis records every choice, which gives shrinking and replay of a
    failing case for free. Hypothesis manages its own buffer overruns, so
    this driver never raises DriverExhausted.
    """

    def __init__(self, draw: Callable[[st.SearchStrategy], Any]):
        self._draw = draw

    def draw_int(self, low: int, high: int) -> int:
        _check_range(low, high)
        return self._draw(st.integers(min_value=low, max_value=high))

    def draw_bool(self) -> bool:
        return self._draw(st.booleans())

    def draw_bytes(self, size: int) -> bytes:
        return self._draw(st.binary(min_size=size, max_size=size))
