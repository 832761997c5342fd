"""
Shared protocol types for structural typing across generators and oracles.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.configuration import HarnessConfig


@runtime_checkable
class Driver(Protocol):
    """Deterministic source of scalars consumed by generators.

    Every draw either returns a value or raises DriverExhausted. The same
    underlying byte stream or seed must reproduce the same draws, which is
    what makes a failing case replayable.
    """

    def draw_int(self, low: int, high: int) -> int: ...

    def draw_bool(self) -> bool: ...

    def draw_bytes(self, size: int) -> bytes: ...


@runtime_checkable
class Codec(Protocol):
    """Minimal codec contract the oracles drive.

    The bundled GeneralPurposeEngine satisfies it; tests substitute faulty
    codecs to prove each oracle catches its bug class.
    """

    def encode(self, data: bytes) -> str: ...

    def decode(self, text: str) -> bytes: ...


EngineFactory = Callable[["HarnessConfig"], Codec]
