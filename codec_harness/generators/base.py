"""
Generator base classes.

A generator turns driver draws into one structured value. ``generate``
returns None only when the driver runs dry; that abandons the draw and is
never a property failure. ``as_strategy`` exposes the same construction to
Hypothesis, which then owns shrinking and replay.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from hypothesis import strategies as st

from ..core.drivers import HypothesisDriver
from ..core.exceptions import DriverExhausted
from ..core.types import Driver
from ..domain.generated_input import GeneratedInput, InputKind

logger = logging.getLogger(__name__)


@st.composite
def _driven(draw, generator: "Generator"):
    return generator.draw_from(HypothesisDriver(draw))


class Generator(ABC):
    """Base class for driver-backed generators."""

    kind: InputKind
    max_size: int | None = None

    def generate(self, driver: Driver) -> Any | None:
        """
        Draw one value from ``driver``.

        Returns:
            Generated value, or None if the driver was exhausted mid-draw
        """
        try:
            return self.draw_from(driver)
        except DriverExhausted as e:
            logger.debug(f"{type(self).__name__} abandoned draw: {e}")
            return None

    @abstractmethod
    def draw_from(self, driver: Driver) -> Any:
        """Build a value, letting DriverExhausted propagate."""

    def as_strategy(self) -> st.SearchStrategy:
        """Hypothesis strategy producing the same values as ``generate``."""
        return _driven(self)

    def tag(self, value: Any) -> tuple[GeneratedInput, ...]:
        """Wrap a generated value for counterexample reporting."""
        return (GeneratedInput(self.kind, value, self.max_size),)

    def __repr__(self) -> str:
        bound = f"max_size={self.max_size}" if self.max_size is not None else ""
        return f"{type(self).__name__}({bound})"


class TupleGenerator(Generator):
    """
    Compound draw over several generators, in order.

    Drawing the members from one driver keeps a compound case replayable from
    a single byte stream.
    """

    def __init__(self, *generators: Generator):
        if not generators:
            raise ValueError("TupleGenerator needs at least one member")
        self.generators = generators

    def draw_from(self, driver: Driver) -> tuple:
        return tuple(generator.draw_from(driver) for generator in self.generators)

    def tag(self, value: tuple) -> tuple[GeneratedInput, ...]:
        tagged: list[GeneratedInput] = []
        for generator, member in zip(self.generators, value, strict=True):
            tagged.extend(generator.tag(member))
        return tuple(tagged)

    def __repr__(self) -> str:
        members = ", ".join(repr(generator) for generator in self.generators)
        return f"TupleGenerator({members})"
