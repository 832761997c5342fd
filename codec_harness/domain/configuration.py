"""
Harness configuration and the engine factory.

A HarnessConfig binds an alphabet, a padding policy and an engine kind with
the iteration and input-size budgets of a run. ``build_engine`` turns one
into a live codec instance.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum

from ..core.engine import GeneralPurposeEngine
from ..core.exceptions import ConfigurationError
from ..utilities.constants import DEFAULT_ITERATIONS, DEFAULT_MAX_INPUT_SIZE
from .alphabet import AlphabetSpec
from .padding import PaddingPolicy

logger = logging.getLogger(__name__)


class EngineKind(Enum):
    """Codec engine variants. Streaming and fixed-width engines would join here."""

    GENERAL_PURPOSE = "general_purpose"


@dataclass(frozen=True)
class HarnessConfig:
    """
    Immutable codec configuration plus run budgets.

    Two configs with equal alphabet, padding and engine must build
    observationally identical codecs; the cross-instance oracle checks this.
    """

    alphabet: AlphabetSpec = field(default_factory=AlphabetSpec.standard)
    padding: PaddingPolicy = PaddingPolicy.CANONICAL
    engine: EngineKind = EngineKind.GENERAL_PURPOSE
    iterations: int = DEFAULT_ITERATIONS
    max_input_size: int = DEFAULT_MAX_INPUT_SIZE

    def __post_init__(self):
        """Validate budgets after initialization."""
        if not isinstance(self.iterations, int) or self.iterations <= 0:
            raise ConfigurationError(f"iterations must be positive, got {self.iterations}")
        if not isinstance(self.max_input_size, int) or self.max_input_size < 0:
            raise ConfigurationError(
                f"max_input_size cannot be negative, got {self.max_input_size}"
            )

    def with_alphabet(self, alphabet: AlphabetSpec) -> "HarnessConfig":
        return replace(self, alphabet=alphabet)

    def with_padding(self, padding: PaddingPolicy) -> "HarnessConfig":
        return replace(self, padding=padding)

    def codec_key(self) -> tuple:
        """Fields that determine codec behaviour, ignoring run budgets."""
        return (self.alphabet, self.padding, self.engine)

    def build(self) -> GeneralPurposeEngine:
        """Build a codec instance from this configuration."""
        return build_engine(self)

    def to_dict(self) -> dict:
        return {
            "alphabet": str(self.alphabet),
            "padding": self.padding.value,
            "engine": self.engine.value,
            "iterations": self.iterations,
            "max_input_size": self.max_input_size,
        }

    def __str__(self) -> str:
        return f"{self.alphabet}/{self.padding.value}/{self.engine.value}"


def build_engine(config: HarnessConfig) -> GeneralPurposeEngine:
    """
    Create a codec instance from a configuration.

    Args:
        config: Configuration to bind

    Returns:
        Engine owning a copy of the resolved alphabet

    Raises:
        ConfigurationError: If the alphabet is malformed or the engine kind
            is unsupported. This indicates a harness defect and is never
            reported as a property violation.
    """
    if config.engine != EngineKind.GENERAL_PURPOSE:
        raise ConfigurationError(f"Unsupported engine kind: {config.engine}")

    symbols = config.alphabet.validated_symbols()
    logger.debug(f"Building {config.engine.value} engine for {config}")
    return GeneralPurposeEngine(symbols, config.padding)
