"""
Configuration and custom alphabet generators.
"""

from ..core.types import Driver
from ..domain.alphabet import STANDARD, URL_SAFE
from ..domain.configuration import EngineKind, HarnessConfig
from ..domain.generated_input import InputKind
from ..domain.padding import ALL_POLICIES
from ..utilities.constants import (
    ALPHABET_SIZE,
    DEFAULT_ITERATIONS,
    GENERATED_CONFIG_MAX_INPUT_SIZE,
    STANDARD_SYMBOLS,
)
from .base import Generator

# Custom alphabets come from CustomAlphabetGenerator, not from here
_GENERATED_ALPHABETS = (STANDARD, URL_SAFE)


class ConfigurationGenerator(Generator):
    """Random well-known alphabet with a uniformly drawn padding policy."""

    kind = InputKind.CONFIGURATION

    def __init__(
        self,
        iterations: int = DEFAULT_ITERATIONS,
        max_input_size: int = GENERATED_CONFIG_MAX_INPUT_SIZE,
    ):
        self.iterations = iterations
        self.max_input_size = max_input_size

    def draw_from(self, driver: Driver) -> HarnessConfig:
        alphabet = _GENERATED_ALPHABETS[driver.draw_int(0, len(_GENERATED_ALPHABETS) - 1)]
        padding = ALL_POLICIES[driver.draw_int(0, len(ALL_POLICIES) - 1)]
        return HarnessConfig(
            alphabet=alphabet,
            padding=padding,
            engine=EngineKind.GENERAL_PURPOSE,
            iterations=self.iterations,
            max_input_size=self.max_input_size,
        )


class CustomAlphabetGenerator(Generator):
    """
    Permutations of a 64-symbol base alphabet.

    Runs a Fisher-Yates shuffle with every swap index drawn from the driver,
    so the result holds exactly the base symbols, each once.
    """

    kind = InputKind.CUSTOM_ALPHABET

    def __init__(self, base_symbols: str = STANDARD_SYMBOLS):
        if len(base_symbols) != ALPHABET_SIZE or len(set(base_symbols)) != ALPHABET_SIZE:
            raise ValueError(f"base_symbols must be {ALPHABET_SIZE} distinct symbols")
        self.base_symbols = base_symbols

    def draw_from(self, driver: Driver) -> str:
        symbols = list(self.base_symbols)
        for i in range(len(symbols) - 1, 0, -1):
            j = driver.draw_int(0, i)
            symbols[i], symbols[j] = symbols[j], symbols[i]
        return "".join(symbols)
