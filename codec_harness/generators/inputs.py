"""
Input generators: raw bytes, well-formed codec strings and malformed strings.
"""

from ..core.types import Driver
from ..domain.alphabet import STANDARD, AlphabetSpec
from ..domain.generated_input import InputKind
from ..utilities.constants import NEVER_VALID_SYMBOLS, PAD_SYMBOL, STANDARD_SYMBOLS
from ..utilities.validators import validate_non_negative_number
from .base import Generator

# Residual symbol counts a real codec string can end with; 1 is never legal
_RESIDUALS = (0, 2, 3)


class ByteSequenceGenerator(Generator):
    """Arbitrary byte sequences of length 0 to ``max_size``."""

    kind = InputKind.RAW_BYTES

    def __init__(self, max_size: int):
        validate_non_negative_number(max_size, "max_size")
        self.max_size = max_size

    def draw_from(self, driver: Driver) -> bytes:
        size = driver.draw_int(0, self.max_size)
        return driver.draw_bytes(size)


class WellFormedStringGenerator(Generator):
    """
    Codec strings that a canonical-padding codec on the same alphabet accepts.

    Output is ``groups`` full four-symbol groups plus a residual of 0, 2 or 3
    symbols, never 1. A residual of 2 is followed by ``==`` and a residual of
    3 by ``=``. The last residual symbol is restricted to symbols whose bits
    beyond the final byte are zero, so the trailing-bits rule never rejects
    it. ``max_size`` bounds the number of non-pad symbols.
    """

    kind = InputKind.WELL_FORMED

    def __init__(self, alphabet: AlphabetSpec = STANDARD, max_size: int = 1000):
        validate_non_negative_number(max_size, "max_size")
        self.alphabet = alphabet
        self.max_size = max_size
        self._symbols = alphabet.validated_symbols()
        # Index multiples of 16 leave the low 4 bits clear, multiples of 4 the low 2
        self._final_symbols = {2: self._symbols[::16], 3: self._symbols[::4]}

    def draw_from(self, driver: Driver) -> str:
        groups = driver.draw_int(0, self.max_size // 4)
        residual = _RESIDUALS[driver.draw_int(0, len(_RESIDUALS) - 1)]
        if groups * 4 + residual > self.max_size:
            residual = 0

        symbols = [self._draw_symbol(driver) for _ in range(groups * 4)]
        if residual:
            symbols.extend(self._draw_symbol(driver) for _ in range(residual - 1))
            final_choices = self._final_symbols[residual]
            symbols.append(final_choices[driver.draw_int(0, len(final_choices) - 1)])
            symbols.append(PAD_SYMBOL * (4 - residual))

        return "".join(symbols)

    def _draw_symbol(self, driver: Driver) -> str:
        return self._symbols[driver.draw_int(0, len(self._symbols) - 1)]


class MalformedStringGenerator(Generator):
    """
    Strings biased toward invalid symbols.

    Each position independently draws a corrupt flag. Corrupt positions take
    a symbol from NEVER_VALID_SYMBOLS, the rest a standard-alphabet symbol.
    Nothing guarantees the whole string is invalid; consumers must rescan it.
    """

    kind = InputKind.MALFORMED

    invalid_symbols = NEVER_VALID_SYMBOLS
    valid_symbols = STANDARD_SYMBOLS

    def __init__(self, max_size: int):
        validate_non_negative_number(max_size, "max_size")
        self.max_size = max_size

    def draw_from(self, driver: Driver) -> str:
        size = driver.draw_int(0, self.max_size)
        symbols = []
        for _ in range(size):
            if driver.draw_bool():
                pool = self.invalid_symbols
            else:
                pool = self.valid_symbols
            symbols.append(pool[driver.draw_int(0, len(pool) - 1)])
        return "".join(symbols)
