"""
Alphabet value object for codec configurations.

Provides the three alphabet kinds the harness drives (standard, URL-safe and
custom permutations) with validation of custom symbol sets.
"""

from dataclasses import dataclass
from enum import Enum

from ..core.exceptions import ConfigurationError
from ..utilities.constants import ALPHABET_SIZE, PAD_SYMBOL, STANDARD_SYMBOLS, URL_SAFE_SYMBOLS


class AlphabetKind(Enum):
    """Alphabet variants supported by the harness."""

    STANDARD = "standard"
    URL_SAFE = "url_safe"
    CUSTOM = "custom"


@dataclass(frozen=True)
class AlphabetSpec:
    """
    Immutable alphabet selection.

    Standard and URL-safe specs resolve to the well-known symbol tables; a
    custom alphabet carries its own ordered 64-symbol string. Construction does
    not validate custom symbols, that happens in ``validated_symbols`` when
    the engine factory binds the alphabet, so a harness defect surfaces as a
    ConfigurationError at build time.
    """

    kind: AlphabetKind
    custom_symbols: str | None = None

    def __post_init__(self):
        """Check the kind/symbols pairing."""
        if self.kind == AlphabetKind.CUSTOM and self.custom_symbols is None:
            raise ConfigurationError("Custom alphabet requires a symbol sequence")
        if self.kind != AlphabetKind.CUSTOM and self.custom_symbols is not None:
            raise ConfigurationError(f"{self.kind.value} alphabet does not take custom symbols")

    @classmethod
    def standard(cls) -> "AlphabetSpec":
        return cls(AlphabetKind.STANDARD)

    @classmethod
    def url_safe(cls) -> "AlphabetSpec":
        return cls(AlphabetKind.URL_SAFE)

    @classmethod
    def custom(cls, symbols: str | bytes) -> "AlphabetSpec":
        """
        Create a custom alphabet.

        Args:
            symbols: Ordered 64-symbol sequence, as text or ASCII bytes
        """
        if isinstance(symbols, bytes | bytearray):
            try:
                symbols = bytes(symbols).decode("ascii")
            except UnicodeDecodeError as e:
                raise ConfigurationError(f"Custom alphabet is not ASCII text: {symbols!r}") from e
        return cls(AlphabetKind.CUSTOM, symbols)

    @property
    def symbols(self) -> str:
        """Ordered symbol table for this alphabet, index 0 to 63."""
        if self.kind == AlphabetKind.STANDARD:
            return STANDARD_SYMBOLS
        if self.kind == AlphabetKind.URL_SAFE:
            return URL_SAFE_SYMBOLS
        return self.custom_symbols

    def validated_symbols(self) -> str:
        """
        Return the symbol table after checking it is a usable alphabet.

        Raises:
            ConfigurationError: If the table is not 64 distinct printable
                ASCII symbols or contains the pad symbol
        """
        symbols = self.symbols
        if not isinstance(symbols, str):
            raise ConfigurationError(f"Alphabet symbols must be text, got {type(symbols)}")
        if len(symbols) != ALPHABET_SIZE:
            raise ConfigurationError(
                f"Alphabet must have exactly {ALPHABET_SIZE} symbols, got {len(symbols)}"
            )

        seen = set()
        for index, symbol in enumerate(symbols):
            if not symbol.isascii() or not symbol.isprintable() or symbol == " ":
                raise ConfigurationError(f"Unprintable alphabet symbol {symbol!r} at index {index}")
            if symbol == PAD_SYMBOL:
                raise ConfigurationError(f"Pad symbol {PAD_SYMBOL!r} is reserved (index {index})")
            if symbol in seen:
                raise ConfigurationError(f"Duplicate alphabet symbol {symbol!r} at index {index}")
            seen.add(symbol)

        return symbols

    def contains(self, symbol: str) -> bool:
        """Check if ``symbol`` is one of the 64 alphabet symbols."""
        return symbol in self.symbols

    def accepts(self, symbol: str) -> bool:
        """Check if ``symbol`` may appear in a decodable string (alphabet or pad)."""
        return symbol == PAD_SYMBOL or symbol in self.symbols

    def __str__(self) -> str:
        if self.kind == AlphabetKind.CUSTOM:
            return f"custom({self.custom_symbols})"
        return self.kind.value


STANDARD = AlphabetSpec.standard()
URL_SAFE = AlphabetSpec.url_safe()
