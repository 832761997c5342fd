"""
General-purpose codec engine adapter.

Wraps the standard library ``base64`` transcoder behind the narrow contract
the harness drives: an instance owns a 64-symbol table plus the pad symbol,
and a padding policy resolved to (emit, accept). Alphabet remapping and the
padding, length and trailing-bit rules live here; the byte-level transcoding
is delegated to ``base64``.
"""

import base64
import logging

from ..domain.padding import PaddingPolicy
from ..utilities.constants import PAD_SYMBOL, STANDARD_SYMBOLS
from .exceptions import (
    InvalidLengthError,
    InvalidPaddingError,
    InvalidSymbolError,
    InvalidTrailingSymbolError,
    OutputBufferTooSmallError,
)

logger = logging.getLogger(__name__)

# Bits of the final symbol that fall outside the output, keyed by residual length
_UNUSED_BITS_MASK = {2: 0x0F, 3: 0x03}


class GeneralPurposeEngine:
    """
    Codec instance bound to one alphabet and one padding policy.

    The engine keeps its own copy of the symbol table, so it never depends on
    the lifetime of whichever generator produced a custom alphabet.
    """

    def __init__(self, symbols: str, padding: PaddingPolicy):
        """
        Initialize engine.

        Args:
            symbols: Validated ordered 64-symbol table
            padding: Padding policy governing emission and acceptance
        """
        self._symbols = str(symbols)
        self._padding = padding
        self._emit, self._acceptance = padding.resolve()
        self._decode_table = {symbol: index for index, symbol in enumerate(self._symbols)}
        self._to_standard = str.maketrans(self._symbols, STANDARD_SYMBOLS)
        self._from_standard = bytes.maketrans(
            STANDARD_SYMBOLS.encode("ascii"), self._symbols.encode("ascii")
        )

    @property
    def symbols(self) -> str:
        """Ordered symbol table owned by this engine."""
        return self._symbols

    @property
    def padding(self) -> PaddingPolicy:
        return self._padding

    def encode(self, data: bytes | bytearray | memoryview) -> str:
        """Encode ``data``; total, never raises for byte input."""
        encoded = base64.b64encode(bytes(data)).translate(self._from_standard).decode("ascii")
        if not self._emit:
            encoded = encoded.rstrip(PAD_SYMBOL)
        return encoded

    def decode(self, text: str | bytes | bytearray) -> bytes:
        """
        Decode ``text`` under this engine's alphabet and padding rules.

        Args:
            text: Encoded symbols, as text or raw bytes

        Returns:
            Decoded bytes

        Raises:
            InvalidSymbolError: Symbol outside the alphabet, or a non-pad
                symbol after padding started
            InvalidLengthError: Unpadded length of 1 modulo 4
            InvalidPaddingError: Padding miscounted or not allowed by policy
            InvalidTrailingSymbolError: Unused bits set in the last symbol
        """
        if isinstance(text, bytes | bytearray):
            # latin-1 keeps one character per input byte, so positions line up
            text = bytes(text).decode("latin-1")

        pad_start = text.find(PAD_SYMBOL)
        if pad_start < 0:
            body, padding = text, ""
        else:
            body, padding = text[:pad_start], text[pad_start:]

        for position, symbol in enumerate(body):
            if symbol not in self._decode_table:
                raise InvalidSymbolError(position, symbol)
        for offset, symbol in enumerate(padding):
            if symbol != PAD_SYMBOL:
                raise InvalidSymbolError(pad_start + offset, symbol)

        residual = len(body) % 4
        if residual == 1:
            raise InvalidLengthError(len(body))

        canonical_pad = (4 - residual) % 4
        if padding:
            if not self._acceptance.allows_padded():
                raise InvalidPaddingError(pad_start, "padding is not accepted")
            if len(padding) != canonical_pad:
                raise InvalidPaddingError(
                    pad_start, f"expected {canonical_pad} pad symbols, found {len(padding)}"
                )
        elif canonical_pad and not self._acceptance.allows_unpadded():
            raise InvalidPaddingError(len(body), "canonical padding is required")

        if residual:
            last = body[-1]
            if self._decode_table[last] & _UNUSED_BITS_MASK[residual]:
                raise InvalidTrailingSymbolError(len(body) - 1, last)

        standard = body.translate(self._to_standard) + PAD_SYMBOL * canonical_pad
        return base64.b64decode(standard, validate=True)

    def decode_into(self, text: str | bytes | bytearray, buffer: bytearray) -> int:
        """
        Decode ``text`` into a caller-supplied buffer.

        Returns:
            Number of bytes written

        Raises:
            OutputBufferTooSmallError: If ``buffer`` cannot hold the output
        """
        decoded = self.decode(text)
        if len(buffer) < len(decoded):
            raise OutputBufferTooSmallError(required=len(decoded), provided=len(buffer))
        buffer[: len(decoded)] = decoded
        return len(decoded)

    def encoded_length(self, byte_count: int) -> int:
        """Length of ``encode`` output for ``byte_count`` input bytes."""
        if self._emit:
            return 4 * ((byte_count + 2) // 3)
        return (byte_count * 4 + 2) // 3

    @staticmethod
    def decoded_length_estimate(symbol_count: int) -> int:
        """Upper bound on decoded bytes for ``symbol_count`` symbols."""
        return (symbol_count + 3) // 4 * 3

    def __repr__(self) -> str:
        return f"GeneralPurposeEngine(symbols={self._symbols!r}, padding={self._padding.name})"
