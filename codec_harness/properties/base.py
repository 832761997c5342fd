"""
Property definitions and the assertion plumbing shared by every oracle.

An oracle is a plain function ``check(value, factory)`` that builds codecs
through ``factory`` and raises PropertyViolation on the first broken
invariant. The violation carries a Counterexample with the generated inputs
and active configuration.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn

from ..core.exceptions import PropertyViolation
from ..core.types import Codec, EngineFactory
from ..domain.alphabet import AlphabetSpec
from ..domain.configuration import HarnessConfig, build_engine
from ..domain.counterexample import Counterexample
from ..domain.expected_error import (
    ExpectedBehavior,
    ExpectedError,
    InvalidLength,
    InvalidPadding,
    InvalidSymbol,
    InvalidTrailingSymbol,
)
from ..domain.generated_input import GeneratedInput
from ..generators.base import Generator
from ..utilities.constants import PAD_SYMBOL

_PAD_COUNTS = {0: 0, 1: 2, 2: 1}
_UNUSED_BITS_MASK = {2: 0x0F, 3: 0x03}


@dataclass(frozen=True)
class Property:
    """A named oracle bound to the generator it consumes."""

    name: str
    description: str
    generator: Generator
    check: Callable[[Any, EngineFactory], None]

    def __call__(self, value: Any, factory: EngineFactory = build_engine) -> None:
        self.check(value, factory)


class OracleContext:
    """
    Assertion helper for one oracle invocation.

    Holds the property name, tagged inputs and active configuration so every
    failure reports the same diagnostic payload.
    """

    def __init__(
        self, property_name: str, inputs: tuple[GeneratedInput, ...], config: HarnessConfig
    ):
        self.property_name = property_name
        self.inputs = inputs
        self.config = config

    def with_config(self, config: HarnessConfig) -> "OracleContext":
        return OracleContext(self.property_name, self.inputs, config)

    def fail(
        self, explanation: str, expected: ExpectedBehavior | None = None, **details: Any
    ) -> NoReturn:
        counterexample = Counterexample(
            property_name=self.property_name,
            inputs=self.inputs,
            config=self.config,
            explanation=explanation,
            expected_behavior=expected,
            details=details,
        )
        raise PropertyViolation(f"{self.property_name}: {explanation}", counterexample)

    def expect(self, condition: bool, explanation: str, **details: Any) -> None:
        if not condition:
            self.fail(explanation, **details)

    def expect_equal(self, actual: Any, expected: Any, explanation: str, **details: Any) -> None:
        if actual != expected:
            self.fail(explanation, actual=actual, expected_value=expected, **details)

    def encode(self, codec: Codec, data: bytes) -> str:
        """Encode ``data``; encoding never fails, so any exception is a violation."""
        try:
            return codec.encode(data)
        except Exception as e:
            self.fail(
                f"codec raised {type(e).__name__} while encoding: {e}",
                expected=ExpectedBehavior.success(),
                data=data,
                error=e,
            )

    def decode(self, codec: Codec, text: str) -> bytes:
        """
        Decode ``text`` through ``codec``.

        A ValueError is the codec rejecting the input and propagates to the
        caller. Any other exception is a crash and fails the property.
        """
        try:
            return codec.decode(text)
        except ValueError:
            raise
        except Exception as e:
            self.fail(f"codec raised {type(e).__name__} while decoding: {e}", text=text, error=e)

    def expect_decodes(self, codec: Codec, text: str, explanation: str, **details: Any) -> bytes:
        """Decode ``text`` or fail the property if the codec rejects it."""
        try:
            return self.decode(codec, text)
        except ValueError as e:
            self.fail(
                f"{explanation}: {e}",
                expected=ExpectedBehavior.success(),
                text=text,
                error=e,
                **details,
            )

    def expect_decode_fails(
        self, codec: Codec, text: str, error: ExpectedError, explanation: str
    ) -> None:
        """Fail the property if ``codec`` accepts ``text``."""
        try:
            decoded = self.decode(codec, text)
        except ValueError:
            return
        self.fail(
            explanation,
            expected=ExpectedBehavior.failure(error),
            text=text,
            decoded=decoded,
        )

    def expect_charset(self, encoded: str, alphabet: AlphabetSpec, explanation: str) -> None:
        """Every non-pad symbol of ``encoded`` is in ``alphabet`` and printable ASCII."""
        for position, symbol in enumerate(encoded):
            if symbol != PAD_SYMBOL and not alphabet.contains(symbol):
                self.fail(
                    f"{explanation}: symbol {symbol!r} at position {position} "
                    f"is outside the {alphabet} alphabet",
                    encoded=encoded,
                )
        self.expect(
            all(" " < symbol <= "~" for symbol in encoded),
            f"{explanation}: output leaves the printable 7-bit range",
            encoded=encoded,
        )


def expected_pad_count(byte_count: int) -> int:
    """Pad symbols a padding-emitting codec appends for ``byte_count`` bytes."""
    return _PAD_COUNTS[byte_count % 3]


def find_invalid_symbol(text: str, alphabet: AlphabetSpec) -> InvalidSymbol | None:
    """First symbol of ``text`` outside the alphabet plus pad, if any."""
    for position, symbol in enumerate(text):
        if not alphabet.accepts(symbol):
            return InvalidSymbol(position=position, symbol=symbol)
    return None


def expected_error_for(text: str, config: HarnessConfig) -> ExpectedError | None:
    """
    Statically deduce why ``text`` must fail to decode under ``config``.

    Returns:
        The first applicable expected error, or None if the harness cannot
        rule out a successful decode
    """
    invalid = find_invalid_symbol(text, config.alphabet)
    if invalid is not None:
        return invalid

    pad_start = text.find(PAD_SYMBOL)
    body = text if pad_start < 0 else text[:pad_start]
    padding = "" if pad_start < 0 else text[pad_start:]
    if padding.strip(PAD_SYMBOL):
        position = pad_start + len(padding) - len(padding.lstrip(PAD_SYMBOL))
        return InvalidSymbol(position=position, symbol=text[position])

    residual = len(body) % 4
    if residual == 1:
        return InvalidLength(length=len(body))

    acceptance = config.padding.acceptance
    canonical_pad = (4 - residual) % 4
    if padding and (not acceptance.allows_padded() or len(padding) != canonical_pad):
        return InvalidPadding(position=pad_start)
    if not padding and canonical_pad and not acceptance.allows_unpadded():
        return InvalidPadding(position=len(body))

    if residual:
        index = config.alphabet.symbols.index(body[-1])
        if index & _UNUSED_BITS_MASK[residual]:
            return InvalidTrailingSymbol(position=len(body) - 1)
    return None
