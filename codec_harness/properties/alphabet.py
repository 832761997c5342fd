"""
Alphabet compliance property oracles.
"""

from ..core.types import EngineFactory
from ..domain.configuration import HarnessConfig
from ..generators import (
    ByteSequenceGenerator,
    ConfigurationGenerator,
    MalformedStringGenerator,
    TupleGenerator,
)
from ..utilities.constants import MALFORMED_MAX_SIZE, ROUNDTRIP_MAX_SIZE
from .base import OracleContext, Property, find_invalid_symbol

CHARACTER_SET_COMPLIANCE = "character_set_compliance"
INVALID_SYMBOL_DETECTION = "invalid_symbol_detection"

_bytes_and_config = TupleGenerator(
    ByteSequenceGenerator(ROUNDTRIP_MAX_SIZE), ConfigurationGenerator()
)
_malformed_and_config = TupleGenerator(
    MalformedStringGenerator(MALFORMED_MAX_SIZE), ConfigurationGenerator()
)


def check_character_set_compliance(
    value: tuple[bytes, HarnessConfig], factory: EngineFactory
) -> None:
    """Encoded output stays inside the configured alphabet and decodes back."""
    data, config = value
    ctx = OracleContext(CHARACTER_SET_COMPLIANCE, _bytes_and_config.tag(value), config)
    codec = factory(config)

    encoded = ctx.encode(codec, data)
    ctx.expect_charset(encoded, config.alphabet, "encoded output is not alphabet-compliant")
    decoded = ctx.expect_decodes(codec, encoded, "codec rejected its own output")
    ctx.expect_equal(decoded, data, "roundtrip changed the bytes", encoded=encoded)


def check_invalid_symbol_detection(
    value: tuple[str, HarnessConfig], factory: EngineFactory
) -> None:
    """
    A string holding a symbol outside alphabet plus pad never decodes.

    The malformed generator only biases toward invalid symbols, so the
    string is rescanned here. Strings that turn out clean may decode or not;
    when they decode, the re-encoded bytes must be alphabet-compliant.
    """
    text, config = value
    ctx = OracleContext(INVALID_SYMBOL_DETECTION, _malformed_and_config.tag(value), config)
    codec = factory(config)

    invalid = find_invalid_symbol(text, config.alphabet)
    if invalid is not None:
        ctx.expect_decode_fails(
            codec,
            text,
            invalid,
            f"codec accepted invalid symbol {invalid.symbol!r} at position {invalid.position}",
        )
        return

    try:
        decoded = ctx.decode(codec, text)
    except ValueError:
        return

    re_encoded = ctx.encode(codec, decoded)
    ctx.expect_charset(re_encoded, config.alphabet, "re-encoded output is not alphabet-compliant")


character_set_compliance = Property(
    name=CHARACTER_SET_COMPLIANCE,
    description="Encoded symbols belong to the configured alphabet and printable ASCII",
    generator=_bytes_and_config,
    check=check_character_set_compliance,
)

invalid_symbol_detection = Property(
    name=INVALID_SYMBOL_DETECTION,
    description="Symbols outside the alphabet and pad always make decoding fail",
    generator=_malformed_and_config,
    check=check_invalid_symbol_detection,
)
