"""
Property oracles for the codec harness.

Each property pairs a generator with a check that raises PropertyViolation on
its first counterexample. ALL_PROPERTIES lists the canonical set in order.
"""

from .alphabet import character_set_compliance, invalid_symbol_detection
from .base import (
    OracleContext,
    Property,
    expected_error_for,
    expected_pad_count,
    find_invalid_symbol,
)
from .roundtrip import (
    cross_instance_consistency,
    custom_alphabet_roundtrip,
    decode_encode_roundtrip,
    encode_decode_roundtrip,
    padding_mode_roundtrip,
)

ALL_PROPERTIES: tuple[Property, ...] = (
    encode_decode_roundtrip,
    decode_encode_roundtrip,
    cross_instance_consistency,
    custom_alphabet_roundtrip,
    padding_mode_roundtrip,
    character_set_compliance,
    invalid_symbol_detection,
)

_BY_NAME = {prop.name: prop for prop in ALL_PROPERTIES}


def get_property(name: str) -> Property:
    """
    Look up a canonical property by name.

    Raises:
        KeyError: If no property has that name
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        known = ", ".join(sorted(_BY_NAME))
        raise KeyError(f"Unknown property {name!r}; known properties: {known}") from None


__all__ = [
    "ALL_PROPERTIES",
    "OracleContext",
    "Property",
    "character_set_compliance",
    "cross_instance_consistency",
    "custom_alphabet_roundtrip",
    "decode_encode_roundtrip",
    "encode_decode_roundtrip",
    "expected_error_for",
    "expected_pad_count",
    "find_invalid_symbol",
    "get_property",
    "invalid_symbol_detection",
    "padding_mode_roundtrip",
]
