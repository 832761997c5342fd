"""
Tagged generated values.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class InputKind(Enum):
    """Kinds of value a generator produces."""

    RAW_BYTES = "raw_bytes"
    WELL_FORMED = "well_formed"
    MALFORMED = "malformed"
    CUSTOM_ALPHABET = "custom_alphabet"
    CONFIGURATION = "configuration"


@dataclass(frozen=True)
class GeneratedInput:
    """A generated value paired with its kind and the caller's size bound."""

    kind: InputKind
    value: Any
    max_size: int | None = None

    def __repr__(self) -> str:
        bound = f", max_size={self.max_size}" if self.max_size is not None else ""
        return f"GeneratedInput({self.kind.value}, {self.value!r}{bound})"
