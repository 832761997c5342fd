"""
Expected decode error taxonomy.

Labels the harness can attach to a malformed input when it can tell, without
running the codec, why decoding must fail. They document intent; oracles only
require that decoding fails, not that the codec reports the same variant.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class InvalidSymbol:
    """A symbol outside the alphabet and pad set at ``position``."""

    position: int
    symbol: str


@dataclass(frozen=True)
class InvalidLength:
    """Unpadded symbol count that no byte sequence encodes to."""

    length: int


@dataclass(frozen=True)
class InvalidTrailingSymbol:
    """Final symbol carries non-zero bits that fall outside the output."""

    position: int


@dataclass(frozen=True)
class InvalidPadding:
    """Padding present where forbidden, absent where required, or miscounted."""

    position: int


@dataclass(frozen=True)
class OutputBufferTooSmall:
    """Caller-supplied output buffer cannot hold the decoded bytes."""

    required: int
    provided: int


ExpectedError = (
    InvalidSymbol | InvalidLength | InvalidTrailingSymbol | InvalidPadding | OutputBufferTooSmall
)


class BehaviorKind(Enum):
    """Whether a generated input is expected to decode."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ExpectedBehavior:
    """Expected decode outcome for a generated input."""

    kind: BehaviorKind
    error: ExpectedError | None = None

    @classmethod
    def success(cls) -> "ExpectedBehavior":
        """Create an expectation that decoding succeeds."""
        return cls(kind=BehaviorKind.SUCCESS)

    @classmethod
    def failure(cls, error: ExpectedError) -> "ExpectedBehavior":
        """Create an expectation that decoding fails with ``error``."""
        return cls(kind=BehaviorKind.ERROR, error=error)

    def is_success(self) -> bool:
        """Check if decoding is expected to succeed."""
        return self.kind == BehaviorKind.SUCCESS

    def __str__(self) -> str:
        if self.is_success():
            return "decode succeeds"
        return f"decode fails ({self.error})"
