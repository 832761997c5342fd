"""
Exception hierarchy for the codec harness.

Three failure classes matter to a run: driver exhaustion (not a failure),
property violations (the reportable outcome) and configuration errors (a
harness bug, fatal). Codec decode failures form a separate family raised by
the engine adapter.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..domain.expected_error import (
    ExpectedError,
    InvalidLength,
    InvalidPadding,
    InvalidSymbol,
    InvalidTrailingSymbol,
    OutputBufferTooSmall,
)

if TYPE_CHECKING:
    from ..domain.counterexample import Counterexample


class HarnessError(Exception):
    """Base class for all harness errors."""


class DriverExhausted(HarnessError):
    """Raised by a driver that has no entropy left for the requested draw."""


class ConfigurationError(HarnessError, ValueError):
    """A configuration could not be turned into a codec instance.

    Generators are required never to produce such configurations, so this
    signals a defect in the harness and must abort the run.
    """


class PropertyViolation(HarnessError, AssertionError):
    """An oracle found a counterexample.

    Carries the offending inputs and configuration so the orchestrator can
    report them without re-running anything.
    """

    def __init__(self, message: str, counterexample: "Counterexample | None" = None):
        super().__init__(message)
        self.message = message
        self.counterexample = counterexample

    def __str__(self) -> str:
        if self.counterexample is None:
            return self.message
        return f"{self.message}\n{self.counterexample.describe()}"


class DecodeError(HarnessError, ValueError, ABC):
    """Base class for codec decode failures."""

    @abstractmethod
    def to_expected(self) -> ExpectedError:
        """Map this failure onto the expected-error taxonomy."""


class InvalidSymbolError(DecodeError):
    def __init__(self, position: int, symbol: str):
        super().__init__(f"Invalid symbol {symbol!r} at position {position}")
        self.position = position
        self.symbol = symbol

    def to_expected(self) -> ExpectedError:
        return InvalidSymbol(position=self.position, symbol=self.symbol)


class InvalidLengthError(DecodeError):
    def __init__(self, length: int):
        super().__init__(f"Invalid input length {length}")
        self.length = length

    def to_expected(self) -> ExpectedError:
        return InvalidLength(length=self.length)


class InvalidTrailingSymbolError(DecodeError):
    def __init__(self, position: int, symbol: str):
        super().__init__(f"Trailing bits set in symbol {symbol!r} at position {position}")
        self.position = position
        self.symbol = symbol

    def to_expected(self) -> ExpectedError:
        return InvalidTrailingSymbol(position=self.position)


class InvalidPaddingError(DecodeError):
    def __init__(self, position: int, reason: str = ""):
        message = f"Invalid padding at position {position}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.position = position
        self.reason = reason

    def to_expected(self) -> ExpectedError:
        return InvalidPadding(position=self.position)


class OutputBufferTooSmallError(DecodeError):
    def __init__(self, required: int, provided: int):
        super().__init__(f"Output buffer too small: need {required} bytes, got {provided}")
        self.required = required
        self.provided = provided

    def to_expected(self) -> ExpectedError:
        return OutputBufferTooSmall(required=self.required, provided=self.provided)
