"""
Property result types.

Provides the immutable record the orchestrator produces for each property
invocation, consumed by whatever reports it.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from ..domain.counterexample import Counterexample


class RunState(Enum):
    """Orchestrator state for one property invocation."""

    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    def is_terminal(self) -> bool:
        """Check if the run has finished."""
        return self in (RunState.SUCCEEDED, RunState.FAILED)


@dataclass(frozen=True)
class PropertyResult:
    """Outcome of running one property."""

    property_name: str
    iterations_run: int
    success: bool
    counterexample: Counterexample | None = None
    execution_time: float = 0.0
    memory_usage: int | None = None
    error_message: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def passed(
        cls,
        property_name: str,
        iterations_run: int,
        execution_time: float,
        memory_usage: int | None = None,
    ) -> "PropertyResult":
        """Create a successful property result."""
        return cls(
            property_name=property_name,
            iterations_run=iterations_run,
            success=True,
            execution_time=execution_time,
            memory_usage=memory_usage,
        )

    @classmethod
    def failed(
        cls,
        property_name: str,
        iterations_run: int,
        execution_time: float,
        error_message: str,
        counterexample: Counterexample | None = None,
        memory_usage: int | None = None,
    ) -> "PropertyResult":
        """Create a failed property result carrying its counterexample."""
        return cls(
            property_name=property_name,
            iterations_run=iterations_run,
            success=False,
            counterexample=counterexample,
            execution_time=execution_time,
            memory_usage=memory_usage,
            error_message=error_message,
        )

    @property
    def state(self) -> RunState:
        return RunState.SUCCEEDED if self.success else RunState.FAILED

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary representation."""
        return {
            "property_name": self.property_name,
            "iterations_run": self.iterations_run,
            "success": self.success,
            "counterexample": self.counterexample.to_dict() if self.counterexample else None,
            "execution_time": self.execution_time,
            "memory_usage": self.memory_usage,
            "error_message": self.error_message,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        """String representation of the property result."""
        if self.success:
            return (
                f"PASSED: {self.property_name} "
                f"({self.iterations_run} iterations, {self.execution_time:.3f}s)"
            )
        return f"FAILED: {self.property_name}: {self.error_message}"
