"""
Counterexample payload attached to property violations.
"""

from dataclasses import dataclass, field
from typing import Any

from .configuration import HarnessConfig
from .expected_error import ExpectedBehavior
from .generated_input import GeneratedInput


@dataclass(frozen=True)
class Counterexample:
    """
    Concrete inputs and configuration that falsified a property.

    This is the primary deliverable of a failing run, so it keeps everything
    needed to reproduce the failure by hand.
    """

    property_name: str
    inputs: tuple[GeneratedInput, ...]
    config: HarnessConfig
    explanation: str
    expected_behavior: ExpectedBehavior | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def describe(self) -> str:
        """Multi-line human-readable rendering."""
        lines = [
            f"Property: {self.property_name}",
            f"Config: {self.config}",
            f"Explanation: {self.explanation}",
        ]
        lines.extend(f"Input: {generated!r}" for generated in self.inputs)
        if self.expected_behavior is not None:
            lines.append(f"Expected: {self.expected_behavior}")
        lines.extend(f"{key}: {value!r}" for key, value in self.details.items())
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "property_name": self.property_name,
            "inputs": [
                {"kind": generated.kind.value, "value": repr(generated.value)}
                for generated in self.inputs
            ],
            "config": self.config.to_dict(),
            "explanation": self.explanation,
            "expected_behavior": str(self.expected_behavior) if self.expected_behavior else None,
            "details": {key: repr(value) for key, value in self.details.items()},
        }
