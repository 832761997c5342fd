"""
Orchestration services: the property runner and its result types.
"""

from .property_result import PropertyResult, RunState
from .property_runner import PropertyRunner

__all__ = ["PropertyResult", "PropertyRunner", "RunState"]
