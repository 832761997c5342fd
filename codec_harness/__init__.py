"""
Codec Harness - property-based checks for configurable base64 codecs.

This package provides:
- Driver-backed generators for bytes, codec strings, configurations and alphabets
- A configuration model with an engine factory
- Seven property oracles covering roundtrips, determinism and alphabet compliance
- A runner that times each property and records its counterexample
"""

__version__ = "1.0.0"
__description__ = "Property-based test harness for configurable base64 codecs"

from .core.drivers import ByteSliceDriver, HypothesisDriver, SeededDriver
from .core.engine import GeneralPurposeEngine
from .core.exceptions import (
    ConfigurationError,
    DecodeError,
    DriverExhausted,
    HarnessError,
    PropertyViolation,
)
from .domain.alphabet import STANDARD, URL_SAFE, AlphabetKind, AlphabetSpec
from .domain.configuration import EngineKind, HarnessConfig, build_engine
from .domain.padding import PaddingAcceptance, PaddingPolicy
from .properties import ALL_PROPERTIES, Property, get_property
from .services import PropertyResult, PropertyRunner, RunState

__all__ = [
    "ALL_PROPERTIES",
    "STANDARD",
    "URL_SAFE",
    "AlphabetKind",
    "AlphabetSpec",
    "ByteSliceDriver",
    "ConfigurationError",
    "DecodeError",
    "DriverExhausted",
    "EngineKind",
    "GeneralPurposeEngine",
    "HarnessConfig",
    "HarnessError",
    "HypothesisDriver",
    "PaddingAcceptance",
    "PaddingPolicy",
    "Property",
    "PropertyResult",
    "PropertyRunner",
    "PropertyViolation",
    "RunState",
    "SeededDriver",
    "build_engine",
    "get_property",
]
