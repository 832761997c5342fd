"""
Structured input generators.

Each generator draws every decision from a Driver, so a failing value can be
replayed exactly from the driver's byte stream or seed.
"""

from .base import Generator, TupleGenerator
from .configuration import ConfigurationGenerator, CustomAlphabetGenerator
from .inputs import ByteSequenceGenerator, MalformedStringGenerator, WellFormedStringGenerator

__all__ = [
    "ByteSequenceGenerator",
    "ConfigurationGenerator",
    "CustomAlphabetGenerator",
    "Generator",
    "MalformedStringGenerator",
    "TupleGenerator",
    "WellFormedStringGenerator",
]
