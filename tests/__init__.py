"""
Test package for Codec Harness.

Unit, property and integration suites plus faulty codec mocks used to prove
each oracle catches the bug class it targets.
"""

__all__ = [
    "conftest",  # Pytest configuration, Hypothesis profiles and fixtures
    "integration",  # Full property suite against real and faulty codecs
    "mocks",  # Faulty codec implementations
    "property",  # Hypothesis-driven tests
    "unit",  # Unit test suite
]
