"""
Mock objects for testing.

Faulty codecs and instrumented engine factories.
"""
