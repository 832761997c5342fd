"""
Core harness infrastructure: drivers, the codec engine adapter, protocols
and the exception hierarchy.
"""
