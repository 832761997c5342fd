"""
Utilities package for the codec harness.

Constants, validators, environment settings and result formatters. Import
the submodules directly; this package re-exports nothing so the core layers
can depend on its constants without import cycles.
"""
