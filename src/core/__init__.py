"""
Core arithmetic service: pure operations, settings, and logging setup.

Nothing here depends on external systems; every operation is a pure function.
"""
