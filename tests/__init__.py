"""
Test suite for math-utils

Contains:
- tests/unit/          : Unit, property-based and tutorial tests
"""
