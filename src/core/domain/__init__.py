"""
Domain models and value objects.

Contains the configuration model of the arithmetic service.
"""

from src.core.domain.settings import ArithmeticSettings, OverflowMode

__all__ = [
    "ArithmeticSettings",
    "OverflowMode",
]
