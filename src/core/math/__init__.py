"""
Core math modules

Целочисленная арифметика, площадь круга и сервис MathUtils.
"""

# Arithmetic
from src.core.math.arithmetic import (
    # Constants
    INT32_MAX,
    INT32_MIN,
    # Exceptions
    DivisionByZero,
    # Integer semantics
    truncating_quotient,
    wrap_int32,
    # Operations
    add,
    divide,
    multiply,
    subtract,
)

# Geometry
from src.core.math.geometry import compute_circle_area

# Service
from src.core.math.math_utils import MathUtils

__all__ = [
    # Arithmetic: Constants
    "INT32_MAX",
    "INT32_MIN",
    # Arithmetic: Exceptions
    "DivisionByZero",
    # Arithmetic: Integer semantics
    "truncating_quotient",
    "wrap_int32",
    # Arithmetic: Operations
    "add",
    "divide",
    "multiply",
    "subtract",
    # Geometry
    "compute_circle_area",
    # Service
    "MathUtils",
]
