"""
Geometry: Circle Area

Площадь круга в float64 с math.pi.
"""

import math


def compute_circle_area(radius: float) -> float:
    """
    Площадь круга: pi * radius * radius.

    Порядок умножения фиксирован, результат для целых радиусов
    совпадает бит в бит: compute_circle_area(10) == 314.1592653589793.

    Отрицательный радиус не является ошибкой: площадь положительна.

    Args:
        radius: Радиус (любого знака)

    Returns:
        Площадь круга

    Examples:
        >>> compute_circle_area(10)
        314.1592653589793
        >>> compute_circle_area(0)
        0.0
        >>> compute_circle_area(-1) == compute_circle_area(1)
        True
    """
    return math.pi * radius * radius
