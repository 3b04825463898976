"""
MathUtils: Arithmetic Service

Объект-сервис над чистыми функциями arithmetic/geometry:
- Применяет OverflowMode из ArithmeticSettings
- Логирует division_by_zero и пробрасывает DivisionByZero

Состояния нет: один экземпляр можно вызывать из нескольких потоков.
"""

from typing import Optional

import structlog

from src.core.domain.settings import ArithmeticSettings
from src.core.math import arithmetic
from src.core.math.arithmetic import DivisionByZero
from src.core.math.geometry import compute_circle_area

logger = structlog.get_logger(__name__)


class MathUtils:
    """Сервис арифметики: add, subtract, multiply, divide, compute_circle_area."""

    def __init__(self, settings: Optional[ArithmeticSettings] = None):
        self.settings = settings or ArithmeticSettings()

    def add(self, a: int, b: int) -> int:
        return arithmetic.add(a, b, mode=self.settings.overflow_mode)

    def subtract(self, a: int, b: int) -> int:
        return arithmetic.subtract(a, b, mode=self.settings.overflow_mode)

    def multiply(self, a: int, b: int) -> int:
        return arithmetic.multiply(a, b, mode=self.settings.overflow_mode)

    def divide(self, a: int, b: int) -> int:
        """
        Деление с усечением к нулю.

        Raises:
            DivisionByZero: если b == 0 (после события division_by_zero)
        """
        try:
            return arithmetic.divide(a, b, mode=self.settings.overflow_mode)
        except DivisionByZero as e:
            if self.settings.log_division_by_zero:
                logger.warning(
                    "division_by_zero",
                    dividend=e.dividend,
                    overflow_mode=self.settings.overflow_mode.value,
                )
            raise

    def compute_circle_area(self, radius: float) -> float:
        return compute_circle_area(radius)
