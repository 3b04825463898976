"""
Arithmetic: Integer Operations

Модуль реализует четыре базовые целочисленные операции:
- Сложение, вычитание, умножение
- Деление с усечением к нулю (не floor-деление Python)

Поддерживаются две политики переполнения (OverflowMode):
- UNBOUNDED: целые Python произвольной точности, переполнения нет
- WRAP_INT32: дополнительный код, 32-битный знаковый диапазон

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль всегда вызывает DivisionByZero (никакого fallback)
2. divide() усекает к нулю: divide(-7, 2) == -3
3. В режиме WRAP_INT32 результат всегда в [INT32_MIN, INT32_MAX]
4. Все операции чистые: без состояния и побочных эффектов
"""

from typing import Final

from src.core.domain.settings import OverflowMode

# =============================================================================
# ГРАНИЦЫ 32-БИТНОГО ЦЕЛОГО
# =============================================================================

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

# Модуль для редукции в дополнительный код
_INT32_MODULUS: Final[int] = 2**32


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """
    Деление на ноль в divide().

    Наследует ZeroDivisionError (и, следовательно, ArithmeticError), поэтому
    перехватывается как стандартная арифметическая ошибка.
    """

    def __init__(self, dividend: int) -> None:
        self.dividend = dividend
        super().__init__(f"Division by zero: {dividend} / 0")


# =============================================================================
# ЦЕЛОЧИСЛЕННАЯ СЕМАНТИКА
# =============================================================================


def wrap_int32(value: int) -> int:
    """
    Редукция целого в 32-битный знаковый диапазон (дополнительный код).

    Args:
        value: Произвольное целое

    Returns:
        Значение в [INT32_MIN, INT32_MAX], сравнимое с value по модулю 2**32

    Examples:
        >>> wrap_int32(2**31)
        -2147483648
        >>> wrap_int32(-1)
        -1
        >>> wrap_int32(2**32 + 5)
        5
    """
    return (value - INT32_MIN) % _INT32_MODULUS + INT32_MIN


def truncating_quotient(a: int, b: int) -> int:
    """
    Целочисленное частное с усечением к нулю.

    Оператор // в Python округляет к минус бесконечности, поэтому частное
    считается по модулям и знак восстанавливается отдельно.

    Args:
        a: Делимое
        b: Делитель (не ноль)

    Returns:
        a / b, усечённое к нулю

    Examples:
        >>> truncating_quotient(7, 2)
        3
        >>> truncating_quotient(-7, 2)
        -3
        >>> truncating_quotient(7, -2)
        -3
    """
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -quotient
    return quotient


def _apply_mode(value: int, mode: OverflowMode) -> int:
    if mode is OverflowMode.WRAP_INT32:
        return wrap_int32(value)
    return value


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def add(a: int, b: int, mode: OverflowMode = OverflowMode.UNBOUNDED) -> int:
    """
    Сложение a + b.

    Examples:
        >>> add(1, 1)
        2
        >>> add(INT32_MAX, 1, mode=OverflowMode.WRAP_INT32)
        -2147483648
    """
    a, b = _apply_mode(a, mode), _apply_mode(b, mode)
    return _apply_mode(a + b, mode)


def subtract(a: int, b: int, mode: OverflowMode = OverflowMode.UNBOUNDED) -> int:
    """Вычитание a - b."""
    a, b = _apply_mode(a, mode), _apply_mode(b, mode)
    return _apply_mode(a - b, mode)


def multiply(a: int, b: int, mode: OverflowMode = OverflowMode.UNBOUNDED) -> int:
    """
    Умножение a * b.

    Examples:
        >>> multiply(2, -1)
        -2
        >>> multiply(65536, 65536, mode=OverflowMode.WRAP_INT32)
        0
    """
    a, b = _apply_mode(a, mode), _apply_mode(b, mode)
    return _apply_mode(a * b, mode)


def divide(a: int, b: int, mode: OverflowMode = OverflowMode.UNBOUNDED) -> int:
    """
    Целочисленное деление a / b с усечением к нулю.

    В режиме WRAP_INT32 единственный случай переполнения,
    INT32_MIN / -1, даёт INT32_MIN.

    Args:
        a: Делимое
        b: Делитель
        mode: Политика переполнения (default: UNBOUNDED)

    Returns:
        Частное, усечённое к нулю

    Raises:
        DivisionByZero: если b == 0

    Examples:
        >>> divide(7, 2)
        3
        >>> divide(-7, 2)
        -3
    """
    a, b = _apply_mode(a, mode), _apply_mode(b, mode)

    if b == 0:
        raise DivisionByZero(a)

    return _apply_mode(truncating_quotient(a, b), mode)
