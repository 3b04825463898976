"""
Arithmetic Settings: Pydantic v2 Configuration Model

Неизменяемая конфигурация сервиса арифметики:
- OverflowMode: политика переполнения целых
- Флаг логирования деления на ноль
"""

from enum import Enum

from pydantic import BaseModel, Field


class OverflowMode(str, Enum):
    """Политика переполнения целочисленных операций"""

    UNBOUNDED = "UNBOUNDED"
    WRAP_INT32 = "WRAP_INT32"


class ArithmeticSettings(BaseModel):
    """
    Настройки сервиса арифметики.

    Frozen: после создания изменить нельзя, экземпляр можно
    разделять между потоками.
    """

    overflow_mode: OverflowMode = Field(
        OverflowMode.UNBOUNDED, description="Политика переполнения целых"
    )
    log_division_by_zero: bool = Field(
        True, description="Логировать событие division_by_zero перед исключением"
    )

    model_config = {"frozen": True}
