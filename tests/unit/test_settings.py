"""
Tests for ArithmeticSettings (Pydantic v2)

Покрывает:
- Значения по умолчанию
- Валидацию OverflowMode
- JSON сериализацию/десериализацию
- Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from src.core.domain import ArithmeticSettings, OverflowMode


class TestArithmeticSettings:
    """Тесты модели настроек"""

    def test_defaults(self) -> None:
        settings = ArithmeticSettings()
        assert settings.overflow_mode is OverflowMode.UNBOUNDED
        assert settings.log_division_by_zero is True

    def test_from_mapping(self) -> None:
        settings = ArithmeticSettings.model_validate(
            {"overflow_mode": "WRAP_INT32", "log_division_by_zero": False}
        )
        assert settings.overflow_mode is OverflowMode.WRAP_INT32
        assert settings.log_division_by_zero is False

    def test_unknown_overflow_mode_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ArithmeticSettings(overflow_mode="SATURATE")

    def test_frozen(self) -> None:
        settings = ArithmeticSettings()
        with pytest.raises(ValidationError):
            settings.overflow_mode = OverflowMode.WRAP_INT32

    def test_json_round_trip(self) -> None:
        settings = ArithmeticSettings(overflow_mode=OverflowMode.WRAP_INT32)
        restored = ArithmeticSettings.model_validate_json(settings.model_dump_json())
        assert restored == settings
        assert settings.model_dump(mode="json")["overflow_mode"] == "WRAP_INT32"
