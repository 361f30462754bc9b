"""
Тесты для модуля Angle Units

Проверяет:
1. Константы конверсии
2. Конверсии градусы ↔ радианы
3. AngleUnit как строковый enum
"""

import math

import pytest

from src.core.domain.units import (
    DEGREES_PER_RADIAN,
    RADIANS_PER_DEGREE,
    AngleUnit,
    degrees_to_radians,
    radians_to_degrees,
)


class TestConstants:
    """Тесты констант конверсии"""

    def test_constants_are_reciprocal(self) -> None:
        assert RADIANS_PER_DEGREE * DEGREES_PER_RADIAN == pytest.approx(1.0)

    def test_radians_per_degree(self) -> None:
        assert RADIANS_PER_DEGREE == pytest.approx(math.pi / 180.0)


class TestConversions:
    """Тесты конвертеров"""

    def test_degrees_to_radians(self) -> None:
        assert degrees_to_radians(0.0) == 0.0
        assert degrees_to_radians(180.0) == pytest.approx(math.pi)
        assert degrees_to_radians(90.0) == pytest.approx(math.pi / 2.0)
        assert degrees_to_radians(-360.0) == pytest.approx(-2.0 * math.pi)

    def test_radians_to_degrees(self) -> None:
        assert radians_to_degrees(math.pi) == pytest.approx(180.0)
        assert radians_to_degrees(math.pi / 6.0) == pytest.approx(30.0)

    @pytest.mark.parametrize("degrees", [-720.0, -45.0, 0.0, 30.0, 123.456, 1e6])
    def test_round_trip(self, degrees: float) -> None:
        """degrees → radians → degrees"""
        assert radians_to_degrees(degrees_to_radians(degrees)) == pytest.approx(degrees)


class TestAngleUnit:
    """Тесты AngleUnit"""

    def test_values(self) -> None:
        assert AngleUnit.DEGREES.value == "deg"
        assert AngleUnit.RADIANS.value == "rad"

    def test_lookup_by_value(self) -> None:
        assert AngleUnit("deg") is AngleUnit.DEGREES
        assert AngleUnit("rad") is AngleUnit.RADIANS

    def test_string_comparison(self) -> None:
        """str-enum сравнивается со строкой"""
        assert AngleUnit.DEGREES == "deg"

    def test_unknown_value(self) -> None:
        with pytest.raises(ValueError):
            AngleUnit("grad")
