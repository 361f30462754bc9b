"""
Angle Units — единицы измерения углов

Единственный допустимый способ преобразований между градусами и радианами.
Режим AngleUnit выбирается один раз на вызов вычисления и не смешивается
внутри одного выражения.
"""

import math
from enum import Enum
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Радиан в одном градусе
RADIANS_PER_DEGREE: Final[float] = math.pi / 180.0

# Градусов в одном радиане
DEGREES_PER_RADIAN: Final[float] = 180.0 / math.pi


# =============================================================================
# ENUMS
# =============================================================================


class AngleUnit(str, Enum):
    """
    Угловой режим тригонометрических функций.

    DEGREES: sin/cos/tan принимают градусы, asin/acos/atan возвращают градусы
    RADIANS: нативная семантика (радианы)
    """

    DEGREES = "deg"
    RADIANS = "rad"


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def degrees_to_radians(degrees: float) -> float:
    """
    Конверсия: градусы → радианы

    Examples:
        >>> degrees_to_radians(180.0) == math.pi
        True
    """
    return degrees * RADIANS_PER_DEGREE


def radians_to_degrees(radians: float) -> float:
    """
    Конверсия: радианы → градусы

    Examples:
        >>> radians_to_degrees(math.pi)
        180.0
    """
    return radians * DEGREES_PER_RADIAN
