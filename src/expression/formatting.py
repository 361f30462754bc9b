"""
Display Formatting — представление результатов для отображения

Преобразует сырой результат вычислителя в строку ограниченной длины:
- NaN → "Error", ±inf → "Infinity" / "-Infinity"
- |v| > 1e12 или 0 < |v| < 1e-10 → экспоненциальная запись
- иначе округление до precision значащих цифр, позиционная запись;
  если строка длиннее precision + 2 — экспоненциальная запись
- boolean → "true" / "false", последовательности → "[a, b, c]"
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Final

from src.core.math.numerical_safeguards import to_float

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Значащих цифр в отображаемом результате
DISPLAY_PRECISION: Final[int] = 12

# Границы перехода на экспоненциальную запись
EXPONENTIAL_UPPER_BOUND: Final[float] = 1e12
EXPONENTIAL_LOWER_BOUND: Final[float] = 1e-10

NAN_DISPLAY: Final[str] = "Error"
POSITIVE_INFINITY_DISPLAY: Final[str] = "Infinity"
NEGATIVE_INFINITY_DISPLAY: Final[str] = "-Infinity"


@dataclass(frozen=True)
class DisplayFormat:
    """
    Конфигурация форматирования результатов.

    - precision: число значащих цифр
    - exponential_upper / exponential_lower: границы экспоненциальной записи
    - mantissa_digits: знаков после точки в экспоненциальной записи (precision - 4)
    - max_length: максимальная длина позиционной записи (precision + 2)
    """

    precision: int = DISPLAY_PRECISION
    exponential_upper: float = EXPONENTIAL_UPPER_BOUND
    exponential_lower: float = EXPONENTIAL_LOWER_BOUND

    def __post_init__(self) -> None:
        if self.precision < 5:
            raise ValueError(f"precision must be >= 5, got {self.precision}")

    @property
    def mantissa_digits(self) -> int:
        return self.precision - 4

    @property
    def max_length(self) -> int:
        return self.precision + 2


DEFAULT_DISPLAY_FORMAT: Final[DisplayFormat] = DisplayFormat()


# =============================================================================
# ЧИСЛА
# =============================================================================


def _exponential(value: float, fmt: DisplayFormat) -> str:
    return f"{value:.{fmt.mantissa_digits}e}"


def _positional(value: float) -> str:
    """Позиционная запись без экспоненты и без хвостового '.0'."""
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def format_number(value: float, fmt: DisplayFormat = DEFAULT_DISPLAY_FORMAT) -> str:
    """
    Форматирование числа для отображения.

    Examples:
        >>> format_number(float('inf'))
        'Infinity'
        >>> format_number(0.1 + 0.2)
        '0.3'
        >>> format_number(1e100)
        '1.00000000e+100'
        >>> format_number(1024.0)
        '1024'
    """
    value = to_float(value)

    if not math.isfinite(value):
        if math.isnan(value):
            return NAN_DISPLAY
        return POSITIVE_INFINITY_DISPLAY if value > 0 else NEGATIVE_INFINITY_DISPLAY

    magnitude = abs(value)
    if magnitude > fmt.exponential_upper or (value != 0 and magnitude < fmt.exponential_lower):
        return _exponential(value, fmt)

    # Округление убирает артефакты двоичного представления (0.1 + 0.2)
    rounded = float(f"{value:.{fmt.precision}g}")
    text = _positional(rounded)

    if len(text) > fmt.max_length:
        return _exponential(value, fmt)

    return text


# =============================================================================
# ПРОЧИЕ РЕЗУЛЬТАТЫ
# =============================================================================


def format_value(value: Any, fmt: DisplayFormat = DEFAULT_DISPLAY_FORMAT) -> str:
    """
    Общий форматтер нечисловых результатов.

    - bool → "true" / "false"
    - int / float → значение с точностью precision
    - list / tuple → "[a, b, c]" (рекурсивно)
    - прочее → str(value)
    """
    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, (int, float)):
        number = to_float(value)
        if not math.isfinite(number):
            return format_number(number, fmt)
        return f"{number:.{fmt.precision}g}"

    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(item, fmt) for item in value) + "]"

    return str(value)
