"""
Numerical Safeguards — общие численные примитивы

Модуль обеспечивает единые правила работы с float во всём ядре калькулятора:
- Проверка конечности значений (NaN/Inf)
- Проверка целочисленности аргументов комбинаторики
- IEEE-совместимые деление и возведение в степень (без исключений)
- Безопасное приведение больших целых к float
- Валидация параметров с понятными сообщениями об ошибках

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль даёт ±Infinity (или NaN для 0/0), а не исключение
2. Переполнение даёт ±Infinity, выход из вещественной области даёт NaN
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения float
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения float
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли число конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_integral(value: float) -> bool:
    """
    Проверка, что значение — целое число (int или целочисленный float).

    bool не считается целым числом.

    Examples:
        >>> is_integral(5)
        True
        >>> is_integral(5.0)
        True
        >>> is_integral(1.5)
        False
        >>> is_integral(float('inf'))
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    return False


def to_float(value: float) -> float:
    """
    Приведение числа к float с сохранением знака при переполнении.

    Большие Python int (например, 200!) не представимы в float:
    вместо OverflowError возвращается ±inf.
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# IEEE-АРИФМЕТИКА
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE 754.

    В отличие от оператора / в Python, деление на ноль не бросает
    ZeroDivisionError:
    - x / 0 → ±inf (знак по знакам числителя и нуля)
    - 0 / 0 → nan

    Examples:
        >>> ieee_divide(1, 0)
        inf
        >>> ieee_divide(-1, 0)
        -inf
        >>> ieee_divide(1, -0.0)
        -inf
        >>> ieee_divide(6, 3)
        2.0
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)

    try:
        return numerator / denominator
    except OverflowError:
        # int / int, не представимый в float
        negative = (numerator < 0) != (denominator < 0)
        return -math.inf if negative else math.inf


def ieee_power(base: float, exponent: float) -> float:
    """
    Возведение в степень без исключений.

    - Переполнение → ±inf
    - 0 ** (отрицательная степень) → inf
    - Отрицательное основание с дробной степенью → nan

    Examples:
        >>> ieee_power(2, 10)
        1024.0
        >>> ieee_power(10, 400)
        inf
        >>> ieee_power(0, -1)
        inf
        >>> ieee_power(-8, 0.5)
        nan
    """
    base_f = to_float(base)
    exponent_f = to_float(exponent)

    if base_f == 0 and exponent_f < 0:
        return math.inf

    try:
        return math.pow(base_f, exponent_f)
    except OverflowError:
        # Знак минус только для отрицательного основания и нечётной целой степени
        odd_exponent = exponent_f.is_integer() and int(exponent_f) % 2 == 1
        if base_f < 0 and odd_exponent:
            return -math.inf
        return math.inf
    except ValueError:
        return math.nan


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Raises:
        ValueError: Если value — NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_open_interval(
    value: float,
    name: str,
    lower: float,
    upper: float,
) -> None:
    """
    Валидация, что значение лежит строго внутри (lower, upper).

    Raises:
        ValueError: Если value вне интервала или NaN/Inf
    """
    validate_finite(value, name)

    if not lower < value < upper:
        raise ValueError(
            f"{name} must be between {lower} and {upper} (exclusive), got {value}"
        )
