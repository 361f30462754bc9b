"""
Combinatorics — факториал, размещения, сочетания

Модуль реализует комбинаторные функции с точной целочисленной семантикой:
- factorial(n) с насыщением до inf для n > FACTORIAL_MAX_FINITE_N
- permutations(n, r) = n! / (n - r)!
- combinations(n, r) = n! / (r! * (n - r)!)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отрицательные или нецелые аргументы → CombinatoricsDomainViolation
2. r > n — не ошибка: ноль способов, результат 0
3. combinations(n, r) == combinations(n, n - r)
4. Сочетания считаются инкрементально, без вычисления факториалов:
   факториал выходит за пределы float намного раньше, чем итоговое значение
"""

import math
from typing import Final

from src.core.math.numerical_safeguards import is_integral

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимальное n, для которого n! представим в float (170! ≈ 7.26e306)
# Для n > FACTORIAL_MAX_FINITE_N factorial возвращает inf
FACTORIAL_MAX_FINITE_N: Final[int] = 170


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CombinatoricsDomainViolation(ValueError):
    """
    Недопустимый аргумент комбинаторной функции.

    Аргументы должны быть неотрицательными целыми числами. Ошибка
    пробрасывается вызывающему коду: UI обязан проверять ввод заранее.
    """

    pass


def _require_count(value: float, name: str, function: str) -> int:
    """Проверка аргумента-количества и приведение к int."""
    if not is_integral(value) or value < 0:
        raise CombinatoricsDomainViolation(
            f"{function} requires non-negative integers, got {name}={value!r}"
        )
    return int(value)


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(n: float) -> int | float:
    """
    Факториал n!.

    Args:
        n: Неотрицательное целое (int или целочисленный float)

    Returns:
        Точное значение n! (int) или math.inf для n > 170

    Raises:
        CombinatoricsDomainViolation: если n отрицательное или нецелое

    Examples:
        >>> factorial(0)
        1
        >>> factorial(5)
        120
        >>> factorial(171)
        inf
    """
    if not is_integral(n) or n < 0:
        raise CombinatoricsDomainViolation(
            f"Factorial requires a non-negative integer, got {n!r}"
        )

    count = int(n)

    if count in (0, 1):
        return 1

    if count > FACTORIAL_MAX_FINITE_N:
        return math.inf

    result = 1
    for i in range(2, count + 1):
        result *= i
    return result


# =============================================================================
# PERMUTATIONS & COMBINATIONS
# =============================================================================


def permutations(n: float, r: float) -> int:
    """
    Число размещений nPr = n! / (n - r)!.

    Считается как убывающее произведение r множителей, начиная с n.

    Raises:
        CombinatoricsDomainViolation: если n или r отрицательные или нецелые

    Examples:
        >>> permutations(5, 2)
        20
        >>> permutations(3, 5)
        0
    """
    total = _require_count(n, "n", "Permutations")
    chosen = _require_count(r, "r", "Permutations")

    if chosen > total:
        return 0

    if chosen == 0:
        return 1

    result = 1
    for i in range(total, total - chosen, -1):
        result *= i
    return result


def combinations(n: float, r: float) -> int:
    """
    Число сочетаний nCr = n! / (r! * (n - r)!).

    Инкрементальный расчёт по меньшему из r и n - r:
        result = result * (n - i) / (i + 1),  i = 0..k-1

    После каждого шага result равен C(n, i + 1), поэтому деление всегда
    точное и промежуточные значения остаются целыми.

    Raises:
        CombinatoricsDomainViolation: если n или r отрицательные или нецелые

    Examples:
        >>> combinations(52, 5)
        2598960
        >>> combinations(10, 3) == combinations(10, 7)
        True
    """
    total = _require_count(n, "n", "Combinations")
    chosen = _require_count(r, "r", "Combinations")

    if chosen > total:
        return 0

    if chosen in (0, total):
        return 1

    k = min(chosen, total - chosen)

    result = 1
    for i in range(k):
        result = result * (total - i) // (i + 1)
    return result
