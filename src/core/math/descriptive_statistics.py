"""
Descriptive Statistics — описательная статистика выборки

Модуль вычисляет агрегаты по числовой выборке:
- mean, median, mode
- Дисперсия и стандартное отклонение (генеральные и выборочные)
- sum, count
- Разбор свободного текстового ввода данных

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая выборка никогда не вызывает исключение: результат 0 / пустой список
2. Входная последовательность не изменяется (сортируется копия)
3. Порядок и дубликаты значений сохраняются в StatisticsSummary.values

ФОРМУЛЫ:
    variance = Σ (x_i - mean)² / n
    sample_variance = Σ (x_i - mean)² / (n - 1),  0 при n ≤ 1
    std_dev = sqrt(variance)
"""

import math
import re
from collections import Counter
from typing import Final, Sequence

from src.core.domain.results import StatisticsSummary
from src.core.math.numerical_safeguards import is_valid_float

# Разделители ввода данных: запятая, пробельные символы, точка с запятой
DATA_INPUT_DELIMITERS: Final[re.Pattern[str]] = re.compile(r"[,\s;]+")


# =============================================================================
# ЦЕНТРАЛЬНАЯ ТЕНДЕНЦИЯ
# =============================================================================


def calculate_mean(values: Sequence[float]) -> float:
    """
    Среднее арифметическое.

    Examples:
        >>> calculate_mean([1, 2, 3, 4, 5])
        3.0
        >>> calculate_mean([])
        0.0
    """
    if not values:
        return 0.0
    return sum(values) / len(values)


def calculate_median(values: Sequence[float]) -> float:
    """
    Медиана: середина отсортированной копии.

    Для чётной длины — среднее двух центральных значений.

    Examples:
        >>> calculate_median([5, 1, 3, 2, 4])
        3
        >>> calculate_median([1, 2, 3, 4])
        2.5
    """
    if not values:
        return 0.0

    ordered = sorted(values)
    mid = len(ordered) // 2

    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def calculate_mode(values: Sequence[float]) -> list[float]:
    """
    Мода: все значения с максимальной частотой, по возрастанию.

    Если каждое значение встречается ровно один раз и значений больше
    одного — моды нет, возвращается пустой список. Единственный элемент
    является собственной модой.

    Examples:
        >>> calculate_mode([1, 2, 2, 3])
        [2]
        >>> calculate_mode([1, 1, 2, 2, 3])
        [1, 2]
        >>> calculate_mode([1, 2, 3])
        []
    """
    if not values:
        return []

    counts = Counter(values)
    max_count = max(counts.values())

    if max_count == 1 and len(values) > 1:
        return []

    return sorted(value for value, count in counts.items() if count == max_count)


# =============================================================================
# РАЗБРОС
# =============================================================================


def _sum_squared_deviations(values: Sequence[float]) -> float:
    mean = calculate_mean(values)
    return sum((value - mean) ** 2 for value in values)


def calculate_variance(values: Sequence[float]) -> float:
    """
    Генеральная дисперсия (деление на n).

    Examples:
        >>> calculate_variance([2, 4, 4, 4, 5, 5, 7, 9])
        4.0
    """
    if not values:
        return 0.0
    return _sum_squared_deviations(values) / len(values)


def calculate_sample_variance(values: Sequence[float]) -> float:
    """
    Выборочная дисперсия с поправкой Бесселя (деление на n - 1).

    Для n ≤ 1 определена как 0.
    """
    if len(values) <= 1:
        return 0.0
    return _sum_squared_deviations(values) / (len(values) - 1)


def calculate_std_dev(values: Sequence[float]) -> float:
    """Генеральное стандартное отклонение."""
    return math.sqrt(calculate_variance(values))


def calculate_sample_std_dev(values: Sequence[float]) -> float:
    """Выборочное стандартное отклонение."""
    return math.sqrt(calculate_sample_variance(values))


def calculate_sum(values: Sequence[float]) -> float:
    """Сумма значений (0 для пустой выборки)."""
    return sum(values, 0.0)


# =============================================================================
# СВОДКА
# =============================================================================


def calculate_statistics(values: Sequence[float]) -> StatisticsSummary:
    """
    Полная сводка описательной статистики.

    Args:
        values: Числовая выборка (не изменяется)

    Returns:
        Immutable StatisticsSummary; для пустой выборки все числовые
        поля равны 0, mode пустой
    """
    return StatisticsSummary(
        values=tuple(values),
        mean=calculate_mean(values),
        median=calculate_median(values),
        mode=tuple(calculate_mode(values)),
        std_dev=calculate_std_dev(values),
        variance=calculate_variance(values),
        sample_std_dev=calculate_sample_std_dev(values),
        sample_variance=calculate_sample_variance(values),
        sum=calculate_sum(values),
        count=len(values),
    )


# =============================================================================
# ВВОД ДАННЫХ
# =============================================================================


def parse_data_input(text: str) -> list[float]:
    """
    Разбор текстового ввода в список чисел.

    Делит строку по любым последовательностям запятых, пробелов,
    точек с запятой и переводов строк. Токены, которые не являются
    конечным числом, отбрасываются; порядок остальных сохраняется.

    Examples:
        >>> parse_data_input("1, abc, 2; 3\\n4")
        [1.0, 2.0, 3.0, 4.0]
        >>> parse_data_input("abc")
        []
    """
    values: list[float] = []

    for token in DATA_INPUT_DELIMITERS.split(text):
        if not token:
            continue
        try:
            number = float(token)
        except ValueError:
            continue
        if is_valid_float(number):
            values.append(number)

    return values
