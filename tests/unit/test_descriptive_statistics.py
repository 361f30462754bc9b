"""
Тесты для модуля Descriptive Statistics

Проверяет:
1. mean / median / mode на типичных и граничных выборках
2. Генеральную и выборочную дисперсию
3. Полную сводку calculate_statistics
4. Неизменность входной последовательности
5. Разбор текстового ввода parse_data_input
"""

import math

import pytest

from src.core.domain.results import StatisticsSummary
from src.core.math.descriptive_statistics import (
    calculate_mean,
    calculate_median,
    calculate_mode,
    calculate_sample_std_dev,
    calculate_sample_variance,
    calculate_statistics,
    calculate_std_dev,
    calculate_sum,
    calculate_variance,
    parse_data_input,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def textbook_sample() -> list[float]:
    """Классическая выборка с σ = 2."""
    return [2, 4, 4, 4, 5, 5, 7, 9]


# =============================================================================
# ЦЕНТРАЛЬНАЯ ТЕНДЕНЦИЯ
# =============================================================================


class TestCentralTendency:
    """Тесты mean / median / mode"""

    def test_mean(self) -> None:
        assert calculate_mean([1, 2, 3, 4, 5]) == 3.0
        assert calculate_mean([-1.5, 1.5]) == 0.0

    def test_median_odd_length(self) -> None:
        """Нечётная длина — центральный элемент отсортированной копии"""
        assert calculate_median([5, 1, 3, 2, 4]) == 3

    def test_median_even_length(self) -> None:
        """Чётная длина — среднее двух центральных"""
        assert calculate_median([1, 2, 3, 4]) == 2.5
        assert calculate_median([4, 1, 3, 2]) == 2.5

    def test_median_does_not_mutate_input(self) -> None:
        data = [3.0, 1.0, 2.0]
        calculate_median(data)
        assert data == [3.0, 1.0, 2.0]

    def test_mode_single(self) -> None:
        assert calculate_mode([1, 2, 2, 3]) == [2]

    def test_mode_multiple_sorted(self) -> None:
        """Несколько мод — по возрастанию"""
        assert calculate_mode([3, 3, 1, 1, 2]) == [1, 3]

    def test_mode_all_unique_is_empty(self) -> None:
        """Все значения уникальны — моды нет"""
        assert calculate_mode([1, 2, 3]) == []

    def test_mode_single_element(self) -> None:
        """Единственный элемент — собственная мода"""
        assert calculate_mode([7]) == [7]

    def test_empty_sample(self) -> None:
        """Пустая выборка не бросает исключений"""
        assert calculate_mean([]) == 0.0
        assert calculate_median([]) == 0.0
        assert calculate_mode([]) == []


# =============================================================================
# РАЗБРОС
# =============================================================================


class TestDispersion:
    """Тесты дисперсии и стандартного отклонения"""

    def test_population_variance(self, textbook_sample: list[float]) -> None:
        assert calculate_variance(textbook_sample) == pytest.approx(4.0)
        assert calculate_std_dev(textbook_sample) == pytest.approx(2.0)

    def test_sample_variance(self, textbook_sample: list[float]) -> None:
        """Поправка Бесселя: деление на n - 1"""
        assert calculate_sample_variance(textbook_sample) == pytest.approx(32.0 / 7.0)
        assert calculate_sample_std_dev(textbook_sample) == pytest.approx(
            math.sqrt(32.0 / 7.0)
        )

    def test_sample_variance_short_samples(self) -> None:
        """n ≤ 1 → выборочная дисперсия 0"""
        assert calculate_sample_variance([]) == 0.0
        assert calculate_sample_variance([42.0]) == 0.0

    def test_constant_sample(self) -> None:
        assert calculate_variance([3.0, 3.0, 3.0]) == 0.0
        assert calculate_std_dev([3.0, 3.0, 3.0]) == 0.0

    def test_sum(self) -> None:
        assert calculate_sum([1.5, 2.5, -1.0]) == 3.0
        assert calculate_sum([]) == 0.0


# =============================================================================
# СВОДКА
# =============================================================================


class TestCalculateStatistics:
    """Тесты calculate_statistics"""

    def test_full_summary(self, textbook_sample: list[float]) -> None:
        summary = calculate_statistics(textbook_sample)

        assert isinstance(summary, StatisticsSummary)
        assert summary.count == 8
        assert summary.sum == 40.0
        assert summary.mean == 5.0
        assert summary.median == 4.5
        assert summary.mode == (4.0,)
        assert summary.variance == pytest.approx(4.0)
        assert summary.std_dev == pytest.approx(2.0)
        assert summary.sample_variance == pytest.approx(32.0 / 7.0)

    def test_values_preserve_order_and_duplicates(self) -> None:
        summary = calculate_statistics([3, 1, 3, 2])
        assert summary.values == (3.0, 1.0, 3.0, 2.0)
        assert summary.count == len(summary.values)

    def test_empty_summary(self) -> None:
        """Пустая выборка — нули и пустая мода"""
        summary = calculate_statistics([])

        assert summary.count == 0
        assert summary.values == ()
        assert summary.mode == ()
        assert summary.mean == 0.0
        assert summary.median == 0.0
        assert summary.std_dev == 0.0
        assert summary.sample_std_dev == 0.0
        assert summary.sum == 0.0

    def test_single_value_summary(self) -> None:
        summary = calculate_statistics([5.0])

        assert summary.mean == 5.0
        assert summary.median == 5.0
        assert summary.mode == (5.0,)
        assert summary.variance == 0.0
        assert summary.sample_variance == 0.0

    def test_input_not_mutated(self) -> None:
        data = [9.0, 1.0, 5.0]
        calculate_statistics(data)
        assert data == [9.0, 1.0, 5.0]


# =============================================================================
# ВВОД ДАННЫХ
# =============================================================================


class TestParseDataInput:
    """Тесты parse_data_input"""

    def test_comma_separated(self) -> None:
        assert parse_data_input("1, 2, 3") == [1.0, 2.0, 3.0]

    def test_mixed_delimiters(self) -> None:
        """Запятые, пробелы, точки с запятой и переводы строк"""
        assert parse_data_input("1;2  3\n4,,5") == [1.0, 2.0, 3.0, 4.0, 5.0]

    def test_invalid_tokens_dropped(self) -> None:
        """Нечисловые токены отбрасываются, порядок сохраняется"""
        assert parse_data_input("1, abc, 2; 3\n4") == [1.0, 2.0, 3.0, 4.0]

    def test_signed_and_exponent_numbers(self) -> None:
        assert parse_data_input("-2.5 +3 1e3") == [-2.5, 3.0, 1000.0]

    def test_non_finite_tokens_dropped(self) -> None:
        """inf / nan не попадают в выборку"""
        assert parse_data_input("inf, nan, 5") == [5.0]

    def test_empty_and_garbage_input(self) -> None:
        assert parse_data_input("") == []
        assert parse_data_input("   ") == []
        assert parse_data_input("abc") == []
