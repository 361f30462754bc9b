"""
Тесты для модуля Probability

Проверяет:
1. normal_pdf в замкнутой форме
2. normal_cdf: опорные точки и симметрию
3. normal_inverse_cdf: центральную область и хвосты Acklam
4. Согласованность cdf(inverse_cdf(p)) ≈ p
5. Доменные ошибки
"""

import math

import pytest

from src.core.math.probability import (
    ACKLAM_P_HIGH,
    ACKLAM_P_LOW,
    ProbabilityDomainViolation,
    normal_cdf,
    normal_inverse_cdf,
    normal_pdf,
)


class TestNormalPdf:
    """Тесты для normal_pdf"""

    def test_standard_peak(self) -> None:
        """f(0) = 1 / sqrt(2π)"""
        assert normal_pdf(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi))

    def test_standard_at_one(self) -> None:
        assert normal_pdf(1.0) == pytest.approx(0.2419707245, abs=1e-9)

    def test_symmetric(self) -> None:
        assert normal_pdf(-1.3) == pytest.approx(normal_pdf(1.3))

    def test_scaled_distribution(self) -> None:
        """Пик N(100, 15²) равен 1 / (15 sqrt(2π))"""
        assert normal_pdf(100.0, 100.0, 15.0) == pytest.approx(
            1.0 / (15.0 * math.sqrt(2.0 * math.pi))
        )


class TestNormalCdf:
    """Тесты для normal_cdf"""

    def test_center(self) -> None:
        assert normal_cdf(0.0) == pytest.approx(0.5, abs=1e-6)

    def test_reference_points(self) -> None:
        assert normal_cdf(1.0) == pytest.approx(0.841344746, abs=1e-6)
        assert normal_cdf(1.96) == pytest.approx(0.975, abs=1e-4)
        assert normal_cdf(-1.96) == pytest.approx(0.025, abs=1e-4)

    @pytest.mark.parametrize("z", [0.1, 0.5, 1.0, 2.0, 3.5])
    def test_symmetry(self, z: float) -> None:
        """Φ(z) + Φ(-z) = 1"""
        assert normal_cdf(z) + normal_cdf(-z) == pytest.approx(1.0)

    def test_monotonic(self) -> None:
        points = [-4.0, -2.0, -0.5, 0.0, 0.5, 2.0, 4.0]
        values = [normal_cdf(x) for x in points]
        assert values == sorted(values)

    def test_scaled_distribution(self) -> None:
        assert normal_cdf(100.0, 100.0, 15.0) == pytest.approx(0.5, abs=1e-6)
        assert normal_cdf(115.0, 100.0, 15.0) == pytest.approx(normal_cdf(1.0))

    def test_far_tails_bounded(self) -> None:
        assert 0.0 <= normal_cdf(-40.0) < 1e-6
        assert 1.0 - 1e-6 < normal_cdf(40.0) <= 1.0


class TestNormalInverseCdf:
    """Тесты для normal_inverse_cdf"""

    def test_median(self) -> None:
        assert normal_inverse_cdf(0.5) == 0.0

    def test_central_region(self) -> None:
        assert normal_inverse_cdf(0.975) == pytest.approx(1.959964, abs=1e-6)
        assert normal_inverse_cdf(0.025) == pytest.approx(-1.959964, abs=1e-6)

    def test_tail_regions(self) -> None:
        """Хвостовые области (p < p_low, p > p_high)"""
        assert 0.01 < ACKLAM_P_LOW
        assert 0.99 > ACKLAM_P_HIGH
        assert normal_inverse_cdf(0.01) == pytest.approx(-2.326348, abs=1e-6)
        assert normal_inverse_cdf(0.99) == pytest.approx(2.326348, abs=1e-6)

    def test_scaled_distribution(self) -> None:
        """Результат z * std_dev + mean"""
        assert normal_inverse_cdf(0.5, 100.0, 15.0) == 100.0
        assert normal_inverse_cdf(0.975, 100.0, 15.0) == pytest.approx(
            100.0 + 15.0 * 1.959964, abs=1e-4
        )

    @pytest.mark.parametrize(
        "p", [0.001, 0.01, 0.02425, 0.1, 0.3, 0.5, 0.7, 0.9, 0.97575, 0.99, 0.999]
    )
    def test_round_trip(self, p: float) -> None:
        """cdf(inverse_cdf(p)) ≈ p с допуском 1e-3"""
        assert normal_cdf(normal_inverse_cdf(p)) == pytest.approx(p, abs=1e-3)


class TestDomainViolations:
    """Доменные ошибки распределения"""

    @pytest.mark.parametrize("p", [0.0, 1.0, -0.5, 1.5])
    def test_probability_outside_open_interval(self, p: float) -> None:
        with pytest.raises(ProbabilityDomainViolation, match="between 0.0 and 1.0"):
            normal_inverse_cdf(p)

    def test_probability_nan(self) -> None:
        with pytest.raises(ProbabilityDomainViolation):
            normal_inverse_cdf(float("nan"))

    @pytest.mark.parametrize("std_dev", [0.0, -1.0])
    def test_non_positive_std_dev(self, std_dev: float) -> None:
        with pytest.raises(ProbabilityDomainViolation, match="std_dev must be positive"):
            normal_pdf(0.0, 0.0, std_dev)
        with pytest.raises(ProbabilityDomainViolation, match="std_dev must be positive"):
            normal_cdf(0.0, 0.0, std_dev)
        with pytest.raises(ProbabilityDomainViolation, match="std_dev must be positive"):
            normal_inverse_cdf(0.5, 0.0, std_dev)

    def test_non_finite_arguments(self) -> None:
        with pytest.raises(ProbabilityDomainViolation):
            normal_cdf(float("inf"))
        with pytest.raises(ProbabilityDomainViolation):
            normal_pdf(0.0, float("nan"), 1.0)

    def test_violation_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            normal_inverse_cdf(0.0)
