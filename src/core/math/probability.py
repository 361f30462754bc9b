"""
Probability — нормальное распределение: PDF, CDF, обратная CDF

Модуль реализует функции нормального распределения N(mean, std_dev²):
- normal_pdf: плотность в замкнутой форме
- normal_cdf: функция распределения через рациональную аппроксимацию
  Абрамовица–Стиган (7.1.26) для erf
- normal_inverse_cdf: квантиль через рациональную аппроксимацию Acklam

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. p вне (0, 1) → ProbabilityDomainViolation
2. std_dev ≤ 0 или NaN/Inf аргументы → ProbabilityDomainViolation
3. Коэффициенты и границы областей зафиксированы (воспроизводимость эталонов)

ТОЧНОСТЬ:
    |normal_cdf - Φ| ≲ 1.5e-7  (погрешность erf по A&S 7.1.26)
    |normal_inverse_cdf - Φ⁻¹| / |Φ⁻¹| ≲ 1.15e-9  (Acklam)

Аппроксимации получены независимо и не являются точно обратными друг
другу: normal_cdf(normal_inverse_cdf(p)) ≈ p только с допуском.
"""

import math
from typing import Final

from src.core.math.numerical_safeguards import (
    validate_finite,
    validate_open_interval,
    validate_positive,
)

# =============================================================================
# КОЭФФИЦИЕНТЫ A&S 7.1.26
# =============================================================================

AS_P: Final[float] = 0.3275911
AS_A: Final[tuple[float, ...]] = (
    0.254829592,
    -0.284496736,
    1.421413741,
    -1.453152027,
    1.061405429,
)

# =============================================================================
# КОЭФФИЦИЕНТЫ ACKLAM
# =============================================================================

# Центральная область: числитель (a) и знаменатель (b) по r = q²
ACKLAM_A: Final[tuple[float, ...]] = (
    -3.969683028665376e1,
    2.209460984245205e2,
    -2.759285104469687e2,
    1.383577518672690e2,
    -3.066479806614716e1,
    2.506628277459239e0,
)
ACKLAM_B: Final[tuple[float, ...]] = (
    -5.447609879822406e1,
    1.615858368580409e2,
    -1.556989798598866e2,
    6.680131188771972e1,
    -1.328068155288572e1,
)

# Хвосты: числитель (c) и знаменатель (d) по q = sqrt(-2 ln(p))
ACKLAM_C: Final[tuple[float, ...]] = (
    -7.784894002430293e-3,
    -3.223964580411365e-1,
    -2.400758277161838e0,
    -2.549732539343734e0,
    4.374664141464968e0,
    2.938163982698783e0,
)
ACKLAM_D: Final[tuple[float, ...]] = (
    7.784695709041462e-3,
    3.224671290700398e-1,
    2.445134137142996e0,
    3.754408661907416e0,
)

# Границы областей
ACKLAM_P_LOW: Final[float] = 0.02425
ACKLAM_P_HIGH: Final[float] = 1.0 - ACKLAM_P_LOW


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ProbabilityDomainViolation(ValueError):
    """
    Недопустимый аргумент функции распределения.

    Возникает при p вне (0, 1), неположительном std_dev или NaN/Inf.
    Пробрасывается вызывающему коду без перехвата.
    """

    pass


def _validate_distribution(mean: float, std_dev: float) -> None:
    try:
        validate_finite(mean, "mean")
        validate_positive(std_dev, "std_dev")
    except ValueError as e:
        raise ProbabilityDomainViolation(str(e)) from e


def _horner(coefficients: tuple[float, ...], x: float) -> float:
    """Полином по схеме Горнера, коэффициенты от старшего к младшему."""
    result = 0.0
    for coefficient in coefficients:
        result = result * x + coefficient
    return result


# =============================================================================
# PDF / CDF
# =============================================================================


def normal_pdf(x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """
    Плотность нормального распределения.

    f(x) = exp(-(x - mean)² / (2 std_dev²)) / (std_dev * sqrt(2π))

    Raises:
        ProbabilityDomainViolation: если std_dev ≤ 0 или аргументы NaN/Inf
    """
    _validate_distribution(mean, std_dev)
    try:
        validate_finite(x, "x")
    except ValueError as e:
        raise ProbabilityDomainViolation(str(e)) from e

    coefficient = 1.0 / (std_dev * math.sqrt(2.0 * math.pi))
    exponent = -((x - mean) ** 2) / (2.0 * std_dev**2)
    return coefficient * math.exp(exponent)


def normal_cdf(x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """
    Функция распределения нормального закона P(X ≤ x).

    Алгоритм:
        z = (x - mean) / std_dev
        Φ(z) = 0.5 * (1 + sign(z) * erf(|z| / √2))
        erf(u) ≈ 1 - (a1 t + a2 t² + a3 t³ + a4 t⁴ + a5 t⁵) * exp(-u²),
        t = 1 / (1 + p u),  p = 0.3275911

    Для отрицательных z результат зеркалится через знак z.

    Raises:
        ProbabilityDomainViolation: если std_dev ≤ 0 или аргументы NaN/Inf

    Examples:
        >>> round(normal_cdf(0.0), 6)
        0.5
        >>> round(normal_cdf(1.96), 3)
        0.975
    """
    _validate_distribution(mean, std_dev)
    try:
        validate_finite(x, "x")
    except ValueError as e:
        raise ProbabilityDomainViolation(str(e)) from e

    z = (x - mean) / std_dev
    sign = -1.0 if z < 0 else 1.0
    u = abs(z) / math.sqrt(2.0)

    t = 1.0 / (1.0 + AS_P * u)
    # Полином без свободного члена: (((a5 t + a4) t + a3) t + a2) t + a1) * t
    poly = _horner(tuple(reversed(AS_A)), t) * t
    erf_u = 1.0 - poly * math.exp(-u * u)

    return 0.5 * (1.0 + sign * erf_u)


# =============================================================================
# INVERSE CDF
# =============================================================================


def normal_inverse_cdf(p: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """
    Квантиль нормального распределения: x такой, что P(X ≤ x) = p.

    Рациональная аппроксимация Peter Acklam с тремя областями:
    - p < p_low: нижний хвост, q = sqrt(-2 ln(p)), z = C(q) / D(q)
    - p_low ≤ p ≤ p_high: центр, q = p - 0.5, r = q², z = A(r) q / B(r)
    - p > p_high: верхний хвост, q = sqrt(-2 ln(1 - p)), z = -C(q) / D(q)

    Результат: z * std_dev + mean

    Raises:
        ProbabilityDomainViolation: если p ≤ 0, p ≥ 1, std_dev ≤ 0 или NaN/Inf

    Examples:
        >>> round(normal_inverse_cdf(0.975), 2)
        1.96
        >>> normal_inverse_cdf(0.5)
        0.0
    """
    _validate_distribution(mean, std_dev)
    try:
        validate_open_interval(p, "Probability", 0.0, 1.0)
    except ValueError as e:
        raise ProbabilityDomainViolation(str(e)) from e

    if p < ACKLAM_P_LOW:
        q = math.sqrt(-2.0 * math.log(p))
        z = _horner(ACKLAM_C, q) / (_horner(ACKLAM_D, q) * q + 1.0)
    elif p <= ACKLAM_P_HIGH:
        q = p - 0.5
        r = q * q
        z = _horner(ACKLAM_A, r) * q / (_horner(ACKLAM_B, r) * r + 1.0)
    else:
        q = math.sqrt(-2.0 * math.log(1.0 - p))
        z = -_horner(ACKLAM_C, q) / (_horner(ACKLAM_D, q) * q + 1.0)

    return z * std_dev + mean
