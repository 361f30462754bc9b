"""
Core math modules калькулятора

Математические примитивы и численные алгоритмы: комбинаторика,
описательная статистика, нормальное распределение.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # IEEE arithmetic
    ieee_divide,
    ieee_power,
    # NaN/Inf checks
    is_close,
    is_integral,
    is_valid_float,
    to_float,
    # Validation
    validate_finite,
    validate_open_interval,
    validate_positive,
)

# Combinatorics
from src.core.math.combinatorics import (
    FACTORIAL_MAX_FINITE_N,
    CombinatoricsDomainViolation,
    combinations,
    factorial,
    permutations,
)

# Descriptive Statistics
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

# Probability
from src.core.math.probability import (
    ACKLAM_P_HIGH,
    ACKLAM_P_LOW,
    ProbabilityDomainViolation,
    normal_cdf,
    normal_inverse_cdf,
    normal_pdf,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — IEEE arithmetic
    "ieee_divide",
    "ieee_power",
    # Numerical Safeguards — NaN/Inf checks
    "is_close",
    "is_integral",
    "is_valid_float",
    "to_float",
    # Numerical Safeguards — Validation
    "validate_finite",
    "validate_open_interval",
    "validate_positive",
    # Combinatorics — Constants
    "FACTORIAL_MAX_FINITE_N",
    # Combinatorics — Exceptions
    "CombinatoricsDomainViolation",
    # Combinatorics — Functions
    "combinations",
    "factorial",
    "permutations",
    # Descriptive Statistics — Functions
    "calculate_mean",
    "calculate_median",
    "calculate_mode",
    "calculate_sample_std_dev",
    "calculate_sample_variance",
    "calculate_statistics",
    "calculate_std_dev",
    "calculate_sum",
    "calculate_variance",
    "parse_data_input",
    # Probability — Constants
    "ACKLAM_P_HIGH",
    "ACKLAM_P_LOW",
    # Probability — Exceptions
    "ProbabilityDomainViolation",
    # Probability — Functions
    "normal_cdf",
    "normal_inverse_cdf",
    "normal_pdf",
]
