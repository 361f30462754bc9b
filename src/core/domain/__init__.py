"""
Domain models and value objects.

Contains fundamental domain entities like AngleUnit, CalculationResult,
StatisticsSummary, GraphSample.
"""

from src.core.domain.results import (
    CalculationFailure,
    CalculationResult,
    CalculationSuccess,
    GraphSample,
    StatisticsSummary,
)
from src.core.domain.units import (
    DEGREES_PER_RADIAN,
    RADIANS_PER_DEGREE,
    AngleUnit,
    degrees_to_radians,
    radians_to_degrees,
)

__all__ = [
    # Units module
    "DEGREES_PER_RADIAN",
    "RADIANS_PER_DEGREE",
    "AngleUnit",
    "degrees_to_radians",
    "radians_to_degrees",
    # Result models
    "CalculationResult",
    "CalculationSuccess",
    "CalculationFailure",
    "StatisticsSummary",
    "GraphSample",
]
