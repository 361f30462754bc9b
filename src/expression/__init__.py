"""
Expression pipeline калькулятора

Нормализация пользовательского ввода, вычисление с угловым режимом,
форматирование результатов и выборка значений функций для графиков.
"""

from src.expression.evaluator import (
    ERROR_MESSAGES,
    ExpressionSyntaxError,
    count_unclosed_parentheses,
    evaluate,
    has_balanced_parentheses,
    is_valid_expression,
    parse_expression,
    to_evaluator_dialect,
    user_friendly_error,
)
from src.expression.formatting import (
    DEFAULT_DISPLAY_FORMAT,
    DisplayFormat,
    format_number,
    format_value,
)
from src.expression.normalizer import normalize
from src.expression.sampler import (
    generate_table,
    sample_at,
    sample_curve,
    substitute_variable,
)
from src.expression.scope import (
    BASE_FUNCTIONS,
    CONSTANTS,
    angle_overrides,
    build_functions,
)

__all__ = [
    # Normalizer
    "normalize",
    # Scope
    "BASE_FUNCTIONS",
    "CONSTANTS",
    "angle_overrides",
    "build_functions",
    # Formatting
    "DEFAULT_DISPLAY_FORMAT",
    "DisplayFormat",
    "format_number",
    "format_value",
    # Evaluator
    "ERROR_MESSAGES",
    "ExpressionSyntaxError",
    "count_unclosed_parentheses",
    "evaluate",
    "has_balanced_parentheses",
    "is_valid_expression",
    "parse_expression",
    "to_evaluator_dialect",
    "user_friendly_error",
    # Sampler
    "generate_table",
    "sample_at",
    "sample_curve",
    "substitute_variable",
]
