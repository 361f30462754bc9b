"""
Function Sampler — значения функции одной переменной для графиков

Используется внешним коллаборатором построения графиков:
- sample_at: значение y(x) или None (разрыв / вне области определения)
- generate_table: таблица значений с шагом
- sample_curve: равномерная сетка точек на отрезке

Вычисление всегда в радианах. Результаты не кэшируются: вызывающий код
сам решает, как батчить и кэшировать сотни точек одного выражения.
"""

import math
import re
from decimal import Decimal
from typing import Final

from src.core.domain.results import CalculationSuccess, GraphSample
from src.core.domain.units import AngleUnit
from src.core.math.numerical_safeguards import is_close, is_valid_float
from src.expression.evaluator import evaluate

# Переменная x (без учёта регистра), не являющаяся частью более длинного имени.
# Цифра слева допускается: 2x → 2(0.5) → 2*(0.5) после нормализации
VARIABLE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?<![A-Za-z_])x(?![A-Za-z0-9_])", re.IGNORECASE
)


def _literal(x: float) -> str:
    """Позиционная запись числа в скобках (без экспоненты: 1e-05 → 0.00001)."""
    return "(" + format(Decimal(repr(float(x))), "f") + ")"


def substitute_variable(expression: str, x: float) -> str:
    """
    Подстановка числового значения вместо переменной x.

    Examples:
        >>> substitute_variable("1/x + X", 2)
        '1/(2.0) + (2.0)'
        >>> substitute_variable("exp(x)", -0.5)
        'exp((-0.5))'
    """
    literal = _literal(x)
    return VARIABLE_PATTERN.sub(lambda _: literal, expression)


def sample_at(expression: str, x: float) -> float | None:
    """
    Значение функции в точке x.

    Args:
        expression: Выражение от переменной x
        x: Аргумент

    Returns:
        Конечное значение y или None, если вычисление неуспешно
        или результат не является конечным числом. Никогда не бросает.

    Examples:
        >>> sample_at("x^2", 3)
        9.0
        >>> sample_at("1/x", 0) is None
        True
    """
    if not is_valid_float(x):
        return None

    result = evaluate(substitute_variable(expression, x), AngleUnit.RADIANS)

    if not isinstance(result, CalculationSuccess):
        return None

    if isinstance(result.value, float) and is_valid_float(result.value):
        return result.value

    return None


def generate_table(
    expression: str,
    x_start: float,
    x_end: float,
    step: float,
) -> list[GraphSample]:
    """
    Таблица значений функции: x = x_start + i * step, пока x ≤ x_end.

    Шаг умножается на индекс, а не накапливается, чтобы сетка
    не дрейфовала из-за ошибок округления.

    Raises:
        ValueError: если step ≤ 0 или границы не конечны
    """
    if not (is_valid_float(x_start) and is_valid_float(x_end)):
        raise ValueError(f"table bounds must be finite, got [{x_start}, {x_end}]")

    if not is_valid_float(step) or step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    if x_end < x_start:
        return []

    # Последний узел, отличающийся от x_end на ошибку округления, включается
    intervals = (x_end - x_start) / step
    nearest = round(intervals)
    last_index = nearest if is_close(intervals, nearest) else math.floor(intervals)
    count = last_index + 1

    table = []
    for i in range(count):
        x = x_start + i * step
        table.append(GraphSample(x=x, y=sample_at(expression, x)))
    return table


def sample_curve(
    expression: str,
    x_min: float,
    x_max: float,
    num_points: int,
) -> list[GraphSample]:
    """
    Равномерная выборка num_points + 1 точек на [x_min, x_max].

    Точки с y = None — маркеры разрыва: кривая между ними не соединяется.

    Raises:
        ValueError: если num_points < 1 или x_max ≤ x_min
    """
    if num_points < 1:
        raise ValueError(f"num_points must be >= 1, got {num_points}")

    if not (is_valid_float(x_min) and is_valid_float(x_max)) or x_max <= x_min:
        raise ValueError(f"invalid range [{x_min}, {x_max}]")

    x_step = (x_max - x_min) / num_points

    samples = []
    for i in range(num_points + 1):
        x = x_min + i * x_step
        samples.append(GraphSample(x=x, y=sample_at(expression, x)))
    return samples
