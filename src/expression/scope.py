"""
Evaluation Scope — таблицы функций и констант вычислителя

Формирует явную таблицу функций для одного вызова вычисления:
- BASE_FUNCTIONS: общие функции (радианная тригонометрия)
- angle_overrides(unit): переопределения sin/cos/tan/asin/acos/atan для градусов
- build_functions(unit): итоговая таблица на вызов

Функции работают в вещественной области с семантикой IEEE:
выход из области определения (sqrt(-1), asin(2)) даёт nan,
переполнение даёт ±inf, логарифм нуля даёт -inf.
"""

import functools
import math
from typing import Any, Callable, Final, Mapping

from src.core.domain.units import AngleUnit, degrees_to_radians, radians_to_degrees
from src.core.math.combinatorics import combinations, factorial, permutations
from src.core.math.numerical_safeguards import ieee_divide, ieee_power, to_float

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

CONSTANTS: Final[Mapping[str, Any]] = {
    "pi": math.pi,
    "e": math.e,
    "tau": math.tau,
    "phi": (1.0 + math.sqrt(5.0)) / 2.0,
    "Infinity": math.inf,
    "NaN": math.nan,
    "true": True,
    "false": False,
}


# =============================================================================
# ВЕЩЕСТВЕННЫЕ ОБЁРТКИ
# =============================================================================


def real_valued(func: Callable[..., float]) -> Callable[..., float]:
    """
    Обёртка math-функции: ValueError → nan, OverflowError → inf.

    Ошибки типов аргументов (TypeError) не перехватываются.
    """

    @functools.wraps(func)
    def wrapper(*args: float) -> float:
        try:
            return func(*args)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf

    return wrapper


def _logarithm(func: Callable[[float], float]) -> Callable[[float], float]:
    """Логарифм с пределом в нуле: log(0) = -inf, log(x < 0) = nan."""

    @functools.wraps(func)
    def wrapper(x: float) -> float:
        if x == 0:
            return -math.inf
        if x < 0:
            return math.nan
        return func(x)

    return wrapper


def _log(x: float, base: float | None = None) -> float:
    """Натуральный логарифм или логарифм по основанию base."""
    natural = _logarithm(math.log)(x)
    if base is None:
        return natural
    return ieee_divide(natural, _logarithm(math.log)(base))


def _cbrt(x: float) -> float:
    return math.copysign(abs(to_float(x)) ** (1.0 / 3.0), x)


def _sign(x: float) -> float:
    if math.isnan(x):
        return math.nan
    return float((x > 0) - (x < 0))


def _mod(x: float, y: float) -> float:
    if y == 0:
        return x
    return x - y * math.floor(x / y)


def _round(x: float, digits: int = 0) -> float:
    return round(x, int(digits))


BASE_FUNCTIONS: Final[Mapping[str, Callable[..., Any]]] = {
    # Корни, степени, экспонента
    "sqrt": real_valued(math.sqrt),
    "cbrt": _cbrt,
    "pow": ieee_power,
    "exp": real_valued(math.exp),
    "expm1": real_valued(math.expm1),
    "hypot": math.hypot,
    # Логарифмы: log — натуральный (ln после нормализации)
    "log": _log,
    "log10": _logarithm(math.log10),
    "log2": _logarithm(math.log2),
    "log1p": real_valued(math.log1p),
    # Тригонометрия (радианы)
    "sin": real_valued(math.sin),
    "cos": real_valued(math.cos),
    "tan": real_valued(math.tan),
    "asin": real_valued(math.asin),
    "acos": real_valued(math.acos),
    "atan": math.atan,
    # Гиперболические
    "sinh": real_valued(math.sinh),
    "cosh": real_valued(math.cosh),
    "tanh": math.tanh,
    "asinh": math.asinh,
    "acosh": real_valued(math.acosh),
    "atanh": real_valued(math.atanh),
    # Округление и прочее
    "abs": abs,
    "floor": real_valued(math.floor),
    "ceil": real_valued(math.ceil),
    "round": _round,
    "sign": _sign,
    "mod": _mod,
    "min": min,
    "max": max,
    # Комбинаторика
    "factorial": factorial,
    "permutations": permutations,
    "combinations": combinations,
}


# =============================================================================
# УГЛОВОЙ РЕЖИМ
# =============================================================================


def _degree_overrides() -> dict[str, Callable[[float], float]]:
    return {
        "sin": real_valued(lambda x: math.sin(degrees_to_radians(x))),
        "cos": real_valued(lambda x: math.cos(degrees_to_radians(x))),
        "tan": real_valued(lambda x: math.tan(degrees_to_radians(x))),
        "asin": real_valued(lambda x: radians_to_degrees(math.asin(x))),
        "acos": real_valued(lambda x: radians_to_degrees(math.acos(x))),
        "atan": real_valued(lambda x: radians_to_degrees(math.atan(x))),
    }


def angle_overrides(angle_unit: AngleUnit) -> dict[str, Callable[[float], float]]:
    """
    Переопределения тригонометрии для углового режима.

    DEGREES: прямые функции переводят аргумент в радианы,
    обратные переводят результат в градусы.
    RADIANS: переопределений нет (нативная семантика).
    """
    if AngleUnit(angle_unit) is AngleUnit.DEGREES:
        return _degree_overrides()
    return {}


def build_functions(angle_unit: AngleUnit) -> dict[str, Callable[..., Any]]:
    """Таблица функций для одного вызова вычисления."""
    functions = dict(BASE_FUNCTIONS)
    functions.update(angle_overrides(angle_unit))
    return functions
