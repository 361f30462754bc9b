"""
Evaluation Adapter — вычисление пользовательских выражений

Конвейер: текст → normalize → диалект вычислителя → разбор → simpleeval → результат.

- Пустой ввод → CalculationFailure("Empty expression") до нормализации
- Угловой режим передаётся явной таблицей функций на вызов (без глобального состояния)
- Деление на ноль и переполнение — не ошибки: ±Infinity / NaN как успешный результат
- Любое исключение разбора/вычисления превращается в CalculationFailure
  с коротким сообщением для пользователя

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. evaluate никогда не пробрасывает исключения
2. Ровно один угловой режим на вызов
3. display_value всегда конечная строка
"""

import ast
from typing import Any, Final

import structlog
from simpleeval import DEFAULT_OPERATORS, EvalWithCompoundTypes

from src.core.domain.results import (
    CalculationFailure,
    CalculationResult,
    CalculationSuccess,
)
from src.core.domain.units import AngleUnit
from src.core.math.numerical_safeguards import ieee_divide, ieee_power, to_float
from src.expression.formatting import (
    DEFAULT_DISPLAY_FORMAT,
    DisplayFormat,
    format_number,
    format_value,
)
from src.expression.normalizer import normalize
from src.expression.scope import CONSTANTS, build_functions

logger = structlog.get_logger()

# =============================================================================
# СООБЩЕНИЯ ОБ ОШИБКАХ
# =============================================================================

EMPTY_EXPRESSION_ERROR: Final[str] = "Empty expression"
NO_RESULT_ERROR: Final[str] = "No result"
GENERIC_SYNTAX_ERROR: Final[str] = "Syntax error"

# Сообщения длиннее порога заменяются на GENERIC_SYNTAX_ERROR
MAX_PASSTHROUGH_ERROR_LENGTH: Final[int] = 30

# Подстрока исходной ошибки → короткое сообщение (первое совпадение)
ERROR_MESSAGES: Final[tuple[tuple[str, str], ...]] = (
    ("is not defined", "Unknown variable"),
    ("not defined", "Unknown function"),
    ("Unexpected end of expression", "Incomplete expression"),
    ("Value expected", "Missing value"),
    ("Parenthesis ) expected", "Missing )"),
    ("by zero", "Divide by zero"),
    ("non-negative", "Invalid argument"),
)

# Операторы, после которых выражение не может закончиться
TRAILING_OPERATORS: Final[tuple[str, ...]] = ("+", "-", "*", "/", "%", "^", ",")

# Операторы вычислителя: деление и степень по IEEE
OPERATORS: Final[dict[type, Any]] = {
    **DEFAULT_OPERATORS,
    ast.Div: ieee_divide,
    ast.Pow: ieee_power,
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExpressionSyntaxError(ValueError):
    """Синтаксическая ошибка в нормализованном выражении."""

    pass


# =============================================================================
# РАЗБОР
# =============================================================================


def to_evaluator_dialect(canonical: str) -> str:
    """
    Каноническое выражение → синтаксис вычислителя.

    Степень в канонической записи — ^, у вычислителя — **
    (правоассоциативная, приоритет выше унарного минуса).
    """
    return canonical.replace("^", "**")


def _describe_syntax_error(error: SyntaxError, source: str) -> str:
    message = error.msg or ""
    if "never closed" in message:
        return "Parenthesis ) expected"
    if "unmatched" in message:
        return message
    # Парсер сообщает offset 0 (или за концом строки) для обрыва на операторе
    if (
        not error.offset
        or error.offset > len(source)
        or source.endswith(TRAILING_OPERATORS)
    ):
        return "Unexpected end of expression"
    return f"Value expected (char {error.offset})"


def parse_expression(source: str) -> ast.Expression:
    """
    Разбор выражения в синтаксисе вычислителя (без вычисления).

    Raises:
        ExpressionSyntaxError: если выражение синтаксически некорректно
    """
    try:
        return ast.parse(source.strip(), mode="eval")
    except SyntaxError as e:
        raise ExpressionSyntaxError(_describe_syntax_error(e, source.strip())) from e
    except ValueError as e:
        # Например, нулевые байты в строке
        raise ExpressionSyntaxError(str(e)) from e


def user_friendly_error(error: BaseException) -> str:
    """
    Короткое сообщение для пользователя по исключению вычислителя.

    Examples:
        >>> user_friendly_error(ZeroDivisionError("integer modulo by zero"))
        'Divide by zero'
        >>> user_friendly_error(ValueError("oops"))
        'oops'
    """
    message = str(error)

    for pattern, friendly in ERROR_MESSAGES:
        if pattern in message:
            return friendly

    if len(message) > MAX_PASSTHROUGH_ERROR_LENGTH:
        return GENERIC_SYNTAX_ERROR

    return message or GENERIC_SYNTAX_ERROR


# =============================================================================
# EVALUATE
# =============================================================================


def _to_result(raw: Any, fmt: DisplayFormat) -> CalculationResult:
    if raw is None:
        return CalculationFailure(error=NO_RESULT_ERROR)

    if isinstance(raw, bool):
        text = format_value(raw, fmt)
        return CalculationSuccess(value=text, display_value=text)

    if isinstance(raw, (int, float)):
        value = to_float(raw)
        return CalculationSuccess(value=value, display_value=format_number(value, fmt))

    text = format_value(raw, fmt)
    return CalculationSuccess(value=text, display_value=text)


def evaluate(
    expression: str,
    angle_unit: AngleUnit = AngleUnit.RADIANS,
    display: DisplayFormat | None = None,
) -> CalculationResult:
    """
    Вычисление пользовательского выражения.

    Args:
        expression: Исходный ввод пользователя
        angle_unit: Угловой режим тригонометрии (default: RADIANS)
        display: Параметры форматирования (default: DEFAULT_DISPLAY_FORMAT)

    Returns:
        CalculationSuccess с value и display_value,
        либо CalculationFailure с коротким сообщением

    Examples:
        >>> evaluate("2 + 3 * 4").value
        14.0
        >>> evaluate("1/0").display_value
        'Infinity'
        >>> evaluate("sin(90)", AngleUnit.DEGREES).value
        1.0
        >>> evaluate("   ").error
        'Empty expression'
    """
    if not expression.strip():
        return CalculationFailure(error=EMPTY_EXPRESSION_ERROR)

    fmt = display or DEFAULT_DISPLAY_FORMAT

    try:
        source = to_evaluator_dialect(normalize(expression))
        parse_expression(source)

        evaluator = EvalWithCompoundTypes(
            operators=OPERATORS,
            functions=build_functions(AngleUnit(angle_unit)),
            names=dict(CONSTANTS),
        )
        raw = evaluator.eval(source.strip())
    except Exception as e:
        logger.debug(
            "Expression evaluation failed",
            expression=expression,
            angle_unit=str(angle_unit),
            error=str(e),
            error_type=type(e).__name__,
        )
        return CalculationFailure(error=user_friendly_error(e))

    return _to_result(raw, fmt)


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_valid_expression(expression: str) -> bool:
    """
    Синтаксическая корректность выражения (для live-подсветки).

    False для пустого ввода; иначе True, если normalize + разбор
    проходят без исключений. Вычисление не выполняется.
    """
    if not expression.strip():
        return False

    try:
        parse_expression(to_evaluator_dialect(normalize(expression)))
    except ExpressionSyntaxError:
        return False

    return True


def has_balanced_parentheses(expression: str) -> bool:
    """
    Сбалансированность круглых скобок.

    Один проход слева направо со знаковым счётчиком глубины:
    скобки сбалансированы, если счётчик ни разу не ушёл в минус
    и в конце равен нулю.

    Examples:
        >>> has_balanced_parentheses("()()((()))")
        True
        >>> has_balanced_parentheses("())")
        False
    """
    depth = 0
    for char in expression:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def count_unclosed_parentheses(expression: str) -> int:
    """
    Количество незакрытых скобок: max(0, итоговая глубина).

    Examples:
        >>> count_unclosed_parentheses("(sin(x)")
        1
    """
    depth = 0
    for char in expression:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
    return max(0, depth)
