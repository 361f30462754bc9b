"""
Expression Normalizer — приведение пользовательского ввода к каноническому виду

Преобразует «человеческую» запись выражения в форму, которую вычислитель
понимает однозначно. Проходы выполняются строго в таком порядке
(каждый следующий рассчитывает на результат предыдущих):

1. Глифы: × → *, ÷ → /, π → pi
2. √( → sqrt(
3. Логарифмы: ln( → log( (натуральный), log( → log10(, log10( и log2( без изменений
4. Неявное умножение: 2π → 2*pi, 2(3+4) → 2*(3+4), 3sin(0) → 3*sin(0)
5. Проценты: 50% → (50/100)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. normalize — чистая тотальная функция: строка на входе, строка на выходе
2. Цифры в именах log10 / log2 никогда не отделяются умножением
3. Повторная нормализация не гарантирована: нормализуется исходный ввод, ровно один раз
"""

import re
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Визуальные глифы → канонические операторы и имена
GLYPH_REPLACEMENTS: Final[tuple[tuple[str, str], ...]] = (
    ("×", "*"),
    ("÷", "/"),
    ("π", "pi"),
)

SQRT_GLYPH: Final[str] = "√("
SQRT_CALL: Final[str] = "sqrt("

# Имя функции «голое», если перед ним нет буквы или подчёркивания
_BARE = r"(?<![A-Za-z_])"

# Временные маркеры для защиты имён логарифмов от переименования
_NATLOG_TOKEN: Final[str] = "__NATLOG__("
_LOG10_TOKEN: Final[str] = "__LOG10__("
_LOG2_TOKEN: Final[str] = "__LOG2__("

_LN_RE: Final[re.Pattern[str]] = re.compile(_BARE + r"ln\(")
_LOG10_RE: Final[re.Pattern[str]] = re.compile(_BARE + r"log10\(")
_LOG2_RE: Final[re.Pattern[str]] = re.compile(_BARE + r"log2\(")
_LOG_RE: Final[re.Pattern[str]] = re.compile(_BARE + r"log\(")

# Цифра, за которой (возможно через пробелы) идёт буква или открывающая скобка
_IMPLICIT_MULT_RE: Final[re.Pattern[str]] = re.compile(r"(\d)(?=\s*[a-zA-Z(])")

# Окно просмотра назад перед цифрой и суффиксы имён с цифрами (log10, log2)
IMPLICIT_MULT_LOOKBEHIND: Final[int] = 4
_LOG_SUFFIX_RE: Final[re.Pattern[str]] = re.compile(r"log1?$")

# Цифры, продолжающие идентификатор: expm1, atan2, x2
_IDENTIFIER_DIGITS_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_]\d*\Z")

_PERCENT_RE: Final[re.Pattern[str]] = re.compile(r"(\d+\.?\d*)%")


# =============================================================================
# ПРОХОДЫ
# =============================================================================


def replace_glyphs(text: str) -> str:
    """Проходы 1-2: глифы операторов, π и √(."""
    for glyph, canonical in GLYPH_REPLACEMENTS:
        text = text.replace(glyph, canonical)
    return text.replace(SQRT_GLYPH, SQRT_CALL)


def alias_logarithms(text: str) -> str:
    """
    Проход 3: разрешение неоднозначности имён логарифмов.

    Натуральный логарифм вычислителя называется log, десятичный — log10,
    поэтому пользовательские ln( и log( нельзя переименовать напрямую.
    Последовательность protect → rename → restore:
    1. ln(, log10(, log2( прячутся за маркерами
    2. каждый оставшийся log( становится log10(
    3. маркеры восстанавливаются в канонические имена

    Examples:
        >>> alias_logarithms("log(1000) + ln(e)")
        'log10(1000) + log(e)'
        >>> alias_logarithms("log10(5) * log2(8)")
        'log10(5) * log2(8)'
    """
    # Protect
    text = _LN_RE.sub(_NATLOG_TOKEN, text)
    text = _LOG10_RE.sub(_LOG10_TOKEN, text)
    text = _LOG2_RE.sub(_LOG2_TOKEN, text)

    # Rename
    text = _LOG_RE.sub("log10(", text)

    # Restore
    text = text.replace(_NATLOG_TOKEN, "log(")
    text = text.replace(_LOG10_TOKEN, "log10(")
    return text.replace(_LOG2_TOKEN, "log2(")


def insert_implicit_multiplication(text: str) -> str:
    """
    Проход 4: явный оператор * после цифры перед буквой или скобкой.

    Цифра не отделяется, если окно из IMPLICIT_MULT_LOOKBEHIND символов
    перед ней заканчивается на "log1" или "log" (цифры имён log10, log2),
    а также если она входит в имя: перед цепочкой цифр стоит буква
    или подчёркивание (expm1, log1p).

    Examples:
        >>> insert_implicit_multiplication("2pi + 3 sin(0)")
        '2*pi + 3* sin(0)'
        >>> insert_implicit_multiplication("log10(100)")
        'log10(100)'
        >>> insert_implicit_multiplication("expm1(1)")
        'expm1(1)'
    """

    def _insert(match: re.Match[str]) -> str:
        start = match.start()
        window = text[max(0, start - IMPLICIT_MULT_LOOKBEHIND):start]
        if _LOG_SUFFIX_RE.search(window) or _IDENTIFIER_DIGITS_RE.search(text, 0, start):
            return match.group(1)
        return match.group(1) + "*"

    return _IMPLICIT_MULT_RE.sub(_insert, text)


def expand_percentages(text: str) -> str:
    """
    Проход 5: <число>% → (<число>/100).

    Examples:
        >>> expand_percentages("50%")
        '(50/100)'
    """
    return _PERCENT_RE.sub(r"(\1/100)", text)


# =============================================================================
# NORMALIZE
# =============================================================================


def normalize(text: str) -> str:
    """
    Полная нормализация пользовательского выражения.

    Args:
        text: Исходный ввод пользователя

    Returns:
        Каноническое выражение для вычислителя

    Examples:
        >>> normalize("2π")
        '2*pi'
        >>> normalize("3 × √(16) ÷ 2")
        '3 * sqrt(16) / 2'
        >>> normalize("2(3+4)")
        '2*(3+4)'
    """
    text = replace_glyphs(text)
    text = alias_logarithms(text)
    text = insert_implicit_multiplication(text)
    return expand_percentages(text)
