"""
Results — Модели результатов ядра калькулятора

Immutable Pydantic модели, которые ядро передаёт UI-коллабораторам:
- CalculationSuccess / CalculationFailure — результат вычисления выражения
- StatisticsSummary — сводка описательной статистики
- GraphSample — точка графика функции

Полная совместимость с JSON Schema (src/core/contracts/schema/*.json).
Экземпляры создаются заново на каждый вызов и нигде не кэшируются.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, field_serializer, model_validator


# =============================================================================
# CALCULATION RESULT
# =============================================================================


class CalculationSuccess(BaseModel):
    """
    Успешный результат вычисления.

    value — число (float, в том числе ±inf/nan) или строка для
    нечисловых результатов (boolean, списки).
    display_value — всегда конечная строка для отображения.
    """

    success: Literal[True] = Field(True, description="Признак успеха")
    value: Union[float, str] = Field(..., description="Значение результата")
    display_value: str = Field(..., description="Строка для отображения")

    model_config = {"frozen": True}


class CalculationFailure(BaseModel):
    """Неуспешный результат вычисления с коротким сообщением для пользователя."""

    success: Literal[False] = Field(False, description="Признак успеха")
    error: str = Field(..., min_length=1, description="Сообщение об ошибке")

    model_config = {"frozen": True}


# Tagged union: ровно один вариант, различается по полю success
CalculationResult = Union[CalculationSuccess, CalculationFailure]


# =============================================================================
# STATISTICS SUMMARY
# =============================================================================


class StatisticsSummary(BaseModel):
    """
    Сводка описательной статистики выборки.

    Инвариант: count == len(values).
    Для пустой выборки все числовые поля равны 0, mode пустой.
    """

    values: tuple[float, ...] = Field(..., description="Исходные значения (порядок сохранён)")
    mean: float = Field(..., description="Среднее арифметическое")
    median: float = Field(..., description="Медиана")
    mode: tuple[float, ...] = Field(..., description="Мода (по возрастанию, может быть пустой)")
    std_dev: float = Field(..., description="Генеральное стандартное отклонение")
    variance: float = Field(..., description="Генеральная дисперсия")
    sample_std_dev: float = Field(..., description="Выборочное стандартное отклонение")
    sample_variance: float = Field(..., description="Выборочная дисперсия")
    sum: float = Field(..., description="Сумма значений")
    count: int = Field(..., ge=0, description="Количество значений")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_count(self) -> "StatisticsSummary":
        """Проверка согласованности count и values."""
        if self.count != len(self.values):
            raise ValueError(
                f"count {self.count} does not match number of values {len(self.values)}"
            )
        return self

    @field_serializer("values", "mode")
    def serialize_sequence(self, value: tuple[float, ...]) -> list[float]:
        """Последовательности сериализуются списками (JSON array)."""
        return list(value)


# =============================================================================
# GRAPH SAMPLE
# =============================================================================


class GraphSample(BaseModel):
    """
    Точка графика функции.

    y = None — функция не определена в x (разрыв или вне области).
    """

    x: float = Field(..., description="Аргумент")
    y: Optional[float] = Field(None, description="Значение функции или None")

    model_config = {"frozen": True}

    @property
    def is_defined(self) -> bool:
        """True если функция определена в точке."""
        return self.y is not None
