"""
Payloads — данные ядра для UI-коллабораторов

Результаты ядра (CalculationResult, StatisticsSummary, GraphSample) уходят
к UI как простые словари. Каждый словарь проверяется по JSON Schema
контракту (Draft 2020-12) своего типа до того, как покинет ядро.

Схемы (src/core/contracts/schema/):
- calculation_result.json — CalculationSuccess / CalculationFailure
- statistics_summary.json — StatisticsSummary
- graph_sample.json — GraphSample

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_payload никогда не возвращает словарь, нарушающий контракт
2. Схема загружается и проходит meta-валидацию один раз на процесс
"""

import functools
import json
from pathlib import Path
from typing import Any, Final, Iterable, Mapping

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

from src.core.domain.results import (
    CalculationFailure,
    CalculationSuccess,
    GraphSample,
    StatisticsSummary,
)

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

# Тип модели → имя контракта
CONTRACTS: Final[Mapping[type[BaseModel], str]] = {
    CalculationSuccess: "calculation_result",
    CalculationFailure: "calculation_result",
    StatisticsSummary: "statistics_summary",
    GraphSample: "graph_sample",
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolation(ValueError):
    """
    Данные не соответствуют контракту.

    errors — сообщения вида "<путь>: <описание>" по каждому нарушению.
    """

    def __init__(self, contract: str, errors: list[str]):
        self.contract = contract
        self.errors = errors
        super().__init__(f"{contract} contract violated: " + "; ".join(errors))


# =============================================================================
# СХЕМЫ
# =============================================================================


@functools.lru_cache(maxsize=None)
def load_schema(contract: str, schema_dir: Path = SCHEMA_DIR) -> dict[str, Any]:
    """
    Загрузка и meta-валидация схемы контракта.

    Raises:
        FileNotFoundError: если файла схемы нет
        ValueError: если файл не является корректной JSON Schema
    """
    schema_path = schema_dir / f"{contract}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

    return schema


@functools.lru_cache(maxsize=None)
def _validator(contract: str) -> Draft202012Validator:
    return Draft202012Validator(load_schema(contract))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def contract_errors(contract: str, payload: Mapping[str, Any]) -> list[str]:
    """Все нарушения контракта в стабильном порядке (пустой список — данные валидны)."""
    errors = []
    found = _validator(contract).iter_errors(payload)
    for error in sorted(found, key=lambda e: [str(part) for part in e.absolute_path]):
        path = "/".join(str(part) for part in error.absolute_path) or "<root>"
        errors.append(f"{path}: {error.message}")
    return errors


def validate_payload(contract: str, payload: Mapping[str, Any]) -> None:
    """
    Проверка словаря по контракту.

    Raises:
        ContractViolation: если есть хотя бы одно нарушение
    """
    errors = contract_errors(contract, payload)
    if errors:
        raise ContractViolation(contract, errors)


def contract_for(model: BaseModel) -> str:
    """
    Имя контракта для модели результата.

    Raises:
        TypeError: если для типа модели контракт не объявлен
    """
    try:
        return CONTRACTS[type(model)]
    except KeyError:
        raise TypeError(f"No contract for {type(model).__name__}") from None


# =============================================================================
# ЭКСПОРТ
# =============================================================================


def to_payload(model: BaseModel) -> dict[str, Any]:
    """
    Результат ядра → проверенный словарь для UI.

    Числа остаются float (в том числе ±inf/nan у value вычисления),
    последовательности становятся списками.

    Examples:
        >>> to_payload(GraphSample(x=0.0, y=None))
        {'x': 0.0, 'y': None}
    """
    payload = model.model_dump()
    validate_payload(contract_for(model), payload)
    return payload


def to_payloads(models: Iterable[BaseModel]) -> list[dict[str, Any]]:
    """Пакетный to_payload (например, точки sample_curve)."""
    return [to_payload(model) for model in models]
