"""
Contract Module

JSON Schema контракты данных, которые ядро калькулятора передаёт UI.
"""

from .payloads import (
    CONTRACTS,
    ContractViolation,
    contract_errors,
    contract_for,
    load_schema,
    to_payload,
    to_payloads,
    validate_payload,
)

__all__ = [
    "CONTRACTS",
    "ContractViolation",
    "contract_errors",
    "contract_for",
    "load_schema",
    "to_payload",
    "to_payloads",
    "validate_payload",
]
