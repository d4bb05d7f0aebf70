"""
Contract Validation Module

Модуль для валидации JSON контрактов unitconv (таблица реестра единиц).
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    UnitTableValidator,
    format_error,
    validate_unit_table,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "UnitTableValidator",
    # Functions
    "format_error",
    "validate_unit_table",
]
