"""
Quantity — Модель физической величины

Immutable Pydantic модель: числовое значение + составная единица.
Пара (value, units) — единственное состояние. Конверсия всегда создаёт
новый экземпляр, исходный не изменяется.
"""

from numbers import Number
from typing import Any

from pydantic import BaseModel, Field, field_validator

from unitconv.core.domain.units import NO_UNITS, Units


class Quantity(BaseModel):
    """
    Числовое значение с единицами измерения.

    value может быть любым числовым типом (int, Fraction, float, complex,
    Decimal): тип значения сохраняется, если множитель конверсии точный.
    Decimal-значение всегда остаётся Decimal: множитель и сдвиг шкалы
    приводятся к Decimal перед арифметикой.
    """

    value: Any = Field(..., description="Числовое значение")
    units: Units = Field(default=NO_UNITS, description="Единицы измерения")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_numeric(cls, v: Any) -> Any:
        if isinstance(v, bool) or not isinstance(v, Number):
            raise ValueError(f"Quantity value must be a number, got {type(v).__name__}")
        return v

    def is_unitless(self) -> bool:
        return self.units.is_unitless()

    def __str__(self) -> str:
        if self.units.is_unitless():
            return str(self.value)
        return f"{self.value} {self.units}"
