"""
Adapters — Конверсия числового типа величин

Мост между конверсией единиц и конверсией числовых типов:
- convert_numeric_type: сменить тип значения, единицы без изменений
- convert_quantity: сменить единицы (та же размерность) и тип значения
- convert_dimensioned: сменить тип значения, проверив размерность
- convert_unitless: сменить тип значения величины без единиц
- to_number: безразмерная величина → простое число
- from_number: простое число → величина без единиц

Приведение к целочисленному типу значения с дробной частью — ошибка
InexactCastError, а не молчаливое усечение.
"""

from numbers import Integral
from typing import Any, Callable, Optional

from unitconv.core.domain.dimensions import Dimensions
from unitconv.core.domain.quantity import Quantity
from unitconv.core.domain.units import NO_UNITS, Units
from unitconv.core.errors import DimensionalMismatch, InexactCastError
from unitconv.registry.registry import UnitRegistry, get_default_registry

from .factor import ConversionConfig, require_same_dimensions
from .uconvert import uconvert

NumericType = Callable[[Any], Any]


def cast_value(value: Any, numeric_type: Optional[NumericType]) -> Any:
    """
    Приведение значения к числовому типу.

    Args:
        value: Исходное значение
        numeric_type: Целевой тип (int, float, Fraction, Decimal, ...);
            None — без приведения

    Raises:
        InexactCastError: Если целочисленный тип теряет дробную часть
    """
    if numeric_type is None:
        return value

    result = numeric_type(value)
    if isinstance(numeric_type, type) and issubclass(numeric_type, Integral) and result != value:
        raise InexactCastError(value, numeric_type)
    return result


def convert_numeric_type(quantity: Quantity, numeric_type: NumericType) -> Quantity:
    """
    Смена числового типа значения. Единицы не изменяются.

    Examples:
        >>> q = Quantity(value=Fraction(1, 2), units=NO_UNITS)
        >>> convert_numeric_type(q, float).value
        0.5
    """
    return Quantity(value=cast_value(quantity.value, numeric_type), units=quantity.units)


def convert_quantity(
    quantity: Quantity,
    target: Units,
    numeric_type: Optional[NumericType] = None,
    registry: Optional[UnitRegistry] = None,
    config: Optional[ConversionConfig] = None,
) -> Quantity:
    """
    Конверсия в другие единицы той же размерности с приведением типа.

    Raises:
        DimensionalMismatch: Если размерности различаются
        InexactCastError: Если целочисленный тип теряет дробную часть
    """
    registry = registry or get_default_registry()
    require_same_dimensions(target, quantity.units, registry)

    converted = uconvert(target, quantity, registry, config)
    return Quantity(value=cast_value(converted.value, numeric_type), units=target)


def convert_dimensioned(
    quantity: Quantity,
    dimensions: Dimensions,
    numeric_type: NumericType,
    registry: Optional[UnitRegistry] = None,
) -> Quantity:
    """
    Смена числового типа с проверкой размерности. Единицы не изменяются.

    Raises:
        DimensionalMismatch: Если размерность величины отличается от dimensions
    """
    registry = registry or get_default_registry()

    source_dimensions = registry.dimension_of(quantity.units)
    if source_dimensions != dimensions:
        raise DimensionalMismatch(
            target=dimensions,
            source=quantity.units,
            target_dimensions=dimensions,
            source_dimensions=source_dimensions,
        )

    return Quantity(value=cast_value(quantity.value, numeric_type), units=quantity.units)


def convert_unitless(quantity: Quantity, numeric_type: NumericType) -> Quantity:
    """
    Смена числового типа величины без единиц.

    Безразмерная величина с единицами (например, m/cm) сюда не подходит:
    сначала её нужно сконвертировать через to_number или uconvert.

    Raises:
        DimensionalMismatch: Если у величины есть единицы
    """
    if not quantity.is_unitless():
        raise DimensionalMismatch(target=NO_UNITS, source=quantity.units)

    return Quantity(value=cast_value(quantity.value, numeric_type), units=NO_UNITS)


def to_number(
    quantity: Quantity,
    numeric_type: Optional[NumericType] = float,
    registry: Optional[UnitRegistry] = None,
    config: Optional[ConversionConfig] = None,
) -> Any:
    """
    Безразмерная величина → простое число.

    Величина конвертируется в NO_UNITS, поэтому 1 m/cm даёт 100.

    Raises:
        DimensionalMismatch: Если величина размерная

    Examples:
        >>> reg = get_default_registry()
        >>> q = Quantity(value=50, units=reg.unit("percent"))
        >>> to_number(q, float, reg)
        0.5
    """
    registry = registry or get_default_registry()

    source_dimensions = registry.dimension_of(quantity.units)
    if not source_dimensions.is_dimensionless():
        raise DimensionalMismatch(
            target=NO_UNITS,
            source=quantity.units,
            target_dimensions=registry.dimension_of(NO_UNITS),
            source_dimensions=source_dimensions,
        )

    converted = uconvert(NO_UNITS, quantity, registry, config)
    return cast_value(converted.value, numeric_type)


def from_number(number: Any, numeric_type: Optional[NumericType] = None) -> Quantity:
    """Простое число → величина без единиц (без арифметики)."""
    return Quantity(value=cast_value(number, numeric_type), units=NO_UNITS)
