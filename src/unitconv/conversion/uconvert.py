"""
uconvert — Конверсия величин в другие единицы

Верхний уровень диспетчеризации:
1. Проверка совпадения размерностей (до любой арифметики)
2. Выбор стратегии: PURE_TEMPERATURE → аффинная формула,
   иначе умножение на convert_factor
3. Новая Quantity в целевых единицах (исходная не изменяется)

Examples:
    >>> reg = get_default_registry()
    >>> q = Quantity(value=3602, units=reg.unit("s"))
    >>> uconvert(reg.unit("hr"), q, reg).value
    Fraction(1801, 1800)
"""

from numbers import Number
from typing import Any, Optional, Union

from unitconv.core.domain.quantity import Quantity
from unitconv.core.domain.units import NO_UNITS, Units
from unitconv.core.errors import DimensionalMismatch
from unitconv.core.math.rational import coerce_operand
from unitconv.registry.registry import UnitRegistry, get_default_registry

from .factor import ConversionConfig, convert_factor, require_same_dimensions
from .temperature import ConversionStrategy, convert_temperature, select_strategy


def uconvert(
    target: Units,
    quantity: Union[Quantity, Number],
    registry: Optional[UnitRegistry] = None,
    config: Optional[ConversionConfig] = None,
) -> Quantity:
    """
    Конверсия величины в целевые единицы.

    Можно переключаться между эквивалентными представлениями одной
    единицы, например N·m и J. Простое число трактуется как безразмерная
    величина (см. uconvert_number).

    Args:
        target: Целевые единицы
        quantity: Quantity или число
        registry: Реестр единиц (default: get_default_registry())
        config: Конфигурация движка

    Returns:
        Новая Quantity в единицах target

    Raises:
        DimensionalMismatch: Если размерность target отличается
        UnknownUnit: Если символ не зарегистрирован
    """
    if not isinstance(quantity, Quantity):
        return uconvert_number(target, quantity, registry, config)

    registry = registry or get_default_registry()
    dimensions = require_same_dimensions(target, quantity.units, registry)

    strategy = select_strategy(dimensions, target, quantity.units)
    if strategy is ConversionStrategy.PURE_TEMPERATURE:
        value = convert_temperature(target, quantity.units, quantity.value, registry, config)
    else:
        factor = convert_factor(target, quantity.units, registry, config)
        value = quantity.value * coerce_operand(factor, quantity.value)

    return Quantity(value=value, units=target)


def uconvert_number(
    target: Units,
    number: Any,
    registry: Optional[UnitRegistry] = None,
    config: Optional[ConversionConfig] = None,
) -> Quantity:
    """
    Конверсия простого числа в безразмерные единицы target.

    Raises:
        DimensionalMismatch: Если target не безразмерна
    """
    registry = registry or get_default_registry()

    target_dimensions = registry.dimension_of(target)
    if not target_dimensions.is_dimensionless():
        raise DimensionalMismatch(
            target=target,
            source=NO_UNITS,
            target_dimensions=target_dimensions,
            source_dimensions=registry.dimension_of(NO_UNITS),
        )

    factor = convert_factor(target, NO_UNITS, registry, config)
    value = number * coerce_operand(factor, number)
    return Quantity(value=value, units=target)
