"""
Temperature — Аффинная конверсия абсолютной температуры

Температурные шкалы (°C, °F) имеют сдвиг нуля, поэтому конверсия
абсолютной температуры требует и сдвига, и масштабирования:

    value' = (value + offset(source)) * scale - offset(target)

где scale = convert_factor(target, source) — чисто мультипликативный
множитель, а offset(u) — сдвиг нуля шкалы u в единицах самой шкалы
(для единицы с SI-префиксом сдвиг пересчитывается в единицы с префиксом).

Аффинная формула применяется ТОЛЬКО когда размерность — ровно
{Temperature: 1} и обе стороны — одна единица в первой степени.
Составные размерности с температурой (теплоёмкость J/K и т.п.) описывают
разность температур и конвертируются чистым масштабированием.
"""

from enum import Enum
from fractions import Fraction
from typing import Any, Optional

from unitconv.core.domain.dimensions import PURE_TEMPERATURE, Dimensions
from unitconv.core.domain.units import Units
from unitconv.core.math.rational import coerce_operand
from unitconv.registry.registry import UnitRegistry, get_default_registry

from .factor import ConversionConfig, convert_factor


class ConversionStrategy(str, Enum):
    """Формула конверсии величины."""

    PURE_TEMPERATURE = "pure_temperature"
    GENERIC_MULTIPLICATIVE = "generic_multiplicative"


def select_strategy(dimensions: Dimensions, target: Units, source: Units) -> ConversionStrategy:
    """
    Выбор формулы конверсии.

    Args:
        dimensions: Общая (уже проверенная) размерность target и source
        target: Целевые единицы
        source: Исходные единицы

    Returns:
        PURE_TEMPERATURE для абсолютной температуры в одиночных единицах,
        иначе GENERIC_MULTIPLICATIVE
    """
    if (
        dimensions == PURE_TEMPERATURE
        and target.is_single_atom()
        and source.is_single_atom()
    ):
        return ConversionStrategy.PURE_TEMPERATURE

    return ConversionStrategy.GENERIC_MULTIPLICATIVE


def _offset_in_units(units: Units, registry: UnitRegistry) -> Fraction:
    """
    Сдвиг нуля шкалы в единицах с префиксом: 273.15 °C = 273150 m°C.
    """
    atom = units.atoms[0]
    offset = registry.temperature_offset(atom.symbol)
    return offset / Fraction(10) ** int(atom.tens_exponent)


def convert_temperature(
    target: Units,
    source: Units,
    value: Any,
    registry: Optional[UnitRegistry] = None,
    config: Optional[ConversionConfig] = None,
) -> Any:
    """
    Конверсия значения абсолютной температуры.

    Args:
        target: Целевая единица температуры (одиночный атом)
        source: Исходная единица температуры (одиночный атом)
        value: Значение в source
        registry: Реестр единиц
        config: Конфигурация движка

    Returns:
        Значение в target. Для int/Fraction входа результат точный.

    Raises:
        DimensionalMismatch: Если размерности различаются
        ValueError: Если target или source не одиночный атом

    Examples:
        >>> reg = get_default_registry()
        >>> convert_temperature(reg.unit("°F"), reg.unit("°C"), 0, reg)
        Fraction(32, 1)
    """
    registry = registry or get_default_registry()

    if not (target.is_single_atom() and source.is_single_atom()):
        raise ValueError(
            f"Affine temperature conversion requires single units, got [{source}] -> [{target}]"
        )

    scale = convert_factor(target, source, registry, config)
    if target == source:
        return value

    source_offset = coerce_operand(_offset_in_units(source, registry), value)
    target_offset = coerce_operand(_offset_in_units(target, registry), value)
    scale = coerce_operand(scale, value)

    return (value + source_offset) * scale - target_offset
