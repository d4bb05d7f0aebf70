"""
unitconv — конверсия физических величин между единицами измерения.

Гарантирует размерную корректность и, где возможно, точную рациональную
арифметику вместо float-масштабирования:

    >>> reg = get_default_registry()
    >>> uconvert(reg.unit("hr"), Quantity(value=3602, units=reg.unit("s"))).value
    Fraction(1801, 1800)
"""

import logging

from unitconv.conversion import (
    DEFAULT_CONFIG,
    ConversionConfig,
    ConversionStrategy,
    cast_value,
    convert_dimensioned,
    convert_factor,
    convert_numeric_type,
    convert_quantity,
    convert_temperature,
    convert_unitless,
    from_number,
    select_strategy,
    to_number,
    uconvert,
    uconvert_number,
)
from unitconv.core.domain import (
    DIMENSIONLESS,
    NO_UNITS,
    DimensionAtom,
    Dimensions,
    Quantity,
    UnitAtom,
    Units,
    dimensions_equal,
)
from unitconv.core.errors import (
    DimensionalMismatch,
    InexactCastError,
    UnitConversionError,
    UnknownUnit,
)
from unitconv.registry import UnitDefinition, UnitRegistry, get_default_registry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Conversion
    "uconvert",
    "uconvert_number",
    "convert_factor",
    "convert_temperature",
    "select_strategy",
    "ConversionStrategy",
    "ConversionConfig",
    "DEFAULT_CONFIG",
    # Adapters
    "cast_value",
    "convert_numeric_type",
    "convert_quantity",
    "convert_dimensioned",
    "convert_unitless",
    "to_number",
    "from_number",
    # Model
    "DimensionAtom",
    "Dimensions",
    "DIMENSIONLESS",
    "dimensions_equal",
    "UnitAtom",
    "Units",
    "NO_UNITS",
    "Quantity",
    # Registry
    "UnitDefinition",
    "UnitRegistry",
    "get_default_registry",
    # Errors
    "UnitConversionError",
    "DimensionalMismatch",
    "UnknownUnit",
    "InexactCastError",
]
