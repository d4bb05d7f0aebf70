"""
Conversion — движок множителей, температура, uconvert и адаптеры типов.
"""

from .adapters import (
    cast_value,
    convert_dimensioned,
    convert_numeric_type,
    convert_quantity,
    convert_unitless,
    from_number,
    to_number,
)
from .factor import (
    DEFAULT_CONFIG,
    ConversionConfig,
    convert_factor,
    require_same_dimensions,
    tens_exponent_sum,
    units_base_factor,
)
from .temperature import ConversionStrategy, convert_temperature, select_strategy
from .uconvert import uconvert, uconvert_number

__all__ = [
    # Factor engine
    "DEFAULT_CONFIG",
    "ConversionConfig",
    "convert_factor",
    "require_same_dimensions",
    "tens_exponent_sum",
    "units_base_factor",
    # Temperature
    "ConversionStrategy",
    "convert_temperature",
    "select_strategy",
    # Quantity converter
    "uconvert",
    "uconvert_number",
    # Adapters
    "cast_value",
    "convert_dimensioned",
    "convert_numeric_type",
    "convert_quantity",
    "convert_unitless",
    "from_number",
    "to_number",
]
