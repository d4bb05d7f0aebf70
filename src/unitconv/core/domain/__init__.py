"""
Domain models and value objects.

Contains fundamental domain entities: Dimensions, Units, Quantity.
"""

from unitconv.core.domain.dimensions import (
    DIMENSIONLESS,
    PURE_TEMPERATURE,
    TEMPERATURE_SYMBOL,
    DimensionAtom,
    Dimensions,
    dimensions_equal,
)
from unitconv.core.domain.quantity import Quantity
from unitconv.core.domain.units import NO_UNITS, SI_PREFIXES, UnitAtom, Units

__all__ = [
    # Dimensions
    "DIMENSIONLESS",
    "PURE_TEMPERATURE",
    "TEMPERATURE_SYMBOL",
    "DimensionAtom",
    "Dimensions",
    "dimensions_equal",
    # Units
    "NO_UNITS",
    "SI_PREFIXES",
    "UnitAtom",
    "Units",
    # Quantity
    "Quantity",
]
