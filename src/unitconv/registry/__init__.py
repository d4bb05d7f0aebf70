"""
Unit Registry — неизменяемые таблицы единиц.

Реестр строится из декларативной таблицы и только читается при конверсии.
"""

from .registry import UnitDefinition, UnitRegistry, get_default_registry
from .si_table import SI_UNIT_TABLE

__all__ = [
    "SI_UNIT_TABLE",
    "UnitDefinition",
    "UnitRegistry",
    "get_default_registry",
]
