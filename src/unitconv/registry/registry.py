"""
UnitRegistry — Явный неизменяемый реестр единиц

Реестр строится один раз из декларативной таблицы (unit_table.json контракт)
и передаётся по ссылке во все операции конверсии. После построения данные
реестра не изменяются, поэтому конверсии можно выполнять конкурентно без
блокировок.

Операции реестра:
- symbol_dimensions(symbol) → Dimensions
- base_factor(symbol) → BaseFactor(inexact, exact)
- tens_exponent(atom) → степень десяти префикса атома
- temperature_offset(symbol) → сдвиг нуля шкалы (0 для обычных единиц)
- dimension_of(units) → Dimensions составной единицы

Все операции немедленно бросают UnknownUnit для незарегистрированного символа.
"""

import logging
from fractions import Fraction
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, Field

from unitconv.core.contracts import validate_unit_table
from unitconv.core.domain.dimensions import (
    DIMENSIONLESS,
    PURE_TEMPERATURE,
    Dimensions,
)
from unitconv.core.domain.units import SI_PREFIXES, UnitAtom, Units
from unitconv.core.errors import UnknownUnit
from unitconv.core.math.numerical_safeguards import validate_positive
from unitconv.core.math.rational import BaseFactor, to_fraction
from unitconv.registry.si_table import SI_UNIT_TABLE

logger = logging.getLogger(__name__)


# =============================================================================
# UNIT DEFINITION
# =============================================================================


class UnitDefinition(BaseModel):
    """
    Строка реестра: всё, что известно об одном символе единицы.

    Immutable модель (frozen=True).
    """

    symbol: str = Field(..., min_length=1, description="Символ единицы")
    name: str = Field(..., min_length=1, description="Полное имя единицы")
    dimensions: Dimensions = Field(..., description="Размерность единицы")
    inexact: float = Field(default=1.0, gt=0, description="Float-часть базового множителя")
    exact: Fraction = Field(default=Fraction(1), description="Точная часть базового множителя")
    offset: Fraction = Field(default=Fraction(0), description="Сдвиг нуля шкалы температуры")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def base_factor(self) -> BaseFactor:
        return BaseFactor(inexact=self.inexact, exact=self.exact)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "UnitDefinition":
        """
        Построение из строки таблицы (уже прошедшей JSON Schema валидацию).

        Raises:
            ValueError: Если точная часть задана float или offset задан
                для единицы, не являющейся чистой температурой
        """
        symbol = row["symbol"]
        base_factor = row["base_factor"]

        try:
            exact = to_fraction(base_factor.get("exact", 1))
            offset = to_fraction(row.get("offset", 0))
        except TypeError as e:
            raise ValueError(f"Unit {symbol!r}: {e}") from e

        inexact = float(base_factor.get("inexact", 1.0))
        validate_positive(inexact, f"Unit {symbol!r} inexact base factor")

        dimensions = Dimensions.from_powers(row["dimensions"])
        if offset != 0 and dimensions != PURE_TEMPERATURE:
            raise ValueError(
                f"Unit {symbol!r}: temperature offset is only allowed for "
                f"pure temperature units, got dimensions [{dimensions}]"
            )

        return cls(
            symbol=symbol,
            name=row["name"],
            dimensions=dimensions,
            inexact=inexact,
            exact=exact,
            offset=offset,
        )


# =============================================================================
# UNIT REGISTRY
# =============================================================================


class UnitRegistry:
    """
    Реестр единиц: symbol → UnitDefinition.

    Экземпляр неизменяем: определения хранятся в MappingProxyType.
    """

    def __init__(self, definitions: Iterable[UnitDefinition]):
        """
        Args:
            definitions: Определения единиц

        Raises:
            ValueError: Если символ определён более одного раза
        """
        table: dict[str, UnitDefinition] = {}
        for definition in definitions:
            if definition.symbol in table:
                raise ValueError(f"Duplicate unit symbol in registry: {definition.symbol!r}")
            table[definition.symbol] = definition

        self._definitions: Mapping[str, UnitDefinition] = MappingProxyType(table)

    @classmethod
    def from_table(cls, table: Mapping[str, Any]) -> "UnitRegistry":
        """
        Построение реестра из декларативной таблицы.

        Таблица сначала проверяется против JSON Schema контракта unit_table,
        затем каждая строка проходит семантическую проверку.

        Raises:
            jsonschema.ValidationError: Если таблица нарушает контракт
            ValueError: Если нарушены семантические правила таблицы
        """
        validate_unit_table(dict(table))
        registry = cls(UnitDefinition.from_row(row) for row in table["units"])
        logger.debug("Built unit registry with %d units", len(registry))
        return registry

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def definition(self, symbol: str) -> UnitDefinition:
        """
        Raises:
            UnknownUnit: Если символ не зарегистрирован
        """
        try:
            return self._definitions[symbol]
        except KeyError:
            raise UnknownUnit(symbol) from None

    def symbol_dimensions(self, symbol: str) -> Dimensions:
        return self.definition(symbol).dimensions

    def base_factor(self, symbol: str) -> BaseFactor:
        return self.definition(symbol).base_factor

    def tens_exponent(self, atom: UnitAtom) -> Fraction:
        """Степень десяти префикса атома с учётом его степени."""
        self.definition(atom.symbol)
        return atom.tens_exponent

    def temperature_offset(self, symbol: str) -> Fraction:
        return self.definition(symbol).offset

    def dimension_of(self, units: Units) -> Dimensions:
        """
        Размерность составной единицы.

        Произведение размерностей атомов, возведённых в степени атомов.

        Raises:
            UnknownUnit: Если любой символ не зарегистрирован
        """
        result = DIMENSIONLESS
        for atom in units.atoms:
            result = result * self.symbol_dimensions(atom.symbol) ** atom.power
        return result

    # -------------------------------------------------------------------------
    # Построение единиц
    # -------------------------------------------------------------------------

    def unit(self, symbol: str, prefix: str = "", power: int | str | Fraction = 1) -> Units:
        """
        Составная единица из одного зарегистрированного символа.

        Args:
            symbol: Символ единицы (например, 'm')
            prefix: SI-префикс (например, 'k' для километра)
            power: Степень

        Raises:
            UnknownUnit: Если символ или префикс неизвестен

        Examples:
            >>> reg = get_default_registry()
            >>> str(reg.unit("m", prefix="k", power=2))
            'km^2'
        """
        self.definition(symbol)
        if prefix not in SI_PREFIXES:
            raise UnknownUnit(prefix, kind="prefix")

        return Units.of(UnitAtom(symbol=symbol, tens=SI_PREFIXES[prefix], power=power))

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def symbols(self) -> tuple[str, ...]:
        return tuple(self._definitions)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)


@lru_cache(maxsize=1)
def get_default_registry() -> UnitRegistry:
    """Реестр по умолчанию (SI_UNIT_TABLE), строится один раз за процесс."""
    return UnitRegistry.from_table(SI_UNIT_TABLE)
