"""
Тесты для UnitRegistry

Проверяет:
1. Операции реестра (размерность, базовый множитель, префиксы, сдвиг температуры)
2. UnknownUnit для незарегистрированных символов и префиксов
3. Размерность составных единиц
4. Построение из декларативной таблицы и семантические проверки
5. Однократное построение реестра по умолчанию
"""

import math
from fractions import Fraction

import pytest
from jsonschema import ValidationError

from unitconv.core.domain import DIMENSIONLESS, Dimensions, UnitAtom, Units
from unitconv.core.errors import UnknownUnit
from unitconv.core.math.rational import BaseFactor
from unitconv.registry import (
    SI_UNIT_TABLE,
    UnitDefinition,
    UnitRegistry,
    get_default_registry,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def reg() -> UnitRegistry:
    return get_default_registry()


def _table(*rows: dict) -> dict:
    return {"schema_version": "1", "units": list(rows)}


def _row(symbol: str, dimensions: dict, **extra) -> dict:
    row = {
        "symbol": symbol,
        "name": symbol.upper(),
        "dimensions": dimensions,
        "base_factor": {"exact": 1},
    }
    row.update(extra)
    return row


# =============================================================================
# ОПЕРАЦИИ РЕЕСТРА
# =============================================================================


class TestDefaultRegistry:
    """Тесты реестра по умолчанию"""

    def test_built_once(self) -> None:
        assert get_default_registry() is get_default_registry()

    def test_contains_table_symbols(self, reg: UnitRegistry) -> None:
        assert len(reg) == len(SI_UNIT_TABLE["units"])
        assert "m" in reg
        assert "°C" in reg
        assert "furlong" not in reg
        assert set(reg.symbols()) >= {"m", "g", "s", "K", "N", "J", "hr"}

    def test_symbol_dimensions(self, reg: UnitRegistry) -> None:
        assert reg.symbol_dimensions("N") == Dimensions.from_powers(
            {"Mass": 1, "Length": 1, "Time": -2}
        )
        assert reg.symbol_dimensions("rad") == DIMENSIONLESS

    def test_base_factor_exact(self, reg: UnitRegistry) -> None:
        assert reg.base_factor("inch") == BaseFactor(1.0, Fraction(127, 5000))
        assert reg.base_factor("g") == BaseFactor(1.0, Fraction(1, 1000))

    def test_base_factor_inexact(self, reg: UnitRegistry) -> None:
        """Иррациональная константа хранится только во float"""
        factor = reg.base_factor("°")
        assert factor.exact == 1
        assert factor.inexact == pytest.approx(math.pi / 180)

    def test_temperature_offset(self, reg: UnitRegistry) -> None:
        assert reg.temperature_offset("°C") == Fraction(27315, 100)
        assert reg.temperature_offset("°F") == Fraction(45967, 100)
        assert reg.temperature_offset("K") == 0
        assert reg.temperature_offset("m") == 0

    def test_tens_exponent(self, reg: UnitRegistry) -> None:
        assert reg.tens_exponent(UnitAtom(symbol="m", tens=3, power=2)) == 6

    def test_definition(self, reg: UnitRegistry) -> None:
        definition = reg.definition("hr")
        assert isinstance(definition, UnitDefinition)
        assert definition.name == "Hour"


class TestUnknownUnit:
    """UnknownUnit бросается немедленно всеми операциями"""

    @pytest.mark.parametrize(
        "lookup",
        [
            lambda reg: reg.definition("furlong"),
            lambda reg: reg.symbol_dimensions("furlong"),
            lambda reg: reg.base_factor("furlong"),
            lambda reg: reg.temperature_offset("furlong"),
            lambda reg: reg.tens_exponent(UnitAtom(symbol="furlong")),
            lambda reg: reg.dimension_of(Units.of(UnitAtom(symbol="furlong"))),
            lambda reg: reg.unit("furlong"),
        ],
    )
    def test_unknown_symbol(self, reg: UnitRegistry, lookup) -> None:
        with pytest.raises(UnknownUnit, match="furlong") as exc_info:
            lookup(reg)
        assert exc_info.value.symbol == "furlong"

    def test_is_lookup_error(self, reg: UnitRegistry) -> None:
        with pytest.raises(LookupError):
            reg.base_factor("furlong")

    def test_unknown_prefix(self, reg: UnitRegistry) -> None:
        with pytest.raises(UnknownUnit, match="prefix"):
            reg.unit("m", prefix="x")


# =============================================================================
# РАЗМЕРНОСТЬ СОСТАВНЫХ ЕДИНИЦ
# =============================================================================


class TestDimensionOf:
    """Тесты для dimension_of"""

    def test_derived_equivalence(self, reg: UnitRegistry) -> None:
        """N·m и J имеют одну размерность"""
        newton_meter = reg.unit("N") * reg.unit("m")
        assert reg.dimension_of(newton_meter) == reg.dimension_of(reg.unit("J"))

    def test_unitless(self, reg: UnitRegistry) -> None:
        assert reg.dimension_of(Units()) == DIMENSIONLESS

    def test_ratio_is_dimensionless(self, reg: UnitRegistry) -> None:
        ratio = reg.unit("m") / reg.unit("m", prefix="c")
        assert reg.dimension_of(ratio).is_dimensionless()

    def test_powers_multiplied_out(self, reg: UnitRegistry) -> None:
        """L (Length^3) в степени 2 → Length^6"""
        assert reg.dimension_of(reg.unit("L", power=2)) == Dimensions.from_powers({"Length": 6})

    def test_heat_capacity(self, reg: UnitRegistry) -> None:
        dims = reg.dimension_of(reg.unit("J") / reg.unit("K"))
        assert dims.as_dict()["Temperature"] == -1


class TestUnitBuilder:
    """Тесты для UnitRegistry.unit"""

    def test_prefix_and_power(self, reg: UnitRegistry) -> None:
        assert reg.unit("m", prefix="k", power=2) == Units.of(
            UnitAtom(symbol="m", tens=3, power=2)
        )

    def test_micro_prefix(self, reg: UnitRegistry) -> None:
        assert reg.unit("s", prefix="μ").atoms[0].tens == -6


# =============================================================================
# ПОСТРОЕНИЕ ИЗ ТАБЛИЦЫ
# =============================================================================


class TestFromTable:
    """Тесты для UnitRegistry.from_table"""

    def test_custom_table(self) -> None:
        registry = UnitRegistry.from_table(
            _table(
                _row("m", {"Length": 1}),
                _row("ft", {"Length": 1}, base_factor={"exact": "3048/10000"}),
                _row("deg", {}, base_factor={"inexact": 0.0174532925}),
            )
        )
        assert len(registry) == 3
        assert registry.base_factor("ft").exact == Fraction(381, 1250)
        assert registry.base_factor("deg").inexact == 0.0174532925

    def test_both_parts_of_base_factor(self) -> None:
        registry = UnitRegistry.from_table(
            _table(_row("x", {"Length": 1}, base_factor={"inexact": 2.5, "exact": "1/3"}))
        )
        assert registry.base_factor("x") == BaseFactor(2.5, Fraction(1, 3))

    def test_duplicate_symbol_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate unit symbol"):
            UnitRegistry.from_table(_table(_row("m", {"Length": 1}), _row("m", {"Length": 1})))

    def test_offset_only_for_pure_temperature(self) -> None:
        with pytest.raises(ValueError, match="temperature offset"):
            UnitRegistry.from_table(_table(_row("m", {"Length": 1}, offset="1/2")))

    def test_offset_for_temperature_allowed(self) -> None:
        registry = UnitRegistry.from_table(
            _table(_row("degX", {"Temperature": 1}, offset="100"))
        )
        assert registry.temperature_offset("degX") == 100

    def test_schema_violation(self) -> None:
        row = _row("m", {"Length": 1})
        del row["base_factor"]
        with pytest.raises(ValidationError):
            UnitRegistry.from_table(_table(row))

    def test_float_exact_rejected_by_schema(self) -> None:
        with pytest.raises(ValidationError):
            UnitRegistry.from_table(_table(_row("m", {"Length": 1}, base_factor={"exact": 1.5})))
