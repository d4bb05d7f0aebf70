"""
Тесты для uconvert

Проверяет:
1. Конверсию величин с точными и float множителями
2. Неизменность исходной величины
3. Транзитивность A → B → C == A → C
4. Диспетчеризацию температуры (аффинная / чистый масштаб)
5. Конверсию простых чисел
6. Ошибки размерности до любой арифметики
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from unitconv.conversion import ConversionConfig, uconvert, uconvert_number
from unitconv.core.domain import NO_UNITS, Quantity, UnitAtom, Units
from unitconv.core.errors import DimensionalMismatch, UnknownUnit
from unitconv.registry import UnitRegistry, get_default_registry


@pytest.fixture
def reg() -> UnitRegistry:
    return get_default_registry()


# =============================================================================
# QUANTITIES
# =============================================================================


class TestUconvert:
    """Тесты для uconvert"""

    def test_seconds_to_hours_exact(self, reg: UnitRegistry) -> None:
        q = Quantity(value=3602, units=reg.unit("s"))
        result = uconvert(reg.unit("hr"), q, reg)
        assert result.value == Fraction(1801, 1800)
        assert result.units == reg.unit("hr")

    def test_source_not_mutated(self, reg: UnitRegistry) -> None:
        q = Quantity(value=3602, units=reg.unit("s"))
        uconvert(reg.unit("hr"), q, reg)
        assert q.value == 3602
        assert q.units == reg.unit("s")

    def test_identity_preserves_value_type(self, reg: UnitRegistry) -> None:
        q = Quantity(value=2.5, units=reg.unit("m"))
        result = uconvert(reg.unit("m"), q, reg)
        assert result.value == 2.5
        assert isinstance(result.value, float)

    def test_equivalent_representation(self, reg: UnitRegistry) -> None:
        """N·m ↔ J"""
        q = Quantity(value=5, units=reg.unit("N") * reg.unit("m"))
        result = uconvert(reg.unit("J"), q, reg)
        assert result.value == 5
        assert result.units == reg.unit("J")

    def test_equivalent_representation_float(self, reg: UnitRegistry) -> None:
        """1.0 N·m → 1.0 J: float проходит через точный множитель без изменений"""
        q = Quantity(value=1.0, units=reg.unit("N") * reg.unit("m"))
        result = uconvert(reg.unit("J"), q, reg)
        assert result.value == 1.0
        assert isinstance(result.value, float)

    def test_float_factor(self, reg: UnitRegistry) -> None:
        q = Quantity(value=180, units=reg.unit("°"))
        result = uconvert(reg.unit("rad"), q, reg)
        assert result.value == pytest.approx(3.141592653589793)

    def test_speed(self, reg: UnitRegistry) -> None:
        q = Quantity(value=36, units=reg.unit("m", prefix="k") / reg.unit("hr"))
        result = uconvert(reg.unit("m") / reg.unit("s"), q, reg)
        assert result.value == 10

    def test_fraction_power(self, reg: UnitRegistry) -> None:
        q = Quantity(value=1, units=reg.unit("m", prefix="k", power="1/2"))
        result = uconvert(reg.unit("m", power="1/2"), q, reg)
        assert result.value == pytest.approx(31.6227766)

    def test_transitivity(self, reg: UnitRegistry) -> None:
        q = Quantity(value=Fraction(7), units=reg.unit("mi"))
        via_feet = uconvert(reg.unit("m", prefix="k"), uconvert(reg.unit("ft"), q, reg), reg)
        direct = uconvert(reg.unit("m", prefix="k"), q, reg)
        assert via_feet.value == direct.value

    def test_round_trip(self, reg: UnitRegistry) -> None:
        q = Quantity(value=Fraction(3, 7), units=reg.unit("lb"))
        there = uconvert(reg.unit("g", prefix="k"), q, reg)
        back = uconvert(reg.unit("lb"), there, reg)
        assert back.value == Fraction(3, 7)

    def test_config_passed_through(self, reg: UnitRegistry) -> None:
        q = Quantity(value=1, units=reg.unit("d"))
        exact = uconvert(reg.unit("s"), q, reg)
        folded = uconvert(reg.unit("s"), q, reg, ConversionConfig(exact_int_max=1000))
        assert exact.value == 86400
        assert isinstance(folded.value, float)
        assert folded.value == 86400.0

    def test_default_registry(self) -> None:
        reg = get_default_registry()
        q = Quantity(value=1, units=reg.unit("m", prefix="k"))
        assert uconvert(reg.unit("m"), q).value == 1000


class TestDecimalValues:
    """Decimal-значение: множитель приводится к Decimal"""

    def test_exact_factor(self, reg: UnitRegistry) -> None:
        q = Quantity(value=Decimal("1.5"), units=reg.unit("m", prefix="k"))
        result = uconvert(reg.unit("m"), q, reg)
        assert isinstance(result.value, Decimal)
        assert result.value == Decimal("1500")

    def test_fractional_factor(self, reg: UnitRegistry) -> None:
        q = Quantity(value=Decimal("2"), units=reg.unit("m"))
        result = uconvert(reg.unit("m", prefix="k"), q, reg)
        assert result.value == Decimal("0.002")

    def test_float_factor(self, reg: UnitRegistry) -> None:
        q = Quantity(value=Decimal("180"), units=reg.unit("°"))
        result = uconvert(reg.unit("rad"), q, reg)
        assert isinstance(result.value, Decimal)
        assert float(result.value) == pytest.approx(3.141592653589793)

    def test_temperature(self, reg: UnitRegistry) -> None:
        q = Quantity(value=Decimal("0"), units=reg.unit("°C"))
        assert uconvert(reg.unit("°F"), q, reg).value == Decimal("32")

    def test_number_to_percent(self, reg: UnitRegistry) -> None:
        result = uconvert(reg.unit("percent"), Decimal("0.25"), reg)
        assert result.value == Decimal("25")


# =============================================================================
# TEMPERATURE DISPATCH
# =============================================================================


class TestTemperatureDispatch:
    """Аффинная формула только для абсолютной температуры"""

    def test_absolute_temperature(self, reg: UnitRegistry) -> None:
        q = Quantity(value=0, units=reg.unit("°C"))
        assert uconvert(reg.unit("°F"), q, reg).value == 32

    def test_prefixed_temperature(self, reg: UnitRegistry) -> None:
        """1000 m°C → 274.15 K: сдвиг нуля в единицах с префиксом"""
        q = Quantity(value=1000, units=reg.unit("°C", prefix="m"))
        assert uconvert(reg.unit("K"), q, reg).value == Fraction(5483, 20)

    def test_heat_capacity_scale_only(self, reg: UnitRegistry) -> None:
        """J/°F → J/K: без сдвига нуля"""
        q = Quantity(value=9, units=reg.unit("J") / reg.unit("°F"))
        result = uconvert(reg.unit("J") / reg.unit("K"), q, reg)
        assert result.value == Fraction(81, 5)

    def test_squared_temperature_scale_only(self, reg: UnitRegistry) -> None:
        q = Quantity(value=1, units=reg.unit("°C", power=2))
        result = uconvert(reg.unit("K", power=2), q, reg)
        assert result.value == 1


# =============================================================================
# PLAIN NUMBERS
# =============================================================================


class TestUconvertNumber:
    """Простое число — безразмерная величина"""

    def test_number_to_percent(self, reg: UnitRegistry) -> None:
        result = uconvert(reg.unit("percent"), Fraction(1, 2), reg)
        assert result.value == 50
        assert result.units == reg.unit("percent")

    def test_number_to_unitless(self, reg: UnitRegistry) -> None:
        result = uconvert_number(NO_UNITS, Decimal("1.5"), reg)
        assert result.value == Decimal("1.5")

    def test_number_to_dimensioned_rejected(self, reg: UnitRegistry) -> None:
        with pytest.raises(DimensionalMismatch):
            uconvert(reg.unit("m"), 5, reg)


# =============================================================================
# ERRORS
# =============================================================================


class TestUconvertErrors:
    """Ошибки uconvert"""

    def test_dimensional_mismatch(self, reg: UnitRegistry) -> None:
        q = Quantity(value=1, units=reg.unit("s"))
        with pytest.raises(DimensionalMismatch, match=r"\[s\] to \[m\]"):
            uconvert(reg.unit("m"), q, reg)

    def test_temperature_to_length(self, reg: UnitRegistry) -> None:
        q = Quantity(value=1, units=reg.unit("°C"))
        with pytest.raises(DimensionalMismatch):
            uconvert(reg.unit("m"), q, reg)

    def test_unknown_unit(self, reg: UnitRegistry) -> None:
        q = Quantity(value=1, units=Units.of(UnitAtom(symbol="parsec")))
        with pytest.raises(UnknownUnit):
            uconvert(reg.unit("m"), q, reg)
