"""
Conversion Factor — Движок множителя конверсии

Вычисляет множитель m такой, что value_in_target = value_in_source * m,
для двух составных единиц одной размерности.

Гибридная арифметика:
- Точная часть (Fraction) сохраняется везде, где это безопасно:
  SI-префиксы, единицы времени, производные SI единицы
- Float-часть используется для иррациональных/эмпирических констант и
  когда точная часть вышла бы за диапазон точных целых (exact_int_max)

АЛГОРИТМ:
    1. Размерности должны совпадать, иначе DimensionalMismatch
    2. target == source → точная 1
    3. Базовый множитель каждой стороны: Π (inexact_i, exact_i) ** power_i
    4. a = inexact(source) / inexact(target); ex = exact(source) / exact(target)
    5. pow = tens(source) - tens(target)
    6. 10**pow применяется к ex, если не выходит за диапазон, иначе к a
    7. a ≈ 1.0 → результат ex (точный), иначе a * ex (float)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. convert_factor(U, U) == 1 точно
2. Выход за диапазон точных целых — выбор представления, а не ошибка
3. Никакой арифметики до проверки размерностей
"""

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

from unitconv.core.domain.dimensions import Dimensions
from unitconv.core.domain.units import Units
from unitconv.core.errors import DimensionalMismatch
from unitconv.core.math.numerical_safeguards import (
    EPS_APPROX_REL,
    EXACT_INT_MAX,
    fits_exact_range,
    is_approx_one,
    power_of_ten_fits,
)
from unitconv.core.math.rational import (
    UNIT_BASE_FACTOR,
    BaseFactor,
    Factor,
    fold_if_out_of_range,
    multiply,
    raise_to_power,
)
from unitconv.registry.registry import UnitRegistry, get_default_registry

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class ConversionConfig:
    """Конфигурация движка конверсии.

    - exact_int_max: граница числителя/знаменателя точной части
      (по умолчанию 2**63 - 1, знаковое 64-битное целое)
    - approx_rel_tol: относительная толерантность проверки a ≈ 1.0
    """

    exact_int_max: int = EXACT_INT_MAX
    approx_rel_tol: float = EPS_APPROX_REL

    def __post_init__(self) -> None:
        if self.exact_int_max < 1:
            raise ValueError(f"exact_int_max must be >= 1, got {self.exact_int_max}")
        if not 0 <= self.approx_rel_tol < 1:
            raise ValueError(f"approx_rel_tol must be in [0, 1), got {self.approx_rel_tol}")


DEFAULT_CONFIG = ConversionConfig()


# =============================================================================
# DIMENSION CHECK
# =============================================================================


def require_same_dimensions(
    target: Units,
    source: Units,
    registry: UnitRegistry,
) -> Dimensions:
    """
    Проверка совпадения размерностей целевых и исходных единиц.

    Returns:
        Общая размерность

    Raises:
        DimensionalMismatch: Если размерности различаются
        UnknownUnit: Если символ не зарегистрирован
    """
    target_dimensions = registry.dimension_of(target)
    source_dimensions = registry.dimension_of(source)

    if target_dimensions != source_dimensions:
        raise DimensionalMismatch(
            target=target,
            source=source,
            target_dimensions=target_dimensions,
            source_dimensions=source_dimensions,
        )

    return source_dimensions


# =============================================================================
# BASE FACTOR
# =============================================================================


def units_base_factor(
    units: Units,
    registry: Optional[UnitRegistry] = None,
    config: Optional[ConversionConfig] = None,
) -> BaseFactor:
    """
    Базовый множитель составной единицы (без учёта SI-префиксов).

    Произведение базовых множителей атомов, возведённых в степени атомов.
    Если точная часть выходит за диапазон exact_int_max, она переносится
    во float-часть.

    Examples:
        >>> reg = get_default_registry()
        >>> units_base_factor(reg.unit("hr"), reg)
        BaseFactor(inexact=1.0, exact=Fraction(3600, 1))
    """
    registry = registry or get_default_registry()
    config = config or DEFAULT_CONFIG

    result = UNIT_BASE_FACTOR
    for atom in units.atoms:
        atom_factor = raise_to_power(registry.base_factor(atom.symbol), atom.power)
        result = multiply(result, atom_factor)

    folded = fold_if_out_of_range(result, config.exact_int_max)
    if folded is not result:
        logger.debug("Exact base factor of [%s] out of range, folded into float", units)
    return folded


def tens_exponent_sum(units: Units, registry: UnitRegistry) -> Fraction:
    """Суммарная степень десяти SI-префиксов всех атомов единицы."""
    return sum((registry.tens_exponent(atom) for atom in units.atoms), Fraction(0))


def _apply_power_of_ten(
    exact: Fraction,
    inexact: float,
    power: Fraction,
    config: ConversionConfig,
) -> tuple[Fraction, float]:
    """
    Применение 10**power к точной или float-части.

    Точная часть выбирается, только если ни 10**|power|, ни
    масштабированный числитель/знаменатель не выходят за exact_int_max.
    """
    if power == 0:
        return exact, inexact

    if power.denominator != 1:
        return exact, inexact * 10.0 ** float(power)

    exponent = power.numerator
    if power_of_ten_fits(exact, exponent, config.exact_int_max):
        return exact * Fraction(10) ** exponent, inexact

    logger.debug("Power of ten 10^%d folded into float factor", exponent)
    return exact, inexact * 10.0**exponent


# =============================================================================
# CONVERT FACTOR
# =============================================================================


def convert_factor(
    target: Units,
    source: Units,
    registry: Optional[UnitRegistry] = None,
    config: Optional[ConversionConfig] = None,
) -> Factor:
    """
    Множитель конверсии из source в target.

    Args:
        target: Целевые единицы
        source: Исходные единицы
        registry: Реестр единиц (default: get_default_registry())
        config: Конфигурация движка (default: ConversionConfig())

    Returns:
        int 1 для одинаковых единиц, Fraction если множитель точный,
        иначе float

    Raises:
        DimensionalMismatch: Если размерности различаются
        UnknownUnit: Если символ не зарегистрирован

    Examples:
        >>> reg = get_default_registry()
        >>> convert_factor(reg.unit("m", prefix="c"), reg.unit("m"), reg)
        Fraction(100, 1)
        >>> convert_factor(reg.unit("hr"), reg.unit("s"), reg)
        Fraction(1, 3600)
    """
    registry = registry or get_default_registry()
    config = config or DEFAULT_CONFIG

    require_same_dimensions(target, source, registry)

    if target == source:
        return 1

    source_factor = units_base_factor(source, registry, config)
    target_factor = units_base_factor(target, registry, config)

    inexact = source_factor.inexact / target_factor.inexact
    exact = source_factor.exact / target_factor.exact

    if not fits_exact_range(exact, config.exact_int_max):
        inexact *= float(exact)
        exact = Fraction(1)

    power = tens_exponent_sum(source, registry) - tens_exponent_sum(target, registry)
    exact, inexact = _apply_power_of_ten(exact, inexact, power, config)

    if is_approx_one(inexact, rel_tol=config.approx_rel_tol):
        return exact

    return inexact * float(exact)
