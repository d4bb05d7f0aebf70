"""
Numerical Safeguards — Safe Math Primitives для гибридной арифметики

Модуль обеспечивает численную устойчивость при конверсии единиц:
- Epsilon-сравнения float с учётом машинной точности
- Проверки диапазона для точных целых (числитель/знаменатель Fraction)
- Валидация параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точная рациональная арифметика используется только в пределах EXACT_INT_MAX
2. Float сравнения всегда учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
import sys
from fractions import Fraction
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Машинный epsilon для float64
EPS_MACHINE: Final[float] = sys.float_info.epsilon

# Относительная толерантность для проверки "a ≈ 1.0"
# sqrt(eps) — стандартная толерантность приближённого равенства
EPS_APPROX_REL: Final[float] = math.sqrt(EPS_MACHINE)

# Граница точных целых: числитель и знаменатель Fraction не превышают её
# Соответствует знаковому 64-битному целому
EXACT_INT_MAX: Final[int] = 2**63 - 1


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_APPROX_REL,
    abs_tol: float = 0.0,
) -> bool:
    """
    Приближённое равенство float-частей множителей.

    Относительная толерантность sqrt(eps) поглощает ошибку округления
    одного-двух умножений/делений float-констант единиц (например,
    inexact(°) / inexact(°) после сокращения).

    Examples:
        >>> is_close(1.0, 1.0 + 1e-12)
        True
        >>> is_close(1.0, 1.001)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_approx_one(value: float, rel_tol: float = EPS_APPROX_REL) -> bool:
    """
    Проверка, что float-множитель неотличим от 1.0.

    Используется движком конверсии: если float-часть ≈ 1, результат
    остаётся точным рациональным.

    Examples:
        >>> is_approx_one(3600.0 / 3600.0)
        True
        >>> is_approx_one(0.0174533)
        False
    """
    return is_close(value, 1.0, rel_tol=rel_tol)


# =============================================================================
# ДИАПАЗОН ТОЧНЫХ ЦЕЛЫХ
# =============================================================================


def fits_exact_range(value: Fraction, bound: int = EXACT_INT_MAX) -> bool:
    """
    Проверка, что числитель и знаменатель помещаются в диапазон точных целых.

    Args:
        value: Рациональное число
        bound: Максимальное допустимое абсолютное значение

    Returns:
        True если abs(numerator) <= bound и denominator <= bound

    Examples:
        >>> fits_exact_range(Fraction(1801, 1800))
        True
        >>> fits_exact_range(Fraction(1, 10**28))
        False
    """
    return abs(value.numerator) <= bound and value.denominator <= bound


def power_of_ten_fits(
    value: Fraction,
    power: int,
    bound: int = EXACT_INT_MAX,
) -> bool:
    """
    Проверка, что применение 10**power к value не выводит его из диапазона.

    При power > 0 растёт числитель, при power < 0 — знаменатель.
    Сокращение дроби не учитывается: проверка консервативна.

    Args:
        value: Рациональный множитель
        power: Степень десяти (целая, любого знака)
        bound: Максимальное допустимое абсолютное значение

    Returns:
        True если 10**|power| и масштабированная часть дроби <= bound

    Examples:
        >>> power_of_ten_fits(Fraction(1), 3)
        True
        >>> power_of_ten_fits(Fraction(1), 30)
        False
        >>> power_of_ten_fits(Fraction(45359237, 100), 12)
        False
    """
    scale = 10 ** abs(power)
    if scale > bound:
        return False

    scaled_part = value.numerator if power > 0 else value.denominator
    return abs(scaled_part) * scale <= bound


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное и конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
