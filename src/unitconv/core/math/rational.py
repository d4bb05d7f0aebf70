"""
Rational — Гибридная пара (inexact, exact) для базовых множителей

Базовый множитель единицы хранится одновременно:
- inexact: float-приближение (для иррациональных/эмпирических констант)
- exact: Fraction (для точных рациональных соотношений)

Соглашение: exact == 1 при inexact != 1.0 означает "только float".
Для точно определённых единиц inexact == 1.0, а всё значение лежит в exact.
"""

from decimal import Decimal
from fractions import Fraction
from numbers import Rational
from typing import Any, NamedTuple, Union

from unitconv.core.math.numerical_safeguards import EXACT_INT_MAX, fits_exact_range

# Множитель конверсии: int/Fraction — точный, float — приближённый
Factor = Union[int, Fraction, float]


class BaseFactor(NamedTuple):
    """Базовый множитель: величина единицы в базовых SI единицах её размерности."""

    inexact: float
    exact: Fraction

    @property
    def is_exact(self) -> bool:
        """True если float-часть тривиальна и значение полностью точное."""
        return self.inexact == 1.0

    def __float__(self) -> float:
        return self.inexact * float(self.exact)


UNIT_BASE_FACTOR = BaseFactor(inexact=1.0, exact=Fraction(1))


def to_fraction(value: Union[int, str, Fraction]) -> Fraction:
    """
    Приведение целого, строки вида "p/q" или Fraction к Fraction.

    float не принимается: его двоичное представление не является
    точным значением, которое имел в виду автор таблицы.

    Raises:
        TypeError: Если value — float или нечисловой тип
        ValueError: Если строка не является рациональным числом

    Examples:
        >>> to_fraction("254/10000")
        Fraction(127, 5000)
        >>> to_fraction(3)
        Fraction(3, 1)
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(f"Expected an exact rational, got {type(value).__name__}: {value!r}")

    if isinstance(value, (Rational, str)):
        return Fraction(value)

    raise TypeError(f"Expected an exact rational, got {type(value).__name__}: {value!r}")


def parse_power(value: Union[int, str, Fraction]) -> Fraction:
    """
    Степень атома как Fraction; для валидаторов pydantic.

    Raises:
        ValueError: Если значение не является точным рациональным
    """
    try:
        return to_fraction(value)
    except TypeError as e:
        raise ValueError(str(e)) from e


def raise_to_power(factor: BaseFactor, power: Fraction) -> BaseFactor:
    """
    Возведение базового множителя в степень атома единицы.

    Целая степень сохраняет точность обеих частей. Дробная степень
    рационального числа в общем случае иррациональна, поэтому точная часть
    переносится в float.

    Examples:
        >>> raise_to_power(BaseFactor(1.0, Fraction(1, 1000)), Fraction(2))
        BaseFactor(inexact=1.0, exact=Fraction(1, 1000000))
    """
    if power.denominator == 1:
        exponent = power.numerator
        return BaseFactor(
            inexact=factor.inexact**exponent,
            exact=factor.exact**exponent,
        )

    exponent_f = float(power)
    return BaseFactor(
        inexact=(factor.inexact**exponent_f) * (float(factor.exact) ** exponent_f),
        exact=Fraction(1),
    )


def multiply(left: BaseFactor, right: BaseFactor) -> BaseFactor:
    """Покомпонентное произведение двух базовых множителей."""
    return BaseFactor(
        inexact=left.inexact * right.inexact,
        exact=left.exact * right.exact,
    )


def fold_if_out_of_range(factor: BaseFactor, bound: int = EXACT_INT_MAX) -> BaseFactor:
    """
    Перенос точной части во float, если она вышла за диапазон точных целых.

    Examples:
        >>> fold_if_out_of_range(BaseFactor(1.0, Fraction(1602176634, 10**28)))
        BaseFactor(inexact=1.602176634e-19, exact=Fraction(1, 1))
    """
    if fits_exact_range(factor.exact, bound):
        return factor

    return BaseFactor(
        inexact=factor.inexact * float(factor.exact),
        exact=Fraction(1),
    )


def coerce_operand(number: Factor, value: Any) -> Any:
    """
    Множитель или сдвиг в виде, совместимом с типом значения величины.

    Decimal не смешивается в арифметике ни с Fraction, ни с float, поэтому
    для Decimal-значения точный множитель делится в Decimal, а float
    берётся по своему кратчайшему десятичному представлению. Для остальных
    числовых типов number возвращается без изменений.

    Examples:
        >>> coerce_operand(Fraction(1, 4), Decimal("2"))
        Decimal('0.25')
        >>> coerce_operand(Fraction(1, 4), 2.0)
        Fraction(1, 4)
    """
    if not isinstance(value, Decimal) or isinstance(number, Decimal):
        return number

    if isinstance(number, float):
        return Decimal(repr(number))

    exact = Fraction(number)
    return Decimal(exact.numerator) / Decimal(exact.denominator)
