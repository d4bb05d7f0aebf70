"""
Units — Модель составных единиц измерения

Immutable Pydantic модели:
- UnitAtom: (symbol, tens, power) — зарегистрированная единица с SI-префиксом
  (tens — степень десяти префикса, kilo = +3) и степенью в составной единице
- Units: канонический кортеж атомов, например N·m

Каноническая форма Units:
1. Атомы с одинаковыми (symbol, tens) объединяются (степени суммируются)
2. Атомы с нулевой степенью не хранятся
3. Атомы отсортированы по (symbol, tens)

Единицы, различающиеся только порядком построения, равны.
Размерность Units вычисляет реестр (UnitRegistry.dimension_of).
"""

from fractions import Fraction
from typing import Final, Union

from pydantic import BaseModel, Field, field_validator

from unitconv.core.math.rational import parse_power, to_fraction

Power = Union[int, str, Fraction]


# =============================================================================
# SI-ПРЕФИКСЫ
# =============================================================================

SI_PREFIXES: Final[dict[str, int]] = {
    "Q": 30,
    "R": 27,
    "Y": 24,
    "Z": 21,
    "E": 18,
    "P": 15,
    "T": 12,
    "G": 9,
    "M": 6,
    "k": 3,
    "h": 2,
    "da": 1,
    "": 0,
    "d": -1,
    "c": -2,
    "m": -3,
    "μ": -6,
    "n": -9,
    "p": -12,
    "f": -15,
    "a": -18,
    "z": -21,
    "y": -24,
    "r": -27,
    "q": -30,
}

_PREFIX_BY_TENS: Final[dict[int, str]] = {tens: prefix for prefix, tens in SI_PREFIXES.items()}


# =============================================================================
# UNIT ATOM
# =============================================================================


class UnitAtom(BaseModel):
    """Одна единица в составной единице, например km^2."""

    symbol: str = Field(..., min_length=1, description="Символ зарегистрированной единицы")
    tens: int = Field(default=0, description="Степень десяти SI-префикса")
    power: Fraction = Field(default=Fraction(1), description="Степень в составной единице")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("power", mode="before")
    @classmethod
    def coerce_power(cls, v: Power) -> Fraction:
        return parse_power(v)

    @property
    def tens_exponent(self) -> Fraction:
        """Вклад префикса в степень десяти: tens * power."""
        return self.tens * self.power

    def __str__(self) -> str:
        prefix = _PREFIX_BY_TENS.get(self.tens)
        if prefix is None:
            name = f"(10^{self.tens} {self.symbol})"
        else:
            name = f"{prefix}{self.symbol}"

        if self.power == 1:
            return name
        return f"{name}^{self.power}"


# =============================================================================
# UNITS
# =============================================================================


def _canonical_atoms(atoms: tuple[UnitAtom, ...]) -> tuple[UnitAtom, ...]:
    powers: dict[tuple[str, int], Fraction] = {}
    for atom in atoms:
        key = (atom.symbol, atom.tens)
        powers[key] = powers.get(key, Fraction(0)) + atom.power

    return tuple(
        UnitAtom(symbol=symbol, tens=tens, power=power)
        for (symbol, tens), power in sorted(powers.items())
        if power != 0
    )


class Units(BaseModel):
    """
    Составная единица измерения.

    Immutable модель (frozen=True). Операции *, /, ** строят новые
    составные единицы; арифметика над величинами сюда не входит.
    """

    atoms: tuple[UnitAtom, ...] = Field(default=(), description="Канонические атомы")

    model_config = {"frozen": True}

    @field_validator("atoms", mode="after")
    @classmethod
    def canonicalize(cls, v: tuple[UnitAtom, ...]) -> tuple[UnitAtom, ...]:
        return _canonical_atoms(v)

    @classmethod
    def of(cls, *atoms: UnitAtom) -> "Units":
        """Построение из атомов в произвольном порядке."""
        return cls(atoms=atoms)

    def is_unitless(self) -> bool:
        return not self.atoms

    def is_single_atom(self) -> bool:
        """True для одной единицы в первой степени (например, °C, но не K^2)."""
        return len(self.atoms) == 1 and self.atoms[0].power == 1

    def __mul__(self, other: "Units") -> "Units":
        if not isinstance(other, Units):
            return NotImplemented
        return Units(atoms=self.atoms + other.atoms)

    def __truediv__(self, other: "Units") -> "Units":
        if not isinstance(other, Units):
            return NotImplemented
        return self * other**-1

    def __pow__(self, power: Power) -> "Units":
        exponent = to_fraction(power)
        return Units(
            atoms=tuple(
                UnitAtom(symbol=atom.symbol, tens=atom.tens, power=atom.power * exponent)
                for atom in self.atoms
            )
        )

    def __str__(self) -> str:
        if not self.atoms:
            return "unitless"
        return " ".join(str(atom) for atom in self.atoms)


NO_UNITS: Final[Units] = Units()
