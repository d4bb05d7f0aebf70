"""
Dimensions — Модель физических размерностей

Immutable Pydantic модели:
- DimensionAtom: (symbol, power), power — рациональная степень
- Dimensions: канонический набор атомов с уникальными символами

Каноническая форма Dimensions:
1. Атомы с одинаковым символом объединяются (степени суммируются)
2. Атомы с нулевой степенью не хранятся
3. Атомы отсортированы по символу

Поэтому равенство Dimensions — это равенство множеств, независимо от
порядка построения. Равенство размерностей — единственный критерий
возможности конверсии.
"""

from fractions import Fraction
from typing import Final, Mapping, Union

from pydantic import BaseModel, Field, field_validator

from unitconv.core.math.rational import parse_power, to_fraction

Power = Union[int, str, Fraction]


# =============================================================================
# DIMENSION ATOM
# =============================================================================


class DimensionAtom(BaseModel):
    """Одна базовая размерность со степенью, например Length^2."""

    symbol: str = Field(..., min_length=1, description="Имя размерности (например, 'Length')")
    power: Fraction = Field(..., description="Рациональная степень")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("power", mode="before")
    @classmethod
    def coerce_power(cls, v: Power) -> Fraction:
        return parse_power(v)

    def __str__(self) -> str:
        if self.power == 1:
            return self.symbol
        return f"{self.symbol}^{self.power}"


# =============================================================================
# DIMENSIONS
# =============================================================================


def _canonical_atoms(atoms: tuple[DimensionAtom, ...]) -> tuple[DimensionAtom, ...]:
    powers: dict[str, Fraction] = {}
    for atom in atoms:
        powers[atom.symbol] = powers.get(atom.symbol, Fraction(0)) + atom.power

    return tuple(
        DimensionAtom(symbol=symbol, power=power)
        for symbol, power in sorted(powers.items())
        if power != 0
    )


class Dimensions(BaseModel):
    """
    Размерность составной величины.

    Immutable модель (frozen=True). Операции *, /, ** возвращают новый
    экземпляр в канонической форме.
    """

    atoms: tuple[DimensionAtom, ...] = Field(default=(), description="Канонические атомы")

    model_config = {"frozen": True}

    @field_validator("atoms", mode="after")
    @classmethod
    def canonicalize(cls, v: tuple[DimensionAtom, ...]) -> tuple[DimensionAtom, ...]:
        return _canonical_atoms(v)

    @classmethod
    def from_powers(cls, powers: Mapping[str, Power]) -> "Dimensions":
        """
        Построение из отображения {символ: степень}.

        Examples:
            >>> Dimensions.from_powers({"Time": -1, "Length": 1}).as_dict()
            {'Length': Fraction(1, 1), 'Time': Fraction(-1, 1)}
        """
        return cls(
            atoms=tuple(
                DimensionAtom(symbol=symbol, power=power) for symbol, power in powers.items()
            )
        )

    def as_dict(self) -> dict[str, Fraction]:
        """Отображение {символ: степень} (без нулевых степеней)."""
        return {atom.symbol: atom.power for atom in self.atoms}

    def is_dimensionless(self) -> bool:
        return not self.atoms

    def __mul__(self, other: "Dimensions") -> "Dimensions":
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions(atoms=self.atoms + other.atoms)

    def __truediv__(self, other: "Dimensions") -> "Dimensions":
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self * other**-1

    def __pow__(self, power: Power) -> "Dimensions":
        exponent = to_fraction(power)
        return Dimensions(
            atoms=tuple(
                DimensionAtom(symbol=atom.symbol, power=atom.power * exponent)
                for atom in self.atoms
            )
        )

    def __str__(self) -> str:
        if not self.atoms:
            return "dimensionless"
        return " ".join(str(atom) for atom in self.atoms)


def dimensions_equal(left: Dimensions, right: Dimensions) -> bool:
    """
    Равенство размерностей как множеств атомов.

    Каноническая форма делает это равенством моделей.
    """
    return left == right


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DIMENSIONLESS: Final[Dimensions] = Dimensions()

# Имя размерности температуры, по которому выбирается аффинная конверсия
TEMPERATURE_SYMBOL: Final[str] = "Temperature"

# Чистая абсолютная температура: {Temperature: 1}
PURE_TEMPERATURE: Final[Dimensions] = Dimensions.from_powers({TEMPERATURE_SYMBOL: 1})
