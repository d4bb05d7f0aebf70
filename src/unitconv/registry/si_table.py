"""
SI Unit Table — Декларативная таблица единиц по умолчанию

Формат строки соответствует контракту unit_table.json:
- symbol: символ единицы (без префикса; префиксы задаются через tens)
- dimensions: {размерность: степень}
- base_factor: величина одной единицы в базовых SI единицах размерности
    * exact: точное рациональное ("p/q" или целое)
    * inexact: float для иррациональных констант
- offset: сдвиг нуля шкалы температуры в единицах самой шкалы

Масса: базовая SI единица — килограмм, поэтому символ "g" имеет
base_factor 1/1000, а kg = UnitAtom("g", tens=3).
"""

import math
from typing import Any, Final

LENGTH: Final[str] = "Length"
MASS: Final[str] = "Mass"
TIME: Final[str] = "Time"
CURRENT: Final[str] = "Current"
TEMPERATURE: Final[str] = "Temperature"
AMOUNT: Final[str] = "Amount"
LUMINOSITY: Final[str] = "Luminosity"


def _row(
    symbol: str,
    name: str,
    dimensions: dict[str, int],
    exact: int | str | None = None,
    inexact: float | None = None,
    offset: str | None = None,
) -> dict[str, Any]:
    base_factor: dict[str, Any] = {}
    if exact is not None:
        base_factor["exact"] = exact
    if inexact is not None:
        base_factor["inexact"] = inexact

    row: dict[str, Any] = {
        "symbol": symbol,
        "name": name,
        "dimensions": dimensions,
        "base_factor": base_factor,
    }
    if offset is not None:
        row["offset"] = offset
    return row


SI_UNIT_TABLE: Final[dict[str, Any]] = {
    "schema_version": "1",
    "units": [
        # Базовые SI
        _row("m", "Meter", {LENGTH: 1}, exact=1),
        _row("g", "Gram", {MASS: 1}, exact="1/1000"),
        _row("s", "Second", {TIME: 1}, exact=1),
        _row("A", "Ampere", {CURRENT: 1}, exact=1),
        _row("K", "Kelvin", {TEMPERATURE: 1}, exact=1),
        _row("mol", "Mole", {AMOUNT: 1}, exact=1),
        _row("cd", "Candela", {LUMINOSITY: 1}, exact=1),
        # Производные SI
        _row("N", "Newton", {MASS: 1, LENGTH: 1, TIME: -2}, exact=1),
        _row("J", "Joule", {MASS: 1, LENGTH: 2, TIME: -2}, exact=1),
        _row("W", "Watt", {MASS: 1, LENGTH: 2, TIME: -3}, exact=1),
        _row("Pa", "Pascal", {MASS: 1, LENGTH: -1, TIME: -2}, exact=1),
        _row("Hz", "Hertz", {TIME: -1}, exact=1),
        _row("C", "Coulomb", {CURRENT: 1, TIME: 1}, exact=1),
        _row("V", "Volt", {MASS: 1, LENGTH: 2, TIME: -3, CURRENT: -1}, exact=1),
        _row("Ω", "Ohm", {MASS: 1, LENGTH: 2, TIME: -3, CURRENT: -2}, exact=1),
        # Время
        _row("minute", "Minute", {TIME: 1}, exact=60),
        _row("hr", "Hour", {TIME: 1}, exact=3600),
        _row("d", "Day", {TIME: 1}, exact=86400),
        _row("wk", "Week", {TIME: 1}, exact=604800),
        _row("yr", "Julian year", {TIME: 1}, exact=31557600),
        # Длина, объём
        _row("inch", "Inch", {LENGTH: 1}, exact="254/10000"),
        _row("ft", "Foot", {LENGTH: 1}, exact="3048/10000"),
        _row("yd", "Yard", {LENGTH: 1}, exact="9144/10000"),
        _row("mi", "Mile", {LENGTH: 1}, exact="1609344/1000"),
        _row("Å", "Angstrom", {LENGTH: 1}, exact="1/10000000000"),
        _row("L", "Liter", {LENGTH: 3}, exact="1/1000"),
        # Масса
        _row("lb", "Pound", {MASS: 1}, exact="45359237/100000000"),
        _row("oz", "Ounce", {MASS: 1}, exact="45359237/1600000000"),
        # Давление, энергия
        _row("atm", "Standard atmosphere", {MASS: 1, LENGTH: -1, TIME: -2}, exact=101325),
        _row("bar", "Bar", {MASS: 1, LENGTH: -1, TIME: -2}, exact=100000),
        _row("cal", "Thermochemical calorie", {MASS: 1, LENGTH: 2, TIME: -2}, exact="4184/1000"),
        _row(
            "eV",
            "Electronvolt",
            {MASS: 1, LENGTH: 2, TIME: -2},
            exact="1602176634/10000000000000000000000000000",
        ),
        # Температура
        _row("°C", "Degree Celsius", {TEMPERATURE: 1}, exact=1, offset="27315/100"),
        _row("°F", "Degree Fahrenheit", {TEMPERATURE: 1}, exact="5/9", offset="45967/100"),
        _row("Ra", "Degree Rankine", {TEMPERATURE: 1}, exact="5/9"),
        # Безразмерные
        _row("rad", "Radian", {}, exact=1),
        _row("sr", "Steradian", {}, exact=1),
        _row("°", "Degree", {}, inexact=math.pi / 180),
        _row("percent", "Percent", {}, exact="1/100"),
    ],
}
