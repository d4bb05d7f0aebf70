"""
Errors — Иерархия исключений конверсии единиц

Все ошибки пробрасываются вызывающему коду без подавления и без повторов:
вычисления детерминированы, повтор не может изменить результат.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. DimensionalMismatch проверяется до любой арифметики
2. UnknownUnit пробрасывается из реестра без изменений
3. Частичный результат никогда не возвращается
"""

from typing import Any


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnitConversionError(Exception):
    """Базовое исключение пакета unitconv."""

    pass


class DimensionalMismatch(UnitConversionError, ValueError):
    """
    Попытка конверсии между единицами разной размерности.

    Также возникает, когда операция только для безразмерных величин
    получает размерный операнд.

    Attributes:
        target: Целевые единицы (или размерность)
        source: Исходные единицы (или размерность)
        target_dimensions: Размерность цели
        source_dimensions: Размерность источника
    """

    def __init__(
        self,
        target: Any,
        source: Any,
        target_dimensions: Any = None,
        source_dimensions: Any = None,
    ):
        self.target = target
        self.source = source
        self.target_dimensions = target_dimensions
        self.source_dimensions = source_dimensions

        message = f"Dimensional mismatch: cannot convert [{source}] to [{target}]"
        if target_dimensions is not None or source_dimensions is not None:
            message += f" ({source_dimensions} vs {target_dimensions})"
        super().__init__(message)


class UnknownUnit(UnitConversionError, LookupError):
    """
    Символ единицы (или SI-префикс) не зарегистрирован в реестре.

    Attributes:
        symbol: Неизвестный символ
    """

    def __init__(self, symbol: str, kind: str = "unit"):
        self.symbol = symbol
        self.kind = kind
        super().__init__(f"Unknown {kind} symbol: {symbol!r}")

    def __str__(self) -> str:
        # LookupError по умолчанию оборачивает сообщение в repr
        return str(self.args[0])


class InexactCastError(UnitConversionError, ValueError):
    """Значение не представимо в целочисленном типе без потери точности."""

    def __init__(self, value: Any, numeric_type: type):
        self.value = value
        self.numeric_type = numeric_type
        super().__init__(
            f"Cannot cast {value!r} to {numeric_type.__name__} without loss of precision"
        )
