"""
Core math modules для unitconv

Математические примитивы гибридной (точной/приближённой) арифметики.
"""

# Numerical Safeguards
from unitconv.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_APPROX_REL,
    EPS_MACHINE,
    EXACT_INT_MAX,
    # Comparisons
    fits_exact_range,
    is_approx_one,
    is_close,
    is_valid_float,
    power_of_ten_fits,
    # Validation
    validate_positive,
)

# Rational (inexact, exact) pairs
from unitconv.core.math.rational import (
    UNIT_BASE_FACTOR,
    BaseFactor,
    Factor,
    coerce_operand,
    fold_if_out_of_range,
    multiply,
    parse_power,
    raise_to_power,
    to_fraction,
)

__all__ = [
    # Numerical Safeguards
    "EPS_APPROX_REL",
    "EPS_MACHINE",
    "EXACT_INT_MAX",
    "fits_exact_range",
    "is_approx_one",
    "is_close",
    "is_valid_float",
    "power_of_ten_fits",
    "validate_positive",
    # Rational
    "UNIT_BASE_FACTOR",
    "BaseFactor",
    "Factor",
    "coerce_operand",
    "fold_if_out_of_range",
    "multiply",
    "parse_power",
    "raise_to_power",
    "to_fraction",
]
