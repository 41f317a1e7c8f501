"""
Math modules для BigInt

Арифметические примитивы над беззнаковыми десятичными строками.
"""

from src.bigint.math.digit_strings import (
    # Constants
    DIGIT_BASE,
    KARATSUBA_BASE_CASE_DIGITS,
    ZERO,
    # Exceptions
    BigIntError,
    DivisionByZeroError,
    MagnitudeUnderflowError,
    NegativeExponentError,
    NegativeFactorialError,
    # Normalization & comparison
    compare_magnitudes,
    strip_leading_zeros,
    # Arithmetic
    add_digit_strings,
    divide_digit_strings,
    divmod_digit_strings,
    karatsuba_multiply_digit_strings,
    multiply_digit_strings,
    subtract_digit_strings,
)

__all__ = [
    # Constants
    "DIGIT_BASE",
    "KARATSUBA_BASE_CASE_DIGITS",
    "ZERO",
    # Exceptions
    "BigIntError",
    "DivisionByZeroError",
    "MagnitudeUnderflowError",
    "NegativeExponentError",
    "NegativeFactorialError",
    # Normalization & comparison
    "compare_magnitudes",
    "strip_leading_zeros",
    # Arithmetic
    "add_digit_strings",
    "divide_digit_strings",
    "divmod_digit_strings",
    "karatsuba_multiply_digit_strings",
    "multiply_digit_strings",
    "subtract_digit_strings",
]
