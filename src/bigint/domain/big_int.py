"""
BigInt — Целое число произвольной точности

Immutable Pydantic модель: знак + нормализованная десятичная magnitude.
Вся арифметика выполняется примитивами src.bigint.math.digit_strings,
модель отвечает за знак, нормализацию и проверку предусловий.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. magnitude непустая и состоит только из '0'-'9'
2. Нет ведущих нулей, кроме значения "0"
3. Ноль всегда неотрицательный (нет -0)
4. Каждая операция возвращает новый экземпляр
"""

import logging
from typing import Final, Union

from pydantic import BaseModel, Field, field_validator

from src.bigint.math.digit_strings import (
    KARATSUBA_BASE_CASE_DIGITS,
    ZERO,
    DivisionByZeroError,
    MagnitudeUnderflowError,
    NegativeExponentError,
    NegativeFactorialError,
    add_digit_strings,
    compare_magnitudes,
    divmod_digit_strings,
    karatsuba_multiply_digit_strings,
    multiply_digit_strings,
    strip_leading_zeros,
    subtract_digit_strings,
)

logger = logging.getLogger(__name__)

NEGATIVE_PREFIX: Final[str] = "-"


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Знаковое целое произвольной точности (sign-and-magnitude).

    Immutable модель (frozen=True): структурное равенство и hash
    по (magnitude, non_negative).

    Создание:
        BigInt.from_string("-00123")  # -123
        BigInt.from_int(42)
        BigInt.of(value)              # str | int | BigInt
    """

    magnitude: str = Field(
        ZERO,
        min_length=1,
        pattern=r"^[0-9]+$",
        description="Десятичные цифры, старший разряд первым",
    )
    non_negative: bool = Field(True, description="True для значений >= 0")

    model_config = {"frozen": True}  # Immutable

    @field_validator("magnitude")
    @classmethod
    def normalize_magnitude(cls, v: str) -> str:
        """Удаление ведущих нулей ("007" → "7", "000" → "0")."""
        return strip_leading_zeros(v)

    @field_validator("non_negative")
    @classmethod
    def normalize_zero_sign(cls, v: bool, info) -> bool:
        """Ноль всегда неотрицательный, независимо от запрошенного знака."""
        if info.data.get("magnitude") == ZERO:
            return True
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> "BigInt":
        """
        Создание из десятичной строки с необязательным ведущим '-'.

        Raises:
            ValidationError: Пустая строка или посторонние символы
        """
        if text.startswith(NEGATIVE_PREFIX):
            return cls(magnitude=text[1:], non_negative=False)
        return cls(magnitude=text, non_negative=True)

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """Создание из машинного целого."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"from_int expects int, got {type(value).__name__}")
        return cls(magnitude=str(abs(value)), non_negative=value >= 0)

    @classmethod
    def of(cls, value: Union["BigInt", str, int]) -> "BigInt":
        """Приведение str/int/BigInt к BigInt."""
        if isinstance(value, BigInt):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        return cls.from_int(value)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.magnitude == ZERO

    @property
    def is_negative(self) -> bool:
        return not self.non_negative

    def __str__(self) -> str:
        return ("" if self.non_negative else NEGATIVE_PREFIX) + self.magnitude

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __int__(self) -> int:
        return int(str(self))

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def greater_or_equal(self, other: "BigInt") -> bool:
        """
        Отношение self >= other.

        Порядок: знак → длина magnitude → лексикографическое сравнение цифр.
        """
        if self.non_negative != other.non_negative:
            return self.non_negative

        order = compare_magnitudes(self.magnitude, other.magnitude)
        if self.non_negative:
            return order >= 0
        return order <= 0

    def __ge__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.greater_or_equal(other)

    # -------------------------------------------------------------------------
    # Сложение и вычитание (только magnitude)
    # -------------------------------------------------------------------------

    def add(self, other: "BigInt") -> "BigInt":
        """
        Сложение magnitude.

        ВАЖНО: знаки операндов не учитываются, результат всегда >= 0.
        """
        return BigInt(magnitude=add_digit_strings(self.magnitude, other.magnitude))

    def subtract(self, other: "BigInt") -> "BigInt":
        """
        Вычитание magnitude: |self| - |other|.

        ВАЖНО: знаки операндов не учитываются, результат всегда >= 0.

        Raises:
            MagnitudeUnderflowError: Если |self| < |other|
        """
        if compare_magnitudes(self.magnitude, other.magnitude) < 0:
            logger.debug(
                "subtract underflow: %s digits - %s digits",
                len(self.magnitude),
                len(other.magnitude),
            )
            raise MagnitudeUnderflowError(
                f"Subtraction underflow: |{self}| < |{other}|"
            )
        return BigInt(magnitude=subtract_digit_strings(self.magnitude, other.magnitude))

    # -------------------------------------------------------------------------
    # Умножение и деление
    # -------------------------------------------------------------------------

    def _same_sign(self, other: "BigInt") -> bool:
        return self.non_negative == other.non_negative

    def multiply(self, other: "BigInt") -> "BigInt":
        """Умножение столбиком. Знак: одинаковые → +, разные → -."""
        if self.is_zero or other.is_zero:
            return BigInt()

        return BigInt(
            magnitude=multiply_digit_strings(self.magnitude, other.magnitude),
            non_negative=self._same_sign(other),
        )

    def karatsuba_multiply(
        self,
        other: "BigInt",
        base_case_digits: int = KARATSUBA_BASE_CASE_DIGITS,
    ) -> "BigInt":
        """
        Умножение Карацубы.

        Результат совпадает с multiply() для любых операндов.

        Args:
            other: Второй множитель
            base_case_digits: Порог перехода на умножение столбиком
        """
        if self.is_zero or other.is_zero:
            return BigInt()

        logger.debug(
            "karatsuba_multiply: %s x %s digits (base case %s)",
            len(self.magnitude),
            len(other.magnitude),
            base_case_digits,
        )
        return BigInt(
            magnitude=karatsuba_multiply_digit_strings(
                self.magnitude, other.magnitude, base_case_digits
            ),
            non_negative=self._same_sign(other),
        )

    def divmod(self, other: "BigInt") -> tuple["BigInt", "BigInt"]:
        """
        Частное и остаток по magnitude.

        Частное: floor(|self| / |other|) со знаком по правилу умножения.
        Остаток: |self| - floor(|self| / |other|) * |other|, всегда >= 0.

        Raises:
            DivisionByZeroError: Если other == 0
        """
        if other.is_zero:
            logger.debug("divide: zero divisor, dividend %s digits", len(self.magnitude))
            raise DivisionByZeroError("Division by zero")

        logger.debug(
            "divide: %s-digit dividend by %s-digit divisor",
            len(self.magnitude),
            len(other.magnitude),
        )
        quotient, remainder = divmod_digit_strings(self.magnitude, other.magnitude)
        return (
            BigInt(magnitude=quotient, non_negative=self._same_sign(other)),
            BigInt(magnitude=remainder),
        )

    def divide(self, other: "BigInt") -> "BigInt":
        """
        Целочисленное деление (усечение к нулю для разных знаков).

        Raises:
            DivisionByZeroError: Если other == 0
        """
        quotient, _ = self.divmod(other)
        return quotient

    # -------------------------------------------------------------------------
    # Степень и факториал
    # -------------------------------------------------------------------------

    def power(self, exponent: int) -> "BigInt":
        """
        Возведение в степень повторным возведением в квадрат.

        Args:
            exponent: Неотрицательная степень

        Raises:
            NegativeExponentError: Если exponent < 0
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"exponent must be int, got {type(exponent).__name__}")
        if exponent < 0:
            logger.debug("power: negative exponent %s", exponent)
            raise NegativeExponentError(
                f"Exponent must be non-negative, got {exponent}"
            )

        logger.debug("power: %s-digit base, exponent %s", len(self.magnitude), exponent)

        result = BigInt(magnitude="1")
        base = self
        while exponent > 0:
            if exponent % 2 == 1:
                result = result.multiply(base)
            base = base.multiply(base)
            exponent //= 2

        return result

    def factorial(self) -> "BigInt":
        """
        Факториал: 1 * 2 * ... * self.

        Счётчик растёт на 1 от 1, остановка по равенству magnitude
        счётчика и self.

        Raises:
            NegativeFactorialError: Если self < 0
        """
        if self.is_negative:
            raise NegativeFactorialError(f"Factorial of negative value {self}")

        one = BigInt(magnitude="1")
        if self.is_zero:
            return one

        logger.debug("factorial: %s-digit argument", len(self.magnitude))

        result = one
        counter = one
        while counter.magnitude != self.magnitude:
            result = result.multiply(counter)
            counter = counter.add(one)

        return result.multiply(counter)
