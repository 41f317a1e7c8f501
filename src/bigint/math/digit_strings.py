"""
Digit Strings — Unsigned Decimal Arithmetic Primitives

Модуль реализует арифметику над беззнаковыми десятичными строками
(magnitude, старший разряд первым):
- Сложение и вычитание с переносом/заёмом (обратный проход по разрядам)
- Умножение столбиком O(n·m)
- Умножение Карацубы (рекурсивное, O(n^1.585))
- Деление столбиком через повторное вычитание

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все результаты нормализованы: нет ведущих нулей, ноль — ровно "0"
2. Знак здесь не существует: знаком управляет BigInt
3. subtract_digit_strings НЕ проверяет a >= b (обязанность вызывающего)
4. Деление на "0" → DivisionByZeroError до начала вычислений
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Основание системы счисления для digit strings
DIGIT_BASE: Final[int] = 10

# Порог перехода Карацубы на умножение столбиком:
# если max(len(a), len(b)) <= порога → multiply_digit_strings
KARATSUBA_BASE_CASE_DIGITS: Final[int] = 1

ZERO: Final[str] = "0"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigIntError(ValueError):
    """Базовая ошибка арифметики BigInt (invalid argument)."""

    pass


class DivisionByZeroError(BigIntError, ZeroDivisionError):
    """
    Деление на ноль.

    Выбрасывается при magnitude делителя == "0" до любых вычислений.
    """

    pass


class NegativeExponentError(BigIntError):
    """Отрицательная степень в POWER."""

    pass


class MagnitudeUnderflowError(BigIntError):
    """
    Нарушено предусловие вычитания: |minuend| < |subtrahend|.

    Примитив subtract_digit_strings этого не детектирует,
    проверка выполняется на уровне BigInt.
    """

    pass


class NegativeFactorialError(BigIntError):
    """Факториал определён только для неотрицательных значений."""

    pass


# =============================================================================
# НОРМАЛИЗАЦИЯ И СРАВНЕНИЕ
# =============================================================================


def strip_leading_zeros(digits: str) -> str:
    """
    Удаление ведущих нулей до минимальной длины 1.

    Examples:
        >>> strip_leading_zeros("000123")
        '123'
        >>> strip_leading_zeros("0000")
        '0'
    """
    stripped = digits.lstrip("0")
    return stripped if stripped else ZERO


def compare_magnitudes(a: str, b: str) -> int:
    """
    Сравнение двух magnitude.

    Сначала по длине (нормализованные строки без ведущих нулей),
    затем лексикографически: для строк одинаковой длины
    лексикографический порядок совпадает с числовым.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    a = strip_leading_zeros(a)
    b = strip_leading_zeros(b)

    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    if a == b:
        return 0
    return 1 if a > b else -1


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_digit_strings(a: str, b: str) -> str:
    """
    Сложение двух magnitude.

    Проход от младших разрядов к старшим с переносом,
    цифры накапливаются в обратном порядке и затем разворачиваются.

    Examples:
        >>> add_digit_strings("999", "1")
        '1000'
    """
    result: list[str] = []
    carry = 0
    i = len(a) - 1
    j = len(b) - 1

    while i >= 0 or j >= 0 or carry:
        total = carry
        if i >= 0:
            total += ord(a[i]) - ord("0")
            i -= 1
        if j >= 0:
            total += ord(b[j]) - ord("0")
            j -= 1

        result.append(str(total % DIGIT_BASE))
        carry = total // DIGIT_BASE

    return strip_leading_zeros("".join(reversed(result)))


def subtract_digit_strings(a: str, b: str) -> str:
    """
    Вычитание magnitude: a - b.

    ВАЖНО: предусловие a >= b не проверяется. При его нарушении
    результат не является корректным представлением разности.

    Examples:
        >>> subtract_digit_strings("1000", "1")
        '999'
    """
    result: list[str] = []
    borrow = 0
    j = len(b) - 1

    for i in range(len(a) - 1, -1, -1):
        diff = ord(a[i]) - ord("0") - borrow
        if j >= 0:
            diff -= ord(b[j]) - ord("0")
            j -= 1

        if diff < 0:
            diff += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0

        result.append(str(diff))

    return strip_leading_zeros("".join(reversed(result)))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_digit_strings(a: str, b: str) -> str:
    """
    Умножение столбиком, O(n·m).

    Буфер результата длины len(a) + len(b): произведение разрядов
    a[i] * b[j] накапливается в позицию i + j + 1, перенос — в i + j.

    Examples:
        >>> multiply_digit_strings("123", "456")
        '56088'
    """
    if a == ZERO or b == ZERO:
        return ZERO

    buffer = [0] * (len(a) + len(b))

    for i in range(len(a) - 1, -1, -1):
        digit_a = ord(a[i]) - ord("0")
        for j in range(len(b) - 1, -1, -1):
            total = digit_a * (ord(b[j]) - ord("0")) + buffer[i + j + 1]
            buffer[i + j + 1] = total % DIGIT_BASE
            buffer[i + j] += total // DIGIT_BASE

    return strip_leading_zeros("".join(str(d) for d in buffer))


def karatsuba_multiply_digit_strings(
    a: str,
    b: str,
    base_case_digits: int = KARATSUBA_BASE_CASE_DIGITS,
) -> str:
    """
    Умножение Карацубы (divide-and-conquer).

    Алгоритм:
        n = ceil(max(len(a), len(b)) / 2)
        a = a1 * 10^n + a0,  b = b1 * 10^n + b0
        z2 = a1 * b1
        z0 = a0 * b0
        z1 = (a1 + a0) * (b1 + b0) - z2 - z0
        a * b = z2 * 10^(2n) + z1 * 10^n + z0

    Старшая часть операнда короче n разрядов равна "0".
    Части нормализуются перед рекурсией, каждый вызов работает
    только со своими подстроками.

    Args:
        a: Первый множитель (magnitude)
        b: Второй множитель (magnitude)
        base_case_digits: Порог перехода на умножение столбиком

    Returns:
        Произведение (magnitude)

    Raises:
        ValueError: Если base_case_digits < 1

    Examples:
        >>> karatsuba_multiply_digit_strings("1234", "5678")
        '7006652'
    """
    if base_case_digits < 1:
        raise ValueError(f"base_case_digits must be >= 1, got {base_case_digits}")

    a = strip_leading_zeros(a)
    b = strip_leading_zeros(b)

    if a == ZERO or b == ZERO:
        return ZERO

    longest = max(len(a), len(b))
    if longest <= base_case_digits:
        return multiply_digit_strings(a, b)

    half = (longest + 1) // 2

    a1, a0 = _split_at(a, half)
    b1, b0 = _split_at(b, half)

    z2 = karatsuba_multiply_digit_strings(a1, b1, base_case_digits)
    z0 = karatsuba_multiply_digit_strings(a0, b0, base_case_digits)
    z1 = karatsuba_multiply_digit_strings(
        add_digit_strings(a1, a0),
        add_digit_strings(b1, b0),
        base_case_digits,
    )
    # (a1 + a0)(b1 + b0) >= a1*b1 + a0*b0, вычитание безопасно
    z1 = subtract_digit_strings(subtract_digit_strings(z1, z2), z0)

    result = add_digit_strings(_shift(z2, 2 * half), _shift(z1, half))
    return add_digit_strings(result, z0)


def _split_at(digits: str, low_len: int) -> tuple[str, str]:
    """Разбиение на (high, low): low — последние low_len разрядов."""
    if len(digits) > low_len:
        high = digits[:-low_len]
        low = digits[-low_len:]
    else:
        high = ZERO
        low = digits
    return strip_leading_zeros(high), strip_leading_zeros(low)


def _shift(digits: str, places: int) -> str:
    """Умножение на 10^places дописыванием нулей."""
    if digits == ZERO:
        return ZERO
    return digits + ZERO * places


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divmod_digit_strings(dividend: str, divisor: str) -> tuple[str, str]:
    """
    Деление столбиком через повторное вычитание.

    Для каждого разряда делимого (от старшего к младшему):
    остаток сдвигается на один десятичный разряд и к нему
    дописывается следующая цифра; затем делитель вычитается,
    пока остаток >= делителя. Число вычитаний — очередная цифра частного.

    Сложность O(значение цифры частного) вычитаний на разряд,
    приемлемо для небольших делителей.

    Args:
        dividend: Делимое (magnitude)
        divisor: Делитель (magnitude)

    Returns:
        (quotient, remainder), оба нормализованы

    Raises:
        DivisionByZeroError: Если divisor == "0"

    Examples:
        >>> divmod_digit_strings("1234", "7")
        ('176', '2')
    """
    divisor = strip_leading_zeros(divisor)
    if divisor == ZERO:
        raise DivisionByZeroError("Division by zero")

    quotient: list[str] = []
    remainder = ZERO

    for digit in strip_leading_zeros(dividend):
        remainder = strip_leading_zeros(remainder + digit)

        count = 0
        while compare_magnitudes(remainder, divisor) >= 0:
            remainder = subtract_digit_strings(remainder, divisor)
            count += 1

        quotient.append(str(count))

    return strip_leading_zeros("".join(quotient)), remainder


def divide_digit_strings(dividend: str, divisor: str) -> str:
    """
    Целочисленное деление magnitude (floor для неотрицательных).

    Raises:
        DivisionByZeroError: Если divisor == "0"
    """
    quotient, _ = divmod_digit_strings(dividend, divisor)
    return quotient
