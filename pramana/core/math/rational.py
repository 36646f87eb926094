"""
Rational Normalizer — Каноническая форма дроби

Модуль обеспечивает приведение пары (numerator, denominator) к единственной
канонической форме и базовую алгебру дробей над int произвольной точности:
- Нормализация: несократимая дробь с положительным знаменателем
- Сложение / умножение / деление дробей (без нормализации, её делает вызывающий)
- Целочисленное деление с явной семантикой (truncate / floor / ceiling)
- Явные конверсии float / Decimal / Fraction → дробь

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator' > 0
2. gcd(|numerator'|, denominator') = 1
3. numerator = 0  →  (0, 1) независимо от знака знаменателя
4. normalize(normalize(n, d)) == normalize(n, d)

Вещественная и мнимая части Gaussian rational нормализуются независимо,
перекрёстное сокращение между частями не выполняется.
"""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Final, Tuple

from pramana.core.math.errors import ArgumentError, DivisionByZero

logger = logging.getLogger(__name__)

Fraction2 = Tuple[int, int]

# =============================================================================
# CONTINUED FRACTION ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность совпадения подходящей дроби с исходным float
CONTINUED_FRACTION_TOLERANCE: Final[float] = 1e-15

# Максимальное число итераций разложения в цепную дробь
CONTINUED_FRACTION_MAX_ITERATIONS: Final[int] = 64


@dataclass(frozen=True)
class ContinuedFractionConfig:
    """Конфигурация best-rational-approximation для float → дробь."""

    tolerance: float = CONTINUED_FRACTION_TOLERANCE
    max_iterations: int = CONTINUED_FRACTION_MAX_ITERATIONS


DEFAULT_CONTINUED_FRACTION_CONFIG: Final[ContinuedFractionConfig] = ContinuedFractionConfig()


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def require_int(value: object, name: str) -> int:
    """
    Проверка, что аргумент — int (bool и float отклоняются).

    Raises:
        ArgumentError: Если значение не int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArgumentError(f"{name} must be an int, got {type(value).__name__}")
    return value


def normalize(numerator: int, denominator: int) -> Fraction2:
    """
    Приведение дроби к канонической форме.

    Args:
        numerator: Числитель (любой знак)
        denominator: Знаменатель (любой ненулевой)

    Returns:
        (num', den') — несократимая дробь, den' > 0

    Raises:
        DivisionByZero: Если denominator == 0
        ArgumentError: Если аргументы не int

    Examples:
        >>> normalize(2, 4)
        (1, 2)
        >>> normalize(1, -2)
        (-1, 2)
        >>> normalize(0, -7)
        (0, 1)
    """
    require_int(numerator, "numerator")
    require_int(denominator, "denominator")

    if denominator == 0:
        raise DivisionByZero("Denominator cannot be zero")

    if numerator == 0:
        return (0, 1)

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    divisor = math.gcd(abs(numerator), denominator)
    return (numerator // divisor, denominator // divisor)


# =============================================================================
# АЛГЕБРА ДРОБЕЙ
# =============================================================================


def add_fractions(a: int, b: int, c: int, d: int) -> Fraction2:
    """a/b + c/d = (ad + bc) / bd"""
    return (a * d + b * c, b * d)


def multiply_fractions(a: int, b: int, c: int, d: int) -> Fraction2:
    """(a/b) * (c/d) = ac / bd"""
    return (a * c, b * d)


def divide_fractions(a: int, b: int, c: int, d: int) -> Fraction2:
    """
    (a/b) / (c/d) = ad / bc

    Raises:
        DivisionByZero: Если c == 0
    """
    if c == 0:
        raise DivisionByZero("Cannot divide by a zero fraction")
    return (a * d, b * c)


# =============================================================================
# ЦЕЛОЧИСЛЕННОЕ ДЕЛЕНИЕ
# =============================================================================
# Python `//` округляет к -inf. Форматирование (mixed fraction) и modulo
# используют деление с отбрасыванием дробной части (к нулю).


def truncated_divide(numerator: int, denominator: int) -> int:
    """Частное с округлением к нулю: truncated_divide(-3, 2) == -1."""
    if denominator == 0:
        raise DivisionByZero("Cannot divide by zero")
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def truncated_remainder(numerator: int, denominator: int) -> int:
    """
    Остаток со знаком делимого: numerator == q*denominator + r, q = truncated_divide.

    Examples:
        >>> truncated_remainder(7, 3)
        1
        >>> truncated_remainder(-7, 3)
        -1
    """
    return numerator - denominator * truncated_divide(numerator, denominator)


def floor_fraction(numerator: int, denominator: int) -> int:
    """floor(numerator / denominator) для denominator > 0."""
    return numerator // denominator


def ceiling_fraction(numerator: int, denominator: int) -> int:
    """ceil(numerator / denominator) для denominator > 0."""
    return -((-numerator) // denominator)


# =============================================================================
# ЯВНЫЕ КОНВЕРСИИ
# =============================================================================


def float_to_fraction(
    value: float,
    config: ContinuedFractionConfig = DEFAULT_CONTINUED_FRACTION_CONFIG,
) -> Fraction2:
    """
    Best rational approximation для float через цепную дробь.

    Разложение останавливается, как только подходящая дробь num/den совпадает
    с value в пределах относительной толерантности, либо по исчерпании
    max_iterations (тогда возвращается последняя подходящая дробь).

    Args:
        value: Конечный float
        config: Толерантность и лимит итераций

    Returns:
        (numerator, denominator), denominator > 0 (не обязательно сокращённая)

    Raises:
        ArgumentError: Если value — NaN или Inf

    Examples:
        >>> float_to_fraction(0.5)
        (1, 2)
        >>> float_to_fraction(-0.25)
        (-1, 4)
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ArgumentError(f"Expected a float, got {type(value).__name__}")
    try:
        value = float(value)
    except OverflowError:
        raise ArgumentError("Integer is too large to convert to float") from None
    if not math.isfinite(value):
        raise ArgumentError("Cannot convert NaN or Infinity to a rational")

    if value == 0.0:
        return (0, 1)

    negative = value < 0
    value = abs(value)

    num1, num2 = 1, 0
    den1, den2 = 0, 1
    x = value

    for _ in range(config.max_iterations):
        int_part = math.floor(x)
        num = int_part * num1 + num2
        den = int_part * den1 + den2

        if abs(num / den - value) < config.tolerance * value:
            return (-num if negative else num, den)

        num2, num1 = num1, num
        den2, den1 = den1, den

        frac = x - int_part
        if frac < config.tolerance:
            break
        x = 1.0 / frac
    else:
        logger.debug(
            "Continued fraction for %r hit the %d iteration cap",
            value,
            config.max_iterations,
        )

    return (-num1 if negative else num1, den1)


def decimal_to_fraction(value: Decimal) -> Fraction2:
    """
    Точная конверсия Decimal → дробь (mantissa / 10^scale).

    Raises:
        ArgumentError: Если value — NaN или Infinity
    """
    if not isinstance(value, Decimal):
        raise ArgumentError(f"Expected a Decimal, got {type(value).__name__}")
    if not value.is_finite():
        raise ArgumentError("Cannot convert NaN or Infinity to a rational")
    return value.as_integer_ratio()


def fraction_to_pair(value: Fraction) -> Fraction2:
    """Точная конверсия fractions.Fraction → (numerator, denominator)."""
    if not isinstance(value, Fraction):
        raise ArgumentError(f"Expected a Fraction, got {type(value).__name__}")
    return (value.numerator, value.denominator)
