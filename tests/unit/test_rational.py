"""
Тесты для Rational Normalizer

Проверяет:
1. Каноническую форму: знаменатель > 0, несократимость, 0 → (0, 1)
2. Ошибки: нулевой знаменатель, нецелые аргументы
3. Деление с отбрасыванием дробной части, floor и ceiling
4. Явные конверсии float / Decimal / Fraction
"""

import logging
import math
from decimal import Decimal
from fractions import Fraction

import pytest

from pramana.core.math.errors import ArgumentError, DivisionByZero
from pramana.core.math.rational import (
    CONTINUED_FRACTION_MAX_ITERATIONS,
    ContinuedFractionConfig,
    add_fractions,
    ceiling_fraction,
    decimal_to_fraction,
    divide_fractions,
    float_to_fraction,
    floor_fraction,
    fraction_to_pair,
    multiply_fractions,
    normalize,
    truncated_divide,
    truncated_remainder,
)


# =============================================================================
# ТЕСТЫ: normalize
# =============================================================================


class TestNormalize:
    """Тесты приведения дроби к канонической форме."""

    @pytest.mark.parametrize(
        "numerator, denominator, expected",
        [
            (2, 4, (1, 2)),
            (1, -2, (-1, 2)),
            (-1, -2, (1, 2)),
            (0, -7, (0, 1)),
            (0, 5, (0, 1)),
            (6, 3, (2, 1)),
            (-12, 18, (-2, 3)),
            (7, 1, (7, 1)),
        ],
    )
    def test_vectors(self, numerator: int, denominator: int, expected: tuple) -> None:
        """Таблица нормализации."""
        assert normalize(numerator, denominator) == expected

    def test_arbitrary_precision(self) -> None:
        """Большие целые не теряют точность."""
        big = 10**40 + 7
        assert normalize(big * 3, 3 * 10**50) == normalize(big, 10**50)
        assert normalize(big * 6, 4) == (big * 3, 2)

    def test_zero_denominator(self) -> None:
        """Нулевой знаменатель → DivisionByZero (и ZeroDivisionError)."""
        with pytest.raises(DivisionByZero):
            normalize(1, 0)
        with pytest.raises(ZeroDivisionError):
            normalize(0, 0)

    @pytest.mark.parametrize("bad", [1.5, "1", True, None])
    def test_non_int_rejected(self, bad) -> None:
        """float, str, bool, None → ArgumentError."""
        with pytest.raises(ArgumentError):
            normalize(bad, 2)
        with pytest.raises(ArgumentError):
            normalize(1, bad)


class TestFractionAlgebra:
    """Сложение / умножение / деление пар без нормализации."""

    def test_add(self) -> None:
        assert normalize(*add_fractions(1, 2, 1, 3)) == (5, 6)

    def test_multiply(self) -> None:
        assert multiply_fractions(2, 3, 3, 4) == (6, 12)

    def test_divide(self) -> None:
        assert normalize(*divide_fractions(1, 2, 3, 4)) == (2, 3)

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            divide_fractions(1, 2, 0, 1)


# =============================================================================
# ТЕСТЫ: Целочисленное деление
# =============================================================================


class TestIntegerDivision:
    """Truncate / floor / ceiling семантика."""

    @pytest.mark.parametrize(
        "n, d, q, r",
        [
            (7, 2, 3, 1),
            (-7, 2, -3, -1),
            (7, -2, -3, 1),
            (-7, -2, 3, -1),
            (6, 3, 2, 0),
            (0, 5, 0, 0),
        ],
    )
    def test_truncated(self, n: int, d: int, q: int, r: int) -> None:
        """Частное к нулю, остаток со знаком делимого."""
        assert truncated_divide(n, d) == q
        assert truncated_remainder(n, d) == r
        assert q * d + r == n

    def test_truncated_zero_divisor(self) -> None:
        with pytest.raises(DivisionByZero):
            truncated_divide(1, 0)

    def test_floor_and_ceiling(self) -> None:
        assert floor_fraction(-7, 2) == -4
        assert ceiling_fraction(-7, 2) == -3
        assert floor_fraction(7, 2) == 3
        assert ceiling_fraction(7, 2) == 4
        assert floor_fraction(6, 3) == ceiling_fraction(6, 3) == 2


# =============================================================================
# ТЕСТЫ: Конверсии
# =============================================================================


class TestFloatToFraction:
    """Best rational approximation через цепную дробь."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.5, (1, 2)),
            (-0.25, (-1, 4)),
            (0.1, (1, 10)),
            (1.5, (3, 2)),
            (0.0, (0, 1)),
            (3.0, (3, 1)),
            (-2.75, (-11, 4)),
        ],
    )
    def test_vectors(self, value: float, expected: tuple) -> None:
        assert float_to_fraction(value) == expected

    def test_pi_within_tolerance(self) -> None:
        """Приближение π точнее относительной толерантности."""
        num, den = float_to_fraction(math.pi)
        assert abs(num / den - math.pi) < 1e-15 * math.pi

    def test_iteration_cap_returns_last_convergent(self, caplog) -> None:
        """При исчерпании лимита возвращается последняя подходящая дробь."""
        config = ContinuedFractionConfig(max_iterations=1)
        with caplog.at_level(logging.DEBUG, logger="pramana.core.math.rational"):
            assert float_to_fraction(math.pi, config) == (3, 1)
        assert "iteration cap" in caplog.text

    def test_default_cap(self) -> None:
        assert ContinuedFractionConfig().max_iterations == CONTINUED_FRACTION_MAX_ITERATIONS

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, bad: float) -> None:
        with pytest.raises(ArgumentError):
            float_to_fraction(bad)

    def test_non_number_rejected(self) -> None:
        with pytest.raises(ArgumentError):
            float_to_fraction("0.5")

    def test_int_beyond_float_range_rejected(self) -> None:
        with pytest.raises(ArgumentError):
            float_to_fraction(10**400)


class TestExactConversions:
    """Decimal и Fraction конвертируются без потерь."""

    def test_decimal(self) -> None:
        assert decimal_to_fraction(Decimal("0.75")) == (3, 4)
        assert decimal_to_fraction(Decimal("-1.10")) == (-11, 10)

    def test_decimal_non_finite(self) -> None:
        with pytest.raises(ArgumentError):
            decimal_to_fraction(Decimal("NaN"))
        with pytest.raises(ArgumentError):
            decimal_to_fraction(Decimal("Infinity"))

    def test_fraction(self) -> None:
        assert fraction_to_pair(Fraction(6, 8)) == (3, 4)

    def test_fraction_type_checked(self) -> None:
        with pytest.raises(ArgumentError):
            fraction_to_pair(0.75)
