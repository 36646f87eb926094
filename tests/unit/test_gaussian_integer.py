"""
Тесты для GaussianInteger и алгоритмов теории чисел в Z[i]

Проверяемые инварианты:
1. Замкнутость + − * в Z[i], точное деление в GaussianRational
2. Модифицированное деление: a = b·q + r, 2·N(r) ≤ N(b)
3. НОД и расширенный алгоритм Евклида (Bézout)
4. Единицы, ассоциированные, простота в Z[i]
"""

import logging
import uuid
from random import Random
from typing import get_type_hints

import pytest
from pydantic import ValidationError

from pramana.core.domain.classification import NumberClass
from pramana.core.domain.gaussian_integer import (
    GaussianInteger,
    congruent_modulo,
    gcd,
    is_gaussian_prime,
    is_relatively_prime,
    modified_divmod,
    norms_divide,
    rounded_quotient,
    units,
    xgcd,
)
from pramana.core.domain.gaussian_rational import GaussianRational
from pramana.core.math.errors import ArgumentError, DivisionByZero, InvalidCast, NarrowingFailure


def gi(real: int, imag: int = 0) -> GaussianInteger:
    return GaussianInteger(real, imag)


# =============================================================================
# ТЕСТЫ: Конструирование
# =============================================================================


class TestConstruction:
    def test_defaults(self) -> None:
        assert GaussianInteger().to_list() == [0, 0]
        assert GaussianInteger(5).to_list() == [5, 0]

    def test_from_array(self) -> None:
        assert GaussianInteger.from_array([3, -4]) == gi(3, -4)

    @pytest.mark.parametrize("values", [[], [1], [1, 2, 3]])
    def test_from_array_wrong_length(self, values: list) -> None:
        with pytest.raises(ArgumentError):
            GaussianInteger.from_array(values)

    def test_from_rational(self) -> None:
        assert GaussianInteger.from_rational(GaussianRational(6, 2, -4, 1)) == gi(3, -4)

    def test_from_rational_non_integer(self) -> None:
        """Сужение 1/2 → Z[i] невозможно."""
        with pytest.raises(NarrowingFailure):
            GaussianInteger.from_rational(GaussianRational(1, 2))
        with pytest.raises(InvalidCast):
            GaussianInteger.from_rational(GaussianRational(1, 1, 1, 3))

    def test_strict_components(self) -> None:
        with pytest.raises(ValidationError):
            GaussianInteger(1.0, 2)
        with pytest.raises(ValidationError):
            GaussianInteger(True, 2)

    def test_frozen(self) -> None:
        value = gi(1, 2)
        with pytest.raises(ValidationError, match="frozen"):
            value.real = 3

    def test_constants(self) -> None:
        assert GaussianInteger.zero() == gi(0)
        assert GaussianInteger.one() == gi(1)
        assert GaussianInteger.minus_one() == gi(-1)
        assert GaussianInteger.eye() == gi(0, 1)
        assert GaussianInteger.two() == gi(1, 1)

    def test_units(self) -> None:
        assert units() == [gi(1), gi(-1), gi(0, 1), gi(0, -1)]
        assert all(u.is_unit for u in units())

    def test_random_reproducible(self) -> None:
        first = GaussianInteger.random(rng=Random(42))
        second = GaussianInteger.random(rng=Random(42))
        assert first == second
        assert -100 <= first.real <= 100 and -100 <= first.imag <= 100

    def test_random_ranges(self) -> None:
        value = GaussianInteger.random((5, 5), (-2, -2))
        assert value == gi(5, -2)


# =============================================================================
# ТЕСТЫ: Арифметика
# =============================================================================


class TestArithmetic:
    def test_ring_operations(self) -> None:
        a, b = gi(11, 3), gi(1, 8)
        assert a + b == gi(12, 11)
        assert a - b == gi(10, -5)
        assert a * b == gi(-13, 91)
        assert -a == gi(-11, -3)

    def test_int_operands(self) -> None:
        assert gi(1, 1) + 1 == gi(2, 1)
        assert 2 * gi(1, 1) == gi(2, 2)
        assert 3 - gi(1, 1) == gi(2, -1)

    def test_power(self) -> None:
        """(11 + 3i)³ = 1034 + 1062i."""
        assert gi(11, 3) ** 3 == gi(1034, 1062)
        assert gi(0, 1) ** 2 == gi(-1)
        assert gi(7, -2) ** 0 == gi(1)
        assert gi(1, 1).pow(1) == gi(1, 1)

    def test_negative_power_rejected(self) -> None:
        with pytest.raises(ArgumentError):
            gi(1, 1) ** -1

    def test_true_division_lifts(self) -> None:
        """(11 + 3i) / (1 + 8i) = 7/13 − 17/13 i."""
        result = gi(11, 3) / gi(1, 8)
        assert isinstance(result, GaussianRational)
        assert result.canonical == "7,13,-17,13"
        assert 1 / gi(0, 1) == GaussianRational(0, 1, -1, 1)

    def test_true_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            gi(1) / gi(0)

    def test_floor_division_and_modulo(self) -> None:
        a, b = gi(11, 3), gi(1, 8)
        assert a // b == gi(1, -1)
        assert a % b == gi(2, -4)
        assert divmod(a, b) == (gi(1, -1), gi(2, -4))

    def test_mixed_with_rational(self) -> None:
        half = GaussianRational(1, 2)
        assert gi(1, 2) + half == GaussianRational(3, 2, 2, 1)
        assert half + gi(1, 2) == GaussianRational(3, 2, 2, 1)
        assert half * gi(2, 2) == GaussianRational(1, 1, 1, 1)
        assert gi(1) - half == half
        assert gi(1) / half == GaussianRational(2)

    def test_increment_decrement(self) -> None:
        assert gi(1, 5).increment() == gi(2, 5)
        assert gi(1, 5).decrement() == gi(0, 5)

    def test_properties(self) -> None:
        value = gi(3, -4)
        assert value.conjugate == gi(3, 4)
        assert value.norm == 25
        assert not value.is_unit
        assert gi(0, 5).is_purely_imaginary
        assert gi(5).is_real
        assert gi(0).is_zero and not gi(0)


class TestEqualityAndIdentity:
    def test_equal_to_lifted_rational(self) -> None:
        assert gi(3, 4) == GaussianRational(3, 1, 4, 1)
        assert GaussianRational(3, 1, 4, 1) == gi(3, 4)
        assert hash(gi(3, 4)) == hash(GaussianRational(3, 1, 4, 1))

    def test_equal_to_int(self) -> None:
        assert gi(5) == 5
        assert hash(gi(5)) == hash(5)
        assert gi(5, 1) != 5

    def test_shares_identity_with_rational(self) -> None:
        value = gi(3, 4)
        lifted = value.to_gaussian_rational()
        assert value.canonical == "3,1,4,1"
        assert value.pramana_guid == lifted.pramana_guid
        assert value.pramana_id == "pra:num:3,1,4,1"
        assert value.uri == "num:3,1,4,1"
        assert value.identity_uri == lifted.identity_uri
        assert isinstance(value.pramana_guid, uuid.UUID)
        assert get_type_hints(GaussianInteger.pramana_guid.fget)["return"] is uuid.UUID
        assert value.pramana_url == lifted.pramana_url
        assert value.pramana_hash_url == lifted.pramana_hash_url

    def test_classification(self) -> None:
        assert gi(3).classification is NumberClass.NATURAL
        assert gi(3, 1).classification is NumberClass.GAUSSIAN_RATIONAL

    def test_total_order(self) -> None:
        assert gi(1, 5) < gi(2, -5)
        assert gi(1, -1) < gi(1, 1)
        assert gi(1, 1) >= gi(1, 1)
        assert sorted([gi(2), gi(0, 1), gi(0, -1)]) == [gi(0, -1), gi(0, 1), gi(2)]

    @pytest.mark.parametrize(
        "value, text",
        [
            (gi(3, 4), "3 + 4i"),
            (gi(3, -4), "3 - 4i"),
            (gi(3, 1), "3 + i"),
            (gi(3, -1), "3 - i"),
            (gi(0, -1), "-i"),
            (gi(0, 1), "i"),
            (gi(0, 5), "5i"),
            (gi(7), "7"),
            (gi(0), "0"),
        ],
    )
    def test_str(self, value: GaussianInteger, text: str) -> None:
        assert str(value) == text

    def test_raw_string(self) -> None:
        assert gi(3, 4).to_raw_string() == "(3, 4)"


# =============================================================================
# ТЕСТЫ: Модифицированное деление
# =============================================================================


class TestModifiedDivmod:
    def test_vector(self) -> None:
        q, r = modified_divmod(gi(11, 3), gi(1, 8))
        assert (q, r) == (gi(1, -1), gi(2, -4))
        assert gi(1, 8) * q + r == gi(11, 3)

    def test_bound_attained(self) -> None:
        """(1 + i) divmod 2: 2·N(r) = N(b), строгое неравенство не выполняется."""
        q, r = modified_divmod(gi(1, 1), gi(2))
        assert q == gi(1, 1)
        assert r == gi(-1, -1)
        assert 2 * r.norm == gi(2).norm

    def test_exhaustive_small_range(self) -> None:
        """Евклидов инвариант и граница остатка на сетке малых значений."""
        for ar in range(-6, 7):
            for ai in range(-6, 7):
                for br in range(-3, 4):
                    for bi in range(-3, 4):
                        a, b = gi(ar, ai), gi(br, bi)
                        if b.is_zero:
                            continue
                        q, r = modified_divmod(a, b)
                        assert b * q + r == a
                        assert 2 * r.norm <= b.norm

    def test_zero_divisor(self) -> None:
        with pytest.raises(DivisionByZero):
            modified_divmod(gi(1), gi(0))
        with pytest.raises(ZeroDivisionError):
            gi(1) % gi(0)
        with pytest.raises(DivisionByZero):
            rounded_quotient(gi(1), gi(0))


# =============================================================================
# ТЕСТЫ: НОД
# =============================================================================


class TestGcd:
    def test_vector(self) -> None:
        """gcd(11 + 3i, 1 + 8i) имеет норму 5 и делит оба аргумента."""
        g = gcd(gi(11, 3), gi(1, 8))
        assert g.norm == 5
        assert (gi(11, 3) % g).is_zero
        assert (gi(1, 8) % g).is_zero

    def test_with_zero(self) -> None:
        assert gcd(gi(0), gi(3)) == gi(3)
        assert gcd(gi(3, 1), gi(0)) == gi(3, 1)

    def test_both_zero(self) -> None:
        with pytest.raises(ArgumentError):
            gcd(gi(0), gi(0))

    def test_logs_iterations(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="pramana.core.domain.gaussian_integer"):
            gcd(gi(11, 3), gi(1, 8))
        assert "iterations" in caplog.text

    def test_xgcd_bezout(self) -> None:
        alpha, beta = gi(11, 3), gi(1, 8)
        g, x, y = xgcd(alpha, beta)
        assert alpha * x + beta * y == g
        assert g.is_associate(gcd(alpha, beta))

    def test_xgcd_with_zero(self) -> None:
        g, x, y = xgcd(gi(4, 2), gi(0))
        assert (g, x, y) == (gi(4, 2), gi(1), gi(0))

    def test_relatively_prime(self) -> None:
        """2 + i и 2 − i — неассоциированные простые над 5."""
        assert is_relatively_prime(gi(2, 1), gi(2, -1))
        assert not is_relatively_prime(gi(2), gi(1, 1))


# =============================================================================
# ТЕСТЫ: Ассоциированные и простота
# =============================================================================


class TestAssociates:
    def test_associates(self) -> None:
        assert gi(1, 2).associates() == [gi(-1, -2), gi(-2, 1), gi(2, -1)]

    def test_is_associate(self) -> None:
        value = gi(1, 2)
        assert value.is_associate(value)
        assert all(value.is_associate(a) for a in value.associates())
        assert all(a.is_associate(value) for a in value.associates())
        assert not value.is_associate(gi(2, 1))
        assert not value.is_associate(gi(2, 4))

    def test_zero(self) -> None:
        assert gi(0).is_associate(gi(0))
        assert not gi(1).is_associate(gi(0))
        assert not gi(0).is_associate(gi(1))


class TestGaussianPrime:
    @pytest.mark.parametrize(
        "value",
        [gi(3), gi(7), gi(-3), gi(0, 3), gi(0, -7), gi(2, 1), gi(1, 1), gi(1, 2), gi(4, 1)],
    )
    def test_primes(self, value: GaussianInteger) -> None:
        assert is_gaussian_prime(value)

    @pytest.mark.parametrize(
        "value",
        [gi(5), gi(2), gi(0), gi(1), gi(0, 1), gi(0, 5), gi(3, 3), gi(2, 2), gi(13)],
    )
    def test_non_primes(self, value: GaussianInteger) -> None:
        assert not is_gaussian_prime(value)


class TestCongruenceAndNorms:
    def test_congruent(self) -> None:
        ok, quotient = congruent_modulo(gi(5), gi(1), gi(2))
        assert ok
        assert quotient == GaussianRational(2)

    def test_not_congruent(self) -> None:
        ok, quotient = congruent_modulo(gi(4), gi(1), gi(2))
        assert not ok
        assert quotient == GaussianRational(3, 2)

    def test_gaussian_modulus(self) -> None:
        ok, _ = congruent_modulo(gi(3, 4), gi(1, 1), gi(1, 1))
        assert ok is False
        ok, _ = congruent_modulo(gi(3, 3), gi(1, 1), gi(1, 1))
        assert ok is True

    def test_zero_modulus(self) -> None:
        with pytest.raises(DivisionByZero):
            congruent_modulo(gi(1), gi(1), gi(0))

    def test_norms_divide(self) -> None:
        assert norms_divide(gi(11, 3), gi(1, 8)) == 2
        assert norms_divide(gi(1, 8), gi(11, 3)) == 2
        assert norms_divide(gi(2), gi(2)) == 1

    def test_norms_do_not_divide(self) -> None:
        assert norms_divide(gi(1, 1), gi(1, 2)) is None

    def test_norms_zero(self) -> None:
        assert norms_divide(gi(0), gi(1, 1)) is None
