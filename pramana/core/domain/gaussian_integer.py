"""
GaussianInteger — Целые Гаусса Z[i] и алгоритмы теории чисел

Z[i] = {a + bi : a, b ∈ Z} — евклидово кольцо с нормой N(a + bi) = a² + b².

Сложение, вычитание и умножение замкнуты в Z[i]. Точное деление выводит
из кольца, поэтому `/` возвращает GaussianRational; `//` и `%` дают
модифицированное деление с остатком (округление к ближайшему, а не floor).

МОДИФИЦИРОВАННОЕ ДЕЛЕНИЕ:
    q = round(a · conj(b) / N(b))   (покомпонентно, половины от нуля)
    r = a − b · q
    a = b·q + r,   2·N(r) ≤ N(b)

Граница достигается (например, (1 + i) divmod 2 → r = −1 − i, N(r) = 2),
поэтому строгое неравенство не утверждается.
"""

import logging
import uuid
from random import Random
from typing import Any, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, StrictInt

from pramana.core.domain.classification import NumberClass
from pramana.core.domain.formatting import int_to_decimal
from pramana.core.domain.gaussian_rational import GaussianRational
from pramana.core.math.errors import ArgumentError, DivisionByZero, InvalidCast
from pramana.core.math.number_theory import is_prime, rounding_divide

logger = logging.getLogger(__name__)


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# GAUSSIAN INTEGER MODEL
# =============================================================================


class GaussianInteger(BaseModel):
    """
    Gaussian integer real + imag·i.

    Позиционный конструктор: GaussianInteger(real=0, imag=0).
    """

    real: StrictInt = Field(0, description="Вещественная часть")
    imag: StrictInt = Field(0, description="Мнимая часть")

    model_config = {"frozen": True}

    def __init__(self, real: int = 0, imag: int = 0) -> None:
        super().__init__(real=real, imag=imag)

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def from_array(cls, values: Sequence[int]) -> "GaussianInteger":
        """
        [real, imag] → GaussianInteger.

        Raises:
            ArgumentError: Если элементов не ровно два
        """
        if len(values) != 2:
            raise ArgumentError(f"Array must have exactly 2 elements, got {len(values)}")
        return cls(values[0], values[1])

    @classmethod
    def from_rational(cls, value: GaussianRational) -> "GaussianInteger":
        """
        Сужение GaussianRational → GaussianInteger.

        Raises:
            InvalidCast: Если любой знаменатель ≠ 1
        """
        if not value.is_gaussian_integer:
            raise InvalidCast(
                f"Cannot convert {value.canonical} to GaussianInteger: "
                f"both denominators must be 1"
            )
        return cls(value.a, value.c)

    @classmethod
    def random(
        cls,
        real_range: Tuple[int, int] = (-100, 100),
        imag_range: Tuple[int, int] = (-100, 100),
        rng: Optional[Random] = None,
    ) -> "GaussianInteger":
        """
        Случайный GaussianInteger с частями в заданных диапазонах (включительно).

        Передайте rng с фиксированным seed для воспроизводимости.
        """
        rng = rng or Random()
        return cls(rng.randint(*real_range), rng.randint(*imag_range))

    @classmethod
    def zero(cls) -> "GaussianInteger":
        return cls(0, 0)

    @classmethod
    def one(cls) -> "GaussianInteger":
        return cls(1, 0)

    @classmethod
    def minus_one(cls) -> "GaussianInteger":
        return cls(-1, 0)

    @classmethod
    def eye(cls) -> "GaussianInteger":
        return cls(0, 1)

    @classmethod
    def two(cls) -> "GaussianInteger":
        """1 + i — простой элемент над 2 (2 = −i·(1 + i)²)."""
        return cls(1, 1)

    @classmethod
    def units(cls) -> List["GaussianInteger"]:
        """Четыре единицы Z[i]: 1, −1, i, −i."""
        return [cls(1, 0), cls(-1, 0), cls(0, 1), cls(0, -1)]

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def conjugate(self) -> "GaussianInteger":
        return GaussianInteger(self.real, -self.imag)

    @property
    def norm(self) -> int:
        """N(a + bi) = a² + b²"""
        return self.real * self.real + self.imag * self.imag

    @property
    def is_unit(self) -> bool:
        return self.norm == 1

    @property
    def is_zero(self) -> bool:
        return self.real == 0 and self.imag == 0

    @property
    def is_real(self) -> bool:
        return self.imag == 0

    @property
    def is_purely_imaginary(self) -> bool:
        return self.real == 0 and self.imag != 0

    @property
    def components(self) -> Tuple[int, int, int, int]:
        """Компоненты поднятого рационального значения (re, 1, im, 1)."""
        return (self.real, 1, self.imag, 1)

    @property
    def classification(self) -> NumberClass:
        return self.to_gaussian_rational().classification

    def to_gaussian_rational(self) -> GaussianRational:
        return GaussianRational(self.real, 1, self.imag, 1)

    def to_list(self) -> List[int]:
        return [self.real, self.imag]

    # =========================================================================
    # ИДЕНТИЧНОСТЬ (через поднятое рациональное значение)
    # =========================================================================

    @property
    def canonical(self) -> str:
        return self.to_gaussian_rational().canonical

    @property
    def uri(self) -> str:
        return self.to_gaussian_rational().uri

    @property
    def pramana_guid(self) -> uuid.UUID:
        return self.to_gaussian_rational().pramana_guid

    @property
    def identity_uri(self) -> str:
        return self.to_gaussian_rational().identity_uri

    @property
    def pramana_id(self) -> str:
        return self.to_gaussian_rational().pramana_id

    @property
    def pramana_url(self) -> str:
        return self.to_gaussian_rational().pramana_url

    @property
    def pramana_hash_url(self) -> str:
        return self.to_gaussian_rational().pramana_hash_url

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    @staticmethod
    def _coerce(other: Any) -> Optional["GaussianInteger"]:
        if isinstance(other, GaussianInteger):
            return other
        if _is_plain_int(other):
            return GaussianInteger(other, 0)
        return None

    def add(self, other: "GaussianInteger") -> "GaussianInteger":
        return GaussianInteger(self.real + other.real, self.imag + other.imag)

    def sub(self, other: "GaussianInteger") -> "GaussianInteger":
        return GaussianInteger(self.real - other.real, self.imag - other.imag)

    def mul(self, other: "GaussianInteger") -> "GaussianInteger":
        """(a + bi)(c + di) = (ac − bd) + (ad + bc)i"""
        return GaussianInteger(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def pow(self, exponent: int) -> "GaussianInteger":
        """
        Неотрицательная целая степень (square-and-multiply).

        Raises:
            ArgumentError: Для отрицательного показателя (результат вне Z[i])
        """
        if not _is_plain_int(exponent):
            raise ArgumentError(
                f"Exponent must be an int, got {type(exponent).__name__}"
            )
        if exponent < 0:
            raise ArgumentError(
                "Negative exponents produce Gaussian rationals; "
                "use GaussianRational.pow instead"
            )

        result = GaussianInteger.one()
        base = self
        while exponent > 0:
            if exponent & 1:
                result = result.mul(base)
            exponent >>= 1
            if exponent:
                base = base.mul(base)
        return result

    def increment(self) -> "GaussianInteger":
        return GaussianInteger(self.real + 1, self.imag)

    def decrement(self) -> "GaussianInteger":
        return GaussianInteger(self.real - 1, self.imag)

    def _binary(self, other: Any, operation: str, reflected: bool = False) -> Any:
        right = self._coerce(other)
        if right is not None:
            left, right = (right, self) if reflected else (self, right)
            return getattr(left, operation)(right)
        if isinstance(other, GaussianRational):
            lifted = self.to_gaussian_rational()
            left, right = (other, lifted) if reflected else (lifted, other)
            return getattr(left, operation)(right)
        return NotImplemented

    def __add__(self, other: Any) -> Any:
        return self._binary(other, "add")

    def __radd__(self, other: Any) -> Any:
        return self._binary(other, "add", reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary(other, "sub")

    def __rsub__(self, other: Any) -> Any:
        return self._binary(other, "sub", reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary(other, "mul")

    def __rmul__(self, other: Any) -> Any:
        return self._binary(other, "mul", reflected=True)

    def __truediv__(self, other: Any) -> Any:
        """Точное деление — результат в GaussianRational."""
        right = self._coerce(other)
        if right is not None:
            return self.to_gaussian_rational().div(right.to_gaussian_rational())
        if isinstance(other, GaussianRational):
            return self.to_gaussian_rational().div(other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> Any:
        left = self._coerce(other)
        if left is not None:
            return left.to_gaussian_rational().div(self.to_gaussian_rational())
        if isinstance(other, GaussianRational):
            return other.div(self.to_gaussian_rational())
        return NotImplemented

    def __floordiv__(self, other: Any) -> Any:
        right = self._coerce(other)
        return NotImplemented if right is None else rounded_quotient(self, right)

    def __rfloordiv__(self, other: Any) -> Any:
        left = self._coerce(other)
        return NotImplemented if left is None else rounded_quotient(left, self)

    def __mod__(self, other: Any) -> Any:
        right = self._coerce(other)
        return NotImplemented if right is None else modified_divmod(self, right)[1]

    def __rmod__(self, other: Any) -> Any:
        left = self._coerce(other)
        return NotImplemented if left is None else modified_divmod(left, self)[1]

    def __divmod__(self, other: Any) -> Any:
        right = self._coerce(other)
        return NotImplemented if right is None else modified_divmod(self, right)

    def __rdivmod__(self, other: Any) -> Any:
        left = self._coerce(other)
        return NotImplemented if left is None else modified_divmod(left, self)

    def __pow__(self, exponent: Any) -> "GaussianInteger":
        return self.pow(exponent)

    def __neg__(self) -> "GaussianInteger":
        return GaussianInteger(-self.real, -self.imag)

    def __pos__(self) -> "GaussianInteger":
        return self

    def __bool__(self) -> bool:
        return not self.is_zero

    # =========================================================================
    # АССОЦИИРОВАННЫЕ
    # =========================================================================

    def associates(self) -> List["GaussianInteger"]:
        """Три нетривиальных ассоциированных: ×(−1), ×i, ×(−i)."""
        return [-self, self.mul(GaussianInteger.eye()), self.mul(GaussianInteger(0, -1))]

    def is_associate(self, other: "GaussianInteger") -> bool:
        """
        self = u · other для некоторой единицы u.

        Ноль ассоциирован только с нулём.
        """
        if other.is_zero:
            return self.is_zero
        quotient = rounded_quotient(self, other)
        return quotient.mul(other) == self and quotient.is_unit

    # =========================================================================
    # РАВЕНСТВО И ПОРЯДОК
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, GaussianInteger):
            return self.real == other.real and self.imag == other.imag
        if _is_plain_int(other):
            return self.imag == 0 and self.real == other
        if isinstance(other, GaussianRational):
            return self.to_gaussian_rational() == other
        return NotImplemented

    def __hash__(self) -> int:
        # Совпадает с хэшем поднятого значения, которому он равен
        return hash(self.to_gaussian_rational())

    def compare_to(self, other: "GaussianInteger") -> int:
        """Total order: сначала real, затем imag."""
        left, right = (self.real, self.imag), (other.real, other.imag)
        return (left > right) - (left < right)

    def __lt__(self, other: Any) -> bool:
        right = self._coerce(other)
        return NotImplemented if right is None else self.compare_to(right) < 0

    def __le__(self, other: Any) -> bool:
        right = self._coerce(other)
        return NotImplemented if right is None else self.compare_to(right) <= 0

    def __gt__(self, other: Any) -> bool:
        right = self._coerce(other)
        return NotImplemented if right is None else self.compare_to(right) > 0

    def __ge__(self, other: Any) -> bool:
        right = self._coerce(other)
        return NotImplemented if right is None else self.compare_to(right) >= 0

    # =========================================================================
    # ПРЕДСТАВЛЕНИЯ
    # =========================================================================

    def __str__(self) -> str:
        """3 + 4i, 3 - i, -i, 5i, 7"""
        return self.to_gaussian_rational().to_mixed_fraction_string()

    def to_raw_string(self) -> str:
        return f"({int_to_decimal(self.real)}, {int_to_decimal(self.imag)})"


# =============================================================================
# NUMBER-THEORETIC FUNCTIONS
# =============================================================================


def modified_divmod(
    a: GaussianInteger, b: GaussianInteger
) -> Tuple[GaussianInteger, GaussianInteger]:
    """
    Модифицированное деление с остатком (Conrad, "The Gaussian Integers").

    Returns:
        (q, r): a = b·q + r, 2·N(r) ≤ N(b)

    Raises:
        DivisionByZero: Если b = 0

    Examples:
        >>> q, r = modified_divmod(GaussianInteger(11, 3), GaussianInteger(1, 8))
        >>> (q, r) == (GaussianInteger(1, -1), GaussianInteger(2, -4))
        True
    """
    quotient = rounded_quotient(a, b)
    return quotient, a.sub(b.mul(quotient))


def rounded_quotient(a: GaussianInteger, b: GaussianInteger) -> GaussianInteger:
    """
    Ближайший GaussianInteger к a / b (покомпонентно, половины от нуля).

    Raises:
        DivisionByZero: Если b = 0
    """
    if b.is_zero:
        raise DivisionByZero("Cannot divide by zero")

    numerator = a.mul(b.conjugate)
    denominator = b.norm
    return GaussianInteger(
        rounding_divide(numerator.real, denominator),
        rounding_divide(numerator.imag, denominator),
    )


def gcd(a: GaussianInteger, b: GaussianInteger) -> GaussianInteger:
    """
    НОД алгоритмом Евклида над modified_divmod.

    Результат определён с точностью до единицы (ассоциированного).

    Raises:
        ArgumentError: Если оба аргумента нулевые
    """
    if a.is_zero and b.is_zero:
        raise ArgumentError("gcd(0, 0) is undefined: both inputs are zero")

    r1, r2 = a, b
    iterations = 0
    while not r2.is_zero:
        r1, r2 = r2, modified_divmod(r1, r2)[1]
        iterations += 1

    logger.debug("gcd(%s, %s) = %s after %d iterations", a, b, r1, iterations)
    return r1


def xgcd(
    alpha: GaussianInteger, beta: GaussianInteger
) -> Tuple[GaussianInteger, GaussianInteger, GaussianInteger]:
    """
    Расширенный алгоритм Евклида.

    Returns:
        (g, x, y): g = alpha·x + beta·y, g — НОД (с точностью до единицы)

    Examples:
        >>> g, x, y = xgcd(GaussianInteger(11, 3), GaussianInteger(1, 8))
        >>> GaussianInteger(11, 3) * x + GaussianInteger(1, 8) * y == g
        True
    """
    a, b = alpha, beta
    x, next_x = GaussianInteger.one(), GaussianInteger.zero()
    y, next_y = GaussianInteger.zero(), GaussianInteger.one()

    iterations = 0
    while not b.is_zero:
        quotient, remainder = modified_divmod(a, b)
        x, next_x = next_x, x.sub(quotient.mul(next_x))
        y, next_y = next_y, y.sub(quotient.mul(next_y))
        a, b = b, remainder
        iterations += 1

    logger.debug("xgcd(%s, %s) = %s after %d iterations", alpha, beta, a, iterations)
    return a, x, y


def is_relatively_prime(a: GaussianInteger, b: GaussianInteger) -> bool:
    """НОД — единица."""
    return gcd(a, b).is_unit


def is_gaussian_prime(x: GaussianInteger) -> bool:
    """
    Простота в Z[i]:
    - обе части ≠ 0: N(x) — простое рациональное
    - одна часть = 0: модуль другой — простое p ≡ 3 (mod 4)

    Examples:
        >>> is_gaussian_prime(GaussianInteger(3, 0))
        True
        >>> is_gaussian_prime(GaussianInteger(5, 0))
        False
    """
    re, im = abs(x.real), abs(x.imag)
    if re != 0 and im != 0:
        return is_prime(x.norm)

    value = im if re == 0 else re
    return is_prime(value) and value % 4 == 3


def congruent_modulo(
    a: GaussianInteger, b: GaussianInteger, c: GaussianInteger
) -> Tuple[bool, GaussianRational]:
    """
    a ≡ b (mod c).

    Returns:
        (признак сравнимости, точное частное (a − b) / c)

    Raises:
        DivisionByZero: Если c = 0
    """
    quotient = a.sub(b).to_gaussian_rational().div(c.to_gaussian_rational())
    return quotient.is_gaussian_integer, quotient


def norms_divide(a: GaussianInteger, b: GaussianInteger) -> Optional[int]:
    """
    Частное большей нормы на меньшую, если делится нацело.

    Returns:
        Частное или None (не делится либо меньшая норма равна 0)
    """
    small, large = sorted((a.norm, b.norm))
    if small == 0 or large % small != 0:
        return None
    return large // small


def units() -> List[GaussianInteger]:
    return GaussianInteger.units()
