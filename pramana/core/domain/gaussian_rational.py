"""
GaussianRational — Точное комплексное число с рациональными частями

Immutable Pydantic модель, представляющая A/B + (C/D)i, где A, B, C, D —
целые произвольной точности. Любое конструирование (конструктор,
model_validate, JSON) проходит через нормализатор, поэтому экземпляр всегда
в канонической форме.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после каждого конструирования):
1. B > 0, D > 0
2. gcd(|A|, B) = 1, либо A = 0 и B = 1
3. gcd(|C|, D) = 1, либо C = 0 и D = 1
4. Равенство — структурное равенство канонического кортежа
5. Операции, результат которых иррационален (magnitude, phase, polar),
   отклоняются UnsupportedOperation, а не аппроксимируются

ПОРЯДОК:
Сравнение <, <=, >, >= задаёт total order для инженерных целей (сортировка,
детерминированные коллекции): сначала вещественная часть, при равенстве
мнимая. Осмысленным как сравнение величин он является только для
вещественных значений.
"""

import uuid
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from pydantic import BaseModel, Field, StrictInt, model_validator

from pramana.core.domain.classification import NumberClass, classify_components
from pramana.core.domain.formatting import (
    FormatCode,
    format_canonical,
    format_components,
    format_improper,
    format_mixed,
    format_raw,
    parse_components,
)
from pramana.core.math.errors import (
    ArgumentError,
    DivisionByZero,
    FormatError,
    InvalidCast,
    InvalidOperation,
    PramanaError,
    UnsupportedOperation,
)
from pramana.core.math.identity import (
    DEFAULT_IDENTITY_CONFIG,
    NUMBER_NAMESPACE,
    IdentityConfig,
    entity_url,
    generate_identity,
    identity_uri,
    pramana_id,
    value_uri,
)
from pramana.core.math.rational import (
    ContinuedFractionConfig,
    DEFAULT_CONTINUED_FRACTION_CONFIG,
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

if TYPE_CHECKING:
    from pramana.core.domain.number_record import NumberRecord


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# GAUSSIAN RATIONAL MODEL
# =============================================================================


class GaussianRational(BaseModel):
    """
    Gaussian rational A/B + (C/D)i.

    Позиционный конструктор: GaussianRational(a, b=1, c=0, d=1).
    Арифметика доступна и операторами, и именованными методами
    (add, sub, mul, div, mod, pow).
    """

    a: StrictInt = Field(0, description="Числитель вещественной части")
    b: StrictInt = Field(1, description="Знаменатель вещественной части (> 0)")
    c: StrictInt = Field(0, description="Числитель мнимой части")
    d: StrictInt = Field(1, description="Знаменатель мнимой части (> 0)")

    model_config = {"frozen": True}

    def __init__(self, a: int = 0, b: int = 1, c: int = 0, d: int = 1) -> None:
        super().__init__(a=a, b=b, c=c, d=d)

    @model_validator(mode="before")
    @classmethod
    def _normalize_parts(cls, data: Any) -> Any:
        """
        Нормализация вещественной и мнимой частей независимо.

        Нецелые компоненты пропускаются без изменений, их отклонит
        StrictInt валидация полей.
        """
        if not isinstance(data, dict):
            return data

        a, b = data.get("a", 0), data.get("b", 1)
        c, d = data.get("c", 0), data.get("d", 1)
        if not all(_is_plain_int(v) for v in (a, b, c, d)):
            return data

        if b == 0:
            raise DivisionByZero("Real denominator cannot be zero")
        if d == 0:
            raise DivisionByZero("Imaginary denominator cannot be zero")

        a, b = normalize(a, b)
        c, d = normalize(c, d)
        return {"a": a, "b": b, "c": c, "d": d}

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def from_int(cls, value: int) -> "GaussianRational":
        if not _is_plain_int(value):
            raise ArgumentError(f"Expected an int, got {type(value).__name__}")
        return cls(value, 1, 0, 1)

    @classmethod
    def from_parts(cls, real: int, imag: int) -> "GaussianRational":
        """real + imag·i для целых частей."""
        return cls(real, 1, imag, 1)

    @classmethod
    def from_float(
        cls,
        value: float,
        config: ContinuedFractionConfig = DEFAULT_CONTINUED_FRACTION_CONFIG,
    ) -> "GaussianRational":
        """
        Явная конверсия float через best rational approximation.

        Examples:
            >>> GaussianRational.from_float(0.5).canonical
            '1,2,0,1'
        """
        num, den = float_to_fraction(value, config)
        return cls(num, den, 0, 1)

    @classmethod
    def from_decimal(cls, value: Decimal) -> "GaussianRational":
        num, den = decimal_to_fraction(value)
        return cls(num, den, 0, 1)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "GaussianRational":
        num, den = fraction_to_pair(value)
        return cls(num, den, 0, 1)

    @classmethod
    def from_value(cls, value: Any) -> "GaussianRational":
        """
        Явная конверсия из int / float / Decimal / Fraction / GaussianInteger.

        Raises:
            ArgumentError: Для неподдерживаемого типа
        """
        if isinstance(value, GaussianRational):
            return value
        if _is_plain_int(value):
            return cls.from_int(value)
        if isinstance(value, float):
            return cls.from_float(value)
        if isinstance(value, Decimal):
            return cls.from_decimal(value)
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        lift = getattr(value, "to_gaussian_rational", None)
        if lift is not None:
            return lift()
        raise ArgumentError(f"Cannot convert {type(value).__name__} to GaussianRational")

    @classmethod
    def zero(cls) -> "GaussianRational":
        return cls(0, 1, 0, 1)

    @classmethod
    def one(cls) -> "GaussianRational":
        return cls(1, 1, 0, 1)

    @classmethod
    def minus_one(cls) -> "GaussianRational":
        return cls(-1, 1, 0, 1)

    @classmethod
    def eye(cls) -> "GaussianRational":
        """Мнимая единица i."""
        return cls(0, 1, 1, 1)

    @classmethod
    def parse(cls, text: str) -> "GaussianRational":
        """
        Разбор canonical "a,b,c,d" или raw "<a,b,c,d>" формы.

        Raises:
            FormatError: Если строка не из четырёх целых
            DivisionByZero: Если знаменатель равен нулю
        """
        return cls(*parse_components(text))

    @classmethod
    def try_parse(cls, text: str) -> Tuple[bool, Optional["GaussianRational"]]:
        """
        Разбор без исключений.

        Returns:
            (True, value) при успехе, (False, None) при любой ошибке
        """
        try:
            return True, cls.parse(text)
        except PramanaError:
            return False, None

    # =========================================================================
    # КОМПОНЕНТЫ
    # =========================================================================

    @property
    def components(self) -> Tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)

    @property
    def real_part(self) -> "GaussianRational":
        return GaussianRational(self.a, self.b, 0, 1)

    @property
    def imaginary_part(self) -> "GaussianRational":
        """Мнимая часть как вещественное значение (без i)."""
        return GaussianRational(self.c, self.d, 0, 1)

    @property
    def conjugate(self) -> "GaussianRational":
        return GaussianRational(self.a, self.b, -self.c, self.d)

    @property
    def magnitude_squared(self) -> "GaussianRational":
        """|z|² = (A/B)² + (C/D)² — точно, как вещественный GaussianRational."""
        r_num, r_den = multiply_fractions(self.a, self.b, self.a, self.b)
        i_num, i_den = multiply_fractions(self.c, self.d, self.c, self.d)
        num, den = add_fractions(r_num, r_den, i_num, i_den)
        return GaussianRational(num, den, 0, 1)

    @property
    def norm(self) -> "GaussianRational":
        return self.magnitude_squared

    @property
    def reciprocal(self) -> "GaussianRational":
        """
        1 / z

        Raises:
            DivisionByZero: Для нуля
        """
        return GaussianRational.one().div(self)

    @property
    def inverse(self) -> "GaussianRational":
        return self.reciprocal

    # =========================================================================
    # ПРЕДИКАТЫ
    # =========================================================================

    @property
    def is_real(self) -> bool:
        return self.c == 0

    @property
    def is_purely_imaginary(self) -> bool:
        return self.a == 0 and self.c != 0

    @property
    def is_integer(self) -> bool:
        return self.b == 1 and self.c == 0

    @property
    def is_gaussian_integer(self) -> bool:
        return self.b == 1 and self.d == 1

    @property
    def is_zero(self) -> bool:
        return self.a == 0 and self.c == 0

    @property
    def is_one(self) -> bool:
        return self.a == 1 and self.b == 1 and self.c == 0

    @property
    def is_positive(self) -> bool:
        """Положительное вещественное. Для комплексных — False, не ошибка."""
        return self.is_real and self.a > 0

    @property
    def is_negative(self) -> bool:
        """Отрицательное вещественное. Для комплексных — False, не ошибка."""
        return self.is_real and self.a < 0

    @property
    def classification(self) -> NumberClass:
        return classify_components(self.a, self.b, self.c, self.d)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    @classmethod
    def _coerce(cls, other: Any) -> Optional["GaussianRational"]:
        if isinstance(other, GaussianRational):
            return other
        if _is_plain_int(other):
            return cls(other, 1, 0, 1)
        if isinstance(other, Fraction):
            return cls.from_fraction(other)
        return None

    def _require(self, other: Any, operation: str) -> "GaussianRational":
        value = self._coerce(other)
        if value is None:
            lift = getattr(other, "to_gaussian_rational", None)
            if lift is None:
                raise ArgumentError(
                    f"Unsupported operand for {operation}: {type(other).__name__}"
                )
            value = lift()
        return value

    def add(self, other: Any) -> "GaussianRational":
        """(a/b + c/d·i) + (e/f + g/h·i) = (a/b + e/f) + (c/d + g/h)·i"""
        right = self._require(other, "add")
        real = add_fractions(self.a, self.b, right.a, right.b)
        imag = add_fractions(self.c, self.d, right.c, right.d)
        return GaussianRational(real[0], real[1], imag[0], imag[1])

    def sub(self, other: Any) -> "GaussianRational":
        right = self._require(other, "sub")
        real = add_fractions(self.a, self.b, -right.a, right.b)
        imag = add_fractions(self.c, self.d, -right.c, right.d)
        return GaussianRational(real[0], real[1], imag[0], imag[1])

    def neg(self) -> "GaussianRational":
        return GaussianRational(-self.a, self.b, -self.c, self.d)

    def mul(self, other: Any) -> "GaussianRational":
        """
        (x + yi)(u + vi) = (xu − yv) + (xv + yu)i, каждый член — дробь.
        """
        right = self._require(other, "mul")

        xu = multiply_fractions(self.a, self.b, right.a, right.b)
        yv = multiply_fractions(self.c, self.d, right.c, right.d)
        real = add_fractions(xu[0], xu[1], -yv[0], yv[1])

        xv = multiply_fractions(self.a, self.b, right.c, right.d)
        yu = multiply_fractions(self.c, self.d, right.a, right.b)
        imag = add_fractions(xv[0], xv[1], yu[0], yu[1])

        return GaussianRational(real[0], real[1], imag[0], imag[1])

    def div(self, other: Any) -> "GaussianRational":
        """
        z / w = z · conj(w) / |w|²

        Raises:
            DivisionByZero: Если w = 0
        """
        right = self._require(other, "div")
        if right.is_zero:
            raise DivisionByZero("Cannot divide by zero")

        conjugate = right.conjugate
        numerator = self.mul(conjugate)
        # w · conj(w) вещественно по построению
        denominator = right.mul(conjugate)

        real = divide_fractions(numerator.a, numerator.b, denominator.a, denominator.b)
        imag = divide_fractions(numerator.c, numerator.d, denominator.a, denominator.b)
        return GaussianRational(real[0], real[1], imag[0], imag[1])

    def mod(self, other: Any) -> "GaussianRational":
        """
        Остаток для вещественных значений: (a/b) mod (c/f) = (a·f rem c·b) / (b·f).

        Остаток берётся со знаком делимого (truncated semantics).

        Raises:
            InvalidOperation: Если любой из операндов комплексный
            DivisionByZero: Если делитель равен нулю
        """
        right = self._require(other, "mod")
        if not self.is_real or not right.is_real:
            raise InvalidOperation("Modulo operation only supported for real numbers")
        if right.a == 0:
            raise DivisionByZero("Cannot compute modulo with zero divisor")

        num = truncated_remainder(self.a * right.b, right.a * self.b)
        den = self.b * right.b
        return GaussianRational(num, den, 0, 1)

    def pow(self, exponent: int) -> "GaussianRational":
        """
        Целая степень бинарным возведением (square-and-multiply).

        z⁰ = 1; z⁻ⁿ = (1/z)ⁿ.

        Raises:
            ArgumentError: Если показатель не int
            DivisionByZero: Для 0 в отрицательной степени
        """
        if not _is_plain_int(exponent):
            raise ArgumentError(
                f"Exponent must be an int, got {type(exponent).__name__}"
            )
        if exponent == 0:
            return GaussianRational.one()

        base = self
        if exponent < 0:
            base = self.reciprocal
            exponent = -exponent

        result = GaussianRational.one()
        while exponent > 0:
            if exponent & 1:
                result = result.mul(base)
            exponent >>= 1
            if exponent:
                base = base.mul(base)
        return result

    def increment(self) -> "GaussianRational":
        return self.add(1)

    def decrement(self) -> "GaussianRational":
        return self.sub(1)

    def __add__(self, other: Any) -> "GaussianRational":
        right = self._coerce(other)
        return NotImplemented if right is None else self.add(right)

    def __radd__(self, other: Any) -> "GaussianRational":
        left = self._coerce(other)
        return NotImplemented if left is None else left.add(self)

    def __sub__(self, other: Any) -> "GaussianRational":
        right = self._coerce(other)
        return NotImplemented if right is None else self.sub(right)

    def __rsub__(self, other: Any) -> "GaussianRational":
        left = self._coerce(other)
        return NotImplemented if left is None else left.sub(self)

    def __mul__(self, other: Any) -> "GaussianRational":
        right = self._coerce(other)
        return NotImplemented if right is None else self.mul(right)

    def __rmul__(self, other: Any) -> "GaussianRational":
        left = self._coerce(other)
        return NotImplemented if left is None else left.mul(self)

    def __truediv__(self, other: Any) -> "GaussianRational":
        right = self._coerce(other)
        return NotImplemented if right is None else self.div(right)

    def __rtruediv__(self, other: Any) -> "GaussianRational":
        left = self._coerce(other)
        return NotImplemented if left is None else left.div(self)

    def __mod__(self, other: Any) -> "GaussianRational":
        right = self._coerce(other)
        return NotImplemented if right is None else self.mod(right)

    def __rmod__(self, other: Any) -> "GaussianRational":
        left = self._coerce(other)
        return NotImplemented if left is None else left.mod(self)

    def __pow__(self, exponent: Any) -> "GaussianRational":
        return self.pow(exponent)

    def __neg__(self) -> "GaussianRational":
        return self.neg()

    def __pos__(self) -> "GaussianRational":
        return self

    # =========================================================================
    # ВЕЩЕСТВЕННЫЕ ОПЕРАЦИИ
    # =========================================================================

    def _require_real(self, operation: str) -> None:
        if not self.is_real:
            raise InvalidOperation(f"{operation} only supported for real numbers")

    def floor(self) -> "GaussianRational":
        """Наибольшее целое ≤ значения (только вещественные)."""
        self._require_real("Floor")
        return GaussianRational(floor_fraction(self.a, self.b))

    def ceiling(self) -> "GaussianRational":
        """Наименьшее целое ≥ значения (только вещественные)."""
        self._require_real("Ceiling")
        return GaussianRational(ceiling_fraction(self.a, self.b))

    def truncate(self) -> "GaussianRational":
        """Отбрасывание дробной части к нулю (только вещественные)."""
        self._require_real("Truncate")
        return GaussianRational(truncated_divide(self.a, self.b))

    def sign(self) -> int:
        """Знак вещественной части: -1, 0 или 1."""
        return (self.a > 0) - (self.a < 0)

    def abs(self) -> "GaussianRational":
        """
        Точный модуль вещественного значения.

        Raises:
            UnsupportedOperation: Для комплексных (|z| иррационален в общем случае)
        """
        if not self.is_real:
            raise UnsupportedOperation(
                "Absolute value of a complex number", "Use magnitude_squared instead"
            )
        return self.neg() if self.a < 0 else self

    def __abs__(self) -> "GaussianRational":
        return self.abs()

    def __floor__(self) -> int:
        return self.floor().a

    def __ceil__(self) -> int:
        return self.ceiling().a

    def __trunc__(self) -> int:
        return self.truncate().a

    # =========================================================================
    # НЕПОДДЕРЖИВАЕМЫЕ (ПОТЕРЯ ТОЧНОСТИ)
    # =========================================================================

    def magnitude(self) -> float:
        raise UnsupportedOperation("Magnitude", "Use magnitude_squared for an exact value")

    def phase(self) -> float:
        raise UnsupportedOperation("Phase")

    def to_polar(self) -> Tuple[float, float]:
        raise UnsupportedOperation("Polar conversion")

    @classmethod
    def from_polar(cls, magnitude: float, phase: float) -> "GaussianRational":
        raise UnsupportedOperation("Polar conversion")

    def to_decimal_string(self, precision: int = 15) -> str:
        raise UnsupportedOperation(
            "Decimal representation", "Use str() or the 'I' format for an exact value"
        )

    # =========================================================================
    # СУЖЕНИЕ
    # =========================================================================

    def to_int(self) -> int:
        """
        Raises:
            InvalidCast: Если значение не вещественное целое
        """
        if not self.is_real:
            raise InvalidCast(
                "Cannot convert complex number with non-zero imaginary part to a real type"
            )
        if self.b != 1:
            fraction = format_improper(self.a, self.b, 0, 1)
            raise InvalidCast(f"Cannot convert non-integer rational {fraction} to int")
        return self.a

    def to_int_pair(self) -> List[int]:
        """[real, imag] для Gaussian integer значений."""
        if not self.is_gaussian_integer:
            raise InvalidCast("Cannot convert non-integer GaussianRational to an int pair")
        return [self.a, self.c]

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        """Явная, запрошенная вызывающим аппроксимация вещественного значения."""
        if not self.is_real:
            raise InvalidCast(
                "Cannot convert complex number with non-zero imaginary part to float"
            )
        return self.a / self.b

    def __bool__(self) -> bool:
        return not self.is_zero

    # =========================================================================
    # РАВЕНСТВО И ПОРЯДОК
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        right = self._coerce(other)
        if right is None:
            lift = getattr(other, "to_gaussian_rational", None)
            if lift is None:
                return NotImplemented
            right = lift()
        return self.components == right.components

    def __hash__(self) -> int:
        # Вещественные значения хэшируются как Fraction (и int), с которыми они равны
        if self.is_real:
            return hash(Fraction(self.a, self.b))
        return hash(self.components)

    def compare_to(self, other: Any) -> int:
        """
        Total order: вещественные части (A·B' vs A'·B), затем мнимые.

        Returns:
            -1, 0 или 1
        """
        right = self._require(other, "compare")
        left_real, right_real = self.a * right.b, right.a * self.b
        if left_real != right_real:
            return -1 if left_real < right_real else 1
        left_imag, right_imag = self.c * right.d, right.c * self.d
        if left_imag != right_imag:
            return -1 if left_imag < right_imag else 1
        return 0

    def total_order_key(self) -> Tuple[Fraction, Fraction]:
        """Ключ сортировки, согласованный с compare_to."""
        return (Fraction(self.a, self.b), Fraction(self.c, self.d))

    def _compare(self, other: Any) -> Optional[int]:
        if self._coerce(other) is None and getattr(other, "to_gaussian_rational", None) is None:
            return None
        return self.compare_to(other)

    def __lt__(self, other: Any) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: Any) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result >= 0

    # =========================================================================
    # ПРЕДСТАВЛЕНИЯ
    # =========================================================================

    @property
    def canonical(self) -> str:
        """Каноническая строка "A,B,C,D" — единственный вход генератора идентичности."""
        return format_canonical(self.a, self.b, self.c, self.d)

    def to_raw_string(self) -> str:
        return format_raw(self.a, self.b, self.c, self.d)

    def to_improper_fraction_string(self) -> str:
        return format_improper(self.a, self.b, self.c, self.d)

    def to_mixed_fraction_string(self) -> str:
        return format_mixed(self.a, self.b, self.c, self.d)

    def __str__(self) -> str:
        return self.to_mixed_fraction_string()

    def __format__(self, spec: str) -> str:
        """
        format(value, "R") и f"{value:I}".

        Raises:
            FormatError: Для неизвестного кода
            UnsupportedOperation: Для десятичных кодов D / F
        """
        return format_components(FormatCode.from_spec(spec), *self.components)

    # =========================================================================
    # ИДЕНТИЧНОСТЬ
    # =========================================================================

    @property
    def pramana_guid(self) -> uuid.UUID:
        """UUIDv5 канонической строки в namespace чисел."""
        return generate_identity(self.canonical, NUMBER_NAMESPACE)

    @property
    def uri(self) -> str:
        return value_uri(self.canonical)

    @property
    def identity_uri(self) -> str:
        return identity_uri(self.pramana_guid)

    @property
    def pramana_id(self) -> str:
        return pramana_id(self.canonical)

    @property
    def pramana_url(self) -> str:
        return entity_url(self.pramana_id)

    @property
    def pramana_hash_url(self) -> str:
        return entity_url(self.pramana_guid)

    def identity_urls(self, config: IdentityConfig = DEFAULT_IDENTITY_CONFIG) -> Tuple[str, str]:
        """(pramana_url, pramana_hash_url) для произвольной конфигурации."""
        return (
            entity_url(pramana_id(self.canonical, config), config),
            entity_url(self.pramana_guid, config),
        )

    def to_record(self) -> "NumberRecord":
        """Экспортная запись для слоя графа объектов."""
        from pramana.core.domain.number_record import NumberRecord

        return NumberRecord.from_value(self)


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO = GaussianRational.zero()
ONE = GaussianRational.one()
MINUS_ONE = GaussianRational.minus_one()
I = GaussianRational.eye()


# =============================================================================
# FUNCTIONS
# =============================================================================


def clamp(value: GaussianRational, low: GaussianRational, high: GaussianRational) -> GaussianRational:
    """
    Ограничение значения по total order.

    Raises:
        ArgumentError: Если low > high
    """
    if low > high:
        raise ArgumentError("low must be less than or equal to high")
    if value < low:
        return low
    if value > high:
        return high
    return value


def identity_from_canonical(text: str) -> uuid.UUID:
    """
    Идентификатор по строке, которая обязана быть канонической.

    Строка разбирается и канонизируется заново; при любом расхождении
    (пробелы, несокращённая дробь, отрицательный знаменатель, raw форма)
    хэширование не выполняется.

    Raises:
        FormatError: Если строка не в канонической форме
    """
    value = GaussianRational.parse(text)
    if value.canonical != text:
        raise FormatError(
            f"{text!r} is not canonical (expected {value.canonical!r}); "
            f"identities are only generated from canonical strings"
        )
    return value.pramana_guid
