"""
Formatting — Текстовые представления и разбор

Четыре формы представления нормализованного значения A/B + (C/D)i:
- C (canonical):  "A,B,C,D"           — вход генератора идентичности
- R (raw):        "<A,B,C,D>"
- I (improper):   "3/2 + i"
- G / M (mixed):  "1 & 1/2", "3 & 1/2 + 3/4 i"

Разбор принимает ровно четыре целых через запятую (canonical или raw форма).
Trim частей допустим только при разборе, но никогда перед генерацией
идентичности: каноническая форма пробелов не содержит.

Функции работают с уже нормализованными компонентами и сами не нормализуют.
"""

import re
from enum import Enum
from typing import Tuple

from pramana.core.math.errors import FormatError, UnsupportedOperation
from pramana.core.math.rational import truncated_divide, truncated_remainder

Components = Tuple[int, int, int, int]

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")

# Длина блока заведомо меньше минимально допустимого sys.get_int_max_str_digits() (640)
_CHUNK_DIGITS = 512
_CHUNK_BASE = 10**_CHUNK_DIGITS


# =============================================================================
# ДЕСЯТИЧНЫЙ КОДЕК
# =============================================================================
#
# str(int) и int(str) ограничены sys.get_int_max_str_digits() (4300 цифр по
# умолчанию). Компоненты A..D неограниченны, поэтому все преобразования
# int ↔ текст идут блоками по _CHUNK_DIGITS цифр (divide-and-conquer по 10**k).


def int_to_decimal(value: int) -> str:
    """
    Десятичная запись целого любой длины.

    Examples:
        >>> int_to_decimal(-42)
        '-42'
        >>> len(int_to_decimal(10**5000))
        5001
    """
    if value < 0:
        return "-" + int_to_decimal(-value)
    if value < _CHUNK_BASE:
        return str(value)

    # powers[k] = 10 ** (_CHUNK_DIGITS * 2**k), последний с powers[-1]**2 > value
    powers = [_CHUNK_BASE]
    while powers[-1] * powers[-1] <= value:
        powers.append(powers[-1] * powers[-1])

    def render(n: int, level: int, pad: bool) -> str:
        if level < 0:
            digits = str(n)
            return digits.zfill(_CHUNK_DIGITS) if pad else digits
        high, low = divmod(n, powers[level])
        if not pad and high == 0:
            return render(low, level - 1, False)
        return render(high, level - 1, pad) + render(low, level - 1, True)

    return render(value, len(powers) - 1, False)


def decimal_to_int(literal: str) -> int:
    """
    Разбор целого литерала любой длины ([+-]?[0-9]+).

    Raises:
        FormatError: Если literal не является целым литералом
    """
    if not _INTEGER_RE.fullmatch(literal):
        raise FormatError(f"Invalid integer literal {literal!r}")

    sign = -1 if literal[0] == "-" else 1
    digits = literal.lstrip("+-")

    def parse(chunk: str) -> int:
        if len(chunk) <= _CHUNK_DIGITS:
            return int(chunk)
        split = len(chunk) // 2
        return parse(chunk[:split]) * 10 ** (len(chunk) - split) + parse(chunk[split:])

    return sign * parse(digits)


# =============================================================================
# FORMAT CODES
# =============================================================================


class FormatCode(str, Enum):
    """Односимвольный селектор формы представления."""

    CANONICAL = "C"
    RAW = "R"
    IMPROPER = "I"
    GENERAL = "G"
    MIXED = "M"

    @classmethod
    def from_spec(cls, spec: str) -> "FormatCode":
        """
        Разбор format spec (регистр не важен, пустая строка → GENERAL).

        Raises:
            UnsupportedOperation: Для десятичных форм D / F
            FormatError: Для неизвестного кода
        """
        code = (spec or "G").upper()
        if code in ("D", "F"):
            raise UnsupportedOperation(
                f"Decimal format {spec!r}", "Use 'G' or 'I' for an exact representation"
            )
        try:
            return cls(code)
        except ValueError:
            raise FormatError(f"The {spec!r} format string is not supported") from None


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_canonical(a: int, b: int, c: int, d: int) -> str:
    return ",".join(int_to_decimal(n) for n in (a, b, c, d))


def format_raw(a: int, b: int, c: int, d: int) -> str:
    return f"<{format_canonical(a, b, c, d)}>"


def _fraction(num: int, den: int) -> str:
    return f"{int_to_decimal(num)}/{int_to_decimal(den)}"


def _mixed_rational(num: int, den: int) -> str:
    if den == 1:
        return int_to_decimal(num)

    # Целая часть с отбрасыванием к нулю: -3/2 → "-1 & 1/2"
    whole = truncated_divide(num, den)
    remainder = abs(truncated_remainder(num, den))

    if whole == 0:
        return _fraction(num, den)
    if remainder == 0:
        return int_to_decimal(whole)
    return f"{int_to_decimal(whole)} & {_fraction(remainder, den)}"


def _mixed_imaginary(num: int, den: int) -> str:
    if num == 0:
        return "0"
    if den == 1:
        return _unit_imaginary(num)

    whole = truncated_divide(num, den)
    remainder = abs(truncated_remainder(num, den))

    if whole == 0:
        return f"{_fraction(num, den)} i"
    if remainder == 0:
        return f"{int_to_decimal(whole)}i"
    return f"{int_to_decimal(whole)} & {_fraction(remainder, den)} i"


def _improper_imaginary(num: int, den: int) -> str:
    if num == 0:
        return "0"
    if den == 1:
        return _unit_imaginary(num)
    return f"{_fraction(num, den)} i"


def _unit_imaginary(num: int) -> str:
    if num == 1:
        return "i"
    if num == -1:
        return "-i"
    return f"{int_to_decimal(num)}i"


def _join(a: int, c: int, d: int, real: str, imaginary) -> str:
    if c == 0:
        return real
    if a == 0:
        return imaginary(c, d)
    if c > 0:
        return f"{real} + {imaginary(c, d)}"
    return f"{real} - {imaginary(-c, d)}"


def format_mixed(a: int, b: int, c: int, d: int) -> str:
    """
    Смешанные дроби: "1 & 1/2", "3 + 2i", "3 & 1/2 + 3/4 i".

    Examples:
        >>> format_mixed(7, 2, 3, 4)
        '3 & 1/2 + 3/4 i'
        >>> format_mixed(3, 1, -2, 1)
        '3 - 2i'
    """
    return _join(a, c, d, _mixed_rational(a, b), _mixed_imaginary)


def format_improper(a: int, b: int, c: int, d: int) -> str:
    """
    Неправильные дроби: "3/2", "3/2 + i".
    """
    real = int_to_decimal(a) if b == 1 else _fraction(a, b)
    return _join(a, c, d, real, _improper_imaginary)


def format_components(code: FormatCode, a: int, b: int, c: int, d: int) -> str:
    """Форматирование по коду."""
    if code is FormatCode.CANONICAL:
        return format_canonical(a, b, c, d)
    if code is FormatCode.RAW:
        return format_raw(a, b, c, d)
    if code is FormatCode.IMPROPER:
        return format_improper(a, b, c, d)
    return format_mixed(a, b, c, d)


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_components(text: str) -> Components:
    """
    Разбор canonical ("A,B,C,D") или raw ("<A,B,C,D>") формы.

    Части могут быть окружены пробелами. Нормализация не выполняется.

    Raises:
        FormatError: Если строка не содержит ровно четыре целых литерала
    """
    if not isinstance(text, str):
        raise FormatError(f"Expected a string, got {type(text).__name__}")

    body = text.strip()
    if body.startswith("<") and body.endswith(">"):
        body = body[1:-1]

    parts = body.split(",")
    if len(parts) != 4:
        raise FormatError(f"Expected format: a,b,c,d (got {text!r})")

    values = []
    for part in parts:
        literal = part.strip()
        if not _INTEGER_RE.match(literal):
            raise FormatError(f"Invalid integer literal {part!r} in {text!r}")
        values.append(decimal_to_int(literal))

    return (values[0], values[1], values[2], values[3])
