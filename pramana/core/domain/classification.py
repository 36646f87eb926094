"""
Number Hierarchy — Классификация значения по наиболее узкому классу

Предикаты проверяются строго по порядку на уже нормализованной форме:
1. мнимая часть ≠ 0       → Gaussian Rational
2. знаменатель ≠ 1         → Rational Number
3. значение < 0            → Integer
4. значение = 0            → Whole Number
5. иначе                   → Natural Number

Классификация никогда не вызывает повторную нормализацию.
"""

from enum import Enum
from typing import Callable, Final, Tuple

from pramana.core.math.errors import ArgumentError


class NumberClass(str, Enum):
    """Класс числовой иерархии (от широкого к узкому)."""

    GAUSSIAN_RATIONAL = "Gaussian Rational"
    RATIONAL = "Rational Number"
    INTEGER = "Integer"
    WHOLE = "Whole Number"
    NATURAL = "Natural Number"

    @property
    def depth(self) -> int:
        """Глубина в иерархии: 0 для Gaussian Rational, 4 для Natural Number."""
        return _HIERARCHY.index(self)

    def is_subclass_of(self, other: "NumberClass") -> bool:
        """
        Natural ⊂ Whole ⊂ Integer ⊂ Rational ⊂ Gaussian Rational.

        Examples:
            >>> NumberClass.NATURAL.is_subclass_of(NumberClass.INTEGER)
            True
            >>> NumberClass.RATIONAL.is_subclass_of(NumberClass.WHOLE)
            False
        """
        return self.depth >= other.depth


_HIERARCHY: Final[Tuple[NumberClass, ...]] = (
    NumberClass.GAUSSIAN_RATIONAL,
    NumberClass.RATIONAL,
    NumberClass.INTEGER,
    NumberClass.WHOLE,
    NumberClass.NATURAL,
)

# (предикат над (a, b, c, d), класс) в порядке приоритета
_PREDICATE_CHAIN: Final[Tuple[Tuple[Callable[[int, int, int, int], bool], NumberClass], ...]] = (
    (lambda a, b, c, d: c != 0, NumberClass.GAUSSIAN_RATIONAL),
    (lambda a, b, c, d: b != 1, NumberClass.RATIONAL),
    (lambda a, b, c, d: a < 0, NumberClass.INTEGER),
    (lambda a, b, c, d: a == 0, NumberClass.WHOLE),
)


def classify_components(a: int, b: int, c: int, d: int) -> NumberClass:
    """
    Классификация нормализованных компонент A/B + (C/D)i.

    Examples:
        >>> classify_components(3, 4, 0, 1).value
        'Rational Number'
        >>> classify_components(-5, 1, 0, 1).value
        'Integer'
    """
    for predicate, number_class in _PREDICATE_CHAIN:
        if predicate(a, b, c, d):
            return number_class
    return NumberClass.NATURAL


def classify(value: object) -> NumberClass:
    """
    Классификация GaussianRational, GaussianInteger или int.

    Raises:
        ArgumentError: Для неподдерживаемого типа
    """
    if isinstance(value, bool):
        raise ArgumentError("Cannot classify a bool")
    if isinstance(value, int):
        return classify_components(value, 1, 0, 1)

    components = getattr(value, "components", None)
    if components is None:
        raise ArgumentError(f"Cannot classify {type(value).__name__}")
    return classify_components(*components)
