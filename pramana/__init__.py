"""
Pramana — точные числа с детерминированной идентичностью

Gaussian rationals A/B + (C/D)i с произвольной точностью, Gaussian integers
с алгоритмами теории чисел и UUIDv5 идентификаторы канонической формы.
"""

from pramana.core.domain import (
    GaussianInteger,
    GaussianRational,
    NumberClass,
    NumberRecord,
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

__version__ = "0.1.0"

__all__ = [
    "GaussianInteger",
    "GaussianRational",
    "NumberClass",
    "NumberRecord",
    "ArgumentError",
    "DivisionByZero",
    "FormatError",
    "InvalidCast",
    "InvalidOperation",
    "PramanaError",
    "UnsupportedOperation",
]
