"""
Domain models and value objects.

Contains the exact number types (GaussianRational, GaussianInteger), the
number hierarchy, text forms, and the export record.
"""

from pramana.core.domain.classification import NumberClass, classify, classify_components
from pramana.core.domain.formatting import (
    FormatCode,
    decimal_to_int,
    int_to_decimal,
    parse_components,
)
from pramana.core.domain.gaussian_rational import (
    I,
    MINUS_ONE,
    ONE,
    ZERO,
    GaussianRational,
    clamp,
    identity_from_canonical,
)
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
from pramana.core.domain.number_record import NUMBER_RECORD_SCHEMA_VERSION, NumberRecord

__all__ = [
    # Classification
    "NumberClass",
    "classify",
    "classify_components",
    # Formatting
    "FormatCode",
    "decimal_to_int",
    "int_to_decimal",
    "parse_components",
    # Gaussian Rational
    "GaussianRational",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "I",
    "clamp",
    "identity_from_canonical",
    # Gaussian Integer
    "GaussianInteger",
    "congruent_modulo",
    "gcd",
    "is_gaussian_prime",
    "is_relatively_prime",
    "modified_divmod",
    "norms_divide",
    "rounded_quotient",
    "units",
    "xgcd",
    # Number Record
    "NUMBER_RECORD_SCHEMA_VERSION",
    "NumberRecord",
]
