"""
Core math modules для Pramana

Арифметика дробей произвольной точности, скалярная теория чисел и
детерминированная генерация идентификаторов.
"""

# Errors
from pramana.core.math.errors import (
    ArgumentError,
    DivisionByZero,
    FormatError,
    InvalidCast,
    InvalidOperation,
    NarrowingFailure,
    PramanaError,
    UnsupportedOperation,
)

# Rational Normalizer
from pramana.core.math.rational import (
    CONTINUED_FRACTION_MAX_ITERATIONS,
    CONTINUED_FRACTION_TOLERANCE,
    DEFAULT_CONTINUED_FRACTION_CONFIG,
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

# Number Theory
from pramana.core.math.number_theory import is_prime, rounding_divide

# Deterministic Identity
from pramana.core.math.identity import (
    DEFAULT_IDENTITY_CONFIG,
    DOMAIN_NAMESPACES,
    ENTITY_BASE_URL,
    NUMBER_NAMESPACE,
    NUMBER_PREFIX,
    PRAMANA_PREFIX,
    IdentityConfig,
    entity_url,
    generate_identity,
    identity_uri,
    namespace_for,
    pramana_id,
    swap_byte_order,
    value_uri,
)

__all__ = [
    # Errors
    "ArgumentError",
    "DivisionByZero",
    "FormatError",
    "InvalidCast",
    "InvalidOperation",
    "NarrowingFailure",
    "PramanaError",
    "UnsupportedOperation",
    # Rational — Constants
    "CONTINUED_FRACTION_MAX_ITERATIONS",
    "CONTINUED_FRACTION_TOLERANCE",
    "DEFAULT_CONTINUED_FRACTION_CONFIG",
    # Rational — Types
    "ContinuedFractionConfig",
    # Rational — Functions
    "add_fractions",
    "ceiling_fraction",
    "decimal_to_fraction",
    "divide_fractions",
    "float_to_fraction",
    "floor_fraction",
    "fraction_to_pair",
    "multiply_fractions",
    "normalize",
    "truncated_divide",
    "truncated_remainder",
    # Number Theory
    "is_prime",
    "rounding_divide",
    # Identity — Constants
    "DEFAULT_IDENTITY_CONFIG",
    "DOMAIN_NAMESPACES",
    "ENTITY_BASE_URL",
    "NUMBER_NAMESPACE",
    "NUMBER_PREFIX",
    "PRAMANA_PREFIX",
    # Identity — Types
    "IdentityConfig",
    # Identity — Functions
    "entity_url",
    "generate_identity",
    "identity_uri",
    "namespace_for",
    "pramana_id",
    "swap_byte_order",
    "value_uri",
]
