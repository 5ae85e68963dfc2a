"""
Core math modules

Скалярные математические примитивы с единой политикой точности и
граничных случаев.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Parameters
    DEFAULT_PRECISION,
    TANGENT_POLE_EPS,
    # Rounding
    apply_precision,
    round_half_away_from_zero,
    # Validation
    is_valid_float,
    to_float,
    validate_bounds,
    validate_precision,
)

# Result
from src.core.math.result import (
    UNDEFINED,
    Result,
    Undefined,
    is_defined,
    is_undefined,
    value_or,
)

# Scalar operations
from src.core.math.scalar import (
    # Arithmetic
    add,
    divide,
    modulus,
    multiply,
    power,
    subtract,
    # Broadcast
    add_to_vector,
    multiply_vector,
    # Unary
    absolute,
    ceiling,
    exponential,
    floor,
    logarithm,
    round_nearest,
    square_root,
    # Trigonometric
    cosine,
    sine,
    tangent,
    # Comparison
    is_equal,
    is_greater_or_equal,
    is_greater_than,
    is_less_or_equal,
    is_less_than,
    is_not_equal,
    # Bitwise
    bitwise_and,
    bitwise_not,
    bitwise_or,
    bitwise_xor,
    left_shift,
    right_shift,
)

# Random sources
from src.core.math.random_sources import (
    EntropySourceError,
    FastRandomProvider,
    RandomProvider,
    SecureRandomProvider,
    mt_random_int,
    random_float,
    random_int,
)

__all__ = [
    # Numerical Safeguards: Parameters
    "DEFAULT_PRECISION",
    "TANGENT_POLE_EPS",
    # Numerical Safeguards: Rounding
    "apply_precision",
    "round_half_away_from_zero",
    # Numerical Safeguards: Validation
    "is_valid_float",
    "to_float",
    "validate_bounds",
    "validate_precision",
    # Result
    "UNDEFINED",
    "Result",
    "Undefined",
    "is_defined",
    "is_undefined",
    "value_or",
    # Scalar: Arithmetic
    "add",
    "divide",
    "modulus",
    "multiply",
    "power",
    "subtract",
    # Scalar: Broadcast
    "add_to_vector",
    "multiply_vector",
    # Scalar: Unary
    "absolute",
    "ceiling",
    "exponential",
    "floor",
    "logarithm",
    "round_nearest",
    "square_root",
    # Scalar: Trigonometric
    "cosine",
    "sine",
    "tangent",
    # Scalar: Comparison
    "is_equal",
    "is_greater_or_equal",
    "is_greater_than",
    "is_less_or_equal",
    "is_less_than",
    "is_not_equal",
    # Scalar: Bitwise
    "bitwise_and",
    "bitwise_not",
    "bitwise_or",
    "bitwise_xor",
    "left_shift",
    "right_shift",
    # Random: Exceptions
    "EntropySourceError",
    # Random: Providers
    "FastRandomProvider",
    "RandomProvider",
    "SecureRandomProvider",
    # Random: Generators
    "mt_random_int",
    "random_float",
    "random_int",
]
