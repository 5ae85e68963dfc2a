"""
Scalar Reports: сводки результатов по категориям операций

Immutable Pydantic модели: одна модель на категорию, поля совпадают с
именами операций категории. Сериализация через
model_dump(mode="json").

Поля division, logarithm, tangent имеют тип Result (float | Undefined)
и сериализуются в "undefined" для неопределённого результата.
"""

from pydantic import BaseModel, Field

from src.core.math.result import Result

# =============================================================================
# ARITHMETIC
# =============================================================================


class ArithmeticReport(BaseModel):
    """
    Результаты арифметики над парой (a, b).

    modulus и exponentiation могут быть NaN/Inf (IEEE), division может
    быть UNDEFINED.
    """

    addition: float = Field(..., description="a + b (округлено)")
    subtraction: float = Field(..., description="a - b")
    multiplication: float = Field(..., description="a * b")
    division: Result = Field(..., description="a / b или UNDEFINED при b == 0")
    modulus: float = Field(..., description="fmod(a, b) (округлено)")
    exponentiation: float = Field(..., description="a ** b")

    model_config = {"frozen": True}


# =============================================================================
# SCALAR FUNCTIONS
# =============================================================================


class ScalarFunctionsReport(BaseModel):
    """Результаты унарных функций над x."""

    absolute: float = Field(..., description="|x|")
    ceiling: float = Field(..., description="ceil(x)")
    floor: float = Field(..., description="floor(x)")
    round: float = Field(..., description="round half away from zero")
    exponential: float = Field(..., description="e ** x")
    logarithm: Result = Field(..., description="ln(x) или UNDEFINED при x <= 0")
    square_root: float = Field(..., description="sqrt(|x|)")

    model_config = {"frozen": True}


# =============================================================================
# TRIGONOMETRIC
# =============================================================================


class TrigonometricReport(BaseModel):
    """Результаты тригонометрии над углом (радианы)."""

    sine: float = Field(..., description="sin(angle) (округлено)")
    cosine: float = Field(..., description="cos(angle) (округлено)")
    tangent: Result = Field(..., description="tan(angle) или UNDEFINED в полюсе")

    model_config = {"frozen": True}


# =============================================================================
# RANDOM
# =============================================================================


class RandomNumbersReport(BaseModel):
    """
    Сэмпл каждого генератора.

    Границы rand_int / mt_rand_int проверяются генераторами, не моделью.
    """

    rand_int: int = Field(..., description="Криптостойкое целое в [low, high]")
    mt_rand_int: int = Field(..., description="Mersenne Twister целое в [low, high]")
    lcg_value: float = Field(..., ge=0, lt=1, description="Равномерный float в [0, 1)")

    model_config = {"frozen": True}


# =============================================================================
# COMPARISON
# =============================================================================


class ComparisonReport(BaseModel):
    """Результаты шести сравнений пары (a, b)."""

    greater_than: bool
    less_than: bool
    equal: bool
    not_equal: bool
    greater_or_equal: bool
    less_or_equal: bool

    model_config = {"frozen": True}


# =============================================================================
# BITWISE
# =============================================================================


class BitwiseReport(BaseModel):
    """
    Результаты побитовых операций над парой (a, b).

    bitwise_not, left_shift, right_shift применяются к a (сдвиг на 1 бит).
    """

    bitwise_and: int
    bitwise_or: int
    bitwise_xor: int
    bitwise_not: int
    left_shift: int
    right_shift: int

    model_config = {"frozen": True}
