"""
Report builders: одна операция на категорию

Каждый builder вычисляет все операции категории через функции scalar /
random_sources и упаковывает результаты в immutable модель из
src.core.domain.scalar_reports. Отдельной логики здесь нет, поэтому
сводка никогда не расходится с отдельными функциями.
"""

from src.core.domain.scalar_reports import (
    ArithmeticReport,
    BitwiseReport,
    ComparisonReport,
    RandomNumbersReport,
    ScalarFunctionsReport,
    TrigonometricReport,
)
from src.core.math import random_sources, scalar


def arithmetic_operations(a: float, b: float) -> ArithmeticReport:
    """
    Все арифметические операции над (a, b).

    addition и modulus округляются до DEFAULT_PRECISION.
    """
    return ArithmeticReport(
        addition=scalar.add(a, b),
        subtraction=scalar.subtract(a, b),
        multiplication=scalar.multiply(a, b),
        division=scalar.divide(a, b),
        modulus=scalar.modulus(a, b),
        exponentiation=scalar.power(a, b),
    )


def scalar_functions(x: float) -> ScalarFunctionsReport:
    """Все унарные функции над x."""
    return ScalarFunctionsReport(
        absolute=scalar.absolute(x),
        ceiling=scalar.ceiling(x),
        floor=scalar.floor(x),
        round=scalar.round_nearest(x),
        exponential=scalar.exponential(x),
        logarithm=scalar.logarithm(x),
        square_root=scalar.square_root(x),
    )


def trigonometric_operations(angle: float) -> TrigonometricReport:
    """sine, cosine, tangent угла (радианы) с точностью по умолчанию."""
    return TrigonometricReport(
        sine=scalar.sine(angle),
        cosine=scalar.cosine(angle),
        tangent=scalar.tangent(angle),
    )


def random_numbers(low: int = 1, high: int = 10) -> RandomNumbersReport:
    """
    По одному сэмплу каждого генератора.

    Args:
        low: Нижняя граница целых генераторов (default: 1)
        high: Верхняя граница целых генераторов (default: 10)

    Raises:
        ValueError: Если low > high
        EntropySourceError: Если криптостойкий источник недоступен
    """
    return RandomNumbersReport(
        rand_int=random_sources.random_int(low, high),
        mt_rand_int=random_sources.mt_random_int(low, high),
        lcg_value=random_sources.random_float(),
    )


def comparison_operations(a: float, b: float) -> ComparisonReport:
    """Шесть сравнений (a, b)."""
    return ComparisonReport(
        greater_than=scalar.is_greater_than(a, b),
        less_than=scalar.is_less_than(a, b),
        equal=scalar.is_equal(a, b),
        not_equal=scalar.is_not_equal(a, b),
        greater_or_equal=scalar.is_greater_or_equal(a, b),
        less_or_equal=scalar.is_less_or_equal(a, b),
    )


def bitwise_operations(a: int, b: int) -> BitwiseReport:
    """
    Побитовые операции над (a, b).

    NOT и сдвиги (на 1 бит) применяются к a.
    """
    return BitwiseReport(
        bitwise_and=scalar.bitwise_and(a, b),
        bitwise_or=scalar.bitwise_or(a, b),
        bitwise_xor=scalar.bitwise_xor(a, b),
        bitwise_not=scalar.bitwise_not(a),
        left_shift=scalar.left_shift(a),
        right_shift=scalar.right_shift(a),
    )
