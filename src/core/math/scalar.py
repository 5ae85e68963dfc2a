"""
Scalar Math: stateless скалярные операции

Набор независимых чистых функций по категориям:
- Арифметика (add, subtract, multiply, divide, modulus, power)
- Broadcast скаляра на последовательность (multiply_vector, add_to_vector)
- Унарные функции (absolute, ceiling, floor, round_nearest, exponential,
  logarithm, square_root)
- Тригонометрия (sine, cosine, tangent)
- Сравнения (is_greater_than, ..., is_less_or_equal)
- Побитовые операции (bitwise_and, ..., right_shift)

Случайные генераторы вынесены в random_sources.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. divide, logarithm, tangent возвращают UNDEFINED вместо exception
2. Остальные операции следуют IEEE-754 (inf/nan), а не исключениям Python
3. Нет состояния: одинаковые входы → одинаковый результат
4. Входные последовательности никогда не мутируются
"""

import math
from typing import Iterable, Optional

from src.core.math.numerical_safeguards import (
    DEFAULT_PRECISION,
    TANGENT_POLE_EPS,
    apply_precision,
    is_valid_float,
    round_half_away_from_zero,
    to_float,
)
from src.core.math.result import UNDEFINED, Result

# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: float, b: float, precision: Optional[int] = DEFAULT_PRECISION) -> float:
    """
    Сложение с опциональным округлением.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое
        precision: Число десятичных знаков (default: 10, None: без округления)

    Returns:
        a + b

    Examples:
        >>> add(0.1, 0.2)
        0.3
        >>> add(0.1, 0.2, precision=None)
        0.30000000000000004
    """
    try:
        total = a + b
    except OverflowError:
        total = to_float(a) + to_float(b)

    return apply_precision(total, precision)


def subtract(a: float, b: float) -> float:
    """Разность a - b"""
    try:
        return to_float(a - b)
    except OverflowError:
        return to_float(a) - to_float(b)


def multiply(a: float, b: float) -> float:
    """Произведение a * b"""
    try:
        return to_float(a * b)
    except OverflowError:
        return to_float(a) * to_float(b)


def divide(a: float, b: float) -> Result:
    """
    Деление.

    Args:
        a: Делимое
        b: Делитель

    Returns:
        a / b, либо UNDEFINED если b == 0 (включая -0.0)
    """
    if b == 0:
        return UNDEFINED

    try:
        return a / b
    except OverflowError:
        # частное или операнд вне диапазона float
        if isinstance(a, int) and isinstance(b, int):
            return math.inf if (a > 0) == (b > 0) else -math.inf
        return to_float(a) / to_float(b)


def modulus(a: float, b: float, precision: Optional[int] = DEFAULT_PRECISION) -> float:
    """
    Остаток от деления с плавающей точкой (знак делимого, как math.fmod).

    Это не математический modulo: modulus(-5, 2) == -1.0.

    Args:
        a: Делимое
        b: Делитель
        precision: Число десятичных знаков (default: 10, None: без округления)

    Returns:
        fmod(a, b). NaN если b == 0 или a бесконечно (IEEE fmod).

    Examples:
        >>> modulus(5, -2)
        1.0
        >>> modulus(-2.1, 1.0)
        -0.1
    """
    try:
        remainder = math.fmod(to_float(a), to_float(b))
    except ValueError:
        # fmod(x, 0) и fmod(inf, y): IEEE возвращает NaN
        remainder = math.nan

    return apply_precision(remainder, precision)


def power(a: float, b: float) -> float:
    """
    Возведение в степень a ** b как float.

    Граничные случаи по IEEE-754 pow, без исключений:
    - Переполнение → ±inf (минус для отрицательного основания и нечётной
      целой степени)
    - 0 ** отрицательная степень → inf (-inf для -0.0 и нечётной целой
      степени)
    - Отрицательное основание и нецелая степень → nan
    """
    a, b = to_float(a), to_float(b)
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0:
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan


def _is_odd_integer(value: float) -> bool:
    return is_valid_float(value) and float(value).is_integer() and int(value) % 2 == 1


# =============================================================================
# BROADCAST НА ПОСЛЕДОВАТЕЛЬНОСТЬ
# =============================================================================


def multiply_vector(scalar: float, vector: Iterable[float]) -> list[float]:
    """
    Умножение каждого элемента последовательности на скаляр.

    Args:
        scalar: Множитель
        vector: Последовательность чисел (не изменяется)

    Returns:
        Новый список той же длины и порядка

    Examples:
        >>> multiply_vector(2, [1, 2, 3])
        [2, 4, 6]
        >>> multiply_vector(2, [])
        []
    """
    return [x * scalar for x in vector]


def add_to_vector(scalar: float, vector: Iterable[float]) -> list[float]:
    """
    Прибавление скаляра к каждому элементу последовательности.

    Args:
        scalar: Слагаемое
        vector: Последовательность чисел (не изменяется)

    Returns:
        Новый список той же длины и порядка
    """
    return [x + scalar for x in vector]


# =============================================================================
# УНАРНЫЕ ФУНКЦИИ
# =============================================================================


def absolute(x: float) -> float:
    """Модуль |x| как float"""
    return to_float(abs(x))


def ceiling(x: float) -> float:
    """Округление вверх как float. NaN/Inf без изменений."""
    x = to_float(x)
    if not is_valid_float(x):
        return x
    return float(math.ceil(x))


def floor(x: float) -> float:
    """Округление вниз как float. NaN/Inf без изменений."""
    x = to_float(x)
    if not is_valid_float(x):
        return x
    return float(math.floor(x))


def round_nearest(x: float) -> float:
    """
    Округление до ближайшего целого, половина от нуля.

    В отличие от встроенного round() (banker's rounding):
    round_nearest(2.5) == 3.0, round_nearest(-2.5) == -3.0.
    """
    return round_half_away_from_zero(x, 0)


def exponential(x: float) -> float:
    """
    Экспонента e ** x.

    Защиты от переполнения нет: большие x дают inf, как в IEEE-754.
    """
    try:
        return math.exp(to_float(x))
    except OverflowError:
        return math.inf


def logarithm(x: float) -> Result:
    """
    Натуральный логарифм.

    Args:
        x: Аргумент

    Returns:
        ln(x) для x > 0, иначе UNDEFINED (ноль и отрицательные
        не различаются; NaN тоже UNDEFINED)
    """
    if x > 0:
        return math.log(x)
    return UNDEFINED


def square_root(x: float) -> float:
    """
    Квадратный корень из |x|.

    Отрицательный вход отражается в положительную область:
    square_root(-4) == square_root(4) == 2.0.
    """
    return math.sqrt(to_float(abs(x)))


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sine(angle: float, precision: Optional[int] = DEFAULT_PRECISION) -> float:
    """
    Синус угла в радианах.

    Args:
        angle: Угол (радианы)
        precision: Число десятичных знаков (default: 10, None: без округления)

    Returns:
        sin(angle); NaN для бесконечного угла
    """
    angle = to_float(angle)
    if not is_valid_float(angle):
        return math.nan
    return apply_precision(math.sin(angle), precision)


def cosine(angle: float, precision: Optional[int] = DEFAULT_PRECISION) -> float:
    """
    Косинус угла в радианах.

    Args:
        angle: Угол (радианы)
        precision: Число десятичных знаков (default: 10, None: без округления)

    Returns:
        cos(angle); NaN для бесконечного угла
    """
    angle = to_float(angle)
    if not is_valid_float(angle):
        return math.nan
    return apply_precision(math.cos(angle), precision)


def tangent(angle: float, precision: Optional[int] = DEFAULT_PRECISION) -> Result:
    """
    Тангенс угла в радианах с детекцией полюса.

    Угол нормализуется по модулю pi (неотрицательный остаток). Если
    нормализованный угол отличается от pi/2 меньше чем на TANGENT_POLE_EPS,
    возвращается UNDEFINED независимо от precision.

    Детекция приближённая: угол чуть дальше допуска от полюса даёт очень
    большое конечное число, а не UNDEFINED.

    Args:
        angle: Угол (радианы)
        precision: Число десятичных знаков (default: 10, None: без округления)

    Returns:
        tan(angle), UNDEFINED в полюсе, NaN для бесконечного угла

    Examples:
        >>> tangent(math.pi / 4)
        1.0
        >>> tangent(3 * math.pi / 2)
        UNDEFINED
    """
    angle = to_float(angle)
    if not is_valid_float(angle):
        return math.nan

    normalized = angle % math.pi
    if abs(normalized - math.pi / 2) < TANGENT_POLE_EPS:
        return UNDEFINED

    return apply_precision(math.tan(angle), precision)


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================
# Обычные IEEE сравнения без epsilon: 0.1 + 0.2 != 0.3


def is_greater_than(a: float, b: float) -> bool:
    return a > b


def is_less_than(a: float, b: float) -> bool:
    return a < b


def is_equal(a: float, b: float) -> bool:
    return a == b


def is_not_equal(a: float, b: float) -> bool:
    return a != b


def is_greater_or_equal(a: float, b: float) -> bool:
    return a >= b


def is_less_or_equal(a: float, b: float) -> bool:
    return a <= b


# =============================================================================
# ПОБИТОВЫЕ ОПЕРАЦИИ
# =============================================================================
# Python int: two's complement семантика без ограничения разрядности


def bitwise_and(a: int, b: int) -> int:
    return a & b


def bitwise_or(a: int, b: int) -> int:
    return a | b


def bitwise_xor(a: int, b: int) -> int:
    return a ^ b


def bitwise_not(a: int) -> int:
    """~a == -a - 1"""
    return ~a


def left_shift(a: int, shift: int = 1) -> int:
    """
    Сдвиг влево на shift бит.

    Определён для shift >= 0; отрицательный shift даёт ValueError Python.
    """
    return a << shift


def right_shift(a: int, shift: int = 1) -> int:
    """
    Арифметический сдвиг вправо на shift бит (знак сохраняется).

    Определён для shift >= 0; отрицательный shift даёт ValueError Python.
    """
    return a >> shift
