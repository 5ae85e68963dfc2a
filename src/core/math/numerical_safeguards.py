"""
Numerical Safeguards: precision & validation primitives

Модуль задаёт единую политику точности и граничных случаев для всех
скалярных операций:
- Параметры по умолчанию (точность округления, допуск полюса тангенса)
- Округление half-away-from-zero до заданного числа десятичных знаков
- Валидация параметров (precision, границы генераторов)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. precision=None означает отсутствие округления
2. NaN/Inf не округляются и возвращаются как есть
3. Округление идемпотентно: round(round(x, p), p) == round(x, p)
4. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Final, Optional

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Число десятичных знаков для округления результата по умолчанию
# Используется в add, modulus, sine, cosine, tangent
DEFAULT_PRECISION: Final[int] = 10

# Абсолютный допуск детекции полюса тангенса (angle mod pi ≈ pi/2)
# Значение не выводится из машинной точности; менять нельзя, т.к. это
# меняет множество входов, классифицируемых как undefined
TANGENT_POLE_EPS: Final[float] = 1e-8

# Минимальная точность Decimal-контекста для квантования
_DECIMAL_MIN_PREC: Final[int] = 28


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def to_float(value: float) -> float:
    """
    Приведение к float с IEEE-переполнением.

    Целые за пределами диапазона float дают ±inf вместо OverflowError.

    Examples:
        >>> to_float(10 ** 400)
        inf
        >>> to_float(-(10 ** 400))
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def validate_precision(precision: Optional[int]) -> None:
    """
    Валидация параметра precision.

    Args:
        precision: Число десятичных знаков или None

    Raises:
        ValueError: Если precision не int (bool тоже запрещён)
    """
    if precision is None:
        return

    if isinstance(precision, bool) or not isinstance(precision, int):
        raise ValueError(
            f"precision must be an int or None, got {type(precision).__name__}: {precision!r}"
        )


def round_half_away_from_zero(value: float, precision: int = 0) -> float:
    """
    Округление до precision десятичных знаков, половина от нуля.

    Округляется кратчайшее десятичное представление float (repr), а не
    его точное двоичное значение. Поэтому 0.285 → 0.29, хотя двоично
    0.285 чуть меньше 0.285.

    Отрицательный precision округляет до десятков, сотен и т.д.

    Args:
        value: Исходное значение
        precision: Число десятичных знаков (default: 0)

    Returns:
        Округлённое значение (float). NaN/Inf возвращаются без изменений.

    Raises:
        ValueError: Если precision не int

    Examples:
        >>> round_half_away_from_zero(2.5)
        3.0
        >>> round_half_away_from_zero(-2.5)
        -3.0
        >>> round_half_away_from_zero(0.285, 2)
        0.29
        >>> round_half_away_from_zero(125.0, -1)
        130.0
    """
    validate_precision(precision)

    value = to_float(value)
    if not is_valid_float(value):
        return value

    decimal_value = Decimal(repr(value))

    # Уже не больше precision знаков после точки: округлять нечего
    if decimal_value.as_tuple().exponent >= -precision:
        return value

    # Контекст с запасом точности: quantize не должен упираться в prec
    context = Context(
        prec=max(_DECIMAL_MIN_PREC, decimal_value.adjusted() + precision + 2)
    )
    quantum = Decimal(1).scaleb(-precision)
    rounded = decimal_value.quantize(quantum, rounding=ROUND_HALF_UP, context=context)

    return float(rounded)


def apply_precision(value: float, precision: Optional[int]) -> float:
    """
    Применение опциональной точности к результату операции.

    Args:
        value: Результат вычисления
        precision: Число десятичных знаков или None (без округления)

    Returns:
        value как float, округлённый если precision задан
    """
    validate_precision(precision)

    if precision is None:
        return to_float(value)

    return round_half_away_from_zero(value, precision)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_bounds(low: int, high: int) -> None:
    """
    Валидация границ целочисленного генератора [low, high].

    Args:
        low: Нижняя граница (включительно)
        high: Верхняя граница (включительно)

    Raises:
        ValueError: Если границы не int или low > high
    """
    for name, bound in (("low", low), ("high", high)):
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise ValueError(
                f"{name} must be an int, got {type(bound).__name__}: {bound!r}"
            )

    if low > high:
        raise ValueError(f"low must be <= high, got low={low}, high={high}")
