"""
Random Sources: secure & fast генераторы случайных значений

Две именованные возможности за одним интерфейсом RandomProvider:
- SecureRandomProvider: криптостойкий источник (secrets / энтропия ОС)
- FastRandomProvider: быстрый некриптографический Mersenne Twister

Генераторы не имеют собственного состояния: провайдер по умолчанию
создаётся на каждый вызов, состояние источника принадлежит рантайму.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. random_int / mt_random_int возвращают int в [low, high] включительно
2. random_float возвращает float в [0, 1)
3. Недоступная энтропия → EntropySourceError, локально не обрабатывается
"""

import random
import secrets
from typing import Optional, Protocol, runtime_checkable

from src.core.math.numerical_safeguards import validate_bounds

# =============================================================================
# EXCEPTIONS
# =============================================================================


class EntropySourceError(RuntimeError):
    """
    Криптостойкий источник энтропии недоступен.

    Единственный аномальный отказ библиотеки. Пробрасывается вызывающему
    коду без восстановления; исходная ошибка ОС доступна в __cause__.
    """

    pass


# =============================================================================
# PROVIDERS
# =============================================================================


@runtime_checkable
class RandomProvider(Protocol):
    """Интерфейс источника случайных значений"""

    def randint(self, low: int, high: int) -> int:
        """Целое в [low, high] включительно"""
        ...

    def random(self) -> float:
        """Float в [0, 1)"""
        ...


class SecureRandomProvider:
    """
    Криптостойкий провайдер на базе secrets (os.urandom).

    Ошибки источника энтропии (OSError, NotImplementedError) оборачиваются
    в EntropySourceError.
    """

    def randint(self, low: int, high: int) -> int:
        try:
            return low + secrets.randbelow(high - low + 1)
        except (OSError, NotImplementedError) as e:
            raise EntropySourceError(
                f"Secure entropy source unavailable: {e}"
            ) from e

    def random(self) -> float:
        try:
            # 53 случайных бита → равномерная сетка в [0, 1)
            return secrets.randbits(53) / (1 << 53)
        except (OSError, NotImplementedError) as e:
            raise EntropySourceError(
                f"Secure entropy source unavailable: {e}"
            ) from e


class FastRandomProvider:
    """
    Быстрый некриптографический провайдер (Mersenne Twister).

    Без аргумента использует глобальный генератор модуля random
    (состояние принадлежит рантайму). Для воспроизводимости можно
    передать собственный random.Random(seed).
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng

    def randint(self, low: int, high: int) -> int:
        if self._rng is None:
            return random.randint(low, high)
        return self._rng.randint(low, high)

    def random(self) -> float:
        if self._rng is None:
            return random.random()
        return self._rng.random()


# =============================================================================
# GENERATORS
# =============================================================================


def random_int(
    low: int,
    high: int,
    provider: Optional[RandomProvider] = None,
) -> int:
    """
    Случайное целое в [low, high] из криптостойкого источника.

    Args:
        low: Нижняя граница (включительно)
        high: Верхняя граница (включительно)
        provider: Источник (default: SecureRandomProvider)

    Returns:
        Целое в [low, high]

    Raises:
        ValueError: Если границы не int или low > high
        EntropySourceError: Если источник энтропии недоступен
    """
    validate_bounds(low, high)

    if provider is None:
        provider = SecureRandomProvider()

    return provider.randint(low, high)


def mt_random_int(
    low: int,
    high: int,
    provider: Optional[RandomProvider] = None,
) -> int:
    """
    Случайное целое в [low, high] из быстрого генератора.

    Args:
        low: Нижняя граница (включительно)
        high: Верхняя граница (включительно)
        provider: Источник (default: FastRandomProvider)

    Returns:
        Целое в [low, high]

    Raises:
        ValueError: Если границы не int или low > high
    """
    validate_bounds(low, high)

    if provider is None:
        provider = FastRandomProvider()

    return provider.randint(low, high)


def random_float(provider: Optional[RandomProvider] = None) -> float:
    """
    Равномерный float в [0, 1).

    Args:
        provider: Источник (default: FastRandomProvider)
    """
    if provider is None:
        provider = FastRandomProvider()

    return provider.random()
