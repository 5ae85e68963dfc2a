"""
Тесты для модуля Random Sources

Проверяет:
1. Инклюзивные границы целых генераторов
2. Полуоткрытый диапазон [0, 1) float генератора
3. Подстановку провайдеров (secure / fast / собственный)
4. Проброс отказа источника энтропии
5. Валидацию границ
"""

import random

import pytest

from src.core.math import random_sources
from src.core.math.random_sources import (
    EntropySourceError,
    FastRandomProvider,
    RandomProvider,
    SecureRandomProvider,
    mt_random_int,
    random_float,
    random_int,
)

SAMPLES = 1000


class FixedProvider:
    """Детерминированный провайдер: всегда верхняя граница и 0.0"""

    def randint(self, low: int, high: int) -> int:
        return high

    def random(self) -> float:
        return 0.0


# =============================================================================
# ТЕСТЫ ГРАНИЦ
# =============================================================================


class TestRandomInt:
    """Тесты для random_int (secure)"""

    def test_within_inclusive_bounds(self) -> None:
        for _ in range(SAMPLES):
            assert 1 <= random_int(1, 10) <= 10

    def test_returns_int(self) -> None:
        assert isinstance(random_int(1, 10), int)

    def test_degenerate_range(self) -> None:
        assert random_int(5, 5) == 5

    def test_negative_range(self) -> None:
        for _ in range(100):
            assert -10 <= random_int(-10, -5) <= -5

    def test_both_bounds_reachable(self) -> None:
        seen = {random_int(0, 1) for _ in range(200)}
        assert seen == {0, 1}

    def test_inverted_bounds_raise(self) -> None:
        with pytest.raises(ValueError, match="low must be <= high"):
            random_int(10, 1)

    def test_custom_provider(self) -> None:
        assert random_int(1, 10, provider=FixedProvider()) == 10


class TestMtRandomInt:
    """Тесты для mt_random_int (fast)"""

    def test_within_inclusive_bounds(self) -> None:
        for _ in range(SAMPLES):
            assert 1 <= mt_random_int(1, 10) <= 10

    def test_degenerate_range(self) -> None:
        assert mt_random_int(7, 7) == 7

    def test_seeded_provider_reproducible(self) -> None:
        """Один seed → одна последовательность"""
        first = FastRandomProvider(random.Random(42))
        second = FastRandomProvider(random.Random(42))
        assert [mt_random_int(1, 100, first) for _ in range(20)] == [
            mt_random_int(1, 100, second) for _ in range(20)
        ]

    def test_inverted_bounds_raise(self) -> None:
        with pytest.raises(ValueError, match="low must be <= high"):
            mt_random_int(10, 1)

    def test_non_int_bounds_raise(self) -> None:
        with pytest.raises(ValueError, match="must be an int"):
            mt_random_int(1.5, 10)


class TestRandomFloat:
    """Тесты для random_float"""

    def test_half_open_range(self) -> None:
        for _ in range(SAMPLES):
            value = random_float()
            assert 0.0 <= value < 1.0

    def test_secure_provider_half_open_range(self) -> None:
        provider = SecureRandomProvider()
        for _ in range(SAMPLES):
            assert 0.0 <= random_float(provider) < 1.0

    def test_custom_provider(self) -> None:
        assert random_float(FixedProvider()) == 0.0


# =============================================================================
# ТЕСТЫ ПРОВАЙДЕРОВ
# =============================================================================


class TestProviders:
    """Тесты провайдеров"""

    def test_providers_satisfy_protocol(self) -> None:
        assert isinstance(SecureRandomProvider(), RandomProvider)
        assert isinstance(FastRandomProvider(), RandomProvider)
        assert isinstance(FixedProvider(), RandomProvider)

    def test_fast_provider_without_rng_uses_module_generator(self) -> None:
        random.seed(7)
        expected = random.randint(1, 1000)
        random.seed(7)
        assert FastRandomProvider().randint(1, 1000) == expected


class TestEntropyFailure:
    """Отказ криптостойкого источника пробрасывается"""

    def test_os_error_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken_randbelow(n: int) -> int:
            raise OSError("getrandom() failed")

        monkeypatch.setattr(random_sources.secrets, "randbelow", broken_randbelow)

        with pytest.raises(EntropySourceError, match="entropy source unavailable") as exc_info:
            random_int(1, 10)

        assert isinstance(exc_info.value.__cause__, OSError)

    def test_not_implemented_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken_randbits(k: int) -> int:
            raise NotImplementedError("no urandom")

        monkeypatch.setattr(random_sources.secrets, "randbits", broken_randbits)

        with pytest.raises(EntropySourceError):
            random_float(SecureRandomProvider())

    def test_fast_generator_unaffected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken_randbelow(n: int) -> int:
            raise OSError("getrandom() failed")

        monkeypatch.setattr(random_sources.secrets, "randbelow", broken_randbelow)

        assert 1 <= mt_random_int(1, 10) <= 10
