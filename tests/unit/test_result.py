"""
Тесты для Result (tagged float | Undefined)
"""

import json

from src.core.math.result import (
    UNDEFINED,
    Undefined,
    is_defined,
    is_undefined,
    value_or,
)


class TestUndefinedMarker:
    """Тесты маркера UNDEFINED"""

    def test_single_member(self) -> None:
        """Единственный член перечисления"""
        assert list(Undefined) == [UNDEFINED]

    def test_equals_legacy_string(self) -> None:
        """Сравнивается равным строке 'undefined'"""
        assert UNDEFINED == "undefined"
        assert UNDEFINED.value == "undefined"

    def test_distinct_from_numbers(self) -> None:
        """Не равен ни одному числу"""
        assert UNDEFINED != 0
        assert UNDEFINED != 0.0
        assert not isinstance(UNDEFINED, float)

    def test_json_serialization(self) -> None:
        """Сериализуется в 'undefined'"""
        assert json.dumps({"division": UNDEFINED}) == '{"division": "undefined"}'

    def test_repr(self) -> None:
        assert repr(UNDEFINED) == "UNDEFINED"


class TestPredicates:
    """Тесты для is_undefined / is_defined"""

    def test_undefined(self) -> None:
        assert is_undefined(UNDEFINED)
        assert not is_defined(UNDEFINED)

    def test_numbers_are_defined(self) -> None:
        for value in [0.0, -1.0, 1e300, float("inf")]:
            assert is_defined(value)
            assert not is_undefined(value)

    def test_plain_string_is_not_undefined(self) -> None:
        """Строка 'undefined' не является вариантом Undefined"""
        assert not is_undefined("undefined")


class TestValueOr:
    """Тесты для value_or"""

    def test_number_returned(self) -> None:
        assert value_or(2.0, 0.0) == 2.0

    def test_fallback_for_undefined(self) -> None:
        assert value_or(UNDEFINED, 0.0) == 0.0
        assert value_or(UNDEFINED, -1.0) == -1.0
