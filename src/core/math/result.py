"""
Result: tagged результат скалярной операции

Результат операции, у которой возможен математически неопределённый исход
(деление на ноль, логарифм неположительного числа, тангенс в полюсе):

    Result = float | Undefined

Undefined не является ошибкой: это ожидаемый вариант результата, который
вызывающий код обязан проверить перед численным использованием.

Undefined.UNDEFINED сравнивается равным строке "undefined" и сериализуется
в неё (JSON, pydantic model_dump(mode="json")).
"""

from enum import Enum
from typing import Final, Union


class Undefined(str, Enum):
    """
    Маркер математически неопределённого результата.

    Единственный член: UNDEFINED. Отличим от любого числа через
    isinstance(result, Undefined).
    """

    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = Undefined.UNDEFINED

Result = Union[float, Undefined]


def is_undefined(result: Result) -> bool:
    """True если результат является маркером UNDEFINED"""
    return isinstance(result, Undefined)


def is_defined(result: Result) -> bool:
    """True если результат числовой"""
    return not isinstance(result, Undefined)


def value_or(result: Result, fallback: float) -> float:
    """
    Числовое значение результата или fallback для UNDEFINED.

    Args:
        result: Результат операции
        fallback: Значение, возвращаемое вместо UNDEFINED

    Returns:
        result если он числовой, иначе fallback

    Examples:
        >>> value_or(divide(6, 3), 0.0)
        2.0
        >>> value_or(divide(6, 0), 0.0)
        0.0
    """
    if isinstance(result, Undefined):
        return fallback
    return result
