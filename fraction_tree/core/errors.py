"""
Errors — иерархия исключений fraction_tree

Все исключения наследуются от FractionTreeError и НЕ наследуются от
ValueError: pydantic-валидаторы пропускают их наружу без обёртки в
ValidationError.

Таксономия:
- RangeViolation — target вне границ активной TreeConfig
- InvalidConfiguration — граничная пара не упорядочена строго или неизвестный тег

Отсутствие соседства (NotNeighbors) исключением НЕ является:
child_of/descendants_of сигнализируют его через None / [].
"""

from typing import Any, Optional


class FractionTreeError(Exception):
    """Базовое исключение пакета."""

    pass


class RangeViolation(FractionTreeError):
    """
    Target вне диапазона [left.value, right.value] активной конфигурации.

    Поднимается только targeted-операциями навигации (path_to, parents_of,
    common_ancestors, quotient_walk, node). Примитивы (mediant, neighbors,
    encode/decode) диапазон не проверяют.

    Attributes:
        value: Проверяемое значение
        left: Левая граница (Node)
        right: Правая граница (Node)
    """

    def __init__(self, value: Any, left: Any, right: Any):
        self.value = value
        self.left = left
        self.right = right
        super().__init__(f"{value} not in range of [{left}, {right}]")


class InvalidConfiguration(FractionTreeError):
    """
    Некорректная конфигурация дерева.

    Возникает при создании TreeConfig:
    - left.value >= right.value
    - неизвестный тег конфигурации (без тихого fallback)
    """

    def __init__(self, message: str, left: Optional[Any] = None, right: Optional[Any] = None):
        self.left = left
        self.right = right
        super().__init__(message)
