"""
Neighbors — поиск соседей Фарея

Перебор кандидатов value ± 1/(i * denominator) для i = 1 .. range-1 и
отбор тех, что удовлетворяют |a*d - b*c| = 1. Диапазон конфигурации не
проверяется.
"""

import math
from fractions import Fraction
from typing import Any, Optional

from fraction_tree.core.domain.node import Node
from fraction_tree.core.math.mediant import are_neighbors


def decimal_power(number: int) -> int:
    """
    Десятичный порядок числа: floor(log10(|number|)); для 0 — 0.

    Examples:
        >>> decimal_power(1234)
        3
        >>> decimal_power(3)
        0
    """
    if number == 0:
        return 0
    return math.floor(math.log10(abs(number)))


def default_search_range(node: Node) -> int:
    """Диапазон перебора по умолчанию: 10 ** (decimal_power(numerator) + 2)."""
    return 10 ** (decimal_power(node.numerator) + 2)


def plus_minus(value: Fraction, diff: Fraction) -> tuple[Fraction, Fraction]:
    return (value - diff, value + diff)


def neighbors_of(node: Any, search_range: Optional[int] = None) -> list[Node]:
    """
    Соседи Фарея узла в порядке перебора (не по значению).

    Args:
        node: Node либо точное значение
        search_range: Граница перебора гармонического ряда; по умолчанию
            по числителю узла в том виде, как он передан (12/8 → 1000),
            сами кандидаты строятся от сокращённого значения

    Returns:
        Найденные соседи; [] для бесконечности (нет конечной точки отсчёта)

    Examples:
        >>> neighbors_of(Node(3, 2), 10)
        [(1/1), (2/1), (4/3), (5/3), (7/5), (8/5), (10/7), (11/7), (13/9), (14/9)]
    """
    origin = Node.from_value(node)
    if origin.is_infinite:
        return []

    if search_range is None:
        search_range = default_search_range(origin)

    ratio = origin.value
    reduced = Node(ratio.numerator, ratio.denominator)

    found: list[Node] = []
    for i in range(1, search_range):
        for probe in plus_minus(ratio, Fraction(1, i * ratio.denominator)):
            if probe < 0:
                continue
            if are_neighbors(reduced, probe):
                found.append(Node(probe.numerator, probe.denominator))
    return found
