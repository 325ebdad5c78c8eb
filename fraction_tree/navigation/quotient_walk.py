"""
Quotient Walk — спуск по дереву, управляемый неполными частными

Вместо пошагового бинарного поиска спуск идёт сериями медиант: каждое
неполное частное q цепной дроби target задаёт q шагов в одном
направлении.

Алгоритм:
    held, moving = segment[-2], segment[-1]
    для каждого q (целая часть отброшена):
        q раз: append(held + moving); moving = последний узел
        held = предпоследний узел
    стоп сразу, как только получен точный узел target

Это единственный путь к иррациональным значениям с гарантированно
конечным результатом: длина спуска ограничена числом частных (limit).
Если limit меньше числа частных, нужных для точного попадания, walk
возвращает частичный путь — это штатное усечение, а не ошибка.
"""

import math
from fractions import Fraction
from typing import Any, Optional, Sequence, Union

from fraction_tree.core.domain.node import Node
from fraction_tree.core.domain.tree_config import TreeConfig
from fraction_tree.core.exact import INFINITE_VALUE, to_exact
from fraction_tree.core.math.continued_fraction import (
    DEFAULT_QUOTIENT_LIMIT,
    continued_fraction_quotients,
)


def exact_target(target: Any) -> Fraction:
    """Точное значение target (float/mpf — по точному двоичному значению)."""
    value = target.value if isinstance(target, Node) else to_exact(target, allow_inexact=True)
    if value == INFINITE_VALUE:
        raise ValueError("Quotient walk toward infinity is undefined")
    return value


def floor_segment(value: Fraction) -> tuple[Node, Node]:
    """
    Сегмент (floor/1, (floor+1)/1) вокруг значения.

    Examples:
        >>> floor_segment(Fraction(15, 13))
        ((1/1), (2/1))
    """
    floor = math.floor(value)
    return (Node(floor, 1), Node(floor + 1, 1))


def resolve_segment(segment: Union[TreeConfig, Sequence[Any]]) -> list[Node]:
    """Стартовые узлы walk: границы TreeConfig либо явная последовательность."""
    if isinstance(segment, TreeConfig):
        return [segment.left, segment.right]

    nodes = [Node.from_value(node) for node in segment]
    if len(nodes) < 2:
        raise ValueError(f"Quotient walk needs at least two starting nodes, got {len(nodes)}")
    return nodes


def quotient_walk(
    target: Any,
    limit: int = DEFAULT_QUOTIENT_LIMIT,
    segment: Optional[Union[TreeConfig, Sequence[Any]]] = None,
    quotients: Optional[Sequence[int]] = None,
) -> list[Node]:
    """
    Узлы, ведущие к target сериями по неполным частным.

    Args:
        target: Node, int, Fraction, float или mpmath.mpf
        limit: Число неполных частных (включая целую часть)
        segment: Стартовый сегмент; по умолчанию floor_segment(target)
        quotients: Готовая последовательность частных [a0; a1, ...] от
            внешнего источника (по умолчанию continued_fraction_quotients)

    Returns:
        Стартовые узлы сегмента и все порождённые медианты

    Examples:
        >>> quotient_walk(Fraction(15, 13))
        [(1/1), (2/1), (3/2), (4/3), (5/4), (6/5), (7/6), (8/7), (15/13)]
    """
    value = exact_target(target)
    if quotients is None:
        quotients = continued_fraction_quotients(value, limit)

    nodes = resolve_segment(floor_segment(value) if segment is None else segment)
    goal = Node(value.numerator, value.denominator)

    held, moving = nodes[-2], nodes[-1]
    for quotient in list(quotients)[1:]:
        for _ in range(quotient):
            nodes.append(held + moving)
            if nodes[-1] == goal:
                return nodes
            moving = nodes[-1]
        held = nodes[-2]

    return nodes
