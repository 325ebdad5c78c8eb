"""
Enumeration — ограниченное перечисление узлов

- sequence: все узлы сегмента до заданной глубины, по возрастанию
  (2**depth + 1 узлов, включая концы сегмента)
- descendants_of: sequence между двумя родителями-соседями
- descendancy_from: потомки родителей заданного значения
- tree: строки дерева по глубине
- numeric_sequence: диатомическая последовательность Штерна (бесконечная)

sequence строится итеративным удвоением вместо рекурсии
left + mid + right: порядок тот же, глубина стека не растёт.
"""

from collections import deque
from typing import Any, Iterator, Optional, Sequence

from fraction_tree.core.domain.node import Node
from fraction_tree.core.domain.tree_config import TreeConfig
from fraction_tree.core.math.mediant import are_neighbors
from fraction_tree.navigation.search import parents_of


def sequence(depth: int, segment: Sequence[Any]) -> list[Node]:
    """
    Узлы сегмента до глубины depth включительно.

    Args:
        depth: Число итераций бисекции (0 — только концы сегмента)
        segment: Пара (first, last) — Node либо точные значения

    Returns:
        [first, ..., last] — 2**depth + 1 узлов

    Examples:
        >>> sequence(3, (Node(0, 1), Node(1, 0)))
        [(0/1), (1/3), (1/2), (2/3), (1/1), (3/2), (2/1), (3/1), (1/0)]
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    first, last = segment
    nodes = [Node.from_value(first), Node.from_value(last)]

    for _ in range(depth):
        refined = [nodes[0]]
        for left, right in zip(nodes, nodes[1:]):
            refined.append(left + right)
            refined.append(right)
        nodes = refined

    return nodes


def descendants_of(parent1: Any, parent2: Any, depth: int, strict: bool = True) -> list[Node]:
    """
    Потомки пары родителей до глубины depth.

    Returns:
        sequence(depth, (parent1, parent2)); [] если strict и родители
        не являются соседями Фарея

    Examples:
        >>> descendants_of(Node(1, 1), Node(4, 3), 3)
        [(1/1), (7/6), (6/5), (11/9), (5/4), (14/11), (9/7), (13/10), (4/3)]
        >>> descendants_of(Node(1, 1), Node(7, 4), 3)
        []
    """
    if strict and not are_neighbors(parent1, parent2):
        return []
    return sequence(depth, (parent1, parent2))


def descendancy_from(config: TreeConfig, target: Any, depth: int) -> list[Node]:
    """
    Потомки родителей target (target — их первая медианта).

    Returns:
        descendants_of(*parents_of(target), depth); [] для граничного узла
    """
    parents = parents_of(config, target)
    if parents is None:
        return []
    return descendants_of(parents[0], parents[1], depth)


def tree(depth: int, segment: Sequence[Any]) -> list[list[Node]]:
    """
    Дерево по строкам.

    Строка 0 — концы сегмента; каждая следующая — медианты соседних пар
    отсортированного объединения всех предыдущих строк (ровно новые узлы
    этой глубины).

    Returns:
        depth строк размеров 2, 1, 2, 4, ..., 2**(depth-2)

    Examples:
        >>> tree(4, (Node(0, 1), Node(1, 0)))
        [[(0/1), (1/0)], [(1/1)], [(1/2), (2/1)], [(1/3), (2/3), (3/2), (3/1)]]
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    if depth == 0:
        return []

    first, last = segment
    rows = [[Node.from_value(first), Node.from_value(last)]]

    for _ in range(2, depth + 1):
        figure_from = sorted(node for row in rows for node in row)
        rows.append([left + right for left, right in zip(figure_from, figure_from[1:])])

    return rows


def numeric_sequence() -> Iterator[int]:
    """
    Диатомическая последовательность Штерна: 1, 1, 2, 1, 3, 2, 3, 1, ...

    Рекуррентность: seed [1, 1]; на шаге i выдаётся a[i], затем в хвост
    добавляются a[i] + a[i+1] и a[i+1]. Каждый вызов — новый независимый
    итератор.

    Examples:
        >>> import itertools
        >>> list(itertools.islice(numeric_sequence(), 12))
        [1, 1, 2, 1, 3, 2, 3, 1, 4, 3, 5, 2]
    """
    pending = deque([1, 1])
    while True:
        current = pending.popleft()
        yield current
        following = pending[0]
        pending.append(current + following)
        pending.append(following)
