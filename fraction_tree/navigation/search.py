"""
Search — бинарный поиск узла в дереве медиант

Аналог бинарного поиска над неограниченной структурой:
    low, high = left, right
    m = low + high
    m < target → low = m
    m > target → high = m
    m == target → стоп

Для конечных рациональных target цикл завершается за конечное число
шагов (глубина дроби в дереве). Иррациональные входы здесь не
принимаются (float → TypeError) — для них используется quotient_walk.

Все функции модуля — targeted-операции: первым делом валидируют target
против конфигурации (RangeViolation).
"""

from typing import Any, Optional

from fraction_tree.core.domain.node import Node
from fraction_tree.core.domain.tree_config import TreeConfig, validate_in_tree


def path_to(
    config: TreeConfig,
    target: Any,
    collect_all: bool = True,
    limit: Optional[int] = None,
) -> list[Node]:
    """
    Путь от граничных узлов конфигурации к target.

    Args:
        config: Активная конфигурация
        target: Точное значение (Node, int, Fraction, math.inf)
        collect_all: True — вся цепочка [left, right, m1, ..., target];
            False — только финальная пара [low, high] (непосредственные родители)
        limit: Максимум шагов медианты (None — до точного попадания)

    Returns:
        Список узлов. Если target совпадает с границей — [граница].
        При исчерпании limit — частичный результат (последний узел != target).

    Raises:
        RangeViolation: target вне конфигурации
        TypeError: float/неточный вход

    Examples:
        >>> from fractions import Fraction
        >>> path_to(TreeConfig.stern_brocot(), Fraction(7, 4))
        [(0/1), (1/0), (1/1), (2/1), (3/2), (5/3), (7/4)]
        >>> path_to(TreeConfig.stern_brocot(), Fraction(15, 13), collect_all=False)
        [(8/7), (7/6)]
    """
    validate_in_tree(config, target)
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    goal = Node.from_value(target)
    low, high = config.left, config.right

    if goal == low:
        return [low]
    if goal == high:
        return [high]

    visited = [low, high]
    steps = 0
    while limit is None or steps < limit:
        mediant = low + high
        visited.append(mediant)
        steps += 1

        if mediant < goal:
            low = mediant
        elif mediant > goal:
            high = mediant
        else:
            break

    if collect_all:
        return visited
    return [low, high]


def parents_of(config: TreeConfig, target: Any) -> Optional[tuple[Node, Node]]:
    """
    Непосредственные родители target: (low, high), low < target < high.

    Returns:
        Пара родителей, либо None для граничного узла (у границы нет
        родителей внутри конфигурации)

    Examples:
        >>> from fractions import Fraction
        >>> parents_of(TreeConfig.stern_brocot(), Fraction(15, 13))
        ((8/7), (7/6))
    """
    bracket = path_to(config, target, collect_all=False)
    if len(bracket) == 1:
        return None
    low, high = bracket
    return (low, high)


def common_ancestors(config: TreeConfig, first: Any, second: Any) -> list[Node]:
    """
    Общие предки двух значений: пересечение путей с сохранением порядка
    первого пути, без повторов.

    Examples:
        >>> from fractions import Fraction
        >>> common_ancestors(TreeConfig.stern_brocot(), Fraction(4, 3), Fraction(7, 4))
        [(0/1), (1/0), (1/1), (2/1), (3/2)]
    """
    first_path = path_to(config, first)
    second_path = set(path_to(config, second))

    shared: list[Node] = []
    seen: set[Node] = set()
    for node in first_path:
        if node in second_path and node not in seen:
            shared.append(node)
            seen.add(node)
    return shared
