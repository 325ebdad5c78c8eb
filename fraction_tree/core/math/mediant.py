"""
Mediant Algebra — медианта и отношение соседства Фарея

Базовые операции над парами узлов, без проверок диапазона:
- mediant(a, b): (m+m')/(n+n')
- determinant(a, b): m*n' - n*m'
- are_neighbors(a, b): |m*n' - n*m'| = 1 (унимодулярность)
- difference(a, b): |m-m'|/|n-n'| — восстановление предка по двум узлам пути
- child_of(a, b, strict): медианта только для соседей (иначе None)

Бесконечность всюду трактуется как пара (1, 0).

СВОЙСТВА:
1. Если are_neighbors(a, b), то mediant(a, b) лежит строго между a и b
   и является соседом обоих родителей
2. Медианта соседей всегда несократима
3. Любые два соседних на некоторой глубине узла — соседи Фарея, и наоборот
"""

from typing import Any, Optional

from fraction_tree.core.domain.node import Node


def _as_node(value: Any) -> Node:
    return Node.from_value(value)


def mediant(a: Any, b: Any) -> Node:
    """
    Медианта двух узлов.

    Examples:
        >>> mediant(Node(0, 1), Node(1, 0))
        (1/1)
        >>> mediant(Node(4, 3), Node(3, 2))
        (7/5)
    """
    return _as_node(a) + _as_node(b)


def determinant(a: Any, b: Any) -> int:
    """Знаковый определитель m*n' - n*m' пары узлов."""
    left = _as_node(a)
    right = _as_node(b)
    return left.numerator * right.denominator - left.denominator * right.numerator


def are_neighbors(a: Any, b: Any) -> bool:
    """
    Соседи Фарея: |m*n' - n*m'| = 1.

    Examples:
        >>> are_neighbors(Node(5, 4), Node(4, 3))
        True
        >>> are_neighbors(Node(5, 4), Node(8, 5))
        False
        >>> are_neighbors(Node(2, 1), Node(1, 0))
        True
    """
    return abs(determinant(a, b)) == 1


def difference(a: Any, b: Any) -> Node:
    """
    Разностный комбинатор: Node(|m-m'|, |n-n'|).

    Для двух последних узлов пути восстанавливает второго родителя:
    (11/10) - (10/9) = (1/1).
    """
    return _as_node(a) - _as_node(b)


def child_of(a: Any, b: Any, strict: bool = True) -> Optional[Node]:
    """
    Медиантный потомок пары узлов.

    Args:
        a: Первый родитель
        b: Второй родитель
        strict: Требовать соседства Фарея

    Returns:
        mediant(a, b), либо None если strict и родители не соседи

    Examples:
        >>> from fractions import Fraction
        >>> child_of(Fraction(13, 7), 2)
        (15/8)
        >>> child_of(Fraction(5, 4), Fraction(7, 4)) is None
        True
        >>> child_of(Fraction(5, 4), Fraction(7, 4), strict=False)
        (12/8)
    """
    if strict and not are_neighbors(a, b):
        return None
    return mediant(a, b)
