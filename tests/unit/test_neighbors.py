"""
Тесты для Neighbors — поиск соседей Фарея

Проверяемые свойства:
1. Каждый найденный узел — сосед Фарея исходного
2. Порядок результата — порядок перебора (value - d, value + d)
3. Отрицательные кандидаты пропускаются, бесконечность → []
"""

import math
from fractions import Fraction

import pytest

from fraction_tree.core.domain.node import Node
from fraction_tree.core.math.mediant import are_neighbors
from fraction_tree.navigation.neighbors import decimal_power, default_search_range, neighbors_of


def pairs(nodes):
    return [node.as_pair() for node in nodes]


class TestDecimalPower:
    """Тесты decimal_power и default_search_range."""

    @pytest.mark.parametrize("number,power", [(0, 0), (3, 0), (12, 1), (999, 2), (12345, 4)])
    def test_decimal_power(self, number, power):
        assert decimal_power(number) == power

    def test_default_search_range(self):
        assert default_search_range(Node(3, 2)) == 100
        assert default_search_range(Node(15, 13)) == 1000
        assert default_search_range(Node(0, 1)) == 100

    def test_default_search_range_uses_given_numerator(self):
        """12/8 считается по числителю 12, а не по сокращённому 3."""
        assert default_search_range(Node(12, 8)) == 1000
        assert default_search_range(Node(3, 2)) == 100


class TestNeighborsOf:
    """Тесты neighbors_of."""

    def test_neighbors_of_3_2(self):
        assert pairs(neighbors_of(Node(3, 2), 10)) == [
            (1, 1), (2, 1), (4, 3), (5, 3), (7, 5), (8, 5), (10, 7), (11, 7), (13, 9), (14, 9),
        ]

    def test_unreduced_origin(self):
        """Поиск идёт от сокращённой формы."""
        assert neighbors_of(Node(6, 4), 10) == neighbors_of(Fraction(3, 2), 10)

    def test_unreduced_origin_default_range(self):
        """Диапазон по умолчанию для 12/8 шире, чем для 3/2."""
        found = neighbors_of(Node(12, 8))
        assert found == neighbors_of(Node(3, 2), 1000)
        assert len(found) > len(neighbors_of(Node(3, 2)))

    def test_all_results_are_neighbors(self):
        origin = Node(15, 13)
        found = neighbors_of(origin)
        assert found
        for node in found:
            assert are_neighbors(origin, node)

    def test_negative_probes_skipped(self):
        """От нуля — только value + 1/i."""
        assert pairs(neighbors_of(Node(0, 1), 5)) == [(1, 1), (1, 2), (1, 3), (1, 4)]

    def test_infinity_has_no_neighbors(self):
        assert neighbors_of(Node.infinity()) == []
        assert neighbors_of(math.inf, 10) == []

    def test_empty_range(self):
        assert neighbors_of(Node(3, 2), 1) == []
