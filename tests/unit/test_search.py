"""
Тесты для Search — бинарный поиск в дереве медиант

Проверяемые свойства:
1. path_to возвращает полную цепочку [left, right, m1, ..., target]
2. Последние два узла пути восстанавливают родителей (difference)
3. Граничный target → [граница], parents_of → None
4. Targeted-операции валидируют диапазон (RangeViolation)
5. Float отвергается (TypeError)
"""

import math
from fractions import Fraction

import pytest

from fraction_tree.core.domain.node import Node
from fraction_tree.core.domain.tree_config import TreeConfig
from fraction_tree.core.errors import RangeViolation
from fraction_tree.navigation.search import common_ancestors, parents_of, path_to


def pairs(nodes):
    return [node.as_pair() for node in nodes]


@pytest.fixture
def stern_brocot():
    return TreeConfig.stern_brocot()


# =============================================================================
# ТЕСТЫ: path_to
# =============================================================================


class TestPathTo:
    """Тесты path_to."""

    def test_path_to_11_10(self, stern_brocot):
        assert pairs(path_to(stern_brocot, Fraction(11, 10))) == [
            (0, 1), (1, 0), (1, 1), (2, 1), (3, 2), (4, 3), (5, 4),
            (6, 5), (7, 6), (8, 7), (9, 8), (10, 9), (11, 10),
        ]

    def test_path_to_7_4(self, stern_brocot):
        assert pairs(path_to(stern_brocot, Fraction(7, 4))) == [
            (0, 1), (1, 0), (1, 1), (2, 1), (3, 2), (5, 3), (7, 4),
        ]

    def test_bracket_only(self, stern_brocot):
        """collect_all=False → [low, high]."""
        assert pairs(path_to(stern_brocot, Fraction(15, 13), collect_all=False)) == [(8, 7), (7, 6)]

    def test_unreduced_target(self, stern_brocot):
        """Node(12, 8) ищется по значению 3/2."""
        assert path_to(stern_brocot, Node(12, 8))[-1].as_pair() == (3, 2)

    def test_boundary_targets(self, stern_brocot):
        """Граница → [граница]."""
        assert pairs(path_to(stern_brocot, 0)) == [(0, 1)]
        assert pairs(path_to(stern_brocot, math.inf)) == [(1, 0)]
        assert pairs(path_to(TreeConfig.farey(), 1)) == [(1, 1)]

    def test_farey_path(self):
        assert pairs(path_to(TreeConfig.farey(), Fraction(2, 5))) == [
            (0, 1), (1, 1), (1, 2), (1, 3), (2, 5),
        ]

    def test_custom_config_path(self):
        config = TreeConfig.custom(Fraction(1, 2), 1)
        assert pairs(path_to(config, Fraction(3, 5))) == [(1, 2), (1, 1), (2, 3), (3, 5)]

    def test_out_of_range(self):
        with pytest.raises(RangeViolation):
            path_to(TreeConfig.farey(), 2)

        with pytest.raises(RangeViolation):
            path_to(TreeConfig.octave_reduced(), Fraction(1, 2))

    def test_float_rejected(self, stern_brocot):
        """Float неточен: для приближений — quotient_walk."""
        with pytest.raises(TypeError):
            path_to(stern_brocot, 1.5)

    def test_limit_truncates(self, stern_brocot):
        """limit шагов → частичный путь."""
        assert pairs(path_to(stern_brocot, Fraction(11, 10), limit=3)) == [
            (0, 1), (1, 0), (1, 1), (2, 1), (3, 2),
        ]
        assert pairs(path_to(stern_brocot, Fraction(11, 10), limit=0)) == [(0, 1), (1, 0)]

    def test_negative_limit_rejected(self, stern_brocot):
        with pytest.raises(ValueError, match="limit"):
            path_to(stern_brocot, Fraction(11, 10), limit=-1)


# =============================================================================
# ТЕСТЫ: parents_of
# =============================================================================


class TestParentsOf:
    """Тесты parents_of."""

    def test_parents_of_15_13(self, stern_brocot):
        low, high = parents_of(stern_brocot, Fraction(15, 13))
        assert (low.as_pair(), high.as_pair()) == ((8, 7), (7, 6))

    def test_parents_of_root(self, stern_brocot):
        low, high = parents_of(stern_brocot, 1)
        assert (low.as_pair(), high.as_pair()) == ((0, 1), (1, 0))

    def test_parents_of_boundary(self, stern_brocot):
        """У границы нет родителей внутри конфигурации."""
        assert parents_of(stern_brocot, 0) is None
        assert parents_of(stern_brocot, math.inf) is None

    def test_farey_parents(self):
        low, high = parents_of(TreeConfig.farey(), Fraction(2, 5))
        assert (low.as_pair(), high.as_pair()) == ((1, 3), (1, 2))

    @pytest.mark.parametrize(
        "target",
        [Fraction(11, 10), Fraction(4, 3), Fraction(7, 4), Fraction(15, 13),
         Fraction(355, 113), Fraction(1, 2), 1, 5],
    )
    def test_last_two_path_nodes_reproduce_parents(self, stern_brocot, target):
        """sorted([p[-2], p[-1] - p[-2]]) == parents_of(target)."""
        path = path_to(stern_brocot, target)
        recovered = sorted([path[-2], path[-1] - path[-2]])
        assert recovered == list(parents_of(stern_brocot, target))

    def test_parents_are_neighbors_of_target(self, stern_brocot):
        from fraction_tree.core.math.mediant import are_neighbors

        target = Fraction(355, 113)
        low, high = parents_of(stern_brocot, target)
        assert are_neighbors(low, high)
        assert low + high == target


# =============================================================================
# ТЕСТЫ: common_ancestors
# =============================================================================


class TestCommonAncestors:
    """Тесты common_ancestors."""

    def test_shared_prefix(self, stern_brocot):
        assert pairs(common_ancestors(stern_brocot, Fraction(4, 3), Fraction(7, 4))) == [
            (0, 1), (1, 0), (1, 1), (2, 1), (3, 2),
        ]

    def test_diverging_at_root(self, stern_brocot):
        assert pairs(common_ancestors(stern_brocot, Fraction(1, 3), 3)) == [(0, 1), (1, 0), (1, 1)]

    def test_same_target(self, stern_brocot):
        target = Fraction(15, 13)
        assert common_ancestors(stern_brocot, target, target) == path_to(stern_brocot, target)

    def test_out_of_range(self):
        with pytest.raises(RangeViolation):
            common_ancestors(TreeConfig.farey(), Fraction(1, 2), 3)
