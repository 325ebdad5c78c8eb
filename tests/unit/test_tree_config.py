"""
Тесты для TreeConfig — граничная конфигурация поддерева

Проверяемые инварианты:
1. left.value < right.value, иначе InvalidConfiguration
2. Неизвестные теги отвергаются без fallback
3. Диапазон [left.value, right.value] включает границы
4. RangeViolation несёт значение и обе границы
"""

import math
from fractions import Fraction

import pytest
from pydantic import ValidationError

from fraction_tree.core.domain.node import Node
from fraction_tree.core.domain.tree_config import (
    TreeConfig,
    TreeKind,
    in_range,
    resolve_kind,
    validate_in_tree,
)
from fraction_tree.core.errors import FractionTreeError, InvalidConfiguration, RangeViolation


# =============================================================================
# ТЕСТЫ: Стандартные конфигурации
# =============================================================================


class TestStandardConfigs:
    """Тесты стандартных конфигураций."""

    def test_stern_brocot_bounds(self):
        config = TreeConfig.stern_brocot()
        assert config.kind == TreeKind.STERN_BROCOT
        assert [n.as_pair() for n in config.bounds] == [(0, 1), (1, 0)]

    def test_farey_bounds(self):
        assert [n.as_pair() for n in TreeConfig.farey().bounds] == [(0, 1), (1, 1)]

    def test_octave_reduced_bounds(self):
        assert [n.as_pair() for n in TreeConfig.octave_reduced().bounds] == [(1, 1), (2, 1)]

    @pytest.mark.parametrize(
        "tag,kind",
        [
            ("stern_brocot", TreeKind.STERN_BROCOT),
            ("scale", TreeKind.STERN_BROCOT),
            ("keyboard", TreeKind.FAREY),
            ("scale_step", TreeKind.FAREY),
            ("log2", TreeKind.FAREY),
            (" Farey ", TreeKind.FAREY),
            ("octave_reduced", TreeKind.OCTAVE_REDUCED),
            (TreeKind.FAREY, TreeKind.FAREY),
        ],
    )
    def test_resolve_kind(self, tag, kind):
        """Теги и синонимы разрешаются в TreeKind."""
        assert resolve_kind(tag) == kind

    def test_unknown_tag_rejected(self):
        """Неизвестный тег → InvalidConfiguration (без fallback)."""
        with pytest.raises(InvalidConfiguration, match="Unknown tree configuration"):
            TreeConfig.for_kind("chromatic")

        with pytest.raises(InvalidConfiguration):
            resolve_kind(42)

    def test_custom_kind_requires_bounds(self):
        with pytest.raises(InvalidConfiguration, match="explicit bounds"):
            TreeConfig.for_kind(TreeKind.CUSTOM)


class TestCustomConfig:
    """Тесты TreeConfig.custom()."""

    def test_custom_bounds(self):
        config = TreeConfig.custom(Fraction(1, 2), 3)
        assert config.kind == TreeKind.CUSTOM
        assert config.left == Fraction(1, 2)
        assert config.right == 3

    def test_custom_infinite_right_bound(self):
        config = TreeConfig.custom(2, math.inf)
        assert config.right.is_infinite

    def test_unordered_bounds_rejected(self):
        """left >= right → InvalidConfiguration с границами."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            TreeConfig.custom(2, 1)
        assert exc_info.value.left == Node(2, 1)
        assert exc_info.value.right == Node(1, 1)

    def test_equal_bounds_rejected(self):
        """Равные по значению границы (2/2 и 1/1) не образуют диапазон."""
        with pytest.raises(InvalidConfiguration):
            TreeConfig.custom(Node(2, 2), Node(1, 1))

    def test_errors_share_base_class(self):
        assert issubclass(InvalidConfiguration, FractionTreeError)
        assert not issubclass(InvalidConfiguration, ValueError)

    def test_immutability(self):
        config = TreeConfig.farey()
        with pytest.raises(ValidationError):
            config.left = Node(1, 2)

    def test_json_dump(self):
        """model_dump(mode='json') — основа контракта tree_config."""
        assert TreeConfig.farey().model_dump(mode="json") == {
            "kind": "farey",
            "left": {"numerator": 0, "denominator": 1},
            "right": {"numerator": 1, "denominator": 1},
        }


# =============================================================================
# ТЕСТЫ: Диапазон
# =============================================================================


class TestRangeValidation:
    """Тесты in_range и validate_in_tree."""

    def test_bounds_included(self):
        config = TreeConfig.farey()
        assert in_range(config, 0)
        assert in_range(config, 1)
        assert in_range(config, Fraction(1, 2))

    def test_outside_range(self):
        config = TreeConfig.farey()
        assert not in_range(config, 2)
        assert not in_range(config, math.inf)

    def test_stern_brocot_accepts_infinity(self):
        assert in_range(TreeConfig.stern_brocot(), math.inf)
        assert in_range(TreeConfig.stern_brocot(), Node(10**12, 1))

    def test_validate_raises_range_violation(self):
        """RangeViolation несёт value, left, right."""
        config = TreeConfig.octave_reduced()
        with pytest.raises(RangeViolation, match=r"not in range of \[\(1/1\), \(2/1\)\]") as exc_info:
            validate_in_tree(config, Fraction(5, 2))

        error = exc_info.value
        assert error.value == Fraction(5, 2)
        assert error.left == Node(1, 1)
        assert error.right == Node(2, 1)

    def test_validate_passes_in_range(self):
        validate_in_tree(TreeConfig.octave_reduced(), Fraction(3, 2))

    def test_validate_rejects_float(self):
        """Float неточен даже при проверке диапазона."""
        with pytest.raises(TypeError):
            validate_in_tree(TreeConfig.farey(), 0.5)
