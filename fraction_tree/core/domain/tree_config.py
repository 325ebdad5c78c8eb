"""
TreeConfig — Граничная конфигурация поддерева

Пара граничных узлов (left, right) с left.value < right.value задаёт
поддерево и допустимый диапазон входов [left.value, right.value].

Стандартные конфигурации (закрытое перечисление TreeKind):
- STERN_BROCOT:   (0/1, 1/0)
- FAREY:          (0/1, 1/1)
- OCTAVE_REDUCED: (1/1, 2/1)
- CUSTOM:         произвольная пара, TreeConfig.custom(left, right)

Неизвестные теги отвергаются InvalidConfiguration — без тихого fallback.
"""

from enum import Enum
from typing import Any, Final, Union

from pydantic import BaseModel, Field, model_validator

from fraction_tree.core.domain.node import Node
from fraction_tree.core.errors import InvalidConfiguration, RangeViolation


# =============================================================================
# ENUMS
# =============================================================================


class TreeKind(str, Enum):
    """Известные конфигурации дерева."""

    STERN_BROCOT = "stern_brocot"
    FAREY = "farey"
    OCTAVE_REDUCED = "octave_reduced"
    CUSTOM = "custom"


# Синонимы тегов (исторические названия диапазонов)
KIND_ALIASES: Final[dict[str, TreeKind]] = {
    "scale": TreeKind.STERN_BROCOT,
    "keyboard": TreeKind.FAREY,
    "scale_step": TreeKind.FAREY,
    "log2": TreeKind.FAREY,
}

STANDARD_BOUNDS: Final[dict[TreeKind, tuple[tuple[int, int], tuple[int, int]]]] = {
    TreeKind.STERN_BROCOT: ((0, 1), (1, 0)),
    TreeKind.FAREY: ((0, 1), (1, 1)),
    TreeKind.OCTAVE_REDUCED: ((1, 1), (2, 1)),
}


def resolve_kind(tag: Union[TreeKind, str]) -> TreeKind:
    """
    Разрешение тега конфигурации в TreeKind.

    Raises:
        InvalidConfiguration: Неизвестный тег
    """
    if isinstance(tag, TreeKind):
        return tag

    if isinstance(tag, str):
        key = tag.strip().lower()
        if key in KIND_ALIASES:
            return KIND_ALIASES[key]
        try:
            return TreeKind(key)
        except ValueError:
            pass

    raise InvalidConfiguration(f"Unknown tree configuration: {tag!r}")


# =============================================================================
# TREE CONFIG MODEL
# =============================================================================


class TreeConfig(BaseModel):
    """
    Граничная пара поддерева.

    Immutable модель; создаётся один раз на контекст навигации.

    Examples:
        >>> TreeConfig.stern_brocot().bounds
        ((0/1), (1/0))
        >>> TreeConfig.for_kind("octave_reduced").bounds
        ((1/1), (2/1))
    """

    kind: TreeKind = Field(..., description="Тег конфигурации")
    left: Node = Field(..., description="Левая граница (включительно)")
    right: Node = Field(..., description="Правая граница (включительно)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_ordering(self) -> "TreeConfig":
        """left.value < right.value, иначе InvalidConfiguration."""
        if not self.left < self.right:
            raise InvalidConfiguration(
                f"Tree bounds must be strictly ordered, got {self.left} >= {self.right}",
                left=self.left,
                right=self.right,
            )
        return self

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def for_kind(cls, tag: Union[TreeKind, str]) -> "TreeConfig":
        """
        Стандартная конфигурация по тегу (включая синонимы).

        Raises:
            InvalidConfiguration: Неизвестный тег или CUSTOM без границ
        """
        kind = resolve_kind(tag)
        if kind == TreeKind.CUSTOM:
            raise InvalidConfiguration("Custom configuration requires explicit bounds; use TreeConfig.custom()")

        (lm, ln), (rm, rn) = STANDARD_BOUNDS[kind]
        return cls(kind=kind, left=Node(lm, ln), right=Node(rm, rn))

    @classmethod
    def custom(cls, left: Any, right: Any) -> "TreeConfig":
        """Произвольная пара границ (Node, int, Fraction или math.inf)."""
        return cls(kind=TreeKind.CUSTOM, left=Node.from_value(left), right=Node.from_value(right))

    @classmethod
    def stern_brocot(cls) -> "TreeConfig":
        return cls.for_kind(TreeKind.STERN_BROCOT)

    @classmethod
    def farey(cls) -> "TreeConfig":
        return cls.for_kind(TreeKind.FAREY)

    @classmethod
    def octave_reduced(cls) -> "TreeConfig":
        return cls.for_kind(TreeKind.OCTAVE_REDUCED)

    @property
    def bounds(self) -> tuple[Node, Node]:
        return (self.left, self.right)


# =============================================================================
# ВАЛИДАЦИЯ ДИАПАЗОНА
# =============================================================================


def in_range(config: TreeConfig, value: Any) -> bool:
    """
    Проверка value ∈ [left.value, right.value].

    Args:
        config: Активная конфигурация
        value: Node либо точное значение (int, Fraction, math.inf)
    """
    node = Node.from_value(value)
    return config.left <= node <= config.right


def validate_in_tree(config: TreeConfig, value: Any) -> None:
    """
    Валидация, что value лежит в диапазоне конфигурации.

    Raises:
        RangeViolation: value вне [left.value, right.value]
    """
    if not in_range(config, value):
        raise RangeViolation(value, config.left, config.right)
