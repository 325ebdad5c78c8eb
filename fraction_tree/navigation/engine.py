"""
FractionTree — движок навигации по дереву медиант

Фасад над функциями навигации для одной конфигурации дерева:
- привязка к TreeConfig (Stern-Brocot, Farey, octave-reduced, custom)
- канонизация результатов через явный NodeCache (опционально)
- значения по умолчанию глубин и лимитов (NavigationDefaults)
- логирование усечений и результатов поиска

Targeted-операции (node, path_to, parents_of, common_ancestors,
descendancy_from, quotient_walk) валидируют target против конфигурации.
Примитивы (mediant, are_neighbors, child_of, descendants_of, sequence,
neighbors_of, encode/decode) диапазон не проверяют.
"""

import logging
from dataclasses import dataclass
from typing import Any, Final, Iterator, Optional, Sequence, Union

from fraction_tree.codec import path_codec
from fraction_tree.core.cache import NodeCache
from fraction_tree.core.contracts.validators import (
    node_to_document,
    tree_config_to_document,
    validate_node_path,
)
from fraction_tree.core.domain.node import Node
from fraction_tree.core.domain.tree_config import (
    TreeConfig,
    TreeKind,
    in_range,
    validate_in_tree,
)
from fraction_tree.core.math.mediant import are_neighbors, child_of, mediant
from fraction_tree.core.math.continued_fraction import DEFAULT_QUOTIENT_LIMIT
from fraction_tree.navigation import enumeration, neighbors, search
from fraction_tree.navigation.quotient_walk import exact_target, quotient_walk as walk_quotients

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Число строк tree() по умолчанию
DEFAULT_TREE_DEPTH: Final[int] = 10

# Глубина sequence()/descendants_of() по умолчанию
DEFAULT_SEQUENCE_DEPTH: Final[int] = 5


@dataclass(frozen=True)
class NavigationDefaults:
    """
    Значения по умолчанию для операций движка.

    max_path_steps — защитный лимит шагов path_to (None — без лимита).
    Рациональный target всегда достижим за конечное число шагов, лимит
    нужен только для очень глубоких дробей.
    """

    sequence_depth: int = DEFAULT_SEQUENCE_DEPTH
    tree_depth: int = DEFAULT_TREE_DEPTH
    quotient_limit: int = DEFAULT_QUOTIENT_LIMIT
    max_path_steps: Optional[int] = None


class FractionTree:
    """
    Движок навигации по дереву медиант для одной конфигурации.

    Examples:
        >>> from fractions import Fraction
        >>> tree = FractionTree()
        >>> tree.path_to(Fraction(4, 3))
        [(0/1), (1/0), (1/1), (2/1), (3/2), (4/3)]
        >>> FractionTree("farey").parents_of(Fraction(2, 5))
        ((1/3), (1/2))
    """

    def __init__(
        self,
        config: Union[TreeConfig, TreeKind, str] = TreeKind.STERN_BROCOT,
        cache: Optional[NodeCache] = None,
        defaults: Optional[NavigationDefaults] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            config: TreeConfig либо тег стандартной конфигурации
            cache: Кэш канонических узлов (None — без канонизации)
            defaults: Значения глубин и лимитов по умолчанию
            logger: Логгер (default: "fraction_tree.navigation")

        Raises:
            InvalidConfiguration: Неизвестный тег конфигурации
        """
        self.config = config if isinstance(config, TreeConfig) else TreeConfig.for_kind(config)
        self.cache = cache
        self.defaults = defaults or NavigationDefaults()
        self._logger = logger or logging.getLogger("fraction_tree.navigation")

    @property
    def left(self) -> Node:
        return self._canonical(self.config.left)

    @property
    def right(self) -> Node:
        return self._canonical(self.config.right)

    @property
    def segment(self) -> tuple[Node, Node]:
        return (self.left, self.right)

    def _canonical(self, node: Node) -> Node:
        if self.cache is None:
            return node
        return self.cache.canonical(node)

    def _canonical_all(self, nodes: Sequence[Node]) -> list[Node]:
        if self.cache is None:
            return list(nodes)
        return [self.cache.canonical(node) for node in nodes]

    # -------------------------------------------------------------------------
    # Узлы и диапазон
    # -------------------------------------------------------------------------

    def in_range(self, value: Any) -> bool:
        return in_range(self.config, value)

    def node(self, value: Any) -> Node:
        """
        Узел дерева для значения (канонический при наличии кэша).

        Raises:
            RangeViolation: value вне конфигурации
        """
        validate_in_tree(self.config, value)
        return self._canonical(Node.from_value(value))

    def mediant(self, a: Any, b: Any) -> Node:
        return self._canonical(mediant(a, b))

    def are_neighbors(self, a: Any, b: Any) -> bool:
        return are_neighbors(a, b)

    # -------------------------------------------------------------------------
    # Поиск
    # -------------------------------------------------------------------------

    def path_to(self, target: Any, collect_all: bool = True, limit: Optional[int] = None) -> list[Node]:
        """
        Путь к target бинарным поиском.

        Args:
            target: Точное значение в диапазоне конфигурации
            collect_all: Вся цепочка предков (True) либо пара родителей (False)
            limit: Лимит шагов (default: defaults.max_path_steps)
        """
        steps = limit if limit is not None else self.defaults.max_path_steps
        result = search.path_to(self.config, target, collect_all=collect_all, limit=steps)

        if steps is not None and self._is_truncated(result, Node.from_value(target), collect_all):
            self._logger.warning(f"path_to({target}) truncated after {steps} step(s) at {result[-1]}")
        else:
            self._logger.debug(f"path_to({target}): {len(result)} node(s)")

        return self._canonical_all(result)

    @staticmethod
    def _is_truncated(result: Sequence[Node], goal: Node, collect_all: bool) -> bool:
        """
        Оборван ли поиск до target.

        Полный путь заканчивается target; пара [low, high] достигнутого
        target даёт его медиантой. Граничный target ([граница]) не обрывается.
        """
        if len(result) == 1:
            return False
        if collect_all:
            return result[-1] != goal
        low, high = result
        return low + high != goal

    def parents_of(self, target: Any) -> Optional[tuple[Node, Node]]:
        """Непосредственные родители target; None для граничного узла."""
        parents = search.parents_of(self.config, target)
        if parents is None:
            return None
        low, high = parents
        return (self._canonical(low), self._canonical(high))

    def common_ancestors(self, first: Any, second: Any) -> list[Node]:
        return self._canonical_all(search.common_ancestors(self.config, first, second))

    # -------------------------------------------------------------------------
    # Перечисление
    # -------------------------------------------------------------------------

    def child_of(self, first: Any, second: Any, strict: bool = True) -> Optional[Node]:
        """Медиантный потомок; None если strict и узлы не соседи."""
        child = child_of(first, second, strict=strict)
        if child is None:
            return None
        return self._canonical(child)

    def sequence(self, depth: Optional[int] = None, segment: Optional[Sequence[Any]] = None) -> list[Node]:
        """Узлы сегмента (по умолчанию — границ конфигурации) до глубины depth."""
        depth = self.defaults.sequence_depth if depth is None else depth
        bounds = self.config.bounds if segment is None else segment
        return self._canonical_all(enumeration.sequence(depth, bounds))

    def descendants_of(
        self,
        parent1: Any,
        parent2: Any,
        depth: Optional[int] = None,
        strict: bool = True,
    ) -> list[Node]:
        """Потомки пары родителей; [] если strict и родители не соседи."""
        depth = self.defaults.sequence_depth if depth is None else depth
        return self._canonical_all(enumeration.descendants_of(parent1, parent2, depth, strict=strict))

    def descendancy_from(self, target: Any, depth: Optional[int] = None) -> list[Node]:
        """Потомки родителей target."""
        depth = self.defaults.sequence_depth if depth is None else depth
        return self._canonical_all(enumeration.descendancy_from(self.config, target, depth))

    def tree(self, depth: Optional[int] = None) -> list[list[Node]]:
        """Строки дерева конфигурации до глубины depth."""
        depth = self.defaults.tree_depth if depth is None else depth
        return [self._canonical_all(row) for row in enumeration.tree(depth, self.config.bounds)]

    @staticmethod
    def numeric_sequence() -> Iterator[int]:
        return enumeration.numeric_sequence()

    # -------------------------------------------------------------------------
    # Quotient walk и соседи
    # -------------------------------------------------------------------------

    def quotient_walk(
        self,
        target: Any,
        limit: Optional[int] = None,
        segment: Optional[Union[TreeConfig, Sequence[Any]]] = None,
        quotients: Optional[Sequence[int]] = None,
    ) -> list[Node]:
        """
        Спуск к target по неполным частным.

        Target валидируется против конфигурации движка; сегмент по
        умолчанию — floor_segment(target).

        Raises:
            RangeViolation: target вне конфигурации
        """
        value = exact_target(target)
        validate_in_tree(self.config, value)

        limit = self.defaults.quotient_limit if limit is None else limit
        walk = walk_quotients(value, limit=limit, segment=segment, quotients=quotients)

        goal = Node(value.numerator, value.denominator)
        if walk[-1] != goal:
            self._logger.debug(f"quotient_walk({target}) stopped after {limit} quotient(s) at {walk[-1]}")

        return self._canonical_all(walk)

    def neighbors_of(self, node: Any, search_range: Optional[int] = None) -> list[Node]:
        return self._canonical_all(neighbors.neighbors_of(node, search_range))

    # -------------------------------------------------------------------------
    # Кодек
    # -------------------------------------------------------------------------

    def encode(self, node: Any, limit: Optional[int] = None) -> Optional[str]:
        return path_codec.encode(node, limit=limit)

    def decode(self, string: str) -> Node:
        return self._canonical(path_codec.decode(string))

    def decode_path(self, string: str) -> list[Node]:
        return self._canonical_all(path_codec.decode_path(string))

    # -------------------------------------------------------------------------
    # Документы
    # -------------------------------------------------------------------------

    def path_document(self, target: Any) -> dict[str, Any]:
        """
        JSON-документ пути к target, проверенный контрактом node_path.

        Returns:
            dict: schema_version, config, target, nodes, encoding

        Raises:
            RangeViolation: target вне конфигурации
            ValidationError: Документ не соответствует контракту
        """
        goal = self.node(target)
        document = {
            "schema_version": "1",
            "config": tree_config_to_document(self.config),
            "target": node_to_document(goal),
            "nodes": [node_to_document(node) for node in self.path_to(goal)],
            "encoding": self.encode(goal),
        }
        return validate_node_path(document)
