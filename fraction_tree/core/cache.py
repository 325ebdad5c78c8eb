"""
Node Cache — канонизация узлов по значению

Явный объект кэша (не глобальное состояние): передаётся в FractionTree
при создании. Повторный lookup одного и того же значения возвращает
тот же самый экземпляр Node.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для каждого значения в кэше ровно один канонический экземпляр
2. Вставка атомарна (compare-and-insert под lock): гонка двух потоков
   за одно значение не порождает дубликатов
3. Кэш не влияет на корректность — только на идентичность экземпляров
"""

import logging
import threading
from typing import Any, Optional

from fraction_tree.core.domain.node import Node
from fraction_tree.core.exact import ExactValue


class NodeCache:
    """
    Потокобезопасный кэш канонических узлов.

    Lifecycle: создание → lookup/canonical → reset().

    Examples:
        >>> from fractions import Fraction
        >>> cache = NodeCache()
        >>> cache.canonical(Node(3, 2)) is cache.lookup(Fraction(3, 2))
        True
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("fraction_tree.cache")
        self._lock = threading.Lock()
        self._nodes: dict[ExactValue, Node] = {}

    def canonical(self, node: Node) -> Node:
        """
        Канонический экземпляр для значения узла.

        Если значение ещё не в кэше, переданный узел становится каноническим.
        Несокращённая форма (12/8) канонизируется в первый вставленный узел
        с тем же значением.
        """
        key = node.value
        cached = self._nodes.get(key)
        if cached is not None:
            return cached

        with self._lock:
            return self._nodes.setdefault(key, node)

    def lookup(self, value: Any) -> Node:
        """Канонический узел для точного значения (int, Fraction, math.inf, Node)."""
        return self.canonical(Node.from_value(value))

    def reset(self) -> None:
        """Очистка кэша."""
        with self._lock:
            size = len(self._nodes)
            self._nodes = {}
        self._logger.debug(f"Node cache reset, dropped {size} node(s)")

    def __contains__(self, value: Any) -> bool:
        return Node.from_value(value).value in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
