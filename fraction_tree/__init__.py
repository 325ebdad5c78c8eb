"""
fraction_tree — навигация по дереву медиант Штерна-Броко / Фарея.

Модули:
- core.domain: Node, TreeConfig
- core.math: медианта, соседство Фарея, неполные частные
- core.cache: NodeCache
- codec: L/R кодировка
- navigation: FractionTree и функции навигации
"""

from fraction_tree.core.domain import INFINITY, ZERO, Node, NodeKind, TreeConfig, TreeKind
from fraction_tree.core.errors import FractionTreeError, InvalidConfiguration, RangeViolation
from fraction_tree.core.cache import NodeCache
from fraction_tree.core.math import are_neighbors, child_of, difference, mediant
from fraction_tree.codec import decode, decode_path, encode
from fraction_tree.navigation import FractionTree, NavigationDefaults

__all__ = [
    "Node",
    "NodeKind",
    "INFINITY",
    "ZERO",
    "TreeConfig",
    "TreeKind",
    "FractionTreeError",
    "RangeViolation",
    "InvalidConfiguration",
    "NodeCache",
    "mediant",
    "are_neighbors",
    "child_of",
    "difference",
    "encode",
    "decode",
    "decode_path",
    "FractionTree",
    "NavigationDefaults",
]
