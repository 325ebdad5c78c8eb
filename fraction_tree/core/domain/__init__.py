"""
Domain models and value objects.

Contains the tree node value and the bounding tree configuration.
"""

from fraction_tree.core.domain.node import INFINITY, ZERO, Node, NodeKind
from fraction_tree.core.domain.tree_config import (
    KIND_ALIASES,
    STANDARD_BOUNDS,
    TreeConfig,
    TreeKind,
    in_range,
    resolve_kind,
    validate_in_tree,
)

__all__ = [
    # Node model
    "Node",
    "NodeKind",
    "INFINITY",
    "ZERO",
    # Tree configuration
    "TreeConfig",
    "TreeKind",
    "KIND_ALIASES",
    "STANDARD_BOUNDS",
    "resolve_kind",
    "in_range",
    "validate_in_tree",
]
