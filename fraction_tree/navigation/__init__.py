"""
Navigation Engine — поиск, перечисление, quotient walk и соседи.
"""

from fraction_tree.navigation.engine import (
    DEFAULT_SEQUENCE_DEPTH,
    DEFAULT_TREE_DEPTH,
    FractionTree,
    NavigationDefaults,
)
from fraction_tree.navigation.enumeration import (
    descendancy_from,
    descendants_of,
    numeric_sequence,
    sequence,
    tree,
)
from fraction_tree.navigation.neighbors import neighbors_of
from fraction_tree.navigation.quotient_walk import floor_segment, quotient_walk
from fraction_tree.navigation.search import common_ancestors, parents_of, path_to

__all__ = [
    # Engine
    "FractionTree",
    "NavigationDefaults",
    "DEFAULT_TREE_DEPTH",
    "DEFAULT_SEQUENCE_DEPTH",
    # Search
    "path_to",
    "parents_of",
    "common_ancestors",
    # Enumeration
    "sequence",
    "descendants_of",
    "descendancy_from",
    "tree",
    "numeric_sequence",
    # Quotient walk
    "quotient_walk",
    "floor_segment",
    # Neighbors
    "neighbors_of",
]
