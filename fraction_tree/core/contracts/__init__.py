"""
Contract Validation Module

Документы node, tree_config и node_path, проверенные JSON Schema контрактами.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    node_from_document,
    node_to_document,
    tree_config_from_document,
    tree_config_to_document,
    validate_node_path,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Documents
    "node_to_document",
    "node_from_document",
    "tree_config_to_document",
    "tree_config_from_document",
    "validate_node_path",
]
