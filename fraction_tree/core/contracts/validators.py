"""
JSON Schema Contract Validators

Модуль для валидации JSON документов дерева дробей согласно формальным
JSON Schema контрактам (Draft 2020-12). Документы строятся из
pydantic-моделей через model_dump(mode="json").

Схемы:
- node.json — один узел (numerator/denominator, 0/0 запрещено)
- tree_config.json — граничная пара поддерева
- node_path.json — путь к target, конфигурация и L/R кодировка
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

from fraction_tree.core.domain.node import Node
from fraction_tree.core.domain.tree_config import TreeConfig


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'node_path')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одного контракта (Draft 2020-12).
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


# Валидаторы контрактов
_NODE: Final[ContractValidator] = ContractValidator("node")
_TREE_CONFIG: Final[ContractValidator] = ContractValidator("tree_config")
_NODE_PATH: Final[ContractValidator] = ContractValidator("node_path")


# =============================================================================
# ДОКУМЕНТЫ ДОМЕНА
# =============================================================================


def node_to_document(node: Node) -> Dict[str, Any]:
    """Документ node; бесконечность сериализуется как 1/0."""
    document = node.model_dump(mode="json")
    _NODE.validate(document)
    return document


def node_from_document(data: Dict[str, Any]) -> Node:
    """
    Узел из документа node.

    Raises:
        ValidationError: Документ не соответствует схеме (0/0, отрицательные, лишние поля)
    """
    _NODE.validate(data)
    return Node(data["numerator"], data["denominator"])


def tree_config_to_document(config: TreeConfig) -> Dict[str, Any]:
    document = config.model_dump(mode="json")
    _TREE_CONFIG.validate(document)
    return document


def tree_config_from_document(data: Dict[str, Any]) -> TreeConfig:
    """
    TreeConfig из документа tree_config.

    Схема проверяет форму документа, порядок границ проверяет модель.

    Raises:
        ValidationError: Документ не соответствует схеме
        InvalidConfiguration: left >= right
    """
    _TREE_CONFIG.validate(data)
    return TreeConfig.model_validate(data)


def validate_node_path(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Валидация документа node_path (FractionTree.path_document).

    Returns:
        Тот же документ

    Raises:
        ValidationError: Документ не соответствует схеме
    """
    _NODE_PATH.validate(data)
    return data
