"""
Node — Модель узла дерева дробей

Immutable Pydantic модель одного узла дерева Штерна-Броко: дробь m/n
с m >= 0, n >= 0, либо бесконечность (1/0).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Узел неизменяем (frozen=True), все операции создают новый экземпляр
2. Равенство, порядок и hash определяются значением (value), а не парой m/n:
   Node(2, 4) == Node(1, 2)
3. Ядро никогда не сокращает дробь: медианта не-соседей может быть
   несокращённой (12/8), и это сохраняется
4. Бесконечность — явный тег NodeKind.INFINITE, value = math.inf
   (деление на ноль никогда не выполняется)
"""

from enum import Enum
from fractions import Fraction
from typing import Any, Union

from pydantic import BaseModel, Field, model_validator

from fraction_tree.core.exact import INFINITE_VALUE, ExactValue, to_exact


# =============================================================================
# ENUMS
# =============================================================================


class NodeKind(str, Enum):
    """Тег узла: конечная дробь или бесконечность."""

    FINITE = "FINITE"
    INFINITE = "INFINITE"


# =============================================================================
# NODE MODEL
# =============================================================================


class Node(BaseModel):
    """
    Узел дерева дробей.

    Создание:
        Node(3, 2)                  — из пары numerator/denominator
        Node.from_value(Fraction(3, 2))
        Node.infinity()             — (1/0)
        a + b                       — медианта двух узлов
        a - b                       — разностный комбинатор |m-m'|/|n-n'|

    Examples:
        >>> Node(0, 1) + Node(1, 0)
        (1/1)
        >>> Node(4, 3) < Node(3, 2)
        True
        >>> Node(1, 0).kind
        <NodeKind.INFINITE: 'INFINITE'>
    """

    numerator: int = Field(..., ge=0, strict=True, description="Числитель (>= 0)")
    denominator: int = Field(..., ge=0, strict=True, description="Знаменатель (>= 0, 0 = бесконечность)")

    model_config = {"frozen": True}

    def __init__(self, numerator: int, denominator: int = 1, **data: Any) -> None:
        super().__init__(numerator=numerator, denominator=denominator, **data)

    @model_validator(mode="after")
    def validate_not_indeterminate(self) -> "Node":
        """0/0 не является узлом дерева."""
        if self.numerator == 0 and self.denominator == 0:
            raise ValueError("0/0 is not a tree node")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_value(cls, value: Any, allow_inexact: bool = False) -> "Node":
        """
        Узел из точного значения.

        Node возвращается без изменений; int/Fraction — в несократимом виде
        (Fraction уже сокращена); math.inf → (1/0).

        Args:
            value: Node, int, Fraction, math.inf (float/mpf при allow_inexact)
            allow_inexact: Разрешить float/mpmath.mpf

        Raises:
            TypeError: Неподдерживаемый тип
            ValueError: Отрицательное значение или NaN
        """
        if isinstance(value, Node):
            return value

        exact = to_exact(value, allow_inexact=allow_inexact)
        if exact == INFINITE_VALUE:
            return cls.infinity()
        return cls(exact.numerator, exact.denominator)

    @classmethod
    def infinity(cls) -> "Node":
        return cls(1, 0)

    @classmethod
    def zero(cls) -> "Node":
        return cls(0, 1)

    # -------------------------------------------------------------------------
    # Значение и тег
    # -------------------------------------------------------------------------

    @property
    def kind(self) -> NodeKind:
        return NodeKind.INFINITE if self.denominator == 0 else NodeKind.FINITE

    @property
    def is_infinite(self) -> bool:
        return self.kind == NodeKind.INFINITE

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0

    @property
    def value(self) -> ExactValue:
        """Точное значение: Fraction, либо math.inf для (1/0)."""
        if self.is_infinite:
            return INFINITE_VALUE
        return Fraction(self.numerator, self.denominator)

    def as_pair(self) -> tuple[int, int]:
        """Пара (numerator, denominator) как хранится (без сокращения)."""
        return (self.numerator, self.denominator)

    # -------------------------------------------------------------------------
    # Медианта и разность
    # -------------------------------------------------------------------------

    def __add__(self, rhs: "Node") -> "Node":
        if not isinstance(rhs, Node):
            return NotImplemented
        return Node(self.numerator + rhs.numerator, self.denominator + rhs.denominator)

    def __sub__(self, rhs: "Node") -> "Node":
        if not isinstance(rhs, Node):
            return NotImplemented
        return Node(
            abs(self.numerator - rhs.numerator),
            abs(self.denominator - rhs.denominator),
        )

    # -------------------------------------------------------------------------
    # Сравнение по значению
    # -------------------------------------------------------------------------

    @staticmethod
    def _value_of(other: Any) -> Union[ExactValue, None]:
        if isinstance(other, Node):
            return other.value
        if isinstance(other, bool):
            return None
        if isinstance(other, (int, Fraction)) or other == INFINITE_VALUE:
            return other
        return None

    def __eq__(self, other: Any) -> bool:
        rhs = self._value_of(other)
        if rhs is None:
            return NotImplemented
        return self.value == rhs

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: Any) -> bool:
        rhs = self._value_of(other)
        if rhs is None:
            return NotImplemented
        return self.value < rhs

    def __le__(self, other: Any) -> bool:
        rhs = self._value_of(other)
        if rhs is None:
            return NotImplemented
        return self.value <= rhs

    def __gt__(self, other: Any) -> bool:
        rhs = self._value_of(other)
        if rhs is None:
            return NotImplemented
        return self.value > rhs

    def __ge__(self, other: Any) -> bool:
        rhs = self._value_of(other)
        if rhs is None:
            return NotImplemented
        return self.value >= rhs

    def __repr__(self) -> str:
        return f"({self.numerator}/{self.denominator})"

    __str__ = __repr__


INFINITY = Node.infinity()
ZERO = Node.zero()
