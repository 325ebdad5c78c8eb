"""
Path Codec — кодирование узла строкой ходов L/R

encode: вычитательный алгоритм Евклида (медленное чтение цепной дроби).
    m < n → "L", n -= m
    m > n → "R", m -= n
    до m == n

decode: свёртка произведения унимодулярных матриц 2x2 от единичной:
    L, l, 0 → [[1, 1], [0, 1]]
    R, r, 1 → [[1, 0], [1, 1]]
    прочие символы игнорируются (не ошибка)
    результат: (сумма второй строки) / (сумма первой строки)

Матрицы ходов — ровно преобразования левого/правого потомка в дереве
Штерна-Броко, поэтому decode(encode(x)) == x для любого конечного x != 0.

Диапазон конфигурации кодек НЕ проверяет.
"""

from typing import Any, Final, Optional

from fraction_tree.core.domain.node import Node

Matrix = tuple[tuple[int, int], tuple[int, int]]

IDENTITY_MATRIX: Final[Matrix] = ((1, 0), (0, 1))
LEFT_MATRIX: Final[Matrix] = ((1, 1), (0, 1))
RIGHT_MATRIX: Final[Matrix] = ((1, 0), (1, 1))

LEFT_SYMBOLS: Final[frozenset[str]] = frozenset("Ll0")
RIGHT_SYMBOLS: Final[frozenset[str]] = frozenset("Rr1")

# Кодировка корня (1/1): пустой путь. decode игнорирует этот символ.
ROOT_CODE: Final[str] = "I"


# =============================================================================
# МАТРИЦЫ
# =============================================================================


def matrix_multiply(a: Matrix, b: Matrix) -> Matrix:
    """Произведение матриц 2x2 над целыми (произвольная точность)."""
    (a11, a12), (a21, a22) = a
    (b11, b12), (b21, b22) = b
    return (
        (a11 * b11 + a12 * b21, a11 * b12 + a12 * b22),
        (a21 * b11 + a22 * b21, a21 * b12 + a22 * b22),
    )


def matrix_to_node(matrix: Matrix) -> Node:
    """Узел накопленной матрицы: sum(row 1) / sum(row 0)."""
    top, bottom = matrix
    return Node(sum(bottom), sum(top))


def move_matrix(symbol: str) -> Optional[Matrix]:
    """Матрица хода для символа, либо None для игнорируемого символа."""
    if symbol in LEFT_SYMBOLS:
        return LEFT_MATRIX
    if symbol in RIGHT_SYMBOLS:
        return RIGHT_MATRIX
    return None


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def encode(node: Any, limit: Optional[int] = None) -> Optional[str]:
    """
    Кодировка узла строкой ходов от корня (1/1).

    Args:
        node: Node либо точное значение
        limit: Максимальная длина кодировки (None — без лимита)

    Returns:
        Строка над {L, R}; ROOT_CODE для m == n;
        None для нуля и бесконечности (нет конечной точки отсчёта)

    Examples:
        >>> encode(Node(4, 3))
        'RLL'
        >>> encode(Node(1, 1))
        'I'
        >>> encode(Node(1, 0)) is None
        True
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    target = Node.from_value(node)
    if target.is_infinite or target.is_zero:
        return None

    m, n = target.numerator, target.denominator
    if m == n:
        return ROOT_CODE

    moves: list[str] = []
    while m != n and (limit is None or len(moves) < limit):
        if m < n:
            moves.append("L")
            n -= m
        else:
            moves.append("R")
            m -= n

    return "".join(moves)


def decode(string: str) -> Node:
    """
    Узел по строке ходов.

    Examples:
        >>> decode("RLL")
        (4/3)
        >>> decode("")
        (1/1)
    """
    result = IDENTITY_MATRIX
    for symbol in string:
        move = move_matrix(symbol)
        if move is not None:
            result = matrix_multiply(result, move)
    return matrix_to_node(result)


def decode_path(string: str) -> list[Node]:
    """
    Цепочка узлов вдоль строки ходов: корень (1/1), затем узел после
    каждого значимого символа.

    Examples:
        >>> decode_path("RLL")
        [(1/1), (2/1), (3/2), (4/3)]
    """
    result = IDENTITY_MATRIX
    nodes = [matrix_to_node(result)]
    for symbol in string:
        move = move_matrix(symbol)
        if move is None:
            continue
        result = matrix_multiply(result, move)
        nodes.append(matrix_to_node(result))
    return nodes
