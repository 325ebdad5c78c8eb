"""
Continued Fraction Quotients — источник частных неполных частных

Внешний по отношению к навигации источник: по значению и лимиту
возвращает упорядоченный список неполных частных [a0; a1, a2, ...].
Арифметику цепных дробей модуль НЕ реализует — только разложение.

Два режима:
- continued_fraction_quotients: алгоритм Евклида над точным значением.
  Рациональные входы завершаются сами; float и mpmath.mpf раскладываются
  по их точному двоичному значению.
- continued_fraction_quotients_mp: вычисление выражения mpmath в контексте
  заданной точности (workdps) и итерация floor / 1/frac.
"""

from typing import Callable, Final, Optional

import mpmath

from fraction_tree.core.domain.node import Node
from fraction_tree.core.exact import INFINITE_VALUE, to_exact

# Лимит неполных частных по умолчанию (включая целую часть)
DEFAULT_QUOTIENT_LIMIT: Final[int] = 10

# Рабочая точность mpmath (десятичные знаки) по умолчанию
DEFAULT_CF_PRECISION_DPS: Final[int] = 50


def continued_fraction_quotients(value, limit: Optional[int] = DEFAULT_QUOTIENT_LIMIT) -> list[int]:
    """
    Неполные частные точного значения алгоритмом Евклида.

    Args:
        value: Node, int, Fraction, float или mpmath.mpf (неотрицательное)
        limit: Максимум частных, включая целую часть (None — без лимита)

    Returns:
        [a0, a1, ...]; для рациональных входов список конечен

    Raises:
        ValueError: Бесконечность или limit < 1

    Examples:
        >>> from fractions import Fraction
        >>> continued_fraction_quotients(Fraction(15, 13))
        [1, 6, 2]
        >>> continued_fraction_quotients(Fraction(4, 3))
        [1, 3]
    """
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")

    exact = value.value if isinstance(value, Node) else to_exact(value, allow_inexact=True)
    if exact == INFINITE_VALUE:
        raise ValueError("Infinity has no continued fraction expansion")

    p, q = exact.numerator, exact.denominator
    quotients: list[int] = []
    while q != 0 and (limit is None or len(quotients) < limit):
        a, r = divmod(p, q)
        quotients.append(a)
        p, q = q, r

    return quotients


def continued_fraction_quotients_mp(
    expression: Callable[[], "mpmath.mpf"],
    limit: int = DEFAULT_QUOTIENT_LIMIT,
    dps: int = DEFAULT_CF_PRECISION_DPS,
) -> list[int]:
    """
    Неполные частные выражения mpmath при заданной точности.

    Выражение вычисляется внутри mpmath.workdps, поэтому иррациональные
    константы (sqrt(2), log2(3/2), pi) раскладываются с точностью dps,
    а не с точностью float.

    Args:
        expression: Функция без аргументов, возвращающая mpf
        limit: Максимум частных, включая целую часть
        dps: Рабочая точность (десятичные знаки); не меньше 2 * limit

    Examples:
        >>> continued_fraction_quotients_mp(lambda: mpmath.sqrt(2), limit=5)
        [1, 2, 2, 2, 2]
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")

    precision = max(dps, limit * 2)
    quotients: list[int] = []
    with mpmath.workdps(precision):
        x = mpmath.mpf(expression())
        if x < 0:
            raise ValueError(f"Negative values are not part of the tree: {x}")
        cutoff = mpmath.mpf(10) ** (-(precision // 2))
        while len(quotients) < limit:
            a = int(mpmath.floor(x))
            quotients.append(a)
            frac = x - a
            if frac < cutoff:
                break
            x = 1 / frac

    return quotients
