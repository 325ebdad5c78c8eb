"""
Exact — приведение входных значений к точному виду

Ядро работает только с точными рациональными значениями (Fraction) и
sentinel-значением бесконечности (math.inf). Float и mpmath.mpf
допускаются только там, где вызывающий явно разрешил неточный вход
(quotient_walk), и конвертируются без потерь: берётся точное двоичное
значение числа.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отрицательные значения и NaN отвергаются (ValueError)
2. bool не является числом для дерева (TypeError)
3. Любая бесконечность (math.inf, mpmath.inf) → math.inf
"""

import math
from fractions import Fraction
from typing import Any, Final, Union

import mpmath

# Значение бесконечности в модели Node (1/0)
INFINITE_VALUE: Final[float] = math.inf

ExactValue = Union[Fraction, float]


def is_infinite_value(value: Any) -> bool:
    """True если value — положительная бесконечность (float или mpf)."""
    if isinstance(value, float):
        return math.isinf(value) and value > 0
    if isinstance(value, mpmath.mpf):
        return bool(mpmath.isinf(value)) and value > 0
    return False


def mpf_to_fraction(value: mpmath.mpf) -> Fraction:
    """
    Точная конверсия mpmath.mpf в Fraction.

    mpf хранит число как man * 2**exp; знак отвергается заранее.

    Examples:
        >>> mpf_to_fraction(mpmath.mpf("0.5"))
        Fraction(1, 2)
    """
    if value < 0:
        raise ValueError(f"Negative values are not part of the tree: {value}")
    man, exp = value.man_exp
    if exp >= 0:
        return Fraction(int(man) << exp)
    return Fraction(int(man), 1 << -exp)


def to_exact(value: Any, allow_inexact: bool = False) -> ExactValue:
    """
    Приведение значения к Fraction либо math.inf.

    Args:
        value: int, Fraction, math.inf; float/mpf при allow_inexact=True
        allow_inexact: Разрешить float/mpmath.mpf (точная двоичная конверсия)

    Returns:
        Fraction для конечных значений, math.inf для бесконечности

    Raises:
        TypeError: Неподдерживаемый тип или float без allow_inexact
        ValueError: Отрицательное значение или NaN

    Examples:
        >>> to_exact(3)
        Fraction(3, 1)
        >>> to_exact(Fraction(4, 3))
        Fraction(4, 3)
        >>> to_exact(0.5, allow_inexact=True)
        Fraction(1, 2)
    """
    if isinstance(value, bool):
        raise TypeError(f"bool is not a tree value: {value!r}")

    if is_infinite_value(value):
        return INFINITE_VALUE

    if isinstance(value, (int, Fraction)):
        result = Fraction(value)
    elif isinstance(value, float):
        if not allow_inexact:
            raise TypeError(
                f"Floating-point input {value!r} is not exact; convert it to a "
                f"Fraction first or use quotient_walk for approximations"
            )
        if math.isnan(value):
            raise ValueError("NaN is not a tree value")
        if math.isinf(value):
            raise ValueError(f"Negative values are not part of the tree: {value}")
        result = Fraction(value)
    elif isinstance(value, mpmath.mpf):
        if not allow_inexact:
            raise TypeError(
                f"mpmath input {value!r} is not exact; use quotient_walk for approximations"
            )
        if mpmath.isnan(value):
            raise ValueError("NaN is not a tree value")
        if mpmath.isinf(value):
            raise ValueError(f"Negative values are not part of the tree: {value}")
        result = mpf_to_fraction(value)
    else:
        raise TypeError(f"Unsupported tree value type: {type(value).__name__}")

    if result < 0:
        raise ValueError(f"Negative values are not part of the tree: {value}")

    return result
