"""
Core math modules для fraction_tree

Алгебра медиант и источник неполных частных цепных дробей.
"""

# Mediant Algebra
from fraction_tree.core.math.mediant import (
    are_neighbors,
    child_of,
    determinant,
    difference,
    mediant,
)

# Continued Fraction Quotients
from fraction_tree.core.math.continued_fraction import (
    DEFAULT_CF_PRECISION_DPS,
    DEFAULT_QUOTIENT_LIMIT,
    continued_fraction_quotients,
    continued_fraction_quotients_mp,
)

__all__ = [
    # Mediant Algebra: Functions
    "mediant",
    "determinant",
    "are_neighbors",
    "difference",
    "child_of",
    # Continued Fraction: Constants
    "DEFAULT_QUOTIENT_LIMIT",
    "DEFAULT_CF_PRECISION_DPS",
    # Continued Fraction: Functions
    "continued_fraction_quotients",
    "continued_fraction_quotients_mp",
]
