"""
Utilities: numerical constants and small mathematical helpers.
"""

from .constants import (
    DEFAULT_TOLERANCE,
    SQRT2,
    SQRT3,
    HALF_SQRT3,
)
from .math_utils import (
    is_zero,
    is_positive,
    invert_matrix,
    round_half_away,
    select_one,
)

__all__ = [
    'DEFAULT_TOLERANCE',
    'SQRT2',
    'SQRT3',
    'HALF_SQRT3',
    'is_zero',
    'is_positive',
    'invert_matrix',
    'round_half_away',
    'select_one',
]
