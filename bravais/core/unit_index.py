"""
Discrete unit cell coordinates.

A UnitIndex identifies one cell of a Bravais lattice by its integer
coordinates along the primitive vectors. Indexes are immutable values
of dimensionality 1, 2 or 3.
"""

import operator
from functools import total_ordering
from typing import Iterable, Tuple, Union

import numpy as np

from ..utils.constants import MIN_DIMENSIONALITY, MAX_DIMENSIONALITY


@total_ordering
class UnitIndex:
    """
    Immutable integer coordinate tuple of a lattice unit cell.

    Ordering
    --------
    Indexes are ordered by dimensionality first, then by their coordinates
    taken from the highest dimension down to the lowest, so the LAST
    coordinate is the primary sort key:

        UnitIndex(1, 1, 0) < UnitIndex(1, 0, 1) < UnitIndex(0, 1, 1)

    With this ordering the canonical sites produced by Period.enumerate()
    (first dimension varying fastest) come out sorted.

    Parameters
    ----------
    *coords : int
        One to three integer coordinates

    Examples
    --------
    >>> index = UnitIndex(4, 10)
    >>> index.coord(1)
    10
    >>> index + UnitIndex(1, -1)
    UnitIndex(5, 9)
    >>> 2 * index
    UnitIndex(8, 20)
    """

    __slots__ = ('_coords',)

    def __init__(self, *coords: int):
        if not MIN_DIMENSIONALITY <= len(coords) <= MAX_DIMENSIONALITY:
            raise ValueError(f"Invalid index coordinates: {list(coords)}. "
                             f"Expected 1 to 3 integers.")

        # operator.index rejects floats and other non-integral values
        object.__setattr__(self, '_coords', tuple(operator.index(c) for c in coords))

    @classmethod
    def at(cls, *coords: Union[int, Iterable[int]]) -> 'UnitIndex':
        """
        Create an index from explicit coordinates or from a single array.

        >>> UnitIndex.at(3, 5) == UnitIndex.at([3, 5])
        True
        """
        if len(coords) == 1 and not isinstance(coords[0], (int, np.integer)):
            return cls.from_array(coords[0])
        return cls(*coords)

    @classmethod
    def from_array(cls, coords: Iterable[int]) -> 'UnitIndex':
        """Create an index from an integer array or sequence."""
        return cls(*[operator.index(c) for c in np.asarray(coords).ravel()])

    @classmethod
    def origin(cls, dim: int) -> 'UnitIndex':
        """Return the all-zero index of the given dimensionality."""
        if not MIN_DIMENSIONALITY <= dim <= MAX_DIMENSIONALITY:
            raise ValueError(f"Invalid dimensionality: {dim}")
        return cls(*([0] * dim))

    def __setattr__(self, name, value):
        raise AttributeError("UnitIndex is immutable")

    @property
    def dimensionality(self) -> int:
        """Number of coordinates."""
        return len(self._coords)

    def coord(self, dim: int) -> int:
        """
        Return the coordinate along one dimension.

        Raises
        ------
        IndexError
            If dim is outside [0, dimensionality)
        """
        if not 0 <= dim < len(self._coords):
            raise IndexError(f"Invalid index dimension {dim} for "
                             f"{len(self._coords)}-dimensional index")
        return self._coords[dim]

    def plus(self, other: 'UnitIndex') -> 'UnitIndex':
        """
        Elementwise sum of two indexes.

        Raises
        ------
        ValueError
            If the dimensionalities differ
        """
        if not isinstance(other, UnitIndex):
            raise TypeError(f"Expected UnitIndex, got {type(other).__name__}")

        if other.dimensionality != self.dimensionality:
            raise ValueError(f"Inconsistent index dimensionality: "
                             f"{self.dimensionality} vs {other.dimensionality}")

        return UnitIndex(*[a + b for a, b in zip(self._coords, other._coords)])

    def times(self, scalar: int) -> 'UnitIndex':
        """Elementwise product with an integer scalar."""
        scalar = operator.index(scalar)
        return UnitIndex(*[scalar * c for c in self._coords])

    def to_array(self) -> np.ndarray:
        """Coordinates as an integer numpy array."""
        return np.array(self._coords, dtype=int)

    def to_tuple(self) -> Tuple[int, ...]:
        return self._coords

    def _sort_key(self) -> Tuple[int, Tuple[int, ...]]:
        return len(self._coords), self._coords[::-1]

    def __add__(self, other):
        if not isinstance(other, UnitIndex):
            return NotImplemented
        return self.plus(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, (int, np.integer)) or isinstance(scalar, bool):
            return NotImplemented
        return self.times(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> 'UnitIndex':
        return self.times(-1)

    def __eq__(self, other) -> bool:
        if not isinstance(other, UnitIndex):
            return NotImplemented
        return self._coords == other._coords

    def __lt__(self, other) -> bool:
        if not isinstance(other, UnitIndex):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._coords)

    def __iter__(self):
        return iter(self._coords)

    def __reduce__(self):
        return (UnitIndex, self._coords)

    def __repr__(self) -> str:
        return f"UnitIndex({', '.join(str(c) for c in self._coords)})"
