"""
Periodic boundary conditions on the discrete unit cell grid.

A Period holds one positive integer length per dimension. Any absolute
UnitIndex maps onto exactly one canonical periodic image inside the
primary box [0, n_0) x [0, n_1) x ...
"""

import itertools
import operator
from typing import List, Sequence, Tuple

from .unit_index import UnitIndex
from ..utils.constants import MIN_DIMENSIONALITY, MAX_DIMENSIONALITY


def contains_coord(index: int, period: int) -> bool:
    """Return True if 0 <= index < period."""
    return 0 <= index < period


def image_of_coord(index: int, period: int) -> int:
    """
    Reduce one coordinate to its periodic image in [0, period).

    Negative coordinates wrap from the top of the box:

    >>> [image_of_coord(i, 10) for i in (-21, -11, -1, 0, 10, 21)]
    [9, 9, 9, 0, 0, 1]
    """
    # Python's % already takes the sign of the divisor
    return index % period


def _validate_length(length) -> int:
    try:
        length = operator.index(length)
    except TypeError:
        raise ValueError(f"Periodic length must be an integer, got {length!r}") from None

    if length < 1:
        raise ValueError(f"Non-positive periodic dimension: {length}")

    return length


class Period:
    """
    Per-dimension periodic lengths of a lattice.

    Use the factory methods rather than the constructor directly:

    >>> Period.linear(5)
    Period(5)
    >>> Period.box(3, 4).count_sites()
    12

    Parameters
    ----------
    lengths : Sequence[int]
        One to three periodic lengths, each at least 1

    Raises
    ------
    ValueError
        If lengths is not a sequence, the number of lengths is not 1, 2
        or 3, or a length is not a positive integer
    """

    def __init__(self, lengths: Sequence[int]):
        try:
            lengths = tuple(lengths)
        except TypeError:
            raise ValueError(f"Period lengths must be a sequence of integers, "
                             f"got {lengths!r}") from None

        if not MIN_DIMENSIONALITY <= len(lengths) <= MAX_DIMENSIONALITY:
            raise ValueError(f"Invalid period dimensionality: {len(lengths)}. "
                             f"Expected 1 to 3 lengths.")

        self._lengths: Tuple[int, ...] = tuple(_validate_length(n) for n in lengths)

    @classmethod
    def linear(cls, n: int) -> 'Period':
        """One-dimensional period of length n."""
        return cls((n,))

    @classmethod
    def square(cls, n: int) -> 'Period':
        """Two-dimensional n x n period."""
        return cls((n, n))

    @classmethod
    def cubic(cls, n: int) -> 'Period':
        """Three-dimensional n x n x n period."""
        return cls((n, n, n))

    @classmethod
    def box(cls, *lengths: int) -> 'Period':
        """Rectangular period with explicit lengths (1 to 3 of them)."""
        return cls(lengths)

    @classmethod
    def box_nd(cls, n: int, dim: int) -> 'Period':
        """Period of dimensionality dim with length n along every axis."""
        if not MIN_DIMENSIONALITY <= dim <= MAX_DIMENSIONALITY:
            raise ValueError(f"Invalid period dimensionality: {dim}")
        return cls((n,) * dim)

    @classmethod
    def from_list(cls, lengths: Sequence[int]) -> 'Period':
        """Reconstruct from to_list()."""
        return cls(lengths)

    @property
    def dimensionality(self) -> int:
        return len(self._lengths)

    @property
    def lengths(self) -> Tuple[int, ...]:
        return self._lengths

    def period(self, dim: int) -> int:
        """
        Periodic length along one dimension.

        Raises
        ------
        IndexError
            If dim is outside [0, dimensionality)
        """
        if not 0 <= dim < len(self._lengths):
            raise IndexError(f"Invalid period dimension {dim} for "
                             f"{len(self._lengths)}-dimensional period")
        return self._lengths[dim]

    def validate_dimensionality(self, index: UnitIndex) -> None:
        if index.dimensionality != self.dimensionality:
            raise ValueError(f"Inconsistent index dimensionality: {index} "
                             f"for {self.dimensionality}-dimensional period")

    def contains(self, index: UnitIndex) -> bool:
        """True if every coordinate of index lies inside the primary box."""
        self.validate_dimensionality(index)
        return all(contains_coord(c, n) for c, n in zip(index, self._lengths))

    def image_of(self, index: UnitIndex) -> UnitIndex:
        """Canonical periodic image of an absolute index."""
        self.validate_dimensionality(index)
        return UnitIndex(*[image_of_coord(c, n) for c, n in zip(index, self._lengths)])

    def count_sites(self) -> int:
        """Total number of canonical sites (product of the lengths)."""
        count = 1
        for n in self._lengths:
            count *= n
        return count

    def enumerate(self) -> List[UnitIndex]:
        """
        List every canonical site exactly once.

        The first dimension varies fastest, then the second, then the
        third; the result is therefore sorted in UnitIndex order.

        >>> Period.box(2, 3).enumerate()[:3]
        [UnitIndex(0, 0), UnitIndex(1, 0), UnitIndex(0, 1)]
        """
        # product() varies its LAST iterable fastest, so feed it reversed
        ranges = [range(n) for n in reversed(self._lengths)]
        images = [UnitIndex(*coords[::-1]) for coords in itertools.product(*ranges)]

        return images

    def to_list(self) -> List[int]:
        """Serialize to a list of lengths."""
        return list(self._lengths)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self._lengths == other._lengths

    def __hash__(self) -> int:
        return hash(self._lengths)

    def __repr__(self) -> str:
        return f"Period({', '.join(str(n) for n in self._lengths)})"
