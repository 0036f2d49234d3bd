"""
Base classes for Bravais lattice unit cells.

A unit cell is defined by its primitive (basis) vectors. It converts
between continuous-space points and discrete UnitIndex coordinates and
knows the integer translation vectors that reach its nearest neighbors.

The family is closed: one class per supported dimensionality, each with
its transform coefficients precomputed at construction:
- UnitCell1D: a single scale factor
- UnitCell2D: closed-form 2x2 inverse
- UnitCell3D: 3x3 inverse from numpy

Concrete cell shapes live in presets.py.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..unit_index import UnitIndex
from ...utils.math_utils import (
    invert_matrix,
    is_positive,
    round_half_away,
    select_one,
)

logger = logging.getLogger(__name__)


class AbstractUnitCell(ABC):
    """
    Abstract base class for unit cells.

    Parameters
    ----------
    basis : Sequence of vectors
        Primitive vectors [a1, a2, ...], one per dimension, each with one
        component per dimension. Rows are vectors; internally they form
        the COLUMNS of the basis matrix, so that

            point = basis_matrix @ index
            index = round(inverse_matrix @ point)

    translation_vectors : Sequence[UnitIndex]
        Integer translations from a cell to each of its nearest neighbors,
        in a fixed order
    neighbor_distance : float
        Euclidean distance between neighboring cell origins

    Raises
    ------
    ValueError
        If the basis has the wrong shape, is degenerate, or a translation
        vector has the wrong dimensionality
    """

    def __init__(self,
                 basis: Sequence[Sequence[float]],
                 translation_vectors: Sequence[UnitIndex],
                 neighbor_distance: float):
        basis = self.validate_basis(basis, self.dimensionality)

        translation_vectors = tuple(translation_vectors)
        for vector in translation_vectors:
            if vector.dimensionality != self.dimensionality:
                raise ValueError(f"Inconsistent translation vector dimensionality: "
                                 f"{vector} for {self.dimensionality}-dimensional cell")

        if not is_positive(neighbor_distance):
            raise ValueError(f"Neighbor distance must be positive, got {neighbor_distance}")

        self._basis = basis
        self._basis_matrix = basis.T.copy()
        self._inverse_matrix = invert_matrix(self._basis_matrix)
        self._translation_vectors = translation_vectors
        self._neighbor_distance = float(neighbor_distance)

    @staticmethod
    def validate_basis(basis: Sequence[Sequence[float]], dimensionality: int) -> np.ndarray:
        """
        Check the number and length of basis vectors.

        Returns
        -------
        basis : np.ndarray, shape (dimensionality, dimensionality)
            Basis vectors as rows
        """
        vectors = [np.atleast_1d(np.asarray(vector, dtype=float)) for vector in basis]

        if len(vectors) != dimensionality:
            raise ValueError(f"Inconsistent number of basis vectors: expected "
                             f"{dimensionality}, got {len(vectors)}")

        for vector in vectors:
            if vector.ndim != 1 or vector.shape[0] != dimensionality:
                raise ValueError(f"Inconsistent basis vector dimensionality: {vector}")

        return np.array(vectors)

    @staticmethod
    def validate_side(side: float) -> None:
        if not is_positive(side):
            raise ValueError(f"Non-positive side length: {side}")

    @property
    @abstractmethod
    def dimensionality(self) -> int:
        """Number of spatial dimensions."""
        pass

    @abstractmethod
    def _transform_to_index(self, point: np.ndarray) -> np.ndarray:
        """Fractional cell coordinates of a point (inverse transform)."""
        pass

    @abstractmethod
    def _transform_to_point(self, coords: Sequence[int]) -> np.ndarray:
        """Continuous-space location of integer cell coordinates."""
        pass

    def validate_point(self, point) -> np.ndarray:
        point = np.atleast_1d(np.asarray(point, dtype=float))
        if point.ndim != 1 or point.shape[0] != self.dimensionality:
            raise ValueError(f"Inconsistent point dimensionality: {point} "
                             f"for {self.dimensionality}-dimensional cell")
        return point

    def validate_index(self, index: UnitIndex) -> None:
        if index.dimensionality != self.dimensionality:
            raise ValueError(f"Inconsistent index dimensionality: {index} "
                             f"for {self.dimensionality}-dimensional cell")

    def index_of(self, point) -> UnitIndex:
        """
        Index of the cell whose origin is nearest (in cell coordinates) to a point.

        Each fractional coordinate is rounded to the nearest integer, ties
        away from zero.

        Parameters
        ----------
        point : array_like, shape (dimensionality,)
            Position in real space

        Returns
        -------
        index : UnitIndex
        """
        fractional = self._transform_to_index(self.validate_point(point))
        return UnitIndex(*[round_half_away(x) for x in fractional])

    def point_at(self, index: UnitIndex) -> np.ndarray:
        """
        Real-space location of a cell origin.

        Parameters
        ----------
        index : UnitIndex

        Returns
        -------
        point : np.ndarray, shape (dimensionality,)
            sum_i index[i] * a_i
        """
        self.validate_index(index)
        return self._transform_to_point(index.to_tuple())

    def get_neighbors(self, index: UnitIndex) -> List[UnitIndex]:
        """
        Absolute indexes of the nearest neighbors of a cell.

        The neighbors follow the fixed order of the translation vectors.
        """
        self.validate_index(index)
        return [index.plus(vector) for vector in self._translation_vectors]

    def count_neighbors(self) -> int:
        """Coordination number of the cell."""
        return len(self._translation_vectors)

    def get_neighbor_distance(self) -> float:
        """Distance between nearest-neighbor cell origins."""
        return self._neighbor_distance

    def select_neighbor(self,
                        index: UnitIndex,
                        rng: Optional[np.random.Generator] = None) -> UnitIndex:
        """
        Pick one nearest neighbor uniformly at random.

        Parameters
        ----------
        index : UnitIndex
            Cell whose neighbor is selected
        rng : np.random.Generator, optional
            Random source; pass a seeded generator for reproducibility
        """
        self.validate_index(index)
        return index.plus(select_one(self._translation_vectors, rng))

    @property
    def translation_vectors(self) -> tuple:
        """Nearest-neighbor translation vectors in their fixed order."""
        return self._translation_vectors

    @property
    def basis(self) -> np.ndarray:
        """Primitive vectors as rows (a copy)."""
        return self._basis.copy()

    @property
    def basis_matrix(self) -> np.ndarray:
        """Primitive vectors as columns (a copy)."""
        return self._basis_matrix.copy()

    @property
    def inverse_matrix(self) -> np.ndarray:
        """Inverse of basis_matrix (a copy)."""
        return self._inverse_matrix.copy()

    def to_dict(self) -> Dict:
        """
        Serialize to dictionary.

        Returns
        -------
        data : Dict
            Explicit basis, translation vectors and neighbor distance.
            Preset cells override this with their compact {type, side} form.
        """
        return {
            'basis': self._basis.tolist(),
            'translation_vectors': [list(vector) for vector in self._translation_vectors],
            'neighbor_distance': self._neighbor_distance,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, AbstractUnitCell):
            return NotImplemented
        return (type(self) is type(other)
                and np.array_equal(self._basis, other._basis)
                and self._translation_vectors == other._translation_vectors
                and self._neighbor_distance == other._neighbor_distance)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._basis.tobytes(), self._translation_vectors))

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return (f"{name}(dim={self.dimensionality}, "
                f"neighbors={self.count_neighbors()}, "
                f"distance={self._neighbor_distance:.3f})")


class UnitCell1D(AbstractUnitCell):
    """One-dimensional cell: the transform is a single scale factor."""

    def __init__(self, basis, translation_vectors, neighbor_distance):
        super().__init__(basis, translation_vectors, neighbor_distance)
        self._p = self._basis_matrix[0, 0]
        self._inv = self._inverse_matrix[0, 0]

    @property
    def dimensionality(self) -> int:
        return 1

    def _transform_to_index(self, point):
        return (self._inv * point[0],)

    def _transform_to_point(self, coords):
        return np.array([self._p * coords[0]])


class UnitCell2D(AbstractUnitCell):
    """
    Two-dimensional cell.

    The basis matrix and its inverse are expanded into scalar coefficients
    for the point <-> index translations.
    """

    def __init__(self, basis, translation_vectors, neighbor_distance):
        super().__init__(basis, translation_vectors, neighbor_distance)

        # The basis vectors form the COLUMNS of the basis matrix; the base
        # class has already rejected a singular matrix
        (p11, p12), (p21, p22) = self._basis_matrix
        det = p11 * p22 - p12 * p21

        self._p = (p11, p12, p21, p22)
        self._inv = (p22 / det, -p12 / det, -p21 / det, p11 / det)

        if not np.allclose(self._inverse_matrix, np.reshape(self._inv, (2, 2))):
            raise RuntimeError("Invalid primitive matrix inverse")

    @property
    def dimensionality(self) -> int:
        return 2

    def _transform_to_index(self, point):
        inv11, inv12, inv21, inv22 = self._inv
        x, y = point
        return (inv11 * x + inv12 * y,
                inv21 * x + inv22 * y)

    def _transform_to_point(self, coords):
        p11, p12, p21, p22 = self._p
        i, j = coords
        return np.array([p11 * i + p12 * j,
                         p21 * i + p22 * j])


class UnitCell3D(AbstractUnitCell):
    """Three-dimensional cell with a precomputed 3x3 inverse."""

    def __init__(self, basis, translation_vectors, neighbor_distance):
        super().__init__(basis, translation_vectors, neighbor_distance)
        self._p = tuple(self._basis_matrix.ravel())
        self._inv = tuple(self._inverse_matrix.ravel())

    @property
    def dimensionality(self) -> int:
        return 3

    def _transform_to_index(self, point):
        inv11, inv12, inv13, inv21, inv22, inv23, inv31, inv32, inv33 = self._inv
        x, y, z = point
        return (inv11 * x + inv12 * y + inv13 * z,
                inv21 * x + inv22 * y + inv23 * z,
                inv31 * x + inv32 * y + inv33 * z)

    def _transform_to_point(self, coords):
        p11, p12, p13, p21, p22, p23, p31, p32, p33 = self._p
        i, j, k = coords
        return np.array([p11 * i + p12 * j + p13 * k,
                         p21 * i + p22 * j + p23 * k,
                         p31 * i + p32 * j + p33 * k])


_CELLS_BY_DIMENSION = {
    1: UnitCell1D,
    2: UnitCell2D,
    3: UnitCell3D,
}


def unit_cell_from_basis(basis: Sequence[Sequence[float]],
                         translation_vectors: Sequence[UnitIndex],
                         neighbor_distance: float) -> AbstractUnitCell:
    """
    Create a unit cell of the matching dimensionality from an explicit basis.

    Parameters
    ----------
    basis : Sequence of vectors
        Primitive vectors, one per dimension
    translation_vectors : Sequence[UnitIndex]
        Nearest-neighbor translations
    neighbor_distance : float
        Nearest-neighbor distance

    Examples
    --------
    >>> cell = unit_cell_from_basis([[2.0, 0.0], [0.0, 1.0]],
    ...                             [UnitIndex(0, -1), UnitIndex(0, 1)], 1.0)
    >>> cell.dimensionality
    2

    Raises
    ------
    ValueError
        If the basis size is not 1, 2 or 3 or the basis is invalid
    """
    dim = len(basis)
    if dim not in _CELLS_BY_DIMENSION:
        raise ValueError(f"Invalid basis size: {dim}. Expected 1 to 3 vectors.")

    cell = _CELLS_BY_DIMENSION[dim](basis, translation_vectors, neighbor_distance)
    logger.debug("Created %s from explicit basis", cell)
    return cell
