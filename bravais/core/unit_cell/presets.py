"""
Preset unit cells for the common Bravais lattices.

This module provides the closed set of concrete cell shapes:
- LinearUnitCell (1D)
- SquareUnitCell, HexagonalUnitCell (2D)
- CubicUnitCell, BCCUnitCell, FCCUnitCell (3D)

Each shape carries a fixed literal table of nearest-neighbor translation
vectors. The table order defines the order of get_neighbors().
"""

from enum import Enum
from functools import lru_cache
from typing import Dict, Union

from .base import AbstractUnitCell, UnitCell1D, UnitCell2D, UnitCell3D
from ..unit_index import UnitIndex
from ...utils.constants import HALF_SQRT3, SQRT2


class UnitCellType(Enum):
    """
    Tag of a preset cell shape.

    Examples
    --------
    >>> UnitCellType.FCC.create(2.0).count_neighbors()
    12
    >>> UnitCellType('hexagonal').dimensionality
    2
    """

    LINEAR = 'linear'
    SQUARE = 'square'
    HEXAGONAL = 'hexagonal'
    CUBIC = 'cubic'
    BCC = 'bcc'
    FCC = 'fcc'

    @property
    def dimensionality(self) -> int:
        return UNIT_CELL_REGISTRY[self].DIMENSIONALITY

    def create(self, side: float) -> AbstractUnitCell:
        """Create a cell of this shape with the given side length."""
        return UNIT_CELL_REGISTRY[self](side)

    def fundamental(self) -> AbstractUnitCell:
        """The shared cell of this shape with unit side length."""
        return _fundamental_cell(self)


class _PresetMixin:
    """Side length bookkeeping shared by the preset shapes."""

    CELL_TYPE: UnitCellType

    @property
    def side(self) -> float:
        return self._side

    @property
    def cell_type(self) -> UnitCellType:
        return self.CELL_TYPE

    def to_dict(self) -> Dict:
        return {'type': self.CELL_TYPE.value, 'side': self._side}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(side={self._side:.3f})"


class LinearUnitCell(_PresetMixin, UnitCell1D):
    """
    One-dimensional chain.

    Geometry
    --------
    a1 = [s]
    Neighbors: (-1), (1) at distance s
    """

    CELL_TYPE = UnitCellType.LINEAR
    DIMENSIONALITY = 1
    TRANSLATION_VECTORS = (
        UnitIndex(-1),
        UnitIndex(1),
    )

    def __init__(self, side: float = 1.0):
        self.validate_side(side)
        self._side = float(side)
        super().__init__([[side]], self.TRANSLATION_VECTORS, side)


class SquareUnitCell(_PresetMixin, UnitCell2D):
    """
    Square lattice cell.

    Geometry
    --------
    a1 = s * [1, 0]
    a2 = s * [0, 1]
    4 nearest neighbors at distance s
    """

    CELL_TYPE = UnitCellType.SQUARE
    DIMENSIONALITY = 2
    TRANSLATION_VECTORS = (
        UnitIndex( 0, -1),
        UnitIndex(-1,  0),
        UnitIndex( 1,  0),
        UnitIndex( 0,  1),
    )

    def __init__(self, side: float = 1.0):
        self.validate_side(side)
        self._side = float(side)
        super().__init__([[side, 0.0],
                          [0.0, side]],
                         self.TRANSLATION_VECTORS, side)


class HexagonalUnitCell(_PresetMixin, UnitCell2D):
    """
    Hexagonal (triangular) lattice cell.

    Geometry
    --------
    a1 = s * [1, 0]
    a2 = s * [-1/2, √3/2]

    The 120° angle between a1 and a2 makes (1, 1) a nearest neighbor:
    a1 + a2 = s * [1/2, √3/2]. Six nearest neighbors at distance s.
    """

    CELL_TYPE = UnitCellType.HEXAGONAL
    DIMENSIONALITY = 2
    TRANSLATION_VECTORS = (
        UnitIndex(-1, -1),
        UnitIndex( 0, -1),
        UnitIndex(-1,  0),
        UnitIndex( 1,  0),
        UnitIndex( 0,  1),
        UnitIndex( 1,  1),
    )

    def __init__(self, side: float = 1.0):
        self.validate_side(side)
        self._side = float(side)
        super().__init__([[side, 0.0],
                          [-0.5 * side, HALF_SQRT3 * side]],
                         self.TRANSLATION_VECTORS, side)


class CubicUnitCell(_PresetMixin, UnitCell3D):
    """
    Simple cubic cell.

    Geometry
    --------
    a1 = s * [1, 0, 0]
    a2 = s * [0, 1, 0]
    a3 = s * [0, 0, 1]
    6 nearest neighbors at distance s
    """

    CELL_TYPE = UnitCellType.CUBIC
    DIMENSIONALITY = 3
    TRANSLATION_VECTORS = (
        UnitIndex( 0,  0, -1),
        UnitIndex( 0, -1,  0),
        UnitIndex(-1,  0,  0),
        UnitIndex( 1,  0,  0),
        UnitIndex( 0,  1,  0),
        UnitIndex( 0,  0,  1),
    )

    def __init__(self, side: float = 1.0):
        self.validate_side(side)
        self._side = float(side)
        super().__init__([[side, 0.0, 0.0],
                          [0.0, side, 0.0],
                          [0.0, 0.0, side]],
                         self.TRANSLATION_VECTORS, side)


class BCCUnitCell(_PresetMixin, UnitCell3D):
    """
    Body-centered cubic cell.

    Geometry
    --------
    Primitive vectors for a conventional cube of side s:
        a1 = s/2 * [ 1,  1, -1]
        a2 = s/2 * [-1,  1,  1]
        a3 = s/2 * [ 1, -1,  1]

    8 nearest neighbors (the cube corners seen from the body center)
    at distance s√3/2.
    """

    CELL_TYPE = UnitCellType.BCC
    DIMENSIONALITY = 3
    TRANSLATION_VECTORS = (
        UnitIndex(-1, -1, -1),
        UnitIndex( 0,  0, -1),
        UnitIndex( 0, -1,  0),
        UnitIndex(-1,  0,  0),
        UnitIndex( 1,  0,  0),
        UnitIndex( 0,  1,  0),
        UnitIndex( 0,  0,  1),
        UnitIndex( 1,  1,  1),
    )

    def __init__(self, side: float = 1.0):
        self.validate_side(side)
        self._side = float(side)
        half = 0.5 * side
        super().__init__([[ half,  half, -half],
                          [-half,  half,  half],
                          [ half, -half,  half]],
                         self.TRANSLATION_VECTORS, HALF_SQRT3 * side)


class FCCUnitCell(_PresetMixin, UnitCell3D):
    """
    Face-centered cubic cell.

    Geometry
    --------
    Primitive vectors for a conventional cube of side s:
        a1 = s/2 * [0, 1, 1]
        a2 = s/2 * [1, 0, 1]
        a3 = s/2 * [1, 1, 0]

    12 nearest neighbors at distance s/√2.
    """

    CELL_TYPE = UnitCellType.FCC
    DIMENSIONALITY = 3
    TRANSLATION_VECTORS = (
        UnitIndex( 0,  0, -1),
        UnitIndex( 1,  0, -1),
        UnitIndex( 0,  1, -1),
        UnitIndex( 0, -1,  0),
        UnitIndex( 1, -1,  0),
        UnitIndex(-1,  0,  0),
        UnitIndex( 1,  0,  0),
        UnitIndex(-1,  1,  0),
        UnitIndex( 0,  1,  0),
        UnitIndex( 0, -1,  1),
        UnitIndex(-1,  0,  1),
        UnitIndex( 0,  0,  1),
    )

    def __init__(self, side: float = 1.0):
        self.validate_side(side)
        self._side = float(side)
        half = 0.5 * side
        super().__init__([[0.0, half, half],
                          [half, 0.0, half],
                          [half, half, 0.0]],
                         self.TRANSLATION_VECTORS, side / SQRT2)


# Unit cell registry for config-based construction
UNIT_CELL_REGISTRY = {
    UnitCellType.LINEAR: LinearUnitCell,
    UnitCellType.SQUARE: SquareUnitCell,
    UnitCellType.HEXAGONAL: HexagonalUnitCell,
    UnitCellType.CUBIC: CubicUnitCell,
    UnitCellType.BCC: BCCUnitCell,
    UnitCellType.FCC: FCCUnitCell,
}


@lru_cache(maxsize=None)
def _fundamental_cell(cell_type: UnitCellType) -> AbstractUnitCell:
    return UNIT_CELL_REGISTRY[cell_type](1.0)


def resolve_cell_type(cell_type: Union[str, UnitCellType]) -> UnitCellType:
    """
    Convert a shape name (case-insensitive) or enum member to UnitCellType.

    Raises
    ------
    ValueError
        If the name is not recognized
    """
    if isinstance(cell_type, UnitCellType):
        return cell_type

    try:
        return UnitCellType(str(cell_type).strip().lower())
    except ValueError:
        available = ', '.join(member.value for member in UnitCellType)
        raise ValueError(f"Unknown unit cell type '{cell_type}'. "
                         f"Available types: {available}") from None


def create_unit_cell(cell_type: Union[str, UnitCellType], side: float = 1.0) -> AbstractUnitCell:
    """
    Factory function to create unit cells from shape names.

    Parameters
    ----------
    cell_type : str or UnitCellType
        Shape ('linear', 'square', 'hexagonal', 'cubic', 'bcc', 'fcc')
    side : float, optional
        Side length (default: 1.0)

    Returns
    -------
    cell : AbstractUnitCell
        Instantiated unit cell

    Examples
    --------
    >>> cell = create_unit_cell('BCC', side=2.0)
    >>> isinstance(cell, BCCUnitCell)
    True

    Raises
    ------
    ValueError
        If cell_type is not recognized or side is not positive
    """
    return resolve_cell_type(cell_type).create(side)
