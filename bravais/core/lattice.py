"""
Periodic Bravais lattice: one unit cell plus one period.

The Lattice composes the continuous geometry of a UnitCell with the
discrete periodic boundary of a Period of the same dimensionality.
Everything it reports is a pure function of those two components.
"""

import logging
import operator
from enum import Enum
from typing import Dict, List, Sequence, Union

import numpy as np

from .period import Period
from .unit_cell import AbstractUnitCell, create_unit_cell, unit_cell_from_basis
from .unit_index import UnitIndex

logger = logging.getLogger(__name__)


class CoordType(Enum):
    """How neighbor coordinates are reported by Lattice.map_index_neighbors()."""

    ABSOLUTE = 'absolute'
    IMAGE = 'image'


class Lattice:
    """
    Finite periodic Bravais lattice.

    Parameters
    ----------
    unit_cell : AbstractUnitCell
        Geometry of a single cell
    period : Period
        Periodic lengths, one per dimension

    Raises
    ------
    TypeError
        If the components have the wrong types
    ValueError
        If the cell and period dimensionalities differ

    Examples
    --------
    >>> from bravais.core.unit_cell import SquareUnitCell
    >>> lattice = Lattice(SquareUnitCell(1.0), Period.box(3, 4))
    >>> lattice.count_sites()
    12
    >>> lattice.image_of(UnitIndex(-1, -1))
    UnitIndex(2, 3)
    """

    def __init__(self, unit_cell: AbstractUnitCell, period: Period):
        if not isinstance(unit_cell, AbstractUnitCell):
            raise TypeError("unit_cell must be an AbstractUnitCell instance")

        if not isinstance(period, Period):
            raise TypeError("period must be a Period instance")

        if unit_cell.dimensionality != period.dimensionality:
            raise ValueError(f"Inconsistent unit cell and period dimensionality: "
                             f"{unit_cell.dimensionality} vs {period.dimensionality}")

        self._unit_cell = unit_cell
        self._period = period

        logger.debug("Created lattice %s with %d sites", self, period.count_sites())

    @classmethod
    def create(cls, unit_cell: AbstractUnitCell, period: Period) -> 'Lattice':
        return cls(unit_cell, period)

    @property
    def unit_cell(self) -> AbstractUnitCell:
        return self._unit_cell

    @property
    def period(self) -> Period:
        return self._period

    @property
    def dimensionality(self) -> int:
        return self._unit_cell.dimensionality

    def count_sites(self) -> int:
        """Number of canonical sites."""
        return self._period.count_sites()

    def contains(self, point) -> bool:
        """
        True if the cell containing point lies inside the primary box.

        The ABSOLUTE cell index is tested, not its periodic image.
        """
        return self._period.contains(self._unit_cell.index_of(point))

    def image_of(self, location: Union[UnitIndex, Sequence[float], np.ndarray]):
        """
        Periodic image of an index or a point.

        Parameters
        ----------
        location : UnitIndex or array_like
            Absolute cell index, or a real-space point

        Returns
        -------
        image : UnitIndex or np.ndarray
            Canonical index for an index argument; for a point, the
            real-space origin of the canonical cell containing it
        """
        if isinstance(location, UnitIndex):
            return self._period.image_of(location)

        index = self._unit_cell.index_of(location)
        return self._unit_cell.point_at(self._period.image_of(index))

    def list_points(self) -> List[np.ndarray]:
        """Real-space origins of all canonical sites, in enumeration order."""
        return [self._unit_cell.point_at(index) for index in self._period.enumerate()]

    def list_neighbors(self, point) -> List[np.ndarray]:
        """
        Real-space origins of the nearest neighbors of the cell containing point.

        Neighbors are absolute (not reduced to periodic images) and follow
        the unit cell's fixed neighbor order.
        """
        index = self._unit_cell.index_of(point)
        return [self._unit_cell.point_at(neighbor)
                for neighbor in self._unit_cell.get_neighbors(index)]

    def list_neighbor_images(self, index: UnitIndex) -> List[UnitIndex]:
        """Periodic images of the nearest neighbors of a cell."""
        return [self._period.image_of(neighbor)
                for neighbor in self._unit_cell.get_neighbors(index)]

    def map_index_neighbors(self,
                            coord_type: Union[CoordType, str] = CoordType.ABSOLUTE
                            ) -> Dict[UnitIndex, List[UnitIndex]]:
        """
        Neighbor lists of every canonical site.

        Parameters
        ----------
        coord_type : CoordType or str
            ABSOLUTE reports neighbors as unreduced indexes;
            IMAGE reports their periodic images

        Returns
        -------
        neighbors : Dict[UnitIndex, List[UnitIndex]]
            Keys follow Period.enumerate() order; each list follows the
            unit cell's neighbor order

        Raises
        ------
        ValueError
            If coord_type is not recognized
        """
        try:
            coord_type = CoordType(coord_type)
        except ValueError:
            available = ', '.join(member.value for member in CoordType)
            raise ValueError(f"Unknown coordinate type: {coord_type!r}. "
                             f"Available types: {available}") from None

        if coord_type is CoordType.ABSOLUTE:
            neighbors_of = self._unit_cell.get_neighbors
        else:
            neighbors_of = self.list_neighbor_images

        return {index: neighbors_of(index) for index in self._period.enumerate()}

    def to_dict(self) -> Dict:
        """
        Serialize to dictionary.

        Returns
        -------
        data : Dict
            {'unit_cell': {...}, 'period': [n1, n2, ...]}
        """
        return {
            'unit_cell': self._unit_cell.to_dict(),
            'period': self._period.to_list(),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Lattice':
        """
        Reconstruct from dictionary.

        The unit cell entry is either a preset ({'type', 'side'}) or an
        explicit basis ({'basis', 'translation_vectors', 'neighbor_distance'}).

        Examples
        --------
        >>> lattice = Lattice.from_dict({'unit_cell': {'type': 'square', 'side': 1.0},
        ...                              'period': [3, 4]})
        >>> lattice.period
        Period(3, 4)

        Raises
        ------
        ValueError
            If required keys are missing or values are invalid
        """
        if 'unit_cell' not in data or 'period' not in data:
            raise ValueError(f"Lattice configuration requires 'unit_cell' and 'period' "
                             f"entries, got keys {sorted(data)}")

        cell_data = data['unit_cell']

        if 'type' in cell_data:
            unit_cell = create_unit_cell(cell_data['type'], cell_data.get('side', 1.0))
        elif 'basis' in cell_data:
            if 'neighbor_distance' not in cell_data:
                raise ValueError("Explicit basis configuration requires a "
                                 "'neighbor_distance' entry")
            unit_cell = unit_cell_from_basis(
                cell_data['basis'],
                [UnitIndex.at(vector) for vector in cell_data.get('translation_vectors', [])],
                cell_data['neighbor_distance'],
            )
        else:
            raise ValueError("Unit cell configuration requires a 'type' or a 'basis' entry")

        return cls(unit_cell, Period.from_list(data['period']))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Lattice):
            return NotImplemented
        return self._unit_cell == other._unit_cell and self._period == other._period

    def __hash__(self) -> int:
        return hash((self._unit_cell, self._period))

    def __repr__(self) -> str:
        return f"Lattice({self._unit_cell!r}, {self._period!r})"


def create_lattice(cell_type, side: float = 1.0,
                   period: Union[int, Sequence[int]] = 1) -> Lattice:
    """
    Factory function to create lattices from a shape name and a period.

    Parameters
    ----------
    cell_type : str or UnitCellType
        Shape name ('linear', 'square', 'hexagonal', 'cubic', 'bcc', 'fcc')
    side : float, optional
        Unit cell side length (default: 1.0)
    period : int or Sequence[int]
        A single length (same along every axis of the cell) or one
        length per dimension

    Examples
    --------
    >>> lattice = create_lattice('square', side=1.0, period=(3, 4))
    >>> lattice.image_of(UnitIndex(4, 10))
    UnitIndex(1, 2)
    >>> create_lattice('fcc', period=4).count_sites()
    64
    """
    unit_cell = create_unit_cell(cell_type, side)

    try:
        n = operator.index(period)
    except TypeError:
        return Lattice(unit_cell, Period(period))

    return Lattice(unit_cell, Period.box_nd(n, unit_cell.dimensionality))
