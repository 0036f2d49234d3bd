"""
Occupancy of lattice sites.

A Population places arbitrary hashable occupants on the sites of a
Lattice. It keeps two coupled mappings:

- occupant -> ABSOLUTE unit index, exactly as given by the caller
- periodic image -> occupant, invertible (one occupant per image)

Because many absolute indexes share one periodic image, placing an
occupant on an occupied image evicts the previous holder entirely.
"""

import logging
from typing import (Callable, Dict, Generic, Iterable, List, Optional,
                    TypeVar, Union)

import numpy as np
import pandas as pd

from .lattice import Lattice
from .unit_index import UnitIndex

logger = logging.getLogger(__name__)

T = TypeVar('T')

_AXIS_LABELS = ('x', 'y', 'z')


class Population(Generic[T]):
    """
    Bidirectional mapping between occupants and periodic lattice sites.

    Invariants
    ----------
    For every occupant o with absolute index idx:
        occupant_at(idx) == o, i.e. the image of idx maps back to o
    and the number of occupants equals the number of occupied images.

    Parameters
    ----------
    lattice : Lattice
        Shared, read-only lattice the occupants live on

    Notes
    -----
    None marks a missing occupant in every query, so it cannot itself be
    placed. Mutations are not synchronized; callers sharing a Population
    between threads must serialize writers.

    Examples
    --------
    >>> from bravais.core.lattice import create_lattice
    >>> population = Population(create_lattice('square', period=(3, 4)))
    >>> population.place('A', UnitIndex(4, 10)) is None
    True
    >>> population.place('B', UnitIndex(-5, 18))   # same image (1, 2)
    'A'
    >>> population.index_of('A') is None
    True
    """

    def __init__(self, lattice: Lattice):
        if not isinstance(lattice, Lattice):
            raise TypeError("lattice must be a Lattice instance")

        self._lattice = lattice

        # Occupants -> ABSOLUTE unit cell indexes
        self._index_map: Dict[T, UnitIndex] = {}

        # PERIODIC IMAGES of the indexes -> occupants
        self._image_map: Dict[UnitIndex, T] = {}

    @classmethod
    def empty(cls, lattice: Lattice) -> 'Population[T]':
        """Create a population with no occupants."""
        return cls(lattice)

    @property
    def lattice(self) -> Lattice:
        return self._lattice

    def _resolve_index(self, location) -> UnitIndex:
        if isinstance(location, UnitIndex):
            return location
        return self._lattice.unit_cell.index_of(location)

    def _image_of(self, index: UnitIndex) -> UnitIndex:
        return self._lattice.period.image_of(index)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, occupant: T) -> bool:
        """True if the occupant is currently placed."""
        return occupant in self._index_map

    def contains_all(self, occupants: Iterable[T]) -> bool:
        return all(self.contains(occupant) for occupant in occupants)

    def count_occupants(self) -> int:
        return len(self._index_map)

    def is_empty(self) -> bool:
        return not self._index_map

    def is_full(self) -> bool:
        """True if every canonical site is occupied."""
        return self.count_occupants() == self._lattice.count_sites()

    def index_of(self, occupant: T) -> Optional[UnitIndex]:
        """Absolute index of an occupant, or None if it is not placed."""
        return self._index_map.get(occupant)

    def locate(self, occupant: T) -> Optional[np.ndarray]:
        """Real-space position of an occupant, or None if it is not placed."""
        index = self.index_of(occupant)
        if index is None:
            return None
        return self._lattice.unit_cell.point_at(index)

    def list_occupants(self) -> List[T]:
        """Occupants in placement order."""
        return list(self._index_map)

    def map_points(self) -> Dict[T, np.ndarray]:
        """Real-space position of every occupant."""
        unit_cell = self._lattice.unit_cell
        return {occupant: unit_cell.point_at(index)
                for occupant, index in self._index_map.items()}

    def occupant_at(self, location) -> Optional[T]:
        """
        Occupant of the periodic image of a point or index.

        Parameters
        ----------
        location : UnitIndex or array_like
            Absolute index or real-space point; any periodic copy resolves
            to the same occupant

        Returns
        -------
        occupant : T or None
        """
        return self._image_map.get(self._image_of(self._resolve_index(location)))

    def is_occupied(self, location) -> bool:
        return self._image_of(self._resolve_index(location)) in self._image_map

    def neighbors_of(self, occupant: T) -> List[T]:
        """
        Occupants of the nearest-neighbor sites of an occupant.

        Neighbors follow the unit cell's fixed order; vacant neighbor
        sites are skipped. An occupant that is not placed has no neighbors.
        """
        index = self.index_of(occupant)
        if index is None:
            return []

        neighbors = []
        for neighbor_index in self._lattice.unit_cell.get_neighbors(index):
            neighbor = self.occupant_at(neighbor_index)
            if neighbor is not None:
                neighbors.append(neighbor)

        return neighbors

    def unoccupied_neighbors(self, index: UnitIndex) -> List[UnitIndex]:
        """Absolute indexes of the vacant nearest neighbors of a cell."""
        return [neighbor
                for neighbor in self._lattice.unit_cell.get_neighbors(index)
                if not self.is_occupied(neighbor)]

    def to_frame(self) -> pd.DataFrame:
        """
        Tabular snapshot of the population.

        Returns
        -------
        frame : pd.DataFrame
            One row per occupant (placement order) with columns
            'occupant', 'index', 'image' and one coordinate column per
            dimension ('x', 'y', 'z')
        """
        dim = self._lattice.dimensionality
        axes = list(_AXIS_LABELS[:dim])
        unit_cell = self._lattice.unit_cell

        rows = []
        for occupant, index in self._index_map.items():
            row = {
                'occupant': occupant,
                'index': index.to_tuple(),
                'image': self._image_of(index).to_tuple(),
            }
            row.update(zip(axes, unit_cell.point_at(index)))
            rows.append(row)

        return pd.DataFrame(rows, columns=['occupant', 'index', 'image'] + axes)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def place(self, occupant: T, location) -> Optional[T]:
        """
        Place an occupant at a point or absolute index.

        The absolute index is recorded as given. If another occupant holds
        the same periodic image it is evicted: the population forgets it
        completely. An occupant that is already placed elsewhere moves.

        Parameters
        ----------
        occupant : T
            Hashable, not None
        location : UnitIndex or array_like
            Absolute index or real-space point

        Returns
        -------
        previous : T or None
            Previous holder of the periodic image, if any

        Raises
        ------
        ValueError
            If occupant is None or the location has the wrong dimensionality
        """
        if occupant is None:
            raise ValueError("None cannot be placed as a lattice occupant")

        index = self._resolve_index(location)
        image = self._image_of(index)

        previous = self._image_map.get(image)

        # Release the image currently held by a moving occupant
        old_index = self._index_map.get(occupant)
        if old_index is not None:
            old_image = self._image_of(old_index)
            if old_image != image:
                del self._image_map[old_image]

        if previous is not None and previous != occupant:
            del self._index_map[previous]
            logger.debug("Evicted %r from image %s by %r", previous, image, occupant)

        self._image_map[image] = occupant
        self._index_map[occupant] = index

        return previous

    def remove(self, occupant: T) -> None:
        """Remove an occupant; does nothing if it is not placed."""
        index = self._index_map.pop(occupant, None)
        if index is not None:
            del self._image_map[self._image_of(index)]

    def replace(self, old_occupant: T, new_occupant: T) -> None:
        """
        Put new_occupant at the absolute index of old_occupant.

        Raises
        ------
        ValueError
            If old_occupant is not placed
        """
        index = self.index_of(old_occupant)
        if index is None:
            raise ValueError(f"Missing lattice occupant: {old_occupant!r}")

        self.place(new_occupant, index)

    def swap(self, occupant1: T, occupant2: T) -> None:
        """
        Exchange the absolute indexes of two occupants.

        Implemented as two placements; both occupants remain placed since
        distinct occupants always hold distinct images.

        Raises
        ------
        ValueError
            If either occupant is not placed
        """
        index1 = self.index_of(occupant1)
        index2 = self.index_of(occupant2)

        if index1 is None or index2 is None:
            missing = occupant1 if index1 is None else occupant2
            raise ValueError(f"Missing lattice occupant: {missing!r}")

        self.place(occupant1, index2)
        self.place(occupant2, index1)

    def fill(self, source: Union[Callable[[], T], Iterable[T]]) -> None:
        """
        Place one occupant on every canonical site.

        Parameters
        ----------
        source : callable or collection
            A zero-argument callable is invoked once per site in
            Period.enumerate() order. A collection must contain exactly
            count_sites() occupants, which are assigned in iteration order.

        Raises
        ------
        ValueError
            If a collection does not exactly fill the lattice
        """
        images = self._lattice.period.enumerate()

        if callable(source):
            logger.debug("Filling %d sites from supplier", len(images))
            for image in images:
                self.place(source(), image)
            return

        occupants = list(source)
        if len(occupants) != len(images):
            raise ValueError(f"Occupants do not exactly fill the lattice: "
                             f"got {len(occupants)}, expected {len(images)}")

        logger.debug("Filling %d sites from collection", len(images))
        for occupant, image in zip(occupants, images):
            self.place(occupant, image)

    def __contains__(self, occupant) -> bool:
        return self.contains(occupant)

    def __len__(self) -> int:
        return self.count_occupants()

    def __repr__(self) -> str:
        return (f"Population(lattice={self._lattice!r}, "
                f"occupants={self.count_occupants()}/{self._lattice.count_sites()})")
