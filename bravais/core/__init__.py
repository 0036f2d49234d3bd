"""
Core domain models for the bravais package.

This module contains the fundamental abstractions, leaf first:
- UnitIndex: discrete cell coordinates
- Period: periodic boundary and image reduction
- UnitCell: continuous geometry of one cell and its neighbors
- Lattice: unit cell + period
- Population: occupants placed on lattice sites
"""

from .unit_index import UnitIndex

from .period import Period, contains_coord, image_of_coord

from .unit_cell import (
    AbstractUnitCell,
    UnitCell1D,
    UnitCell2D,
    UnitCell3D,
    unit_cell_from_basis,
    UnitCellType,
    LinearUnitCell,
    SquareUnitCell,
    HexagonalUnitCell,
    CubicUnitCell,
    BCCUnitCell,
    FCCUnitCell,
    UNIT_CELL_REGISTRY,
    create_unit_cell,
)

from .lattice import CoordType, Lattice, create_lattice

from .population import Population

__all__ = [
    # Indexing
    'UnitIndex',
    'Period',
    'contains_coord',
    'image_of_coord',

    # Unit cells
    'AbstractUnitCell',
    'UnitCell1D',
    'UnitCell2D',
    'UnitCell3D',
    'unit_cell_from_basis',
    'UnitCellType',
    'LinearUnitCell',
    'SquareUnitCell',
    'HexagonalUnitCell',
    'CubicUnitCell',
    'BCCUnitCell',
    'FCCUnitCell',
    'UNIT_CELL_REGISTRY',
    'create_unit_cell',

    # Lattice
    'CoordType',
    'Lattice',
    'create_lattice',

    # Occupancy
    'Population',
]
