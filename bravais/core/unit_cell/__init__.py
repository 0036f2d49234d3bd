"""
Unit cell geometry module.

This module provides the dimension-specialized unit cell transforms and
the preset Bravais cell shapes.

Available shapes:
- LinearUnitCell: 1D chain, 2 neighbors
- SquareUnitCell: 2D square, 4 neighbors
- HexagonalUnitCell: 2D hexagonal, 6 neighbors
- CubicUnitCell: 3D simple cubic, 6 neighbors
- BCCUnitCell: 3D body-centered cubic, 8 neighbors
- FCCUnitCell: 3D face-centered cubic, 12 neighbors
"""

from .base import (
    AbstractUnitCell,
    UnitCell1D,
    UnitCell2D,
    UnitCell3D,
    unit_cell_from_basis,
)
from .presets import (
    UnitCellType,
    LinearUnitCell,
    SquareUnitCell,
    HexagonalUnitCell,
    CubicUnitCell,
    BCCUnitCell,
    FCCUnitCell,
    UNIT_CELL_REGISTRY,
    create_unit_cell,
    resolve_cell_type,
)

__all__ = [
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
    'resolve_cell_type',
]
