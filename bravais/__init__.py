"""
Bravais: Periodic Lattices and Site Occupancy

A Python package for placing and tracking occupants (particles, atoms,
arbitrary hashable values) on the sites of 1-, 2- and 3-dimensional
Bravais lattices under periodic boundary conditions.

Main Components
---------------
core : Core domain models (UnitIndex, Period, UnitCell, Lattice, Population)
utils : Constants and small numerical helpers

Quick Start
-----------
>>> from bravais import Population, UnitIndex, create_lattice
>>>
>>> # 3 x 4 square lattice with unit spacing
>>> lattice = create_lattice('square', side=1.0, period=(3, 4))
>>> lattice.image_of(UnitIndex(4, 10))
UnitIndex(1, 2)
>>>
>>> # Occupy two sites and ask for neighbors
>>> population = Population(lattice)
>>> population.place('A', UnitIndex(0, 0))
>>> population.place('B', UnitIndex(2, 0))   # periodic neighbor of A
>>> population.neighbors_of('A')
['B']

Logging
-------
Modules log through the standard library under the 'bravais' logger,
at DEBUG level only. Enable output with e.g.
``logging.basicConfig(level=logging.DEBUG)``.
"""

__version__ = "0.1.0.dev0"

from .core import (
    # Indexing
    UnitIndex,
    Period,

    # Unit cells
    AbstractUnitCell,
    UnitCellType,
    create_unit_cell,
    unit_cell_from_basis,

    # Lattice
    CoordType,
    Lattice,
    create_lattice,

    # Occupancy
    Population,
)

__all__ = [
    '__version__',
    'UnitIndex',
    'Period',
    'AbstractUnitCell',
    'UnitCellType',
    'create_unit_cell',
    'unit_cell_from_basis',
    'CoordType',
    'Lattice',
    'create_lattice',
    'Population',
]
