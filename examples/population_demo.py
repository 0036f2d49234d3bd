"""
Population Demo

This example walks through the core abstractions:
- Unit cells (geometry only)
- Lattice (unit cell + period)
- Population (occupants on periodic sites)
"""

import logging
import sys
from pathlib import Path

import numpy as np

# Add bravais to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bravais import (
    Lattice,
    Population,
    UnitCellType,
    UnitIndex,
    create_lattice,
)


def example_unit_cells():
    """Example 1: Preset unit cells."""
    print("="*60)
    print("Example 1: Preset unit cells")
    print("="*60)

    for cell_type in UnitCellType:
        cell = cell_type.create(2.0)
        print(f"\n{cell}")
        print(f"  dimensionality = {cell.dimensionality}")
        print(f"  neighbors      = {cell.count_neighbors()}")
        print(f"  distance       = {cell.get_neighbor_distance():.4f}")

    # Point <-> index on the hexagonal cell
    hexagonal = UnitCellType.HEXAGONAL.create(2.0)
    point = np.array([0.51, 4.32])
    index = hexagonal.index_of(point)
    print(f"\nHexagonal: point {point} lies in cell {index}, "
          f"origin {hexagonal.point_at(index)}")


def example_periodic_images():
    """Example 2: Periodic images on a square lattice."""
    print("\n" + "="*60)
    print("Example 2: Periodic images (square, period 3 x 4)")
    print("="*60)

    lattice = create_lattice('square', side=1.0, period=(3, 4))
    print(f"\nLattice: {lattice}")
    print(f"Sites: {lattice.count_sites()}")

    for coords in [(4, 10), (-5, 18), (6, -3), (-1, -1)]:
        index = UnitIndex(*coords)
        print(f"  image_of({index}) = {lattice.image_of(index)}")

    neighbors = lattice.map_index_neighbors('image')
    print(f"\nImage neighbors of origin: {neighbors[UnitIndex(0, 0)]}")


def example_population():
    """Example 3: Placement, eviction and neighbors."""
    print("\n" + "="*60)
    print("Example 3: Population on a periodic chain")
    print("="*60)

    lattice = create_lattice('linear', side=2.0, period=5)
    population = Population(lattice)
    population.fill('ABCDE')

    print(f"\n{population}")
    for occupant in population.list_occupants():
        print(f"  {occupant}: neighbors {population.neighbors_of(occupant)}")

    # Placing on a periodic copy of A's site evicts A
    previous = population.place('X', UnitIndex(10))
    print(f"\nPlaced X at {population.index_of('X')}, evicted {previous!r}")
    print(f"Occupant at x = 0.0: {population.occupant_at([0.0])}")

    print("\nSnapshot:")
    print(population.to_frame().to_string(index=False))


def example_serialization():
    """Example 4: Dictionary configuration."""
    print("\n" + "="*60)
    print("Example 4: Serialization to dict (for YAML/JSON)")
    print("="*60)

    lattice = create_lattice('fcc', side=2.0, period=(2, 3, 4))
    data = lattice.to_dict()

    print("\nLattice.to_dict():")
    for key, value in data.items():
        print(f"  {key}: {value}")

    restored = Lattice.from_dict(data)
    print(f"\nRestored: {restored}")
    print(f"Equal: {restored == lattice}")


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    example_unit_cells()
    example_periodic_images()
    example_population()
    example_serialization()
