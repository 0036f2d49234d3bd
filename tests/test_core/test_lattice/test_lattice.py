"""
Unit tests for Lattice.

Tests the composition of a unit cell with a period:
- Canonical site points and enumeration order
- Containment and periodic images of points and indexes
- Neighbor lists (absolute and periodic images)
- Dictionary configuration round-trip and factory construction
"""

import numpy as np
import pytest
from bravais.core import (
    CoordType,
    HexagonalUnitCell,
    Lattice,
    LinearUnitCell,
    Period,
    SquareUnitCell,
    UnitIndex,
    create_lattice,
    unit_cell_from_basis,
)


def assert_points(actual, expected):
    assert len(actual) == len(expected)
    for point, target in zip(actual, expected):
        assert np.allclose(point, target, rtol=0.0, atol=1.0e-12)


class TestLatticeCreation:
    """Test construction and validation."""

    def test_components(self):
        """Test that the lattice exposes its cell and period."""
        cell = SquareUnitCell(2.5)
        period = Period.box(8, 4)
        lattice = Lattice(cell, period)

        assert lattice.unit_cell is cell
        assert lattice.period is period
        assert lattice.dimensionality == 2
        assert lattice.count_sites() == 32

    def test_create(self):
        """Test the create() alias."""
        assert Lattice.create(LinearUnitCell(2.0), Period.linear(5)) == \
            Lattice(LinearUnitCell(2.0), Period.linear(5))

    def test_dimensionality_mismatch_raises(self):
        """Test that cell and period must share a dimensionality."""
        with pytest.raises(ValueError, match="Inconsistent unit cell and period dimensionality"):
            Lattice(SquareUnitCell(1.0), Period.box(3))

        with pytest.raises(ValueError, match="Inconsistent unit cell and period dimensionality"):
            create_lattice('cubic', period=(3, 4))

    def test_wrong_component_types_raise(self):
        """Test that non-cell or non-period arguments raise error."""
        with pytest.raises(TypeError, match="unit_cell"):
            Lattice('square', Period.box(3, 4))

        with pytest.raises(TypeError, match="period"):
            Lattice(SquareUnitCell(1.0), (3, 4))

    def test_repr(self):
        """Test __repr__ output."""
        lattice = create_lattice('square', side=1.0, period=(3, 4))

        assert repr(lattice) == "Lattice(SquareUnitCell(side=1.000), Period(3, 4))"


class TestLatticePoints:
    """Test canonical site points."""

    def test_list_points_linear(self):
        """Test 1D site origins."""
        lattice = Lattice(LinearUnitCell(2.0), Period.linear(5))

        assert_points(lattice.list_points(), [[0.0], [2.0], [4.0], [6.0], [8.0]])

    def test_list_points_square(self):
        """Test that the first dimension varies fastest."""
        lattice = Lattice(SquareUnitCell(0.5), Period.box(2, 3))

        assert_points(lattice.list_points(), [
            [0.0, 0.0], [0.5, 0.0],
            [0.0, 0.5], [0.5, 0.5],
            [0.0, 1.0], [0.5, 1.0],
        ])

    def test_list_points_matches_sites(self):
        """Test one point per canonical site."""
        lattice = create_lattice('bcc', side=2.0, period=(2, 3, 4))

        assert len(lattice.list_points()) == lattice.count_sites()


class TestLatticeContains:
    """Test primary box containment of points."""

    def test_contains_linear(self):
        """Test the cells just outside the primary box."""
        lattice = Lattice(LinearUnitCell(2.0), Period.linear(5))

        assert not lattice.contains([-2.0])
        assert not lattice.contains([10.0])
        for x in (0.0, 2.0, 4.0, 6.0, 8.0):
            assert lattice.contains([x])

    def test_contains_rounds_to_nearest_cell(self):
        """Test that containment uses the cell nearest the point."""
        lattice = create_lattice('square', side=1.0, period=(3, 4))

        assert lattice.contains([2.4, 3.4])
        assert not lattice.contains([2.6, 3.4])
        assert lattice.contains([-0.4, 0.0])
        assert not lattice.contains([-0.6, 0.0])

    def test_absolute_index_is_tested(self):
        """Test that periodic copies of a site are not contained."""
        lattice = create_lattice('square', side=1.0, period=(3, 4))

        assert not lattice.contains([4.0, 10.0])
        assert lattice.contains(lattice.image_of([4.0, 10.0]))


class TestLatticeImages:
    """Test periodic images."""

    @pytest.mark.parametrize("index, image", [
        ((4, 10), (1, 2)),
        ((-5, 18), (1, 2)),
        ((6, -3), (0, 1)),
        ((-1, -1), (2, 3)),
    ])
    def test_image_of_index(self, index, image):
        """Test index reduction."""
        lattice = create_lattice('square', side=1.0, period=(3, 4))

        assert lattice.image_of(UnitIndex(*index)) == UnitIndex(*image)

    @pytest.mark.parametrize("point, image", [
        ([4.0, 10.0], [1.0, 2.0]),
        ([-5.0, 18.0], [1.0, 2.0]),
        ([6.2, -2.9], [0.0, 1.0]),
        ([-1.0, -1.0], [2.0, 3.0]),
    ])
    def test_image_of_point(self, point, image):
        """Test that a point reduces to the origin of its canonical cell."""
        lattice = create_lattice('square', side=1.0, period=(3, 4))

        assert np.allclose(lattice.image_of(point), image)

    def test_image_of_hexagonal_point(self):
        """Test image reduction along skewed axes."""
        cell = HexagonalUnitCell(2.0)
        lattice = Lattice(cell, Period.box(2, 2))
        point = cell.point_at(UnitIndex(3, -1))

        assert np.allclose(lattice.image_of(point), cell.point_at(UnitIndex(1, 1)))


class TestLatticeNeighbors:
    """Test neighbor lists."""

    def test_list_neighbors_linear(self):
        """Test that neighbor points are absolute."""
        lattice = Lattice(LinearUnitCell(2.0), Period.linear(5))

        assert_points(lattice.list_neighbors([0.0]), [[-2.0], [2.0]])

    def test_list_neighbors_square(self):
        """Test neighbor points in the cell's neighbor order."""
        lattice = Lattice(SquareUnitCell(0.5), Period.box(2, 3))

        assert_points(lattice.list_neighbors([0.5, 0.5]), [
            [0.5, 0.0], [0.0, 0.5], [1.0, 0.5], [0.5, 1.0]])

    def test_list_neighbor_images(self):
        """Test neighbor images of a boundary cell."""
        lattice = Lattice(LinearUnitCell(2.0), Period.linear(5))

        assert lattice.list_neighbor_images(UnitIndex(0)) == [UnitIndex(4), UnitIndex(1)]
        assert lattice.list_neighbor_images(UnitIndex(4)) == [UnitIndex(3), UnitIndex(0)]

    def test_map_absolute_neighbors(self):
        """Test the ABSOLUTE neighbor map of a square lattice."""
        lattice = Lattice(SquareUnitCell(2.5), Period.box(8, 4))
        neighbors = lattice.map_index_neighbors(CoordType.ABSOLUTE)

        assert neighbors[UnitIndex(0, 0)] == [
            UnitIndex(0, -1), UnitIndex(-1, 0), UnitIndex(1, 0), UnitIndex(0, 1)]

    def test_map_image_neighbors(self):
        """Test the IMAGE neighbor map of a square lattice."""
        lattice = Lattice(SquareUnitCell(2.5), Period.box(8, 4))
        neighbors = lattice.map_index_neighbors(CoordType.IMAGE)

        assert neighbors[UnitIndex(0, 0)] == [
            UnitIndex(0, 3), UnitIndex(7, 0), UnitIndex(1, 0), UnitIndex(0, 1)]

    def test_map_image_neighbors_linear(self):
        """Test the IMAGE neighbor map of a chain."""
        lattice = Lattice(LinearUnitCell(2.0), Period.linear(5))
        neighbors = lattice.map_index_neighbors('image')

        assert neighbors[UnitIndex(0)] == [UnitIndex(4), UnitIndex(1)]
        assert neighbors[UnitIndex(4)] == [UnitIndex(3), UnitIndex(0)]

    def test_map_default_is_absolute(self):
        """Test the default coordinate type."""
        lattice = Lattice(LinearUnitCell(2.0), Period.linear(5))

        assert lattice.map_index_neighbors()[UnitIndex(0)] == [UnitIndex(-1), UnitIndex(1)]

    def test_map_keys_follow_enumeration(self):
        """Test key order and neighbor counts."""
        lattice = create_lattice('hexagonal', side=1.0, period=(3, 2))

        for coord_type in CoordType:
            neighbors = lattice.map_index_neighbors(coord_type)

            assert list(neighbors) == lattice.period.enumerate()
            for neighbor_list in neighbors.values():
                assert len(neighbor_list) == 6

    def test_image_neighbors_are_contained(self):
        """Test that IMAGE neighbors lie in the primary box."""
        lattice = create_lattice('fcc', side=1.0, period=3)

        for neighbor_list in lattice.map_index_neighbors(CoordType.IMAGE).values():
            for neighbor in neighbor_list:
                assert lattice.period.contains(neighbor)

    @pytest.mark.parametrize("coord_type", ['relative', 'ABSOLUTE', 3, None])
    def test_unknown_coord_type_raises(self, coord_type):
        """Test that unknown coordinate types raise error."""
        lattice = create_lattice('linear', period=5)

        with pytest.raises(ValueError, match="Unknown coordinate type"):
            lattice.map_index_neighbors(coord_type)


class TestLatticeConfig:
    """Test dictionary configuration and factory construction."""

    def test_to_dict(self):
        """Test serialization of a preset lattice."""
        lattice = create_lattice('hexagonal', side=2.0, period=(3, 4))

        assert lattice.to_dict() == {
            'unit_cell': {'type': 'hexagonal', 'side': 2.0},
            'period': [3, 4],
        }

    @pytest.mark.parametrize("cell_type, period", [
        ('linear', (5,)),
        ('square', (3, 4)),
        ('hexagonal', (2, 2)),
        ('cubic', (2, 3, 4)),
        ('bcc', (2, 2, 2)),
        ('fcc', (1, 2, 3)),
    ])
    def test_preset_roundtrip(self, cell_type, period):
        """Test from_dict(to_dict()) for every preset shape."""
        lattice = create_lattice(cell_type, side=1.5, period=period)
        restored = Lattice.from_dict(lattice.to_dict())

        assert restored == lattice
        assert hash(restored) == hash(lattice)

    def test_explicit_basis_roundtrip(self):
        """Test from_dict(to_dict()) for an explicit basis."""
        cell = unit_cell_from_basis([[2.0, 0.0], [0.0, 1.0]],
                                    [UnitIndex(0, -1), UnitIndex(0, 1)], 1.0)
        lattice = Lattice(cell, Period.box(2, 5))

        restored = Lattice.from_dict(lattice.to_dict())

        assert restored == lattice
        assert restored.map_index_neighbors() == lattice.map_index_neighbors()

    def test_default_side(self):
        """Test that a missing side defaults to 1."""
        lattice = Lattice.from_dict({'unit_cell': {'type': 'square'}, 'period': [3, 4]})

        assert lattice.unit_cell == SquareUnitCell(1.0)

    def test_missing_keys_raise(self):
        """Test that incomplete configurations raise error."""
        with pytest.raises(ValueError, match="requires 'unit_cell' and 'period'"):
            Lattice.from_dict({'period': [3, 4]})

        with pytest.raises(ValueError, match="requires a 'type' or a 'basis'"):
            Lattice.from_dict({'unit_cell': {'side': 1.0}, 'period': [3, 4]})

    def test_missing_neighbor_distance_raises(self):
        """Test that an explicit basis needs its neighbor distance."""
        with pytest.raises(ValueError, match="'neighbor_distance'"):
            Lattice.from_dict({'unit_cell': {'basis': [[1.0]]}, 'period': [3]})

    def test_scalar_period_raises(self):
        """Test that the configured period must be a list of lengths."""
        with pytest.raises(ValueError, match="sequence of integers"):
            Lattice.from_dict({'unit_cell': {'type': 'linear'}, 'period': 3})

    def test_unknown_cell_type_raises(self):
        """Test that unknown shape names raise error."""
        with pytest.raises(ValueError, match="Unknown unit cell type"):
            Lattice.from_dict({'unit_cell': {'type': 'kagome'}, 'period': [3, 4]})

    def test_create_lattice_scalar_period(self):
        """Test that a scalar period applies to every axis."""
        assert create_lattice('linear', 2.0, 5).period == Period.linear(5)
        assert create_lattice('square', period=3).period == Period.square(3)
        assert create_lattice('fcc', period=4).count_sites() == 64

    def test_create_lattice_sequence_period(self):
        """Test per-axis period lengths."""
        lattice = create_lattice('cubic', side=2.5, period=[2, 3, 4])

        assert lattice.period == Period.box(2, 3, 4)
        assert lattice.unit_cell.side == 2.5


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
