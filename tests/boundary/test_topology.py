"""Tests for point lengths, adjacency, hole counting and point perimeter."""

import numpy as np
import pytest

from grid import StructuredGrid
from levelset import LevelSet
from levelset.shapes import annulus, disk, holes, union
from boundary import Boundary
from boundary.records import BoundaryPoint, BoundarySegment
from boundary.topology import adjacency_list, compute_point_lengths, count_holes, point_perimeter


def _points(*coords):
    return [BoundaryPoint(coord=np.array(c, dtype=float)) for c in coords]


class TestPointLengths:

    def test_half_lengths(self):
        pts = _points((0, 0), (1, 0), (1, 2))
        segs = [BoundarySegment(0, 1, 0, 1.0), BoundarySegment(1, 2, 0, 2.0)]
        compute_point_lengths(pts, segs)
        assert [p.length for p in pts] == [0.5, 1.5, 1.0]
        assert pts[1].segments == [0, 1]
        assert pts[1].neighbours == [0, 2]
        assert adjacency_list(pts) == [[1], [0, 2], [1]]

    def test_recomputed_from_scratch(self):
        pts = _points((0, 0), (1, 0))
        segs = [BoundarySegment(0, 1, 0, 1.0)]
        compute_point_lengths(pts, segs)
        compute_point_lengths(pts, segs)
        assert pts[0].length == 0.5
        assert pts[0].n_neighbours == 1

    def test_total_matches_boundary_length(self, vertical_boundary):
        b = vertical_boundary
        assert sum(p.length for p in b.points) == pytest.approx(b.length)
        lengths = sorted(p.length for p in b.points)
        assert lengths == pytest.approx([0.5, 0.5, 1.0, 1.0, 1.0])


class TestHoles:

    def test_empty(self):
        assert count_holes([]) == 0

    def test_components(self):
        pts = _points((0, 0), (1, 0), (5, 5), (6, 5), (9, 9))
        segs = [BoundarySegment(0, 1, 0, 1.0), BoundarySegment(2, 3, 0, 1.0)]
        compute_point_lengths(pts, segs)
        assert count_holes(pts) == 3

    def test_open_interface(self, vertical_boundary):
        assert vertical_boundary.n_holes == 1

    @pytest.mark.parametrize("circles,expected", [
        ([(3.3, 3.6, 1.4)], 1),
        ([(3.3, 3.6, 1.4), (10.6, 4.2, 2.1)], 2),
        ([(3.3, 3.6, 1.4), (10.6, 4.2, 2.1), (7.2, 9.4, 1.7)], 3),
    ])
    def test_circular_voids(self, circles, expected):
        grid = StructuredGrid(14, 12)
        b = Boundary(grid, LevelSet.from_function(grid, holes(circles)))
        b.discretise()
        assert b.compute_holes() == expected
        assert b.n_holes == expected

    def test_two_material_disks(self):
        grid = StructuredGrid(15, 9)
        fn = union(disk(3.6, 4.1, 2.3), disk(11.3, 4.4, 2.2))
        b = Boundary(grid, LevelSet.from_function(grid, fn))
        b.discretise()
        assert b.compute_holes() == 2
        assert all(p.n_neighbours == 2 for p in b.points)

    def test_annulus_has_two_loops(self):
        grid = StructuredGrid(11, 11)
        b = Boundary(grid, LevelSet.from_function(grid, annulus(5.2, 5.1, 1.6, 3.7)))
        b.discretise()
        assert b.compute_holes() == 2

    def test_closed_loops_have_no_open_ends(self):
        grid = StructuredGrid(11, 11)
        b = Boundary(grid, LevelSet.from_function(grid, annulus(5.2, 5.1, 1.6, 3.7)))
        b.discretise()
        assert all(p.n_neighbours == 2 for p in b.points)


class TestPerimeter:

    def test_function(self):
        pts = _points((0, 0), (3, 4), (3, 0))
        segs = [BoundarySegment(0, 1, 0, 5.0), BoundarySegment(0, 2, 0, 3.0)]
        compute_point_lengths(pts, segs)
        assert point_perimeter(0, pts) == pytest.approx(8.0)

    def test_engine(self, vertical_boundary):
        b = vertical_boundary
        by_y = {float(p.coord[1]): i for i, p in enumerate(b.points)}
        assert b.compute_perimeter(by_y[2.0]) == pytest.approx(2.0)
        assert b.compute_perimeter(by_y[0.0]) == pytest.approx(1.0)

    def test_out_of_range(self, vertical_boundary):
        with pytest.raises(IndexError):
            vertical_boundary.compute_perimeter(vertical_boundary.n_points)
