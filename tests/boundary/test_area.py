"""Tests for element area fractions and the clockwise vertex ordering."""

import numpy as np
import pytest

from grid import StructuredGrid, ElementStatus
from levelset import LevelSet
from levelset.shapes import half_plane
from boundary import Boundary
from boundary.area import is_clockwise, polygon_area


def _measured(grid, ls):
    b = Boundary(grid, ls)
    b.discretise()
    b.compute_area_fractions()
    return b


class TestOrdering:

    def test_left_half_first(self):
        c = (0.5, 0.5)
        assert is_clockwise((0.0, 0.2), (1.0, 0.2), c)
        assert not is_clockwise((1.0, 0.2), (0.0, 0.2), c)

    def test_vertical_line_by_height(self):
        c = (0.5, 0.5)
        assert is_clockwise((0.5, 0.0), (0.5, 1.0), c)
        assert not is_clockwise((0.5, 1.0), (0.5, 0.0), c)

    def test_unit_square_any_order(self):
        square = [np.array(p, dtype=float) for p in [(1, 1), (0, 0), (1, 0), (0, 1)]]
        assert polygon_area(square, (0.5, 0.5)) == pytest.approx(1.0)

    def test_degenerate_polygon(self):
        assert polygon_area([np.zeros(2), np.ones(2)], (0.5, 0.5)) == 0.0


class TestAreaFractions:

    def test_vertical_interface(self, vertical_interface):
        grid, ls = vertical_interface
        b = _measured(grid, ls)
        areas = grid.element_areas().reshape(4, 4)
        assert np.allclose(areas[:, 0], 1.0)
        assert np.allclose(areas[:, 1], 0.5)
        assert np.allclose(areas[:, 2:], 0.0)
        assert b.area == pytest.approx(6.0)

    def test_four_by_four_nodes(self):
        grid = StructuredGrid(3, 3)
        b = _measured(grid, LevelSet.from_function(grid, half_plane(1.5)))
        assert b.area == pytest.approx(4.5)

    def test_all_positive(self):
        grid = StructuredGrid(3, 2)
        b = _measured(grid, LevelSet(grid, np.ones(grid.n_nodes)))
        assert b.area == pytest.approx(grid.n_elements)
        assert b.n_points == 0

    def test_all_negative(self):
        grid = StructuredGrid(3, 2)
        b = _measured(grid, LevelSet(grid, -np.ones(grid.n_nodes)))
        assert b.area == 0.0

    @pytest.mark.parametrize("values,expected", [
        ([0.5, -0.5, 0.5, -0.5], 0.5),           # vertical cut through the middle
        ([0.0, -1.0, 1.0, 1.0], 0.75),           # one cut + boundary corner
        ([0.0, -1.0, 1.0, 0.0], 0.5),            # diagonal
        ([0.75, -0.25, 0.75, -0.25], 0.75),      # off-centre vertical cut
    ])
    def test_single_cell(self, make_unit_cell, values, expected):
        grid, ls = make_unit_cell(values)
        b = _measured(grid, ls)
        assert grid.elements[0].area == pytest.approx(expected)
        assert b.area == pytest.approx(expected)

    def test_saddle_centre_outside(self, make_unit_cell):
        grid, ls = make_unit_cell([1.0, -1.0, -1.0, 1.0])
        _measured(grid, ls)
        assert grid.elements[0].status is ElementStatus.CENTRE_OUTSIDE
        assert grid.elements[0].area == pytest.approx(0.25)

    def test_saddle_centre_inside(self, make_unit_cell):
        grid, ls = make_unit_cell([2.0, -1.0, -1.0, 2.0])
        _measured(grid, ls)
        assert grid.elements[0].status is ElementStatus.CENTRE_INSIDE
        assert grid.elements[0].area == pytest.approx(8.0 / 9.0)

    @pytest.mark.parametrize("values,status,expected", [
        ([-2.0, 1.0, 1.0, -2.0], ElementStatus.CENTRE_OUTSIDE, 1.0 / 9.0),
        ([-1.0, 2.0, 2.0, -1.0], ElementStatus.CENTRE_INSIDE, 8.0 / 9.0),
        ([-1.0, 1.0, 1.0, -1.0], ElementStatus.CENTRE_OUTSIDE, 0.25),
    ])
    def test_saddle_first_corner_outside(self, make_unit_cell, values, status, expected):
        grid, ls = make_unit_cell(values)
        b = _measured(grid, ls)
        assert grid.elements[0].status is status
        assert grid.elements[0].area == pytest.approx(expected)
        assert b.area == pytest.approx(expected)

    def test_boundary_edge_on_grid_line(self):
        grid = StructuredGrid(4, 2)
        b = _measured(grid, LevelSet.from_function(grid, half_plane(2.0)))
        assert b.area == pytest.approx(4.0)

    def test_circle_area(self, circle_level_set):
        grid, ls = circle_level_set
        b = _measured(grid, ls)
        assert b.area == pytest.approx(np.pi * 3.1 ** 2, rel=0.05)
        assert all(0.0 <= e.area <= 1.0 for e in grid.elements)
