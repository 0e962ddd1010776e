"""Pytest configuration and fixtures for the boundary engine tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Repository root holds the top-level packages (grid, levelset, boundary, post)
sys.path.insert(0, str(Path(__file__).parent.parent))


def unit_cell(values):
    """1x1 grid with nodal values given in node-index order (0,0), (1,0), (0,1), (1,1)."""
    from grid import StructuredGrid
    from levelset import LevelSet

    grid = StructuredGrid(1, 1)
    return grid, LevelSet(grid, np.asarray(values, dtype=float))


@pytest.fixture
def make_unit_cell():
    return unit_cell


@pytest.fixture
def vertical_interface():
    """4x4 grid with material for x < 1.5: boundary points at (1.5, y), y = 0..4."""
    from grid import StructuredGrid
    from levelset import LevelSet
    from levelset.shapes import half_plane

    grid = StructuredGrid(4, 4)
    return grid, LevelSet.from_function(grid, half_plane(1.5))


@pytest.fixture
def vertical_boundary(vertical_interface):
    """Fully processed boundary of `vertical_interface`."""
    from boundary import discretise

    grid, ls = vertical_interface
    return discretise(grid, ls)


@pytest.fixture
def circle_level_set():
    """Solid disk of radius 3.1 well inside a 10x10 grid."""
    from grid import StructuredGrid
    from levelset import LevelSet
    from levelset.shapes import disk

    grid = StructuredGrid(10, 10)
    return grid, LevelSet.from_function(grid, disk(5.3, 4.8, 3.1))
