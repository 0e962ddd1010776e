"""Tests for node/element status classification."""

import numpy as np
import pytest

from grid import StructuredGrid, NodeStatus, ElementStatus
from boundary.classify import classify_node, classify_element, compute_mesh_status

I, O, B = NodeStatus.INSIDE, NodeStatus.OUTSIDE, NodeStatus.BOUNDARY


class TestClassifyNode:

    @pytest.mark.parametrize("value,expected", [
        (0.5, I),
        (-0.5, O),
        (0.0, B),
        (5e-7, B),
        (-5e-7, B),
        (2e-6, I),
    ])
    def test_default_tolerance(self, value, expected):
        assert classify_node(value, 1e-6) is expected

    def test_custom_tolerance(self):
        assert classify_node(0.01, 0.1) is B


class TestClassifyElement:

    @pytest.mark.parametrize("statuses,expected", [
        ((I, I, I, I), ElementStatus.INSIDE),
        ((O, O, O, O), ElementStatus.OUTSIDE),
        ((I, I, B, B), ElementStatus.INSIDE),
        ((O, B, O, B), ElementStatus.OUTSIDE),
        ((B, B, B, B), ElementStatus.INSIDE),
        ((I, O, I, I), ElementStatus.MIXED),
        ((B, O, B, I), ElementStatus.MIXED),
    ])
    def test_statuses(self, statuses, expected):
        assert classify_element(statuses) is expected


class TestComputeMeshStatus:

    def test_statuses_and_reset(self):
        grid = StructuredGrid(2, 1)
        # x = 0, 1, 2 on both rows
        phi = np.array([1.0, 0.0, -1.0, 1.0, 0.0, -1.0])
        grid.nodes[1].boundary_points.append(7)
        grid.elements[0].boundary_segments.append(3)

        compute_mesh_status(grid, phi)

        assert [n.status for n in grid.nodes] == [I, B, O, I, B, O]
        assert grid.elements[0].status is ElementStatus.INSIDE
        assert grid.elements[1].status is ElementStatus.OUTSIDE
        assert grid.nodes[1].boundary_points == []
        assert grid.elements[0].boundary_segments == []

    def test_shape_mismatch(self):
        grid = StructuredGrid(2, 1)
        with pytest.raises(ValueError):
            compute_mesh_status(grid, np.zeros(4))

    def test_reclassifies_from_scratch(self):
        grid = StructuredGrid(1, 1)
        compute_mesh_status(grid, np.array([1.0, -1.0, 1.0, -1.0]))
        assert grid.elements[0].status is ElementStatus.MIXED
        compute_mesh_status(grid, np.ones(4))
        assert grid.elements[0].status is ElementStatus.INSIDE
