"""Tests for the Boundary engine, the one-call pipeline, checks and summary."""

import numpy as np
import pytest

from grid import StructuredGrid
from levelset import LevelSet
from levelset.shapes import disk, half_plane
from boundary import Boundary, discretise, run_checks, summarize


class TestEngine:

    def test_initial_state(self, vertical_interface):
        grid, ls = vertical_interface
        b = Boundary(grid, ls)
        assert b.n_points == 0
        assert b.n_segments == 0
        assert b.capacity == 5
        assert b.point_coords().shape == (0, 2)
        assert b.segment_indices().shape == (0, 2)

    def test_array_views(self, vertical_boundary):
        b = vertical_boundary
        assert b.point_coords().shape == (5, 2)
        assert b.point_normals().shape == (5, 2)
        idx = b.segment_indices()
        assert idx.shape == (4, 2)
        assert np.all(idx[:, 0] != idx[:, 1])

    def test_length_is_segment_sum(self, circle_level_set):
        grid, ls = circle_level_set
        b = discretise(grid, ls)
        assert b.length == pytest.approx(sum(s.length for s in b.segments))
        assert b.length == pytest.approx(2.0 * np.pi * 3.1, rel=0.05)

    def test_pipeline_without_normals(self, vertical_interface):
        grid, ls = vertical_interface
        b = discretise(grid, ls, normals=False)
        assert np.allclose(b.point_normals(), 0.0)
        assert b.area == pytest.approx(6.0)

    def test_rediscretise_resets_measurements(self, vertical_boundary):
        b = vertical_boundary
        assert b.area > 0.0
        b.discretise()
        assert b.area == 0.0
        assert b.n_holes == 0

    def test_field_update(self, vertical_interface):
        grid, ls = vertical_interface
        b = Boundary(grid, ls)
        b.discretise()
        ls.signed_distance = half_plane(2.5)(*grid.node_coords().T)
        b.discretise()
        assert sorted(float(p.coord[0]) for p in b.points) == [2.5] * 5

    def test_target_pipeline(self):
        grid = StructuredGrid(10, 10)
        ls = LevelSet.from_function(grid, half_plane(5.5), target_fn=disk(5.3, 4.8, 3.1))
        b = discretise(grid, ls, is_target=True, normals=False)
        assert b.n_holes == 1
        assert b.area == pytest.approx(np.pi * 3.1 ** 2, rel=0.05)


class TestChecks:

    def test_clean_boundary(self, circle_level_set):
        grid, ls = circle_level_set
        report = run_checks(discretise(grid, ls))
        assert report["ok"]
        assert set(report["rules"]) == {
            "segment_endpoints", "length_consistency", "point_lengths", "area_range", "open_ends",
        }
        assert report["rules"]["open_ends"]["ok"]
        assert report["meta"]["n_elements"] == 100

    def test_open_ends_is_a_warning(self, vertical_boundary):
        report = run_checks(vertical_boundary)
        assert report["ok"]
        finding = report["rules"]["open_ends"]
        assert finding["severity"] == "warn"
        assert not finding["ok"]
        assert finding["count"] == 2

    def test_length_mismatch_fails(self, vertical_boundary):
        vertical_boundary.length += 1.0
        report = run_checks(vertical_boundary)
        assert not report["ok"]
        assert not report["rules"]["length_consistency"]["ok"]

    def test_area_out_of_range_fails(self, vertical_boundary):
        vertical_boundary.grid.elements[3].area = 1.5
        report = run_checks(vertical_boundary)
        assert not report["rules"]["area_range"]["ok"]
        assert report["rules"]["area_range"]["examples"] == [3]

    def test_disable_rule(self, vertical_boundary):
        report = run_checks(vertical_boundary, {"enabled": {"open_ends": False}})
        assert "open_ends" not in report["rules"]
        assert report["meta"]["enabled"]["open_ends"] is False


class TestSummary:

    def test_vertical_interface(self, vertical_boundary):
        s = summarize(vertical_boundary)
        assert s["grid"]["n_elements"] == 16
        assert s["grid"]["n_narrow_band"] == 25
        assert s["boundary"]["n_points"] == 5
        assert s["boundary"]["n_segments"] == 4
        assert s["boundary"]["n_domain_points"] == 2
        assert s["boundary"]["length"] == pytest.approx(4.0)
        assert s["area"]["material"] == pytest.approx(6.0)
        assert s["area"]["fraction"] == pytest.approx(6.0 / 16.0)
        assert s["area"]["n_mixed"] == 4
        assert s["topology"] == {"n_holes": 1, "n_open_ends": 2}
