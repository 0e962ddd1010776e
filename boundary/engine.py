# -*- coding: utf-8 -*-
# LSBound/boundary/engine.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/29/2026 (Updated: 10/12/2026)

Purpose:
--------
`Boundary`: the stateful boundary engine for one grid / level-set pair. Owns the points and
segments of the current discretisation and the quantities measured on them.

Pipeline:
---------
discretise() → compute_area_fractions() → compute_normal_vectors() → compute_holes()

   - `discretise` classifies the grid, extracts points/segments and accumulates point lengths.
     Every call starts from scratch; repeated calls on an unchanged field give identical output.
   - The measurement phases read the current points/segments and write element areas,
     point normals and the hole count.

Notes:
------
   - The grid and level set are borrowed, not owned: the engine writes statuses, flags and
     back-references on the grid but never replaces its records.
   - `is_target=True` discretises the level set's target field (no narrow-band gating).
   - Signed-distance passes re-apply the level set's narrow band to the grid's `is_active`
     flags first, so several level sets can share one grid.
"""

import logging
from typing import Any, Dict, List, Optional
import numpy as np
from .area import compute_area_fractions as _area_fractions
from .classify import compute_mesh_status
from .config import resolve_config
from .errors import BoundaryError
from .extraction import BoundaryExtractor, capacity_estimate
from .normals import compute_normal_vectors as _normal_vectors
from .records import BoundaryPoint, BoundarySegment
from .topology import compute_point_lengths, count_holes, point_perimeter

logger = logging.getLogger(__name__)


class Boundary:
    """
    Discretised zero contour of a level set on a structured grid.

    Parameters
    ----------
    grid : StructuredGrid
        Background mesh (classified and annotated in place).
    level_set : LevelSet
        Field source: signed distance, optional target, narrow band and move limit.
    config : dict, optional
        Overrides for `config.DEFAULTS`.

    Attributes
    ----------
    points : list of BoundaryPoint
    segments : list of BoundarySegment
    length : float
        Total boundary length of the last discretisation.
    area : float
        Total material area (sum of element fractions) of the last area pass.
    n_holes : int
        Number of closed boundary loops found by the last `compute_holes`.
    capacity : int
        Pre-sizing estimate for the point/segment containers.
    """

    def __init__(self, grid, level_set, config: Optional[Dict[str, Any]] = None):
        self.grid = grid
        self.level_set = level_set
        self.config = resolve_config(config)

        cap = self.config["capacity"]
        self.capacity = capacity_estimate(grid.n_nodes, cap["fraction"], cap["minimum"])

        self.points: List[BoundaryPoint] = []
        self.segments: List[BoundarySegment] = []
        self.length = 0.0
        self.area = 0.0
        self.n_holes = 0

    @property
    def n_points(self) -> int:
        return len(self.points)

    @property
    def n_segments(self) -> int:
        return len(self.segments)

    # --------------------
    # Core API
    # --------------------
    def discretise(self, is_target: bool = False) -> None:
        """
        Rebuild the boundary from the current level-set field.

        Parameters
        ----------
        is_target : bool
            Use the immutable target field instead of the signed distance; narrow-band
            gating is disabled in that mode.

        Raises
        ------
        BoundaryError
            If `is_target` is set but the level set has no target field.
        TopologyError, DegenerateFieldError, CapacityError
            Propagated from the extraction.
        """
        if is_target:
            if self.level_set.target is None:
                raise BoundaryError("Target discretisation requested but no target field is set.")
            phi = self.level_set.target
        else:
            phi = self.level_set.signed_distance
            # the grid may be shared with another level set that reset its flags
            self.grid.set_active(self.level_set.narrow_band.tolist())

        compute_mesh_status(self.grid, phi, eps=self.config["tolerances"]["eps"])

        extractor = BoundaryExtractor(
            self.grid, phi, self.level_set.move_limit, self.config, use_narrow_band=not is_target
        )
        self.points, self.segments, self.length = extractor.run()
        compute_point_lengths(self.points, self.segments)
        self.area = 0.0
        self.n_holes = 0

        logger.info(
            "[Boundary] Discretised %s field: %d points, %d segments, length=%.6g.",
            "target" if is_target else "signed-distance", self.n_points, self.n_segments, self.length,
        )

    def compute_area_fractions(self) -> float:
        """Write per-element material fractions; returns (and stores) the total material area."""
        self.area = _area_fractions(self.grid, self.points, self.segments)
        logger.debug("[Boundary] Material area %.6g of %d elements.", self.area, self.grid.n_elements)
        return self.area

    def compute_normal_vectors(self) -> None:
        """Set the unit level-set gradient direction of every boundary point (zero when pinned)."""
        _normal_vectors(
            self.grid,
            self.level_set.signed_distance,
            self.level_set.narrow_band,
            self.points,
            lock_radius_sqd=self.config["tolerances"]["lock_radius_sqd"],
        )

    def compute_holes(self) -> int:
        """Count closed boundary loops; stored in `n_holes`."""
        self.n_holes = count_holes(self.points)
        return self.n_holes

    def compute_perimeter(self, point: int) -> float:
        """Summed distance from boundary point `point` to its neighbours."""
        if not (0 <= point < self.n_points):
            raise IndexError(f"[Boundary] Point index {point} out of range (n_points={self.n_points}).")
        return point_perimeter(point, self.points)

    # --------------------
    # Array views
    # --------------------
    def point_coords(self) -> np.ndarray:
        """(n_points, 2) coordinates."""
        return np.array([p.coord for p in self.points], dtype=float).reshape(-1, 2)

    def point_normals(self) -> np.ndarray:
        """(n_points, 2) normals (zero rows for domain-pinned points)."""
        return np.array([p.normal for p in self.points], dtype=float).reshape(-1, 2)

    def segment_indices(self) -> np.ndarray:
        """(n_segments, 2) start/end point indices."""
        return np.array([(s.start, s.end) for s in self.segments], dtype=int).reshape(-1, 2)

    def plot(self, show: bool = True, save_path: Optional[str] = None, ax=None, normals: bool = False) -> None:
        """
        Plot the boundary (lazy import to avoid hard matplotlib dependency).
        """
        from post.plot_boundary import plot_boundary
        plot_boundary(self, normals=normals, show=show, save_path=save_path, ax=ax)
        if save_path:
            logger.info("[Boundary] Plot saved to: %s", save_path)
