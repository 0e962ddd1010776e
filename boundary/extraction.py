# -*- coding: utf-8 -*-
# LSBound/boundary/extraction.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/23/2026 (Updated: 10/8/2026)

Purpose:
--------
Turn a classified grid and its nodal scalar field into a polyline boundary: boundary points
placed by linear interpolation on cut element edges (or exactly on nodes lying on the zero
contour) and boundary segments joining them, element by element.

Main Tasks:
-----------
   1. Walk the four edges of every element that is not fully outside (bottom, right, top, left).
        - Cut edge (inside/outside pair): interpolate the zero crossing, reuse or create a point.
        - Edge with both nodes on the boundary: emit a segment along the edge.
   2. Resolve the element's segments from the number of cut edges:
        - 2: join the two cut points.
        - 1: join the cut point to the boundary node that neighbours an outside node.
        - 4: saddle; pair the cut points using the sum of corner values and reclassify the
             element as CENTRE_INSIDE / CENTRE_OUTSIDE.
        - 0 on a non-inside element: the boundary runs along the diagonal between its two
             boundary nodes.
   3. Record segment lengths, the running total and the node/element back-references.

Notes:
------
   - Point de-duplication only searches the points already linked to one grid node, so the
     cost stays proportional to the local boundary complexity.
   - A new interpolated point is linked to both nodes of its edge; a point sitting on a node
     is linked to that node only.
   - Containers grow on demand; the capacity estimate (a fraction of the node count) is only
     enforced when `capacity.strict` is set.
   - Extraction is sequential: the per-node point lists are shared between neighbouring
     elements.
"""

import logging
from typing import List, Optional, Tuple
import numpy as np
from grid.status import ElementStatus, NodeStatus
from .errors import CapacityError, DegenerateFieldError, TopologyError
from .records import BoundaryPoint, BoundarySegment

logger = logging.getLogger(__name__)

# Unit direction of each element edge, following the node ordering 0 -> 1 -> 2 -> 3 -> 0.
_EDGE_DIRECTIONS = (
    np.array([1.0, 0.0]),   # bottom
    np.array([0.0, 1.0]),   # right
    np.array([-1.0, 0.0]),  # top
    np.array([0.0, -1.0]),  # left
)


def capacity_estimate(n_nodes: int, fraction: float, minimum: int) -> int:
    """Pre-sizing heuristic for the point/segment containers."""
    return max(int(minimum), int(fraction * n_nodes))


def make_point(coord: np.ndarray, width: float, height: float, move_limit: float, *,
               eps: float = 1e-6, domain_margin: float = 0.5, n_sensitivities: int = 2) -> BoundaryPoint:
    """
    Create a boundary point with seeded movement limits and sensitivities.

    The inward limit is clamped to the distance to the nearest domain edge when that distance
    is below `domain_margin`; a point closer than `eps` to the domain edge is pinned.
    """
    x, y = float(coord[0]), float(coord[1])
    min_boundary = min(x, width - x, y, height - y)

    point = BoundaryPoint(
        coord=np.array([x, y]),
        negative_limit=-move_limit,
        positive_limit=move_limit,
        sensitivities=[0.0] * int(n_sensitivities),
    )
    if min_boundary < domain_margin:
        point.negative_limit = -min_boundary
        if min_boundary < eps:
            point.is_domain = True
    return point


def segment_length(points: List[BoundaryPoint], start: int, end: int) -> float:
    d = points[start].coord - points[end].coord
    return float(np.hypot(d[0], d[1]))


class BoundaryExtractor:
    """
    Single-pass boundary builder over a classified grid.

    Parameters
    ----------
    grid : StructuredGrid
        Classified grid (see `classify.compute_mesh_status`); back-references must be empty.
    phi : np.ndarray
        (n_nodes,) field the grid was classified with.
    move_limit : float
        Global CFL movement bound seeded into every new point.
    config : dict
        Resolved engine configuration (`config.resolve_config`).
    use_narrow_band : bool
        Only walk edges whose two nodes are active. Disabled for target discretisation.
    """

    def __init__(self, grid, phi: np.ndarray, move_limit: float, config: dict, use_narrow_band: bool = True):
        self.grid = grid
        self.phi = np.asarray(phi, dtype=float)
        self.move_limit = float(move_limit)
        self.use_narrow_band = bool(use_narrow_band)

        tol = config["tolerances"]
        cap = config["capacity"]
        pts = config["points"]
        self.eps = tol["eps"]
        self.strict_capacity = cap["strict"]
        self.capacity = capacity_estimate(grid.n_nodes, cap["fraction"], cap["minimum"])
        self.domain_margin = pts["domain_margin"]
        self.n_sensitivities = pts["n_sensitivities"]

        self.points: List[BoundaryPoint] = []
        self.segments: List[BoundarySegment] = []
        self.length = 0.0
        self.n_collapsed = 0
        self._grew = False

    # --------------------
    # Public API
    # --------------------
    def run(self) -> Tuple[List[BoundaryPoint], List[BoundarySegment], float]:
        """Process every element; returns (points, segments, total length)."""
        for element in self.grid.elements:
            if not element.status.is_outside():
                self._process_element(element)

        if self.n_collapsed:
            logger.debug("[BoundaryExtractor] %d zero-length segment(s) skipped.", self.n_collapsed)
        return self.points, self.segments, self.length

    # --------------------
    # Element handling
    # --------------------
    def _process_element(self, element) -> None:
        nodes = self.grid.nodes
        cut_points: List[int] = []
        gated = False

        for j in range(4):
            n1 = element.nodes[j]
            n2 = element.nodes[(j + 1) % 4]

            if self.use_narrow_band and not (nodes[n1].is_active and nodes[n2].is_active):
                gated = True
                continue

            s1 = nodes[n1].status
            s2 = nodes[n2].status
            if NodeStatus.is_cut_pair(s1, s2):
                cut_points.append(self._cut_point(n1, n2, j))
            elif s1.is_boundary() and s2.is_boundary():
                self._add_segment(self._node_point(n1), self._node_point(n2), element.index)

        n_cut = len(cut_points)
        if n_cut == 2:
            self._add_segment(cut_points[0], cut_points[1], element.index)
        elif n_cut == 1:
            self._join_boundary_node(element, cut_points[0])
        elif n_cut == 4:
            self._resolve_saddle(element, cut_points)
        elif n_cut == 0:
            if not element.status.is_inside():
                self._join_diagonal(element, gated)
        else:
            raise TopologyError(
                "Unexpected number of cut edges.",
                {"element": element.index, "n_cut": n_cut},
            )

    def _join_boundary_node(self, element, cut_point: int) -> None:
        nodes = self.grid.nodes
        for j in range(4):
            node = element.nodes[j]
            if not nodes[node].status.is_boundary():
                continue
            after = nodes[element.nodes[(j + 1) % 4]].status
            before = nodes[element.nodes[(j + 3) % 4]].status
            if after.is_outside() or before.is_outside():
                self._add_segment(cut_point, self._node_point(node), element.index)

    def _resolve_saddle(self, element, cut_points: List[int]) -> None:
        lsf_sum = float(sum(self.phi[n] for n in element.nodes))
        first = self.grid.nodes[element.nodes[0]].status

        # Centre shares the first node's side: the other two corners are cut off.
        if (first.is_inside() and lsf_sum > 0) or (first.is_outside() and lsf_sum < 0):
            pairs = ((0, 1), (2, 3))
        else:
            pairs = ((0, 3), (1, 2))

        for a, b in pairs:
            self._add_segment(cut_points[a], cut_points[b], element.index)
        element.status = ElementStatus.from_centre_sum(lsf_sum)

    def _join_diagonal(self, element, gated: bool) -> None:
        on_boundary = [n for n in element.nodes if self.grid.nodes[n].status.is_boundary()]
        if len(on_boundary) == 2:
            self._add_segment(self._node_point(on_boundary[0]), self._node_point(on_boundary[1]), element.index)
        elif not gated:
            raise TopologyError(
                "Mixed element without cut edges must have exactly two boundary nodes.",
                {"element": element.index, "n_boundary_nodes": len(on_boundary)},
            )

    # --------------------
    # Points / segments
    # --------------------
    def _find_point(self, coord: np.ndarray, node: int) -> Optional[int]:
        """Index of an existing point linked to `node` at `coord` (within eps), else None."""
        for index in self.grid.nodes[node].boundary_points:
            other = self.points[index].coord
            if abs(coord[0] - other[0]) < self.eps and abs(coord[1] - other[1]) < self.eps:
                return index
        return None

    def _new_point(self, coord: np.ndarray) -> int:
        self._check_capacity(len(self.points), "points")
        self.points.append(make_point(
            coord, self.grid.width, self.grid.height, self.move_limit,
            eps=self.eps, domain_margin=self.domain_margin, n_sensitivities=self.n_sensitivities,
        ))
        return len(self.points) - 1

    def _cut_point(self, n1: int, n2: int, edge: int) -> int:
        p1 = float(self.phi[n1])
        p2 = float(self.phi[n2])
        denom = p1 - p2
        if denom == 0.0:
            raise DegenerateFieldError(
                "Zero interpolation denominator on a cut edge.", {"nodes": (n1, n2), "phi": p1}
            )
        d = p1 / denom

        nodes = self.grid.nodes
        coord = nodes[n1].coord + d * _EDGE_DIRECTIONS[edge]
        index = self._find_point(coord, n1)
        if index is None:
            index = self._new_point(coord)
            nodes[n1].boundary_points.append(index)
            nodes[n2].boundary_points.append(index)
        return index

    def _node_point(self, node: int) -> int:
        coord = self.grid.nodes[node].coord
        index = self._find_point(coord, node)
        if index is None:
            index = self._new_point(coord)
            self.grid.nodes[node].boundary_points.append(index)
        return index

    def _add_segment(self, start: int, end: int, element: int) -> None:
        if start == end:
            self.n_collapsed += 1
            return
        self._check_capacity(len(self.segments), "segments")

        length = segment_length(self.points, start, end)
        self.segments.append(BoundarySegment(start=start, end=end, element=element, length=length))
        self.length += length
        self.grid.elements[element].boundary_segments.append(len(self.segments) - 1)

    def _check_capacity(self, count: int, what: str) -> None:
        if count < self.capacity:
            return
        if self.strict_capacity:
            raise CapacityError(
                "Boundary exceeds the pre-sized container estimate.",
                {"container": what, "capacity": self.capacity, "n_nodes": self.grid.n_nodes},
            )
        if not self._grew:
            self._grew = True
            logger.debug("[BoundaryExtractor] %s exceed estimate of %d; growing.", what, self.capacity)
