# -*- coding: utf-8 -*-
# LSBound/boundary/normals.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/27/2026

Purpose:
--------
Unit normal vectors at boundary points, interpolated from nodal level-set gradients.

Method:
-------
   1. For every narrow-band node with incident boundary points that is not on the domain edge,
      estimate grad(phi) by central differences over its four axis neighbours and normalise.
   2. A point coinciding with the node (squared distance < lock radius) takes the node normal
      and is locked; other unlocked points accumulate the node normal weighted by 1 / r^2.
   3. Normalise the accumulated vector of every point not pinned to the domain edge.

Notes:
------
   - Pinned (domain) points keep the zero vector.
   - Gradients always use the live signed distance, also after a target discretisation.
"""

from typing import List
import numpy as np
from .errors import DegenerateFieldError


def node_normal(grid, phi: np.ndarray, node) -> np.ndarray:
    """Unit central-difference gradient of `phi` at an interior node."""
    x = int(round(node.coord[0]))
    y = int(round(node.coord[1]))
    idx = grid.xy_to_index
    grad_x = 0.5 * (phi[idx[x + 1, y]] - phi[idx[x - 1, y]])
    grad_y = 0.5 * (phi[idx[x, y + 1]] - phi[idx[x, y - 1]])

    grad = float(np.hypot(grad_x, grad_y))
    if grad == 0.0:
        raise DegenerateFieldError("Zero level-set gradient at a boundary node.", {"node": node.index})
    return np.array([grad_x / grad, grad_y / grad])


def compute_normal_vectors(grid, phi: np.ndarray, narrow_band, points: List, lock_radius_sqd: float = 1e-6) -> None:
    """
    Set `point.normal` for every boundary point (in place).

    Parameters
    ----------
    grid : StructuredGrid
        Grid holding the node → point back-references from the last extraction.
    phi : np.ndarray
        (n_nodes,) live signed distance.
    narrow_band : iterable of int
        Node indices considered for gradient estimation.
    points : list of BoundaryPoint
    lock_radius_sqd : float
        Squared distance under which a point takes the node normal directly.

    Raises
    ------
    DegenerateFieldError
        On a zero gradient at a contributing node, or a non-pinned point without any
        contribution.
    """
    n_points = len(points)
    is_set = np.zeros(n_points, dtype=bool)
    weight = np.zeros(n_points)
    acc = np.zeros((n_points, 2))

    for i in narrow_band:
        node = grid.nodes[int(i)]
        if not node.boundary_points or node.is_domain:
            continue

        normal = node_normal(grid, phi, node)
        for p in node.boundary_points:
            d = node.coord - points[p].coord
            r_sqd = float(d[0] * d[0] + d[1] * d[1])

            if r_sqd < lock_radius_sqd:
                acc[p] = normal
                weight[p] = 1.0
                is_set[p] = True
            elif not is_set[p]:
                acc[p] += normal / r_sqd
                weight[p] += 1.0 / r_sqd

    for p, point in enumerate(points):
        if point.is_domain:
            point.normal = np.zeros(2)
            continue
        if weight[p] == 0.0:
            raise DegenerateFieldError(
                "Boundary point received no normal contribution (outside the narrow band?).",
                {"point": p, "coord": point.coord.tolist()},
            )
        v = acc[p] / weight[p]
        norm = float(np.hypot(v[0], v[1]))
        if norm == 0.0:
            raise DegenerateFieldError("Normal contributions cancel at a boundary point.", {"point": p})
        point.normal = v / norm
