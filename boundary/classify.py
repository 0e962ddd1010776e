# -*- coding: utf-8 -*-
# LSBound/boundary/classify.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/21/2026

Purpose:
--------
Status classification of grid nodes and elements against a nodal scalar field.

   - Node: BOUNDARY if |phi| < eps, else INSIDE (phi > 0) or OUTSIDE (phi < 0).
   - Element: INSIDE if no node is outside, OUTSIDE if no node is inside, MIXED otherwise.

Notes:
------
   - Back-reference lists on nodes/elements are emptied here, so every discretisation pass
     starts from a clean grid.
   - Pure function of the field: no state survives between calls.
"""

import numpy as np
from grid.status import NodeStatus, ElementStatus


def classify_node(value: float, eps: float) -> NodeStatus:
    if abs(value) < eps:
        return NodeStatus.BOUNDARY
    return NodeStatus.OUTSIDE if value < 0 else NodeStatus.INSIDE


def classify_element(statuses) -> ElementStatus:
    """Element status from the statuses of its four nodes."""
    n_inside = sum(1 for s in statuses if s.is_inside())
    n_outside = sum(1 for s in statuses if s.is_outside())
    if n_outside == 0:
        return ElementStatus.INSIDE
    if n_inside == 0:
        return ElementStatus.OUTSIDE
    return ElementStatus.MIXED


def compute_mesh_status(grid, phi: np.ndarray, eps: float = 1e-6) -> None:
    """
    Classify every node and element of `grid` against `phi` (in place).

    Parameters
    ----------
    grid : StructuredGrid
    phi : np.ndarray
        (n_nodes,) scalar field.
    eps : float
        Tolerance for "exactly on the boundary".
    """
    phi = np.asarray(phi, dtype=float)
    if phi.shape != (grid.n_nodes,):
        raise ValueError(f"Field must have shape ({grid.n_nodes},), got {phi.shape}.")

    for node in grid.nodes:
        node.boundary_points.clear()
        node.status = classify_node(float(phi[node.index]), eps)

    for element in grid.elements:
        element.boundary_segments.clear()
        element.status = classify_element([grid.nodes[n].status for n in element.nodes])
