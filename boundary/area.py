# -*- coding: utf-8 -*-
# LSBound/boundary/area.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/25/2026

Purpose:
--------
Material area fraction of elements cut by the discretised boundary.

Method:
-------
   1. Collect the polygon of one side of the boundary inside the element:
        - corners with the target status (INSIDE, or OUTSIDE for CENTRE_OUTSIDE saddles),
        - boundary corners whose two neighbouring corners are both inside (such a corner
          is not already an endpoint of one of the element's segments),
        - both endpoints of every segment owned by the element.
   2. Order the vertices clockwise about the element centre.
   3. Integrate with the shoelace formula; |area|.
   4. CENTRE_OUTSIDE elements collected the void lobe, so the material fraction is 1 - area.

Notes:
------
   - Areas are in grid units (unit cells); scaling by the physical cell size is the caller's job.
   - Ordering is angular about the centre, which is exact for the star-shaped polygons
     produced by a single element.
"""

from functools import cmp_to_key
from typing import List, Sequence
import numpy as np
from grid.status import NodeStatus


def is_clockwise(p1: Sequence[float], p2: Sequence[float], centre: Sequence[float]) -> bool:
    """
    Whether `p1` precedes `p2` walking clockwise about `centre`.

    The half-plane left of the centre comes first; points on the vertical line through the
    centre are ordered by height; otherwise the cross product decides.
    """
    dx1 = p1[0] - centre[0]
    dx2 = p2[0] - centre[0]

    if dx1 >= 0 and dx2 < 0:
        return False
    if dx1 < 0 and dx2 >= 0:
        return True

    if dx1 == 0 and dx2 == 0:
        if (p1[1] - centre[1]) >= 0 or (p2[1] - centre[1]) >= 0:
            return not (p1[1] > p2[1])
        return not (p2[1] > p1[1])

    # (centre -> p1) x (centre -> p2)
    det = dx1 * (p2[1] - centre[1]) - dx2 * (p1[1] - centre[1])
    return not (det < 0)


def _ordering(centre):
    def cmp(a, b):
        before = is_clockwise(a, b, centre)
        after = is_clockwise(b, a, centre)
        if before and not after:
            return -1
        if after and not before:
            return 1
        return 0
    return cmp_to_key(cmp)


def polygon_area(vertices: List[np.ndarray], centre: Sequence[float]) -> float:
    """Absolute shoelace area of `vertices` after ordering them about `centre`."""
    if len(vertices) < 3:
        return 0.0
    ring = np.array(sorted(vertices, key=_ordering(centre)), dtype=float)
    x = ring[:, 0]
    y = ring[:, 1]
    area2 = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return abs(0.5 * float(area2))


def cut_area(element, grid, points, segments) -> float:
    """
    Material area fraction of a mixed element.

    Parameters
    ----------
    element : Element
        Element with status MIXED, CENTRE_INSIDE or CENTRE_OUTSIDE.
    grid : StructuredGrid
    points, segments : list
        Boundary points and segments of the current pass.

    Returns
    -------
    float
        Fraction in [0, 1] of the (unit) element occupied by material.
    """
    nodes = grid.nodes
    centre_outside = element.status.is_centre_outside()
    target = NodeStatus.OUTSIDE if centre_outside else NodeStatus.INSIDE

    vertices: List[np.ndarray] = []
    for i in range(4):
        node = nodes[element.nodes[i]]
        if node.status is target:
            vertices.append(node.coord)
        elif node.status.is_boundary():
            after = nodes[element.nodes[(i + 1) % 4]].status
            before = nodes[element.nodes[(i + 3) % 4]].status
            if after.is_inside() and before.is_inside():
                vertices.append(node.coord)

    for s in element.boundary_segments:
        seg = segments[s]
        vertices.append(points[seg.start].coord)
        vertices.append(points[seg.end].coord)

    area = polygon_area(vertices, element.coord)
    return 1.0 - area if centre_outside else area


def compute_area_fractions(grid, points, segments) -> float:
    """
    Write `element.area` for every element and return the summed fraction.

    INSIDE elements get 1.0, OUTSIDE elements 0.0, mixed elements their cut area.
    """
    total = 0.0
    for element in grid.elements:
        if element.status.is_inside():
            element.area = 1.0
        elif element.status.is_outside():
            element.area = 0.0
        else:
            element.area = cut_area(element, grid, points, segments)
        total += element.area
    return total
