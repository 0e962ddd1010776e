# -*- coding: utf-8 -*-
# LSBound/boundary/topology.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/28/2026

Purpose:
--------
Connectivity of the discretised boundary: per-point integral lengths, point → segment and
point → point adjacency, closed-loop (hole) counting and the local perimeter of a point.

Main Tasks:
-----------
   - `compute_point_lengths`: reset and rebuild point lengths, segment lists and neighbours.
   - `adjacency_list`: plain list-of-lists view of the neighbour graph.
   - `count_holes`: number of connected components of the boundary graph.
   - `point_perimeter`: summed distance from a point to its neighbours.

Notes:
------
   - The component count is the number of closed boundary loops, hence "holes": material
     filling the domain around k voids gives k, an annulus inside the domain gives 2.
   - Traversal uses an explicit stack; recursion depth would otherwise grow with the
     boundary length.
"""

from typing import List
import numpy as np


def compute_point_lengths(points: List, segments: List) -> None:
    """
    Accumulate half of every segment's length onto both of its endpoints and record the
    segment and neighbour back-references (in place).
    """
    for point in points:
        point.length = 0.0
        point.segments = []
        point.neighbours = []

    for s, seg in enumerate(segments):
        half = 0.5 * seg.length
        start = points[seg.start]
        end = points[seg.end]

        start.length += half
        end.length += half
        start.segments.append(s)
        end.segments.append(s)
        start.neighbours.append(seg.end)
        end.neighbours.append(seg.start)


def adjacency_list(points: List) -> List[List[int]]:
    return [list(p.neighbours) for p in points]


def count_holes(points: List) -> int:
    """
    Count the connected components of the boundary point graph.

    Parameters
    ----------
    points : list of BoundaryPoint
        Points with neighbour lists filled by `compute_point_lengths`.

    Returns
    -------
    int
        Number of components; 0 for an empty boundary.
    """
    adjacency = adjacency_list(points)
    visited = np.zeros(len(adjacency), dtype=bool)
    n_components = 0

    for seed in range(len(adjacency)):
        if visited[seed]:
            continue
        n_components += 1
        visited[seed] = True
        stack = [seed]
        while stack:
            current = stack.pop()
            for nxt in adjacency[current]:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append(nxt)

    return n_components


def point_perimeter(point: int, points: List) -> float:
    """Sum of distances from `points[point]` to each of its neighbours."""
    p = points[point]
    total = 0.0
    for n in p.neighbours:
        d = p.coord - points[n].coord
        total += float(np.hypot(d[0], d[1]))
    return total
