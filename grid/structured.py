# -*- coding: utf-8 -*-
# LSBound/grid/structured.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/14/2026 (Updated: 10/2/2026)

Purpose:
--------
Structured grid of unit quadrilaterals used as the background mesh for boundary
discretisation. Provides node/element records with the mutable per-record fields the
boundary engine writes back (status, back-references, area) and an (x, y) → node index
lookup for axis-neighbour queries.

Conventions:
------------
   - Nodes sit at integer coordinates (x, y), 0 <= x <= width, 0 <= y <= height.
   - Node index = y * (width + 1) + x  (x runs fastest).
   - Element index = y * width + x, with x, y the bottom-left corner.
   - Element nodes are ordered counter-clockwise from the bottom-left corner:
         3 ---- 2
         |      |
         0 ---- 1
     so edge j connects node j to node (j + 1) % 4: bottom, right, top, left.

Notes:
------
   - Back-reference lists (`Node.boundary_points`, `Element.boundary_segments`) are owned
     by the records; only the boundary extraction writes them.
"""

from dataclasses import dataclass, field
from typing import List, Iterable, Tuple
import numpy as np
from .status import NodeStatus, ElementStatus


@dataclass
class Node:
    index: int
    coord: np.ndarray
    status: NodeStatus = NodeStatus.INSIDE
    boundary_points: List[int] = field(default_factory=list)
    is_domain: bool = False
    is_active: bool = True

    @property
    def n_boundary_points(self) -> int:
        return len(self.boundary_points)


@dataclass
class Element:
    index: int
    nodes: Tuple[int, int, int, int]
    coord: np.ndarray
    status: ElementStatus = ElementStatus.INSIDE
    area: float = 0.0
    boundary_segments: List[int] = field(default_factory=list)

    @property
    def n_boundary_segments(self) -> int:
        return len(self.boundary_segments)


class StructuredGrid:
    """
    A `width` x `height` grid of unit square elements.

    Attributes
    ----------
    width, height : int
        Number of elements in x and y (also the domain extents, unit spacing).
    nodes : list of Node
    elements : list of Element
    xy_to_index : np.ndarray
        (width+1, height+1) integer array mapping node coordinates to node indices.
    """

    def __init__(self, width: int, height: int):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or int(value) != value:
                raise ValueError(f"{name} must be an integer (got {value!r}).")
            if int(value) < 1:
                raise ValueError(f"{name} must be >= 1 (got {value}).")

        self.width = int(width)
        self.height = int(height)
        self.n_nodes = (self.width + 1) * (self.height + 1)
        self.n_elements = self.width * self.height

        self.xy_to_index = np.empty((self.width + 1, self.height + 1), dtype=int)
        self.nodes: List[Node] = []
        for y in range(self.height + 1):
            for x in range(self.width + 1):
                idx = len(self.nodes)
                self.xy_to_index[x, y] = idx
                on_edge = x == 0 or y == 0 or x == self.width or y == self.height
                self.nodes.append(Node(index=idx, coord=np.array([float(x), float(y)]), is_domain=on_edge))

        self.elements: List[Element] = []
        for y in range(self.height):
            for x in range(self.width):
                conn = (
                    int(self.xy_to_index[x, y]),
                    int(self.xy_to_index[x + 1, y]),
                    int(self.xy_to_index[x + 1, y + 1]),
                    int(self.xy_to_index[x, y + 1]),
                )
                self.elements.append(
                    Element(index=len(self.elements), nodes=conn, coord=np.array([x + 0.5, y + 0.5]))
                )

    # --------------------
    # Lookups / views
    # --------------------
    def node_index(self, x: int, y: int) -> int:
        """Node index at integer coordinates (x, y)."""
        if not (0 <= x <= self.width and 0 <= y <= self.height):
            raise ValueError(f"Node coordinate ({x}, {y}) lies outside the grid.")
        return int(self.xy_to_index[x, y])

    def element_index(self, x: int, y: int) -> int:
        """Element index from its bottom-left corner (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"Element corner ({x}, {y}) lies outside the grid.")
        return y * self.width + x

    def node_coords(self) -> np.ndarray:
        """(n_nodes, 2) array of node coordinates."""
        return np.array([n.coord for n in self.nodes], dtype=float)

    def element_nodes(self) -> np.ndarray:
        """(n_elements, 4) connectivity array."""
        return np.array([e.nodes for e in self.elements], dtype=int)

    def element_areas(self) -> np.ndarray:
        """(n_elements,) array of the material area fractions last written to the elements."""
        return np.array([e.area for e in self.elements], dtype=float)

    # --------------------
    # Mutators
    # --------------------
    def set_active(self, indices: Iterable[int]) -> None:
        """Mark exactly `indices` as active (narrow-band) nodes."""
        active = set(int(i) for i in indices)
        for node in self.nodes:
            node.is_active = node.index in active

    def reset_back_references(self) -> None:
        """Empty every node → point and element → segment lookup."""
        for node in self.nodes:
            node.boundary_points.clear()
        for element in self.elements:
            element.boundary_segments.clear()
