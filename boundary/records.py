# -*- coding: utf-8 -*-
# LSBound/boundary/records.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/21/2026

Purpose:
--------
Records produced by one discretisation pass: boundary points and boundary segments.
Both are rebuilt from scratch on every pass; segments are immutable once created,
points are completed by the measurement phase (lengths, adjacency, normals).
"""

from dataclasses import dataclass, field
from typing import List, Optional
import numpy as np


@dataclass
class BoundaryPoint:
    """
    A vertex of the discretised boundary.

    Attributes
    ----------
    coord : np.ndarray
        (2,) position.
    length : float
        Integral length (half the summed length of incident segments); quadrature weight.
    negative_limit, positive_limit : float
        Inward (<= 0) and outward (>= 0) movement limits.
    is_domain : bool
        Point lies on the domain edge (pinned).
    sensitivities : list of float
        Objective followed by constraint sensitivities.
    normal : np.ndarray
        (2,) unit normal; zero vector for domain-pinned points.
    segments, neighbours : list of int
        Incident segment indices and adjacent point indices.
    """
    coord: np.ndarray
    length: float = 0.0
    negative_limit: float = 0.0
    positive_limit: float = 0.0
    is_domain: bool = False
    sensitivities: List[float] = field(default_factory=list)
    normal: np.ndarray = field(default_factory=lambda: np.zeros(2))
    segments: List[int] = field(default_factory=list)
    neighbours: List[int] = field(default_factory=list)

    @property
    def n_segments(self) -> int:
        return len(self.segments)

    @property
    def n_neighbours(self) -> int:
        return len(self.neighbours)


@dataclass(frozen=True)
class BoundarySegment:
    start: int
    end: int
    element: int
    length: float
    weight: Optional[float] = None
