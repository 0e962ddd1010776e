# -*- coding: utf-8 -*-
# LSBound/grid/status.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/14/2026

Purpose:
--------
Closed status vocabularies for grid nodes and elements. Both enums carry explicit
predicates so callers never compare raw values, and the saddle reclassification of an
element is a named transition (`ElementStatus.from_centre_sum`).

Conventions:
------------
   - Positive signed distance = material ("inside"), negative = void ("outside").
   - `MIXED`, `CENTRE_INSIDE` and `CENTRE_OUTSIDE` are all "mixed" elements; the two centre
     variants only appear after saddle resolution during boundary extraction.
"""

from enum import Enum


class NodeStatus(Enum):
    INSIDE = "inside"
    OUTSIDE = "outside"
    BOUNDARY = "boundary"

    def is_inside(self) -> bool:
        return self is NodeStatus.INSIDE

    def is_outside(self) -> bool:
        return self is NodeStatus.OUTSIDE

    def is_boundary(self) -> bool:
        return self is NodeStatus.BOUNDARY

    @staticmethod
    def is_cut_pair(a: "NodeStatus", b: "NodeStatus") -> bool:
        """True if one status is inside and the other outside (the edge between them is cut)."""
        return (a.is_inside() and b.is_outside()) or (a.is_outside() and b.is_inside())


class ElementStatus(Enum):
    INSIDE = "inside"
    OUTSIDE = "outside"
    MIXED = "mixed"
    CENTRE_INSIDE = "centre_inside"
    CENTRE_OUTSIDE = "centre_outside"

    def is_inside(self) -> bool:
        return self is ElementStatus.INSIDE

    def is_outside(self) -> bool:
        return self is ElementStatus.OUTSIDE

    def is_mixed(self) -> bool:
        return self in (ElementStatus.MIXED, ElementStatus.CENTRE_INSIDE, ElementStatus.CENTRE_OUTSIDE)

    def is_centre_inside(self) -> bool:
        return self is ElementStatus.CENTRE_INSIDE

    def is_centre_outside(self) -> bool:
        return self is ElementStatus.CENTRE_OUTSIDE

    @staticmethod
    def from_centre_sum(lsf_sum: float) -> "ElementStatus":
        """
        Saddle reclassification from the sum of the four corner values.

        A strictly positive sum puts the element centre inside the material; zero and
        negative sums put it outside.
        """
        return ElementStatus.CENTRE_INSIDE if lsf_sum > 0 else ElementStatus.CENTRE_OUTSIDE
