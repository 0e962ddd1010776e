# -*- coding: utf-8 -*-
# LSBound/levelset/shapes.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/16/2026

Purpose:
--------
Analytic signed-distance builders for initial designs and reference boundaries.
Each builder returns a vectorised callable `fn(x, y) -> phi` (positive = material) that can
be fed to `LevelSet.from_function`.
"""

from typing import Sequence, Tuple
import numpy as np


def half_plane(offset: float, axis: int = 0, material_below: bool = True):
    """Straight interface at `axis`-coordinate == offset (material on the low side by default)."""
    if axis not in (0, 1):
        raise ValueError("axis must be 0 (x) or 1 (y).")
    sign = 1.0 if material_below else -1.0

    def fn(x, y):
        c = np.asarray(x if axis == 0 else y, dtype=float)
        return sign * (offset - c)
    return fn


def disk(cx: float, cy: float, radius: float):
    """Solid disk of material."""
    if radius <= 0.0:
        raise ValueError("radius must be > 0.")

    def fn(x, y):
        return radius - np.hypot(np.asarray(x, float) - cx, np.asarray(y, float) - cy)
    return fn


def holes(circles: Sequence[Tuple[float, float, float]]):
    """
    Material everywhere except inside the given circular voids.

    Parameters
    ----------
    circles : sequence of (cx, cy, radius)
    """
    if not circles:
        raise ValueError("At least one hole is required.")
    for _, _, r in circles:
        if r <= 0.0:
            raise ValueError("Hole radii must be > 0.")

    def fn(x, y):
        x = np.asarray(x, float)
        y = np.asarray(y, float)
        d = [np.hypot(x - cx, y - cy) - r for cx, cy, r in circles]
        return np.min(np.stack(d), axis=0)
    return fn


def annulus(cx: float, cy: float, r_inner: float, r_outer: float):
    """Ring of material between two concentric circles."""
    if not (0.0 < r_inner < r_outer):
        raise ValueError("Require 0 < r_inner < r_outer.")

    def fn(x, y):
        d = np.hypot(np.asarray(x, float) - cx, np.asarray(y, float) - cy)
        return np.minimum(r_outer - d, d - r_inner)
    return fn


def union(*fns):
    """Pointwise maximum of several fields (union of the material regions)."""
    if not fns:
        raise ValueError("union() needs at least one field.")

    def fn(x, y):
        return np.max(np.stack([f(x, y) for f in fns]), axis=0)
    return fn
