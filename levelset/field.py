# -*- coding: utf-8 -*-
# LSBound/levelset/field.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/15/2026

Purpose:
--------
Container for the nodal scalar fields consumed by the boundary engine: the live signed
distance, an optional immutable target field (fixed/reference boundaries), the narrow-band
node list and the per-iteration movement limit (CFL bound).

Main Tasks:
-----------
   1. Validate field arrays against the grid (shape, finiteness).
   2. Sample analytic fields at the grid nodes (`from_function`).
   3. Maintain the narrow band and mirror it onto the grid's `is_active` flags.

Notes:
------
   - No evolution or reinitialisation happens here; arrays are replaced by the caller.
"""

from typing import Callable, Iterable, Optional
import numpy as np


FieldFn = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _as_nodal(values, n_nodes: int, name: str) -> np.ndarray:
    # flat, in node-index order; 2-D input is rejected rather than flattened
    arr = np.asarray(values, dtype=float)
    if arr.shape != (n_nodes,):
        raise ValueError(f"{name} must have shape ({n_nodes},), got {np.shape(values)}.")
    if not np.isfinite(arr).all():
        bad = np.flatnonzero(~np.isfinite(arr))
        raise ValueError(f"Non-finite {name} values at nodes: {bad[:10].tolist()}")
    return arr


class LevelSet:
    """
    Nodal level-set data for a `StructuredGrid`.

    Parameters
    ----------
    grid : StructuredGrid
        Background mesh; its `is_active` flags follow the narrow band.
    signed_distance : array-like
        (n_nodes,) signed distance; positive = material.
    target : array-like, optional
        (n_nodes,) signed distance of a fixed reference boundary.
    move_limit : float
        Maximum boundary movement per iteration (CFL bound), > 0.
    narrow_band : iterable of int, optional
        Active node indices; all nodes when omitted.
    """

    def __init__(self, grid, signed_distance, target=None, move_limit: float = 0.5,
                 narrow_band: Optional[Iterable[int]] = None):
        self.grid = grid
        self.signed_distance = _as_nodal(signed_distance, grid.n_nodes, "signed_distance")
        self.target = None if target is None else _as_nodal(target, grid.n_nodes, "target")

        move_limit = float(move_limit)
        if not (move_limit > 0.0):
            raise ValueError(f"move_limit must be > 0 (got {move_limit}).")
        self.move_limit = move_limit

        if narrow_band is None:
            narrow_band = range(grid.n_nodes)
        self.set_narrow_band(narrow_band)

    @classmethod
    def from_function(cls, grid, fn: FieldFn, target_fn: Optional[FieldFn] = None,
                      move_limit: float = 0.5) -> "LevelSet":
        """Sample `fn(x, y)` (vectorised over node coordinates) into a new level set."""
        xy = grid.node_coords()
        phi = fn(xy[:, 0], xy[:, 1])
        target = None if target_fn is None else target_fn(xy[:, 0], xy[:, 1])
        return cls(grid, phi, target=target, move_limit=move_limit)

    @property
    def n_narrow_band(self) -> int:
        return int(self.narrow_band.shape[0])

    def set_narrow_band(self, indices: Iterable[int]) -> None:
        band = np.unique(np.asarray(list(indices), dtype=int))
        if band.size and (band[0] < 0 or band[-1] >= self.grid.n_nodes):
            raise ValueError("Narrow-band indices out of range.")
        self.narrow_band = band
        self.grid.set_active(band.tolist())

    def update_narrow_band(self, width: float) -> np.ndarray:
        """
        Rebuild the narrow band as all nodes with |signed_distance| < width.

        Returns
        -------
        np.ndarray
            Sorted node indices in the band.
        """
        width = float(width)
        if not (width > 0.0):
            raise ValueError(f"Narrow-band width must be > 0 (got {width}).")
        self.set_narrow_band(np.flatnonzero(np.abs(self.signed_distance) < width))
        return self.narrow_band
