# -*- coding: utf-8 -*-
# LSBound/post/plot_boundary.py

"""
Project: LSBound
Author: LSBound contributors
Date: 10/7/2026

Purpose:
--------
Quick matplotlib views of a discretised boundary: the grid wireframe with boundary segments,
points and (optionally) point normals.
Headless-safe: the Agg backend is selected when no display is available.
"""

import logging
import os
from typing import Optional
import numpy as np

logger = logging.getLogger(__name__)


def _get_pyplot():
    """
    Import matplotlib.pyplot with a headless-safe backend if needed.

    Raises
    ------
    RuntimeError
        If matplotlib cannot be imported.
    """
    try:
        import matplotlib
        if not os.environ.get("DISPLAY"):
            matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError("matplotlib is required for plotting: {}".format(e))


def _finish(plt, fig, created_fig: bool, show: bool, save_path: Optional[str]) -> None:
    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches="tight")
        logger.info("[plot_boundary] Figure saved to: %s", save_path)
    if not created_fig:
        return
    backend = plt.get_backend().lower()
    if show and not backend.startswith("agg"):
        plt.show()
    else:
        plt.close(fig)


def _grid_lines(grid) -> np.ndarray:
    segs = []
    for x in range(grid.width + 1):
        segs.append([[x, 0.0], [x, grid.height]])
    for y in range(grid.height + 1):
        segs.append([[0.0, y], [grid.width, y]])
    return np.asarray(segs, dtype=float)


def plot_boundary(
    boundary,
    *,
    normals: bool = False,
    show_grid: bool = True,
    show: bool = True,
    save_path: Optional[str] = None,
    ax=None,
) -> None:
    """
    Plot boundary segments and points over the grid.

    Parameters
    ----------
    boundary : Boundary
        Discretised engine.
    normals : bool
        Draw point normals as arrows (requires `compute_normal_vectors` first).
    show_grid : bool
        Draw the grid wireframe underneath.
    show : bool
        If True and we created the figure, display it.
    save_path : Optional[str]
        If given, save the figure to this path.
    ax : Optional[matplotlib.axes.Axes]
        Existing Axes to draw on; if None, a figure is created.
    """
    from matplotlib.collections import LineCollection

    plt = _get_pyplot()
    created_fig = False
    if ax is None:
        fig = plt.figure(figsize=(7, 7))
        ax = fig.add_subplot(111)
        created_fig = True

    grid = boundary.grid
    if show_grid:
        ax.add_collection(LineCollection(_grid_lines(grid), colors="0.8", linewidths=0.4))

    xy = boundary.point_coords()
    seg_idx = boundary.segment_indices()
    if seg_idx.size:
        ax.add_collection(LineCollection(xy[seg_idx], colors="k", linewidths=1.5))
    if xy.size:
        pinned = np.array([p.is_domain for p in boundary.points], dtype=bool)
        ax.scatter(xy[~pinned, 0], xy[~pinned, 1], s=8, c="tab:blue", label="points", zorder=3)
        if pinned.any():
            ax.scatter(xy[pinned, 0], xy[pinned, 1], s=14, c="tab:red", marker="s", label="pinned", zorder=3)
        if normals:
            nv = boundary.point_normals()
            ax.quiver(xy[:, 0], xy[:, 1], nv[:, 0], nv[:, 1], angles="xy", scale_units="xy",
                      scale=2.0, width=0.003, color="tab:green")
        ax.legend(loc="upper right")

    ax.set_xlim(-0.5, grid.width + 0.5)
    ax.set_ylim(-0.5, grid.height + 0.5)
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title("Boundary: {} points, {} segments".format(boundary.n_points, boundary.n_segments))

    _finish(plt, ax.figure, created_fig, show, save_path)
