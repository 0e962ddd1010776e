# -*- coding: utf-8 -*-
# LSBound/post/plot_area.py

"""
Project: LSBound
Author: LSBound contributors
Date: 10/19/2026

Purpose:
--------
Per-element map of material area fractions (after `Boundary.compute_area_fractions`).
Shares the headless backend selection and save/show handling of `plot_boundary`.
"""

from typing import Optional
from .plot_boundary import _finish, _get_pyplot


def plot_area_fractions(
    grid,
    *,
    cmap: str = "viridis",
    show: bool = True,
    save_path: Optional[str] = None,
    ax=None,
) -> None:
    """
    Colour every element by its material area fraction in [0, 1].

    Parameters
    ----------
    grid : StructuredGrid
        Grid whose elements carry areas from `compute_area_fractions`.
    cmap : str
        Matplotlib colormap name.
    show, save_path, ax
        Same semantics as `plot_boundary`.
    """
    plt = _get_pyplot()
    created_fig = False
    if ax is None:
        fig = plt.figure(figsize=(7, 6))
        ax = fig.add_subplot(111)
        created_fig = True

    # element index = y * width + x  →  row-major (height, width) image
    areas = grid.element_areas().reshape(grid.height, grid.width)
    im = ax.imshow(areas, origin="lower", extent=(0, grid.width, 0, grid.height),
                   cmap=cmap, vmin=0.0, vmax=1.0, interpolation="nearest")
    ax.figure.colorbar(im, ax=ax, label="material fraction")
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title("Element area fractions (total {:.4g})".format(float(areas.sum())))

    _finish(plt, ax.figure, created_fig, show, save_path)
