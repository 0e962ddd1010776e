# -*- coding: utf-8 -*-
# LSBound/boundary/report.py

"""
Project: LSBound
Author: LSBound contributors
Date: 10/4/2026

Purpose:
--------
Compact summary of a discretised boundary, returned as a nested dictionary ready for logging
or serialization by the caller.
"""

from typing import Any, Dict


def summarize(boundary) -> Dict[str, Any]:
    """
    Summarize counts and measured totals of `boundary`.

    Returns
    -------
    dict
        {
          "grid":     {"width", "height", "n_nodes", "n_elements", "n_narrow_band"},
          "boundary": {"n_points", "n_segments", "n_domain_points", "length", "capacity"},
          "area":     {"material", "fraction", "n_mixed"},
          "topology": {"n_holes", "n_open_ends"},
        }

    Notes
    -----
    `area` and `topology` reflect the last `compute_area_fractions` / `compute_holes` calls.
    """
    grid = boundary.grid
    n_elements = grid.n_elements
    return {
        "grid": {
            "width": grid.width,
            "height": grid.height,
            "n_nodes": grid.n_nodes,
            "n_elements": n_elements,
            "n_narrow_band": boundary.level_set.n_narrow_band,
        },
        "boundary": {
            "n_points": boundary.n_points,
            "n_segments": boundary.n_segments,
            "n_domain_points": sum(1 for p in boundary.points if p.is_domain),
            "length": float(boundary.length),
            "capacity": boundary.capacity,
        },
        "area": {
            "material": float(boundary.area),
            "fraction": float(boundary.area) / n_elements,
            "n_mixed": sum(1 for e in grid.elements if e.status.is_mixed()),
        },
        "topology": {
            "n_holes": boundary.n_holes,
            "n_open_ends": sum(1 for p in boundary.points if p.n_neighbours < 2),
        },
    }
