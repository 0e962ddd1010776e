# -*- coding: utf-8 -*-
# LSBound/boundary/api.py

"""
Project: LSBound
Author: LSBound contributors
Date: 10/4/2026

Purpose
-------
Single entry point running the full boundary pipeline for a grid / level-set pair:
discretise → area fractions → normal vectors → hole count.
"""

import logging
from typing import Any, Dict, Optional
from .engine import Boundary

logger = logging.getLogger(__name__)


def discretise(
    grid,
    level_set,
    *,
    is_target: bool = False,
    config: Optional[Dict[str, Any]] = None,
    normals: bool = True,
) -> Boundary:
    """
    Build and measure the boundary of `level_set` on `grid`.

    Parameters
    ----------
    grid : StructuredGrid
    level_set : LevelSet
    is_target : bool, optional
        Discretise the target field instead of the signed distance.
    config : dict, optional
        Engine overrides (see `boundary.config.DEFAULTS`).
    normals : bool, optional
        Compute point normals. Disable for target discretisations whose points leave the
        narrow band.

    Returns
    -------
    Boundary
        Engine holding points, segments, element areas, normals and the hole count.
    """
    boundary = Boundary(grid, level_set, config=config)
    boundary.discretise(is_target=is_target)
    boundary.compute_area_fractions()
    if normals:
        boundary.compute_normal_vectors()
    boundary.compute_holes()

    logger.info(
        "[Boundary] Pipeline done: area=%.6g, holes=%d.", boundary.area, boundary.n_holes
    )
    return boundary
