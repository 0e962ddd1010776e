# -*- coding: utf-8 -*-
# LSBound/post/__init__.py

"""
Project: LSBound
Author: LSBound contributors
Date: 10/7/2026 (Updated: 10/19/2026)

Modules:
--------
- plot_boundary:  Grid wireframe with boundary segments, points and normals.
                  matplotlib, headless-safe backend.

- plot_area:      Per-element material area fraction map (`plot_area_fractions`).
"""

__all__ = ["plot_boundary", "plot_area"]
