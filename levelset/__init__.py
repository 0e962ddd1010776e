# -*- coding: utf-8 -*-
# LSBound/levelset/__init__.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/15/2026

Modules:
--------
- field:   LevelSet container (signed distance, target, narrow band, move limit).
- shapes:  Analytic signed-distance builders (half plane, disk, holes, annulus, union).
"""

from .field import LevelSet

__all__ = ["LevelSet", "field", "shapes"]
