# -*- coding: utf-8 -*-
# LSBound/boundary/__init__.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/21/2026 (Updated: 10/4/2026)

Modules:
--------
- classify:    node/element status against a nodal scalar field.
- extraction:  boundary points and segments from cut element edges.
- area:        material area fraction of cut elements.
- normals:     boundary-point normals from nodal level-set gradients.
- topology:    point lengths, adjacency, hole counting, local perimeter.
- engine:      `Boundary`, the stateful engine tying the phases together.
- checks:      consistency rules returning normalized findings.
- report:      summary dictionary.
- api:         one-call pipeline (`discretise`).
- config / errors / records: options, exception hierarchy, point/segment records.
"""

from .engine import Boundary
from .api import discretise
from .checks import run_checks
from .report import summarize
from .errors import (
    BoundaryError,
    ConfigError,
    CapacityError,
    DegenerateFieldError,
    TopologyError,
)

__all__ = [
    "Boundary",
    "discretise",
    "run_checks",
    "summarize",
    "BoundaryError",
    "ConfigError",
    "CapacityError",
    "DegenerateFieldError",
    "TopologyError",
]
