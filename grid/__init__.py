# -*- coding: utf-8 -*-
# LSBound/grid/__init__.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/14/2026

Modules:
--------
- structured: StructuredGrid of unit quadrilaterals with Node/Element records,
              (x, y) → index lookup and narrow-band activity flags.

- status:     NodeStatus / ElementStatus enums with explicit predicates and the
              saddle reclassification transition.
"""

from .status import NodeStatus, ElementStatus
from .structured import Node, Element, StructuredGrid

__all__ = ["NodeStatus", "ElementStatus", "Node", "Element", "StructuredGrid"]
