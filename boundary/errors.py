# -*- coding: utf-8 -*-
# LSBound/boundary/errors.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/20/2026

Purpose
-------
Typed exceptions for the boundary engine with compact, context-aware messages so that
configuration problems, capacity overruns and degenerate fields are reported uniformly.

Main Tasks
----------
    1. Define BoundaryError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: ConfigError, CapacityError, DegenerateFieldError, TopologyError.

Notes
-----
- Context is optional; long values are truncated for readability.
- Invalid collaborator inputs (grid sizes, field shapes) raise plain ValueError instead.
"""

__all__ = [
    "BoundaryError",
    "ConfigError",
    "CapacityError",
    "DegenerateFieldError",
    "TopologyError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class BoundaryError(Exception):
    """
    Base class for all boundary-engine errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended to the string form (e.g., {"element": 12, "n_cut": 3}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        return super().__str__() + _format_context(self.context)


class ConfigError(BoundaryError):
    """
    Bad engine options:
      - unknown sections/keys
      - non-numeric or out-of-range values
    """


class CapacityError(BoundaryError):
    """
    The extracted boundary outgrew the pre-sized point/segment estimate while
    `capacity.strict` is enabled.
    """


class DegenerateFieldError(BoundaryError):
    """
    The scalar field admits no well-defined geometry at some location:
      - equal values on a nominally cut edge (zero interpolation denominator)
      - zero gradient magnitude where a normal vector is required
      - a boundary point that received no normal contribution
    """


class TopologyError(BoundaryError):
    """
    Internal invariant violation during extraction, e.g. a cut-edge count that has no
    handling branch.
    """
