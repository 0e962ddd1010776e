# -*- coding: utf-8 -*-
# LSBound/boundary/checks.py

"""
Project: LSBound
Author: LSBound contributors
Date: 10/3/2026

Purpose:
--------
Consistency rules over a discretised `Boundary`, returned as normalized findings that a driver
or CI job can aggregate, print, or turn into exit codes.

Finding Schema:
---------------
    {
      "id": "<rule_id>",
      "severity": "error" | "warn",
      "ok": bool,
      "count": int,          # number of violations
      "examples": [...],     # capped sample of offending indices
      "details": {...},
    }

Returned Schema:
----------------
{
  "ok": bool,                      # False iff any ERROR rule fails
  "rules": { <rule_id>: finding, ... },
  "meta": {"n_points": int, "n_segments": int, "n_elements": int, "thresholds": dict, "enabled": dict}
}

Rules:
------
   - segment_endpoints  (error): endpoints distinct and inside the owning element's cell.
   - length_consistency (error): total length equals the sum of segment lengths.
   - point_lengths      (error): every point length is half the sum of its segments' lengths.
   - area_range         (error): every element fraction lies in [0, 1].
   - open_ends          (warn):  points with fewer than two neighbours (boundary ends at a
                                 clipped narrow band, or a loop not closed).
"""

import copy
from typing import Any, Callable, Dict, List, Optional, Tuple
from .config import _deep_merge


CHECK_DEFAULTS: Dict[str, Any] = {
    "enabled": {
        "segment_endpoints": True,
        "length_consistency": True,
        "point_lengths": True,
        "area_range": True,
        "open_ends": True,
    },
    "thresholds": {
        "tol": 1e-9,
    },
}


def _finding(rule_id: str, severity: str, ok: bool, count: int, examples: List, details: Dict):
    return {
        "id": rule_id,
        "severity": severity,
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:25],
        "details": details or {},
    }


def segment_endpoints(boundary, th) -> Dict:
    tol = th["tol"]
    grid = boundary.grid
    bad = []
    for s, seg in enumerate(boundary.segments):
        if seg.start == seg.end:
            bad.append(s)
            continue
        lo = grid.nodes[grid.elements[seg.element].nodes[0]].coord
        for p in (seg.start, seg.end):
            c = boundary.points[p].coord
            if (c < lo - tol).any() or (c > lo + 1.0 + tol).any():
                bad.append(s)
                break
    return _finding("segment_endpoints", "error", not bad, len(bad), bad, {})


def length_consistency(boundary, th) -> Dict:
    total = sum(seg.length for seg in boundary.segments)
    diff = abs(boundary.length - total)
    ok = diff <= th["tol"] * max(1.0, total)
    return _finding(
        "length_consistency", "error", ok, 0 if ok else 1, [],
        {"length": boundary.length, "segment_sum": total, "abs_diff": diff},
    )


def point_lengths(boundary, th) -> Dict:
    expected = [0.0] * boundary.n_points
    for seg in boundary.segments:
        expected[seg.start] += 0.5 * seg.length
        expected[seg.end] += 0.5 * seg.length
    bad = [i for i, p in enumerate(boundary.points)
           if abs(p.length - expected[i]) > th["tol"] * max(1.0, expected[i])]
    return _finding("point_lengths", "error", not bad, len(bad), bad, {})


def area_range(boundary, th) -> Dict:
    tol = th["tol"]
    bad = [e.index for e in boundary.grid.elements if e.area < -tol or e.area > 1.0 + tol]
    return _finding("area_range", "error", not bad, len(bad), bad, {"note": "fractions of a unit cell"})


def open_ends(boundary, th) -> Dict:
    bad = [i for i, p in enumerate(boundary.points) if p.n_neighbours < 2]
    return _finding("open_ends", "warn", not bad, len(bad), bad, {})


RULES: Tuple[Tuple[str, Callable], ...] = (
    ("segment_endpoints", segment_endpoints),
    ("length_consistency", length_consistency),
    ("point_lengths", point_lengths),
    ("area_range", area_range),
    ("open_ends", open_ends),
)


def run_checks(boundary, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run all enabled rules (in `RULES` order) against a discretised boundary.

    Parameters
    ----------
    boundary : Boundary
        Engine after `discretise` (and `compute_area_fractions` for `area_range`).
    config : dict, optional
        Overrides for `CHECK_DEFAULTS` (keys: "enabled", "thresholds").

    Returns
    -------
    dict
        {"ok": bool, "rules": {rule_id: finding}, "meta": {...}}
    """
    cfg = _deep_merge(CHECK_DEFAULTS, config or {})
    th = cfg["thresholds"]
    enabled = cfg["enabled"]

    results: Dict[str, Any] = {}
    for rid, fn in RULES:
        if not enabled.get(rid, False):
            continue
        results[rid] = fn(boundary, th)

    ok = all(f["ok"] for f in results.values() if f["severity"] == "error")
    return {
        "ok": ok,
        "rules": results,
        "meta": {
            "n_points": boundary.n_points,
            "n_segments": boundary.n_segments,
            "n_elements": boundary.grid.n_elements,
            "thresholds": copy.deepcopy(th),
            "enabled": copy.deepcopy(enabled),
        },
    }
