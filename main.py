# -*- coding: utf-8 -*-
# LSBound/main.py

"""
End-to-end driver:
  1) Build a structured grid and a level set (plate with circular voids)
  2) Restrict the narrow band around the zero contour
  3) Discretise the boundary, measure areas/normals, count holes
  4) Summary + consistency checks (hard stop on errors)
  5) Discretise a fixed target boundary (no narrow band)
  6) Plots (optional)
"""

import logging
import sys

from grid import StructuredGrid
from levelset import LevelSet
from levelset.shapes import holes, disk
from boundary import Boundary, discretise, run_checks, summarize
from post.plot_area import plot_area_fractions
from post.plot_boundary import plot_boundary


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("LSBound")

    PLOT = "--plot" in sys.argv[1:]

    # ------------------------------------------------------------------
    # 1) Grid + level set
    #    Material everywhere except three circular voids; a disk as fixed target.
    # ------------------------------------------------------------------
    grid = StructuredGrid(60, 30)
    voids = [(12.3, 15.1, 5.2), (30.4, 14.7, 6.3), (47.6, 15.2, 4.4)]
    ls = LevelSet.from_function(
        grid,
        holes(voids),
        target_fn=disk(30.4, 14.7, 9.1),
        move_limit=0.5,
    )

    # ------------------------------------------------------------------
    # 2) Narrow band: nodes within 3 cells of the zero contour
    # ------------------------------------------------------------------
    band = ls.update_narrow_band(3.0)
    log.info("Narrow band: %d of %d nodes.", band.size, grid.n_nodes)

    # ------------------------------------------------------------------
    # 3) Boundary pipeline
    # ------------------------------------------------------------------
    engine_config = None  # or e.g. {"capacity": {"strict": True}}
    boundary = discretise(grid, ls, config=engine_config)

    # ------------------------------------------------------------------
    # 4) Summary + checks
    # ------------------------------------------------------------------
    summary = summarize(boundary)
    log.info("Boundary summary: %s", summary)

    findings = run_checks(boundary)
    if not findings["ok"]:
        failures = [
            (rid, f["count"], f["examples"][:3])
            for rid, f in findings["rules"].items()
            if f["severity"] == "error" and not f["ok"]
        ]
        lines = [
            "Boundary validation failed. The following error checks did not pass:",
            *(f"  - {rid}: count={cnt}" + (f", examples={ex}" if ex else "") for rid, cnt, ex in failures),
        ]
        print("\n".join(lines), file=sys.stderr)
        sys.exit(1)

    for rid, f in findings["rules"].items():
        if f["severity"] == "warn" and not f["ok"]:
            log.warning("Check '%s' flagged %d item(s): %s", rid, f["count"], f["examples"][:5])

    log.info("Boundary checks passed (%d rules).", len(findings["rules"]))

    # Per-point perimeter of the first few points (local boundary resolution)
    for p in range(min(3, boundary.n_points)):
        log.info("Point %d at %s: perimeter=%.4f, length=%.4f",
                 p, boundary.points[p].coord.tolist(), boundary.compute_perimeter(p), boundary.points[p].length)

    # ------------------------------------------------------------------
    # 5) Target boundary (fixed reference; whole grid, no narrow band)
    # ------------------------------------------------------------------
    target = Boundary(grid, ls)
    target.discretise(is_target=True)
    target.compute_area_fractions()
    target.compute_holes()
    log.info("Target: %d points, length=%.4f, area=%.4f, loops=%d",
             target.n_points, target.length, target.area, target.n_holes)

    # ------------------------------------------------------------------
    # 6) Plots (optional)
    # ------------------------------------------------------------------
    if PLOT:
        # Re-run the live pipeline: the target pass rewrote the grid statuses and areas.
        boundary = discretise(grid, ls, config=engine_config)
        plot_boundary(boundary, normals=True, show=True, save_path="boundary.png")
        plot_area_fractions(grid, show=True, save_path="area_fractions.png")
