# -*- coding: utf-8 -*-
# LSBound/boundary/config.py

"""
Project: LSBound
Author: LSBound contributors
Date: 9/20/2026 (Updated: 10/6/2026)

Purpose
-------
Engine options: sectioned defaults, a right-biased deep merge for user overrides, and a
small schema that checks every key against a numeric range (or a boolean) before the engine
sees it.

Main Tasks
----------
    1. Hold `DEFAULTS` (tolerances, capacity heuristic, point seeding).
    2. `resolve_config(overrides)` → merged, validated copy (inputs never mutated).
    3. Reject unknown sections/keys and bad values with `ConfigError`.

Notes
-----
- `tolerances.eps` is the "exactly on the boundary" tolerance used for node classification,
  point de-duplication and domain pinning.
- `tolerances.lock_radius_sqd` is the squared distance under which a boundary point takes its
  node's normal directly.
"""

import copy
from typing import Any, Dict, Optional
from .errors import ConfigError

__all__ = ["DEFAULTS", "RANGES", "resolve_config"]


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "tolerances": {
        "eps": 1e-6,
        "lock_radius_sqd": 1e-6,
    },
    "capacity": {
        "fraction": 0.2,      # of node count
        "minimum": 4,
        "strict": False,      # raise CapacityError instead of growing
    },
    "points": {
        "n_sensitivities": 2,  # objective + one constraint
        "domain_margin": 0.5,  # grid units
    },
}

# (section, key) -> (min, max, inclusive_bounds)
RANGES = {
    ("tolerances", "eps"): (0.0, 1e-2, False),
    ("tolerances", "lock_radius_sqd"): (0.0, 1.0, False),
    ("capacity", "fraction"): (0.0, 10.0, False),
    ("capacity", "minimum"): (1, 10**9, True),
    ("points", "n_sensitivities"): (1, 1024, True),
    ("points", "domain_margin"): (0.0, 1.0, True),
}

_INTEGERS = {("capacity", "minimum"), ("points", "n_sensitivities")}
_BOOLEANS = {("capacity", "strict")}


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), not mutating inputs.
    """
    out = copy.deepcopy(base)
    if not upd:
        return out
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _check_known(cfg: Dict[str, Any]) -> None:
    for section, block in cfg.items():
        if section not in DEFAULTS:
            raise ConfigError("Unknown config section.", {"section": section, "allowed": sorted(DEFAULTS)})
        if not isinstance(block, dict):
            raise ConfigError("Config section must be a dict.", {"section": section, "value": block})
        for key in block:
            if key not in DEFAULTS[section]:
                raise ConfigError("Unknown config key.", {"section": section, "key": key})


def _check_value(section: str, key: str, val: Any) -> Any:
    where = {"section": section, "key": key, "value": val}
    if (section, key) in _BOOLEANS:
        if not isinstance(val, bool):
            raise ConfigError("Expected a boolean.", where)
        return val

    if isinstance(val, bool):
        raise ConfigError("Expected a number, got a boolean.", where)
    try:
        fval = float(val)
    except (TypeError, ValueError):
        raise ConfigError("Non-numeric value.", where)

    lo, hi, inclusive = RANGES[(section, key)]
    ok = (lo <= fval <= hi) if inclusive else (lo < fval < hi)
    if not ok:
        raise ConfigError("Out-of-range value (expected {} {} {}).".format(
            lo, "<= ... <=" if inclusive else "< ... <", hi), where)

    if (section, key) in _INTEGERS:
        if int(fval) != fval:
            raise ConfigError("Expected an integer.", where)
        return int(fval)
    return fval


def resolve_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Dict[str, Any]]:
    """
    Merge `overrides` over `DEFAULTS` and validate every value.

    Parameters
    ----------
    overrides : dict, optional
        Same nested structure as `DEFAULTS`; partial sections are allowed.

    Returns
    -------
    dict
        Fully populated, validated configuration.

    Raises
    ------
    ConfigError
        On unknown sections/keys, wrong types, or out-of-range values.
    """
    if overrides is not None and not isinstance(overrides, dict):
        raise ConfigError("Config overrides must be a dict.", {"value": overrides})
    cfg = _deep_merge(DEFAULTS, overrides)
    _check_known(cfg)
    for section, block in cfg.items():
        for key, val in block.items():
            block[key] = _check_value(section, key, val)
    return cfg
