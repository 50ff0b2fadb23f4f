"""Step limits along a search direction for the line search."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .bounds import Bound, check_bounds, lower_bound, upper_bound
from .orientation import decreasing, increasing, orientation_sign
from .utils.logging import logger
from .utils.shape import check_same_shape, float_dtype


def _distances(b: Bound, x: np.ndarray, d: np.ndarray, mask: np.ndarray, s: int) -> np.ndarray:
    p = d[mask] if s > 0 else -d[mask]
    return (b.at(mask) - x[mask]) / p


def step_limits(x, lo, hi, orient, d) -> Tuple[float, float]:
    """Compute ``(smin, smax)`` for variables ``x`` moving along ``sign(orient)*d``.

    ``smin`` is the smallest positive step which brings one more variable onto
    a bound and ``smax`` the step beyond which no variable can move any
    further.  ``x`` is assumed feasible.  As a consequence ``0 < smin`` and
    ``0 <= smax``; ``smin`` is infinite when no bound is ever reached and
    ``smax`` is infinite when some variable escapes toward an unlimited side.
    """
    x = np.asarray(x)
    d = np.asarray(d)
    dtype = float_dtype(x)
    lo = lower_bound(lo, dtype)
    hi = upper_bound(hi, dtype)
    s = orientation_sign(orient)
    check_same_shape(x=x, d=d, lo=lo.array, hi=hi.array)
    check_bounds(lo, hi)

    inf = dtype.type(np.inf)
    if not (lo.bounded or hi.bounded):
        return inf, inf

    up = increasing(d, s)
    down = decreasing(d, s)
    escape = False
    parts = []
    with np.errstate(over="ignore", invalid="ignore"):
        if hi.bounded:
            parts.append(_distances(hi, x, d, up, s))
        elif up.any():
            escape = True
        if lo.bounded:
            parts.append(_distances(lo, x, d, down, s))
        elif down.any():
            escape = True
    a = np.concatenate(parts).astype(dtype, copy=False)
    # comparisons drop NaN distances and the variables already at a bound
    a = a[a > 0]
    smin = dtype.type(a.min(initial=inf))
    smax = inf if escape else dtype.type(a.max(initial=0))
    logger.debug("step_limits n=%d smin=%g smax=%g", x.size, smin, smax)
    return smin, smax


__all__ = ["step_limits"]
