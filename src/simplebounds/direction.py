"""Projection of a search direction onto the set of feasible directions.

A component of the direction is zeroed when following it would immediately
leave the box, that is when it points outward at a variable which is not
strictly inside its bound on that side.  Every other component is passed
through unchanged.
"""

from __future__ import annotations

import numpy as np

from .bounds import check_bounds, lower_bound, upper_bound
from .orientation import BACKWARD, decreasing, increasing, orientation_sign
from .utils.shape import check_same_shape, float_dtype


def project_direction(dst, x, lo, hi, orient, d):
    """Overwrite ``dst`` with the feasible part of ``sign(orient)*d`` at ``x``.

    The written values are those of ``d`` (not multiplied by the sign), with
    blocked components replaced by zero.  ``dst`` may be ``d`` or ``None``.
    """
    x = np.asarray(x)
    d = np.asarray(d)
    dtype = float_dtype(x)
    lo = lower_bound(lo, dtype)
    hi = upper_bound(hi, dtype)
    s = orientation_sign(orient)
    check_same_shape(x=x, d=d, dst=dst, lo=lo.array, hi=hi.array)
    check_bounds(lo, hi)
    if dst is None:
        dst = np.empty(d.shape, dtype=dtype)

    if lo.bounded and hi.bounded:
        keep = np.where(increasing(d, s), x < hi.value, x > lo.value)
    elif lo.bounded:
        keep = increasing(d, s) | (x > lo.value)
    elif hi.bounded:
        keep = decreasing(d, s) | (x < hi.value)
    else:
        if dst is not d:
            np.copyto(dst, d)
        return dst

    np.copyto(dst, np.where(keep, d, dst.dtype.type(0)))
    return dst


def project_gradient(dst, x, lo, hi, g):
    """Project the gradient ``g`` so that ``-dst`` is a feasible descent direction."""
    return project_direction(dst, x, lo, hi, BACKWARD, g)


__all__ = ["project_direction", "project_gradient"]
