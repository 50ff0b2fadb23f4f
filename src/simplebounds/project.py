"""Projection of variables onto the feasible box."""

from __future__ import annotations

import numpy as np

from .bounds import check_bounds, fastclamp, fastmax, fastmin, lower_bound, upper_bound
from .utils.shape import check_same_shape, float_dtype


def project_variables(dst, src, lo=None, hi=None):
    """Overwrite ``dst`` with the projection of ``src`` onto ``[lo, hi]``.

    Parameters
    ----------
    dst:
        Destination array, may be ``src`` itself for an in-place projection,
        or ``None`` to allocate a new array.
    src:
        Variables to project.
    lo, hi:
        Lower and upper bounds: ``None`` (no limit), a scalar shared by all
        variables, or an array of the same shape as ``src``.

    Returns
    -------
    np.ndarray
        ``dst``.

    Notes
    -----
    Clamping relies on :func:`fastmin` and :func:`fastmax`, hence a NaN in
    ``src`` is left unchanged.  With no bound at all the operation reduces to
    a copy, which is skipped when ``dst`` is ``src``.
    """
    src = np.asarray(src)
    dtype = float_dtype(src)
    lo = lower_bound(lo, dtype)
    hi = upper_bound(hi, dtype)
    check_same_shape(src=src, dst=dst, lo=lo.array, hi=hi.array)
    check_bounds(lo, hi)
    if dst is None:
        dst = np.empty(src.shape, dtype=dtype)

    if lo.bounded and hi.bounded:
        fastclamp(src, lo.value, hi.value, out=dst)
    elif lo.bounded:
        fastmax(src, lo.value, out=dst)
    elif hi.bounded:
        fastmin(src, hi.value, out=dst)
    elif dst is not src:
        np.copyto(dst, src)
    return dst


__all__ = ["project_variables"]
