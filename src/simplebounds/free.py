"""Selection of the variables that are free to move.

Two forms are provided::

    free_variables(sel, gp)
    free_variables(sel, x, lo, hi, orient, d)

The first keeps the nonzero entries of a projected direction ``gp``, for
instance ``project_gradient(gp, x, lo, hi, g)``.  The second decides from the
variables, the bounds and the direction directly.  The two do not agree on
zero direction components when there are no bounds at all: the direct form
then declares every variable free.
"""

from __future__ import annotations

import numpy as np

from .bounds import check_bounds, lower_bound, upper_bound
from .buffers import IndexBuffer
from .orientation import decreasing, increasing, orientation_sign
from .utils.logging import logger
from .utils.shape import check_same_shape, float_dtype


def _store(sel, mask: np.ndarray):
    idx = np.flatnonzero(mask)
    if sel is None:
        sel = IndexBuffer(mask.size)
    if isinstance(sel, IndexBuffer):
        sel.resize(idx.size)
        sel.data[: idx.size] = idx
    elif isinstance(sel, list):
        sel[:] = idx.tolist()
    else:
        raise TypeError(f"sel must be an IndexBuffer or a list, got {type(sel).__name__}")
    logger.debug("free_variables %d/%d", idx.size, mask.size)
    return sel


def _free_from_projected(sel, gp):
    gp = np.asarray(gp)
    return _store(sel, gp != 0)


def _free_along(sel, x, lo, hi, orient, d):
    x = np.asarray(x)
    d = np.asarray(d)
    dtype = float_dtype(x)
    lo = lower_bound(lo, dtype)
    hi = upper_bound(hi, dtype)
    s = orientation_sign(orient)
    check_same_shape(x=x, d=d, lo=lo.array, hi=hi.array)
    check_bounds(lo, hi)

    if lo.bounded and hi.bounded:
        mask = (d != 0) & np.where(decreasing(d, s), x > lo.value, x < hi.value)
    elif lo.bounded:
        mask = increasing(d, s) | ((d != 0) & (x > lo.value))
    elif hi.bounded:
        mask = decreasing(d, s) | ((d != 0) & (x < hi.value))
    else:
        mask = np.ones(x.shape, dtype=bool)
    return _store(sel, mask)


def free_variables(sel, *args):
    """Overwrite ``sel`` with the ascending flat indices of the free variables.

    ``sel`` is an :class:`IndexBuffer` (resized in place), a ``list``
    (overwritten), or ``None`` to allocate a new buffer.  The remaining
    arguments are either ``(gp,)`` or ``(x, lo, hi, orient, d)``.
    """
    if len(args) == 1:
        return _free_from_projected(sel, *args)
    if len(args) == 5:
        return _free_along(sel, *args)
    raise TypeError(
        f"free_variables expects (sel, gp) or (sel, x, lo, hi, orient, d), got {len(args) + 1} arguments"
    )


def get_free_variables(*args) -> IndexBuffer:
    """Allocating version of :func:`free_variables`."""
    return free_variables(None, *args)


__all__ = ["free_variables", "get_free_variables"]
