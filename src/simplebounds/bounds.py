"""Normalisation of simple bound constraints and NaN-tolerant clamping.

A bound on one side of the box is either absent, a single value shared by all
variables, or one value per variable.  :func:`lower_bound` and
:func:`upper_bound` turn whatever the caller passes into a :class:`Bound` so
that the operations can branch once on the bound kinds and then run a single
vectorised expression over the arrays.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from .errors import InvalidBoundsError


def _finish(r: np.ndarray, out):
    if out is not None:
        np.copyto(out, r)
        return out
    return r[()] if r.ndim == 0 else r


def fastmin(x, y, out=None):
    """Least of ``x`` and ``y``, or ``x`` if either is NaN.

    Unlike :func:`numpy.minimum`, NaNs are not propagated from ``y``: the
    comparison ``x > y`` is false whenever a NaN is involved, so ``x`` is
    returned as is.
    """
    return _finish(np.where(x > y, y, x), out)


def fastmax(x, y, out=None):
    """Greatest of ``x`` and ``y``, or ``x`` if either is NaN."""
    return _finish(np.where(x < y, y, x), out)


def fastclamp(x, lo, hi, out=None):
    """Clamp ``x`` into ``[lo, hi]`` without special treatment of NaNs.

    ``lo`` or ``hi`` may be ``None`` for no limit on that side.  This is
    ``fastmax(fastmin(x, hi), lo)``: a NaN in ``x`` goes through unchanged.
    """
    r = np.asarray(x)
    if hi is not None:
        r = np.where(r > hi, hi, r)
    if lo is not None:
        r = np.where(r < lo, lo, r)
    return _finish(np.asarray(r), out)


class BoundKind(str, Enum):
    NONE = "none"
    SCALAR = "scalar"
    ARRAY = "array"


@dataclass(frozen=True)
class Bound:
    """One side of a box: absent, uniform scalar or per-element array."""

    kind: BoundKind
    value: Any
    upper: bool

    @property
    def bounded(self) -> bool:
        return self.kind is not BoundKind.NONE

    @property
    def array(self):
        """The per-element values, or ``None`` for absent and scalar bounds."""
        return self.value if self.kind is BoundKind.ARRAY else None

    @property
    def dtype(self) -> np.dtype:
        return np.asarray(self.value).dtype

    def values(self, dtype=None):
        """Element values broadcastable against the variables.

        Absent bounds resolve to ``-inf`` (lower) or ``+inf`` (upper).
        """
        if self.bounded:
            return self.value
        dt = np.dtype(dtype if dtype is not None else float)
        return dt.type(np.inf) if self.upper else dt.type(-np.inf)

    def at(self, mask):
        """Bound values for the entries selected by ``mask``."""
        if self.kind is BoundKind.ARRAY:
            return self.value[mask]
        return self.value


def _make_bound(b, dtype, upper: bool) -> Bound:
    dt = np.dtype(dtype)
    if isinstance(b, Bound):
        if b.upper != upper:
            side = "upper" if b.upper else "lower"
            raise TypeError(f"expected a {'upper' if upper else 'lower'} bound, got a {side} bound")
        if not b.bounded or b.dtype == dt:
            return b
        b = b.value
    if b is None:
        return Bound(BoundKind.NONE, None, upper)
    if np.ndim(b) == 0:
        v = dt.type(b)
        # an infinite scalar on its own side imposes nothing
        if (upper and v == np.inf) or (not upper and v == -np.inf):
            return Bound(BoundKind.NONE, None, upper)
        return Bound(BoundKind.SCALAR, v, upper)
    arr = np.asarray(b)
    if arr.dtype != dt:
        arr = arr.astype(dt)
    return Bound(BoundKind.ARRAY, arr, upper)


def lower_bound(b, dtype=np.float64) -> Bound:
    """Convert ``b`` (``None``, a real or an array) into a lower :class:`Bound`."""
    return _make_bound(b, dtype, upper=False)


def upper_bound(b, dtype=np.float64) -> Bound:
    """Convert ``b`` (``None``, a real or an array) into an upper :class:`Bound`."""
    return _make_bound(b, dtype, upper=True)


def check_bounds(lo: Bound, hi: Bound) -> None:
    """Raise :class:`InvalidBoundsError` unless ``lo <= hi`` everywhere.

    NaN bounds are rejected as well; they are looked for explicitly since a
    comparison involving a NaN is simply false.
    """
    if not (lo.bounded or hi.bounded):
        return
    lv = np.asarray(lo.values(hi.dtype if hi.bounded else None))
    hv = np.asarray(hi.values(lo.dtype if lo.bounded else None))
    if np.isnan(lv).any() or np.isnan(hv).any():
        raise InvalidBoundsError("invalid bounds: NaN bound value")
    if not np.all(lv <= hv):
        raise InvalidBoundsError("invalid bounds: lower bound exceeds upper bound")


__all__ = [
    "Bound",
    "BoundKind",
    "check_bounds",
    "fastclamp",
    "fastmax",
    "fastmin",
    "lower_bound",
    "upper_bound",
]
