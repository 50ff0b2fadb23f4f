"""Exceptions raised by the bound-constraint operations.

All of them derive from :class:`ValueError` so that callers treating bad
arguments generically keep working.
"""

from __future__ import annotations


class BoundsError(ValueError):
    """Base class for errors raised by :mod:`simplebounds`."""


class InvalidBoundsError(BoundsError):
    """Some lower bound exceeds its upper bound or a bound is NaN."""


class ShapeMismatchError(BoundsError):
    """Arrays passed together do not have the same shape."""


class InvalidOrientationError(BoundsError):
    """Orientation is zero, NaN or an unknown token."""


__all__ = [
    "BoundsError",
    "InvalidBoundsError",
    "ShapeMismatchError",
    "InvalidOrientationError",
]
