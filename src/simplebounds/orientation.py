"""Sign convention applied to a search direction."""

from __future__ import annotations

import math
from enum import IntEnum
from numbers import Real

import numpy as np

from .errors import InvalidOrientationError


class Orientation(IntEnum):
    FORWARD = 1
    BACKWARD = -1


FORWARD = Orientation.FORWARD
BACKWARD = Orientation.BACKWARD

_NAMES = {
    "forward": FORWARD,
    "+": FORWARD,
    "backward": BACKWARD,
    "-": BACKWARD,
}


def as_orientation(orient) -> Orientation:
    """Normalise ``orient`` to an :class:`Orientation`.

    Accepts an :class:`Orientation`, the names ``"forward"``/``"backward"``
    or any nonzero real number, of which only the sign is kept.
    """
    if isinstance(orient, Orientation):
        return orient
    if isinstance(orient, str):
        try:
            return _NAMES[orient.strip().lower()]
        except KeyError:
            raise InvalidOrientationError(f"invalid orientation: {orient!r}") from None
    if isinstance(orient, (Real, np.number)) and not isinstance(orient, (bool, np.bool_)):
        v = float(orient)
        if v > 0:
            return FORWARD
        if v < 0:
            return BACKWARD
        raise InvalidOrientationError(f"invalid orientation: {orient!r}" + (" (NaN)" if math.isnan(v) else ""))
    raise InvalidOrientationError(f"invalid orientation: {orient!r}")


def orientation_sign(orient) -> int:
    """``+1`` for forward, ``-1`` for backward."""
    return int(as_orientation(orient))


def increasing(d: np.ndarray, sign: int) -> np.ndarray:
    """Mask of the entries where ``sign*d > 0``."""
    return d > 0 if sign > 0 else d < 0


def decreasing(d: np.ndarray, sign: int) -> np.ndarray:
    """Mask of the entries where ``sign*d < 0``."""
    return d < 0 if sign > 0 else d > 0


__all__ = [
    "BACKWARD",
    "FORWARD",
    "Orientation",
    "as_orientation",
    "decreasing",
    "increasing",
    "orientation_sign",
]
