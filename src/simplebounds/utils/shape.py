from __future__ import annotations

import numpy as np

from ..errors import ShapeMismatchError


def float_dtype(a) -> np.dtype:
    """Element type used for bounds and results when working on ``a``."""
    dt = np.asarray(a).dtype
    if np.issubdtype(dt, np.floating):
        return dt
    return np.dtype(float)


def check_same_shape(**arrays) -> tuple:
    """Return the common shape of the named arrays, ignoring ``None`` entries.

    Raises :class:`ShapeMismatchError` naming the offending arguments.
    """
    ref_name = None
    ref_shape = None
    for name, a in arrays.items():
        if a is None:
            continue
        shape = np.shape(a)
        if ref_shape is None:
            ref_name, ref_shape = name, shape
        elif shape != ref_shape:
            raise ShapeMismatchError(
                f"{name}: shape {shape} incompatible with {ref_name} shape {ref_shape}"
            )
    return ref_shape if ref_shape is not None else ()
