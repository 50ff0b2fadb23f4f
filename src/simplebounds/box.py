"""A lower/upper bound pair reused across optimizer iterations."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .bounds import Bound, check_bounds, lower_bound, upper_bound
from .direction import project_direction, project_gradient
from .free import free_variables
from .project import project_variables
from .step import step_limits
from .utils.shape import float_dtype


@dataclass(frozen=True)
class BoxConstraints:
    """Normalised bounds ``lower <= x <= upper``, validated at construction."""

    lower: Bound
    upper: Bound

    @classmethod
    def from_values(cls, lower=None, upper=None, dtype=np.float64) -> "BoxConstraints":
        lo = lower_bound(lower, dtype)
        hi = upper_bound(upper, dtype)
        check_bounds(lo, hi)
        return cls(lo, hi)

    @property
    def bounded(self) -> bool:
        return self.lower.bounded or self.upper.bounded

    def contains(self, x) -> bool:
        """Whether ``x`` satisfies the bounds (NaN entries never do)."""
        x = np.asarray(x)
        dt = float_dtype(x)
        return bool(np.all((x >= self.lower.values(dt)) & (x <= self.upper.values(dt))))

    def project(self, dst, src):
        return project_variables(dst, src, self.lower, self.upper)

    def project_direction(self, dst, x, orient, d):
        return project_direction(dst, x, self.lower, self.upper, orient, d)

    def project_gradient(self, dst, x, g):
        return project_gradient(dst, x, self.lower, self.upper, g)

    def step_limits(self, x, orient, d):
        return step_limits(x, self.lower, self.upper, orient, d)

    def free_variables(self, sel, x, orient, d):
        return free_variables(sel, x, self.lower, self.upper, orient, d)


__all__ = ["BoxConstraints"]
