"""Pydantic models for box and logging settings."""
from __future__ import annotations

import math
from typing import List, Literal, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

BoundValue = Union[None, float, List[float]]


def _as_list(v: BoundValue, n: int, fill: float) -> List[float]:
    if v is None:
        return [fill] * n
    if isinstance(v, list):
        return v
    return [v] * n


class BoxConfig(BaseModel):
    """Bounds given as ``null`` (no limit), a number or a list of numbers."""

    lower: BoundValue = None
    upper: BoundValue = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_box(self) -> "BoxConfig":
        sizes = {len(v) for v in (self.lower, self.upper) if isinstance(v, list)}
        if len(sizes) > 1:
            raise ValueError(f"lower and upper lists differ in length: {sorted(sizes)}")
        n = sizes.pop() if sizes else 1
        lo = _as_list(self.lower, n, -math.inf)
        hi = _as_list(self.upper, n, math.inf)
        for i, (a, b) in enumerate(zip(lo, hi)):
            if math.isnan(a) or math.isnan(b):
                raise ValueError(f"bound {i} is NaN")
            if a > b:
                raise ValueError(f"lower[{i}]={a} exceeds upper[{i}]={b}")
        return self

    def to_constraints(self, dtype=np.float64):
        from ..box import BoxConstraints

        return BoxConstraints.from_values(self.lower, self.upper, dtype=dtype)


class LoggingConfig(BaseModel):
    level: Literal["none", "info", "debug"] = "none"
    format: Literal["text", "json"] = "text"

    model_config = ConfigDict(extra="forbid")


class Settings(BaseModel):
    box: BoxConfig = Field(default_factory=BoxConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


__all__ = ["BoxConfig", "LoggingConfig", "Settings"]
