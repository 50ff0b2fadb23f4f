import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def n():
    return 16


@pytest.fixture
def box(n, rng):
    lo = rng.uniform(-2.0, 0.0, n)
    hi = lo + rng.uniform(0.0, 3.0, n)
    return lo, hi


@pytest.fixture(params=["none", "scalar", "array"])
def bound_kind(request):
    return request.param


def make_side(kind, value, n):
    if kind == "none":
        return None
    if kind == "scalar":
        return float(value)
    return np.full(n, float(value))
