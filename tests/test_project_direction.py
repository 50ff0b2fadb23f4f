import numpy as np
import pytest

from simplebounds import (
    BACKWARD,
    FORWARD,
    InvalidBoundsError,
    ShapeMismatchError,
    project_direction,
    project_gradient,
)


def test_blocked_at_tight_upper_bound():
    x = np.array([1.0])
    lo = np.array([0.0])
    hi = np.array([1.0])
    np.testing.assert_array_equal(project_direction(None, x, lo, hi, FORWARD, np.array([5.0])), [0.0])
    np.testing.assert_array_equal(project_direction(None, x, lo, hi, FORWARD, np.array([-5.0])), [-5.0])


def test_backward_flips_the_rule():
    x = np.array([1.0, 0.0])
    d = np.array([5.0, 5.0])
    # moving along -d: first entry goes inward, second goes below the lower bound
    np.testing.assert_array_equal(project_direction(None, x, 0.0, 1.0, BACKWARD, d), [5.0, 0.0])
    np.testing.assert_array_equal(project_direction(None, x, 0.0, 1.0, -3.0, d), [5.0, 0.0])


def test_interior_point_keeps_direction(box, rng):
    lo, hi = box
    x = 0.5 * (lo + hi)
    inside = lo < hi
    d = rng.normal(size=lo.size)
    for orient in (FORWARD, BACKWARD):
        dst = project_direction(None, x, lo, hi, orient, d)
        np.testing.assert_array_equal(dst[inside], d[inside])


def test_single_sided_bounds():
    x = np.array([0.0, 0.0, 1.0, 1.0])
    d = np.array([1.0, -1.0, 1.0, -1.0])
    np.testing.assert_array_equal(project_direction(None, x, 0.0, None, FORWARD, d), [1.0, 0.0, 1.0, -1.0])
    np.testing.assert_array_equal(project_direction(None, x, None, 1.0, FORWARD, d), [1.0, -1.0, 0.0, -1.0])
    np.testing.assert_array_equal(project_direction(None, x, 0.0, None, BACKWARD, d), [0.0, -1.0, 1.0, -1.0])
    np.testing.assert_array_equal(project_direction(None, x, None, 1.0, BACKWARD, d), [1.0, -1.0, 1.0, 0.0])


def test_unbounded_is_a_copy():
    d = np.array([1.0, -2.0])
    dst = np.zeros(2)
    assert project_direction(dst, np.zeros(2), None, None, FORWARD, d) is dst
    np.testing.assert_array_equal(dst, d)
    assert project_direction(d, np.zeros(2), None, None, FORWARD, d) is d


def test_in_place_over_direction():
    x = np.array([0.0, 0.5, 1.0])
    d = np.array([-1.0, -1.0, 1.0])
    res = project_direction(d, x, 0.0, 1.0, FORWARD, d)
    assert res is d
    np.testing.assert_array_equal(d, [0.0, -1.0, 0.0])


def test_projected_gradient():
    x = np.array([0.0, 0.5, 1.0, 1.0])
    g = np.array([1.0, 1.0, -1.0, 1.0])
    # -g pushes x[0] below 0 and x[2] above 1
    gp = project_gradient(np.empty(4), x, 0.0, 1.0, g)
    np.testing.assert_array_equal(gp, [0.0, 1.0, 0.0, 1.0])


def test_nan_bound_rejected_before_writing():
    dst = np.full(2, 3.0)
    with pytest.raises(InvalidBoundsError):
        project_direction(dst, np.zeros(2), np.array([0.0, np.nan]), 1.0, FORWARD, np.ones(2))
    np.testing.assert_array_equal(dst, [3.0, 3.0])


def test_invalid_bounds_and_shape():
    with pytest.raises(InvalidBoundsError):
        project_gradient(None, np.zeros(1), np.array([2.0]), np.array([1.0]), np.ones(1))
    with pytest.raises(ShapeMismatchError):
        project_direction(None, np.zeros(2), 0.0, 1.0, FORWARD, np.ones(3))
