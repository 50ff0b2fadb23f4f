import math

import numpy as np
import pytest

from simplebounds import BACKWARD, FORWARD, InvalidOrientationError, as_orientation, orientation_sign


@pytest.mark.parametrize("o", [FORWARD, 1, 2.5, np.float32(0.1), "forward", " Forward ", "+"])
def test_forward_tokens(o):
    assert as_orientation(o) is FORWARD
    assert orientation_sign(o) == 1


@pytest.mark.parametrize("o", [BACKWARD, -1, -1e-300, "backward", "-"])
def test_backward_tokens(o):
    assert as_orientation(o) is BACKWARD
    assert orientation_sign(o) == -1


@pytest.mark.parametrize("o", [0, 0.0, -0.0, math.nan, "sideways", None, True])
def test_invalid_orientation(o):
    with pytest.raises(InvalidOrientationError):
        as_orientation(o)
