import numpy as np
import pytest

from simplebounds import IndexBuffer


def test_resize_within_capacity_keeps_storage():
    buf = IndexBuffer(8)
    storage = buf.data
    buf.resize(5)
    buf.resize(2)
    assert buf.size == 2 and len(buf) == 2
    assert buf.data is storage
    assert buf.capacity == 8


def test_growth_preserves_content():
    buf = IndexBuffer(2)
    buf.resize(2)
    buf.data[:2] = [4, 7]
    buf.resize(3)
    assert buf.capacity >= 3
    assert buf.indices[:2].tolist() == [4, 7]


def test_array_protocol_and_iteration():
    buf = IndexBuffer(3)
    buf.resize(3)
    buf.data[:] = [0, 2, 5]
    np.testing.assert_array_equal(np.asarray(buf), [0, 2, 5])
    assert list(buf) == [0, 2, 5]
    assert buf[1] == 2
    assert "capacity=3" in repr(buf)
    buf.clear()
    assert buf.tolist() == []


def test_negative_sizes_rejected():
    with pytest.raises(ValueError):
        IndexBuffer(-1)
    with pytest.raises(ValueError):
        IndexBuffer().resize(-1)
