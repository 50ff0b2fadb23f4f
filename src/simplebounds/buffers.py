"""Caller-owned growable buffer of indices."""

from __future__ import annotations

import numpy as np

from .utils.logging import logger


class IndexBuffer:
    """Index storage with a logical length.

    The storage is only reallocated when asked to hold more indices than its
    capacity, so a buffer kept across optimizer iterations settles at the
    size of the problem.  :attr:`indices` is a view on the first :attr:`size`
    entries.
    """

    __slots__ = ("_data", "_size")

    def __init__(self, capacity: int = 0):
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._data = np.empty(int(capacity), dtype=np.intp)
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._data.size

    @property
    def size(self) -> int:
        return self._size

    @property
    def data(self) -> np.ndarray:
        """Whole storage, including the entries past the logical length."""
        return self._data

    @property
    def indices(self) -> np.ndarray:
        return self._data[: self._size]

    def reserve(self, capacity: int) -> None:
        if capacity > self._data.size:
            new = np.empty(int(capacity), dtype=np.intp)
            new[: self._size] = self._data[: self._size]
            logger.debug("IndexBuffer grow %d -> %d", self._data.size, capacity)
            self._data = new

    def resize(self, n: int) -> None:
        """Set the logical length to ``n``, growing the storage if needed."""
        if n < 0:
            raise ValueError("size must be >= 0")
        if n > self._data.size:
            self.reserve(max(n, 2 * self._data.size))
        self._size = int(n)

    def clear(self) -> None:
        self._size = 0

    def tolist(self) -> list:
        return self.indices.tolist()

    def __len__(self) -> int:
        return self._size

    def __iter__(self):
        return iter(self.indices.tolist())

    def __getitem__(self, i):
        return self.indices[i]

    def __array__(self, dtype=None, copy=None):
        a = self.indices
        if dtype is not None:
            a = a.astype(dtype)
        return a.copy() if copy else a

    def __repr__(self) -> str:
        return f"IndexBuffer({self.tolist()!r}, capacity={self.capacity})"


__all__ = ["IndexBuffer"]
