"""Utilities for dotted-path configuration access and merging."""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Mapping


def get(cfg: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Return ``cfg[path]`` where *path* uses dot notation.

    Missing keys return *default* without raising ``KeyError``.
    """
    cur: Any = cfg
    for part in path.split('.'):
        if not isinstance(cur, Mapping) or part not in cur:
            return default
        cur = cur[part]
    return cur


def deep_update(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict:
    """Return a copy of *base* recursively updated with *override*.

    Nested mappings are merged; any other value in *override* replaces the
    one in *base*.  Neither argument is modified.
    """
    result = deepcopy(dict(base))
    stack = [(result, override)]
    while stack:
        dst, src = stack.pop()
        for k, v in src.items():
            if isinstance(v, Mapping) and isinstance(dst.get(k), dict):
                dst[k] = deepcopy(dst[k])
                stack.append((dst[k], v))
            else:
                dst[k] = deepcopy(v)
    return result


__all__ = ["get", "deep_update"]
