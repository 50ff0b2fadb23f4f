"""Settings loader."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..utils.config import deep_update
from .schema import Settings

__all__ = ["load_settings", "read_yaml"]


def read_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise TypeError(f"Top-level YAML at {path} must be a mapping")
        return data


def load_settings(
    path: Optional[str | Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """Load settings from ``path`` (missing file means defaults) and ``overrides``.

    Unknown keys and inconsistent bounds raise :class:`pydantic.ValidationError`.
    """
    cfg: Dict[str, Any] = read_yaml(path) if path is not None else {}
    if overrides:
        cfg = deep_update(cfg, overrides)
    return Settings.model_validate(cfg)
