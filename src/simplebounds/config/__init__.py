"""Settings for simplebounds."""

from .loader import load_settings, read_yaml
from .schema import BoxConfig, LoggingConfig, Settings

__all__ = ["BoxConfig", "LoggingConfig", "Settings", "load_settings", "read_yaml"]
