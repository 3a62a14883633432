from __future__ import annotations

from .load import load_config
from .schema import AppConfig, EnvOverrides, ProjectionConfig

__all__ = ["AppConfig", "EnvOverrides", "ProjectionConfig", "load_config"]
