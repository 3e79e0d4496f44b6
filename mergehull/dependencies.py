"""FastAPI dependency injection."""

from __future__ import annotations

from mergehull.config import settings
from mergehull.engine.config import HullConfig


def get_hull_config() -> HullConfig:
    return HullConfig.from_settings(settings)
