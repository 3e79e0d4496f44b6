"""Merge hull engine — divide driver and merge step."""

from mergehull.engine.config import HullConfig
from mergehull.engine.merge import merge
from mergehull.engine.merge_hull import InsufficientPointsError, merge_hull

__all__ = [
    "HullConfig",
    "InsufficientPointsError",
    "merge",
    "merge_hull",
]
