"""Hull configuration — controls how the divide driver schedules its recursion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mergehull.config import Settings


@dataclass
class HullConfig:
    """Controls the divide step of merge_hull. Results never depend on it."""

    # Compute the two halves of large sub-ranges in worker threads
    parallel: bool = False
    # Smallest sub-range (in points) that is split across threads
    parallel_threshold: int = 4096
    # None lets ThreadPoolExecutor pick
    max_workers: int | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> HullConfig:
        return cls(
            parallel=settings.hull_parallel,
            parallel_threshold=settings.hull_parallel_threshold,
        )
