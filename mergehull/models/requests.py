"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HullRequest(BaseModel):
    points: list[tuple[float, float]] = Field(
        ...,
        description="Input points as [x, y] pairs, in any order",
    )
