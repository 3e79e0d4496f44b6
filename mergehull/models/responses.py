"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class HullResponse(BaseModel):
    vertices: list[tuple[float, float]] = Field(
        default_factory=list,
        description="Hull vertices in counter-clockwise order",
    )
    vertex_count: int = 0
    collinear: bool = False
    area: float = 0.0
    processing_time_ms: float = 0.0
