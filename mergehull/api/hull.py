"""POST /api/hull — convex hull of a point set."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from shapely.geometry import Polygon

from mergehull.dependencies import get_hull_config
from mergehull.engine.config import HullConfig
from mergehull.engine.merge_hull import InsufficientPointsError, merge_hull
from mergehull.models.requests import HullRequest
from mergehull.models.responses import HullResponse
from mergehull.utils.geometry import is_collinear

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/hull", response_model=HullResponse)
async def hull(req: HullRequest, config: HullConfig = Depends(get_hull_config)) -> HullResponse:
    start = time.perf_counter()

    try:
        contour = merge_hull(req.points, config=config)
    except InsufficientPointsError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    collinear = is_collinear(contour)
    area = 0.0
    if not collinear and len(contour) >= 3:
        area = float(Polygon([(p.x, p.y) for p in contour]).area)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Hull: %d points -> %d vertices in %.1fms", len(req.points), len(contour), elapsed)

    return HullResponse(
        vertices=[(p.x, p.y) for p in contour],
        vertex_count=len(contour),
        collinear=collinear,
        area=area,
        processing_time_ms=round(elapsed, 3),
    )
