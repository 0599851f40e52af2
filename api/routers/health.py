# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: health.py
# -----------------------------------------------------------------------------
import logging
from fastapi import APIRouter, Depends, HTTPException, Query

from api.schemas.health import HealthResponse, DeepHealthResponse
from api.dependencies import get_health_service
from services.PilaHealthService import PilaHealthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", response_model=HealthResponse)
def health_check(svc: PilaHealthService = Depends(get_health_service)) -> HealthResponse:
    return svc.basic_health()


@router.get("/deep", response_model=DeepHealthResponse)
def deep_health_check(
    svc: PilaHealthService = Depends(get_health_service),
    run_upstream: bool = Query(False, description="Also contact the UPLOAD_DOCUMENTO API"),
) -> DeepHealthResponse:
    logger.info("GET /health/deep called (run_upstream=%s)", run_upstream)
    try:
        result = svc.deep_health(run_upstream=run_upstream)
        logger.info("GET /health/deep completed status=%s", result.status)
        return result
    except Exception as e:
        logger.exception("GET /health/deep failed: %s", e)
        raise HTTPException(status_code=500, detail=f"deep health failed: {e}")
