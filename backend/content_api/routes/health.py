"""
Content API — Health Check Route
==================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Checks that the storage root is reachable and reports uptime.

    Status levels:
    - healthy:   Storage root exists and is a directory (HTTP 200)
    - unhealthy: Storage root missing or unreadable (HTTP 503)
"""

import logging
import time

import aiofiles.os
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from content_api import __version__
from content_api.schemas.content import HealthResponse
from content_api.storage import LocalFileStorage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Storage unavailable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check():
    storage_status = "available"
    overall = "healthy"

    try:
        storage = get_storage()
        if isinstance(storage, LocalFileStorage):
            if not await aiofiles.os.path.isdir(storage.storage_root):
                storage_status = "unavailable"
                overall = "unhealthy"
    except Exception as e:
        storage_status = "unavailable"
        overall = "unhealthy"
        logger.warning("Health check: storage unreachable: %s", str(e))

    result = HealthResponse(
        status=overall,
        version=__version__,
        storage=storage_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if overall != "healthy":
        return JSONResponse(status_code=503, content=result.model_dump())
    return result
