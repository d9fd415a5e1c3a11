"""
RecipeHub Backend — Welcome & Health Check Routes
===================================================

What:  GET / (liveness/welcome text) and GET /health (database probe).
Who:   Browsers hitting the API root; Docker health checks and load balancers.

Status levels:
    - healthy:   MongoDB answers ping (HTTP 200)
    - unhealthy: MongoDB unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse

from recipehub import __version__
from recipehub.database import MongoDatabase, get_mongo
from recipehub.schemas.responses import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

WELCOME_MESSAGE = "Explore recipes and make your own!"

_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Welcome message")
async def welcome() -> str:
    return WELCOME_MESSAGE


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    mongo: MongoDatabase = Depends(get_mongo),
) -> HealthResponse:
    """
    Ping MongoDB and report aggregate status.

    Why ping (not a query): it is essentially free and needs no collection.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        await mongo.ping()
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
