"""
ActivityHive Backend — Welcome and Health Routes
=================================================

What:  GET /        plain-text welcome line
       GET /health  MongoDB reachability for probes and load balancers

Status levels:
    - healthy:   MongoDB answers a ping (HTTP 200)
    - unhealthy: MongoDB unreachable (HTTP 503)
"""

import time

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse

from activityhive import __version__
from activityhive.database import MongoStore, get_store
from activityhive.schemas.responses import HealthResponse

router = APIRouter(tags=["Health"])

_start_time = time.time()

WELCOME_TEXT = "Welcome to the ActivityHive API!"


@router.get("/", response_class=PlainTextResponse, summary="Welcome message")
async def root() -> str:
    return WELCOME_TEXT


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "MongoDB unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    store: MongoStore = Depends(get_store),
) -> HealthResponse:
    """
    Ping MongoDB and report the aggregate status.

    The ping is the cheapest round trip the server offers; nothing is read
    from any collection.
    """
    if await store.ping():
        db_status, overall = "connected", "healthy"
    else:
        db_status, overall = "disconnected", "unhealthy"
        response.status_code = 503

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
