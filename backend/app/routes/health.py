"""
NoteKeeper Backend: Health Check and Greeting Routes
=====================================================

What:  GET /health for monitoring probes, GET / as an authenticated ping.
How:   The health check runs `SELECT 1` against the engine. It is the only
       unauthenticated read endpoint.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text

from app import __version__
from app.database import engine
from app.schemas.common import GreetingEnvelope, HealthResponse
from app.security.auth_gate import get_current_account_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module-level: set once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check():
    db_status = "connected"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    report = HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if overall == "unhealthy":
        return JSONResponse(status_code=503, content=report.model_dump())
    return report


@router.get("/", response_model=GreetingEnvelope, summary="Authenticated ping")
async def greeting(account_id: UUID = Depends(get_current_account_id)) -> GreetingEnvelope:
    return GreetingEnvelope(data="Hello World")
