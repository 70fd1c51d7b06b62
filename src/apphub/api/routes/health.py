"""Health check endpoint."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Liveness probe: always 200 while the process is up."""
    started = getattr(request.app.state, "started_at", time.monotonic())
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - started, 3),
    }
