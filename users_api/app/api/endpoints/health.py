"""
Health check endpoint.

Always reports healthy together with the current time and how long the
application has been running.  The start time is recorded on
``app.state`` by ``create_app``.
"""

import time

from fastapi import APIRouter, Request

from users_api.app.core.timeutils import format_duration, utc_timestamp
from users_api.app.schemas.envelope import HealthEnvelope, HealthInfo

router = APIRouter()


@router.get("/health", response_model=HealthEnvelope)
async def health(request: Request) -> HealthEnvelope:
    uptime = time.monotonic() - request.app.state.started_at
    return HealthEnvelope(
        status="success",
        message="Service is healthy",
        data=HealthInfo(timestamp=utc_timestamp(), uptime=format_duration(uptime)),
    )
