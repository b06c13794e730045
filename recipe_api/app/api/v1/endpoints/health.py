"""
Health endpoint for API v1.

A liveness probe: it always answers 200 with ``status`` and the
current UTC time and does not touch the database.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from recipe_api.app.schemas.recipe import HealthStatus

router = APIRouter()


def utc_timestamp() -> str:
    """Current UTC time as ISO‑8601 with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("", response_model=HealthStatus)
async def health() -> HealthStatus:
    return HealthStatus(status="healthy", timestamp=utc_timestamp())
