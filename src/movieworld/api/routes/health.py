"""Health check endpoint."""

from datetime import datetime
from typing import Any

from fastapi import APIRouter

from movieworld.config import settings

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, Any]:
    """
    Health check endpoint.

    Returns:
        Fixed status payload with the service name and current time
    """
    return {
        "status": "UP",
        "service": settings.service_name,
        "timestamp": datetime.now().isoformat(),
    }
