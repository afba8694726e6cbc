"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /v1/health/ always returns 200 if the process is up
    - The body is a success envelope like every other response
"""

from fastapi import APIRouter

from dappbot.api.responses import to_json_response
from dappbot.core.responses import success_response

router = APIRouter(prefix="/v1/health", tags=["health"])


@router.get("/")
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return to_json_response(success_response({
        "status": "healthy",
        "service": "dappbot-api",
        "version": "1.0.0",
    }))
