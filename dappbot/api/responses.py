"""Transport Framing — puts an ApiResponse on the wire as a FastAPI JSONResponse.

Invariants:
    - Status code and body come unchanged from core/responses.py
    - Every response carries the CORS allow-origin and allow-headers values

Design Decisions:
    - Headers read from Settings, not hardcoded (ADR: deploy-time CORS policy)
"""

from fastapi.responses import JSONResponse

from dappbot.config import Settings, get_settings
from dappbot.core.responses import ApiResponse


def transport_headers(settings: Settings | None = None) -> dict[str, str]:
    settings = settings or get_settings()
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Headers": settings.cors_allow_headers,
    }


def to_json_response(
    api_response: ApiResponse, settings: Settings | None = None,
) -> JSONResponse:
    """Frame the envelope; JSONResponse sets Content-Type: application/json."""
    return JSONResponse(
        status_code=api_response.status_code,
        content=api_response.body(),
        headers=transport_headers(settings),
    )
