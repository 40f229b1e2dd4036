"""Static informational endpoints."""

from fastapi import Request
from fastapi.responses import JSONResponse

from ..responses import json_response

API_MESSAGE = "Cheat CLI API is running"
API_VERSION = "2.0"


async def root_info(request: Request) -> JSONResponse:
    """GET / - service banner."""
    settings = request.app.state.settings
    return json_response(
        {
            "message": API_MESSAGE,
            "version": API_VERSION,
            "platform": settings.platform,
        }
    )


async def health_check(request: Request) -> JSONResponse:
    """GET /health"""
    return json_response({"status": "healthy"})
