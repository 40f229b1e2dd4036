"""Models listing endpoint."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from ...core.models import list_model_info
from ..responses import json_response

logger = logging.getLogger("cheat-proxy")


async def list_models(request: Request) -> JSONResponse:
    """List the supported models.

    GET /models

    Returns:
        ``{"models": [{"id": ..., "name": ...}, ...]}`` in catalog order.
    """
    logger.debug("Received models list request")
    return json_response({"models": list_model_info()})
