"""Method/path dispatch for every inbound request.

All traffic enters through :class:`DispatchEndpoint`, mounted as a catch-all
route, which hands each request to :func:`dispatch_request`. That looks the
request up in :data:`ROUTES`, falls back to 404 for unknown GET/POST paths
and 405 for any other method, stamps the CORS headers, and writes one log
line per request.
"""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.types import Receive, Scope, Send

from .responses import CORS_HEADERS, apply_cors_headers, text_response
from .routes import chat, health_check, list_models, root_info

logger = logging.getLogger("cheat-proxy")

Handler = Callable[[Request], Awaitable[Response]]

ROUTES: dict[tuple[str, str], Handler] = {
    ("GET", "/"): root_info,
    ("GET", "/health"): health_check,
    ("GET", "/models"): list_models,
    ("POST", "/chat"): chat,
}

# Methods whose unknown paths are 404 rather than 405
ROUTED_METHODS = frozenset({"GET", "POST"})


async def preflight(request: Request) -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


async def not_found(request: Request) -> Response:
    return text_response("Not Found", status_code=404)


async def method_not_allowed(request: Request) -> Response:
    return text_response("Method not allowed", status_code=405)


def resolve_handler(method: str, path: str) -> Handler:
    method = method.upper()
    if method == "OPTIONS":
        return preflight
    handler = ROUTES.get((method, path))
    if handler is not None:
        return handler
    if method in ROUTED_METHODS:
        return not_found
    return method_not_allowed


def _elapsed_ms(start_time: float) -> int:
    return int((time.perf_counter() - start_time) * 1000)


async def dispatch_request(request: Request) -> Response:
    start_time = time.perf_counter()
    method = request.method
    path = request.url.path

    try:
        handler = resolve_handler(method, path)
        response = await handler(request)
    except Exception as exc:
        logger.error(f"{method} {path} - ERROR ({_elapsed_ms(start_time)}ms): {exc}")
        return apply_cors_headers(text_response("Internal Server Error", status_code=500))

    logger.info(f"{method} {path} - {response.status_code} ({_elapsed_ms(start_time)}ms)")
    return apply_cors_headers(response)


class DispatchEndpoint:
    """Raw ASGI endpoint wrapping :func:`dispatch_request`.

    Starlette only limits a route to GET/HEAD when the endpoint is a plain
    function, so mounting an instance of this class leaves every method
    (PROPFIND included) to the dispatch table.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive, send)
        response = await dispatch_request(request)
        await response(scope, receive, send)
