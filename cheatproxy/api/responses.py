"""Response helpers shared by all handlers."""

from typing import Any

from fastapi.responses import JSONResponse, PlainTextResponse, Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def json_response(content: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content, status_code=status_code)


def text_response(text: str, status_code: int = 200) -> PlainTextResponse:
    return PlainTextResponse(text, status_code=status_code)


def completion_response(text: str) -> Response:
    """Plain completion text with a bare ``text/plain`` content type."""
    return Response(content=text, status_code=200, headers={"Content-Type": "text/plain"})


def apply_cors_headers(response: Response) -> Response:
    for key, value in CORS_HEADERS.items():
        response.headers[key] = value
    return response
