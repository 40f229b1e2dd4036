"""HTTP surface of the proxy."""

from .dispatch import ROUTES, DispatchEndpoint, dispatch_request, resolve_handler
from .responses import CORS_HEADERS

__all__ = [
    "CORS_HEADERS",
    "DispatchEndpoint",
    "ROUTES",
    "dispatch_request",
    "resolve_handler",
]
