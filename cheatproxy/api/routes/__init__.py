"""API routes for the proxy."""

from .chat import chat
from .info import health_check, root_info
from .models import list_models

__all__ = [
    "chat",
    "health_check",
    "list_models",
    "root_info",
]
