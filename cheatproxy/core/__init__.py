"""Core module initialization."""

from .chat import ChatMessage, ChatRequest, truncate_for_log
from .exceptions import (
    ConfigurationError,
    ProxyError,
    UnsupportedModelError,
    UpstreamError,
)
from .models import DEFAULT_MODEL, SUPPORTED_MODELS, ModelInfo, list_model_info
from .upstream import (
    OpenAIClient,
    clear_upstream_transports,
    format_httpx_error,
    get_upstream_transport,
    register_upstream_transport,
)

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "ConfigurationError",
    "DEFAULT_MODEL",
    "ModelInfo",
    "OpenAIClient",
    "ProxyError",
    "SUPPORTED_MODELS",
    "UnsupportedModelError",
    "UpstreamError",
    "clear_upstream_transports",
    "format_httpx_error",
    "get_upstream_transport",
    "list_model_info",
    "register_upstream_transport",
    "truncate_for_log",
]
