"""Cheat CLI API proxy

A small FastAPI service that forwards chat requests to the OpenAI chat
completions API and returns the completion as plain text.

This module provides:
- A fixed allow-list of supported models, listed at ``GET /models``
- ``POST /chat``: one non-streaming upstream call per request
- Root info, health check and CORS preflight endpoints
- One log line per request plus the truncated user/assistant exchange

Example:
    >>> from cheatproxy import app
    >>> import uvicorn
    >>> uvicorn.run(app, host="0.0.0.0", port=8000)
"""

from .main import app, create_app, settings, SERVER_HOST, SERVER_PORT
from .config_loader import ProxySettings, load_config, load_settings
from .core import SUPPORTED_MODELS, ChatRequest, OpenAIClient
from .logging import logger, setup_logging

__all__ = [
    "app",
    "ChatRequest",
    "create_app",
    "load_config",
    "load_settings",
    "logger",
    "OpenAIClient",
    "ProxySettings",
    "settings",
    "SERVER_HOST",
    "SERVER_PORT",
    "setup_logging",
    "SUPPORTED_MODELS",
]
