"""Main FastAPI application for the Cheat CLI API proxy."""

import os
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI

from .api import DispatchEndpoint
from .api.routes.info import API_VERSION
from .config_loader import API_KEY_ENV, ProxySettings, default_env_path, load_settings
from .core import OpenAIClient
from .logging import setup_logging

# OPENAI_API_KEY comes from the .env beside the config file; the shell wins
ENV_PATH = default_env_path()
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)

settings = load_settings()
logger = setup_logging(settings.log_level)

SERVER_HOST = settings.host
SERVER_PORT = settings.port


@asynccontextmanager
async def lifespan(app: FastAPI):
    app_settings: ProxySettings = app.state.settings
    logger.info("Cheat CLI API proxy starting up...")
    logger.info("Configured bind address %s:%s", app_settings.host, app_settings.port)
    logger.info(
        "Forwarding chat requests to %s (timeout %ss)",
        app_settings.completions_url,
        app_settings.timeout_seconds,
    )
    if not os.getenv(API_KEY_ENV):
        logger.warning("%s is not set; /chat will answer 500 until it is", API_KEY_ENV)
    yield
    logger.info("Cheat CLI API proxy shut down")


def create_app(app_settings: Optional[ProxySettings] = None) -> FastAPI:
    """Build a proxy application.

    Args:
        app_settings: Settings to use. Defaults to the module-level settings
            loaded from the config file.

    Returns:
        A FastAPI app whose every path is served by the dispatch table.
    """
    app_settings = app_settings or settings
    app = FastAPI(
        title="Cheat CLI API",
        version=API_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.openai_client = OpenAIClient(
        url=app_settings.completions_url,
        timeout=app_settings.timeout_seconds,
    )
    # Any method on any path; the dispatch table owns routing, 404 and 405
    app.add_route("/{path:path}", DispatchEndpoint(), include_in_schema=False)
    return app


app = create_app()
logger.info("FastAPI application created")


__all__ = ["app", "create_app", "settings", "SERVER_HOST", "SERVER_PORT"]
