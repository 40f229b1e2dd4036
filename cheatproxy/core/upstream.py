"""Upstream chat-completions client."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urlparse

import httpx

from .chat import ChatRequest
from .exceptions import UpstreamError

logger = logging.getLogger("cheat-proxy")

# In-process transports keyed by upstream netloc; tests use these instead of the network.
_TRANSPORTS: dict[str, httpx.AsyncBaseTransport] = {}


def register_upstream_transport(url_or_host: str, transport: httpx.AsyncBaseTransport) -> None:
    """Route requests for a host (or the host of a URL) through ``transport``."""
    host = urlparse(url_or_host).netloc if "://" in url_or_host else url_or_host
    if not host:
        raise ValueError("host is required")
    _TRANSPORTS[host.strip().lower()] = transport
    logger.debug("Registered upstream transport for host '%s'", host)


def clear_upstream_transports() -> None:
    _TRANSPORTS.clear()


def get_upstream_transport(url: str) -> Optional[httpx.AsyncBaseTransport]:
    host = urlparse(url).netloc
    if not host:
        return None
    return _TRANSPORTS.get(host.lower())


def format_httpx_error(exc: Exception, url: str, timeout: float) -> str:
    """Describe an httpx failure for the error log."""
    parts = [exc.__class__.__name__]
    message = str(exc).strip()
    if message:
        parts.append(message)

    try:
        request = getattr(exc, "request", None)
    except RuntimeError:
        # httpx raises when .request was never attached
        request = None
    if request is not None:
        parts.append(f"request={request.method} {request.url}")
    else:
        parts.append(f"url={url}")

    if isinstance(exc, httpx.TimeoutException):
        parts.append(f"timeout={timeout}s")

    return "; ".join(parts)


@dataclass(frozen=True)
class OpenAIClient:
    """Sends one non-streaming chat completion request per call, without retries."""

    url: str
    timeout: float

    def build_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }

    async def create_completion(self, request: ChatRequest, api_key: str) -> str:
        """Return ``choices[0].message.content`` of the upstream reply.

        Raises:
            UpstreamError: The upstream answered with a non-2xx status.
            httpx.HTTPError: The request could not be completed.
        """
        logger.debug(f"Initiating chat completion request to {self.url} for {request.model}")
        transport = get_upstream_transport(self.url)
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout), transport=transport
            ) as client:
                resp = await client.post(
                    self.url,
                    headers=self.build_headers(api_key),
                    json=request.upstream_payload(),
                )
        except httpx.HTTPError as exc:
            logger.error(
                "Upstream request failed: %s", format_httpx_error(exc, self.url, self.timeout)
            )
            raise

        logger.debug(f"Received response from {self.url}: status {resp.status_code}")

        if not resp.is_success:
            raise UpstreamError(resp.status_code, resp.text)

        data: Any = resp.json()
        return data["choices"][0]["message"]["content"]
