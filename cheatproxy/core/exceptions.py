"""Core exceptions for the proxy."""

from typing import Sequence


class ProxyError(Exception):
    """Base exception for proxy errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnsupportedModelError(ProxyError):
    """Raised when a chat request names a model outside the allow-list."""

    def __init__(self, model: str, supported: Sequence[str]) -> None:
        super().__init__(
            f"Unsupported model: {model}. Supported models: {', '.join(supported)}"
        )
        self.model = model
        self.supported = tuple(supported)


class ConfigurationError(ProxyError):
    """Raised when the proxy is missing configuration it needs at request time."""
    pass


class UpstreamError(ProxyError):
    """Raised when the upstream API answers with a non-success status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"OpenAI API error: {status_code}")
        self.status_code = status_code
        self.body = body
