"""Pytest configuration and fixtures for testing."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Make the project root importable when running without an install
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from cheatproxy.config_loader import ProxySettings
from cheatproxy.core.upstream import clear_upstream_transports
from cheatproxy.main import create_app
from cheatproxy.testing import DEFAULT_UPSTREAM_BASE, FakeUpstream


@pytest.fixture(autouse=True)
def clear_transport_registry() -> Generator[None, None, None]:
    """Drop fake upstream transports registered by a test."""
    yield
    clear_upstream_transports()


@pytest.fixture
def proxy_settings() -> ProxySettings:
    return ProxySettings(api_base=DEFAULT_UPSTREAM_BASE, timeout_seconds=5.0)


@pytest.fixture
def upstream() -> FakeUpstream:
    """A fake OpenAI upstream serving DEFAULT_UPSTREAM_BASE."""
    fake = FakeUpstream()
    fake.install(DEFAULT_UPSTREAM_BASE)
    return fake


@pytest.fixture
def api_key(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


@pytest.fixture
def proxy_app(proxy_settings: ProxySettings):
    return create_app(proxy_settings)


@pytest.fixture
def client(proxy_app) -> Generator[TestClient, None, None]:
    with TestClient(proxy_app) as test_client:
        yield test_client
