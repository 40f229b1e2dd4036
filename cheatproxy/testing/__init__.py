"""Testing utilities for in-process proxy simulations."""

from .fake_upstream import DEFAULT_UPSTREAM_BASE, FakeUpstream, UpstreamResponse

__all__ = [
    "DEFAULT_UPSTREAM_BASE",
    "FakeUpstream",
    "UpstreamResponse",
]
