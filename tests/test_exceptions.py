"""Tests for the exceptions module."""

from cheatproxy.core.exceptions import (
    ConfigurationError,
    ProxyError,
    UnsupportedModelError,
    UpstreamError,
)


class TestProxyError:
    """Tests for the base ProxyError exception."""

    def test_creates_error_with_message(self):
        error = ProxyError("test error message")
        assert error.message == "test error message"
        assert str(error) == "test error message"

    def test_subclasses_share_the_base(self):
        for cls in (ConfigurationError, UnsupportedModelError, UpstreamError):
            assert issubclass(cls, ProxyError)


class TestUnsupportedModelError:
    """Tests for UnsupportedModelError."""

    def test_message_lists_supported_models(self):
        error = UnsupportedModelError("foo", ["a", "b"])
        assert error.message == "Unsupported model: foo. Supported models: a, b"
        assert error.model == "foo"
        assert error.supported == ("a", "b")


class TestConfigurationError:
    """Tests for ConfigurationError exception."""

    def test_creates_error_with_message(self):
        error = ConfigurationError("OPENAI_API_KEY not configured")
        assert error.message == "OPENAI_API_KEY not configured"


class TestUpstreamError:
    """Tests for UpstreamError."""

    def test_keeps_status_and_body(self):
        error = UpstreamError(429, "rate limited")
        assert error.status_code == 429
        assert error.body == "rate limited"
        assert error.message == "OpenAI API error: 429"

    def test_body_defaults_to_empty(self):
        assert UpstreamError(500).body == ""
