"""Tests for the shared HTTP client."""

from __future__ import annotations

from unittest.mock import patch

import requests
from urllib3.util.retry import Retry

from bird_rarities.services.http import (
    DEFAULT_RETRY,
    DEFAULT_TIMEOUT,
    TimeoutSession,
    create_session,
    session,
)


class TestDefaultRetry:
    """Verify requests are attempted once."""

    def test_no_retries(self) -> None:
        """Retry budget is zero."""
        assert DEFAULT_RETRY.total == 0

    def test_status_left_to_caller(self) -> None:
        """Bad statuses are returned, not raised, by the adapter."""
        assert DEFAULT_RETRY.raise_on_status is False


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        """Factory returns a timeout-aware requests session."""
        s = create_session()
        assert isinstance(s, TimeoutSession)
        assert isinstance(s, requests.Session)

    def test_mounts_https_adapter(self) -> None:
        """HTTPS requests go through an HTTPAdapter."""
        adapter = create_session().get_adapter("https://example.com")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_mounts_http_adapter(self) -> None:
        """Plain HTTP requests go through an HTTPAdapter."""
        adapter = create_session().get_adapter("http://example.com")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_adapter_has_no_retry(self) -> None:
        """Mounted adapter carries the zero-retry strategy."""
        adapter = create_session().get_adapter("https://example.com")
        assert adapter.max_retries.total == 0

    def test_custom_retry(self) -> None:
        """A caller-supplied retry strategy replaces the default."""
        s = create_session(retry=Retry(total=3, backoff_factor=1))
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 3

    def test_user_agent_header(self) -> None:
        """Requests identify the application."""
        assert "bird-rarities" in create_session().headers["User-Agent"]

    def test_default_timeout_injected(self) -> None:
        """send() without a timeout uses the session default."""
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_default_timeout_through_get(self) -> None:
        """get() passes timeout=None internally; the default still applies."""
        s = create_session(timeout=42)
        response = requests.Response()
        response.status_code = 200
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=response
        ) as mock_send:
            s.get("https://example.com")
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        """An explicit timeout wins over the session default."""
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=99)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 99


class TestModuleSession:
    """Verify the module-level singleton."""

    def test_session_is_configured(self) -> None:
        """Shared session has the zero-retry adapter."""
        adapter = session.get_adapter("https://example.com")
        assert adapter.max_retries.total == 0

    def test_default_timeout(self) -> None:
        """Shared session uses the default timeout."""
        assert DEFAULT_TIMEOUT == 30
        assert session.timeout == DEFAULT_TIMEOUT
