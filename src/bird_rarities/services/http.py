"""
Shared HTTP client.

A ``requests.Session`` that applies a default timeout and identifies itself
with a User-Agent. Every request is attempted exactly once; callers decide how
to degrade when it fails.

Usage::

    from bird_rarities.services.http import session

    resp = session.get("https://api.example.com/v1/data")
    resp.raise_for_status()
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: One attempt, no backoff. Status errors surface via ``resp.raise_for_status()``.
DEFAULT_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = "bird-rarities/0.1"


class TimeoutSession(requests.Session):
    """Session whose requests time out after ``timeout`` seconds unless told otherwise."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        super().__init__()
        self.timeout = timeout

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> TimeoutSession:
    """
    Build a session with the retry adapter mounted for http and https.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = TimeoutSession(timeout=timeout)
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session — import and use directly.
session: TimeoutSession = create_session()
