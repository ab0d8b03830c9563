"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` with a User-Agent, a default
timeout and an optional urllib3 retry strategy. Retries are off by default:
failures go straight back to the caller, which shows them on screen.

Usage::

    from learning_projects.services.http import session

    resp = session.get("https://api.github.com/users/octocat")
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from learning_projects import __version__

#: No retries; ``raise_on_status=False`` leaves status handling to the caller.
DEFAULT_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"learning-projects/{__version__}"


def build_retry(total: int) -> Retry:
    """Retry strategy for idempotent requests with ``total`` attempts after the first."""
    if total <= 0:
        return DEFAULT_RETRY
    return Retry(
        total=total,
        backoff_factor=1,
        status_forcelist=[502, 503, 504],
        allowed_methods=["GET", "HEAD", "OPTIONS"],
        raise_on_status=False,
    )


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session - import and use directly.
session: requests.Session = create_session()
