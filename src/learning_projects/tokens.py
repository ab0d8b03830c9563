"""Request tokens for discarding stale async results.

Each search issues a new token. When its result arrives, the caller checks
``is_current(token)``; a newer search has started if it returns False and
the result must be dropped instead of overwriting newer state.
"""

from __future__ import annotations

import itertools


class RequestTokens:
    """Monotonically increasing request counter."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._latest = 0

    def issue(self) -> int:
        """Start a new request and return its token."""
        self._latest = next(self._counter)
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest

    @property
    def latest(self) -> int:
        """Most recently issued token (0 before the first request)."""
        return self._latest
