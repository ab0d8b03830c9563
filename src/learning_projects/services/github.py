"""
GitHub REST lookups.

Two endpoints, no authentication:
  - ``GET {api}/users/{username}``        -> GitHubUser
  - ``GET {api}/users/{username}/repos``  -> list of Repository

Example:
    from learning_projects.services.github import GitHubService

    service = GitHubService()
    user = service.fetch_user("octocat")
    repos = service.fetch_repositories("octocat")
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import TYPE_CHECKING, Any

import requests
from pydantic import TypeAdapter, ValidationError

from learning_projects.schemas import GitHubProfile, GitHubUser, Repository
from learning_projects.services import http
from learning_projects.services.errors import (
    InvalidResponseError,
    InvalidURLError,
    UserNotFoundError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

GITHUB_API = "https://api.github.com"

ACCEPT = "application/vnd.github+json"

# RFC 3986 unreserved characters plus the sub-delimiters that are legal
# inside a single path segment. Excludes "/", "?", "#", "%" and whitespace.
_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9\-._~!$&'()*+,;=:@]+$")

# Dot-only names never reach the templated path: "." and ".." are removed
# as dot segments when the URL is normalized.
_DOT_ONLY = re.compile(r"^\.+$")

_repository_list = TypeAdapter(list[Repository])


def sort_by_stars(repositories: Iterable[Repository]) -> list[Repository]:
    """Star count descending; ties keep their input order."""
    return sorted(repositories, key=lambda repo: repo.stargazers_count, reverse=True)


class GitHubService:
    """Fetches users and repositories from the GitHub REST API.

    Holds no state between calls, so ``fetch_user`` and
    ``fetch_repositories`` can run concurrently.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        base_url: str = GITHUB_API,
    ) -> None:
        self.session = session if session is not None else http.session
        self.base_url = base_url.rstrip("/")

    def user_url(self, username: str) -> str:
        """
        Build the user endpoint URL.

        Raises:
            InvalidURLError: If ``username`` is empty or has characters that
                can't appear in a single path segment, or is made only of dots.
        """
        if (
            not username
            or not _USERNAME_PATTERN.match(username)
            or _DOT_ONLY.match(username)
        ):
            raise InvalidURLError()
        return f"{self.base_url}/users/{username}"

    def repositories_url(self, username: str) -> str:
        """Build the repositories endpoint URL (same validation as ``user_url``)."""
        return f"{self.user_url(username)}/repos"

    def _get(self, url: str) -> requests.Response:
        logger.debug("GET %s", url)
        try:
            return self.session.get(url, headers={"Accept": ACCEPT})
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise InvalidResponseError() from exc

    @staticmethod
    def _decode(resp: requests.Response) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("Undecodable body from %s", resp.url)
            raise InvalidResponseError() from exc

    def fetch_user(self, username: str) -> GitHubUser:
        """
        Fetch one user.

        Raises:
            InvalidURLError: Bad username, nothing was sent.
            UserNotFoundError: The API answered 404.
            InvalidResponseError: Any other non-200 status, transport error,
                or a body that doesn't decode into a user.
        """
        url = self.user_url(username)
        resp = self._get(url)

        if resp.status_code == 404:
            raise UserNotFoundError()
        if resp.status_code != 200:
            logger.warning("GET %s returned %s", url, resp.status_code)
            raise InvalidResponseError()

        try:
            return GitHubUser.model_validate(self._decode(resp))
        except ValidationError as exc:
            logger.warning("Unexpected user payload from %s: %s", url, exc)
            raise InvalidResponseError() from exc

    def fetch_repositories(self, username: str) -> list[Repository]:
        """
        Fetch a user's public repositories, most starred first.

        Raises:
            InvalidURLError: Bad username, nothing was sent.
            InvalidResponseError: Non-200 status (404 included), transport
                error, or a body that doesn't decode into repositories.
        """
        url = self.repositories_url(username)
        resp = self._get(url)

        if resp.status_code != 200:
            logger.warning("GET %s returned %s", url, resp.status_code)
            raise InvalidResponseError()

        try:
            repositories = _repository_list.validate_python(self._decode(resp))
        except ValidationError as exc:
            logger.warning("Unexpected repository payload from %s: %s", url, exc)
            raise InvalidResponseError() from exc
        return sort_by_stars(repositories)

    async def fetch_profile(self, username: str) -> GitHubProfile:
        """
        Fetch the user and their repositories concurrently and join them.

        If either call fails the whole lookup fails with that error; there
        is no partial result. When both fail, the user lookup's error wins,
        so a missing user reads as "User not found" rather than a generic
        repositories failure.
        """
        user, repositories = await asyncio.gather(
            asyncio.to_thread(self.fetch_user, username),
            asyncio.to_thread(self.fetch_repositories, username),
            return_exceptions=True,
        )
        for outcome in (user, repositories):
            if isinstance(outcome, BaseException):
                raise outcome
        return GitHubProfile(user=user, repositories=tuple(repositories))
