"""GitHub user search screen."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from learning_projects.renderers.github import build_user_search_text
from learning_projects.screens.state import ViewState
from learning_projects.services.errors import ServiceError
from learning_projects.tokens import RequestTokens

if TYPE_CHECKING:
    from learning_projects.schemas import GitHubProfile, Repository, Result
    from learning_projects.services.favorites import FavoritesService
    from learning_projects.services.github import GitHubService

logger = logging.getLogger(__name__)


class UserSearchScreen:
    """Search a user, show profile and repositories, toggle favorites."""

    def __init__(self, service: GitHubService, favorites: FavoritesService) -> None:
        self.service = service
        self.favorites = favorites
        self.state: ViewState[GitHubProfile] = ViewState()
        self._tokens = RequestTokens()

    @staticmethod
    def can_search(username: str) -> bool:
        """The search action is disabled while the field is empty."""
        return bool(username)

    async def search(self, username: str) -> ViewState[GitHubProfile]:
        """
        Fetch ``username`` and its repositories, then show both together.

        Any failure shows the error message; there is no partial display.
        A result that arrives after a newer search started is discarded.
        """
        if not self.can_search(username):
            return self.state

        token = self._tokens.issue()
        self.state = ViewState.loading()

        outcome: ViewState[GitHubProfile]
        try:
            profile = await self.service.fetch_profile(username)
        except ServiceError as exc:
            outcome = ViewState.failed(str(exc))
        else:
            outcome = ViewState.loaded(profile)

        if not self._tokens.is_current(token):
            logger.debug("Discarding stale result for %r", username)
            return self.state

        self.state = outcome
        return outcome

    def is_favorite(self, repo: Repository) -> bool:
        return self.favorites.is_favorite(repo)

    def toggle_favorite(self, repo: Repository) -> Result:
        return self.favorites.toggle_favorite(repo)

    def render(self) -> str:
        favorite_ids = {repo.id for repo in self.favorites.favorites}
        return build_user_search_text(self.state, favorite_ids)
