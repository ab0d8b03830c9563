"""
Favorite repositories, persisted as one JSON blob.

The whole list is loaded once when the service is built and rewritten in
full after every change. Persistence problems never crash the caller by
default: they are logged and reported through the returned ``Result``.
Pass ``strict=True`` to get a ``PersistenceError`` instead.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from learning_projects.schemas import Repository, Result
from learning_projects.services.errors import PersistenceError

if TYPE_CHECKING:
    from learning_projects.store import KeyValueStore

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favoriteRepos"

_repository_list = TypeAdapter(list[Repository])


class FavoritesService:
    """Owns the list of favorite repositories."""

    def __init__(
        self,
        store: KeyValueStore,
        key: str = FAVORITES_KEY,
        *,
        strict: bool = False,
    ) -> None:
        self.store = store
        self.key = key
        self.strict = strict
        self._favorites: list[Repository] = []
        self.last_load = self.load_favorites()

    @property
    def favorites(self) -> tuple[Repository, ...]:
        """Favorites in the order they were added."""
        return tuple(self._favorites)

    def is_favorite(self, repo: Repository) -> bool:
        return any(fav.id == repo.id for fav in self._favorites)

    def toggle_favorite(self, repo: Repository) -> Result:
        """Remove ``repo`` if it is a favorite (matched by id), else append it.

        Returns the result of saving the updated list.
        """
        for index, fav in enumerate(self._favorites):
            if fav.id == repo.id:
                del self._favorites[index]
                break
        else:
            self._favorites.append(repo)
        return self.save_favorites()

    def save_favorites(self) -> Result:
        """Write the full list to the store."""
        try:
            payload = [repo.model_dump(mode="json") for repo in self._favorites]
            self.store.write(self.key, payload, source="favorites")
        except (OSError, TypeError, ValueError) as exc:
            return self._failed("save", exc)
        return Result(
            success=True,
            message=f"Saved {len(self._favorites)} favorites",
            data={"count": len(self._favorites)},
        )

    def load_favorites(self) -> Result:
        """Replace the in-memory list with what's stored.

        Missing data is not an error: the list starts empty. Unreadable
        data also leaves the list empty, but the failure is reported.
        """
        try:
            raw = self.store.read(self.key)
            loaded = [] if raw is None else _repository_list.validate_python(raw)
        except (OSError, ValueError, ValidationError) as exc:
            self._favorites = []
            return self._failed("load", exc)

        self._favorites = loaded
        if raw is None:
            return Result(success=True, message="No saved favorites", data={"count": 0})
        return Result(
            success=True,
            message=f"Loaded {len(loaded)} favorites",
            data={"count": len(loaded)},
        )

    def _failed(self, action: str, exc: Exception) -> Result:
        logger.warning("Could not %s favorites under %r: %s", action, self.key, exc)
        if self.strict:
            msg = f"Could not {action} favorites"
            raise PersistenceError(msg) from exc
        return Result(success=False, message=f"Could not {action} favorites", error=str(exc))
