"""GitHub user search renderer.

Shows the search prompt, a loading line, the error, or the user profile
followed by repository rows with a favorite marker.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from learning_projects.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Iterable

    from learning_projects.schemas import GitHubProfile, Repository
    from learning_projects.screens.state import ViewState

FAVORITE = "♥"  # filled heart
NOT_FAVORITE = "♡"  # outline heart


def repository_line(repo: Repository, favorite: bool = False) -> str:
    """One row: marker, name, stars, forks, language, description."""
    marker = FAVORITE if favorite else NOT_FAVORITE
    line = f"{marker} {repo.name}  ★ {repo.stargazers_count}  ⑂ {repo.forks_count}"
    if repo.language:
        line += f"  [{repo.language}]"
    if repo.description:
        line += f"  {repo.description}"
    return line


def build_user_search_text(
    state: ViewState[GitHubProfile],
    favorite_ids: Iterable[int] = (),
) -> str:
    """Render the search screen for its current phase."""
    favorites = set(favorite_ids)
    context: dict[str, object] = {"phase": state.phase, "error": state.error}
    if state.data is not None:
        user = state.data.user
        context.update(
            display_name=user.display_name,
            login=user.login,
            bio=user.bio,
            public_repos=user.public_repos,
            rows=[repository_line(r, r.id in favorites) for r in state.data.repositories],
        )
    return render_template("user_search.txt.j2", **context)


def build_favorites_text(favorites: Iterable[Repository]) -> str:
    """List saved favorites in the order they were added."""
    rows = [f"{repo.name}  {repo.html_url}" for repo in favorites]
    return render_template("favorites.txt.j2", rows=rows)
