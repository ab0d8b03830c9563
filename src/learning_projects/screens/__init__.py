"""Screens: view state plus the actions that drive it.

A screen holds a ``ViewState`` (initial / loading / loaded / error), calls
its service, and renders the current state to text through ``renderers/``.
Each search gets a request token; a result that arrives after a newer
search started is dropped.
"""

from learning_projects.screens.github import UserSearchScreen
from learning_projects.screens.state import ViewPhase, ViewState
from learning_projects.screens.weather import WeatherScreen

__all__ = ["UserSearchScreen", "ViewPhase", "ViewState", "WeatherScreen"]
