"""Weather search screen."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from learning_projects.renderers.weather import build_weather_text
from learning_projects.screens.state import ViewState
from learning_projects.services.errors import ServiceError
from learning_projects.tokens import RequestTokens

if TYPE_CHECKING:
    from learning_projects.schemas import WeatherReport
    from learning_projects.services.weather import WeatherService

logger = logging.getLogger(__name__)


class WeatherScreen:
    """Search a city and show its current weather and forecast."""

    def __init__(self, service: WeatherService) -> None:
        self.service = service
        self.state: ViewState[WeatherReport] = ViewState()
        self._tokens = RequestTokens()

    @staticmethod
    def can_search(city: str) -> bool:
        return bool(city)

    async def search(self, city: str) -> ViewState[WeatherReport]:
        """Look up ``city``; stale completions are dropped."""
        if not self.can_search(city):
            return self.state

        token = self._tokens.issue()
        self.state = ViewState.loading()

        outcome: ViewState[WeatherReport]
        try:
            report = await self.service.fetch_weather(city)
        except ServiceError as exc:
            outcome = ViewState.failed(str(exc))
        else:
            outcome = ViewState.loaded(report)

        if not self._tokens.is_current(token):
            logger.debug("Discarding stale weather for %r", city)
            return self.state

        self.state = outcome
        return outcome

    def render(self) -> str:
        return build_weather_text(self.state)
