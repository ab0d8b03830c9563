"""
Simulated weather lookup.

No network: after a short delay standing in for a request, the service
fabricates current conditions and a five-day forecast. A real backend can
replace ``_fabricate`` as long as ``fetch_weather`` keeps its contract:
update ``current_weather`` and ``forecast`` on success, raise a
``ServiceError`` on failure.
"""

from __future__ import annotations

import asyncio
import logging
import random
from datetime import date, timedelta
from typing import TYPE_CHECKING

from learning_projects.schemas import ForecastDay, Weather, WeatherReport
from learning_projects.tokens import RequestTokens

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

FORECAST_DAYS = 5
HIGH_RANGE = (65, 85)  # °F, inclusive
LOW_RANGE = (50, 60)  # °F, inclusive
CONDITIONS = ("Sunny", "Partly Cloudy", "Rainy", "Cloudy")

# Current reading is fixed; only the forecast is randomized.
CURRENT_TEMPERATURE = 72
CURRENT_CONDITION = "Sunny"
CURRENT_HUMIDITY = 45


class WeatherService:
    """Owns the current weather and forecast for the last searched city."""

    def __init__(
        self,
        delay: float = 1.0,
        rng: random.Random | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.delay = delay
        self.rng = rng or random.Random()
        self.today = today
        self.current_weather: Weather | None = None
        self.forecast: list[ForecastDay] = []
        self._tokens = RequestTokens()

    async def fetch_weather(self, city: str) -> WeatherReport:
        """
        Look up weather for ``city`` and replace the held state.

        Overlapping calls are allowed; only the most recently started one
        updates ``current_weather`` and ``forecast``. Every call still
        returns its own report.
        """
        token = self._tokens.issue()
        await asyncio.sleep(self.delay)
        report = self._fabricate(city)

        if self._tokens.is_current(token):
            self.current_weather = report.current
            self.forecast = list(report.forecast)
        else:
            logger.debug("Discarding stale weather for %s", city)
        return report

    def generate_forecast(self, start: date | None = None) -> list[ForecastDay]:
        """Five consecutive days from ``start`` (default today) with random values."""
        first = start or self.today()
        return [
            ForecastDay(
                date=first + timedelta(days=offset),
                high=self.rng.randint(*HIGH_RANGE),
                low=self.rng.randint(*LOW_RANGE),
                condition=self.rng.choice(CONDITIONS),
            )
            for offset in range(FORECAST_DAYS)
        ]

    def _fabricate(self, city: str) -> WeatherReport:
        current = Weather(
            city=city,
            temperature=CURRENT_TEMPERATURE,
            condition=CURRENT_CONDITION,
            humidity=CURRENT_HUMIDITY,
        )
        return WeatherReport(current=current, forecast=tuple(self.generate_forecast()))
