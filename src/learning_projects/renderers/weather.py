"""Weather screen renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from learning_projects.renderers import render_template
from learning_projects.renderers.date_utils import day_label

if TYPE_CHECKING:
    from learning_projects.schemas import ForecastDay, WeatherReport
    from learning_projects.screens.state import ViewState


def forecast_line(day: ForecastDay) -> str:
    """E.g. ``Mon Jun 03  H 78°  L 55°  Sunny``."""
    return f"{day_label(day.date)}  H {day.high}°  L {day.low}°  {day.condition}"


def build_weather_text(state: ViewState[WeatherReport]) -> str:
    """Render the weather screen for its current phase."""
    context: dict[str, object] = {"phase": state.phase, "error": state.error}
    if state.data is not None:
        current = state.data.current
        context.update(
            city=current.city,
            temperature=current.temperature,
            condition=current.condition,
            humidity=current.humidity,
            days=[forecast_line(day) for day in state.data.forecast],
        )
    return render_template("weather.txt.j2", **context)
