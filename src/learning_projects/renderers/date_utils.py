"""Shared date-formatting helpers for renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date


def day_label(day: date) -> str:
    """Short weekday label, e.g. ``Mon Jun 03``."""
    return day.strftime("%a %b %d")
