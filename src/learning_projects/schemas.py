"""
Domain models for the learning projects.

Pydantic models for API snapshots and local records.
These define the canonical schema - services normalize API responses to these.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Core
# =============================================================================


class Result(BaseModel):
    """Generic result wrapper for operations."""

    success: bool
    message: str
    data: dict[str, Any] | None = None
    error: str | None = None


# =============================================================================
# GitHub
# =============================================================================


class GitHubUser(BaseModel):
    """Snapshot of one ``GET /users/{username}`` response."""

    model_config = ConfigDict(frozen=True)

    id: int
    login: str
    name: str | None = None
    bio: str | None = None
    avatar_url: str
    public_repos: int = Field(..., ge=0)

    @property
    def display_name(self) -> str:
        """Name if the user set one, login otherwise."""
        return self.name or self.login


class Repository(BaseModel):
    """Snapshot of one entry of ``GET /users/{username}/repos``.

    Field names match the GitHub payload, so ``model_dump()`` produces the
    same shape the API returned and can be stored as-is.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str | None = None
    language: str | None = None
    stargazers_count: int = Field(..., ge=0)
    forks_count: int = Field(..., ge=0)
    html_url: str


class GitHubProfile(BaseModel):
    """A user joined with their repositories, sorted by stars."""

    model_config = ConfigDict(frozen=True)

    user: GitHubUser
    repositories: tuple[Repository, ...] = ()


# =============================================================================
# Weather
# =============================================================================


class Weather(BaseModel):
    """Current conditions for a city. Replaced wholesale on each search."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    city: str
    temperature: int
    condition: str
    humidity: int = Field(..., ge=0, le=100)


class ForecastDay(BaseModel):
    """One generated forecast day."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    date: date
    high: int
    low: int
    condition: str


class WeatherReport(BaseModel):
    """Current conditions plus the multi-day forecast."""

    model_config = ConfigDict(frozen=True)

    current: Weather
    forecast: tuple[ForecastDay, ...] = ()


# =============================================================================
# Expenses
# =============================================================================


class ExpenseCategory(StrEnum):
    """Fixed expense categories."""

    FOOD = "Food"
    TRANSPORT = "Transport"
    ENTERTAINMENT = "Entertainment"
    UTILITIES = "Utilities"
    HOUSING = "Housing"
    OTHER = "Other"


class Expense(BaseModel):
    """A single spending record."""

    id: UUID = Field(default_factory=uuid4)
    title: str
    amount: float
    category: ExpenseCategory = ExpenseCategory.OTHER
    date: datetime = Field(default_factory=datetime.now)
    notes: str | None = None


# =============================================================================
# To-do list
# =============================================================================


class OrphanPolicy(StrEnum):
    """What happens to a category's tasks when the category is deleted."""

    CASCADE = "cascade"
    REASSIGN = "reassign"
    BLOCK = "block"


class Category(BaseModel):
    """A to-do category."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    icon: str = "folder"


class Task(BaseModel):
    """A to-do item linked to a category by id."""

    id: UUID = Field(default_factory=uuid4)
    title: str
    is_completed: bool = False
    category_id: UUID
