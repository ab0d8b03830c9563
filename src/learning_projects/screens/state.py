"""View state shared by the fetch screens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class ViewPhase(StrEnum):
    """What a screen is currently showing."""

    INITIAL = "initial"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState(Generic[T]):
    """Phase plus the loaded data or the error message."""

    phase: ViewPhase = ViewPhase.INITIAL
    data: T | None = None
    error: str | None = None

    @classmethod
    def loading(cls) -> ViewState[T]:
        return cls(phase=ViewPhase.LOADING)

    @classmethod
    def loaded(cls, data: T) -> ViewState[T]:
        return cls(phase=ViewPhase.LOADED, data=data)

    @classmethod
    def failed(cls, message: str) -> ViewState[T]:
        return cls(phase=ViewPhase.ERROR, error=message)
