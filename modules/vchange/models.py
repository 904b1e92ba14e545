"""Data types shared by discovery, activation and the controller."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Generic, TypeVar

T = TypeVar("T")


class ThemeSource(str, Enum):
    USER = "user"
    LOCAL = "local"
    SYSTEM = "system"


class FilterType(str, Enum):
    ALL = "all"
    THEMES = "themes"
    WALLPAPERS = "wallpapers"

    @property
    def shows_themes(self) -> bool:
        return self in (FilterType.ALL, FilterType.THEMES)

    @property
    def shows_wallpapers(self) -> bool:
        return self in (FilterType.ALL, FilterType.WALLPAPERS)


class NotificationStyle(str, Enum):
    ANIMATED = "animated"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Theme:
    name: str
    path: Path
    source: ThemeSource
    preview_image: Path | None = None


@dataclass(frozen=True)
class Background:
    name: str
    path: Path
    ext: str

    @property
    def title(self) -> str:
        """File name without its final extension."""
        return Path(self.name).stem


@dataclass(frozen=True)
class SoftFailure:
    """A contained failure: recorded, logged, never raised."""
    path: Path
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


@dataclass
class ScanResult(Generic[T]):
    items: list[T] = field(default_factory=list)
    soft_failures: list[SoftFailure] = field(default_factory=list)


@dataclass(frozen=True)
class Notification:
    style: NotificationStyle
    title: str
    message: str = ""


class ActivationError(RuntimeError):
    """An activation step failed; the message is the underlying error text."""
