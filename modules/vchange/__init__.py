"""vchange module: browse and apply omarchy themes and wallpapers."""

from .controller import ThemeController
from .models import ActivationError, Background, FilterType, Theme, ThemeSource
from .settings import Settings

__all__ = [
    "ThemeController",
    "ActivationError",
    "Background",
    "FilterType",
    "Theme",
    "ThemeSource",
    "Settings",
]
