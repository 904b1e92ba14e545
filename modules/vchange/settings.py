"""Resolved locations and commands, read from the script config."""

from dataclasses import dataclass
from pathlib import Path

from helpers import ScriptConfig, get_xdg_config_file, get_xdg_data_file

THEMES_APP = "omarchy"
IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp", ".gif", ".bmp"})
PREVIEW_FILENAME = "preview.png"
BACKGROUNDS_DIRNAME = "backgrounds"
DEFAULT_BACKGROUND_LINK = "background"


def default_theme_roots() -> tuple[Path, ...]:
    """Theme search roots in priority order."""
    return (
        get_xdg_config_file(THEMES_APP, "themes"),
        get_xdg_data_file(THEMES_APP, "themes"),
        Path("/usr/share") / THEMES_APP / "themes",
        Path("/etc") / THEMES_APP / "themes",
    )


@dataclass(frozen=True)
class Settings:
    theme_roots: tuple[Path, ...]
    current_theme_link: Path
    theme_command: str = "theme"
    wallpaper_command: str = "swaybg"
    wallpaper_mode: str = "fill"
    open_command: str = "xdg-open"

    @property
    def backgrounds_dir(self) -> Path:
        return self.current_theme_link / BACKGROUNDS_DIRNAME

    @property
    def default_background_link(self) -> Path:
        return self.current_theme_link / DEFAULT_BACKGROUND_LINK

    @classmethod
    def defaults(cls) -> "Settings":
        return cls(
            theme_roots=default_theme_roots(),
            current_theme_link=get_xdg_config_file(THEMES_APP, "current/theme"),
        )

    @classmethod
    def from_config(cls, config: ScriptConfig) -> "Settings":
        """Build settings from a loaded ScriptConfig, falling back to defaults."""
        base = cls.defaults()

        roots = config.get_config_value("theme_roots")
        if roots is None:
            theme_roots = base.theme_roots
        elif isinstance(roots, list) and all(isinstance(r, str) for r in roots):
            theme_roots = tuple(Path(r) for r in roots)
        else:
            raise ValueError("Configuration value for 'theme_roots' must be a list of strings")

        link = config.get_config_value_checked(
            "current_theme_link", default=str(base.current_theme_link), require_str=True
        )

        return cls(
            theme_roots=theme_roots,
            current_theme_link=Path(link),
            theme_command=config.get_config_value_checked(
                "theme_command", default=base.theme_command, require_str=True
            ),
            wallpaper_command=config.get_config_value_checked(
                "wallpaper_command", default=base.wallpaper_command, require_str=True
            ),
            wallpaper_mode=config.get_config_value_checked(
                "wallpaper_mode", default=base.wallpaper_mode, require_str=True
            ),
            open_command=config.get_config_value_checked(
                "open_command", default=base.open_command, require_str=True
            ),
        )
