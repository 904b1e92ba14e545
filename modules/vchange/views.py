"""Grid sections and empty states built from controller state."""

from dataclasses import dataclass, field
from pathlib import Path

from .controller import ThemeController
from .models import FilterType

ACTIVE_MARK = "✦ Active"


@dataclass(frozen=True)
class GridItem:
    title: str
    subtitle: str
    path: Path
    keywords: tuple[str, ...] = ()
    accessory: str | None = None
    image: Path | None = None

    def matches(self, search: str) -> bool:
        if not search:
            return True
        needle = search.lower()
        return any(needle in text.lower() for text in (self.title, *self.keywords))


@dataclass(frozen=True)
class GridSection:
    title: str
    subtitle: str
    items: list[GridItem] = field(default_factory=list)


@dataclass(frozen=True)
class EmptyView:
    title: str
    description: str


def theme_items(controller: ThemeController) -> list[GridItem]:
    items = []
    for theme in controller.themes:
        active = controller.is_active(theme)
        items.append(GridItem(
            title=theme.name,
            subtitle=ACTIVE_MARK if active else theme.source.value,
            path=theme.path,
            keywords=("theme", theme.name, theme.source.value),
            accessory="Current theme" if active else None,
            image=theme.preview_image,
        ))
    return items


def background_items(controller: ThemeController) -> list[GridItem]:
    return [
        GridItem(
            title=bg.title,
            subtitle=bg.ext,
            path=bg.path,
            keywords=("wallpaper", "background", bg.name, bg.ext),
            image=bg.path,
        )
        for bg in controller.backgrounds
    ]


def build_sections(controller: ThemeController, search: str = "") -> list[GridSection]:
    """Sections visible under the controller's filter, narrowed by ``search``.

    Section subtitles count the whole list, not just the search hits.
    """
    sections = []
    flt = controller.filter

    if flt.shows_themes and controller.themes:
        sections.append(GridSection(
            title="Themes",
            subtitle=f"{len(controller.themes)} installed",
            items=[i for i in theme_items(controller) if i.matches(search)],
        ))

    if flt.shows_wallpapers and controller.backgrounds:
        sections.append(GridSection(
            title="Wallpapers",
            subtitle=f"{len(controller.backgrounds)} in current theme",
            items=[i for i in background_items(controller) if i.matches(search)],
        ))

    return sections


def empty_view(controller: ThemeController) -> EmptyView | None:
    if controller.is_loading:
        return None
    if not controller.themes and not controller.backgrounds:
        return EmptyView("No Themes Found", "Add themes to ~/.config/omarchy/themes")
    if controller.filter is FilterType.THEMES and not controller.themes:
        return EmptyView("No Themes", "Install themes to get started")
    if controller.filter is FilterType.WALLPAPERS and not controller.backgrounds:
        return EmptyView("No Wallpapers", "Add images to your current theme's backgrounds folder")
    return None


def render_text(sections: list[GridSection], empty: EmptyView | None = None) -> str:
    """Plain-text rendering of the grid, one item per line."""
    if empty is not None:
        return f"{empty.title}\n  {empty.description}"

    lines = []
    for section in sections:
        lines.append(f"{section.title} ({section.subtitle})")
        for item in section.items:
            marker = "*" if item.accessory else " "
            lines.append(f" {marker} {item.title:<32} {item.subtitle}")
    return "\n".join(lines)
