"""Tests for vchange.views."""

from vchange import views
from vchange.controller import ThemeController
from vchange.models import FilterType


def make_controller(settings, flt=FilterType.ALL) -> ThemeController:
    controller = ThemeController(settings, notify=lambda n: None, filter=flt)
    controller.refresh()
    return controller


def test_sections_for_all_filter(settings):
    sections = views.build_sections(make_controller(settings))
    assert [(s.title, s.subtitle) for s in sections] == [
        ("Themes", "2 installed"),
        ("Wallpapers", "2 in current theme"),
    ]


def test_active_theme_item(settings):
    [themes, _] = views.build_sections(make_controller(settings))
    by_title = {i.title: i for i in themes.items}
    assert by_title["nord"].subtitle == views.ACTIVE_MARK
    assert by_title["nord"].accessory == "Current theme"
    assert by_title["gruvbox"].subtitle == "local"
    assert by_title["gruvbox"].accessory is None
    assert by_title["gruvbox"].keywords == ("theme", "gruvbox", "local")


def test_wallpaper_items_drop_extension(settings):
    [_, walls] = views.build_sections(make_controller(settings))
    assert [(i.title, i.subtitle) for i in walls.items] == [("a", "PNG"), ("b", "JPG")]


def test_filter_hides_sections(settings):
    sections = views.build_sections(make_controller(settings, FilterType.WALLPAPERS))
    assert [s.title for s in sections] == ["Wallpapers"]


def test_search_matches_keywords(settings):
    controller = make_controller(settings)
    sections = views.build_sections(controller, search="jpg")
    assert [i.title for s in sections for i in s.items] == ["b"]

    sections = views.build_sections(controller, search="LOCAL")
    assert [i.title for s in sections for i in s.items] == ["gruvbox"]


def test_empty_views(settings):
    controller = ThemeController(settings, notify=lambda n: None)
    assert views.empty_view(controller).title == "No Themes Found"

    controller.refresh()
    assert views.empty_view(controller) is None

    controller.backgrounds = []
    controller.filter = FilterType.WALLPAPERS
    assert views.empty_view(controller).title == "No Wallpapers"

    controller.is_loading = True
    assert views.empty_view(controller) is None


def test_render_text(settings):
    controller = make_controller(settings)
    text = views.render_text(views.build_sections(controller))
    lines = text.splitlines()
    assert lines[0] == "Themes (2 installed)"
    assert any(line.startswith(" * nord") for line in lines)
    assert "Wallpapers (2 in current theme)" in lines
