#!/usr/bin/env python3
"""vchange entry point - list themes and wallpapers and apply them."""

import logging
import sys

from helpers import ScriptConfig, create_module_parser

from . import views
from .controller import ThemeController
from .models import FilterType, Notification, NotificationStyle
from .settings import Settings

FILTER_STATE_KEY = "filter"


def create_parser():
    name_arg = (["name"], {"help": "Name as shown by 'vchange list'"})
    return create_module_parser(
        "vchange",
        "Browse installed themes and the active theme's wallpapers",
        {
            "list": {
                "help": "Show themes and wallpapers",
                "arguments": [
                    (["--filter"], {
                        "choices": [f.value for f in FilterType],
                        "default": None,
                        "help": "Which sections to show (remembered between runs)",
                    }),
                    (["--search"], {"default": "", "help": "Only show matching items"}),
                ],
            },
            "refresh": {"help": "Re-scan theme roots and report what was found"},
            "apply-theme": {"help": "Switch to a theme", "arguments": [name_arg]},
            "set-wallpaper": {"help": "Show a wallpaper now", "arguments": [name_arg]},
            "set-default": {
                "help": "Make a wallpaper the active theme's default",
                "arguments": [name_arg],
            },
            "open": {"help": "Open a theme folder or wallpaper", "arguments": [name_arg]},
            "path": {"help": "Print the path of a theme or wallpaper", "arguments": [name_arg]},
        },
    )


def print_notification(notification: Notification) -> None:
    if notification.style is NotificationStyle.FAILURE:
        print(f"Error: {notification.message}", file=sys.stderr)
    elif notification.style is NotificationStyle.SUCCESS:
        print(f"{notification.title}: {notification.message}")
    logging.getLogger("vchange").debug("%s: %s", notification.title, notification.message)


def stored_filter(config: ScriptConfig) -> FilterType:
    value = config.load_state().get(FILTER_STATE_KEY, FilterType.ALL.value)
    try:
        return FilterType(value)
    except ValueError:
        return FilterType.ALL


def find_item(controller: ThemeController, name: str):
    """Look up a theme first, then a wallpaper."""
    try:
        return controller.find_theme(name)
    except LookupError:
        return controller.find_background(name)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the vchange module."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = ScriptConfig(
        module_name="vchange",
        script_name="vchange",
        load_config=True,
    )
    log_level = logging.DEBUG if args.verbose else logging.INFO
    log = config.setup_logging(level=log_level, include_console=args.verbose)

    try:
        settings = Settings.from_config(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    flt = stored_filter(config)
    if args.command == "list" and args.filter is not None:
        flt = FilterType(args.filter)
        config.save_state({**config.load_state(), FILTER_STATE_KEY: flt.value})

    controller = ThemeController(settings, notify=print_notification, filter=flt)
    # A failed loader was already reported; whatever did load is still usable
    refreshed = controller.refresh()

    if args.command == "list":
        sections = views.build_sections(controller, args.search)
        print(views.render_text(sections, views.empty_view(controller)))
        return 0 if refreshed else 1

    if args.command == "refresh":
        print(f"{len(controller.themes)} themes, {len(controller.backgrounds)} wallpapers")
        print(f"Active theme: {controller.current_theme or '(none)'}")
        for soft in controller.soft_failures:
            print(f"  skipped {soft}")
        return 0 if refreshed else 1

    try:
        if args.command == "apply-theme":
            ok = controller.apply_theme(controller.find_theme(args.name))
        elif args.command == "set-wallpaper":
            ok = controller.apply_background(controller.find_background(args.name))
        elif args.command == "set-default":
            ok = controller.set_default_background(controller.find_background(args.name))
        elif args.command == "open":
            ok = controller.open(find_item(controller, args.name))
        elif args.command == "path":
            print(find_item(controller, args.name).path)
            ok = True
        else:
            print(f"Error: Unknown command: {args.command}", file=sys.stderr)
            return 1
    except LookupError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1

    log.debug("Command %s finished with success=%s", args.command, ok)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
