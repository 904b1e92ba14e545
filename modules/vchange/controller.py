#!/usr/bin/env python3
"""Owns the displayed theme and wallpaper state and the actions on it."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable

from . import activation, discovery
from .models import (
    ActivationError,
    Background,
    FilterType,
    Notification,
    NotificationStyle,
    SoftFailure,
    Theme,
)
from .settings import Settings

log = logging.getLogger("vchange.controller")

Notifier = Callable[[Notification], None]


def log_notification(notification: Notification) -> None:
    level = logging.ERROR if notification.style is NotificationStyle.FAILURE else logging.INFO
    log.log(level, "%s: %s", notification.title, notification.message)


class ThemeController:
    """State holder for the theme/wallpaper grid.

    Lists are always replaced as a whole, so readers never see a
    half-updated list.
    """

    def __init__(self, settings: Settings, notify: Notifier | None = None,
                 filter: FilterType = FilterType.ALL):
        self.settings = settings
        self.notify = notify or log_notification
        self.filter = filter

        self.themes: list[Theme] = []
        self.backgrounds: list[Background] = []
        self.current_theme = ""
        self.is_loading = False
        self.soft_failures: list[SoftFailure] = []

    # --- discovery ---

    def _load_themes(self) -> list[SoftFailure]:
        result = discovery.list_themes(self.settings.theme_roots)
        self.themes = result.items
        return result.soft_failures

    def _load_backgrounds(self) -> list[SoftFailure]:
        result = discovery.list_backgrounds(self.settings.backgrounds_dir)
        self.backgrounds = result.items
        return result.soft_failures

    def _detect_current_theme(self) -> list[SoftFailure]:
        name, soft = discovery.detect_current_theme(self.settings.current_theme_link)
        self.current_theme = name
        return [soft] if soft else []

    def refresh(self) -> bool:
        """Re-run all discovery concurrently.

        Each loader commits its own result; a failure in one is reported once
        and does not undo what the others committed.

        Returns:
            True if every loader finished without raising
        """
        self.is_loading = True
        soft_failures: list[SoftFailure] = []
        errors: list[BaseException] = []
        try:
            with ThreadPoolExecutor(max_workers=3, thread_name_prefix="vchange-scan") as pool:
                futures = [
                    pool.submit(self._load_themes),
                    pool.submit(self._load_backgrounds),
                    pool.submit(self._detect_current_theme),
                ]
                wait(futures)
            for future in futures:
                if (error := future.exception()) is not None:
                    errors.append(error)
                else:
                    soft_failures.extend(future.result())
        finally:
            self.is_loading = False

        self.soft_failures = soft_failures
        log.info(
            "Discovered %d themes, %d backgrounds, active theme %r",
            len(self.themes), len(self.backgrounds), self.current_theme,
        )
        if errors:
            log.error("Discovery failed: %s", errors[0])
            self.notify(Notification(NotificationStyle.FAILURE, "Error", str(errors[0])))
            return False
        return True

    # --- lookups ---

    def is_active(self, theme: Theme) -> bool:
        return bool(self.current_theme) and theme.name == self.current_theme

    def find_theme(self, name: str) -> Theme:
        for theme in self.themes:
            if theme.name == name:
                return theme
        raise LookupError(f"Unknown theme: {name}")

    def find_background(self, name: str) -> Background:
        for bg in self.backgrounds:
            if bg.name == name:
                return bg
        for bg in self.backgrounds:
            if bg.title == name:
                return bg
        raise LookupError(f"Unknown wallpaper: {name}")

    # --- actions ---

    def apply_theme(self, theme: Theme) -> bool:
        self.notify(Notification(NotificationStyle.ANIMATED, "Switching Theme", theme.name))
        try:
            activation.apply_theme(theme, self.settings.theme_command)
        except ActivationError as e:
            self.notify(Notification(NotificationStyle.FAILURE, "Failed", str(e)))
            return False
        self.notify(Notification(NotificationStyle.SUCCESS, "Theme Active", f"Now using {theme.name}"))
        self.refresh()
        return True

    def apply_background(self, background: Background) -> bool:
        self.notify(Notification(NotificationStyle.ANIMATED, "Setting Wallpaper", background.name))
        try:
            soft = activation.apply_background(
                background, self.settings.wallpaper_command, self.settings.wallpaper_mode
            )
        except ActivationError as e:
            self.notify(Notification(NotificationStyle.FAILURE, "Failed", str(e)))
            return False
        if soft is not None:
            self.soft_failures = [*self.soft_failures, soft]
        self.notify(Notification(NotificationStyle.SUCCESS, "Wallpaper Set", background.name))
        return True

    def set_default_background(self, background: Background) -> bool:
        try:
            activation.set_default_background(background, self.settings.default_background_link)
        except ActivationError as e:
            self.notify(Notification(NotificationStyle.FAILURE, "Failed", str(e)))
            return False
        self.notify(Notification(NotificationStyle.SUCCESS, "Default Wallpaper", f"Set to {background.name}"))
        return True

    def open(self, item: Theme | Background) -> bool:
        try:
            activation.open_path(item.path, self.settings.open_command)
        except ActivationError as e:
            self.notify(Notification(NotificationStyle.FAILURE, "Failed", str(e)))
            return False
        return True
