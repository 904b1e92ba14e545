#!/usr/bin/env python3
"""Switch the system theme, the wallpaper and the per-theme default wallpaper."""

import logging
import subprocess
from pathlib import Path

from helpers import launch_detached, run_command

from .models import ActivationError, Background, SoftFailure, Theme

log = logging.getLogger("vchange.activation")


def _describe_failure(e: subprocess.CalledProcessError) -> str:
    cmd = " ".join(e.cmd) if isinstance(e.cmd, (list, tuple)) else str(e.cmd)
    message = f"Command failed: {cmd}"
    stderr = (e.stderr or "").strip()
    if stderr:
        message += f"\n{stderr}"
    return message


def apply_theme(theme: Theme, command: str = "theme") -> None:
    """Run the external theme switcher for a theme and wait for it.

    Args:
        theme: Theme to switch to
        command: Name of the switcher executable

    Raises:
        ActivationError: If the command is missing or exits non-zero
    """
    log.info("Switching theme to %s", theme.name)
    try:
        run_command([command, theme.name])
    except subprocess.CalledProcessError as e:
        raise ActivationError(_describe_failure(e)) from e
    except OSError as e:
        raise ActivationError(str(e)) from e
    log.info("Theme switched to %s", theme.name)


def stop_wallpaper_renderer(renderer: str = "swaybg") -> SoftFailure | None:
    """Kill any running wallpaper renderer; no matching process is fine."""
    try:
        completed = run_command(["pkill", renderer], check=False)
    except OSError as e:
        log.debug("pkill unavailable: %s", e)
        return SoftFailure(Path("pkill"), str(e))
    if completed.returncode != 0:
        log.debug("pkill %s exited with %d", renderer, completed.returncode)
        return SoftFailure(Path(renderer), f"pkill exited with {completed.returncode}")
    return None


def apply_background(background: Background, renderer: str = "swaybg", mode: str = "fill") -> SoftFailure | None:
    """Replace the running wallpaper renderer with one showing ``background``.

    The new renderer is detached and never awaited.

    Returns:
        The soft failure from stopping the old renderer, if any

    Raises:
        ActivationError: If the renderer cannot be started
    """
    log.info("Setting wallpaper to %s", background.path)
    soft = stop_wallpaper_renderer(renderer)
    try:
        launch_detached([renderer, "-i", str(background.path), "-m", mode])
    except OSError as e:
        raise ActivationError(str(e)) from e
    return soft


def set_default_background(background: Background, link: Path) -> None:
    """Point the theme's default background link at ``background``.

    Raises:
        ActivationError: If the link cannot be replaced
    """
    link = Path(link)
    log.info("Linking %s -> %s", link, background.path)
    try:
        # Missing link is fine
        link.unlink(missing_ok=True)
        link.symlink_to(background.path)
    except OSError as e:
        raise ActivationError(str(e)) from e


def open_path(path: Path, opener: str = "xdg-open") -> None:
    """Open a theme directory or image with the desktop's default handler."""
    try:
        launch_detached([opener, str(path)])
    except OSError as e:
        raise ActivationError(str(e)) from e
