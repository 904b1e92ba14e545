#!/usr/bin/env python3
"""Find installed themes, the active theme and its background images."""

import logging
import os
from pathlib import Path

from .models import Background, ScanResult, SoftFailure, Theme, ThemeSource
from .settings import IMAGE_EXTENSIONS, PREVIEW_FILENAME

log = logging.getLogger("vchange.discovery")


def classify_source(root: Path) -> ThemeSource:
    """Tag a search root by the path fragments it contains.

    Roots under a ``.local`` directory are "local", roots under ``.config``
    are "user", everything else is "system".
    """
    text = str(root)
    if ".local" in text:
        return ThemeSource.LOCAL
    if ".config" in text:
        return ThemeSource.USER
    return ThemeSource.SYSTEM


def list_themes(roots) -> ScanResult[Theme]:
    """Collect theme directories from the search roots.

    Roots are scanned in order and the first directory seen for a given name
    wins. Unreadable roots are skipped and reported as soft failures.

    Args:
        roots: Iterable of root directories, highest priority first

    Returns:
        ScanResult with themes sorted by name
    """
    result: ScanResult[Theme] = ScanResult()
    seen: set[str] = set()

    for root in roots:
        root = Path(root)
        try:
            with os.scandir(root) as it:
                entries = list(it)
        except OSError as e:
            log.debug("Skipping theme root %s: %s", root, e)
            result.soft_failures.append(SoftFailure(root, e.strerror or str(e)))
            continue

        source = classify_source(root)
        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            if not is_dir or entry.name in seen:
                continue
            seen.add(entry.name)

            theme_path = root / entry.name
            preview = theme_path / PREVIEW_FILENAME
            result.items.append(Theme(
                name=entry.name,
                path=theme_path,
                source=source,
                preview_image=preview if preview.exists() else None,
            ))

    result.items.sort(key=lambda t: t.name)
    log.debug("Found %d themes", len(result.items))
    return result


def list_backgrounds(backgrounds_dir: Path) -> ScanResult[Background]:
    """List the image files directly inside a theme's backgrounds folder."""
    result: ScanResult[Background] = ScanResult()
    backgrounds_dir = Path(backgrounds_dir)

    try:
        with os.scandir(backgrounds_dir) as it:
            entries = list(it)
    except OSError as e:
        log.debug("No backgrounds at %s: %s", backgrounds_dir, e)
        result.soft_failures.append(SoftFailure(backgrounds_dir, e.strerror or str(e)))
        return result

    for entry in entries:
        try:
            is_file = entry.is_file(follow_symlinks=False)
        except OSError:
            is_file = False
        suffix = os.path.splitext(entry.name)[1].lower()
        if not is_file or suffix not in IMAGE_EXTENSIONS:
            continue
        result.items.append(Background(
            name=entry.name,
            path=backgrounds_dir / entry.name,
            ext=suffix.lstrip(".").upper(),
        ))

    result.items.sort(key=lambda b: b.name)
    return result


def detect_current_theme(link: Path) -> tuple[str, SoftFailure | None]:
    """Return the active theme name from the current-theme link.

    The name is the basename of the link's resolved target. An absent or
    broken link yields an empty name and a soft failure.
    """
    link = Path(link)
    try:
        target = link.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        log.debug("Cannot resolve %s: %s", link, e)
        return "", SoftFailure(link, getattr(e, "strerror", None) or str(e))
    return target.name, None
