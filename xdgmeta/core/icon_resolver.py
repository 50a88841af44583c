"""Icon-name to file resolution across icon themes.

Resolution order:
  1. The desktop session's icon theme (GNOME via gsettings)
  2. The hicolor fallback theme
  3. Flat lookup directly in each icon base dir (~/.icons, .../icons, pixmaps)

A theme is searched as <base>/<theme>/<size>/<category>/<name><ext>.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Callable, Mapping, Sequence

from xdgmeta.core.config import XdgPaths, resolve_paths
from xdgmeta.core.logger import get_logger

_log = get_logger("icon_resolver")

ICON_EXTENSIONS = (".png", ".svg", ".xpm")
DEFAULT_SIZE = "48x48"
FALLBACK_THEME = "hicolor"

GSETTINGS_ICON_THEME = ["gsettings", "get", "org.gnome.desktop.interface", "icon-theme"]

ThemeParents = Callable[[str], Sequence[str]]


def get_icon_theme(environ: Mapping[str, str] | None = None) -> str:
    """Return the current desktop session's icon theme, or "" if unknown."""
    env = os.environ if environ is None else environ
    session = env.get("DESKTOP_SESSION", "")
    if session == "gnome":
        try:
            result = subprocess.run(
                GSETTINGS_ICON_THEME, capture_output=True, text=True, timeout=10,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            _log.debug("Icon theme query failed: %s", e)
            return ""
        if result.returncode == 0:
            return result.stdout.strip("' \n")
        _log.debug("gsettings exited with %d", result.returncode)
    # KDE keeps its theme in kdeglobals; not read yet
    return ""


def _find_with_extensions(directory: Path, icon: str) -> str:
    for ext in ICON_EXTENSIONS:
        candidate = directory / f"{icon}{ext}"
        if candidate.exists():
            return str(candidate)
    return ""


def lookup_icon(icon: str, size: str, theme: str, paths: XdgPaths | None = None) -> str:
    """Search one theme (no parents) for ``icon`` at ``size``."""
    paths = resolve_paths(paths)
    theme_dirs = [Path(base) / theme for base in paths.icon_dirs]

    for theme_dir in theme_dirs:
        if not theme_dir.is_dir():
            continue
        size_dir = theme_dir / size
        try:
            categories = sorted(size_dir.iterdir())
        except OSError:
            continue
        for category in categories:
            found = _find_with_extensions(category, icon)
            if found:
                return found
    return ""


def find_icon_helper(
    icon: str,
    size: str,
    theme: str,
    paths: XdgPaths | None = None,
    parents: ThemeParents | None = None,
) -> str:
    """Search ``theme``, then each theme returned by ``parents(theme)``, if given."""
    found = lookup_icon(icon, size, theme, paths)
    if found or parents is None:
        return found
    for parent in parents(theme):
        found = lookup_icon(icon, size, parent, paths)
        if found:
            return found
    return ""


def lookup_fallback_icon(icon: str, paths: XdgPaths | None = None) -> str:
    """Look for ``<icon_dir>/<icon><ext>`` directly in every icon base dir."""
    for directory in resolve_paths(paths).icon_dirs:
        found = _find_with_extensions(Path(directory), icon)
        if found:
            return found
    return ""


def app_icon_for_size(
    icon: str,
    size: str,
    paths: XdgPaths | None = None,
    theme: str | None = None,
    parents: ThemeParents | None = None,
) -> str:
    """Resolve ``icon`` to a file path, or "" if no theme or fallback dir has it.

    ``theme=None`` asks the desktop session; pass "" to skip straight to hicolor.
    """
    if not icon:
        return ""
    if theme is None:
        theme = get_icon_theme()

    if theme:
        found = find_icon_helper(icon, size, theme, paths, parents)
        if found:
            return found

    found = find_icon_helper(icon, size, FALLBACK_THEME, paths, parents)
    if found:
        return found

    return lookup_fallback_icon(icon, paths)


def app_icon(
    icon: str,
    paths: XdgPaths | None = None,
    theme: str | None = None,
    parents: ThemeParents | None = None,
) -> str:
    return app_icon_for_size(icon, DEFAULT_SIZE, paths, theme, parents)
