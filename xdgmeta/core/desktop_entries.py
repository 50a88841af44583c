"""Enumerate installed desktop entries from every XDG data directory."""

from __future__ import annotations

from typing import Callable

from xdgmeta.core.basedir import collect_data
from xdgmeta.core.config import XdgPaths, resolve_paths
from xdgmeta.core.desktop_parser import DesktopEntry, EntryType, parse_desktop_entry
from xdgmeta.core.errors import XdgError
from xdgmeta.core.logger import get_logger

_log = get_logger("desktop_entries")

DESKTOP_FILES_PATTERN = "applications/*.desktop"

Predicate = Callable[[DesktopEntry], bool]
SkippedFile = tuple[str, Exception]


def get_desktop_entries(
    where: Predicate | None = None,
    paths: XdgPaths | None = None,
    errors: list[SkippedFile] | None = None,
) -> list[DesktopEntry]:
    """Parse every ``applications/*.desktop`` file and return those matching ``where``.

    Files that fail to parse are skipped. Pass a list as ``errors`` to receive
    ``(path, exception)`` for each of them.
    """
    paths = resolve_paths(paths)
    entries: list[DesktopEntry] = []
    for file in collect_data(DESKTOP_FILES_PATTERN, paths):
        try:
            entry = parse_desktop_entry(file, paths)
        except (OSError, XdgError) as e:
            _log.debug("Skipping %s: %s", file, e)
            if errors is not None:
                errors.append((file, e))
            continue
        if where is None or where(entry):
            entries.append(entry)
    return entries


def get_applications(
    where: Predicate | None = None,
    paths: XdgPaths | None = None,
    errors: list[SkippedFile] | None = None,
) -> list[DesktopEntry]:
    """Like ``get_desktop_entries`` but only entries with ``Type=Application``."""
    def is_app(entry: DesktopEntry) -> bool:
        return entry.type is EntryType.APPLICATION and (where is None or where(entry))

    return get_desktop_entries(is_app, paths, errors)
