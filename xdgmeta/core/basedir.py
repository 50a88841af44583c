"""Lookups across the XDG config and data search paths, plus user-dirs.dirs."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from xdgmeta.core.config import XdgPaths, resolve_paths
from xdgmeta.core.logger import get_logger

_log = get_logger("basedir")

USER_DIRS_FILE = "user-dirs.dirs"


def _find(dirs: Iterable[str], file: str) -> str:
    """Return ``<dir>/<file>`` for the first dir where it exists, else ""."""
    for d in dirs:
        p = Path(d) / file
        if p.exists():
            return str(p)
    return ""


def _collect(dirs: Iterable[str], pattern: str) -> list[str]:
    """Glob ``pattern`` under every dir, de-duplicating by absolute path."""
    found: set[str] = set()
    for d in dirs:
        for match in Path(d).glob(pattern):
            found.add(os.path.abspath(match))
    return sorted(found)


def find_config(file: str, paths: XdgPaths | None = None) -> str:
    """Find a file in the XDG config path, returning the first one found."""
    return _find(resolve_paths(paths).config_dirs, file)


def find_data(file: str, paths: XdgPaths | None = None) -> str:
    """Find a file in the XDG data path, returning the first one found."""
    return _find(resolve_paths(paths).data_dirs, file)


def collect_data(pattern: str, paths: XdgPaths | None = None) -> list[str]:
    """Return every file in the XDG data path matching a glob pattern."""
    return _collect(resolve_paths(paths).data_dirs, pattern)


def _app_name(paths: XdgPaths) -> str:
    if not paths.app_name:
        _log.warning("app name not set")
    return paths.app_name


def find_app_config(file: str, paths: XdgPaths | None = None) -> str:
    paths = resolve_paths(paths)
    name = _app_name(paths)
    return find_config(str(Path(name, file)), paths) if name else ""


def find_app_data(file: str, paths: XdgPaths | None = None) -> str:
    paths = resolve_paths(paths)
    name = _app_name(paths)
    return find_data(str(Path(name, file)), paths) if name else ""


def collect_app_data(pattern: str, paths: XdgPaths | None = None) -> list[str]:
    paths = resolve_paths(paths)
    name = _app_name(paths)
    return collect_data(str(Path(name, pattern)), paths) if name else []


def _expand_env(value: str, home: str) -> str:
    if "HOME" in os.environ or not home:
        return os.path.expandvars(value)
    return os.path.expandvars(value.replace("${HOME}", home).replace("$HOME", home))


def get_user_dir(name: str, paths: XdgPaths | None = None) -> str:
    """Return the absolute path of a well-known user directory, e.g. "music".

    Reads ``user-dirs.dirs`` from the config path. Raises ``OSError`` when that
    file cannot be read; returns "" when it has no entry for ``name``.
    """
    paths = resolve_paths(paths)
    user_dirs = find_config(USER_DIRS_FILE, paths)
    if not user_dirs:
        raise FileNotFoundError(f"{USER_DIRS_FILE} not found in XDG config path")

    with open(user_dirs, "r", encoding="utf-8", errors="replace") as f:
        data = f.read()

    wanted = f"XDG_{name.upper()}_DIR"
    for line in data.split("\n"):
        if line.startswith("#"):
            continue
        parts = line.split("=")
        if len(parts) != 2:
            continue
        key, value = parts
        if key == wanted:
            return _expand_env(value.strip('"'), paths.home)
    return ""
