"""XDG search-path configuration, read once from the environment.

Everything that looks files up on disk receives an ``XdgPaths`` instance.
``default_paths()`` builds one from ``os.environ`` the first time it is called
and hands the same object back afterwards.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Mapping

from xdgmeta import __app_name__

DEFAULT_CONFIG_DIRS = "/etc/xdg"
DEFAULT_DATA_DIRS = "/usr/local/share/:/usr/share/"
PIXMAPS_DIR = "/usr/share/pixmaps"

CACHE_DIR = Path(os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache") / __app_name__
LOG_FILE = CACHE_DIR / f"{__app_name__}.log"


def _split_dirs(value: str) -> list[str]:
    return value.split(os.pathsep)


@dataclass(frozen=True)
class XdgPaths:
    """Ordered XDG search directories plus the current locale."""
    config_dirs: tuple[str, ...] = ()
    data_dirs: tuple[str, ...] = ()
    icon_dirs: tuple[str, ...] = ()
    locale: str = ""
    app_name: str = ""
    home: str = ""

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        home: str | None = None,
        app_name: str = "",
    ) -> "XdgPaths":
        """Build the search paths from the XDG_* variables, using the standard defaults when unset."""
        env = os.environ if environ is None else environ
        home = home or env.get("HOME") or str(Path.home())

        config_home = env.get("XDG_CONFIG_HOME") or os.path.join(home, ".config")
        config_dirs = _split_dirs(env.get("XDG_CONFIG_DIRS") or DEFAULT_CONFIG_DIRS)

        data_home = env.get("XDG_DATA_HOME") or os.path.join(home, ".local/share")
        data_dirs = _split_dirs(env.get("XDG_DATA_DIRS") or DEFAULT_DATA_DIRS)

        # ~/.icons first, pixmaps last; the data home is not an icon base
        icon_dirs = [os.path.join(home, ".icons")]
        icon_dirs.extend(os.path.join(d, "icons") for d in data_dirs)
        icon_dirs.append(PIXMAPS_DIR)

        return cls(
            config_dirs=(config_home, *config_dirs),
            data_dirs=(data_home, *data_dirs),
            icon_dirs=tuple(icon_dirs),
            locale=env.get("LANG", ""),
            app_name=app_name,
            home=home,
        )

    def with_app_name(self, app_name: str) -> "XdgPaths":
        return replace(self, app_name=app_name)


@lru_cache(maxsize=1)
def default_paths() -> XdgPaths:
    """Return the process-wide paths, computed from ``os.environ`` on first use."""
    return XdgPaths.from_environ()


def resolve_paths(paths: XdgPaths | None) -> XdgPaths:
    return paths if paths is not None else default_paths()
