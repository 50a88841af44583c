"""Open files and URLs with the user's preferred application."""

import subprocess

from xdgmeta.core.logger import get_logger

_log = get_logger("launcher")


def xdg_open(item: str) -> None:
    """Run ``xdg-open item`` and wait for it to return.

    Raises ``FileNotFoundError`` if xdg-open isn't installed and
    ``subprocess.CalledProcessError`` if it exits non-zero.
    """
    _log.debug("xdg-open %s", item)
    subprocess.run(["xdg-open", item], check=True)
