"""INI-style parser for .desktop files and other XDG config files.

A parsed file is a plain mapping of group header -> key -> raw value. Keys keep
their locale suffix (``Name[de]``); locale handling lives in ``localized``.
"""

from __future__ import annotations

import re
from pathlib import Path

from xdgmeta.core.errors import FormatError

ConfigFile = dict[str, dict[str, str]]

# Only the identifier before any "[locale]" suffix is checked
KEY_RE = re.compile(r"[A-Za-z0-9-]+")


def is_valid_key(key: str) -> bool:
    return KEY_RE.fullmatch(key.split("[", 1)[0]) is not None


def parse_config_file(path: str | Path) -> ConfigFile:
    """Parse ``path`` into ``{group: {key: value}}``.

    Lines before the first group header and lines without ``=`` are ignored.
    Raises ``OSError`` if the file can't be read and ``FormatError`` on the
    first key with invalid characters.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        data = f.read()

    cfg: ConfigFile = {}
    header: str | None = None
    for raw_line in data.split("\n"):
        line = raw_line.strip()
        if line.startswith("[") and line.endswith("]"):
            # "[]" closes the current group
            header = line[1:-1].strip() or None
            continue
        if header is None:
            continue

        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()
        if not is_valid_key(key):
            raise FormatError(key)
        cfg.setdefault(header, {})[key] = value

    return cfg
