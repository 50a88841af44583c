""".desktop file parser — validates and extracts every Desktop Entry key."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from xdgmeta.core.config import XdgPaths, resolve_paths
from xdgmeta.core.config_parser import parse_config_file
from xdgmeta.core.errors import ValidationError
from xdgmeta.core.localized import get_localized_value

DESKTOP_ENTRY_GROUP = "Desktop Entry"

BOOL_KEYS = ("NoDisplay", "Hidden", "Terminal", "StartupNotify")

# A ";" is a separator unless escaped as "\;"
_SEPARATOR_RE = re.compile(r"(?<!\\);")


class EntryType(Enum):
    APPLICATION = "Application"
    LINK = "Link"
    DIRECTORY = "Directory"


@dataclass(frozen=True)
class DesktopEntry:
    """Parsed fields from a .desktop file."""
    file_path: str = ""
    type: EntryType = EntryType.APPLICATION
    name: str = ""
    exec_cmd: str = ""
    url: str = ""

    no_display: bool = False
    hidden: bool = False
    terminal: bool = False
    startup_notify: bool = False

    version: str = ""
    generic_name: str = ""
    comment: str = ""
    icon: str = ""
    try_exec: str = ""
    path: str = ""
    startup_wm_class: str = ""

    only_show_in: tuple[str, ...] = ()
    not_show_in: tuple[str, ...] = ()
    actions: tuple[str, ...] = ()
    mime_type: tuple[str, ...] = ()
    categories: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()

    def should_show_in(self, desktop: str) -> bool:
        """Whether a menu on ``desktop`` (e.g. "GNOME") should list this entry."""
        if self.hidden or self.no_display:
            return False
        only = [d for d in self.only_show_in if d]
        if only:
            return desktop in only
        return desktop not in self.not_show_in

    def to_desktop_file(self) -> str:
        """Serialize back to ``[Desktop Entry]`` text (unlocalized values only)."""
        lines = [
            f"[{DESKTOP_ENTRY_GROUP}]",
            f"Type={self.type.value}",
            f"Name={self.name}",
            f"Exec={self.exec_cmd}",
        ]
        scalars = (
            ("URL", self.url),
            ("Version", self.version),
            ("GenericName", self.generic_name),
            ("Comment", self.comment),
            ("Icon", self.icon),
            ("TryExec", self.try_exec),
            ("Path", self.path),
            ("StartupWMClass", self.startup_wm_class),
        )
        lines.extend(f"{key}={value}" for key, value in scalars if value)

        flags = zip(BOOL_KEYS, (self.no_display, self.hidden, self.terminal, self.startup_notify))
        lines.extend(f"{key}=true" for key, value in flags if value)

        lists = (
            ("OnlyShowIn", self.only_show_in),
            ("NotShowIn", self.not_show_in),
            ("Actions", self.actions),
            ("MimeType", self.mime_type),
            ("Categories", self.categories),
            ("Keywords", self.keywords),
        )
        lines.extend(f"{key}={';'.join(items)}" for key, items in lists if any(items))
        return "\n".join(lines) + "\n"


def split_multi_value(value: str) -> list[str]:
    """Split a ``;``-separated list, keeping ``\\;`` as literal text.

    Empty segments are kept, so ``""`` gives ``[""]`` and a trailing ``;``
    adds a final empty item.
    """
    return _SEPARATOR_RE.split(value)


def get_bool_value(value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValidationError(f"invalid boolean value: {value}", value=value)


def _bool_field(group: dict[str, str], key: str) -> bool:
    value = group.get(key, "")
    if not value:
        return False
    try:
        return get_bool_value(value)
    except ValidationError as e:
        raise ValidationError(str(e), key=key, value=value) from None


def parse_desktop_entry(
    path: str | Path,
    paths: XdgPaths | None = None,
    locale: str | None = None,
) -> DesktopEntry:
    """Parse and validate a single .desktop file.

    Raises ``OSError`` if it can't be read, ``FormatError`` for bad key syntax
    and ``ValidationError`` for a missing required key, a bad boolean or both
    show-in lists being set. Checks run in a fixed order so the reported
    error is deterministic.
    """
    if locale is None:
        locale = resolve_paths(paths).locale

    cfg = parse_config_file(path)
    group = cfg.get(DESKTOP_ENTRY_GROUP, {})

    type_value = group.get("Type", "")
    try:
        entry_type = EntryType(type_value)
    except ValueError:
        raise ValidationError.missing_key("Type") from None

    name = get_localized_value(group, "Name", locale)
    if not name:
        raise ValidationError.missing_key("Name")

    exec_cmd = group.get("Exec", "")
    if not exec_cmd:
        raise ValidationError.missing_key("Exec")

    url = group.get("URL", "")
    if not url and entry_type is EntryType.LINK:
        raise ValidationError.missing_key("URL")

    no_display, hidden, terminal, startup_notify = (_bool_field(group, key) for key in BOOL_KEYS)

    if group.get("OnlyShowIn") and group.get("NotShowIn"):
        raise ValidationError(
            "only one of either OnlyShowIn or NotShowIn may be specified",
            key="OnlyShowIn",
        )

    return DesktopEntry(
        file_path=os.path.abspath(path),
        type=entry_type,
        name=name,
        exec_cmd=exec_cmd,
        url=url,
        no_display=no_display,
        hidden=hidden,
        terminal=terminal,
        startup_notify=startup_notify,
        version=group.get("Version", ""),
        generic_name=get_localized_value(group, "GenericName", locale),
        comment=get_localized_value(group, "Comment", locale),
        icon=get_localized_value(group, "Icon", locale),
        try_exec=group.get("TryExec", ""),
        path=group.get("Path", ""),
        startup_wm_class=group.get("StartupWMClass", ""),
        only_show_in=tuple(split_multi_value(group.get("OnlyShowIn", ""))),
        not_show_in=tuple(split_multi_value(group.get("NotShowIn", ""))),
        actions=tuple(split_multi_value(group.get("Actions", ""))),
        mime_type=tuple(split_multi_value(group.get("MimeType", ""))),
        categories=tuple(split_multi_value(group.get("Categories", ""))),
        keywords=tuple(split_multi_value(get_localized_value(group, "Keywords", locale))),
    )
