"""Entry point for xdgmeta — query desktop entries, icons and XDG directories."""

from __future__ import annotations

import argparse
import subprocess
import sys

from xdgmeta import __app_name__, __version__
from xdgmeta.core import basedir
from xdgmeta.core.config import XdgPaths, default_paths
from xdgmeta.core.desktop_entries import get_applications, get_desktop_entries
from xdgmeta.core.desktop_parser import parse_desktop_entry
from xdgmeta.core.errors import XdgError
from xdgmeta.core.icon_resolver import DEFAULT_SIZE, app_icon_for_size
from xdgmeta.core.launcher import xdg_open
from xdgmeta.core.logger import get_logger, setup_logging

_log = get_logger("main")

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Query freedesktop.org desktop entries, icons and XDG directories.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr.")
    parser.add_argument("--app-name", default="", help="Namespace for per-app config/data lookups.")
    sub = parser.add_subparsers(dest="command", required=True)

    apps = sub.add_parser("apps", help="List installed applications.")
    apps.add_argument("--all", action="store_true", help="Include Link and Directory entries.")
    apps.add_argument("--desktop", metavar="NAME", help="Only entries shown in this desktop.")

    show = sub.add_parser("show", help="Parse and print one .desktop file.")
    show.add_argument("file")
    show.add_argument("--raw", action="store_true", help="Print as .desktop text.")

    icon = sub.add_parser("icon", help="Resolve an icon name to a file.")
    icon.add_argument("name")
    icon.add_argument("--size", default=DEFAULT_SIZE)
    icon.add_argument("--theme", default=None, help="Icon theme (default: desktop session's).")

    find_config = sub.add_parser("find-config", help="Find a file in the XDG config path.")
    find_config.add_argument("file")
    find_config.add_argument("--app", action="store_true", help="Look under --app-name.")

    find_data = sub.add_parser("find-data", help="Find a file in the XDG data path.")
    find_data.add_argument("file")
    find_data.add_argument("--app", action="store_true", help="Look under --app-name.")

    user_dir = sub.add_parser("user-dir", help="Print a user directory, e.g. music.")
    user_dir.add_argument("name")

    open_ = sub.add_parser("open", help="Open a file or URL with xdg-open.")
    open_.add_argument("item")
    return parser


def _print_result(value: str) -> int:
    if not value:
        return EXIT_NOT_FOUND
    print(value)
    return EXIT_OK


def _cmd_apps(args: argparse.Namespace, paths: XdgPaths) -> int:
    where = None
    if args.desktop:
        where = lambda entry: entry.should_show_in(args.desktop)  # noqa: E731
    errors: list = []
    if args.all:
        entries = get_desktop_entries(where, paths, errors)
    else:
        entries = get_applications(where, paths, errors)
    for entry in sorted(entries, key=lambda e: e.name.lower()):
        print(f"{entry.name}\t{entry.exec_cmd}\t{entry.file_path}")
    if errors:
        _log.info("Skipped %d invalid desktop file(s)", len(errors))
    return EXIT_OK


def _cmd_show(args: argparse.Namespace, paths: XdgPaths) -> int:
    entry = parse_desktop_entry(args.file, paths)
    if args.raw:
        sys.stdout.write(entry.to_desktop_file())
        return EXIT_OK
    print(f"Name: {entry.name}")
    print(f"Type: {entry.type.value}")
    print(f"Exec: {entry.exec_cmd}")
    if entry.icon:
        print(f"Icon: {entry.icon}")
    if entry.comment:
        print(f"Comment: {entry.comment}")
    categories = [c for c in entry.categories if c]
    if categories:
        print(f"Categories: {', '.join(categories)}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    paths = default_paths()
    if args.app_name:
        paths = paths.with_app_name(args.app_name)

    try:
        if args.command == "apps":
            return _cmd_apps(args, paths)
        if args.command == "show":
            return _cmd_show(args, paths)
        if args.command == "icon":
            return _print_result(app_icon_for_size(args.name, args.size, paths, args.theme))
        if args.command == "find-config":
            find = basedir.find_app_config if args.app else basedir.find_config
            return _print_result(find(args.file, paths))
        if args.command == "find-data":
            find = basedir.find_app_data if args.app else basedir.find_data
            return _print_result(find(args.file, paths))
        if args.command == "user-dir":
            return _print_result(basedir.get_user_dir(args.name, paths))
        if args.command == "open":
            xdg_open(args.item)
            return EXIT_OK
    except (OSError, XdgError, subprocess.SubprocessError) as e:
        _log.error("%s", e)
        return EXIT_ERROR

    parser.error(f"unknown command: {args.command}")
    return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
