from pathlib import Path

from xdgmeta.core.config import XdgPaths
from xdgmeta.core.desktop_entries import get_applications, get_desktop_entries
from xdgmeta.core.desktop_parser import EntryType
from xdgmeta.core.errors import ValidationError


def _populate(paths: XdgPaths, write_desktop) -> None:
    user = Path(paths.data_dirs[0]) / "applications"
    system = Path(paths.data_dirs[1]) / "applications"
    write_desktop(user, "editor.desktop",
                  "[Desktop Entry]", "Type=Application", "Name=Editor", "Exec=editor")
    write_desktop(system, "terminal.desktop",
                  "[Desktop Entry]", "Type=Application", "Name=Terminal", "Exec=term",
                  "Categories=System;")
    write_desktop(system, "site.desktop",
                  "[Desktop Entry]", "Type=Link", "Name=Site", "Exec=open",
                  "URL=https://example.org")
    write_desktop(system, "broken.desktop",
                  "[Desktop Entry]", "Type=Application", "Exec=nameless")
    write_desktop(system, "notes.txt", "[Desktop Entry]", "Type=Application")


def test_get_desktop_entries_skips_invalid(xdg_paths: XdgPaths, write_desktop) -> None:
    _populate(xdg_paths, write_desktop)
    entries = get_desktop_entries(paths=xdg_paths)
    assert sorted(e.name for e in entries) == ["Editor", "Site", "Terminal"]


def test_errors_side_channel(xdg_paths: XdgPaths, write_desktop) -> None:
    _populate(xdg_paths, write_desktop)
    errors: list = []
    get_desktop_entries(paths=xdg_paths, errors=errors)
    assert len(errors) == 1
    path, exc = errors[0]
    assert path.endswith("broken.desktop")
    assert isinstance(exc, ValidationError)
    assert exc.key == "Name"


def test_predicate_filter(xdg_paths: XdgPaths, write_desktop) -> None:
    _populate(xdg_paths, write_desktop)
    entries = get_desktop_entries(lambda e: "System" in e.categories, xdg_paths)
    assert [e.name for e in entries] == ["Terminal"]


def test_get_applications_excludes_links(xdg_paths: XdgPaths, write_desktop) -> None:
    _populate(xdg_paths, write_desktop)
    apps = get_applications(paths=xdg_paths)
    assert sorted(e.name for e in apps) == ["Editor", "Terminal"]
    assert all(e.type is EntryType.APPLICATION for e in apps)


def test_get_applications_with_predicate(xdg_paths: XdgPaths, write_desktop) -> None:
    _populate(xdg_paths, write_desktop)
    apps = get_applications(lambda e: e.name.startswith("E"), xdg_paths)
    assert [e.name for e in apps] == ["Editor"]


def test_same_file_listed_once(tmp_path: Path, write_desktop) -> None:
    data = tmp_path / "share"
    write_desktop(data / "applications", "editor.desktop",
                  "[Desktop Entry]", "Type=Application", "Name=Editor", "Exec=editor")
    paths = XdgPaths(data_dirs=(str(data), str(data)), locale="C")
    assert len(get_desktop_entries(paths=paths)) == 1


def test_result_is_a_snapshot(xdg_paths: XdgPaths, write_desktop) -> None:
    _populate(xdg_paths, write_desktop)
    entries = get_applications(paths=xdg_paths)
    write_desktop(Path(xdg_paths.data_dirs[0]) / "applications", "late.desktop",
                  "[Desktop Entry]", "Type=Application", "Name=Late", "Exec=late")
    assert "Late" not in [e.name for e in entries]
    assert "Late" in [e.name for e in get_applications(paths=xdg_paths)]


def test_no_data_dirs(tmp_path: Path) -> None:
    paths = XdgPaths(data_dirs=(str(tmp_path / "missing"),), locale="C")
    assert get_desktop_entries(paths=paths) == []
