import os

from xdgmeta.core.config import PIXMAPS_DIR, XdgPaths, default_paths, resolve_paths


def test_from_environ_defaults() -> None:
    paths = XdgPaths.from_environ({}, home="/home/demo")
    assert paths.config_dirs == ("/home/demo/.config", "/etc/xdg")
    assert paths.data_dirs == (
        "/home/demo/.local/share",
        "/usr/local/share/",
        "/usr/share/",
    )
    assert paths.icon_dirs == (
        "/home/demo/.icons",
        "/usr/local/share/icons",
        "/usr/share/icons",
        PIXMAPS_DIR,
    )
    assert paths.locale == ""
    assert paths.app_name == ""


def test_from_environ_reads_variables() -> None:
    env = {
        "HOME": "/home/demo",
        "XDG_CONFIG_HOME": "/cfg",
        "XDG_CONFIG_DIRS": os.pathsep.join(["/a", "/b"]),
        "XDG_DATA_HOME": "/data",
        "XDG_DATA_DIRS": os.pathsep.join(["/c", "/d"]),
        "LANG": "de_DE.UTF-8",
    }
    paths = XdgPaths.from_environ(env)
    assert paths.config_dirs == ("/cfg", "/a", "/b")
    assert paths.data_dirs == ("/data", "/c", "/d")
    assert paths.icon_dirs == ("/home/demo/.icons", "/c/icons", "/d/icons", PIXMAPS_DIR)
    assert paths.locale == "de_DE.UTF-8"
    assert paths.home == "/home/demo"


def test_with_app_name_returns_copy() -> None:
    paths = XdgPaths.from_environ({}, home="/home/demo")
    named = paths.with_app_name("demo")
    assert named.app_name == "demo"
    assert paths.app_name == ""
    assert named.data_dirs == paths.data_dirs


def test_default_paths_is_computed_once() -> None:
    default_paths.cache_clear()
    try:
        assert default_paths() is default_paths()
        assert resolve_paths(None) is default_paths()
    finally:
        default_paths.cache_clear()


def test_resolve_paths_prefers_explicit() -> None:
    paths = XdgPaths(locale="C")
    assert resolve_paths(paths) is paths
