from pathlib import Path

import pytest

from xdgmeta.core.config import XdgPaths


@pytest.fixture
def xdg_paths(tmp_path: Path) -> XdgPaths:
    """Search paths rooted in tmp_path, one user dir and one system dir each."""
    home = tmp_path / "home"
    system = tmp_path / "usr" / "share"
    env = {
        "HOME": str(home),
        "XDG_CONFIG_HOME": str(home / ".config"),
        "XDG_CONFIG_DIRS": str(tmp_path / "etc" / "xdg"),
        "XDG_DATA_HOME": str(home / ".local" / "share"),
        "XDG_DATA_DIRS": str(system),
        "LANG": "en_US.UTF-8",
    }
    return XdgPaths.from_environ(env)


@pytest.fixture
def write_desktop():
    """Return a helper writing a .desktop file from lines into a directory."""
    def _write(directory: Path, name: str, *lines: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
