from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at an empty directory so no user config is picked up."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture()
def lorem(tmp_path: Path) -> Path:
    """File with mixed line terminators and no trailing newline."""
    path = tmp_path / "lorem.txt"
    path.write_bytes(b"Lorem\nIpsum\r\nDOLOR")
    return path


@pytest.fixture()
def fox(tmp_path: Path) -> Path:
    """Single-line file."""
    path = tmp_path / "fox.txt"
    path.write_text("The quick brown fox jumps over the lazy dog.\n")
    return path


@pytest.fixture()
def empty(tmp_path: Path) -> Path:
    """Empty file."""
    path = tmp_path / "empty.txt"
    path.write_text("")
    return path
