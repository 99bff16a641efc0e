from __future__ import annotations

from pathlib import Path

import pytest

from removal_errors import TrashError


class FakeTrash:
    """Trash service that moves paths into a directory, or fails on demand"""

    def __init__(self, bin_dir: Path, fail: bool = False) -> None:
        self.bin_dir = bin_dir
        self.fail = fail
        self.disposed: list[str] = []

    def dispose(self, path: str) -> None:
        if self.fail:
            raise TrashError(None, "trash is broken", path)
        self.bin_dir.mkdir(exist_ok=True)
        Path(path).rename(self.bin_dir / Path(path).name)
        self.disposed.append(path)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def fake_trash(tmp_path: Path) -> FakeTrash:
    return FakeTrash(tmp_path / "bin")


@pytest.fixture
def broken_trash(tmp_path: Path) -> FakeTrash:
    return FakeTrash(tmp_path / "bin", fail=True)


@pytest.fixture(autouse=True)
def _plain_console(monkeypatch: pytest.MonkeyPatch) -> None:
    # Output assertions compare plain text, so no forced styling from the environment
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
