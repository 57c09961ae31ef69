"""Pytest fixtures for swift-style tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from swift_style.config import DEFAULT_ROOTS
from swift_style.runner import ProcessResult


class FakeProcessRunner:
    """ProcessRunner that returns scripted results and records every call.

    Results are keyed by the full command line; anything not scripted exits 0
    with no output.
    """

    def __init__(self):
        self.calls: list[tuple[str, tuple[str, ...], bool]] = []
        self._results: dict[tuple[str, ...], ProcessResult] = {}

    def set(self, command: str, *args: str, exit_code: int = 0, output: str = "") -> None:
        self._results[(command, *args)] = ProcessResult(exit_code=exit_code, output=output)

    def set_files(self, files_by_root: dict[str, list[str]], extension: str = ".swift") -> None:
        """Script the output of ``find`` for each root."""
        for root, files in files_by_root.items():
            output = "".join(f"{path}\n" for path in files)
            self.set("find", root, "-name", f"*{extension}", "-type", "f", output=output)

    def run(
        self, command: str, args: Sequence[str], capture_output: bool = False
    ) -> ProcessResult:
        self.calls.append((command, tuple(args), capture_output))
        return self._results.get((command, *args), ProcessResult(exit_code=0))

    def calls_to(self, command: str) -> list[tuple[str, ...]]:
        """Argument tuples of every call made to ``command``."""
        return [args for cmd, args, _ in self.calls if cmd == command]


@pytest.fixture
def fake_runner() -> FakeProcessRunner:
    return FakeProcessRunner()


@pytest.fixture
def isolated_project(tmp_path: Path, monkeypatch) -> Path:
    """Empty project directory with no project or user config."""
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("swift_style.config.USER_CONFIG_PATH", tmp_path / "no-user-config.toml")
    return tmp_path


@pytest.fixture
def swift_roots() -> list[str]:
    """The default source roots, in search order."""
    return list(DEFAULT_ROOTS)
