"""Tests for swift_style.cli.progress module."""


class TestProgressModule:
    """Tests for progress indicator utilities."""

    def test_is_terminal_returns_bool(self):
        from swift_style.cli.progress import is_terminal

        assert isinstance(is_terminal(), bool)

    def test_with_progress_quiet_mode(self):
        from swift_style.cli.progress import with_progress

        items = ["A.swift", "B.swift"]
        assert list(with_progress(items, quiet=True)) == items

    def test_with_progress_non_terminal(self, monkeypatch):
        """Items pass straight through when stderr is not a TTY."""
        from swift_style.cli import progress

        monkeypatch.setattr(progress, "is_terminal", lambda: False)

        def gen():
            yield from range(3)

        assert list(progress.with_progress(gen(), total=3)) == [0, 1, 2]

    def test_with_progress_terminal_uses_rich(self, monkeypatch):
        from swift_style.cli import progress

        monkeypatch.setattr(progress, "is_terminal", lambda: True)
        items = ["A.swift", "B.swift", "C.swift"]
        assert list(progress.with_progress(items, desc="Checking")) == items

    def test_get_stderr_console(self):
        from rich.console import Console

        from swift_style.cli.progress import _get_stderr_console

        console = _get_stderr_console()
        assert isinstance(console, Console)
        assert console.stderr is True
