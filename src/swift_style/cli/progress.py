"""Progress indicators for CLI operations.

Per-file loops are wrapped in a Rich progress bar on stderr so stdout keeps
only the status lines.

Usage:
    from swift_style.cli.progress import with_progress

    for path in with_progress(files, desc="Checking", quiet=ctx.quiet):
        check(path)
"""

import sys
from collections.abc import Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def is_terminal() -> bool:
    """Check if stderr is attached to a terminal."""
    return sys.stderr.isatty()


def with_progress(
    items: Iterable[T],
    total: int | None = None,
    desc: str = "Processing...",
    quiet: bool = False,
) -> Iterator[T]:
    """Wrap an iterable with a progress bar.

    Args:
        items: Iterable to wrap
        total: Total number of items (auto-detected if list/tuple)
        desc: Description to show
        quiet: If True, yields items without progress display

    Yields:
        Items from the input iterable
    """
    if quiet or not is_terminal():
        yield from items
        return

    if total is None and hasattr(items, "__len__"):
        total = len(items)  # type: ignore

    from rich.progress import track

    yield from track(
        items,
        total=total,
        description=desc,
        console=_get_stderr_console(),
        transient=True,
    )


def _get_stderr_console():
    """Get a Rich Console that outputs to stderr."""
    from rich.console import Console

    return Console(stderr=True, force_terminal=None)
