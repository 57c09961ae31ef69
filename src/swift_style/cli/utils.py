"""Shared utilities for CLI commands."""

from __future__ import annotations

import sys
import traceback
from typing import TYPE_CHECKING

from swift_style.exceptions import SwiftStyleError

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ["format_error", "print_error", "get_error_console"]

# Module-level console for error output, created lazily
_error_console: Console | None = None


def get_error_console() -> Console:
    """Get or create the Rich console for error output (stderr)."""
    global _error_console
    if _error_console is None:
        from rich.console import Console

        _error_console = Console(stderr=True, force_terminal=None)
    return _error_console


def print_error(
    e: Exception,
    verbose: bool = False,
    use_rich: bool | None = None,
) -> None:
    """
    Print an exception, with Rich styling on a terminal.

    Args:
        e: The exception to print
        verbose: If True, include full stack trace
        use_rich: Override automatic TTY detection (None = auto-detect)
    """
    if verbose:
        print(traceback.format_exc(), file=sys.stderr)
        return

    console = get_error_console()
    if use_rich is None:
        use_rich = console.is_terminal

    if use_rich:
        from rich.text import Text

        # Text keeps brackets in messages (e.g. "[discovery]") from being read as markup
        console.print(Text.assemble(("Error: ", "bold red"), str(e)))
    else:
        print(format_error(e), file=sys.stderr)


def format_error(e: Exception) -> str:
    """
    Format an exception for plain-text display.

    Args:
        e: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(e, SwiftStyleError):
        return f"Error: {e}"

    return f"Error: {type(e).__name__}: {e}"
