"""
Exception hierarchy for swift-style.

All exceptions carry optional context and suggestions so the CLI can print
an actionable message before exiting with status 1.

Example::

    from swift_style.exceptions import FileDiscoveryError

    raise FileDiscoveryError(
        "File search failed",
        context={"root": "Tools/Sources", "exit_code": 1},
        suggestions=["Check that the directory exists"],
    )
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class SwiftStyleError(Exception):
    """
    Base exception for all swift-style errors.

    Attributes:
        context: Dictionary of contextual information (file, tool, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ConfigError(SwiftStyleError):
    """
    Configuration file is unreadable, not valid TOML, or holds bad values.

    Example::

        raise ConfigError(
            "Invalid value for discovery.roots",
            context={"file": ".swift-style.toml", "expected": "list of strings"},
        )
    """

    pass


class FileDiscoveryError(SwiftStyleError):
    """
    Searching a root directory for source files failed.

    Only raised when strict discovery is enabled; otherwise a failed search
    contributes no files.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        root: Optional[str] = None,
        exit_code: Optional[int] = None,
    ):
        ctx = context or {}
        if root is not None and "root" not in ctx:
            ctx["root"] = root
        if exit_code is not None and "exit_code" not in ctx:
            ctx["exit_code"] = exit_code

        self.root = root
        self.exit_code = exit_code
        super().__init__(message, ctx, suggestions)


__all__ = [
    "SwiftStyleError",
    "ConfigError",
    "FileDiscoveryError",
]
