"""Usage text for the swift-style CLI."""

from __future__ import annotations

from swift_style.cli.parser import PROG
from swift_style.config import CONFIG_FILENAMES, SWIFT_FORMAT_CONFIG, SWIFTLINT_CONFIG

HELP_TEXT = f"""\
Swift Style Linting Tool

USAGE:
    {PROG} [COMMAND] [OPTIONS]

COMMANDS:
    format      Auto-format all Swift files using swift-format
    lint        Run comprehensive linting (SwiftLint + swift-format)
    check       Check formatting without making changes (CI-friendly)
    help        Show this help

OPTIONS:
    -v, --verbose         Debug logging; show formatter output in check
    -q, --quiet           Errors only, no progress bars
    --strict-discovery    Fail if a source directory cannot be searched
    --config PATH         Use PATH instead of the project config file
    --version             Show version and exit

EXAMPLES:
    {PROG} format     # Format all Swift files
    {PROG} lint       # Run all linting checks
    {PROG} check      # Check formatting for CI

TOOLS USED:
    - SwiftLint: Comprehensive Swift style and convention checking
    - swift-format: Apple's official Swift formatting tool

CONFIGURATION:
    - SwiftLint: {SWIFTLINT_CONFIG} (embedded-specific rules)
    - swift-format: {SWIFT_FORMAT_CONFIG} (2-space indentation)
    - {PROG}: {CONFIG_FILENAMES[0]} (source roots, tool names)
"""


def print_help() -> None:
    print(HELP_TEXT)
