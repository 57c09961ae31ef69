"""
Lint command: SwiftLint over the whole project, then a swift-format check per file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from swift_style.cli.parser import PROG
from swift_style.cli.progress import with_progress
from swift_style.discovery import find_swift_files

if TYPE_CHECKING:
    from swift_style.cli.dispatch import CommandContext


def run(ctx: CommandContext) -> int:
    """Run comprehensive linting.

    Returns:
        0 if SwiftLint passes and no file has formatting issues, else 1
    """
    tools = ctx.config.tools
    print("🔍 Linting Swift files...")

    print("Running SwiftLint...")
    # Output is not captured: SwiftLint reports straight to the terminal
    swiftlint_result = ctx.runner.run(tools.swiftlint, [])

    print("Checking formatting with swift-format...")
    files = find_swift_files(ctx.runner, ctx.config.discovery, tools, strict=ctx.strict_discovery)
    format_issues = 0

    for path in with_progress(files, desc="Checking", quiet=ctx.quiet):
        result = ctx.runner.run(tools.swift_format, ["lint", path], capture_output=True)
        if not result.success:
            format_issues += 1

    if swiftlint_result.success and format_issues == 0:
        print("✅ All Swift files pass linting")
        return 0

    print("❌ Linting issues found")
    if format_issues > 0:
        print(f"💡 Run '{PROG} format' to fix formatting issues")
    return 1
