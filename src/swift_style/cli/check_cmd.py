"""
Check command: CI-friendly formatting check without rewriting files.

Every file is checked; the exit status is 1 if any of them has issues.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from swift_style.cli.parser import PROG
from swift_style.cli.progress import with_progress
from swift_style.discovery import find_swift_files

if TYPE_CHECKING:
    from swift_style.cli.dispatch import CommandContext

logger = logging.getLogger(__name__)


def run(ctx: CommandContext) -> int:
    """Check formatting of all Swift files."""
    print("✅ Checking Swift formatting...")
    files = find_swift_files(
        ctx.runner, ctx.config.discovery, ctx.config.tools, strict=ctx.strict_discovery
    )
    issues = 0

    for path in with_progress(files, desc="Checking", quiet=ctx.quiet):
        result = ctx.runner.run(ctx.config.tools.swift_format, ["lint", path], capture_output=True)
        if result.success:
            continue

        issues += 1
        print(f"❌ {path} has formatting issues")
        if ctx.verbose and result.output:
            for line in result.output.rstrip().splitlines():
                print(f"    {line}")

    logger.debug("Checked %d file(s), %d with issues", len(files), issues)

    if issues == 0:
        print("✅ All Swift files are properly formatted")
        return 0

    print(f"❌ {issues} files have formatting issues")
    print(f"💡 Run '{PROG} format' to fix")
    return 1
