"""
Format command: rewrite every discovered file in place with swift-format.

Stops at the first file the formatter rejects and returns that exit code.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from swift_style.discovery import find_swift_files

if TYPE_CHECKING:
    from swift_style.cli.dispatch import CommandContext

logger = logging.getLogger(__name__)


def run(ctx: CommandContext) -> int:
    """Format all Swift files, fail-fast."""
    print("🎨 Formatting Swift files...")
    files = find_swift_files(
        ctx.runner, ctx.config.discovery, ctx.config.tools, strict=ctx.strict_discovery
    )

    if not files:
        print("No Swift files found.")
        return 0

    logger.debug("Formatting %d file(s)", len(files))
    # No progress bar: the formatter writes to the inherited terminal
    for path in files:
        result = ctx.runner.run(ctx.config.tools.swift_format, ["--in-place", path])
        if not result.success:
            print(f"❌ Failed to format {path}")
            return result.exit_code

    print(f"✅ Formatted {len(files)} Swift files")
    return 0
