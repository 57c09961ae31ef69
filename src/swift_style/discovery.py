"""
Source file discovery.

Runs the external ``find`` utility once per configured root and filters the
result lines into a FileSet: an ordered, non-deduplicated list of paths.
"""

from __future__ import annotations

import logging

from swift_style.config import DiscoveryConfig, ToolsConfig
from swift_style.exceptions import FileDiscoveryError
from swift_style.runner import ProcessRunner

logger = logging.getLogger(__name__)

__all__ = ["find_swift_files", "filter_paths"]


def filter_paths(
    lines: list[str], extension: str = ".swift", exclude: list[str] | None = None
) -> list[str]:
    """Keep non-empty lines that end in ``extension`` and contain no excluded substring.

    Args:
        lines: Raw lines printed by ``find``
        extension: Required file suffix
        exclude: Substrings that reject a path (default: ``[".build/"]``)

    Returns:
        Matching paths in their original order
    """
    if exclude is None:
        exclude = [".build/"]

    files = []
    for line in lines:
        if not line:
            continue
        if any(pattern in line for pattern in exclude):
            continue
        if not line.endswith(extension):
            continue
        files.append(line)
    return files


def find_swift_files(
    runner: ProcessRunner,
    discovery: DiscoveryConfig | None = None,
    tools: ToolsConfig | None = None,
    strict: bool | None = None,
) -> list[str]:
    """Discover source files under each configured root.

    A root whose search exits non-zero contributes no files. With ``strict``
    the failure raises instead.

    Args:
        runner: Runner used to invoke ``find``
        discovery: Roots, extension and exclusions (default: DiscoveryConfig())
        tools: Executable names (default: ToolsConfig())
        strict: Override ``discovery.strict``

    Returns:
        Paths concatenated in root order

    Raises:
        FileDiscoveryError: If a search fails and strict discovery is on
    """
    discovery = discovery or DiscoveryConfig()
    tools = tools or ToolsConfig()
    if strict is None:
        strict = discovery.strict

    files: list[str] = []
    for root in discovery.roots:
        result = runner.run(
            tools.find,
            [root, "-name", f"*{discovery.extension}", "-type", "f"],
            capture_output=True,
        )

        if not result.success:
            if strict:
                raise FileDiscoveryError(
                    f"Searching {root} for {discovery.extension} files failed",
                    root=root,
                    exit_code=result.exit_code,
                    suggestions=[
                        "Check that the directory exists",
                        "Adjust [discovery] roots in .swift-style.toml",
                    ],
                )
            logger.warning("Skipping %s: search exited with %d", root, result.exit_code)
            continue

        found = filter_paths(result.output.splitlines(), discovery.extension, discovery.exclude)
        logger.debug("Found %d file(s) under %s", len(found), root)
        files.extend(found)

    return files
