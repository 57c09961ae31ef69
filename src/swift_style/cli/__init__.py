"""
Command-line interface for swift-style.

    swift-style format    - Rewrite Swift files in place with swift-format
    swift-style lint      - SwiftLint plus a swift-format check (default)
    swift-style check     - swift-format check only, one line per failing file
    swift-style help      - Show usage

Examples:
    sst
    sst check --verbose
    sst format --config ci/.swift-style.toml
"""

from __future__ import annotations

import logging
import sys

from swift_style.cli.dispatch import CommandContext, dispatch_command
from swift_style.cli.parser import Command, Invocation, parse_args
from swift_style.cli.utils import print_error
from swift_style.config import Config, get_config_paths
from swift_style.exceptions import SwiftStyleError
from swift_style.runner import ProcessRunner, SubprocessRunner

__all__ = ["main", "Command", "CommandContext", "Invocation"]

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None, runner: ProcessRunner | None = None) -> int:
    """Main entry point for the swift-style CLI.

    Args:
        argv: Arguments without the program name (default: ``sys.argv[1:]``)
        runner: Process runner (default: SubprocessRunner)

    Returns:
        Process exit code
    """
    if argv is None:
        argv = sys.argv[1:]

    invocation = parse_args(argv)

    # Usage text needs no configuration
    if invocation.command in (Command.HELP, Command.UNKNOWN):
        _configure_logging(invocation.verbose, invocation.quiet)
        return dispatch_command(invocation, CommandContext())

    try:
        config = Config.load(config_file=invocation.config)
    except SwiftStyleError as e:
        _configure_logging(invocation.verbose, invocation.quiet)
        print_error(e)
        return 1

    verbose = invocation.verbose or config.defaults.verbose
    quiet = invocation.quiet or config.defaults.quiet
    _configure_logging(verbose, quiet)
    logger.debug("Config files: %s", get_config_paths())

    ctx = CommandContext(
        runner=runner or SubprocessRunner(),
        config=config,
        verbose=verbose,
        quiet=quiet,
        strict_discovery=invocation.strict_discovery or config.discovery.strict,
    )

    try:
        return dispatch_command(invocation, ctx)
    except SwiftStyleError as e:
        print_error(e)
        return 1
