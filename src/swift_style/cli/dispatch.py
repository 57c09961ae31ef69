"""
Command dispatch logic for the swift-style CLI.

Maps a parsed Command to its handler and returns the handler's exit code.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from swift_style.cli.parser import Command, Invocation
from swift_style.config import Config
from swift_style.runner import ProcessRunner, SubprocessRunner


@dataclass
class CommandContext:
    """Everything a command handler needs."""

    runner: ProcessRunner = field(default_factory=SubprocessRunner)
    config: Config = field(default_factory=Config)
    verbose: bool = False
    quiet: bool = False
    strict_discovery: bool = False


def dispatch_command(invocation: Invocation, ctx: CommandContext) -> int:
    """Dispatch to the appropriate command handler."""
    if invocation.command == Command.FORMAT:
        from .format_cmd import run as format_cmd

        return format_cmd(ctx)

    elif invocation.command == Command.LINT:
        from .lint_cmd import run as lint_cmd

        return lint_cmd(ctx)

    elif invocation.command == Command.CHECK:
        from .check_cmd import run as check_cmd

        return check_cmd(ctx)

    elif invocation.command == Command.HELP:
        from .help_cmd import print_help

        print_help()
        return 0

    else:
        from .help_cmd import print_help

        print(f"Unknown command: {invocation.token}")
        print_help()
        return 1
