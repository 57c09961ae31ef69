"""
Argument parsing for the swift-style CLI.

The first positional token selects the command; global options may appear
before or after it. Parsing never exits on an unrecognised command: that
becomes ``Command.UNKNOWN`` and is reported by the dispatcher.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from swift_style import __version__

__all__ = ["PROG", "Command", "Invocation", "parse_command", "parse_args", "create_parser"]

PROG = "swift-style"
DEFAULT_COMMAND = "lint"


class Command(Enum):
    """Sub-commands understood by the CLI."""

    FORMAT = "format"
    LINT = "lint"
    CHECK = "check"
    HELP = "help"
    UNKNOWN = "unknown"


_TOKENS = {
    "format": Command.FORMAT,
    "lint": Command.LINT,
    "check": Command.CHECK,
    "help": Command.HELP,
    "--help": Command.HELP,
    "-h": Command.HELP,
}


@dataclass
class Invocation:
    """A parsed command line."""

    command: Command
    token: str = DEFAULT_COMMAND
    verbose: bool = False
    quiet: bool = False
    strict_discovery: bool = False
    config: Path | None = None


def parse_command(token: str | None) -> Command:
    """Map the first command-line token to a Command.

    An absent or empty token selects the default ``lint`` command.
    """
    if not token:
        return Command.LINT
    return _TOKENS.get(token, Command.UNKNOWN)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Help is handled as a command rather than by argparse so ``-h`` prints
    the same text as ``help``.
    """
    # No abbreviations: "--verb" must reach the unknown-command path
    parser = argparse.ArgumentParser(prog=PROG, add_help=False, allow_abbrev=False)
    parser.add_argument("command", nargs="?", default=None)
    parser.add_argument("-h", "--help", dest="help", action="store_true")
    parser.add_argument("--version", action="version", version=f"{PROG} {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("-q", "--quiet", action="store_true")
    parser.add_argument("--strict-discovery", action="store_true")
    parser.add_argument("--config", type=Path, default=None)
    return parser


def parse_args(argv: list[str]) -> Invocation:
    """Parse process arguments (without the program name) into an Invocation."""
    args, extras = create_parser().parse_known_args(argv)

    token = args.command
    if token is None and extras:
        # An unrecognised option in command position, e.g. "--bogus"
        token = extras[0]

    if args.help:
        command = Command.HELP
        token = token or "help"
    else:
        command = parse_command(token)

    return Invocation(
        command=command,
        token=token or DEFAULT_COMMAND,
        verbose=args.verbose,
        quiet=args.quiet,
        strict_discovery=args.strict_discovery,
        config=args.config,
    )
