"""External process runner.

Every tool invocation (swiftlint, swift-format, find) goes through a
ProcessRunner so commands can be exercised with a scripted fake.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# Exit code reported when the executable could not be started at all
LAUNCH_FAILURE = -1


@dataclass
class ProcessResult:
    """Result from running an external tool."""

    exit_code: int
    output: str = ""

    @property
    def success(self) -> bool:
        return self.exit_code == 0


@runtime_checkable
class ProcessRunner(Protocol):
    """Protocol for anything that can run an external command."""

    def run(
        self, command: str, args: Sequence[str], capture_output: bool = False
    ) -> ProcessResult:
        """Run ``command`` with ``args`` and wait for it to exit.

        Args:
            command: Executable name, resolved on PATH
            args: Arguments passed to the executable
            capture_output: Collect stdout and stderr into ``ProcessResult.output``
                instead of inheriting the parent's streams

        Returns:
            ProcessResult with the exit code (``LAUNCH_FAILURE`` if the
            executable could not be started)
        """
        ...


class SubprocessRunner:
    """ProcessRunner backed by :func:`subprocess.run`.

    Blocks until the child exits; there is no timeout.
    """

    def run(
        self, command: str, args: Sequence[str], capture_output: bool = False
    ) -> ProcessResult:
        cmd = [command, *args]
        logger.debug("Running: %s", " ".join(cmd))

        try:
            if capture_output:
                # stderr folded into stdout so output reads in order
                result = subprocess.run(
                    cmd,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    text=True,
                    errors="replace",
                )
            else:
                result = subprocess.run(cmd)
        except OSError as e:
            logger.error("Failed to run %s: %s", command, e)
            return ProcessResult(exit_code=LAUNCH_FAILURE)
        except subprocess.SubprocessError as e:
            logger.error("Failed to run %s: %s", command, e)
            return ProcessResult(exit_code=LAUNCH_FAILURE)

        logger.debug("%s exited with %d", command, result.returncode)
        return ProcessResult(exit_code=result.returncode, output=result.stdout or "")
