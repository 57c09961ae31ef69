"""
swift-style: lint and format Swift sources with SwiftLint and swift-format.

Discovers ``*.swift`` files under fixed source roots and drives the external
tools over them, aggregating their exit codes.

Quick Start::

    from swift_style import Config, SubprocessRunner, find_swift_files

    files = find_swift_files(SubprocessRunner(), Config.load().discovery)
"""

__version__ = "0.1.0"

from swift_style.config import Config
from swift_style.discovery import find_swift_files
from swift_style.exceptions import ConfigError, FileDiscoveryError, SwiftStyleError
from swift_style.runner import ProcessResult, ProcessRunner, SubprocessRunner

__all__ = [
    "__version__",
    "Config",
    "find_swift_files",
    "ConfigError",
    "FileDiscoveryError",
    "SwiftStyleError",
    "ProcessResult",
    "ProcessRunner",
    "SubprocessRunner",
]
