"""
Configuration file support for swift-style.

Provides hierarchical configuration loading from:
1. Project config: .swift-style.toml or swift-style.toml in project root
2. User config: ~/.config/swift-style/config.toml

CLI arguments override config file values, and project config overrides user config.
The external tools keep their own configuration (.swiftlint.yml, .swift-format);
those files are never read here.
"""

from __future__ import annotations

import tomllib
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from swift_style.exceptions import ConfigError

# Config file names to search for in project directories
CONFIG_FILENAMES = [".swift-style.toml", "swift-style.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "swift-style" / "config.toml"

# Configuration files read by the external tools themselves
SWIFTLINT_CONFIG = ".swiftlint.yml"
SWIFT_FORMAT_CONFIG = ".swift-format"

DEFAULT_ROOTS = ["esp32-c6-swift-client/main", "Tools/Sources"]

# All known config keys for validation
KNOWN_KEYS = {
    "defaults": {"verbose", "quiet"},
    "discovery": {"roots", "extension", "exclude", "strict"},
    "tools": {"swiftlint", "swift_format", "find"},
}


@dataclass
class DefaultsConfig:
    """Default options for CLI commands."""

    verbose: bool = False
    quiet: bool = False


@dataclass
class DiscoveryConfig:
    """Where and how to look for source files."""

    roots: list[str] = field(default_factory=lambda: list(DEFAULT_ROOTS))
    extension: str = ".swift"
    exclude: list[str] = field(default_factory=lambda: [".build/"])
    strict: bool = False


@dataclass
class ToolsConfig:
    """Executable names, resolved on PATH at run time."""

    swiftlint: str = "swiftlint"
    swift_format: str = "swift-format"
    find: str = "find"


@dataclass
class Config:
    """Merged configuration from all sources."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    discovery: DiscoveryConfig = field(default_factory=DiscoveryConfig)
    tools: ToolsConfig = field(default_factory=ToolsConfig)

    # Track which file each setting came from
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None, config_file: Path | None = None) -> "Config":
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)
            config_file: Explicit project config; skips the directory walk

        Returns:
            Merged configuration object

        Raises:
            ConfigError: If a config file is unreadable or invalid
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            user_data = _load_toml_file(USER_CONFIG_PATH)
            _merge_config(config, user_data, str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        if config_file is not None:
            project_config: Path | None = config_file
        else:
            project_config = _find_project_config(start_dir)
        if project_config:
            project_data = _load_toml_file(project_config)
            _merge_config(config, project_data, str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Stop at .git directory (project root)
        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """
    Load a TOML file.

    Raises:
        ConfigError: If TOML is invalid or the file cannot be read
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _expect(value: Any, kind: type, key: str, source: str) -> Any:
    if not isinstance(value, kind):
        raise ConfigError(
            f"Invalid value for {key}",
            context={"file": source, "expected": kind.__name__, "got": type(value).__name__},
        )
    return value


def _expect_str_list(value: Any, key: str, source: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(
            f"Invalid value for {key}",
            context={"file": source, "expected": "list of strings"},
        )
    return list(value)


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into Config object.

    Args:
        config: Config object to update
        data: Raw config data from TOML
        source: Source file path (for tracking)
        sources: Dict to update with source info
    """
    # Warn about unknown top-level keys
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    if "defaults" in data:
        defaults_data = _expect(data["defaults"], dict, "defaults", source)
        _warn_unknown_keys(defaults_data, KNOWN_KEYS["defaults"], "defaults", source)

        for key in ("verbose", "quiet"):
            if key in defaults_data:
                value = _expect(defaults_data[key], bool, f"defaults.{key}", source)
                setattr(config.defaults, key, value)
                sources[f"defaults.{key}"] = source

    if "discovery" in data:
        discovery_data = _expect(data["discovery"], dict, "discovery", source)
        _warn_unknown_keys(discovery_data, KNOWN_KEYS["discovery"], "discovery", source)

        if "roots" in discovery_data:
            config.discovery.roots = _expect_str_list(
                discovery_data["roots"], "discovery.roots", source
            )
            sources["discovery.roots"] = source
        if "extension" in discovery_data:
            extension = _expect(discovery_data["extension"], str, "discovery.extension", source)
            # Accept "swift" as well as ".swift"
            config.discovery.extension = extension if extension.startswith(".") else f".{extension}"
            sources["discovery.extension"] = source
        if "exclude" in discovery_data:
            config.discovery.exclude = _expect_str_list(
                discovery_data["exclude"], "discovery.exclude", source
            )
            sources["discovery.exclude"] = source
        if "strict" in discovery_data:
            config.discovery.strict = _expect(
                discovery_data["strict"], bool, "discovery.strict", source
            )
            sources["discovery.strict"] = source

    if "tools" in data:
        tools_data = _expect(data["tools"], dict, "tools", source)
        _warn_unknown_keys(tools_data, KNOWN_KEYS["tools"], "tools", source)

        for key in ("swiftlint", "swift_format", "find"):
            if key in tools_data:
                value = _expect(tools_data[key], str, f"tools.{key}", source)
                setattr(config.tools, key, value)
                sources[f"tools.{key}"] = source


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def get_config_paths(start_dir: Path | None = None) -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    project_config = _find_project_config(start_dir or Path.cwd())

    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": project_config,
    }
