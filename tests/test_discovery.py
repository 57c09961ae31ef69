"""Tests for swift_style.discovery."""

import pytest

from swift_style.config import DiscoveryConfig, ToolsConfig
from swift_style.discovery import filter_paths, find_swift_files
from swift_style.exceptions import FileDiscoveryError, SwiftStyleError
from swift_style.runner import LAUNCH_FAILURE


class TestFilterPaths:
    """Tests for filtering raw find output."""

    def test_drops_empty_lines(self):
        assert filter_paths(["", "a/A.swift", ""]) == ["a/A.swift"]

    def test_drops_build_directories(self):
        lines = [
            "Tools/Sources/App.swift",
            "Tools/.build/checkouts/Dep.swift",
            "Tools/Sources/.build/x.swift",
        ]
        assert filter_paths(lines) == ["Tools/Sources/App.swift"]

    def test_build_without_slash_is_kept(self):
        """Only a .build/ path segment excludes a file."""
        assert filter_paths(["Sources/Foo.build.swift"]) == ["Sources/Foo.build.swift"]

    def test_requires_extension(self):
        assert filter_paths(["a/A.swift", "a/B.swiftinterface", "a/C.h"]) == ["a/A.swift"]

    def test_keeps_order_and_duplicates(self):
        lines = ["b/B.swift", "a/A.swift", "b/B.swift"]
        assert filter_paths(lines) == lines

    def test_custom_exclude(self):
        lines = ["a/Generated/X.swift", "a/Y.swift"]
        assert filter_paths(lines, exclude=["Generated/"]) == ["a/Y.swift"]


class TestFindSwiftFiles:
    """Tests for running find per root."""

    def test_invokes_find_per_root(self, fake_runner, swift_roots):
        find_swift_files(fake_runner)

        assert fake_runner.calls == [
            ("find", (root, "-name", "*.swift", "-type", "f"), True) for root in swift_roots
        ]

    def test_concatenates_in_root_order(self, fake_runner, swift_roots):
        first, second = swift_roots
        fake_runner.set_files(
            {
                second: [f"{second}/Z.swift"],
                first: [f"{first}/B.swift", f"{first}/A.swift"],
            }
        )

        assert find_swift_files(fake_runner) == [
            f"{first}/B.swift",
            f"{first}/A.swift",
            f"{second}/Z.swift",
        ]

    def test_filters_output(self, fake_runner, swift_roots):
        root = swift_roots[0]
        fake_runner.set(
            "find",
            root,
            "-name",
            "*.swift",
            "-type",
            "f",
            output=f"{root}/A.swift\n\n{root}/.build/B.swift\n",
        )

        assert find_swift_files(fake_runner) == [f"{root}/A.swift"]

    def test_failed_search_contributes_nothing(self, fake_runner, swift_roots, caplog):
        first, second = swift_roots
        fake_runner.set(
            "find", first, "-name", "*.swift", "-type", "f", exit_code=1, output="x.swift\n"
        )
        fake_runner.set_files({second: [f"{second}/A.swift"]})

        with caplog.at_level("WARNING", logger="swift_style.discovery"):
            files = find_swift_files(fake_runner)

        assert files == [f"{second}/A.swift"]
        assert first in caplog.text

    def test_launch_failure_contributes_nothing(self, fake_runner, swift_roots):
        for root in swift_roots:
            fake_runner.set(
                "find", root, "-name", "*.swift", "-type", "f", exit_code=LAUNCH_FAILURE
            )

        assert find_swift_files(fake_runner) == []

    def test_strict_raises(self, fake_runner, swift_roots):
        root = swift_roots[0]
        fake_runner.set("find", root, "-name", "*.swift", "-type", "f", exit_code=1)

        with pytest.raises(FileDiscoveryError) as exc_info:
            find_swift_files(fake_runner, strict=True)

        assert exc_info.value.root == root
        assert exc_info.value.exit_code == 1
        assert isinstance(exc_info.value, SwiftStyleError)

    def test_strict_from_config(self, fake_runner):
        fake_runner.set("find", "Pkg", "-name", "*.swift", "-type", "f", exit_code=1)
        discovery = DiscoveryConfig(roots=["Pkg"], strict=True)

        with pytest.raises(FileDiscoveryError):
            find_swift_files(fake_runner, discovery)

    def test_strict_override_disables_config(self, fake_runner):
        fake_runner.set("find", "Pkg", "-name", "*.swift", "-type", "f", exit_code=1)
        discovery = DiscoveryConfig(roots=["Pkg"], strict=True)

        assert find_swift_files(fake_runner, discovery, strict=False) == []

    def test_custom_tools_and_extension(self, fake_runner):
        fake_runner.set(
            "gfind", "Pkg", "-name", "*.swiftinterface", "-type", "f",
            output="Pkg/A.swiftinterface\n",
        )
        discovery = DiscoveryConfig(roots=["Pkg"], extension=".swiftinterface")

        files = find_swift_files(fake_runner, discovery, ToolsConfig(find="gfind"))
        assert files == ["Pkg/A.swiftinterface"]
