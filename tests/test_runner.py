"""Tests for swift_style.runner."""

import sys

from swift_style.runner import LAUNCH_FAILURE, ProcessResult, ProcessRunner, SubprocessRunner


class TestProcessResult:
    """Tests for ProcessResult."""

    def test_success(self):
        assert ProcessResult(exit_code=0).success is True
        assert ProcessResult(exit_code=1).success is False
        assert ProcessResult(exit_code=LAUNCH_FAILURE).success is False

    def test_default_output(self):
        assert ProcessResult(exit_code=0).output == ""


class TestSubprocessRunner:
    """Tests for the real subprocess runner."""

    def test_implements_protocol(self):
        assert isinstance(SubprocessRunner(), ProcessRunner)

    def test_exit_code(self):
        result = SubprocessRunner().run(sys.executable, ["-c", "raise SystemExit(3)"])
        assert result.exit_code == 3
        assert result.output == ""

    def test_capture_combines_stdout_and_stderr(self):
        script = "import sys; print('out'); sys.stdout.flush(); print('err', file=sys.stderr)"
        result = SubprocessRunner().run(sys.executable, ["-c", script], capture_output=True)

        assert result.success
        assert "out" in result.output
        assert "err" in result.output

    def test_missing_executable(self, caplog):
        with caplog.at_level("ERROR", logger="swift_style.runner"):
            result = SubprocessRunner().run("swift-style-no-such-tool", ["lint"])

        assert result.exit_code == LAUNCH_FAILURE
        assert "Failed to run swift-style-no-such-tool" in caplog.text
