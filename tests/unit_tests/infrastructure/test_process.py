"""Unit tests for the subprocess runner and exit-status checks."""

from __future__ import annotations

import logging
import subprocess

import pytest

from web_optimizer.application.options import ToolInvocation
from web_optimizer.application.results import ProcessResult
from web_optimizer.errors import ToolInvocationError
from web_optimizer.infrastructure import process as process_module
from web_optimizer.infrastructure.process import SubprocessRunner, check_result

INVOCATION = ToolInvocation(executable="uglifyjs", arguments=("-o", "app.js", "a.js"))


class _FakePopen:
    """Popen double recording how the runner drives it."""

    instances: list[_FakePopen] = []
    communicate_error: BaseException | None = None

    def __init__(self, args: list[str], **kwargs: object) -> None:
        self.args = args
        self.kwargs = kwargs
        self.returncode: int | None = None
        self.killed = False
        self.exited = False
        _FakePopen.instances.append(self)

    def __enter__(self) -> _FakePopen:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.exited = True

    def communicate(self) -> tuple[str, None]:
        if self.communicate_error is not None:
            raise self.communicate_error
        self.returncode = 3
        return "line one\nline two\n", None

    def kill(self) -> None:
        self.killed = True


@pytest.fixture
def fake_popen(monkeypatch: pytest.MonkeyPatch) -> type[_FakePopen]:
    _FakePopen.instances = []
    _FakePopen.communicate_error = None
    monkeypatch.setattr(process_module.subprocess, "Popen", _FakePopen)
    return _FakePopen


def test_runner_merges_streams_and_returns_result(fake_popen: type[_FakePopen]) -> None:
    """Capture combined output and exit status without raising."""
    result = SubprocessRunner().run(INVOCATION)

    (proc,) = fake_popen.instances
    assert proc.args == ["uglifyjs", "-o", "app.js", "a.js"]
    assert proc.kwargs["stdout"] is subprocess.PIPE
    assert proc.kwargs["stderr"] is subprocess.STDOUT
    assert proc.exited
    assert result.exit_code == 3
    assert result.output == "line one\nline two\n"
    assert result.duration_ms >= 0.0
    assert not result.ok


def test_runner_maps_interrupt_to_tool_error(fake_popen: type[_FakePopen]) -> None:
    """Kill the child and raise ToolInvocationError on interruption."""
    fake_popen.communicate_error = KeyboardInterrupt()

    with pytest.raises(ToolInvocationError, match="interrupted") as excinfo:
        SubprocessRunner().run(INVOCATION)

    (proc,) = fake_popen.instances
    assert proc.killed
    assert proc.exited
    assert excinfo.value.return_code is None
    assert isinstance(excinfo.value.__cause__, KeyboardInterrupt)


def test_runner_maps_launch_failure_to_tool_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Preserve the OSError cause when the executable cannot start."""

    def _missing(*args: object, **kwargs: object) -> None:
        raise FileNotFoundError(2, "No such file or directory", "uglifyjs")

    monkeypatch.setattr(process_module.subprocess, "Popen", _missing)

    with pytest.raises(ToolInvocationError, match="uglifyjs failed to start") as excinfo:
        SubprocessRunner().run(INVOCATION)

    assert excinfo.value.executable == "uglifyjs"
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_runner_logs_arguments_at_debug(
    fake_popen: type[_FakePopen], caplog: pytest.LogCaptureFixture
) -> None:
    """Log the executable and each argument at debug level."""
    with caplog.at_level(logging.DEBUG, logger="web_optimizer"):
        SubprocessRunner().run(INVOCATION)

    assert "Running uglifyjs with arguments:" in caplog.text
    assert "\ta.js" in caplog.messages


def test_check_result_success_logs_output_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    """Return successful results untouched and keep output at debug level."""
    result = ProcessResult(exit_code=0, output="  all good \n", duration_ms=12.0)

    with caplog.at_level(logging.DEBUG, logger="web_optimizer"):
        assert check_result(INVOCATION, result) is result

    records = [r for r in caplog.records if r.getMessage() == "all good"]
    assert records and all(r.levelno == logging.DEBUG for r in records)
    assert "uglifyjs completed in 12ms" in caplog.text


@pytest.mark.parametrize("exit_code", [1, 2, 127, -9])
def test_check_result_failure_raises_with_code(
    exit_code: int, caplog: pytest.LogCaptureFixture
) -> None:
    """Raise for every non-zero status and log the output at error level."""
    result = ProcessResult(exit_code=exit_code, output="boom\n", duration_ms=1.0)

    with caplog.at_level(logging.ERROR, logger="web_optimizer"):
        with pytest.raises(ToolInvocationError) as excinfo:
            check_result(INVOCATION, result)

    assert f"failed with exit code {exit_code}" in str(excinfo.value)
    assert excinfo.value.return_code == exit_code
    assert excinfo.value.output == "boom\n"
    assert any(r.levelno == logging.ERROR and "boom" in r.getMessage() for r in caplog.records)
