"""Subprocess-backed runner for the external minifiers."""

from __future__ import annotations

import logging
import subprocess
import time

from web_optimizer.application.options import ToolInvocation
from web_optimizer.application.results import ProcessResult
from web_optimizer.errors import ToolInvocationError

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Run a tool as a child process with stderr merged into stdout."""

    def run(self, invocation: ToolInvocation) -> ProcessResult:
        """Run ``invocation`` to completion and capture its combined output.

        The whole output stream is drained before the exit status is read,
        so a child writing more than a pipe buffer cannot block.

        Parameters
        ----------
        invocation : ToolInvocation
            Executable and arguments to run.

        Returns
        -------
        ProcessResult
            Exit status, combined output and wall-clock duration. Non-zero
            exit codes are returned, not raised; see :func:`check_result`.

        Raises
        ------
        ToolInvocationError
            If the process cannot be started or the run is interrupted.
        """
        executable = invocation.executable
        logger.debug("Running %s with arguments:", executable)
        for argument in invocation.arguments:
            logger.debug("\t%s", argument)

        started = time.monotonic()
        try:
            with subprocess.Popen(
                invocation.command_line,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            ) as process:
                try:
                    output, _ = process.communicate()
                except KeyboardInterrupt as exc:
                    process.kill()
                    raise ToolInvocationError(
                        f"{executable} was interrupted",
                        executable=executable,
                    ) from exc
        except OSError as exc:
            raise ToolInvocationError(
                f"{executable} failed to start: {exc}",
                executable=executable,
            ) from exc

        duration_ms = (time.monotonic() - started) * 1000.0
        return ProcessResult(
            exit_code=process.returncode,
            output=output or "",
            duration_ms=duration_ms,
        )


def check_result(invocation: ToolInvocation, result: ProcessResult) -> ProcessResult:
    """Log a finished run and raise unless it exited with status zero.

    Raises
    ------
    ToolInvocationError
        If ``result.exit_code`` is non-zero. The combined output is logged
        at error level and attached to the exception.
    """
    executable = invocation.executable
    if result.ok:
        logger.debug("%s completed in %.0fms", executable, result.duration_ms)
        logger.debug("-- %s output --", executable)
        logger.debug("%s", result.output.strip())
        logger.debug("-- end %s output --", executable)
        return result

    logger.error("%s", result.output)
    raise ToolInvocationError(
        f"{executable} failed with exit code {result.exit_code}",
        executable=executable,
        return_code=result.exit_code,
        output=result.output,
    )
