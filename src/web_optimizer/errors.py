"""Error taxonomy for asset optimization."""

from __future__ import annotations


class WebOptimizerError(Exception):
    """Base error for every failure raised by this package."""

    exit_code = 1


class ConfigurationError(WebOptimizerError):
    """Raised when the optimizer configuration is invalid."""

    exit_code = 2


class DiscoveryError(WebOptimizerError):
    """Raised when source files cannot be located."""

    exit_code = 3


class DirectoryCreationError(WebOptimizerError):
    """Raised when an output directory cannot be created."""

    exit_code = 4


class ToolInvocationError(WebOptimizerError):
    """Raised when a minifier cannot be started, is interrupted, or fails.

    Parameters
    ----------
    message : str
        Human readable failure description.
    executable : str
        Executable that was (or was about to be) launched.
    return_code : int | None, default=None
        Child exit status, ``None`` when the process never completed.
    output : str, default=""
        Combined stdout/stderr captured before the failure.
    """

    exit_code = 5

    def __init__(
        self,
        message: str,
        *,
        executable: str,
        return_code: int | None = None,
        output: str = "",
    ) -> None:
        super().__init__(message)
        self.executable = executable
        self.return_code = return_code
        self.output = output
