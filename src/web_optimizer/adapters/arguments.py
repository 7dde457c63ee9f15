"""Argument vectors for the external minifiers."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

from web_optimizer.application.options import ToolInvocation
from web_optimizer.schemas import DEFAULT_UGLIFYJS_OPTIONS

SKIP_REBASE_FLAG = "--skip-rebase"
_OPTION_SEPARATOR = re.compile(r"[ \t]+")


def split_tool_options(options: str | None) -> list[str]:
    """Split a space/tab separated option string into arguments.

    Blank or missing strings yield no arguments. Quoting is not
    interpreted.
    """
    if options is None or not options.strip():
        return []
    return _OPTION_SEPARATOR.split(options.strip(" \t"))


def _require_inputs(inputs: Sequence[Path | str]) -> list[str]:
    if not inputs:
        raise ValueError("At least one input file is required to build a tool invocation.")
    return [str(path) for path in inputs]


def build_uglifyjs_invocation(
    executable: str,
    inputs: Sequence[Path | str],
    output_path: Path | str,
    options: str | None = DEFAULT_UGLIFYJS_OPTIONS,
) -> ToolInvocation:
    """Build ``<options...> -o <output> <inputs...>`` for the JS minifier.

    Parameters
    ----------
    executable : str
        JS minifier executable name or path.
    inputs : Sequence[Path | str]
        Input files in concatenation order. Must not be empty.
    output_path : Path | str
        Bundle written by the tool.
    options : str | None, default="-c -m"
        Option string placed before ``-o``; ``None`` or blank adds nothing.
    """
    input_args = _require_inputs(inputs)
    arguments = [*split_tool_options(options), "-o", str(output_path), *input_args]
    return ToolInvocation(executable=executable, arguments=tuple(arguments))


def build_cleancss_invocation(
    executable: str,
    inputs: Sequence[Path | str],
    output_path: Path | str,
    options: str | None = None,
    rebase: bool = False,
) -> ToolInvocation:
    """Build ``[--skip-rebase] <options...> -o <output> <inputs...>`` for the CSS minifier.

    Parameters
    ----------
    executable : str
        CSS minifier executable name or path.
    inputs : Sequence[Path | str]
        Input files in concatenation order. Must not be empty.
    output_path : Path | str
        Bundle written by the tool.
    options : str | None, default=None
        Option string placed before ``-o``.
    rebase : bool, default=False
        When ``False``, ``--skip-rebase`` leads the argument vector.
    """
    input_args = _require_inputs(inputs)
    arguments: list[str] = []
    if not rebase:
        arguments.append(SKIP_REBASE_FLAG)
    arguments.extend(split_tool_options(options))
    arguments.extend(["-o", str(output_path), *input_args])
    return ToolInvocation(executable=executable, arguments=tuple(arguments))
