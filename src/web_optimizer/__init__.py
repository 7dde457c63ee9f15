"""Top-level API for JavaScript and CSS bundle minification."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from web_optimizer.types import OptionMap

if TYPE_CHECKING:
    from web_optimizer.application.results import OptimizationResult

__version__ = "0.1.0"


def optimize_project(
    base_dir: Path,
    overrides: OptionMap | None = None,
    *,
    platform: str | None = None,
    use_pyproject: bool = True,
) -> OptimizationResult:
    """Minify a project's JavaScript, then CSS, sources into bundles.

    Parameters
    ----------
    base_dir : Path
        Project base directory. Default source and output directories are
        resolved against it, and ``[tool.web-optimizer]`` is read from its
        ``pyproject.toml``.
    overrides : Mapping[str, OptionValue] | None, default=None
        Configuration values applied on top of ``pyproject.toml``.
    platform : str | None, default=None
        Platform identifier for default executable names.
    use_pyproject : bool, default=True
        Whether to read ``pyproject.toml`` at all.

    Returns
    -------
    OptimizationResult
        Per-asset outcome (processed or skipped).
    """
    from .api import optimize_project as _impl

    return _impl(
        base_dir,
        overrides,
        platform=platform,
        use_pyproject=use_pyproject,
    )


def plan_project(
    base_dir: Path,
    overrides: OptionMap | None = None,
    *,
    platform: str | None = None,
    use_pyproject: bool = True,
) -> OptimizationResult:
    """Compute the minifier invocations without creating files or processes.

    Parameters are the same as for :func:`optimize_project`.
    """
    from .api import plan_project as _impl

    return _impl(
        base_dir,
        overrides,
        platform=platform,
        use_pyproject=use_pyproject,
    )


__all__ = [
    "optimize_project",
    "plan_project",
]
