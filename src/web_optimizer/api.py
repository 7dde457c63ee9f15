"""Public project-based optimization API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from web_optimizer.application.results import OptimizationResult
from web_optimizer.application.use_cases import build_optimizer_options
from web_optimizer.application.use_cases import optimize_assets
from web_optimizer.application.use_cases import plan_assets
from web_optimizer.config import load_config
from web_optimizer.types import OptionMap


def optimize_project(
    base_dir: Path,
    overrides: Optional[OptionMap] = None,
    *,
    platform: Optional[str] = None,
    use_pyproject: bool = True,
) -> OptimizationResult:
    """Minify the JavaScript and CSS sources of the project at ``base_dir``."""
    config = load_config(base_dir, overrides, use_pyproject=use_pyproject)
    options = build_optimizer_options(config, platform=platform)
    return optimize_assets(options)


def plan_project(
    base_dir: Path,
    overrides: Optional[OptionMap] = None,
    *,
    platform: Optional[str] = None,
    use_pyproject: bool = True,
) -> OptimizationResult:
    """Return the minifier invocations :func:`optimize_project` would run."""
    config = load_config(base_dir, overrides, use_pyproject=use_pyproject)
    options = build_optimizer_options(config, platform=platform)
    return plan_assets(options)
