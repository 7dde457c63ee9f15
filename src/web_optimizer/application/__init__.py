"""Application-layer use-cases and option objects."""

from __future__ import annotations

from web_optimizer.application.options import (
    AssetOptions,
    OptimizerOptions,
    ToolInvocation,
)
from web_optimizer.application.ports import ProcessRunner, SourceLocator
from web_optimizer.application.results import (
    AssetResult,
    OptimizationResult,
    ProcessResult,
)
from web_optimizer.schemas import OptimizerConfig


def build_optimizer_options(
    config: OptimizerConfig,
    *,
    platform: str | None = None,
) -> OptimizerOptions:
    """Resolve run options via lazy use-case import."""
    from web_optimizer.application.use_cases import build_optimizer_options as _impl

    return _impl(config, platform=platform)


def plan_assets(
    options: OptimizerOptions,
    *,
    locator: SourceLocator | None = None,
) -> OptimizationResult:
    """Plan minifier invocations via lazy use-case import."""
    from web_optimizer.application.use_cases import plan_assets as _impl

    return _impl(options, locator=locator)


def optimize_assets(
    options: OptimizerOptions,
    *,
    locator: SourceLocator | None = None,
    runner: ProcessRunner | None = None,
) -> OptimizationResult:
    """Run the optimizer via lazy use-case import."""
    from web_optimizer.application.use_cases import optimize_assets as _impl

    return _impl(options, locator=locator, runner=runner)


__all__ = [
    "AssetOptions",
    "OptimizerOptions",
    "ToolInvocation",
    "AssetResult",
    "OptimizationResult",
    "ProcessResult",
    "build_optimizer_options",
    "plan_assets",
    "optimize_assets",
]
