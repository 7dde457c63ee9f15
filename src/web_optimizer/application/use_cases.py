"""Application use-cases orchestrating asset optimization."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from pathlib import Path

from web_optimizer.adapters.arguments import (
    build_cleancss_invocation,
    build_uglifyjs_invocation,
)
from web_optimizer.adapters.locators import FileSystemSourceLocator
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
from web_optimizer.errors import DirectoryCreationError, DiscoveryError
from web_optimizer.infrastructure.process import SubprocessRunner, check_result
from web_optimizer.schemas import OptimizerConfig
from web_optimizer.types import AssetKind, AssetStatus, PlatformId

logger = logging.getLogger(__name__)

DEFAULT_BINARIES: Mapping[PlatformId, Mapping[AssetKind, str]] = {
    "windows": {"js": "uglifyjs.cmd", "css": "cleancss.cmd"},
    "posix": {"js": "uglifyjs", "css": "cleancss"},
}
DEFAULT_JS_SOURCE_DIRECTORY = Path("src/main/javascript")
DEFAULT_CSS_SOURCE_DIRECTORY = Path("src/main/css")
ASSET_LABELS: Mapping[AssetKind, str] = {"js": "JavaScript", "css": "CSS"}


def normalize_platform(platform: str) -> PlatformId:
    """Map ``sys.platform`` / ``platform.system()`` values to a platform id."""
    return "windows" if platform.lower().startswith("win") else "posix"


def _resolve_directory(base_dir: Path, configured: Path | None, default: Path) -> Path:
    directory = configured if configured is not None else default
    return directory if directory.is_absolute() else base_dir / directory


def build_optimizer_options(
    config: OptimizerConfig,
    *,
    platform: str | None = None,
) -> OptimizerOptions:
    """Resolve validated configuration into immutable run options.

    Parameters
    ----------
    config : OptimizerConfig
        Validated configuration mapping.
    platform : str | None, default=None
        Platform identifier used to pick default executables. Defaults to
        ``sys.platform``.

    Returns
    -------
    OptimizerOptions
        Absolute directories, output paths and executables for each asset.
    """
    binaries = DEFAULT_BINARIES[normalize_platform(platform or sys.platform)]
    base_dir = config.base_dir.absolute()
    final_name = config.final_name or base_dir.name
    output_directory = _resolve_directory(
        base_dir,
        config.output_directory,
        Path("target") / final_name / "assets",
    )

    javascript = AssetOptions(
        kind="js",
        executable=config.uglifyjs_binary or binaries["js"],
        tool_options=config.uglifyjs_options,
        source_directory=_resolve_directory(
            base_dir, config.js_source_directory, DEFAULT_JS_SOURCE_DIRECTORY
        ),
        source_files=config.js_source_files,
        output_path=output_directory / config.js_output_name,
    )
    css = AssetOptions(
        kind="css",
        executable=config.cleancss_binary or binaries["css"],
        tool_options=config.cleancss_options,
        source_directory=_resolve_directory(
            base_dir, config.css_source_directory, DEFAULT_CSS_SOURCE_DIRECTORY
        ),
        source_files=config.css_source_files,
        output_path=output_directory / config.css_output_name,
        css_rebase=config.css_rebase,
    )
    return OptimizerOptions(
        output_directory=output_directory,
        javascript=javascript,
        css=css,
    )


def collect_inputs(asset: AssetOptions, locator: SourceLocator) -> list[Path]:
    """Resolve the input files of ``asset``.

    An explicit file list wins over discovery. Discovery failures are
    wrapped in :class:`DiscoveryError`.
    """
    if asset.source_files is not None:
        return locator.resolve_listed(asset.source_directory, asset.source_files)
    try:
        return locator.find(asset.source_directory, asset.extension)
    except OSError as exc:
        raise DiscoveryError(
            f"Failed to find {ASSET_LABELS[asset.kind]} source files "
            f"in {asset.source_directory}: {exc}"
        ) from exc


def build_invocation(asset: AssetOptions, inputs: list[Path]) -> ToolInvocation:
    """Build the minifier invocation for ``asset`` over non-empty ``inputs``."""
    if asset.kind == "js":
        return build_uglifyjs_invocation(
            asset.executable, inputs, asset.output_path, asset.tool_options
        )
    return build_cleancss_invocation(
        asset.executable,
        inputs,
        asset.output_path,
        asset.tool_options,
        rebase=asset.css_rebase,
    )


def ensure_output_directory(output_path: Path) -> Path:
    """Create the parent directory of ``output_path`` if missing."""
    directory = output_path.parent
    logger.debug("Output directory: %s", directory)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(
            f"Failed to create directory {directory}: {exc}"
        ) from exc
    return directory


def run_tool(invocation: ToolInvocation, runner: ProcessRunner) -> ProcessResult:
    """Run ``invocation`` and fail on any non-zero exit status."""
    return check_result(invocation, runner.run(invocation))


def _source_available(asset: AssetOptions) -> bool:
    if asset.source_directory.exists():
        return True
    logger.info(
        "%s source directory (%s) does not exist - skipping %s run",
        ASSET_LABELS[asset.kind],
        asset.source_directory,
        asset.executable,
    )
    return False


def _skipped(asset: AssetOptions, status: AssetStatus) -> AssetResult:
    if status == "skipped-no-inputs":
        logger.info("No input files, skipping %s run", asset.executable)
    return AssetResult(kind=asset.kind, status=status, output_path=asset.output_path)


def _log_locations(options: OptimizerOptions) -> None:
    logger.info("JavaScript: %s", options.javascript.source_directory)
    logger.info("CSS: %s", options.css.source_directory)
    logger.info("Output: %s", options.output_directory)


def plan_assets(
    options: OptimizerOptions,
    *,
    locator: SourceLocator | None = None,
) -> OptimizationResult:
    """Use-case: compute the invocations an optimizer run would execute.

    No directory is created and no process is started.
    """
    locator = locator or FileSystemSourceLocator()
    _log_locations(options)

    results: list[AssetResult] = []
    for asset in options.assets:
        if not _source_available(asset):
            results.append(_skipped(asset, "skipped-no-source"))
            continue
        inputs = collect_inputs(asset, locator)
        if not inputs:
            results.append(_skipped(asset, "skipped-no-inputs"))
            continue
        results.append(
            AssetResult(
                kind=asset.kind,
                status="planned",
                output_path=asset.output_path,
                inputs=tuple(inputs),
                invocation=build_invocation(asset, inputs),
            )
        )
    return OptimizationResult(assets=tuple(results))


def optimize_assets(
    options: OptimizerOptions,
    *,
    locator: SourceLocator | None = None,
    runner: ProcessRunner | None = None,
) -> OptimizationResult:
    """Use-case: minify JavaScript, then CSS, into their bundles.

    Output directories for every step with an existing source directory
    are created before any tool runs. Steps run strictly in order; the
    first failure propagates and later steps never start.

    Parameters
    ----------
    options : OptimizerOptions
        Resolved run options.
    locator : SourceLocator | None, default=None
        Input resolution strategy; filesystem-backed by default.
    runner : ProcessRunner | None, default=None
        Process runner; :class:`SubprocessRunner` by default.

    Returns
    -------
    OptimizationResult
        One :class:`AssetResult` per asset kind, in processing order.
    """
    locator = locator or FileSystemSourceLocator()
    runner = runner or SubprocessRunner()
    _log_locations(options)

    active = [asset for asset in options.assets if _source_available(asset)]
    for asset in active:
        ensure_output_directory(asset.output_path)

    results: list[AssetResult] = []
    for asset in options.assets:
        if asset not in active:
            results.append(_skipped(asset, "skipped-no-source"))
            continue

        logger.info(
            "Processing %s files (using %s) to %s",
            ASSET_LABELS[asset.kind],
            asset.executable,
            asset.output_path,
        )
        inputs = collect_inputs(asset, locator)
        if not inputs:
            results.append(_skipped(asset, "skipped-no-inputs"))
            continue

        invocation = build_invocation(asset, inputs)
        process = run_tool(invocation, runner)
        results.append(
            AssetResult(
                kind=asset.kind,
                status="processed",
                output_path=asset.output_path,
                inputs=tuple(inputs),
                invocation=invocation,
                process=process,
            )
        )
    return OptimizationResult(assets=tuple(results))
