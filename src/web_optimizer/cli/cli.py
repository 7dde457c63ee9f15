#!/usr/bin/env python3
"""
web_optimizer.cli.cli

Typer-based CLI that minifies a project's JavaScript and CSS sources into
bundles using external minifiers (uglifyjs and cleancss).

Configuration is read from the ``[tool.web-optimizer]`` table of the
project's ``pyproject.toml``; command-line options override it.

Examples
--------
Minify with the default layout (``src/main/javascript`` and ``src/main/css``
into ``target/<final-name>/assets``):

    web-optimizer optimize path/to/project

Show the command lines without running anything:

    web-optimizer optimize path/to/project --dry-run
"""

from __future__ import annotations

import logging
import shlex
import shutil
import sys
import traceback
from pathlib import Path
from typing import Any

import typer

from web_optimizer.errors import WebOptimizerError

app = typer.Typer(
    name="web-optimizer",
    help="Minify JavaScript and CSS sources into bundles with uglifyjs and cleancss.",
    no_args_is_help=True,
)

BASE_DIR_HELP = "Project base directory."
FINAL_NAME_HELP = "Build name used in the default output directory target/<name>/assets."
ASSET_LABELS = {"js": "JavaScript", "css": "CSS"}


# -----------------------------
# Logging / error utilities
# -----------------------------
class _EchoHandler(logging.Handler):
    """Route package log records through ``typer.echo`` on stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            typer.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def _configure_logging(level: int) -> None:
    """Install a single echo handler on the package logger.

    Parameters
    ----------
    level : int
        Minimum level for package log records.
    """
    package_logger = logging.getLogger("web_optimizer")
    for handler in list(package_logger.handlers):
        if isinstance(handler, _EchoHandler):
            package_logger.removeHandler(handler)
    handler = _EchoHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def _print_optimizer_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly optimizer error.

    Parameters
    ----------
    exc : Exception
        Exception raised while optimizing.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            err=True,
        )
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _collect_overrides(**values: Any) -> dict[str, Any]:
    """Drop unset CLI options so ``pyproject.toml`` values stay in effect."""
    overrides: dict[str, Any] = {}
    for key, value in values.items():
        if value is None or value is False:
            continue
        if isinstance(value, list):
            if not value:
                continue
            value = tuple(value)
        overrides[key] = value
    return overrides


def _describe_result(result: Any) -> None:
    """Print one line per asset step of an optimization result."""
    for asset in result.assets:
        label = ASSET_LABELS[asset.kind]
        if asset.status == "processed":
            duration = asset.process.duration_ms if asset.process else 0.0
            typer.secho(
                f"✓ {label}: {asset.output_path} "
                f"({len(asset.inputs)} files, {duration:.0f}ms)",
                fg=typer.colors.GREEN,
            )
        elif asset.status == "planned" and asset.invocation is not None:
            typer.echo(f"{label}: {shlex.join(asset.invocation.command_line)}")
        elif asset.status == "skipped-no-inputs":
            typer.echo(f"- {label}: skipped (no input files)")
        else:
            typer.echo(f"- {label}: skipped (no source directory)")


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log tool arguments and output."
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    verbose : bool, default=False
        Whether to log at DEBUG level.
    quiet : bool, default=False
        Whether to log at WARNING level.
    """
    if verbose and quiet:
        raise typer.BadParameter("--verbose and --quiet are mutually exclusive.")
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    _configure_logging(level)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("optimize")
def optimize_cmd(
    ctx: typer.Context,
    base_dir: Path = typer.Argument(
        Path("."),
        exists=True,
        file_okay=False,
        help=BASE_DIR_HELP,
    ),
    final_name: str | None = typer.Option(None, "--final-name", help=FINAL_NAME_HELP),
    output_directory: Path | None = typer.Option(
        None, "--output-directory", help="Base directory for generated bundles."
    ),
    js_source_directory: Path | None = typer.Option(
        None, "--js-source-directory", help="JavaScript source directory."
    ),
    js_source_file: list[str] | None = typer.Option(
        None,
        "--js-source-file",
        help="JavaScript file relative to the source directory (repeatable). "
        "Disables discovery.",
    ),
    js_output_name: str | None = typer.Option(
        None, "--js-output-name", help="JavaScript bundle name (default: app.js)."
    ),
    css_source_directory: Path | None = typer.Option(
        None, "--css-source-directory", help="CSS source directory."
    ),
    css_source_file: list[str] | None = typer.Option(
        None,
        "--css-source-file",
        help="CSS file relative to the source directory (repeatable). "
        "Disables discovery.",
    ),
    css_output_name: str | None = typer.Option(
        None, "--css-output-name", help="CSS bundle name (default: app.css)."
    ),
    uglifyjs_binary: str | None = typer.Option(
        None, "--uglifyjs-binary", help="JavaScript minifier executable."
    ),
    uglifyjs_options: str | None = typer.Option(
        None, "--uglifyjs-options", help="JavaScript minifier options (default: '-c -m')."
    ),
    cleancss_binary: str | None = typer.Option(
        None, "--cleancss-binary", help="CSS minifier executable."
    ),
    cleancss_options: str | None = typer.Option(
        None, "--cleancss-options", help="CSS minifier options."
    ),
    css_rebase: bool = typer.Option(
        False, "--css-rebase", help="Let cleancss rebase relative URLs."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the minifier command lines without running them."
    ),
) -> None:
    """Minify JavaScript, then CSS, into their bundles.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    base_dir : Path
        Project base directory.
    dry_run : bool, default=False
        Whether to only print the planned command lines.

    Notes
    -----
    - A step is skipped when its source directory does not exist or when
      it resolves no input files.
    - Any minifier failure aborts the run; CSS never starts after a
      JavaScript failure.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    overrides = _collect_overrides(
        final_name=final_name,
        output_directory=output_directory,
        js_source_directory=js_source_directory,
        js_source_files=js_source_file,
        js_output_name=js_output_name,
        css_source_directory=css_source_directory,
        css_source_files=css_source_file,
        css_output_name=css_output_name,
        uglifyjs_binary=uglifyjs_binary,
        uglifyjs_options=uglifyjs_options,
        cleancss_binary=cleancss_binary,
        cleancss_options=cleancss_options,
        css_rebase=css_rebase,
    )

    try:
        from web_optimizer import api

        if dry_run:
            result = api.plan_project(base_dir, overrides)
        else:
            result = api.optimize_project(base_dir, overrides)
        _describe_result(result)
    except WebOptimizerError as exc:
        raise typer.Exit(code=_print_optimizer_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_optimizer_error(exc, debug))


@app.command("plan")
def plan_cmd(
    ctx: typer.Context,
    base_dir: Path = typer.Argument(
        Path("."),
        exists=True,
        file_okay=False,
        help=BASE_DIR_HELP,
    ),
    final_name: str | None = typer.Option(None, "--final-name", help=FINAL_NAME_HELP),
) -> None:
    """Print the minifier command lines configured in pyproject.toml."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from web_optimizer import api

        result = api.plan_project(base_dir, _collect_overrides(final_name=final_name))
        _describe_result(result)
    except WebOptimizerError as exc:
        raise typer.Exit(code=_print_optimizer_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_optimizer_error(exc, debug))


@app.command("doctor")
def doctor_cmd(
    base_dir: Path = typer.Argument(
        Path("."),
        exists=True,
        file_okay=False,
        help=BASE_DIR_HELP,
    ),
) -> None:
    """Print the resolved minifier executables and whether they are on PATH."""
    from web_optimizer.application.use_cases import (
        build_optimizer_options,
        normalize_platform,
    )
    from web_optimizer.config import load_config

    typer.echo(f"Python: {sys.version.split()[0]}")
    typer.echo(f"platform: {normalize_platform(sys.platform)}")

    try:
        options = build_optimizer_options(load_config(base_dir))
    except WebOptimizerError as exc:
        raise typer.Exit(code=_print_optimizer_error(exc, debug=False))

    for asset in options.assets:
        location = shutil.which(asset.executable)
        typer.echo(f"{asset.executable}: {location or '<not found>'}")
    typer.echo(f"output: {options.output_directory}")


if __name__ == "__main__":
    app()
