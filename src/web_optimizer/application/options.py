"""Typed option objects shared across optimization use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from web_optimizer.types import AssetKind


@dataclass(frozen=True)
class ToolInvocation:
    """Executable plus the argument vector passed to it."""

    executable: str
    arguments: tuple[str, ...]

    @property
    def command_line(self) -> list[str]:
        """Return ``[executable, *arguments]`` for process creation."""
        return [self.executable, *self.arguments]


@dataclass(frozen=True)
class AssetOptions:
    """Resolved settings for one asset kind (JavaScript or CSS)."""

    kind: AssetKind
    executable: str
    tool_options: str | None
    source_directory: Path
    output_path: Path
    source_files: tuple[str, ...] | None = None
    css_rebase: bool = False

    @property
    def extension(self) -> str:
        return f".{self.kind}"


@dataclass(frozen=True)
class OptimizerOptions:
    """Immutable configuration for a whole optimizer run."""

    output_directory: Path
    javascript: AssetOptions
    css: AssetOptions

    @property
    def assets(self) -> tuple[AssetOptions, AssetOptions]:
        """Asset steps in processing order: JavaScript first, then CSS."""
        return (self.javascript, self.css)
