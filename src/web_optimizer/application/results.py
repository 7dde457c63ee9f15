"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from web_optimizer.application.options import ToolInvocation
from web_optimizer.types import AssetKind, AssetStatus


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a single child process run."""

    exit_code: int
    output: str
    duration_ms: float

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class AssetResult:
    """Structured outcome for one asset kind."""

    kind: AssetKind
    status: AssetStatus
    output_path: Path
    inputs: tuple[Path, ...] = ()
    invocation: ToolInvocation | None = None
    process: ProcessResult | None = None


@dataclass(frozen=True)
class OptimizationResult:
    """Structured outcome of an optimizer run."""

    assets: tuple[AssetResult, ...]

    def for_kind(self, kind: AssetKind) -> AssetResult:
        """Return the result recorded for ``kind``."""
        for asset in self.assets:
            if asset.kind == kind:
                return asset
        raise KeyError(kind)

    @property
    def invocations(self) -> list[ToolInvocation]:
        """Tool invocations in execution order (skipped steps excluded)."""
        return [asset.invocation for asset in self.assets if asset.invocation]
