"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from web_optimizer.application.options import ToolInvocation
from web_optimizer.application.results import ProcessResult


class SourceLocator(Protocol):
    """Resolve the input files of an asset step."""

    def find(self, root: Path, extension: str) -> list[Path]:
        """Discover files under ``root``; raise ``OSError`` on traversal failure."""

    def resolve_listed(self, source_directory: Path, names: Iterable[str]) -> list[Path]:
        """Resolve explicitly configured names, skipping missing files."""


class ProcessRunner(Protocol):
    """Run an external tool to completion."""

    def run(self, invocation: ToolInvocation) -> ProcessResult:
        """Run the tool and return its result, whatever the exit code."""
