"""Source file discovery for asset steps."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def _raise_walk_error(exc: OSError) -> None:
    raise exc


def _deepest_first(path: Path) -> tuple[int, str]:
    return (-len(path.parts), str(path))


def find_source_files(root: Path, extension: str) -> list[Path]:
    """Recursively find regular files under ``root`` ending with ``extension``.

    Parameters
    ----------
    root : Path
        Directory to traverse.
    extension : str
        File suffix including the leading dot, e.g. ``".js"``.

    Returns
    -------
    list[Path]
        Matching files, deeper paths first; paths of equal depth are
        ordered lexicographically. The order is the concatenation order of
        the resulting bundle.

    Raises
    ------
    OSError
        If ``root`` is missing, is not a directory, or cannot be traversed.
    """
    if not root.exists():
        raise FileNotFoundError(f"No such directory: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    matches: list[Path] = []
    for directory, _dirnames, filenames in root.walk(on_error=_raise_walk_error):
        for name in filenames:
            candidate = directory / name
            if name.endswith(extension) and candidate.is_file():
                matches.append(candidate)
    return sorted(matches, key=_deepest_first)


def resolve_listed_files(source_directory: Path, names: Iterable[str]) -> list[Path]:
    """Resolve configured file names relative to ``source_directory``.

    Entries that do not exist are logged and skipped; configuration order
    is preserved.
    """
    resolved: list[Path] = []
    for name in names:
        candidate = source_directory / name
        if candidate.exists():
            resolved.append(candidate.absolute())
        else:
            logger.warning("%s does not exist - skipping it", candidate)
    return resolved


class FileSystemSourceLocator:
    """Default locator backed by the local filesystem."""

    def find(self, root: Path, extension: str) -> list[Path]:
        return find_source_files(root, extension)

    def resolve_listed(self, source_directory: Path, names: Iterable[str]) -> list[Path]:
        return resolve_listed_files(source_directory, names)
