"""Configuration loading from ``pyproject.toml`` and caller overrides."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from web_optimizer.errors import ConfigurationError
from web_optimizer.schemas import OptimizerConfig
from web_optimizer.types import OptionMap

PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TABLE = "web-optimizer"


def _option_key(name: str) -> str:
    return name.strip().replace("_", "-")


def load_pyproject_settings(base_dir: Path) -> dict[str, object]:
    """Read the ``[tool.web-optimizer]`` table of ``base_dir/pyproject.toml``.

    Parameters
    ----------
    base_dir : Path
        Project base directory.

    Returns
    -------
    dict[str, object]
        Raw table contents, empty when the file or the table is absent.

    Raises
    ------
    ConfigurationError
        If the file is not valid TOML or the table is not a mapping.
    """
    path = base_dir / PYPROJECT_FILENAME
    if not path.is_file():
        return {}
    try:
        document = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Unable to read {path}: {exc}") from exc

    table = document.get("tool", {}).get(PYPROJECT_TABLE, {})
    if not isinstance(table, Mapping):
        raise ConfigurationError(
            f"[tool.{PYPROJECT_TABLE}] in {path} must be a table."
        )
    return dict(table)


def load_config(
    base_dir: Path,
    overrides: OptionMap | None = None,
    *,
    use_pyproject: bool = True,
) -> OptimizerConfig:
    """Build validated configuration for ``base_dir``.

    Settings from ``pyproject.toml`` are applied first; ``overrides`` whose
    value is not ``None`` win over them. Keys may use hyphens or
    underscores.

    Raises
    ------
    ConfigurationError
        If the merged mapping does not validate.
    """
    settings: dict[str, object] = {}
    if use_pyproject:
        settings.update(
            (_option_key(key), value)
            for key, value in load_pyproject_settings(base_dir).items()
        )
    settings.update(
        (_option_key(key), value)
        for key, value in (overrides or {}).items()
        if value is not None
    )
    settings["base-dir"] = base_dir

    try:
        return OptimizerConfig.model_validate(settings)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid optimizer configuration: {exc}") from exc
