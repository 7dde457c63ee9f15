"""Shared type aliases for optimizer modules."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Literal

type AssetKind = Literal["js", "css"]
type PlatformId = Literal["windows", "posix"]
type AssetStatus = Literal[
    "processed", "planned", "skipped-no-source", "skipped-no-inputs"
]

type OptionScalar = str | bool | None | Path
type OptionValue = OptionScalar | list[str] | tuple[str, ...]
type OptionMap = Mapping[str, OptionValue]
