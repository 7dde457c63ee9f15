"""Pydantic schemas for runtime validation of optimizer configuration."""

from __future__ import annotations

from pathlib import Path, PurePath

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_UGLIFYJS_OPTIONS = "-c -m"
DEFAULT_JS_OUTPUT_NAME = "app.js"
DEFAULT_CSS_OUTPUT_NAME = "app.css"


class OptimizerConfig(BaseModel):
    """Validated flat configuration mapping.

    Keys may be given either with the hyphenated names used in
    ``[tool.web-optimizer]`` tables (``js-source-directory``) or as Python
    field names (``js_source_directory``). Unset directories and binaries
    stay ``None`` here and are resolved later against the base directory
    and the current platform.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    base_dir: Path = Field(default_factory=Path.cwd, alias="base-dir")
    final_name: str | None = Field(default=None, alias="final-name")

    uglifyjs_binary: str | None = Field(default=None, alias="uglifyjs-binary")
    uglifyjs_options: str | None = Field(
        default=DEFAULT_UGLIFYJS_OPTIONS, alias="uglifyjs-options"
    )
    cleancss_binary: str | None = Field(default=None, alias="cleancss-binary")
    cleancss_options: str | None = Field(default=None, alias="cleancss-options")
    css_rebase: bool = Field(default=False, alias="css-rebase")

    output_directory: Path | None = Field(default=None, alias="output-directory")

    js_source_directory: Path | None = Field(default=None, alias="js-source-directory")
    js_source_files: tuple[str, ...] | None = Field(default=None, alias="js-source-files")
    js_output_name: str = Field(default=DEFAULT_JS_OUTPUT_NAME, alias="js-output-name")

    css_source_directory: Path | None = Field(
        default=None, alias="css-source-directory"
    )
    css_source_files: tuple[str, ...] | None = Field(
        default=None, alias="css-source-files"
    )
    css_output_name: str = Field(
        default=DEFAULT_CSS_OUTPUT_NAME, alias="css-output-name"
    )

    @field_validator("uglifyjs_binary", "cleancss_binary", "final_name")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @field_validator("js_output_name", "css_output_name")
    @classmethod
    def _validate_output_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("output name cannot be empty.")
        if PurePath(value).is_absolute():
            raise ValueError("output name must be relative to the output directory.")
        return value

    @field_validator("js_source_files", "css_source_files")
    @classmethod
    def _validate_source_files(
        cls, value: tuple[str, ...] | None
    ) -> tuple[str, ...] | None:
        if value is None:
            return None
        if any(not item.strip() for item in value):
            raise ValueError("source file lists cannot contain empty entries.")
        return value
