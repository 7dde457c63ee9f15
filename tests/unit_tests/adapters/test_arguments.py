"""Unit tests for minifier argument vectors."""

from __future__ import annotations

from pathlib import Path

import pytest

from web_optimizer.adapters.arguments import (
    build_cleancss_invocation,
    build_uglifyjs_invocation,
    split_tool_options,
)


def test_cleancss_skip_rebase_scenario() -> None:
    """Lead with --skip-rebase when rebasing is not enabled."""
    invocation = build_cleancss_invocation(
        "cleancss", [Path("x.css")], Path("/out/app.css")
    )

    assert invocation.executable == "cleancss"
    assert list(invocation.arguments) == [
        "--skip-rebase",
        "-o",
        str(Path("/out/app.css")),
        "x.css",
    ]


def test_cleancss_rebase_omits_flag() -> None:
    """Omit --skip-rebase entirely when rebasing is enabled."""
    invocation = build_cleancss_invocation(
        "cleancss", ["a.css", "b.css"], "app.css", options="-O2", rebase=True
    )

    assert invocation.arguments == ("-O2", "-o", "app.css", "a.css", "b.css")


def test_cleancss_options_follow_skip_rebase() -> None:
    """Place configured options after --skip-rebase and before -o."""
    invocation = build_cleancss_invocation(
        "cleancss", ["a.css"], "app.css", options="-d\t--format  keep-breaks"
    )

    assert invocation.arguments == (
        "--skip-rebase",
        "-d",
        "--format",
        "keep-breaks",
        "-o",
        "app.css",
        "a.css",
    )


def test_uglifyjs_default_flags() -> None:
    """Use -c -m when no option string is given."""
    invocation = build_uglifyjs_invocation("uglifyjs", ["a.js", "b.js"], "app.js")

    assert invocation.command_line == [
        "uglifyjs",
        "-c",
        "-m",
        "-o",
        "app.js",
        "a.js",
        "b.js",
    ]


def test_uglifyjs_custom_and_blank_options() -> None:
    """Replace the default flags, or drop them for blank options."""
    custom = build_uglifyjs_invocation("uglifyjs", ["a.js"], "app.js", "-c -m --stats")
    blank = build_uglifyjs_invocation("uglifyjs", ["a.js"], "app.js", "   ")
    none = build_uglifyjs_invocation("uglifyjs", ["a.js"], "app.js", None)

    assert custom.arguments == ("-c", "-m", "--stats", "-o", "app.js", "a.js")
    assert blank.arguments == ("-o", "app.js", "a.js")
    assert none.arguments == blank.arguments


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, []),
        ("", []),
        (" \t ", []),
        ("-c -m", ["-c", "-m"]),
        ("  -c\t\t-m  ", ["-c", "-m"]),
        ("--beautify 'x y'", ["--beautify", "'x", "y'"]),
    ],
)
def test_split_tool_options(raw: str | None, expected: list[str]) -> None:
    """Split on runs of spaces and tabs without interpreting quotes."""
    assert split_tool_options(raw) == expected


def test_builders_reject_empty_inputs() -> None:
    """Refuse to build an invocation without input files."""
    with pytest.raises(ValueError, match="At least one input file"):
        build_uglifyjs_invocation("uglifyjs", [], "app.js")
    with pytest.raises(ValueError, match="At least one input file"):
        build_cleancss_invocation("cleancss", [], "app.css")
