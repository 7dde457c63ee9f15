"""Shared pytest configuration, marker assignment and project fixtures."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

FAKE_MINIFIER = '''\
import sys

args = sys.argv[1:]
index = args.index("-o")
flags, output, inputs = args[:index], args[index + 1], args[index + 2:]
with open(output, "w", encoding="utf-8") as handle:
    handle.write("/* " + " ".join(flags) + " */\\n")
    for name in inputs:
        with open(name, encoding="utf-8") as source:
            handle.write(source.read())
print("wrote", output)
print("inputs", len(inputs), file=sys.stderr)
'''

FAILING_MINIFIER = '''\
import sys

print("Parse error at line 1")
print("ERROR: unexpected token", file=sys.stderr)
sys.exit(2)
'''


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def write_files(tmp_path: Path) -> Callable[..., list[Path]]:
    """Create files (with parents) under ``tmp_path`` from relative names."""

    def _write(*names: str, content: str = "") -> list[Path]:
        created: list[Path] = []
        for name in names:
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content or f"/* {name} */\n", encoding="utf-8")
            created.append(path)
        return created

    return _write


@pytest.fixture
def python_tool(tmp_path: Path) -> Callable[[str, str], str]:
    """Write ``source`` as an executable script and return its path.

    The script runs with the current interpreter through a shebang line,
    so it stands in for a real minifier executable.
    """
    if sys.platform == "win32":
        pytest.skip("shebang scripts are not executable on Windows")

    def _tool(name: str, source: str) -> str:
        script = tmp_path / "tools" / name
        script.parent.mkdir(parents=True, exist_ok=True)
        script.write_text(f"#!{sys.executable}\n{source}", encoding="utf-8")
        script.chmod(0o755)
        return str(script)

    return _tool


@pytest.fixture
def fake_minifier(python_tool: Callable[[str, str], str]) -> str:
    """Executable that concatenates its inputs into ``-o`` behind a flags header."""
    return python_tool("minify", FAKE_MINIFIER)


@pytest.fixture
def failing_minifier(python_tool: Callable[[str, str], str]) -> str:
    """Executable that prints a parse error on both streams and exits with 2."""
    return python_tool("broken", FAILING_MINIFIER)
