"""
Pytest fixtures and configuration for medio-diff tests.
"""

import pytest
from pathlib import Path


@pytest.fixture
def code_source() -> str:
    """A small JavaScript document."""
    return (
        "import React from 'react';\n"
        "const total = 0;\n"
        "\n"
        "function add(a, b) {\n"
        "    return a + b;\n"
        "}\n"
    )


@pytest.fixture
def code_target() -> str:
    """The JavaScript document after edits: rename, reorder, new line."""
    return (
        "import React from 'react';\n"
        "\n"
        "function add(a, b) {\n"
        "    return a - b;\n"
        "}\n"
        "const sum = 0;\n"
        "console.log(sum);\n"
    )


@pytest.fixture
def prose_source() -> str:
    """A short prose document."""
    return (
        "The quick brown fox jumps over the lazy dog.\n"
        "\n"
        "Every good boy deserves fudge.\n"
        "Zebras graze quietly."
    )


@pytest.fixture
def prose_target() -> str:
    """The prose document after edits."""
    return (
        "The fast brown fox jumps over the lazy dog.\n"
        "\n"
        "Every good girl deserves fudge.\n"
    )


@pytest.fixture
def text_files(tmp_path: Path):
    """Factory writing a source/target pair to disk."""
    def _write(source: str, target: str) -> tuple[Path, Path]:
        source_path = tmp_path / "source.txt"
        target_path = tmp_path / "target.txt"
        source_path.write_text(source, encoding="utf-8")
        target_path.write_text(target, encoding="utf-8")
        return source_path, target_path
    return _write
