"""Pytest fixtures shared across the packager tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixtures import ScriptedConsole, create_content_tree


@pytest.fixture
def lesson_dir(tmp_path: Path) -> Path:
    """A lesson1/ folder holding h5p.json and a nested content/ directory."""
    return create_content_tree(tmp_path / "lesson1")


@pytest.fixture
def console() -> ScriptedConsole:
    return ScriptedConsole()
