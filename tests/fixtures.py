"""Shared content trees and console doubles for deterministic tests."""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Dict, Iterable, List

from tools.console import Console
from tools.filesystem import LocalFileSystem

LESSON_FILES: Dict[str, bytes] = {
    "h5p.json": b'{"title": "Lesson 1", "mainLibrary": "H5P.Column"}',
    "content/content.json": b'{"content": []}',
    "content/images/a.png": bytes(range(256)) * 4,
}


def create_content_tree(root: Path, files: Dict[str, bytes] = LESSON_FILES) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for relative, data in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    return root


def archive_names(path: Path) -> List[str]:
    with zipfile.ZipFile(path) as archive:
        return archive.namelist()


class ScriptedConsole(Console):
    """Console fed from a list of answers; records everything written."""

    def __init__(self, answers: Iterable[str] = ()):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.lines: List[str] = []
        self.clears = 0

    def read_line(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, message: str = "") -> None:
        self.lines.append(message)

    def clear(self) -> None:
        self.clears += 1

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class FaultyFileSystem(LocalFileSystem):
    """Local filesystem that fails to read one named file."""

    def __init__(self, failing_name: str):
        self.failing_name = failing_name

    def read_bytes(self, path: Path) -> bytes:
        if path.name == self.failing_name:
            raise PermissionError(13, "Permission denied", str(path))
        return super().read_bytes(path)


class InterruptingFileSystem(LocalFileSystem):
    """Local filesystem where reading one named file is interrupted by the user."""

    def __init__(self, failing_name: str):
        self.failing_name = failing_name

    def read_bytes(self, path: Path) -> bytes:
        if path.name == self.failing_name:
            raise KeyboardInterrupt
        return super().read_bytes(path)
