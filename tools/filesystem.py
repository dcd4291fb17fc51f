"""Filesystem access used by the packager."""

from __future__ import annotations

import os
import zipfile
from pathlib import Path
from typing import BinaryIO, List


class LocalFileSystem:
    """Thin wrapper over the local disk so packaging can be exercised in isolation."""

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def remove(self, path: Path) -> None:
        path.unlink()

    def list_files(self, root: Path) -> List[Path]:
        """Every regular file under root, at any depth, in walk order."""
        files: List[Path] = []

        def _raise(exc: OSError) -> None:
            raise exc

        for current, _, names in os.walk(root, onerror=_raise):
            for name in names:
                path = Path(current) / name
                if path.is_file():
                    files.append(path)
        return files

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def entry_info(self, path: Path, arcname: str) -> zipfile.ZipInfo:
        """Zip header for path stored under arcname, carrying its mtime."""
        return zipfile.ZipInfo.from_file(path, arcname, strict_timestamps=False)

    def open_write(self, path: Path) -> BinaryIO:
        return open(path, "wb")
