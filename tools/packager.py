"""Build an .h5p archive from a content folder."""

from __future__ import annotations

import logging
import os
import zipfile
from pathlib import Path
from typing import List, Optional

from config.settings import settings
from schemas.response_schemas import PackageResult
from tools.console import Console, SilentConsole
from tools.error_handler import InvalidSourceError, PackageIOError
from tools.filesystem import LocalFileSystem

logger = logging.getLogger(__name__)


def package_output_path(source_dir: Path, extension: Optional[str] = None) -> Path:
    """Archive path for source_dir: the folder's own name plus the package extension."""
    extension = extension or settings.package_extension
    return source_dir / f"{source_dir.name}{extension}"


def _same_path(left: Path, right: Path) -> bool:
    return os.path.normcase(str(left)) == os.path.normcase(str(right))


def _snapshot(source_dir: Path, output_path: Path, fs: LocalFileSystem) -> List[Path]:
    return [path for path in fs.list_files(source_dir) if not _same_path(path, output_path)]


def _discard_partial(output_path: Path, fs: LocalFileSystem) -> None:
    try:
        if fs.is_file(output_path):
            fs.remove(output_path)
    except OSError as exc:
        logger.warning("Could not remove partial archive %s: %s", output_path, exc)


def create_package(
    source_dir: Path | str,
    fs: Optional[LocalFileSystem] = None,
    console: Optional[Console] = None,
) -> PackageResult:
    """
    Compress every file under source_dir into <source_dir>/<name>.h5p.

    The file list is captured before the archive is created, so the archive
    never lists itself. A stale archive from an earlier run is deleted first.
    On an I/O fault the partial archive is removed and PackageIOError raised.
    """
    fs = fs or LocalFileSystem()
    console = console or SilentConsole()
    source = Path(source_dir)

    if not str(source_dir).strip() or not fs.is_dir(source):
        raise InvalidSourceError(
            f"Error: Source folder '{source}' does not exist.",
            source_dir=str(source),
        )

    source = source.resolve()
    output_path = package_output_path(source)
    replaced = False

    try:
        if fs.is_file(output_path):
            console.write(f"Warning: File '{output_path}' already exists. Overwriting...")
            logger.info("Replacing existing archive %s", output_path)
            fs.remove(output_path)
            replaced = True
        files = _snapshot(source, output_path, fs)
    except OSError as exc:
        raise PackageIOError(
            f"Error: Could not prepare '{output_path}': {exc}",
            source_dir=str(source),
        ) from exc

    console.write(f"Compressing '{source}' into '{output_path}'...")

    entries: List[str] = []
    try:
        with fs.open_write(output_path) as handle:
            with zipfile.ZipFile(handle, "w", zipfile.ZIP_DEFLATED) as archive:
                for path in files:
                    arcname = path.relative_to(source).as_posix()
                    info = fs.entry_info(path, arcname)
                    archive.writestr(
                        info,
                        fs.read_bytes(path),
                        compress_type=zipfile.ZIP_DEFLATED,
                        compresslevel=settings.compression_level,
                    )
                    entries.append(arcname)
                    logger.debug("Added %s", arcname)
                    console.write(f"Added: {arcname}")
    except OSError as exc:
        _discard_partial(output_path, fs)
        raise PackageIOError(
            f"Error: Failed to write '{output_path}': {exc}",
            source_dir=str(source),
        ) from exc
    except BaseException:
        _discard_partial(output_path, fs)
        raise

    console.write(f"Successfully created: {output_path}")
    logger.info("Created %s with %d entries", output_path, len(entries))
    return PackageResult(
        source_dir=str(source),
        output_path=str(output_path),
        entries=entries,
        replaced_existing=replaced,
    )
