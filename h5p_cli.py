"""Interactive CLI for packaging H5P content folders."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from config.settings import settings
from pipelines.package_pipeline import execute_package_pipeline, exit_code_for
from schemas.request_schemas import PackageRequest
from schemas.response_schemas import ErrorResponse
from tools.console import Console
from tools.error_handler import EXIT_INTERRUPTED, EXIT_OK
from tools.filesystem import LocalFileSystem

BANNER = "H5P Compressor - Create a Valid H5P Package \n"
FAREWELL = "Goodbye!"
FOLDER_PROMPT = "Enter the folder path containing H5P content: "
RETRY_PROMPT = "Invalid folder. Please enter a valid path: "


def _print_menu(console: Console) -> None:
    console.write("Options:")
    console.write("  1. Compress a folder into an H5P package")
    console.write("  2. Help")
    console.write("  3. Exit")


def _print_help(console: Console) -> None:
    console.clear()
    console.write("Usage:")
    console.write("  Choose 1 and enter the path of a folder holding H5P content")
    console.write("  (the folder with h5p.json and the content/ directory).")
    console.write(f"  Every file in it is zipped into <folder>/<folder>{settings.package_extension}.")
    console.write("  An existing package with the same name is replaced.")
    console.write("  Choose 3 to quit.")
    console.write()


def _prompt_for_folder(console: Console, fs: LocalFileSystem) -> str:
    source = console.read_line(FOLDER_PROMPT).strip()
    while not source or not fs.is_dir(Path(source)):
        source = console.read_line(RETRY_PROMPT).strip()
    return source


def _package(source: str, console: Console, fs: LocalFileSystem) -> int:
    outcome = execute_package_pipeline(PackageRequest(source_dir=source), fs=fs, console=console)
    if isinstance(outcome, ErrorResponse):
        console.write(outcome.error_message)
    return exit_code_for(outcome)


def run_once(console: Optional[Console] = None, fs: Optional[LocalFileSystem] = None) -> int:
    """Prompt for one folder, package it and return the exit code."""
    console = console or Console()
    fs = fs or LocalFileSystem()
    console.write(BANNER)
    try:
        return _package(_prompt_for_folder(console, fs), console, fs)
    except EOFError:
        console.write()
        return EXIT_OK
    except KeyboardInterrupt:
        console.write()
        return EXIT_INTERRUPTED


def run_menu(console: Optional[Console] = None, fs: Optional[LocalFileSystem] = None) -> int:
    """
    Menu loop: 1 compresses a folder, 2 shows help, 3 exits.
    Packaging failures are reported and the loop continues.
    """
    console = console or Console()
    fs = fs or LocalFileSystem()
    console.write(BANNER)
    try:
        while True:
            _print_menu(console)
            choice = console.read_line("Select an option: ").strip()
            if choice == "1":
                _package(_prompt_for_folder(console, fs), console, fs)
            elif choice == "2":
                _print_help(console)
            elif choice == "3":
                break
            else:
                console.write("Invalid option. Please choose 1, 2 or 3.")
            console.write()
    except EOFError:
        console.write()
    except KeyboardInterrupt:
        console.write()
        console.write(FAREWELL)
        return EXIT_INTERRUPTED
    console.write(FAREWELL)
    return EXIT_OK


def _configure_logging() -> None:
    logging.basicConfig(level=settings.log_level, format=settings.log_format)


def main() -> int:
    """Menu-driven entry point."""
    _configure_logging()
    return run_menu()


def main_once() -> int:
    """One-shot entry point: prompt for a single folder and exit."""
    _configure_logging()
    return run_once()


if __name__ == "__main__":
    raise SystemExit(main())
