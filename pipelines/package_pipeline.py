"""Top-level packaging pipeline: request in, result or error payload out."""

from __future__ import annotations

from typing import Optional, Union

from schemas.request_schemas import PackageRequest
from schemas.response_schemas import ErrorResponse, PackageResult
from tools.console import Console
from tools.error_handler import EXIT_OK, format_error_response
from tools.filesystem import LocalFileSystem
from tools.packager import create_package

PackageOutcome = Union[PackageResult, ErrorResponse]


def execute_package_pipeline(
    request: PackageRequest,
    fs: Optional[LocalFileSystem] = None,
    console: Optional[Console] = None,
) -> PackageOutcome:
    try:
        return create_package(request.source_dir, fs=fs, console=console)
    except Exception as exc:
        return format_error_response(exc, source_dir=request.source_dir)


def exit_code_for(outcome: PackageOutcome) -> int:
    if isinstance(outcome, ErrorResponse):
        return outcome.exit_code
    return EXIT_OK
