"""Structured error types and response formatting."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from schemas.response_schemas import ErrorResponse

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNKNOWN = 1
EXIT_INVALID_SOURCE = 2
EXIT_IO_FAULT = 3
EXIT_INTERRUPTED = 130


@dataclass(eq=False)
class PackagerError(Exception):
    """Base error for all structured packaging failures."""

    error_category: str
    message: str
    source_dir: Optional[str] = None
    exit_code: int = EXIT_UNKNOWN

    def __str__(self) -> str:
        return self.message


class InvalidSourceError(PackagerError):
    def __init__(self, message: str, source_dir: Optional[str] = None):
        super().__init__(
            error_category="INVALID_SOURCE",
            message=message,
            source_dir=source_dir,
            exit_code=EXIT_INVALID_SOURCE,
        )


class PackageIOError(PackagerError):
    def __init__(self, message: str, source_dir: Optional[str] = None):
        super().__init__(
            error_category="IO_FAULT",
            message=message,
            source_dir=source_dir,
            exit_code=EXIT_IO_FAULT,
        )


def format_error_response(exc: Exception, source_dir: Optional[str] = None) -> ErrorResponse:
    """Convert exception into an error payload for the shell."""
    if isinstance(exc, PackagerError):
        category = exc.error_category
        exit_code = exc.exit_code
        source = exc.source_dir or source_dir

        # Expected packaging errors should not emit full stack traces.
        logger.warning(
            "Packaging failure category=%s source_dir=%s message=%s",
            category,
            source,
            exc.message,
        )
    else:
        category = "UNKNOWN_ERROR"
        exit_code = EXIT_UNKNOWN
        source = source_dir

        logger.exception(
            "Packaging failure category=%s source_dir=%s",
            category,
            source,
            exc_info=exc,
        )

    return ErrorResponse(
        error_category=category,
        error_message=str(exc) or "An internal error occurred.",
        source_dir=source,
        exit_code=exit_code,
    )
