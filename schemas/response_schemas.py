"""Response schemas for the H5P packager."""

from typing import List, Optional

from pydantic import BaseModel, Field, computed_field


class PackageResult(BaseModel):
    """Outcome of a successful packaging run."""

    source_dir: str
    output_path: str
    entries: List[str] = Field(default_factory=list)
    replaced_existing: bool = False

    @computed_field
    @property
    def entry_count(self) -> int:
        return len(self.entries)


class ErrorResponse(BaseModel):
    """Structured failure payload."""

    error_category: str
    error_message: str
    source_dir: Optional[str] = None
    exit_code: int = 1
