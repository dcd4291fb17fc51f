"""Request schemas for the H5P packager."""

from pydantic import BaseModel, Field, field_validator


class PackageRequest(BaseModel):
    """Packaging request for a single content folder."""

    source_dir: str = Field(
        description="Folder holding the H5P content, e.g. './lesson1'.",
    )

    @field_validator("source_dir")
    @classmethod
    def validate_source_dir(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("source_dir cannot be empty")
        return value
