"""Centralized configuration for the H5P packager."""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Package Configuration
    package_extension: str = ".h5p"

    # Compression Configuration (None keeps the zlib default level)
    compression_level: Optional[int] = None

    # Logging Configuration
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    model_config = SettingsConfigDict(
        env_prefix="H5P_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("package_extension")
    @classmethod
    def _normalize_extension(cls, value: str) -> str:
        extension = value.strip().lower()
        if not extension.lstrip("."):
            raise ValueError("package_extension cannot be blank")
        if not extension.startswith("."):
            extension = f".{extension}"
        return extension

    @field_validator("compression_level")
    @classmethod
    def _check_level(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and not 0 <= value <= 9:
            raise ValueError("compression_level must be between 0 and 9")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()


settings = Settings()
