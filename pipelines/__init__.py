"""Pipeline package exports."""

from pipelines.package_pipeline import execute_package_pipeline, exit_code_for

__all__ = [
    "execute_package_pipeline",
    "exit_code_for",
]
