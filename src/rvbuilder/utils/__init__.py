"""Common utility functions for the rvbuilder package."""

from rvbuilder.utils.file import ensure_directory_exists, remove_file

__all__ = [
    "ensure_directory_exists",
    "remove_file",
]
