"""Exception classes for settings file access.

Filesystem failures (permissions, missing directories, full disks) are not
wrapped; they reach the caller as the original ``OSError``.
"""

from __future__ import annotations

from pathlib import Path


class SettingsError(Exception):
    """Error while reading or writing the settings file."""

    def __init__(self, path: Path, message: str) -> None:
        """Initialize the exception.

        Args:
            path: Settings file the error refers to
            message: Human-readable error message
        """
        super().__init__(f"{path}: {message}")
        self.path: Path = path
        self.message: str = message


class SettingsParseError(SettingsError):
    """Raised when the settings file is not a valid settings document."""

    def __init__(
        self, path: Path, message: str, original_error: Exception | None = None
    ) -> None:
        """Initialize with parsing error details.

        Args:
            path: Settings file that failed to parse
            message: Description of the parsing error
            original_error: The original exception that was caught
        """
        super().__init__(path, message)
        self.original_error = original_error
