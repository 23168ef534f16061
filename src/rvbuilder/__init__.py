"""ReVanced builder settings - persisted sources and per-package patch selections."""

__version__ = "0.1.0"

from .settings import (
    PackageEntry,
    SettingsDocument,
    SettingsError,
    SettingsParseError,
    SettingsStore,
    SourceSettings,
)

__all__ = [
    "PackageEntry",
    "SettingsDocument",
    "SettingsError",
    "SettingsParseError",
    "SettingsStore",
    "SourceSettings",
]
