"""Settings persistence.

This package provides:
- SettingsStore: read/write access to settings.json
- SettingsDocument, PackageEntry: the persisted document
- SourceSettings: typed view of the configured sources
"""

from .errors import SettingsError, SettingsParseError
from .models import PackageEntry, SettingsDocument, SourceSettings, default_sources
from .store import SettingsStore

__all__ = [
    "PackageEntry",
    "SettingsDocument",
    "SettingsError",
    "SettingsParseError",
    "SettingsStore",
    "SourceSettings",
    "default_sources",
]
