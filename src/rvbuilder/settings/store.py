"""JSON-backed store for builder sources and per-package patch selections."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from rvbuilder.constants import JSON_INDENT, SETTINGS_FILENAME
from rvbuilder.settings.errors import SettingsParseError
from rvbuilder.settings.models import SettingsDocument, default_sources
from rvbuilder.utils.file import ensure_directory_exists, remove_file

logger: Final = logging.getLogger(__name__)


class SettingsStore:
    """Read and write access to a single settings file.

    Every operation works on the whole document: it is parsed in full,
    changed in memory, and written back in full. A missing file is created
    with the default document on first access. There is no locking; when
    two processes write the same file the last one wins.

    Examples:
        store = SettingsStore(tmp_path / "settings.json")
        store.write_patches("com.google.android.youtube", ["Hide ads"])
        store.get_patch_list("com.google.android.youtube")  # ["Hide ads"]
    """

    def __init__(self, path: Path | str = SETTINGS_FILENAME) -> None:
        """Initialize the store.

        Args:
            path: Settings file location; relative paths resolve against the
                working directory at call time
        """
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"

    # ---- document I/O ----
    def ensure_file(self) -> bool:
        """Create the settings file with defaults if it does not exist.

        Returns:
            True if the file was created by this call
        """
        if self.path.exists():
            return False
        self.save(SettingsDocument())
        logger.debug("Created default settings file %s", self.path)
        return True

    def load(self) -> SettingsDocument:
        """Parse the settings file.

        Returns:
            The stored document

        Raises:
            FileNotFoundError: If the file does not exist
            SettingsParseError: If the file is not a valid settings document
        """
        raw = self.path.read_text(encoding="utf-8")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SettingsParseError(self.path, f"invalid JSON: {exc}", exc) from exc

        try:
            return SettingsDocument.model_validate(data)
        except ValidationError as err:
            raise SettingsParseError(self.path, f"invalid settings document:\n{err}", err) from err

    def save(self, document: SettingsDocument) -> None:
        """Write the whole document, pretty-printed."""
        ensure_directory_exists(self.path.parent)
        payload = json.dumps(document.to_json(), indent=JSON_INDENT, ensure_ascii=False)
        self.path.write_text(payload, encoding="utf-8")
        logger.debug("Wrote settings to %s", self.path)

    # ---- patches ----
    def get_patch_list(self, package_name: str) -> Any:
        """Return the patches stored for a package.

        Args:
            package_name: Application package name

        Returns:
            The stored patches value, or an empty list if the package has no
            entry or the file was just created
        """
        if self.ensure_file():
            return []

        entry = self.load().find_package(package_name)
        if entry is None:
            return []
        return entry.patches

    def write_patches(self, package_name: str, patches: Any) -> None:
        """Store the patches for a package, replacing any previous selection.

        Args:
            package_name: Application package name
            patches: JSON-serializable patch selection
        """
        self.ensure_file()
        document = self.load()
        document.set_package_patches(package_name, patches)
        self.save(document)
        logger.debug("Saved patches for %s", package_name)

    def package_names(self) -> list[str]:
        """Return the names of all packages with stored patches, in file order."""
        if self.ensure_file():
            return []
        return [entry.name for entry in self.load().patches]

    # ---- sources ----
    def get_sources(self) -> dict[str, Any]:
        """Return the configured sources.

        Returns:
            The stored sources map, or the built-in defaults if the file was
            just created
        """
        if self.ensure_file():
            return default_sources()
        return self.load().sources

    def write_sources(self, sources: Mapping[str, str]) -> None:
        """Replace the sources map wholesale. Stored patches are kept.

        Args:
            sources: New sources map, written as given
        """
        self.ensure_file()
        document = self.load()
        document.sources = dict(sources)
        self.save(document)
        logger.debug("Saved sources to %s", self.path)

    # ---- reset ----
    def reset_patches_sources(self) -> None:
        """Delete the settings file and recreate it with defaults."""
        remove_file(self.path)
        self.ensure_file()
        logger.info("Reset settings at %s to defaults", self.path)
