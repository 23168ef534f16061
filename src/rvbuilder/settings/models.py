"""Persisted settings document and its parts."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from rvbuilder.constants import DEFAULT_SOURCES


def default_sources() -> dict[str, str]:
    """Return a fresh copy of the built-in sources map."""
    return dict(DEFAULT_SOURCES)


class PackageEntry(BaseModel):
    """Patch selection stored for one target application package."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Application package name, e.g. com.google.android.youtube")
    patches: Any = Field(default_factory=list, description="Selected patches (opaque JSON)")


class SettingsDocument(BaseModel):
    """Top-level record of settings.json.

    ``sources`` is kept as a plain mapping so whatever the caller wrote is
    read back unchanged. Keys this model does not know about are carried
    through on write.
    """

    model_config = ConfigDict(extra="allow")

    sources: dict[str, Any] = Field(default_factory=default_sources)
    patches: list[PackageEntry] = Field(default_factory=list)

    def find_package(self, name: str) -> PackageEntry | None:
        """Return the first entry for ``name``, or None."""
        for entry in self.patches:
            if entry.name == name:
                return entry
        return None

    def set_package_patches(self, name: str, patches: Any) -> None:
        """Replace the patches of ``name``, appending a new entry if missing."""
        entry = self.find_package(name)
        if entry is None:
            self.patches.append(PackageEntry(name=name, patches=patches))
        else:
            entry.patches = patches

    def to_json(self) -> dict[str, Any]:
        """Return the JSON-ready mapping, ``sources`` first."""
        return self.model_dump(mode="json")


class SourceSettings(BaseModel):
    """Typed view of the ``sources`` map.

    Flags are stored as the strings "true" and "false", which is what the
    builder's web UI writes. Repository values are "owner/repo" slugs.
    """

    cli: str = Field(DEFAULT_SOURCES["cli"], min_length=1, description="CLI repository")
    patches: str = Field(DEFAULT_SOURCES["patches"], min_length=1, description="Patches repository")
    integrations: str = Field(
        DEFAULT_SOURCES["integrations"], min_length=1, description="Integrations repository"
    )
    microg: str = Field(DEFAULT_SOURCES["microg"], min_length=1, description="microG repository")
    prereleases: Literal["true", "false"] = Field(
        "false", description="Whether to pull pre-release builds"
    )
    cli4: Literal["true", "false"] = Field(
        "false", description="Whether the CLI is a v4 build"
    )

    @property
    def use_prereleases(self) -> bool:
        """Whether pre-release builds are enabled."""
        return self.prereleases == "true"

    @property
    def use_cli4(self) -> bool:
        """Whether the configured CLI uses the v4 command line."""
        return self.cli4 == "true"

    @staticmethod
    def flag(value: bool) -> str:
        """Render a boolean the way the settings file stores it."""
        return "true" if value else "false"

    def as_sources(self) -> dict[str, str]:
        """Return the plain mapping written to the settings file."""
        return self.model_dump()
