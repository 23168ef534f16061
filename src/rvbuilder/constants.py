from __future__ import annotations

from typing import Final

# Settings file, resolved against the working directory unless a path is given
SETTINGS_FILENAME: Final = "settings.json"

# Environment variable the CLI reads for an alternative settings path
SETTINGS_ENV_VAR: Final = "RVBUILDER_SETTINGS"

# Pretty-print width for the settings file
JSON_INDENT: Final = 2

# Upstream repositories used when nothing has been configured
DEFAULT_SOURCES: Final[dict[str, str]] = {
    "cli": "inotia00/revanced-cli",
    "patches": "inotia00/revanced-patches",
    "integrations": "inotia00/revanced-integrations",
    "microg": "ReVanced/GmsCore",
    "prereleases": "false",
    "cli4": "false",
}
