import json
import shutil
from pathlib import Path

import pytest
from rvbuilder.settings import SettingsStore

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.json"


@pytest.fixture
def store(settings_path: Path) -> SettingsStore:
    return SettingsStore(settings_path)


@pytest.fixture
def sample_settings(settings_path: Path) -> Path:
    """Copy of tests/data/settings_sample.json at the store's path."""
    shutil.copy(DATA_DIR / "settings_sample.json", settings_path)
    return settings_path


@pytest.fixture
def sample_data() -> dict:
    return json.loads((DATA_DIR / "settings_sample.json").read_text(encoding="utf-8"))
