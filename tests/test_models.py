import pytest
from pydantic import ValidationError
from rvbuilder.constants import DEFAULT_SOURCES
from rvbuilder.settings.models import PackageEntry, SettingsDocument, SourceSettings


def test_settings_document_defaults() -> None:
    doc = SettingsDocument()
    assert doc.sources == DEFAULT_SOURCES
    assert doc.sources is not DEFAULT_SOURCES
    assert doc.patches == []


def test_settings_document_fills_missing_patches() -> None:
    doc = SettingsDocument.model_validate({"sources": {"cli": "me/cli"}})
    assert doc.patches == []
    assert doc.sources == {"cli": "me/cli"}


def test_find_package_returns_none_when_absent() -> None:
    doc = SettingsDocument(patches=[PackageEntry(name="com.a", patches=["x"])])
    assert doc.find_package("com.b") is None
    entry = doc.find_package("com.a")
    assert entry is not None
    assert entry.patches == ["x"]


def test_set_package_patches_replaces_then_appends() -> None:
    doc = SettingsDocument()
    doc.set_package_patches("com.a", ["x"])
    doc.set_package_patches("com.a", ["y"])
    doc.set_package_patches("com.b", ["z"])
    assert [(e.name, e.patches) for e in doc.patches] == [("com.a", ["y"]), ("com.b", ["z"])]


def test_to_json_orders_sources_first() -> None:
    doc = SettingsDocument.model_validate({"extra": 1, "patches": [], "sources": {}})
    assert list(doc.to_json())[:2] == ["sources", "patches"]
    assert doc.to_json()["extra"] == 1


def test_source_settings_defaults_match_constants() -> None:
    assert SourceSettings().as_sources() == DEFAULT_SOURCES


def test_source_settings_flags() -> None:
    cfg = SourceSettings(prereleases="true", cli4="false")
    assert cfg.use_prereleases is True
    assert cfg.use_cli4 is False
    assert SourceSettings.flag(True) == "true"
    assert SourceSettings.flag(False) == "false"


@pytest.mark.parametrize("field, value", [("prereleases", "yes"), ("cli4", "1"), ("cli", "")])
def test_source_settings_rejects_bad_values(field: str, value: str) -> None:
    with pytest.raises(ValidationError):
        SourceSettings.model_validate({field: value})
