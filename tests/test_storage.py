"""Tests for the TOML-backed per-origin storage adapter."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import tomlkit

from subscrypts_devdocs.state import (
    SidebarState,
    SidebarStateController,
    StorageError,
    TomlFileStorage,
)

ORIGIN = "http://localhost:5173"


@pytest.fixture
def storage_path(tmp_path: Path) -> Path:
    return tmp_path / "state" / "storage.toml"


def test_missing_file_reads_as_empty(storage_path: Path) -> None:
    storage = TomlFileStorage(ORIGIN, path=storage_path)
    assert storage.get("anything") is None
    assert not storage_path.exists()


def test_set_writes_origin_table(storage_path: Path) -> None:
    storage = TomlFileStorage(ORIGIN, path=storage_path)
    storage.set("subscrypts-dev-sidebar-state", "true")

    document = tomlkit.parse(storage_path.read_text(encoding="utf-8"))
    assert document["origins"][ORIGIN]["subscrypts-dev-sidebar-state"] == "true"
    assert storage.get("subscrypts-dev-sidebar-state") == "true"


def test_origins_are_isolated(storage_path: Path) -> None:
    local = TomlFileStorage(ORIGIN, path=storage_path)
    staging = TomlFileStorage("https://demo.subscrypts.example", path=storage_path)
    local.set("key", "local")
    staging.set("key", "staging")
    assert local.get("key") == "local"
    assert staging.get("key") == "staging"


def test_remove_deletes_key_and_tolerates_missing(storage_path: Path) -> None:
    storage = TomlFileStorage(ORIGIN, path=storage_path)
    storage.set("key", "value")
    storage.remove("key")
    storage.remove("key")
    assert storage.get("key") is None


def test_preserves_unrelated_content(storage_path: Path) -> None:
    storage_path.parent.mkdir(parents=True)
    storage_path.write_text('# keep me\ntitle = "notes"\n', encoding="utf-8")
    TomlFileStorage(ORIGIN, path=storage_path).set("key", "value")
    text = storage_path.read_text(encoding="utf-8")
    assert "# keep me" in text
    assert 'title = "notes"' in text


def test_invalid_toml_raises_storage_error(storage_path: Path) -> None:
    storage_path.parent.mkdir(parents=True)
    storage_path.write_text("this is = = not toml", encoding="utf-8")
    with pytest.raises(StorageError, match="Unable to parse"):
        TomlFileStorage(ORIGIN, path=storage_path).get("key")


def test_controller_round_trip_through_file(storage_path: Path) -> None:
    first = SidebarStateController(TomlFileStorage(ORIGIN, path=storage_path))
    first.open()
    first.expand_all(["plan-card", "checkout-wizard"])

    second = SidebarStateController(TomlFileStorage(ORIGIN, path=storage_path))
    assert second.state == SidebarState(
        is_open=True, expanded_sections=frozenset({"plan-card", "checkout-wizard"})
    )


def test_controller_falls_back_on_corrupt_file(storage_path: Path) -> None:
    storage_path.parent.mkdir(parents=True)
    storage_path.write_text("[[[", encoding="utf-8")
    controller = SidebarStateController(TomlFileStorage(ORIGIN, path=storage_path))
    assert controller.state == SidebarState()


def test_non_utf8_file_raises_storage_error(storage_path: Path) -> None:
    storage_path.parent.mkdir(parents=True)
    storage_path.write_bytes(b"\xff\xfe garbage")
    with pytest.raises(StorageError, match="not valid UTF-8"):
        TomlFileStorage(ORIGIN, path=storage_path).get("key")


def test_controller_survives_non_utf8_file(
    storage_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    storage_path.parent.mkdir(parents=True)
    storage_path.write_bytes(b"\xff\xfe garbage")
    with caplog.at_level(logging.WARNING):
        controller = SidebarStateController(TomlFileStorage(ORIGIN, path=storage_path))
        controller.open()
    assert controller.is_open is True, (
        "Expected the in-memory state to change even when saving fails"
    )
    assert "Failed to load dev sidebar state" in caplog.text
    assert "Failed to save dev sidebar state" in caplog.text


def test_default_path_follows_environment_at_call_time(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "elsewhere" / "state.toml"
    monkeypatch.setenv("SUBSCRYPTS_DEVDOCS_STORAGE", str(target))
    storage = TomlFileStorage(ORIGIN)
    assert storage.path == target
    storage.set("key", "value")
    assert target.exists()
