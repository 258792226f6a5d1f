"""Tests for ConfigService and the collection factory."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from taskpad.adapters import InMemoryStorage, JsonFileStorage
from taskpad.models import FilterKind, SortOrder
from taskpad.services.config_service import (
    ConfigService,
    get_config_service,
    get_task_collection,
)


def test_first_load_writes_defaults(isolated_dirs):
    svc = ConfigService()
    config = svc.load_config()

    assert svc.config_path.exists()
    assert config.storage.backend == "file"
    assert config.storage.key == "tasks"
    assert config.storage.path == str(isolated_dirs / "data" / "storage.json")
    assert config.view.default_filter is FilterKind.ALL
    assert config.view.default_sort is SortOrder.DATE_ADDED


def test_get_by_dotted_key():
    svc = ConfigService()
    assert svc.get("storage.key") == "tasks"
    assert svc.get("output.format") == "pretty"
    assert svc.get("storage.nope") is None
    assert svc.get("nope") is None


def test_set_persists_and_coerces():
    svc = ConfigService()
    svc.set("view.default_sort", "priority")
    svc.set("output.format", "json")

    assert svc.get("view.default_sort") is SortOrder.PRIORITY

    reloaded = ConfigService()
    assert reloaded.get("view.default_sort") is SortOrder.PRIORITY
    assert reloaded.get("output.format") == "json"


def test_set_invalid_value_keeps_config():
    svc = ConfigService()
    with pytest.raises(ValidationError):
        svc.set("storage.backend", "cloud")
    assert svc.get("storage.backend") == "file"


@pytest.mark.parametrize("key", ["storage.nope", "nope", "storage.key.deeper"])
def test_set_unknown_key_raises(key):
    svc = ConfigService()
    with pytest.raises(ValueError):
        svc.set(key, "x")


def test_reset_restores_defaults():
    svc = ConfigService()
    svc.set("view.default_filter", "active")
    svc.reset_config()
    assert svc.get("view.default_filter") is FilterKind.ALL
    assert json.loads(svc.config_path.read_text())["view"]["default_filter"] == "all"


def test_corrupted_config_raises():
    svc = ConfigService()
    svc.config_path.write_text("{ broken")
    with pytest.raises(RuntimeError):
        svc.load_config()


def test_get_config_service_is_cached():
    assert get_config_service() is get_config_service()


def test_get_task_collection_uses_file_backend(isolated_dirs):
    collection = get_task_collection()
    assert isinstance(collection.store.storage, JsonFileStorage)

    task = collection.add_task("Buy milk")

    reopened = get_task_collection()
    assert reopened.get_task(task.id).text == "Buy milk"
    assert (isolated_dirs / "data" / "storage.json").exists()


def test_get_task_collection_memory_backend():
    get_config_service().set("storage.backend", "memory")
    collection = get_task_collection()
    assert isinstance(collection.store.storage, InMemoryStorage)
    assert len(collection) == 0
