"""Tests for the JSON-file blob store, against a real temp directory."""

import json
import threading

import pytest

from posledger.domain.exceptions import StorageError
from posledger.infrastructure.persistence.json_collection_store import JsonCollectionStore


@pytest.fixture
def store(tmp_path):
    return JsonCollectionStore(tmp_path)


def test_missing_collection_returns_default(store):
    assert store.get("products", []) == []
    assert not store.exists("products")


def test_set_then_get(store, tmp_path):
    store.set("products", [{"id": "1"}])
    assert store.get("products", []) == [{"id": "1"}]
    assert json.loads((tmp_path / "products.json").read_text()) == [{"id": "1"}]


def test_set_leaves_no_temp_files(store, tmp_path):
    store.set("sales", [])
    store.set("sales", [{"id": "x"}])
    assert sorted(p.name for p in tmp_path.iterdir()) == ["sales.json"]


def test_unencodable_value_raises_and_keeps_old_file(store):
    store.set("products", [1])
    with pytest.raises(StorageError):
        store.set("products", [object()])
    assert store.get("products", []) == [1]


def test_corrupt_file_is_quarantined(store, tmp_path, caplog):
    (tmp_path / "sales.json").write_text("{not json")
    assert store.get("sales", []) == []
    assert not (tmp_path / "sales.json").exists()
    moved = list(tmp_path.glob("sales.corrupt-*.json"))
    assert len(moved) == 1
    assert moved[0].read_text() == "{not json"
    assert "corrupt" in caplog.text


def test_wrong_shape_is_quarantined(store, tmp_path):
    (tmp_path / "daily_counters.json").write_text("[1, 2]")
    assert store.get("daily_counters", {}) == {}
    assert list(tmp_path.glob("daily_counters.corrupt-*.json"))


def test_write_after_quarantine_starts_fresh(store, tmp_path):
    (tmp_path / "products.json").write_text("garbage")
    store.get("products", [])
    store.set("products", [{"id": "2"}])
    assert store.get("products", []) == [{"id": "2"}]
    assert len(list(tmp_path.glob("products.corrupt-*.json"))) == 1


def test_update_is_serialised(store):
    def bump(counters):
        counters["n"] = counters.get("n", 0) + 1
        return counters

    threads = [
        threading.Thread(target=lambda: [store.update("c", bump, {}) for _ in range(20)])
        for _ in range(5)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert store.get("c", {}) == {"n": 100}


def test_remove_and_clear(store):
    store.set("a", [])
    store.set("b", {})
    store.remove("a")
    store.remove("missing")
    assert not store.exists("a")
    store.clear(["b"])
    assert not store.exists("b")


@pytest.mark.parametrize("name", ["", "../x", ".hidden", "a/b"])
def test_rejects_bad_collection_names(store, name):
    with pytest.raises(ValueError):
        store.get(name, [])
