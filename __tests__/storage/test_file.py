from __future__ import annotations

import json
import os
import stat
from typing import TYPE_CHECKING

import pytest

from tripjournal.storage.file import FileKeyValueStore
from tripjournal.storage.protocols import KeyValueStoreProtocol

if TYPE_CHECKING:
    from pathlib import Path


def test_file_store_satisfies_protocol(tmp_path: Path) -> None:
    assert isinstance(FileKeyValueStore(tmp_path / "store.json"), KeyValueStoreProtocol)


def test_missing_file_reads_empty(tmp_path: Path) -> None:
    assert FileKeyValueStore(tmp_path / "store.json").get("accessToken") is None


def test_values_survive_new_instance(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "store.json"
    FileKeyValueStore(path).set("accessToken", "tok1")

    assert FileKeyValueStore(path).get("accessToken") == "tok1"
    assert json.loads(path.read_text(encoding="utf-8")) == {"accessToken": "tok1"}


def test_remove_rewrites_file(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    store = FileKeyValueStore(path)
    store.set("accessToken", "tok1")
    store.set("tokenRetrievalTime", "2024-10-07T12:00:00+00:00")

    store.remove("accessToken")

    assert json.loads(path.read_text(encoding="utf-8")) == {"tokenRetrievalTime": "2024-10-07T12:00:00+00:00"}


def test_corrupt_file_reads_empty(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    store = FileKeyValueStore(path)

    assert store.get("accessToken") is None

    store.set("accessToken", "tok1")
    assert store.get("accessToken") == "tok1"


def test_non_string_values_ignored(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"accessToken": 42}), encoding="utf-8")

    assert FileKeyValueStore(path).get("accessToken") is None


def test_non_object_file_reads_empty(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text(json.dumps(["accessToken"]), encoding="utf-8")

    assert FileKeyValueStore(path).get("accessToken") is None


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_file_is_owner_only(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    store = FileKeyValueStore(path)
    store.set("accessToken", "tok1")

    assert stat.S_IMODE(path.stat().st_mode) == 0o600

    path.chmod(0o644)
    store.remove("accessToken")

    assert stat.S_IMODE(path.stat().st_mode) == 0o600
