"""Persistence backends for locally cached values."""

from tripjournal.storage.file import FileKeyValueStore
from tripjournal.storage.memory import MemoryKeyValueStore
from tripjournal.storage.protocols import KeyValueStoreProtocol

__all__ = [
    "FileKeyValueStore",
    "KeyValueStoreProtocol",
    "MemoryKeyValueStore",
]
