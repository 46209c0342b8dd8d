"""
Persistence — key-value stores and GameState snapshot (de)serialization.
"""

from src.persistence.snapshot import (
    STORAGE_KEY,
    deserialize_state,
    load_game,
    merge_snapshot,
    save_game,
    serialize_state,
)
from src.persistence.store import InMemoryStore, JsonFileStore, KeyValueStore

__all__ = [
    "STORAGE_KEY",
    "serialize_state",
    "deserialize_state",
    "merge_snapshot",
    "save_game",
    "load_game",
    "KeyValueStore",
    "InMemoryStore",
    "JsonFileStore",
]
