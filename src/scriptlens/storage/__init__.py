"""Persistence backends for scenes and character records."""

from __future__ import annotations

from pathlib import Path

from scriptlens.storage.base import CharacterStore, SceneStore, StorageResult
from scriptlens.storage.json_store import (
    STORAGE_VERSION,
    JsonCharacterStore,
    JsonSceneStore,
)
from scriptlens.storage.memory_store import (
    InMemoryCharacterStore,
    InMemorySceneStore,
)

SCENES_FILENAME = "scenes.json"
CHARACTERS_FILENAME = "characters.json"


def json_stores(directory: Path | str) -> tuple[JsonSceneStore, JsonCharacterStore]:
    """Create the scene and character JSON stores kept in one directory."""
    base = Path(directory)
    return (
        JsonSceneStore(base / SCENES_FILENAME),
        JsonCharacterStore(base / CHARACTERS_FILENAME),
    )


__all__ = [
    "CHARACTERS_FILENAME",
    "SCENES_FILENAME",
    "STORAGE_VERSION",
    "CharacterStore",
    "InMemoryCharacterStore",
    "InMemorySceneStore",
    "JsonCharacterStore",
    "JsonSceneStore",
    "SceneStore",
    "StorageResult",
    "json_stores",
]
