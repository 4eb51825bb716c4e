"""In-memory storage backends, mainly for tests and one-shot runs."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping

from scriptlens.models import CharacterAppearance, Scene
from scriptlens.storage.base import StorageResult

MEMORY_LOCATION = ":memory:"


class InMemorySceneStore:
    """Keep saved scenes, copied so callers cannot mutate them."""

    def __init__(self) -> None:
        self._scenes: list[Scene] = []

    def save(self, scenes: Iterable[Scene]) -> StorageResult:
        self._scenes = copy.deepcopy(list(scenes))
        return StorageResult(len(self._scenes), MEMORY_LOCATION)

    def load(self) -> list[Scene]:
        return copy.deepcopy(self._scenes)


class InMemoryCharacterStore:
    """Keep saved character records, copied so callers cannot mutate them."""

    def __init__(self) -> None:
        self._characters: dict[str, CharacterAppearance] = {}

    def save(self, characters: Mapping[str, CharacterAppearance]) -> StorageResult:
        self._characters = copy.deepcopy(dict(characters))
        return StorageResult(len(self._characters), MEMORY_LOCATION)

    def load(self) -> dict[str, CharacterAppearance]:
        return copy.deepcopy(self._characters)
