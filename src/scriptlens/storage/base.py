"""Storage interfaces for persisting analysis results."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import NamedTuple, Protocol, runtime_checkable

from scriptlens.models import CharacterAppearance, Scene


class StorageResult(NamedTuple):
    """Outcome of a save: how many records were written and where."""

    count: int
    location: str


@runtime_checkable
class SceneStore(Protocol):
    """Protocol for scene persistence backends."""

    def save(self, scenes: Iterable[Scene]) -> StorageResult:
        """Replace the stored scenes with the given ones."""
        ...

    def load(self) -> list[Scene]:
        """Return the stored scenes in source order."""
        ...


@runtime_checkable
class CharacterStore(Protocol):
    """Protocol for character persistence backends."""

    def save(self, characters: Mapping[str, CharacterAppearance]) -> StorageResult:
        """Replace the stored character records with the given ones."""
        ...

    def load(self) -> dict[str, CharacterAppearance]:
        """Return the stored character records keyed by name."""
        ...
