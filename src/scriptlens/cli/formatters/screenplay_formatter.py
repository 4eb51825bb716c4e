"""Row builders that flatten analysis results for tabular output."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from scriptlens.models import CharacterAppearance, Scene
from scriptlens.parser import Element


def element_rows(elements: Iterable[Element]) -> list[dict[str, Any]]:
    """One row per classified element."""
    return [
        {
            "line": element.line_number,
            "kind": element.kind.value,
            "text": element.text,
        }
        for element in elements
    ]


def scene_rows(scenes: Iterable[Scene]) -> list[dict[str, Any]]:
    """One row per scene with its headline metrics."""
    return [
        {
            "scene": scene.scene_number,
            "line": scene.line_number,
            "location": scene.location,
            "time": scene.time_of_day.value,
            "category": scene.category.value,
            "words": scene.word_count,
            "dialogue": scene.dialogue_line_count,
            "action": scene.action_line_count,
            "characters": ", ".join(sorted(scene.characters)),
        }
        for scene in scenes
    ]


def character_rows(
    characters: Mapping[str, CharacterAppearance],
) -> list[dict[str, Any]]:
    """One row per character, in order of first appearance."""
    return [
        {
            "name": record.name,
            "first_line": record.first_appearance_line,
            "last_line": record.last_appearance_line,
            "dialogue": record.dialogue_count,
            "scenes": record.scene_count,
        }
        for record in characters.values()
    ]
