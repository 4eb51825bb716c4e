"""Aggregate statistics over segmented scenes and character records.

These are pure reductions over pipeline output; nothing here feeds back into
classification or segmentation.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from scriptlens.models import CharacterAppearance, Scene, SceneCategory, TimeOfDay


@dataclass
class SceneStatistics:
    """Scene-level totals and breakdowns."""

    total_scenes: int = 0
    total_word_count: int = 0
    total_dialogue_lines: int = 0
    total_action_lines: int = 0
    average_scene_length: float = 0.0
    longest_scene: Scene | None = None
    shortest_scene: Scene | None = None
    scenes_by_category: dict[SceneCategory, int] = field(default_factory=dict)
    scenes_by_time_of_day: dict[TimeOfDay, int] = field(default_factory=dict)
    scenes_by_location: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert statistics to a JSON-compatible dictionary."""
        return {
            "total_scenes": self.total_scenes,
            "total_word_count": self.total_word_count,
            "total_dialogue_lines": self.total_dialogue_lines,
            "total_action_lines": self.total_action_lines,
            "average_scene_length": self.average_scene_length,
            "longest_scene": self.longest_scene.heading if self.longest_scene else None,
            "shortest_scene": (
                self.shortest_scene.heading if self.shortest_scene else None
            ),
            "scenes_by_category": {
                category.value: count
                for category, count in self.scenes_by_category.items()
            },
            "scenes_by_time_of_day": {
                time.value: count for time, count in self.scenes_by_time_of_day.items()
            },
            "scenes_by_location": dict(self.scenes_by_location),
        }


@dataclass
class CharacterStatistics:
    """Character-level totals."""

    total_characters: int = 0
    characters_with_dialogue: int = 0
    total_dialogue_count: int = 0
    average_dialogue_count: float = 0.0
    most_active_character: CharacterAppearance | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert statistics to a JSON-compatible dictionary."""
        return {
            "total_characters": self.total_characters,
            "characters_with_dialogue": self.characters_with_dialogue,
            "total_dialogue_count": self.total_dialogue_count,
            "average_dialogue_count": self.average_dialogue_count,
            "most_active_character": (
                self.most_active_character.name
                if self.most_active_character
                else None
            ),
        }


def compute_scene_statistics(scenes: Sequence[Scene]) -> SceneStatistics:
    """Reduce a scene list to totals and per-enumeration counts.

    Every category and time-of-day member appears in the breakdowns, with a
    zero count when unused.
    """
    by_category = dict.fromkeys(SceneCategory, 0)
    by_time = dict.fromkeys(TimeOfDay, 0)
    for scene in scenes:
        by_category[scene.category] += 1
        by_time[scene.time_of_day] += 1

    if not scenes:
        return SceneStatistics(
            scenes_by_category=by_category, scenes_by_time_of_day=by_time
        )

    total_words = sum(scene.word_count for scene in scenes)
    return SceneStatistics(
        total_scenes=len(scenes),
        total_word_count=total_words,
        total_dialogue_lines=sum(scene.dialogue_line_count for scene in scenes),
        total_action_lines=sum(scene.action_line_count for scene in scenes),
        average_scene_length=total_words / len(scenes),
        longest_scene=max(scenes, key=lambda scene: scene.word_count),
        shortest_scene=min(scenes, key=lambda scene: scene.word_count),
        scenes_by_category=by_category,
        scenes_by_time_of_day=by_time,
        scenes_by_location=dict(Counter(scene.location for scene in scenes)),
    )


def compute_character_statistics(
    characters: Mapping[str, CharacterAppearance],
) -> CharacterStatistics:
    """Reduce character records to totals and the most active speaker.

    Ties on dialogue count go to the character who appears first.
    """
    records = list(characters.values())
    if not records:
        return CharacterStatistics()

    total_dialogue = sum(record.dialogue_count for record in records)
    most_active = min(
        records,
        key=lambda record: (-record.dialogue_count, record.first_appearance_line),
    )
    return CharacterStatistics(
        total_characters=len(records),
        characters_with_dialogue=sum(1 for record in records if record.dialogue_count),
        total_dialogue_count=total_dialogue,
        average_dialogue_count=total_dialogue / len(records),
        most_active_character=most_active,
    )
