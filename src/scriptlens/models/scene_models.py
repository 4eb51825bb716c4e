"""Data models for scenes and character appearances."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SceneCategory(str, Enum):
    """Kind of setting a scene heading describes."""

    INTERIOR = "interior"
    EXTERIOR = "exterior"
    INTERIOR_EXTERIOR = "interior-exterior"
    MONTAGE = "montage"
    FLASHBACK = "flashback"
    DREAM = "dream"
    FANTASY = "fantasy"
    OTHER = "other"


class TimeOfDay(str, Enum):
    """Closed vocabulary of scene times, in matching order."""

    DAY = "DAY"
    NIGHT = "NIGHT"
    MORNING = "MORNING"
    AFTERNOON = "AFTERNOON"
    EVENING = "EVENING"
    DAWN = "DAWN"
    DUSK = "DUSK"
    CONTINUOUS = "CONTINUOUS"
    LATER = "LATER"
    SAME_TIME = "SAME TIME"


@dataclass
class Scene:
    """Represents a scene segmented from the element stream."""

    heading: str
    line_number: int
    scene_number: int
    location: str
    time_of_day: TimeOfDay = TimeOfDay.DAY
    category: SceneCategory = SceneCategory.OTHER
    word_count: int = 0
    dialogue_line_count: int = 0
    action_line_count: int = 0
    characters: frozenset[str] = field(default_factory=frozenset)
    content: str = ""
    end_line_number: int = 0

    def contains_line(self, line_number: int) -> bool:
        """Check whether a source line falls inside this scene's span."""
        return self.line_number <= line_number <= self.end_line_number

    def to_dict(self) -> dict[str, Any]:
        """Convert scene to a JSON-compatible dictionary."""
        return {
            "heading": self.heading,
            "lineNumber": self.line_number,
            "sceneNumber": self.scene_number,
            "location": self.location,
            "timeOfDay": self.time_of_day.value,
            "category": self.category.value,
            "wordCount": self.word_count,
            "dialogueLineCount": self.dialogue_line_count,
            "actionLineCount": self.action_line_count,
            "characters": sorted(self.characters),
            "content": self.content,
            "endLineNumber": self.end_line_number,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Scene:
        """Rebuild a scene from :meth:`to_dict` output.

        Raises:
            KeyError: If a required field is missing
            ValueError: If an enumeration value is unknown
        """
        line_number = int(data["lineNumber"])
        return cls(
            heading=data["heading"],
            line_number=line_number,
            scene_number=int(data["sceneNumber"]),
            location=data.get("location", data["heading"]),
            time_of_day=TimeOfDay(data.get("timeOfDay", TimeOfDay.DAY.value)),
            category=SceneCategory(data.get("category", SceneCategory.OTHER.value)),
            word_count=int(data.get("wordCount", 0)),
            dialogue_line_count=int(data.get("dialogueLineCount", 0)),
            action_line_count=int(data.get("actionLineCount", 0)),
            characters=frozenset(data.get("characters", ())),
            content=data.get("content", ""),
            end_line_number=int(data.get("endLineNumber", line_number)),
        )


@dataclass
class CharacterAppearance:
    """Appearance statistics for one character cue name."""

    name: str
    first_appearance_line: int
    last_appearance_line: int
    dialogue_count: int = 0
    scenes: set[str] = field(default_factory=set)

    @property
    def scene_count(self) -> int:
        """Number of distinct scene headings the character was cued in."""
        return len(self.scenes)

    def to_dict(self) -> dict[str, Any]:
        """Convert the appearance record to a JSON-compatible dictionary."""
        return {
            "name": self.name,
            "firstAppearanceLine": self.first_appearance_line,
            "lastAppearanceLine": self.last_appearance_line,
            "dialogueCount": self.dialogue_count,
            "sceneCount": self.scene_count,
            "scenes": sorted(self.scenes),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CharacterAppearance:
        """Rebuild an appearance record from :meth:`to_dict` output."""
        return cls(
            name=data["name"],
            first_appearance_line=int(data["firstAppearanceLine"]),
            last_appearance_line=int(data["lastAppearanceLine"]),
            dialogue_count=int(data.get("dialogueCount", 0)),
            scenes=set(data.get("scenes", ())),
        )
