"""Data models for screenplay line classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple


class ElementKind(str, Enum):
    """Closed set of element kinds produced by the line classifier."""

    SCENE_HEADING = "scene-heading"
    FORCED_SCENE_HEADING = "forced-scene-heading"
    ACTION = "action"
    FORCED_ACTION = "forced-action"
    CHARACTER_CUE = "character-cue"
    DUAL_DIALOGUE_CUE = "dual-dialogue-cue"
    DIALOGUE = "dialogue"
    PARENTHETICAL = "parenthetical"
    TRANSITION = "transition"
    SECTION = "section"
    SYNOPSIS = "synopsis"
    NOTE = "note"
    CENTERED = "centered"
    PAGE_BREAK = "page-break"
    LYRIC = "lyric"


class Emphasis(str, Enum):
    """Line-level emphasis tag for dialogue."""

    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold-italic"


CUE_KINDS = frozenset({ElementKind.CHARACTER_CUE, ElementKind.DUAL_DIALOGUE_CUE})
SCENE_HEADING_KINDS = frozenset(
    {ElementKind.SCENE_HEADING, ElementKind.FORCED_SCENE_HEADING}
)


@dataclass(frozen=True)
class Element:
    """One classified physical line of a screenplay."""

    kind: ElementKind
    text: str
    raw: str
    line_number: int
    emphasis: Emphasis | None = None
    section_level: int | None = None

    @property
    def is_cue(self) -> bool:
        """Whether this element names a speaking character."""
        return self.kind in CUE_KINDS

    @property
    def is_dual_dialogue(self) -> bool:
        return self.kind is ElementKind.DUAL_DIALOGUE_CUE

    @property
    def is_scene_heading(self) -> bool:
        """Whether this element opens a scene (regular or forced heading)."""
        return self.kind in SCENE_HEADING_KINDS

    def to_dict(self) -> dict[str, Any]:
        """Convert element to a JSON-compatible dictionary."""
        data: dict[str, Any] = {
            "kind": self.kind.value,
            "text": self.text,
            "raw": self.raw,
            "lineNumber": self.line_number,
        }
        if self.emphasis is not None:
            data["emphasis"] = self.emphasis.value
        if self.section_level is not None:
            data["sectionLevel"] = self.section_level
        return data


class ClassificationResult(NamedTuple):
    """Title page table and ordered elements from one classification pass."""

    title_page: dict[str, str]
    elements: tuple[Element, ...]
