"""End-to-end screenplay analysis: classify, segment and extract characters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from scriptlens.analysis.character_extractor import extract_characters
from scriptlens.analysis.scene_segmenter import segment
from scriptlens.config import get_logger
from scriptlens.exceptions import ValidationError
from scriptlens.models import CharacterAppearance, Scene
from scriptlens.parser.fountain_models import Element
from scriptlens.parser.line_classifier import classify

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScreenplayAnalysis:
    """Everything derived from one screenplay text.

    Attributes:
        title_page: Title page key/value table, empty when there is none
        elements: Classified elements in source order
        scenes: Scenes in source order
        characters: Character records in order of first appearance
    """

    title_page: dict[str, str]
    elements: tuple[Element, ...]
    scenes: tuple[Scene, ...]
    characters: dict[str, CharacterAppearance]

    def to_dict(self) -> dict[str, Any]:
        """Convert the analysis to a JSON-compatible dictionary."""
        return {
            "titlePage": dict(self.title_page),
            "elements": [element.to_dict() for element in self.elements],
            "scenes": [scene.to_dict() for scene in self.scenes],
            "characters": {
                name: record.to_dict() for name, record in self.characters.items()
            },
        }


def analyze_screenplay(text: str) -> ScreenplayAnalysis:
    """Run the full analysis over screenplay text.

    Scene segmentation and character extraction both read the same element
    stream and do not depend on each other.

    Args:
        text: Screenplay markup

    Returns:
        The combined analysis

    Raises:
        ValidationError: If text is not a string
    """
    if not isinstance(text, str):
        raise ValidationError(
            message="Screenplay text must be a string",
            hint="Decode file contents before analyzing them",
            details={"received_type": type(text).__name__},
        )

    result = classify(text)
    scenes = segment(result.elements)
    characters = extract_characters(result.elements)

    logger.debug(
        "Analyzed screenplay",
        element_count=len(result.elements),
        scene_count=len(scenes),
        character_count=len(characters),
    )
    return ScreenplayAnalysis(
        title_page=result.title_page,
        elements=result.elements,
        scenes=tuple(scenes),
        characters=characters,
    )
