"""Per-character appearance statistics mined from the element stream."""

from __future__ import annotations

from collections.abc import Iterable

from scriptlens.config import get_logger
from scriptlens.models import CharacterAppearance
from scriptlens.parser.fountain_models import Element, ElementKind

logger = get_logger(__name__)


class CharacterExtractor:
    """Collect appearance records keyed by trimmed, case-sensitive cue name.

    Dialogue is attributed to the nearest cue before it by line number. This
    is worked out from the element stream alone, independently of the
    classifier's pending-cue state.
    """

    def extract(self, elements: Iterable[Element]) -> dict[str, CharacterAppearance]:
        """Build appearance records for every cued character.

        Args:
            elements: Elements in source order

        Returns:
            Mapping of character name to its appearance record, in order of
            first appearance
        """
        appearances: dict[str, CharacterAppearance] = {}
        current_heading: str | None = None
        nearest_cue: str | None = None
        unattributed = 0

        for element in elements:
            if element.is_scene_heading:
                current_heading = element.text
            elif element.is_cue:
                name = element.text.strip()
                if not name:
                    continue
                nearest_cue = name
                record = appearances.get(name)
                if record is None:
                    record = CharacterAppearance(
                        name=name,
                        first_appearance_line=element.line_number,
                        last_appearance_line=element.line_number,
                    )
                    appearances[name] = record
                else:
                    record.last_appearance_line = element.line_number
                if current_heading is not None:
                    record.scenes.add(current_heading)
            elif element.kind is ElementKind.DIALOGUE:
                if nearest_cue is None:
                    unattributed += 1
                    continue
                appearances[nearest_cue].dialogue_count += 1

        logger.debug(
            "Extracted characters",
            character_count=len(appearances),
            unattributed_dialogue=unattributed,
        )
        return appearances


def extract_characters(elements: Iterable[Element]) -> dict[str, CharacterAppearance]:
    """Extract characters with a fresh :class:`CharacterExtractor`."""
    return CharacterExtractor().extract(elements)
