"""Group a classified element stream into scenes with derived metrics."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from scriptlens.config import get_logger
from scriptlens.models import Scene
from scriptlens.parser.fountain_models import (
    CUE_KINDS,
    SCENE_HEADING_KINDS,
    Element,
    ElementKind,
)
from scriptlens.parser.line_classifier import match_line_rule
from scriptlens.utils import ScreenplayUtils

logger = get_logger(__name__)

# Element kinds whose raw lines make up a scene's content
BUFFERED_KINDS = frozenset(
    {
        ElementKind.ACTION,
        ElementKind.FORCED_ACTION,
        ElementKind.DIALOGUE,
        ElementKind.CHARACTER_CUE,
        ElementKind.DUAL_DIALOGUE_CUE,
        ElementKind.PARENTHETICAL,
        ElementKind.TRANSITION,
        ElementKind.NOTE,
    }
)


@dataclass
class _OpenScene:
    """Accumulator for the scene currently being read."""

    heading: Element
    end_line_number: int
    lines: list[str] = field(default_factory=list)
    characters: set[str] = field(default_factory=set)


def count_scene_lines(raw_lines: Iterable[str]) -> tuple[int, int]:
    """Count dialogue and action lines in a scene's buffered content.

    Lines are re-read with the classifier's own rule ladder. Cues,
    parentheticals, transitions and notes count as neither; a line matching
    no rule is dialogue once a cue has been seen in the scene and action
    before that.

    Args:
        raw_lines: Buffered raw lines of one scene

    Returns:
        Tuple of (dialogue_line_count, action_line_count)
    """
    dialogue = action = 0
    cue_seen = False

    for raw in raw_lines:
        line = raw.strip()
        if not line:
            continue

        matched = match_line_rule(line)
        if matched is None:
            if cue_seen:
                dialogue += 1
            else:
                action += 1
            continue

        kind = matched[0].kind
        if kind in CUE_KINDS:
            cue_seen = True
        elif kind is ElementKind.FORCED_ACTION:
            action += 1
        elif kind in SCENE_HEADING_KINDS:
            cue_seen = False

    return dialogue, action


class SceneSegmenter:
    """Split an element stream at scene headings."""

    def segment(self, elements: Iterable[Element]) -> list[Scene]:
        """Build the ordered scene list for an element stream.

        Elements before the first scene heading belong to no scene and are
        dropped.

        Args:
            elements: Elements in source order

        Returns:
            Scenes in source order, numbered from 1
        """
        scenes: list[Scene] = []
        current: _OpenScene | None = None

        for element in elements:
            if element.is_scene_heading:
                if current is not None:
                    scenes.append(self._finalize(current, len(scenes) + 1))
                current = _OpenScene(
                    heading=element, end_line_number=element.line_number
                )
                continue

            if current is None:
                continue

            current.end_line_number = element.line_number
            if element.kind in BUFFERED_KINDS:
                current.lines.append(element.raw)
            if element.is_cue:
                current.characters.add(element.text)

        if current is not None:
            scenes.append(self._finalize(current, len(scenes) + 1))

        logger.debug("Segmented scenes", scene_count=len(scenes))
        return scenes

    def _finalize(self, open_scene: _OpenScene, scene_number: int) -> Scene:
        heading = open_scene.heading.text
        location, time_of_day, category = ScreenplayUtils.parse_scene_heading(heading)
        content = "\n".join(open_scene.lines)
        dialogue_count, action_count = count_scene_lines(open_scene.lines)

        return Scene(
            heading=heading,
            line_number=open_scene.heading.line_number,
            scene_number=scene_number,
            location=location,
            time_of_day=time_of_day,
            category=category,
            word_count=ScreenplayUtils.count_words(content),
            dialogue_line_count=dialogue_count,
            action_line_count=action_count,
            characters=frozenset(open_scene.characters),
            content=content,
            end_line_number=open_scene.end_line_number,
        )


def segment(elements: Iterable[Element]) -> list[Scene]:
    """Segment elements into scenes with a fresh :class:`SceneSegmenter`."""
    return SceneSegmenter().segment(elements)


def find_scene_for_line(scenes: Sequence[Scene], line_number: int) -> Scene | None:
    """Find the scene whose span contains a source line.

    Args:
        scenes: Scenes in source order, as returned by :func:`segment`
        line_number: 1-based source line

    Returns:
        The containing scene, or None for lines before the first heading or
        after the last element of the final scene
    """
    index = bisect.bisect_right(scenes, line_number, key=lambda s: s.line_number)
    if index == 0:
        return None
    scene = scenes[index - 1]
    if index < len(scenes) or scene.contains_line(line_number):
        return scene
    return None
