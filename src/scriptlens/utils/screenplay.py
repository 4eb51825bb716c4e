"""Screenplay-specific utility functions."""

from __future__ import annotations

import re

from scriptlens.models import SceneCategory, TimeOfDay

HEADING_SEPARATOR = " - "

# Token searches on the uppercased heading, most specific first
CATEGORY_PATTERNS: tuple[tuple[re.Pattern[str], SceneCategory], ...] = (
    (
        re.compile(r"\b(?:INT\.?/EXT|INT-EXT|I/E|I-E)\b"),
        SceneCategory.INTERIOR_EXTERIOR,
    ),
    (re.compile(r"\bINT\b"), SceneCategory.INTERIOR),
    (re.compile(r"\bEXT\b"), SceneCategory.EXTERIOR),
    (re.compile(r"MONTAGE"), SceneCategory.MONTAGE),
    (re.compile(r"FLASHBACK"), SceneCategory.FLASHBACK),
    (re.compile(r"DREAM"), SceneCategory.DREAM),
    (re.compile(r"FANTASY"), SceneCategory.FANTASY),
)


class ScreenplayUtils:
    """Utility functions for screenplay processing."""

    @staticmethod
    def extract_location(heading: str) -> str:
        """Extract location from scene heading.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            The part before the first separator ("INT. COFFEE SHOP"), or the
            whole heading when there is no separator
        """
        location, _, _ = heading.partition(HEADING_SEPARATOR)
        return location.strip()

    @staticmethod
    def extract_time(heading: str) -> TimeOfDay:
        """Extract time of day from scene heading.

        The text after the first separator is searched for each vocabulary
        entry in declaration order; DAY is the fallback, including for
        headings without a separator.
        """
        _, separator, rest = heading.partition(HEADING_SEPARATOR)
        if not separator:
            return TimeOfDay.DAY

        rest = rest.upper()
        for time_of_day in TimeOfDay:
            if time_of_day.value in rest:
                return time_of_day
        return TimeOfDay.DAY

    @staticmethod
    def extract_category(heading: str) -> SceneCategory:
        """Determine the scene category from heading tokens."""
        heading_upper = heading.upper()
        for pattern, category in CATEGORY_PATTERNS:
            if pattern.search(heading_upper):
                return category
        return SceneCategory.OTHER

    @staticmethod
    def parse_scene_heading(
        heading: str,
    ) -> tuple[str, TimeOfDay, SceneCategory]:
        """Parse a scene heading into its components.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Tuple of (location, time_of_day, category); never raises
        """
        return (
            ScreenplayUtils.extract_location(heading),
            ScreenplayUtils.extract_time(heading),
            ScreenplayUtils.extract_category(heading),
        )

    @staticmethod
    def count_words(text: str) -> int:
        """Count whitespace-delimited tokens."""
        return len(text.split())
