"""Scene segmentation, character extraction and statistics for scriptlens."""

from __future__ import annotations

from .character_extractor import CharacterExtractor, extract_characters
from .scene_segmenter import SceneSegmenter, find_scene_for_line, segment
from .statistics import (
    CharacterStatistics,
    SceneStatistics,
    compute_character_statistics,
    compute_scene_statistics,
)

__all__ = [
    "CharacterExtractor",
    "CharacterStatistics",
    "SceneSegmenter",
    "SceneStatistics",
    "compute_character_statistics",
    "compute_scene_statistics",
    "extract_characters",
    "find_scene_for_line",
    "segment",
]
