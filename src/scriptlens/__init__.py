"""scriptlens: structured analysis of plain-text screenplay markup.

scriptlens classifies Fountain-style screenplay lines into typed elements,
groups them into scenes and gathers per-character appearance statistics.
"""

from scriptlens.analysis import (
    CharacterStatistics,
    SceneStatistics,
    compute_character_statistics,
    compute_scene_statistics,
)
from scriptlens.config import ScriptLensSettings, get_logger, get_settings
from scriptlens.exceptions import ScriptLensError
from scriptlens.models import CharacterAppearance, Scene, SceneCategory, TimeOfDay
from scriptlens.parser import Element, ElementKind, Emphasis
from scriptlens.pipeline import ScreenplayAnalysis, analyze_screenplay

__version__ = "0.1.0"

__all__ = [
    "CharacterAppearance",
    "CharacterStatistics",
    "Element",
    "ElementKind",
    "Emphasis",
    "Scene",
    "SceneCategory",
    "SceneStatistics",
    "ScreenplayAnalysis",
    "ScriptLensError",
    "ScriptLensSettings",
    "TimeOfDay",
    "__version__",
    "analyze_screenplay",
    "compute_character_statistics",
    "compute_scene_statistics",
    "get_logger",
    "get_settings",
]
