"""scriptlens data models for segmented scenes and character appearances."""

from scriptlens.models.scene_models import (
    CharacterAppearance,
    Scene,
    SceneCategory,
    TimeOfDay,
)

__all__ = ["CharacterAppearance", "Scene", "SceneCategory", "TimeOfDay"]
