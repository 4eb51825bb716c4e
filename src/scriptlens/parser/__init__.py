"""Screenplay markup parser for scriptlens."""

from __future__ import annotations

from .fountain_models import (
    ClassificationResult,
    Element,
    ElementKind,
    Emphasis,
)
from .line_classifier import LineClassifier, classify, strip_emphasis
from .title_page import (
    TitlePageMetadata,
    extract_title_page,
    title_page_metadata,
)

__all__ = [
    "ClassificationResult",
    "Element",
    "ElementKind",
    "Emphasis",
    "LineClassifier",
    "TitlePageMetadata",
    "classify",
    "extract_title_page",
    "strip_emphasis",
    "title_page_metadata",
]
