"""Utility helpers for scriptlens."""

from scriptlens.utils.screenplay import ScreenplayUtils

__all__ = ["ScreenplayUtils"]
