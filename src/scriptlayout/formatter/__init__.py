"""Screenplay line classification and pagination for scriptlayout."""

from __future__ import annotations

from .classifier import classify, classify_line, classify_text
from .models import (
    ClassificationState,
    ClassifiedLine,
    LineKind,
    Page,
    PageGeometry,
    PlacedLine,
)
from .paginator import paginate
from .wrapping import CharacterWrapper, TextWrapper

__all__ = [
    "CharacterWrapper",
    "ClassificationState",
    "ClassifiedLine",
    "LineKind",
    "Page",
    "PageGeometry",
    "PlacedLine",
    "TextWrapper",
    "classify",
    "classify_line",
    "classify_text",
    "paginate",
]
