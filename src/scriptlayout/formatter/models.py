"""Data models for screenplay line classification and page layout."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from scriptlayout.exceptions import GeometryError


class LineKind(str, Enum):
    """Structural role of a single screenplay line.

    Values double as the CSS class names used by the HTML renderer.
    """

    SCENE_HEADING = "scene-heading"
    CHARACTER = "character"
    PARENTHETICAL = "parenthetical"
    TRANSITION = "transition"
    DIALOGUE = "dialogue"
    ACTION = "action"
    EMPTY = "empty"


# Kinds followed by half a line of extra vertical space
SPACED_KINDS = frozenset({LineKind.SCENE_HEADING, LineKind.TRANSITION})


@dataclass(frozen=True)
class ClassifiedLine:
    """A raw line together with its structural role."""

    kind: LineKind
    text: str
    normalized_text: str


@dataclass(frozen=True)
class ClassificationState:
    """Look-behind cursor threaded through a classification pass.

    ``previous_kind`` is the kind of the last non-empty line and
    ``blank_since_previous`` records whether a blank line followed it.
    """

    previous_kind: LineKind | None = None
    blank_since_previous: bool = False


@dataclass(frozen=True)
class PageGeometry:
    """Physical page description used by the paginator.

    All measurements are in inches. ``indents`` are offsets from the left
    margin and must cover every LineKind.
    """

    margin_inches: float
    page_height_inches: float
    line_height_inches: float
    indents: Mapping[LineKind, float]
    page_width_inches: float = 8.5
    chars_per_inch: float = 10.0

    def __post_init__(self) -> None:
        """Validate the geometry invariants."""
        dimensions = {
            "margin_inches": self.margin_inches,
            "page_height_inches": self.page_height_inches,
            "line_height_inches": self.line_height_inches,
            "page_width_inches": self.page_width_inches,
            "chars_per_inch": self.chars_per_inch,
        }
        for name, value in dimensions.items():
            if not math.isfinite(value) or value <= 0:
                raise GeometryError(
                    message=f"Page geometry value '{name}' must be positive",
                    hint="Use a positive, finite number of inches",
                    details={name: value},
                )

        missing = [kind.value for kind in LineKind if kind not in self.indents]
        if missing:
            raise GeometryError(
                message="Page geometry is missing indents",
                hint="Provide an indent for every line kind",
                details={"missing": missing},
            )

        if self.usable_height < self.line_height_inches:
            raise GeometryError(
                message="Margins leave no room for a single line",
                details={
                    "page_height_inches": self.page_height_inches,
                    "margin_inches": self.margin_inches,
                    "line_height_inches": self.line_height_inches,
                },
            )

        for kind in LineKind:
            indent = self.indents[kind]
            if not math.isfinite(indent) or indent < 0:
                raise GeometryError(
                    message=f"Indent for '{kind.value}' must not be negative",
                    details={"indent": indent},
                )
            if self.available_width(kind) <= 0:
                raise GeometryError(
                    message=f"Indent for '{kind.value}' leaves no room for text",
                    hint="Reduce the indent or the margins",
                    details={
                        "indent": indent,
                        "page_width_inches": self.page_width_inches,
                        "margin_inches": self.margin_inches,
                    },
                )

    @classmethod
    def letter(cls) -> PageGeometry:
        """US letter page with conventional screenplay indents."""
        return cls(
            margin_inches=1.0,
            page_height_inches=11.0,
            line_height_inches=0.2,
            indents=dict(DEFAULT_INDENTS),
        )

    @property
    def usable_height(self) -> float:
        """Vertical space between the top and bottom margins."""
        return self.page_height_inches - 2 * self.margin_inches

    def indent_for(self, kind: LineKind) -> float:
        """Return the left indent for a line kind."""
        return self.indents[kind]

    def available_width(self, kind: LineKind) -> float:
        """Return the text width left for a line kind after margins and indent."""
        return self.page_width_inches - 2 * self.margin_inches - self.indents[kind]


DEFAULT_INDENTS: Mapping[LineKind, float] = {
    LineKind.SCENE_HEADING: 0.0,
    LineKind.ACTION: 0.0,
    LineKind.CHARACTER: 2.5,
    LineKind.PARENTHETICAL: 2.0,
    LineKind.DIALOGUE: 1.5,
    LineKind.TRANSITION: 5.5,
    LineKind.EMPTY: 0.0,
}


@dataclass(frozen=True)
class PlacedLine:
    """A classified line positioned on a page."""

    classified_line: ClassifiedLine
    x_indent: float
    y_position: float
    wrapped_segments: tuple[str, ...]
    height: float

    @property
    def kind(self) -> LineKind:
        """Kind of the underlying classified line."""
        return self.classified_line.kind


@dataclass
class Page:
    """A single page of placed lines."""

    page_number: int
    lines: list[PlacedLine] = field(default_factory=list)

    @property
    def used_height(self) -> float:
        """Total vertical space consumed by the placed lines."""
        return sum(line.height for line in self.lines)

    @property
    def is_empty(self) -> bool:
        """Whether no line has been placed yet."""
        return not self.lines
