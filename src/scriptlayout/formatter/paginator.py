"""Page layout for classified screenplay lines."""

from __future__ import annotations

from collections.abc import Sequence

from scriptlayout.config import get_logger
from scriptlayout.formatter.models import (
    SPACED_KINDS,
    ClassifiedLine,
    LineKind,
    Page,
    PageGeometry,
    PlacedLine,
)
from scriptlayout.formatter.wrapping import CharacterWrapper, TextWrapper

logger = get_logger(__name__)

# Tolerance for accumulated float error in inch arithmetic
EPSILON = 1e-9

# Kinds that must not be separated from the dialogue they introduce
KEEP_WITH_NEXT_KINDS = frozenset({LineKind.CHARACTER, LineKind.PARENTHETICAL})
# Kinds allowed between a cue and its first dialogue line
GROUP_BRIDGE_KINDS = frozenset({LineKind.PARENTHETICAL, LineKind.EMPTY})


class _PageBuilder:
    """Accumulates placed lines into pages, tracking the vertical cursor."""

    def __init__(self, geometry: PageGeometry) -> None:
        self.geometry = geometry
        self.pages: list[Page] = [Page(page_number=1)]
        self.y_cursor = geometry.margin_inches

    @property
    def page(self) -> Page:
        return self.pages[-1]

    @property
    def bottom(self) -> float:
        return self.geometry.page_height_inches - self.geometry.margin_inches

    def fits(self, height: float) -> bool:
        return self.y_cursor + height <= self.bottom + EPSILON

    def new_page(self, reason: str) -> None:
        logger.debug(
            "Starting new page",
            page_number=self.page.page_number + 1,
            reason=reason,
        )
        self.pages.append(Page(page_number=self.page.page_number + 1))
        self.y_cursor = self.geometry.margin_inches

    def place(
        self, line: ClassifiedLine, segments: list[str], height: float
    ) -> None:
        self.page.lines.append(
            PlacedLine(
                classified_line=line,
                x_indent=self.geometry.indent_for(line.kind),
                y_position=self.y_cursor,
                wrapped_segments=tuple(segments),
                height=height,
            )
        )
        self.y_cursor += height


def wrap_line(
    line: ClassifiedLine, geometry: PageGeometry, wrapper: TextWrapper
) -> list[str]:
    """Wrap a classified line to the width available for its kind."""
    if line.kind == LineKind.EMPTY:
        return [""]
    width = geometry.available_width(line.kind)
    return wrapper(line.normalized_text.strip(), width) or [""]


def line_height(kind: LineKind, row_count: int, geometry: PageGeometry) -> float:
    """Rendered height of a line: its rows plus kind-specific spacing."""
    height = row_count * geometry.line_height_inches
    if kind in SPACED_KINDS:
        height += geometry.line_height_inches / 2
    return height


def _keep_with_next_height(
    classified: Sequence[ClassifiedLine], heights: Sequence[float], index: int
) -> float | None:
    """Height of the group from ``index`` through the first following dialogue.

    Returns None when the line does not introduce dialogue.
    """
    if classified[index].kind not in KEEP_WITH_NEXT_KINDS:
        return None

    total = heights[index]
    for follower in range(index + 1, len(classified)):
        kind = classified[follower].kind
        total += heights[follower]
        if kind == LineKind.DIALOGUE:
            return total
        if kind not in GROUP_BRIDGE_KINDS:
            return None
    return None


def paginate(
    classified: Sequence[ClassifiedLine],
    geometry: PageGeometry,
    wrapper: TextWrapper | None = None,
) -> list[Page]:
    """Lay out classified lines onto pages.

    Every input line is placed exactly once, in order. A character cue (or a
    parenthetical inside a dialogue block) is moved to the next page rather
    than being separated from its first dialogue line, as long as the group
    fits on one page. A line taller than a whole page starts a fresh page
    and overflows it.

    Args:
        classified: Classified lines in document order
        geometry: Page dimensions and per-kind indents
        wrapper: Optional text measurer; defaults to character-count wrapping

    Returns:
        Pages numbered from 1; a single empty page for empty input
    """
    if not isinstance(geometry, PageGeometry):
        raise TypeError(f"geometry must be a PageGeometry, got {type(geometry)!r}")

    wrap = wrapper or CharacterWrapper(geometry.chars_per_inch)
    usable = geometry.usable_height

    segments = [wrap_line(line, geometry, wrap) for line in classified]
    heights = [
        line_height(line.kind, len(rows), geometry)
        for line, rows in zip(classified, segments, strict=True)
    ]

    builder = _PageBuilder(geometry)
    for index, line in enumerate(classified):
        height = heights[index]
        group_height = _keep_with_next_height(classified, heights, index)

        if group_height is not None and group_height <= usable + EPSILON:
            needed, reason = group_height, "keep_with_next"
        else:
            needed, reason = height, "page_full"

        if not builder.page.is_empty and not builder.fits(needed):
            builder.new_page(reason)

        if height > usable + EPSILON:
            logger.warning(
                "Line taller than a page, allowing overflow",
                page_number=builder.page.page_number,
                kind=line.kind.value,
                height=height,
                usable_height=usable,
            )

        builder.place(line, segments[index], height)

    logger.debug(
        "Paginated screenplay",
        lines=len(classified),
        pages=len(builder.pages),
    )
    return builder.pages
