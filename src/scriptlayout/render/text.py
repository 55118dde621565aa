"""Plain-text exporters for classified and paginated screenplays."""

from __future__ import annotations

import math
from collections.abc import Sequence

from scriptlayout.formatter.models import ClassifiedLine, Page, PageGeometry
from scriptlayout.formatter.wrapping import CharacterWrapper

PAGE_SEPARATOR = "\f"


def render_plain_text(classified: Sequence[ClassifiedLine]) -> str:
    """Join normalized lines with their original line breaks.

    Pagination is bypassed entirely; this is the ``.txt`` download format.
    """
    return "\n".join(line.normalized_text for line in classified)


def _row_index(y_position: float, geometry: PageGeometry) -> int:
    offset = (y_position - geometry.margin_inches) / geometry.line_height_inches
    return math.floor(offset + 1e-6)


def render_page(page: Page, geometry: PageGeometry) -> str:
    """Render one page as fixed-pitch text.

    The first row carries the right-aligned page number, followed by a
    blank row and the body. Body rows sit at the row implied by each
    line's vertical position.
    """
    columns = CharacterWrapper(geometry.chars_per_inch).columns(
        geometry.page_width_inches - 2 * geometry.margin_inches
    )
    header = f"{page.page_number}.".rjust(columns)

    rows: list[str] = []
    for placed in page.lines:
        start = _row_index(placed.y_position, geometry)
        indent = " " * round(placed.x_indent * geometry.chars_per_inch)
        for offset, segment in enumerate(placed.wrapped_segments):
            row = start + offset
            if row >= len(rows):
                rows.extend([""] * (row - len(rows) + 1))
            rows[row] = f"{indent}{segment}" if segment else ""

    return "\n".join([header, "", *rows]) + "\n"


def render_paginated_text(pages: Sequence[Page], geometry: PageGeometry) -> str:
    """Render every page, separating pages with a form feed."""
    return PAGE_SEPARATOR.join(render_page(page, geometry) for page in pages)
