"""Word wrapping for monospace screenplay layout."""

from __future__ import annotations

import math
import textwrap
from collections.abc import Callable

# (text, width in inches) -> visual rows
TextWrapper = Callable[[str, float], list[str]]


class CharacterWrapper:
    """Greedy word wrapper that measures width by character count.

    Screenplays are set in a fixed-pitch font, so a characters-per-inch
    estimate stands in for glyph metrics.
    """

    def __init__(self, chars_per_inch: float = 10.0) -> None:
        """Initialize the wrapper.

        Args:
            chars_per_inch: Characters that fit in one inch of line width
        """
        if chars_per_inch <= 0:
            raise ValueError("chars_per_inch must be positive")
        self.chars_per_inch = chars_per_inch

    def columns(self, width_inches: float) -> int:
        """Return how many characters fit in the given width (at least one)."""
        # Round away float noise such as 6.5 * 10 == 64.99999999999999
        return max(1, math.floor(round(width_inches * self.chars_per_inch, 6)))

    def __call__(self, text: str, width_inches: float) -> list[str]:
        """Wrap text into rows no wider than the given width.

        Words longer than a row are broken across rows. Blank text yields a
        single empty row.
        """
        rows = textwrap.wrap(
            text,
            width=self.columns(width_inches),
            break_long_words=True,
            break_on_hyphens=False,
        )
        return rows or [""]
