"""Exporters that turn classified or paginated lines into documents."""

from __future__ import annotations

from .html import THEMES, get_theme, render_html
from .text import render_page, render_paginated_text, render_plain_text

__all__ = [
    "THEMES",
    "get_theme",
    "render_html",
    "render_page",
    "render_paginated_text",
    "render_plain_text",
]
