"""HTML rendering for paginated screenplays."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from html import escape

from scriptlayout.exceptions import ValidationError
from scriptlayout.formatter.models import LineKind, Page, PlacedLine


@dataclass(frozen=True)
class HtmlTheme:
    """Stylesheet fragments for one screenplay presentation style."""

    label: str
    font_family: str
    title: str
    scene_heading: str
    character: str
    dialogue: str


_HOLLYWOOD = HtmlTheme(
    label="Cinematic Format",
    font_family="'Courier New', monospace",
    title="text-align: center; margin-bottom: 2in;",
    scene_heading=(
        "text-transform: uppercase; font-weight: bold; "
        "margin-top: 2em; margin-bottom: 1em;"
    ),
    character=(
        "text-transform: uppercase; margin-top: 1em; margin-bottom: 0; "
        "margin-left: 2in;"
    ),
    dialogue=(
        "margin-top: 0; margin-bottom: 1em; margin-left: 1in; margin-right: 1in;"
    ),
)

THEMES: dict[str, HtmlTheme] = {
    "hollywood": _HOLLYWOOD,
    "cinematic": _HOLLYWOOD,
    "bbc": HtmlTheme(
        label="BBC Style Format",
        font_family="'Arial', sans-serif",
        title="text-align: left; margin-bottom: 1in; font-weight: bold;",
        scene_heading="font-weight: bold; margin-top: 1em; margin-bottom: 0.5em;",
        character="font-weight: bold; margin-top: 1em; margin-bottom: 0;",
        dialogue="margin-top: 0; margin-bottom: 1em; margin-left: 0.5in;",
    ),
    "short": HtmlTheme(
        label="Short Form Format",
        font_family="'Montserrat', sans-serif",
        title="text-align: center; margin-bottom: 1in;",
        scene_heading=(
            "text-transform: uppercase; font-weight: bold; "
            "margin-top: 1em; margin-bottom: 0.5em;"
        ),
        character="font-weight: bold; margin-top: 0.5em; margin-bottom: 0;",
        dialogue="margin-top: 0; margin-bottom: 0.5em; margin-left: 0.5in;",
    ),
}


def get_theme(name: str) -> HtmlTheme:
    """Look up a theme by name (case-insensitive).

    Raises:
        ValidationError: If the theme is unknown
    """
    theme = THEMES.get(name.lower())
    if theme is None:
        raise ValidationError(
            message=f"Unknown HTML theme '{name}'",
            hint=f"Choose one of: {', '.join(sorted(THEMES))}",
            details={"theme": name},
        )
    return theme


def _stylesheet(theme: HtmlTheme) -> str:
    return f"""
    @page {{ size: 8.5in 11in; margin: 1in; }}
    body {{ font-family: {theme.font_family}; font-size: 12pt; max-width: 6.5in;
           margin: 0 auto; }}
    h1 {{ {theme.title} }}
    .title-page {{ text-align: center; page-break-after: always; }}
    .author {{ margin-top: 1in; }}
    .format-note {{ font-style: italic; color: #666; margin-top: 0.5em; }}
    .page {{ page-break-after: always; }}
    .page-number {{ text-align: right; font-size: 10pt; }}
    .{LineKind.SCENE_HEADING.value} {{ {theme.scene_heading} }}
    .{LineKind.ACTION.value} {{ margin: 1em 0; }}
    .{LineKind.CHARACTER.value} {{ {theme.character} }}
    .{LineKind.DIALOGUE.value} {{ {theme.dialogue} }}
    .{LineKind.PARENTHETICAL.value} {{ margin: 0 1.5in; font-style: italic; }}
    .{LineKind.TRANSITION.value} {{ text-align: right; text-transform: uppercase;
                   margin: 1em 0; }}
"""


def _render_line(placed: PlacedLine) -> str:
    if placed.kind == LineKind.EMPTY:
        return f'<div class="{LineKind.EMPTY.value}"><br></div>'
    body = "<br>".join(escape(segment) for segment in placed.wrapped_segments)
    return f'<div class="{placed.kind.value}">{body}</div>'


def _render_title_page(title: str, author: str | None, theme: HtmlTheme) -> str:
    return (
        '<div class="title-page">\n'
        f"<h1>{escape(title)}</h1>\n"
        f'<p class="author">by {escape(author or "Anonymous Writer")}</p>\n'
        f'<p class="format-note">{escape(theme.label)}</p>\n'
        "</div>"
    )


def render_html(
    pages: Sequence[Page],
    title: str | None = None,
    author: str | None = None,
    theme: str = "hollywood",
) -> str:
    """Render paginated lines as a standalone HTML document.

    Each page becomes a ``div.page`` and each placed line a ``div`` whose
    class is the line kind. A title page is added when a title is given.

    Args:
        pages: Output of the paginator
        title: Optional screenplay title
        author: Optional author shown on the title page
        theme: Stylesheet name (hollywood, cinematic, bbc or short)

    Returns:
        Complete HTML document

    Raises:
        ValidationError: If the theme is unknown
    """
    html_theme = get_theme(theme)
    document_title = title or "Untitled Screenplay"

    parts = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{escape(document_title)}</title>",
        f"<style>{_stylesheet(html_theme)}</style>",
        "</head>",
        "<body>",
    ]
    if title:
        parts.append(_render_title_page(title, author, html_theme))

    for page in pages:
        parts.append(f'<div class="page" data-page="{page.page_number}">')
        parts.append(f'<div class="page-number">{page.page_number}.</div>')
        parts.extend(_render_line(placed) for placed in page.lines)
        parts.append("</div>")

    parts.extend(["</body>", "</html>"])
    return "\n".join(parts) + "\n"
