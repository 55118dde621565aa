"""Render screenplay command."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptlayout.cli.utils import handle_cli_error, read_screenplay
from scriptlayout.config import get_logger, get_settings_for_cli
from scriptlayout.formatter import classify_text, paginate
from scriptlayout.render import (
    get_theme,
    render_html,
    render_paginated_text,
    render_plain_text,
)

logger = get_logger(__name__)
console = Console(stderr=True)


class RenderFormat(str, Enum):
    """Document formats produced by the render command."""

    PLAIN = "plain"
    TEXT = "text"
    HTML = "html"


def render_document(
    text: str,
    render_format: RenderFormat,
    config: Path | None = None,
    title: str | None = None,
    author: str | None = None,
    theme: str | None = None,
) -> str:
    """Run the classify/paginate/render pipeline for one screenplay.

    Args:
        text: Raw screenplay text
        render_format: Output document format
        config: Optional configuration file
        title: Title for the HTML title page
        author: Author for the HTML title page
        theme: HTML theme overriding the configured one

    Returns:
        The rendered document

    Raises:
        ValidationError: If ``theme`` is not a known HTML theme
    """
    classified = classify_text(text)
    if render_format == RenderFormat.PLAIN:
        return render_plain_text(classified) + "\n"

    if theme is not None:
        get_theme(theme)
    settings = get_settings_for_cli(
        config_file=config, cli_overrides={"html_theme": theme}
    )
    geometry = settings.to_geometry()
    pages = paginate(classified, geometry)

    if render_format == RenderFormat.TEXT:
        return render_paginated_text(pages, geometry)
    return render_html(pages, title=title, author=author, theme=settings.html_theme)


def render_command(
    source: Annotated[
        Path | None,
        typer.Argument(help="Screenplay text file, or '-' to read stdin"),
    ] = None,
    render_format: Annotated[
        RenderFormat,
        typer.Option("--format", "-f", help="Output format", case_sensitive=False),
    ] = RenderFormat.TEXT,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    title: Annotated[
        str | None, typer.Option("--title", help="Title for the HTML title page")
    ] = None,
    author: Annotated[
        str | None, typer.Option("--author", help="Author for the HTML title page")
    ] = None,
    theme: Annotated[
        str | None,
        typer.Option("--theme", help="HTML theme: hollywood, cinematic, bbc, short"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show detailed error output")
    ] = False,
) -> None:
    """Render a screenplay as plain text, paginated text or HTML.

    The plain format joins the normalized lines without pagination; the text
    format lays pages out in a fixed-pitch font with page numbers.
    """
    try:
        document = render_document(
            read_screenplay(source),
            render_format,
            config=config,
            title=title,
            author=author,
            theme=theme,
        )

        if output is None:
            typer.echo(document, nl=False)
            return

        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document, encoding="utf-8")
        logger.info("Rendered screenplay", output=str(output), format=render_format)
        console.print(f"[green]✓[/green] Wrote {render_format.value} to {output}")

    except Exception as e:
        handle_cli_error(e, verbose=verbose)
