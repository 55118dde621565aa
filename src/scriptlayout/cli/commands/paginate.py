"""Paginate screenplay command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptlayout.cli.formatters import OutputFormat, PageSummaryFormatter
from scriptlayout.cli.utils import handle_cli_error, read_screenplay
from scriptlayout.config import get_logger, get_settings_for_cli
from scriptlayout.formatter import classify_text, paginate

logger = get_logger(__name__)
console = Console()


def paginate_command(
    source: Annotated[
        Path | None,
        typer.Argument(help="Screenplay text file, or '-' to read stdin"),
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output every placed line as JSON")
    ] = False,
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
    """Lay a screenplay out onto pages.

    Page size, margins, line height and indents come from the configuration.
    Character cues are never separated from the dialogue that follows them.
    """
    try:
        geometry = get_settings_for_cli(config_file=config).to_geometry()
        pages = paginate(classify_text(read_screenplay(source)), geometry)
        logger.info("Paginated screenplay", source=str(source), pages=len(pages))

        format_type = OutputFormat.JSON if json_output else OutputFormat.TABLE
        PageSummaryFormatter(console).print(pages, format_type)

    except Exception as e:
        handle_cli_error(e, verbose=verbose, json_output=json_output)
