"""Classify screenplay lines command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptlayout.cli.formatters import ClassificationFormatter, OutputFormat
from scriptlayout.cli.utils import handle_cli_error, read_screenplay
from scriptlayout.config import get_logger
from scriptlayout.formatter import classify_text

logger = get_logger(__name__)
console = Console()


def classify_command(
    source: Annotated[
        Path | None,
        typer.Argument(help="Screenplay text file, or '-' to read stdin"),
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output as JSON")
    ] = False,
    plain: Annotated[
        bool, typer.Option("--plain", help="Output one 'kind text' pair per line")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show detailed error output")
    ] = False,
) -> None:
    """Assign a structural role to every line of a screenplay.

    Lines are classified as scene headings, character cues, parentheticals,
    transitions, dialogue, action or empty lines.
    """
    try:
        classified = classify_text(read_screenplay(source))
        logger.info("Classified screenplay", source=str(source), lines=len(classified))

        if json_output:
            format_type = OutputFormat.JSON
        elif plain:
            format_type = OutputFormat.TEXT
        else:
            format_type = OutputFormat.TABLE
        ClassificationFormatter(console).print(classified, format_type)

    except Exception as e:
        handle_cli_error(e, verbose=verbose, json_output=json_output)
