"""Error reporting for CLI commands."""

from __future__ import annotations

import traceback

import typer
from rich.console import Console
from rich.markup import escape

from scriptlayout.cli.formatters.json_formatter import JsonFormatter
from scriptlayout.config import get_logger
from scriptlayout.exceptions import ScriptLayoutError

logger = get_logger(__name__)
console = Console(stderr=True)


def _print_known_error(error: ScriptLayoutError, verbose: bool) -> None:
    console.print(f"[red]✗ {escape(error.message)}[/red]")
    if error.hint:
        console.print(f"[yellow]→ {escape(error.hint)}[/yellow]")
    if verbose and error.details:
        console.print("\n[dim]Details:[/dim]")
        for key, value in error.details.items():
            console.print(f"  [dim]{key}:[/dim] {escape(str(value))}")


def _print_unexpected_error(error: Exception, verbose: bool) -> None:
    console.print(f"[red]✗ Unexpected error: {escape(str(error))}[/red]")
    if verbose:
        console.print("\n[dim]Full traceback:[/dim]")
        console.print(escape(traceback.format_exc()))
    else:
        console.print("[dim]Run with --verbose for full error details[/dim]")


def handle_cli_error(
    error: Exception,
    verbose: bool = False,
    json_output: bool = False,
    exit_code: int = 1,
) -> None:
    """Report an error raised inside a command, then exit.

    scriptlayout errors are shown as message and hint; anything else is
    reported as unexpected. In JSON mode a JSON error document goes to
    stdout instead.

    Raises:
        typer.Exit: Always, with ``exit_code``
    """
    known = isinstance(error, ScriptLayoutError)

    if json_output:
        message = error.message if known else str(error)
        print(JsonFormatter().format_error_response(message, exit_code))
    elif known:
        _print_known_error(error, verbose)
    else:
        _print_unexpected_error(error, verbose)

    logger.error(
        "Command failed",
        error_type=type(error).__name__,
        error=str(error),
        exit_code=exit_code,
        exc_info=not known,
    )
    raise typer.Exit(exit_code)
