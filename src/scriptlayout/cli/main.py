"""Main CLI entry point for scriptlayout."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from scriptlayout import __version__
from scriptlayout.cli.commands import (
    classify_command,
    paginate_command,
    render_command,
)
from scriptlayout.cli.formatters.json_formatter import JsonFormatter
from scriptlayout.cli.utils import handle_cli_error
from scriptlayout.config import (
    configure_logging,
    get_logger,
    get_settings,
    set_settings,
)

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="scriptlayout",
    help="Classify, paginate and render screenplay text",
    pretty_exceptions_enable=False,
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="classify")(classify_command)
app.command(name="paginate")(paginate_command)
app.command(name="render")(render_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show scriptlayout version."""
    version_info = {
        "name": "scriptlayout",
        "version": __version__,
        "description": "Screenplay line classification and pagination",
    }

    if json_output:
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"scriptlayout v{version_info['version']}")


def _setup_logging(log_verbose: bool, debug: bool) -> None:
    settings = get_settings()
    if debug:
        settings = settings.model_copy(update={"log_level": "DEBUG", "debug": True})
    elif log_verbose:
        settings = settings.model_copy(update={"log_level": "INFO"})
    set_settings(settings)
    configure_logging(settings)


@app.callback()
def main_callback(
    log_verbose: Annotated[
        bool,
        typer.Option("--log-verbose", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug", help="Enable debug logging", envvar="SCRIPTLAYOUT_DEBUG"
        ),
    ] = False,
) -> None:
    """Load settings and configure logging for the command."""
    try:
        _setup_logging(log_verbose, debug)
    except Exception as e:
        handle_cli_error(e)
    logger.debug("Logging configured", debug=debug, log_verbose=log_verbose)


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
