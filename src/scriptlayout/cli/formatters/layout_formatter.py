"""Table formatters for classified lines and page summaries."""

from __future__ import annotations

import io

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from scriptlayout.cli.formatters.base import OutputFormat, OutputFormatter
from scriptlayout.cli.formatters.json_formatter import JsonFormatter
from scriptlayout.formatter.models import ClassifiedLine, LineKind, Page

KIND_STYLES = {
    LineKind.SCENE_HEADING: "bold cyan",
    LineKind.CHARACTER: "bold yellow",
    LineKind.PARENTHETICAL: "italic yellow",
    LineKind.DIALOGUE: "green",
    LineKind.TRANSITION: "magenta",
    LineKind.ACTION: "white",
    LineKind.EMPTY: "dim",
}


def _render_table(table: Table) -> str:
    string_io = io.StringIO()
    Console(file=string_io, force_terminal=True).print(table)
    return string_io.getvalue()


class ClassificationFormatter(OutputFormatter[list[ClassifiedLine]]):
    """Formatter for the output of the line classifier."""

    def format(
        self,
        data: list[ClassifiedLine],
        format_type: OutputFormat | None = None,
    ) -> str:
        """Format classified lines as a table, plain text or JSON."""
        format_type = format_type or self.default_format
        if format_type == OutputFormat.JSON:
            return JsonFormatter().format(data)
        if format_type == OutputFormat.TEXT:
            return "\n".join(
                f"{line.kind.value:<14} {line.normalized_text}" for line in data
            )

        table = Table(title="Classified Lines", show_header=True)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Kind")
        table.add_column("Text", no_wrap=False)
        for number, line in enumerate(data, start=1):
            style = KIND_STYLES[line.kind]
            table.add_row(
                str(number),
                f"[{style}]{line.kind.value}[/{style}]",
                escape(line.normalized_text),
            )
        return _render_table(table)


class PageSummaryFormatter(OutputFormatter[list[Page]]):
    """Formatter for the output of the paginator."""

    def format(
        self,
        data: list[Page],
        format_type: OutputFormat | None = None,
    ) -> str:
        """Format pages as a summary table, plain text or JSON."""
        format_type = format_type or self.default_format
        if format_type == OutputFormat.JSON:
            return JsonFormatter().format(data)

        rows = [
            (
                page.page_number,
                len(page.lines),
                page.used_height,
                page.lines[0].classified_line.normalized_text if page.lines else "",
            )
            for page in data
        ]
        if format_type == OutputFormat.TEXT:
            return "\n".join(
                f"page {number}: {count} lines, {height:.2f}in"
                for number, count, height, _ in rows
            )

        table = Table(title="Pages", show_header=True)
        table.add_column("Page", justify="right", style="cyan")
        table.add_column("Lines", justify="right")
        table.add_column("Used (in)", justify="right")
        table.add_column("Starts With", no_wrap=False)
        for number, count, height, first in rows:
            table.add_row(str(number), str(count), f"{height:.2f}", escape(first))
        return _render_table(table)
