"""Output formatters for scriptlayout CLI."""

from __future__ import annotations

from scriptlayout.cli.formatters.base import OutputFormat, OutputFormatter
from scriptlayout.cli.formatters.json_formatter import JsonFormatter
from scriptlayout.cli.formatters.layout_formatter import (
    ClassificationFormatter,
    PageSummaryFormatter,
)

__all__ = [
    "ClassificationFormatter",
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
    "PageSummaryFormatter",
]
