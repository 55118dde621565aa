"""Base formatter classes for CLI output."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from rich.console import Console
from rich.text import Text

T = TypeVar("T")


class OutputFormat(str, Enum):
    """How a command presents its result."""

    TEXT = "text"
    JSON = "json"
    TABLE = "table"


class OutputFormatter(ABC, Generic[T]):
    """Turns a command result into terminal output.

    Subclasses implement :meth:`format`. When no format is requested the
    formatter's ``default_format`` is used.
    """

    default_format = OutputFormat.TABLE

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @abstractmethod
    def format(self, data: T, format_type: OutputFormat | None = None) -> str:
        """Render ``data`` as a string in ``format_type``."""

    def print(self, data: T, format_type: OutputFormat | None = None) -> None:
        """Render ``data`` and write it out.

        JSON is written to stdout as-is so it can be piped. Other output may
        already contain ANSI styling and is never parsed as console markup.
        """
        format_type = format_type or self.default_format
        output = self.format(data, format_type)
        if format_type == OutputFormat.JSON:
            print(output)
            return
        self.console.print(Text.from_ansi(output))
