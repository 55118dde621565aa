"""scriptlayout CLI commands."""

from __future__ import annotations

from scriptlayout.cli.commands.classify import classify_command
from scriptlayout.cli.commands.paginate import paginate_command
from scriptlayout.cli.commands.render import render_command

__all__ = [
    "classify_command",
    "paginate_command",
    "render_command",
]
