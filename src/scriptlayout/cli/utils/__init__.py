"""Shared helpers for scriptlayout CLI commands."""

from __future__ import annotations

from scriptlayout.cli.utils.error_handler import handle_cli_error
from scriptlayout.cli.utils.input import read_screenplay

__all__ = ["handle_cli_error", "read_screenplay"]
