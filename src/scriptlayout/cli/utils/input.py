"""Reading screenplay text for CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

from scriptlayout.exceptions import ScriptLayoutFileNotFoundError, ValidationError

STDIN_MARKER = "-"


def read_screenplay(source: Path | None) -> str:
    """Read screenplay text from a file, or stdin when source is None or '-'.

    Args:
        source: Path to a text file, ``-`` or None

    Returns:
        The full text of the screenplay

    Raises:
        ScriptLayoutFileNotFoundError: If the file does not exist
        ValidationError: If stdin was requested but nothing was piped in
    """
    if source is None or str(source) == STDIN_MARKER:
        if sys.stdin.isatty():
            raise ValidationError(
                message="No input provided",
                hint="Pass a file path or pipe screenplay text on stdin",
            )
        return sys.stdin.read()

    if not source.is_file():
        raise ScriptLayoutFileNotFoundError(source)
    return source.read_text(encoding="utf-8")
