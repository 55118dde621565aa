"""Exceptions raised by scriptlayout.

Every error carries a one-line message, an optional hint telling the user
what to change, and optional details for debugging. The CLI prints the
message and hint; ``--verbose`` adds the details.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class ScriptLayoutError(Exception):
    """Base class for all scriptlayout errors."""

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Render message, hint and details as a multi-line string."""
        lines = [f"Error: {self.message}"]
        if self.hint:
            lines.append(f"Hint: {self.hint}")
        if self.details:
            lines.append("Details:")
            lines.extend(f"  {key}: {value}" for key, value in self.details.items())
        return "\n".join(lines)


class ConfigurationError(ScriptLayoutError):
    """A settings file or value that cannot be used."""


class GeometryError(ScriptLayoutError):
    """Page geometry that cannot hold a screenplay layout."""


class ValidationError(ScriptLayoutError):
    """Input that is well-formed but not acceptable, such as an unknown theme."""


class ScriptLayoutFileNotFoundError(ScriptLayoutError):
    """An input file that does not exist."""

    def __init__(self, path: Path | str, what: str = "Screenplay file") -> None:
        self.path = Path(path)
        super().__init__(
            message=f"{what} not found: {path}",
            hint="Check that the file path is correct",
            details={"path": str(path)},
        )


# Keys people tend to write in config files, mapped to the real setting
MISSPELLED_CONFIG_KEYS = {
    "margin": "margin_inches",
    "page_height": "page_height_inches",
    "page_width": "page_width_inches",
    "line_height": "line_height_inches",
    "theme": "html_theme",
}


def check_config_keys(config: dict[str, Any]) -> None:
    """Reject configuration keys that are near misses of real settings.

    Unknown keys are otherwise ignored, so a misspelled geometry key would
    silently fall back to the default.

    Raises:
        ConfigurationError: Naming the key that should have been used
    """
    for key in config:
        correct = MISSPELLED_CONFIG_KEYS.get(key)
        if correct is None:
            continue
        raise ConfigurationError(
            message=f"Invalid configuration key '{key}'",
            hint=f"Use '{correct}' instead of '{key}'",
            details={
                "found_keys": list(config),
                "invalid_key": key,
                "correct_key": correct,
            },
        )
