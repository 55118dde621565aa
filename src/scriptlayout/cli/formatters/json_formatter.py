"""JSON output for CLI commands."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any

from scriptlayout.cli.formatters.base import OutputFormat, OutputFormatter


class JsonFormatter(OutputFormatter[Any]):
    """Serializes command results, including layout dataclasses, as JSON."""

    default_format = OutputFormat.JSON

    def to_jsonable(self, data: Any) -> Any:
        """Convert dataclasses (and lists of them) into plain structures.

        Line kinds are ``str`` enums and serialize as their values.
        """
        if is_dataclass(data) and not isinstance(data, type):
            return asdict(data)
        if isinstance(data, list | tuple):
            return [self.to_jsonable(item) for item in data]
        return data

    def format(
        self,
        data: Any,
        format_type: OutputFormat | None = None,  # noqa: ARG002
    ) -> str:
        """Indented JSON for ``data``; scalars are wrapped as ``{"value": ...}``."""
        payload = self.to_jsonable(data)
        if not isinstance(payload, dict | list):
            payload = {"value": payload}
        return json.dumps(payload, default=str, indent=2)

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """JSON document reporting a failed command."""
        return json.dumps(
            {"success": False, "error": str(error), "code": code}, indent=2
        )
