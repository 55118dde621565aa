"""Tests for CLI output formatters and helpers."""

import json

import pytest
import typer

from scriptlayout.cli.formatters import (
    ClassificationFormatter,
    JsonFormatter,
    OutputFormat,
    PageSummaryFormatter,
)
from scriptlayout.cli.utils import handle_cli_error, read_screenplay
from scriptlayout.exceptions import (
    ScriptLayoutError,
    ScriptLayoutFileNotFoundError,
)
from scriptlayout.formatter import classify, classify_text, paginate


class TestClassificationFormatter:
    """Test classified-line output."""

    def test_text(self):
        """Test aligned kind/text pairs."""
        output = ClassificationFormatter().format(
            classify(["JOHN", "Hi."]), OutputFormat.TEXT
        )
        assert output.splitlines() == ["character      JOHN", "dialogue       Hi."]

    def test_json(self):
        """Test JSON carries kind values."""
        output = ClassificationFormatter().format(
            classify(["FADE IN:"]), OutputFormat.JSON
        )
        assert json.loads(output) == [
            {"kind": "transition", "text": "FADE IN:", "normalized_text": "FADE IN:"}
        ]

    def test_table_escapes_markup(self):
        """Test bracketed text is shown literally, not as console markup."""
        output = ClassificationFormatter().format(classify(["[bold]loud[/bold]"]))
        assert "[bold]loud[/bold]" in output


class TestPageSummaryFormatter:
    """Test page summary output."""

    def test_text(self, letter_geometry, sample_screenplay):
        """Test one summary row per page."""
        pages = paginate(classify_text(sample_screenplay), letter_geometry)
        output = PageSummaryFormatter().format(pages, OutputFormat.TEXT)
        assert output == "page 1: 7 lines, 1.60in"

    def test_empty_page(self, letter_geometry):
        """Test the single empty page of an empty screenplay."""
        output = PageSummaryFormatter().format(
            paginate([], letter_geometry), OutputFormat.TEXT
        )
        assert output == "page 1: 0 lines, 0.00in"


class TestJsonFormatter:
    """Test the generic JSON formatter."""

    def test_scalar_wrapped(self):
        """Test scalars are wrapped in an object."""
        assert json.loads(JsonFormatter().format(3)) == {"value": 3}

    def test_error_response(self):
        """Test error documents."""
        data = json.loads(JsonFormatter().format_error_response("nope", code=2))
        assert data == {"success": False, "error": "nope", "code": 2}


class TestReadScreenplay:
    """Test reading screenplay input."""

    def test_reads_file(self, screenplay_file, sample_screenplay):
        """Test files are read as UTF-8 text."""
        assert read_screenplay(screenplay_file) == sample_screenplay

    def test_missing_file(self, tmp_path):
        """Test a missing file raises a helpful error."""
        with pytest.raises(ScriptLayoutFileNotFoundError) as exc_info:
            read_screenplay(tmp_path / "missing.txt")
        assert exc_info.value.details == {"path": str(tmp_path / "missing.txt")}


class TestHandleCliError:
    """Test CLI error reporting."""

    def test_exits_with_code(self):
        """Test errors always end in typer.Exit."""
        with pytest.raises(typer.Exit) as exc_info:
            handle_cli_error(ScriptLayoutError("broken", hint="fix it"), exit_code=3)
        assert exc_info.value.exit_code == 3

    def test_json_output(self, capsys):
        """Test JSON mode prints an error document on stdout."""
        with pytest.raises(typer.Exit):
            handle_cli_error(ValueError("bad value"), json_output=True)
        data = json.loads(capsys.readouterr().out)
        assert data["error"] == "bad value"
        assert data["success"] is False
