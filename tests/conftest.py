"""Pytest configuration and fixtures."""

import logging
import os

import pytest
from structlog.stdlib import ProcessorFormatter

from scriptlayout.config import reset_settings
from scriptlayout.formatter.models import DEFAULT_INDENTS, PageGeometry

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import cli_invoke, runner  # noqa: F401

SAMPLE_SCREENPLAY = """\
INT. OFFICE - DAY

Alice sits at her desk.
ALICE
(whispering)
Is anyone there?
FADE OUT.
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def _structlog_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if isinstance(h.formatter, ProcessorFormatter)]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop SCRIPTLAYOUT_ variables, cached settings and stray log handlers."""
    for var in [k for k in os.environ if k.startswith("SCRIPTLAYOUT_")]:
        monkeypatch.delenv(var, raising=False)
    root_logger = logging.getLogger()
    original_handlers = _structlog_handlers(root_logger)
    original_level = root_logger.level
    reset_settings()
    yield
    reset_settings()
    # Handlers installed by a CLI run may point at a closed stream
    for handler in _structlog_handlers(root_logger):
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in original_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


@pytest.fixture
def letter_geometry() -> PageGeometry:
    """US letter geometry with conventional screenplay indents."""
    return PageGeometry.letter()


@pytest.fixture
def make_geometry():
    """Build a geometry whose usable height holds ``rows`` one-inch rows.

    One-inch rows keep the arithmetic exact: body lines are 1.0 high and
    scene headings and transitions are 1.5 high.
    """

    def _make(rows: int) -> PageGeometry:
        return PageGeometry(
            margin_inches=1.0,
            page_height_inches=rows + 2.0,
            line_height_inches=1.0,
            indents=dict(DEFAULT_INDENTS),
        )

    return _make


@pytest.fixture
def sample_screenplay() -> str:
    """A short scene exercising every line kind."""
    return SAMPLE_SCREENPLAY


@pytest.fixture
def screenplay_file(tmp_path, sample_screenplay):
    """The sample scene written to a text file."""
    path = tmp_path / "office.txt"
    path.write_text(sample_screenplay, encoding="utf-8")
    return path
