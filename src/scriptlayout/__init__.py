"""scriptlayout: screenplay line classification and pagination.

Raw screenplay text is classified line by line into structural roles
(scene headings, character cues, parentheticals, transitions, dialogue,
action) and laid out onto pages following screenplay conventions.
"""

__version__ = "0.1.0"

from .exceptions import (  # noqa: E402
    ConfigurationError,
    GeometryError,
    ScriptLayoutError,
    ValidationError,
)
from .formatter import (  # noqa: E402
    ClassificationState,
    ClassifiedLine,
    LineKind,
    Page,
    PageGeometry,
    PlacedLine,
    classify,
    classify_line,
    classify_text,
    paginate,
)

__all__ = [
    "ClassificationState",
    "ClassifiedLine",
    "ConfigurationError",
    "GeometryError",
    "LineKind",
    "Page",
    "PageGeometry",
    "PlacedLine",
    "ScriptLayoutError",
    "ValidationError",
    "__version__",
    "classify",
    "classify_line",
    "classify_text",
    "paginate",
]
