"""Screenplay line classification.

Lines are classified left to right with a single look-behind cursor
(:class:`ClassificationState`). Rules are tried in priority order and the
first match wins; anything unrecognized is action.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from scriptlayout.config import get_logger
from scriptlayout.formatter.models import ClassificationState, ClassifiedLine, LineKind

logger = get_logger(__name__)

SCENE_HEADING_PREFIXES = ("INT.", "EXT.", "INT./EXT.", "INT/EXT.", "I/E")
TRANSITION_PREFIXES = ("FADE IN", "FADE OUT", "DISSOLVE", "CUT TO")
TRANSITION_SUFFIX = "TO:"

# Kinds after which the next line is spoken, even across blank lines
CUE_KINDS = frozenset({LineKind.CHARACTER, LineKind.PARENTHETICAL})


def _is_scene_heading(stripped: str) -> bool:
    return stripped.upper().startswith(SCENE_HEADING_PREFIXES)


def _is_transition(stripped: str) -> bool:
    upper = stripped.upper()
    return upper.startswith(TRANSITION_PREFIXES) or upper.endswith(TRANSITION_SUFFIX)


def _is_parenthetical(stripped: str) -> bool:
    return stripped.startswith("(") and stripped.endswith(")")


def _is_character_cue(stripped: str) -> bool:
    return bool(stripped) and stripped == stripped.upper() and ":" not in stripped


def _follows_cue(state: ClassificationState) -> bool:
    if state.previous_kind in CUE_KINDS:
        return True
    # Multi-line speech continues until a blank line ends it
    return state.previous_kind == LineKind.DIALOGUE and not state.blank_since_previous


def _kind_for(stripped: str, state: ClassificationState) -> LineKind:
    if not stripped:
        return LineKind.EMPTY
    if _is_scene_heading(stripped):
        return LineKind.SCENE_HEADING
    if _is_transition(stripped):
        return LineKind.TRANSITION
    if _is_parenthetical(stripped):
        return LineKind.PARENTHETICAL
    if _is_character_cue(stripped):
        return LineKind.CHARACTER
    if _follows_cue(state):
        return LineKind.DIALOGUE
    return LineKind.ACTION


def normalize(kind: LineKind, line: str) -> str:
    """Apply the kind-specific canonical form to a raw line.

    Scene headings and transitions are trimmed and upper-cased; every other
    kind keeps the raw text verbatim.
    """
    if kind in (LineKind.SCENE_HEADING, LineKind.TRANSITION):
        return line.strip().upper()
    return line


def classify_line(
    line: str, state: ClassificationState
) -> tuple[ClassifiedLine, ClassificationState]:
    """Classify one line and advance the look-behind cursor.

    Args:
        line: Raw line of screenplay text
        state: Cursor produced by the previous line

    Returns:
        Tuple of (classified line, cursor for the next line)
    """
    stripped = line.strip()
    kind = _kind_for(stripped, state)

    if kind == LineKind.EMPTY:
        next_state = ClassificationState(
            previous_kind=state.previous_kind, blank_since_previous=True
        )
    else:
        next_state = ClassificationState(previous_kind=kind)

    return ClassifiedLine(kind, line, normalize(kind, line)), next_state


def classify(lines: Iterable[str]) -> list[ClassifiedLine]:
    """Classify a sequence of raw lines.

    Classification is total: every line maps to exactly one kind and
    unrecognized text becomes action.

    Args:
        lines: Raw screenplay lines in document order

    Returns:
        One ClassifiedLine per input line, in the same order

    Raises:
        TypeError: If ``lines`` is a single string; use :func:`classify_text`
            for whole documents
    """
    if isinstance(lines, str):
        raise TypeError("classify() takes a sequence of lines; use classify_text()")

    state = ClassificationState()
    classified: list[ClassifiedLine] = []
    for line in lines:
        result, state = classify_line(line, state)
        classified.append(result)

    counts = Counter(line.kind.value for line in classified)
    logger.debug("Classified screenplay lines", total=len(classified), **counts)
    return classified


def classify_text(text: str) -> list[ClassifiedLine]:
    """Split a whole document into lines and classify them.

    Any newline convention is accepted. A single trailing newline does not
    produce an extra empty line.
    """
    return classify(text.splitlines())
