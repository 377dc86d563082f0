"""Line-window context around a cable ID sighting."""

import re
from typing import List

from cablegraph.extraction.lexicon import CONTEXT_WINDOW_LINES
from cablegraph.extraction.models import ContextWindow

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> List[str]:
    return _LINE_BREAK.split(text) if text else []


def line_number_at(text: str, offset: int) -> int:
    """Zero-based index of the line containing ``offset``."""
    offset = max(0, min(offset, len(text)))
    return text.count("\n", 0, offset)


def extract_context(text: str, offset: int) -> ContextWindow:
    """Return the lines within ``CONTEXT_WINDOW_LINES`` of the line holding ``offset``.

    Args:
        text: Full page text
        offset: Character offset of the match

    Returns:
        ContextWindow with the clamped line range and its joined text
    """
    lines = split_lines(text)
    if not lines:
        return ContextWindow(line_number=0, lines=[], text="")

    line_number = line_number_at(text, offset)
    start = max(0, line_number - CONTEXT_WINDOW_LINES)
    end = min(len(lines) - 1, line_number + CONTEXT_WINDOW_LINES)
    window = lines[start : end + 1]

    return ContextWindow(line_number=line_number, lines=window, text="\n".join(window))
