"""Regex-based cable identifier recognizer."""

from typing import Any, Iterator, List

from cablegraph.extraction.lexicon import CABLE_ID_PATTERN
from cablegraph.extraction.models import CableIdMatch


def iter_cable_ids(text: Any) -> Iterator[CableIdMatch]:
    """Yield every cable ID in ``text`` left-to-right, upper-cased, with its offset.

    The pattern is deliberately permissive; incidental numeric strings that look
    like IDs are returned too and get low confidence further down the pipeline.
    """
    if not isinstance(text, str) or not text:
        return

    for match in CABLE_ID_PATTERN.finditer(text):
        yield CableIdMatch(cable_id=match.group(1).upper(), offset=match.start(1))


def find_cable_ids(text: Any) -> List[CableIdMatch]:
    """Eager variant of :func:`iter_cable_ids`."""
    return list(iter_cable_ids(text))
