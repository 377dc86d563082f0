"""Turn per-page text into cable ID occurrences with context and media hints."""

from __future__ import annotations

from typing import Iterable, List, Optional

from loguru import logger

from cablegraph.extraction.cable_id_recognizer import iter_cable_ids
from cablegraph.extraction.context_windower import extract_context
from cablegraph.extraction.lexicon import ETHERNET_HINT_PATTERNS, MEDIA_PATTERNS, UNKNOWN_MEDIA
from cablegraph.extraction.models import Occurrence, Page


def detect_ethernet_hint(context: str) -> bool:
    """True if any ethernet keyword (CAT6, RJ45, LAN, ...) appears in the context."""
    return any(pattern.search(context) for pattern in ETHERNET_HINT_PATTERNS)


def detect_media(context: str) -> str:
    """Media label of the first media keyword found, else ``Unknown``."""
    for pattern, label in MEDIA_PATTERNS:
        if pattern.search(context):
            return label
    return UNKNOWN_MEDIA


def scan_page(page: Page, document_name: Optional[str] = None) -> List[Occurrence]:
    """Build one Occurrence per cable ID match on the page."""
    text = page.text
    if not text:
        return []

    occurrences: List[Occurrence] = []
    for match in iter_cable_ids(text):
        window = extract_context(text, match.offset)
        occurrences.append(
            Occurrence(
                cable_id=match.cable_id,
                page_number=page.page_number,
                context=window.text,
                has_ethernet_hint=detect_ethernet_hint(window.text),
                media=detect_media(window.text),
                line_number=window.line_number,
                document_name=document_name,
            )
        )
    return occurrences


def find_cable_occurrences(
    pages: Iterable[Page], document_name: Optional[str] = None
) -> List[Occurrence]:
    """Scan pages in order and collect every cable ID occurrence."""
    occurrences: List[Occurrence] = []
    page_count = 0
    for page in pages:
        page_count += 1
        occurrences.extend(scan_page(page, document_name))

    logger.debug(
        "Scanned {} pages of {}: {} cable ID occurrences",
        page_count,
        document_name or "<unnamed>",
        len(occurrences),
    )
    return occurrences
