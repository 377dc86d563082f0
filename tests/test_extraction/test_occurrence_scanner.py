from __future__ import annotations

from cablegraph.extraction.models import Page
from cablegraph.extraction.occurrence_scanner import (
    detect_ethernet_hint,
    detect_media,
    find_cable_occurrences,
    scan_page,
)


def test_detect_ethernet_hint():
    assert detect_ethernet_hint("RJ45 patch lead")
    assert detect_ethernet_hint("rj-45 socket")
    assert detect_ethernet_hint("ethernet trunk")
    assert not detect_ethernet_hint("24VDC supply to UPS-1")


def test_detect_media_uses_first_keyword_in_table_order():
    assert detect_media("CAT6a shielded") == "CAT6"
    assert detect_media("CAT5e patch") == "CAT5"
    assert detect_media("RJ-45 outlet") == "RJ45"
    assert detect_media("Ethernet trunk") == "Ethernet"
    assert detect_media("24VDC supply to UPS-1") == "Unknown"


def test_scan_page_builds_occurrences():
    page = Page(page_number=3, text="Panel A\nN50-001-03-07 CAT6 to RACK-2\nN50-001-03-08")
    occurrences = scan_page(page, "deck_a.pdf")

    assert [o.cable_id for o in occurrences] == ["N50-001-03-07", "N50-001-03-08"]
    first = occurrences[0]
    assert first.page_number == 3
    assert first.line_number == 1
    assert first.has_ethernet_hint is True
    assert first.media == "CAT6"
    assert first.document_name == "deck_a.pdf"
    assert "RACK-2" in first.context


def test_malformed_pages_yield_no_occurrences():
    assert scan_page(Page(page_number=1, text=None)) == []
    assert scan_page(Page(page_number=1, text=5)) == []
    assert scan_page(Page(page_number=1, text="")) == []


def test_find_cable_occurrences_keeps_page_order():
    pages = [
        Page(page_number=1, text="A01-001-15-02"),
        Page(page_number=2, text="nothing here"),
        Page(page_number=3, text="A01-001-15-03"),
    ]
    occurrences = find_cable_occurrences(pages)

    assert [(o.cable_id, o.page_number) for o in occurrences] == [
        ("A01-001-15-02", 1),
        ("A01-001-15-03", 3),
    ]
