from __future__ import annotations

from cablegraph.extraction.cable_id_recognizer import find_cable_ids, iter_cable_ids


def test_finds_single_id_with_offset():
    text = "Cable A01-001-15-02 connects RACK-1 to SWITCH-3 via CAT6"
    matches = find_cable_ids(text)

    assert [m.cable_id for m in matches] == ["A01-001-15-02"]
    assert matches[0].offset == 6


def test_upper_cases_matches():
    matches = find_cable_ids("see n50-001-03-07 on deck")
    assert matches[0].cable_id == "N50-001-03-07"


def test_returns_all_matches_left_to_right():
    text = "N61-002-14-01 feeds N62-002-03A-11\nand again N61-002-14-01"
    ids = [m.cable_id for m in find_cable_ids(text)]

    assert ids == ["N61-002-14-01", "N62-002-03A-11", "N61-002-14-01"]


def test_two_letter_prefix():
    ids = [m.cable_id for m in find_cable_ids("run AB123-456-78-X1 to bridge")]
    assert ids == ["AB123-456-78-X1"]


def test_no_match_for_dates_and_plain_numbers():
    assert find_cable_ids("Rev 2024-01-15, sheet 12 of 40") == []


def test_malformed_input_yields_nothing():
    assert find_cable_ids("") == []
    assert find_cable_ids(None) == []
    assert list(iter_cable_ids(42)) == []


def test_iteration_is_restartable():
    text = "A01-001-15-02 and A01-001-15-03"
    assert list(iter_cable_ids(text)) == list(iter_cable_ids(text))
