from __future__ import annotations

from cablegraph.extraction.context_windower import extract_context, line_number_at

LINES = [f"L{i}" for i in range(10)]
TEXT = "\n".join(LINES)


def _offset_of_line(index: int) -> int:
    return TEXT.index(f"L{index}")


def test_window_spans_three_lines_each_side():
    window = extract_context(TEXT, _offset_of_line(5))

    assert window.line_number == 5
    assert window.lines == ["L2", "L3", "L4", "L5", "L6", "L7", "L8"]
    assert window.text == "L2\nL3\nL4\nL5\nL6\nL7\nL8"


def test_window_clamped_at_start():
    window = extract_context(TEXT, _offset_of_line(1))
    assert window.lines == ["L0", "L1", "L2", "L3", "L4"]


def test_window_clamped_at_end():
    window = extract_context(TEXT, _offset_of_line(9))
    assert window.lines == ["L6", "L7", "L8", "L9"]


def test_crlf_line_breaks():
    text = "a\r\nb\r\nN50-001-03-07"
    offset = text.index("N50")

    assert line_number_at(text, offset) == 2
    window = extract_context(text, offset)
    assert window.lines == ["a", "b", "N50-001-03-07"]


def test_empty_text():
    window = extract_context("", 0)
    assert window.lines == []
    assert window.text == ""


def test_is_deterministic():
    assert extract_context(TEXT, 17) == extract_context(TEXT, 17)
