"""Tests for marker-run scanning."""

import pytest

from smdl.errors import NoParagraphs
from smdl.scanner import (
    MarkerRun,
    detect_depth,
    find_delimiters,
    iter_marker_runs,
    split_segments,
)
from smdl.syntax import indent, marker_run


# ---------------------------------------------------------------------------
# syntax helpers
# ---------------------------------------------------------------------------

def test_marker_run_length():
    assert marker_run(0) == "&"
    assert marker_run(2) == "&&&"

def test_indent():
    assert indent(0) == ""
    assert indent(2) == "    "


# ---------------------------------------------------------------------------
# iter_marker_runs
# ---------------------------------------------------------------------------

def test_runs_are_maximal():
    runs = list(iter_marker_runs("& a && b &&& c"))
    assert [r.length for r in runs] == [1, 2, 3]

def test_runs_positions():
    assert list(iter_marker_runs("x&&y")) == [MarkerRun(1, 3)]

def test_no_runs():
    assert list(iter_marker_runs("plain text")) == []

def test_escaped_run():
    text = "a \\&& b"
    run = next(iter_marker_runs(text))
    assert run.escaped_in(text)

def test_run_at_start_not_escaped():
    text = "& a"
    assert not next(iter_marker_runs(text)).escaped_in(text)


# ---------------------------------------------------------------------------
# detect_depth
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text, depth", [
    ("& a", 0),
    ("&& a", 1),
    ("  &&&& a", 3),
    ("prefix && a & b", 1),
])
def test_detect_depth(text, depth):
    assert detect_depth(text) == depth

def test_detect_depth_uses_first_run_only():
    assert detect_depth("&&& a && b & c") == 2

def test_detect_depth_no_marker():
    with pytest.raises(NoParagraphs) as exc_info:
        detect_depth("hello world")
    assert exc_info.value.depth is None


# ---------------------------------------------------------------------------
# find_delimiters
# ---------------------------------------------------------------------------

def test_delimiters_exact_length_only():
    text = "& a: && x && y\n& b"
    runs = find_delimiters(text, 0)
    assert [text[r.start:r.end] for r in runs] == ["&", "&"]

def test_delimiters_skip_escaped():
    text = "& a: one \\& two\n& b"
    assert len(find_delimiters(text, 0)) == 2

def test_delimiters_adjacent_content():
    # the boundary character after one delimiter can precede the next
    text = "&x&y"
    assert [r.start for r in find_delimiters(text, 0)] == [0, 2]


# ---------------------------------------------------------------------------
# split_segments
# ---------------------------------------------------------------------------

def test_split_segments_basic():
    assert split_segments("& a\n& b: 1", 0) == [" a\n", " b: 1"]

def test_split_segments_keeps_deeper_runs():
    segments = split_segments("& n: && x && y\n& m", 0)
    assert segments == [" n: && x && y\n", " m"]

def test_split_segments_drops_leading_text():
    assert split_segments("lead & a", 0) == [" a"]

def test_split_segments_single_char_segments():
    assert split_segments("&x&y", 0) == ["x", "y"]

def test_split_segments_wrong_depth():
    with pytest.raises(NoParagraphs) as exc_info:
        split_segments("&& a", 0)
    assert exc_info.value.depth == 0
    assert "(&)" in str(exc_info.value)

def test_split_segments_only_escaped():
    with pytest.raises(NoParagraphs):
        split_segments("\\& a", 0)

def test_split_segments_trailing_delimiter():
    # no boundary character after the last run: its last marker is the segment
    assert split_segments("& a &", 0) == [" a ", "&"]

def test_split_segments_bare_delimiter():
    assert split_segments("&", 0) == ["&"]
    assert split_segments("&&", 1) == ["&"]
