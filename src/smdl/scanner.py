"""Marker-run scanning: depth detection and delimiter splitting.

A depth-``D`` body is a sequence of segments separated by runs of exactly
``D + 1`` marker characters.  Longer runs belong to documents nested in a
value, and a run directly preceded by the escape character is literal text,
so neither of those separates segments at depth ``D``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import NoParagraphs
from .syntax import ESCAPE, MARKER

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# MarkerRun
# ---------------------------------------------------------------------------

@dataclass(slots=True, frozen=True)
class MarkerRun:
    """A maximal run of marker characters, ``text[start:end]``."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def depth(self) -> int:
        return self.length - 1

    def escaped_in(self, text: str) -> bool:
        return self.start > 0 and text[self.start - 1] == ESCAPE


def iter_marker_runs(text: str) -> Iterator[MarkerRun]:
    """Yield every maximal marker run in *text*, left to right."""
    i = 0
    n = len(text)
    while i < n:
        if text[i] != MARKER:
            i += 1
            continue
        start = i
        while i < n and text[i] == MARKER:
            i += 1
        yield MarkerRun(start, i)


# ---------------------------------------------------------------------------
# Depth detection
# ---------------------------------------------------------------------------

def detect_depth(text: str) -> int:
    """Return the depth encoded by the first marker run in *text*.

    Only the first run is inspected, escaped or not; whether the rest of
    the text is a valid body at that depth is decided later by
    :func:`split_segments`.
    """
    first = next(iter_marker_runs(text), None)
    if first is None:
        raise NoParagraphs()
    return first.depth


# ---------------------------------------------------------------------------
# Delimiters / segments
# ---------------------------------------------------------------------------

def find_delimiters(text: str, depth: int) -> list[MarkerRun]:
    """Runs of exactly ``depth + 1`` markers that are not escaped."""
    return [
        run
        for run in iter_marker_runs(text)
        if run.length == depth + 1 and not run.escaped_in(text)
    ]


def split_segments(text: str, depth: int) -> list[str]:
    """Split a depth-*depth* body into raw attribute segments.

    Whatever precedes the first delimiter is not part of any segment.
    Each segment is the text between one delimiter and the next; the last
    one runs to the end of *text*.  A delimiter that ends the text has no
    boundary character after it, so its segment is its own last marker.

    Raises :class:`NoParagraphs` when *text* has no delimiter at *depth*.
    """
    delimiters = find_delimiters(text, depth)
    if not delimiters:
        raise NoParagraphs(depth)

    segments = [
        text[current.end:following.start]
        for current, following in zip(delimiters, delimiters[1:])
    ]
    last = delimiters[-1]
    start = last.end - 1 if last.end == len(text) else last.end
    segments.append(text[start:])

    logger.debug("Split depth %d body into %d segments", depth, len(segments))
    return segments
