"""Entry points: parse, try_parse, create."""

from __future__ import annotations

import logging

from .attribute import Attribute
from .document import Document
from .errors import DuplicateKey, IncorrectDepth, ParseError
from .scanner import detect_depth, split_segments

logger = logging.getLogger(__name__)


def parse(text: str, depth: int | None = None) -> Document:
    """Parse SMDL *text* into a Document.

    The depth is read from the first marker run.  When *depth* is given the
    detected depth must match it, otherwise :class:`IncorrectDepth` is
    raised.  The returned Document records the depth it was parsed at.

    Raises:
        NoParagraphs: no delimiter run of the detected length.
        IncorrectDepth: detected depth differs from *depth*.
        DuplicateKey: two segments share a key.
    """
    detected = detect_depth(text)
    if depth is not None and depth != detected:
        raise IncorrectDepth(depth, detected)

    doc = Document(depth=detected)
    for segment in split_segments(text.strip(), detected):
        attribute = Attribute.from_segment(segment, detected)
        if not doc.add(attribute):
            raise DuplicateKey(attribute.key)

    logger.debug("Parsed depth %d document with %d attributes", detected, len(doc))
    return doc


def try_parse(text: str | None) -> Document | None:
    """Like :func:`parse`, but returns ``None`` instead of raising."""
    if text is None:
        return None
    try:
        return parse(text)
    except ParseError:
        return None


def create() -> Document:
    """Return a new, empty root Document."""
    return Document()
