"""Exceptions raised by the SMDL parser and accessors."""

from __future__ import annotations

from .syntax import marker_run


class SMDLError(Exception):
    """Base class for every error raised by this package."""


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

class ParseError(SMDLError):
    """Text could not be parsed into a Document."""


class NoParagraphs(ParseError):
    """No delimiter run of the required length was found.

    ``depth`` is ``None`` when the text contains no marker run at all.
    """

    def __init__(self, depth: int | None = None) -> None:
        self.depth = depth
        if depth is None:
            msg = "No paragraphs defined for a SMDL object"
        else:
            msg = (
                f"No paragraphs defined for a SMDL object in depth {depth} "
                f"({marker_run(depth)})"
            )
        super().__init__(msg)


class IncorrectDepth(ParseError):
    def __init__(self, expected: int, detected: int) -> None:
        self.expected = expected
        self.detected = detected
        super().__init__(f"Incorrect depth: expected {expected}, found {detected}")


class DuplicateKey(ParseError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Attribute key assigned multiple times: {key!r}")


class NestedParseError(ParseError):
    """An attribute value is absent or is not a document one level deeper."""


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------

class NoValue(SMDLError):
    """A typed accessor was used on a flag attribute."""


class NumberFormatError(SMDLError, ValueError):
    """The value is absent or is not a numeric literal of the requested kind."""


class MissingAttribute(SMDLError, KeyError):
    """A keyed read asked for a key the document does not have."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"No attribute with key {self.key!r}"
