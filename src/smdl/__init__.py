"""SMDL — parser and serializer for nestable marker-delimited key/value text."""

import logging

from .attribute import Attribute
from .document import Document
from .errors import (
    DuplicateKey,
    IncorrectDepth,
    MissingAttribute,
    NestedParseError,
    NoParagraphs,
    NoValue,
    NumberFormatError,
    ParseError,
    SMDLError,
)
from .parser import create, parse, try_parse
from .scanner import detect_depth

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "parse",
    "try_parse",
    "create",
    "detect_depth",
    "Document",
    "Attribute",
    "SMDLError",
    "ParseError",
    "NoParagraphs",
    "IncorrectDepth",
    "DuplicateKey",
    "NestedParseError",
    "NoValue",
    "NumberFormatError",
    "MissingAttribute",
]
