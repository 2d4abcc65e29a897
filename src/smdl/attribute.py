"""Attribute — one ``key`` or ``key: value`` entry of a Document."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from .errors import NestedParseError, NoValue, NumberFormatError, ParseError
from .syntax import KEY_SEPARATOR

if TYPE_CHECKING:
    from .document import Document

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")
_DECIMAL_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


@dataclass(frozen=True)
class Attribute:
    """A key with an optional raw value.

    ``depth`` is the depth of the owning Document; a value that decodes as a
    nested Document lives at ``depth + 1``.  It takes no part in equality.
    Typed accessors decode ``value`` afresh on every call.
    """

    key: str
    value: str | None = None
    depth: int = field(default=0, compare=False)

    @classmethod
    def from_segment(cls, segment: str, depth: int) -> Attribute:
        """Build an attribute from raw segment text.

        The segment is split on its first ``:``.  Key and value are trimmed
        and a blank value becomes a flag (``value is None``).
        """
        key, sep, rest = segment.partition(KEY_SEPARATOR)
        if not sep:
            return cls(segment.strip(), None, depth)
        value = rest.strip()
        return cls(key.strip(), value or None, depth)

    # -- Raw value --------------------------------------------------------

    def has_value(self) -> bool:
        return self.value is not None

    def string_value(self) -> str:
        if self.value is None:
            raise NoValue(f"Attribute {self.key!r} has no value")
        return self.value

    def try_string_value(self) -> str | None:
        return self.value

    # -- Numbers ----------------------------------------------------------

    def decimal_value(self) -> Decimal:
        if self.value is None or not _DECIMAL_RE.match(self.value):
            raise NumberFormatError(
                f"Attribute {self.key!r} is not a decimal: {self.value!r}"
            )
        try:
            return Decimal(self.value)
        except InvalidOperation as exc:
            raise NumberFormatError(
                f"Attribute {self.key!r} is not a decimal: {self.value!r}"
            ) from exc

    def try_decimal_value(self) -> Decimal | None:
        try:
            return self.decimal_value()
        except NumberFormatError:
            return None

    def integer_value(self) -> int:
        if self.value is None or not _INTEGER_RE.match(self.value):
            raise NumberFormatError(
                f"Attribute {self.key!r} is not an integer: {self.value!r}"
            )
        return int(self.value)

    def try_integer_value(self) -> int | None:
        try:
            return self.integer_value()
        except NumberFormatError:
            return None

    # -- Nested documents -------------------------------------------------

    def document_value(self) -> Document:
        """Parse the value as a Document at ``depth + 1``.

        Raises :class:`NestedParseError` when the value is absent or is not
        a body at that depth.
        """
        from .parser import parse

        if self.value is None:
            raise NestedParseError(f"Attribute {self.key!r} has no value")
        try:
            return parse(self.value, self.depth + 1)
        except ParseError as exc:
            raise NestedParseError(
                f"Attribute {self.key!r} is not a depth {self.depth + 1} document: {exc}"
            ) from exc

    def try_document_value(self) -> Document | None:
        try:
            return self.document_value()
        except NestedParseError as exc:
            logger.debug("%s", exc)
            return None

    # -- Rendering --------------------------------------------------------

    def render(self, depth: int | None = None) -> str:
        """Render as ``key`` or ``key: value``.

        A value that decodes as a nested Document is rendered through it at
        ``depth + 1``, so it gets the longer marker run and deeper indent.
        """
        if depth is None:
            depth = self.depth
        if self.value is None:
            return self.key

        nested = self.try_document_value()
        if nested is not None:
            return f"{self.key}: {nested.render(depth + 1)}"
        return f"{self.key}: {self.value}"

    def __str__(self) -> str:
        return self.render(0)
