"""Document — an ordered, key-unique collection of attributes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal

from .attribute import Attribute
from .errors import MissingAttribute
from .syntax import LINE_SEPARATOR, indent, marker_run


@dataclass(eq=False)
class Document:
    """Attributes of one document at a known nesting ``depth`` (root = 0).

    Attributes are kept in a single insertion-ordered dict keyed by
    attribute key, so order and lookup can never disagree.
    """

    depth: int = 0
    _attributes: dict[str, Attribute] = field(
        default_factory=dict, init=False, repr=False
    )

    # -- Mutation -------------------------------------------------------

    def add(self, attribute: Attribute) -> bool:
        """Insert *attribute* unless its key is taken.  Returns False on a clash."""
        if attribute.key in self._attributes:
            return False
        self._attributes[attribute.key] = attribute
        return True

    def set(self, key: str, value: object = None) -> None:
        """Assign *value* to *key*, replacing any existing attribute.

        Key and value are trimmed as parsing trims them.  Non-string values
        are converted with ``str()``; a blank string becomes a flag.  A value
        that parses as a document of any depth is re-rendered one level below
        this document, so the stored text carries the marker runs of its real
        position.
        """
        from .parser import try_parse

        key = key.strip()
        self.remove(key)

        text = None if value is None else str(value).strip()
        if not text:
            text = None

        nested = try_parse(text)
        if nested is not None:
            text = nested.render(self.depth + 1).strip()

        self._attributes[key] = Attribute(key, text, self.depth)

    def remove(self, key: str) -> bool:
        return self._attributes.pop(key, None) is not None

    # -- Lookup ---------------------------------------------------------

    def get_attribute(self, key: str) -> Attribute | None:
        return self._attributes.get(key)

    def has(self, key: str) -> bool:
        return key in self._attributes

    def attributes(self) -> list[Attribute]:
        """Snapshot of the attributes in insertion order."""
        return list(self._attributes.values())

    def keys(self) -> list[str]:
        return list(self._attributes)

    def _require(self, key: str) -> Attribute:
        try:
            return self._attributes[key]
        except KeyError:
            raise MissingAttribute(key) from None

    # -- Typed reads ----------------------------------------------------

    def get_string(self, key: str) -> str:
        return self._require(key).string_value()

    def try_get_string(self, key: str) -> str | None:
        attr = self._attributes.get(key)
        return attr.try_string_value() if attr is not None else None

    def get_decimal(self, key: str) -> Decimal:
        return self._require(key).decimal_value()

    def try_get_decimal(self, key: str) -> Decimal | None:
        attr = self._attributes.get(key)
        return attr.try_decimal_value() if attr is not None else None

    def get_float(self, key: str) -> float:
        return float(self.get_decimal(key))

    def get_integer(self, key: str) -> int:
        return self._require(key).integer_value()

    def try_get_integer(self, key: str) -> int | None:
        attr = self._attributes.get(key)
        return attr.try_integer_value() if attr is not None else None

    def get_document(self, key: str) -> Document:
        return self._require(key).document_value()

    def try_get_document(self, key: str) -> Document | None:
        attr = self._attributes.get(key)
        return attr.try_document_value() if attr is not None else None

    # -- Rendering ------------------------------------------------------

    def render(self, depth: int | None = None) -> str:
        """Render as SMDL text at *depth* (defaults to this document's depth).

        Nested bodies start on a new line, each attribute on its own line
        as ``<indent><marker run> <attribute>``.
        """
        if depth is None:
            depth = self.depth

        parts: list[str] = []
        if depth > 0:
            parts.append(LINE_SEPARATOR)
        for attribute in self._attributes.values():
            parts.append(
                f"{indent(depth)}{marker_run(depth)} {attribute.render(depth)}"
                f"{LINE_SEPARATOR}"
            )
        return "".join(parts).rstrip()

    def __str__(self) -> str:
        return self.render()

    # -- Container protocol ---------------------------------------------

    def __len__(self) -> int:
        return len(self._attributes)

    def __contains__(self, key: object) -> bool:
        return key in self._attributes

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self.attributes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._attributes == other._attributes
