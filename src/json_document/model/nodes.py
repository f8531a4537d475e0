"""Document variants and DocumentType StrEnum for the JSON document model.

A document is a strict tree built from exactly six frozen variants:

- JsonNull    : the JSON ``null`` literal
- JsonBoolean : ``true`` / ``false``
- JsonNumber  : integral or fractional number
- JsonString  : arbitrary text
- JsonArray   : ordered sequence of documents
- JsonObject  : string-keyed members in insertion order

``Document`` is the closed union of the six classes.  Consumers dispatch with
``isinstance`` and finish with ``typing.assert_never`` so a type checker flags
any site that forgets a variant.

No structural rule is checked at construction time.  A heterogeneous array is
accepted as is; see ``json_document.model.validator`` for the on-demand checks.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum, auto
from types import MappingProxyType
from typing import ClassVar

__all__ = [
    "Document",
    "DocumentType",
    "JsonArray",
    "JsonBoolean",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
]


class DocumentType(StrEnum):
    """Variant tag of a document node.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"
    - STRING  -> "string"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


@dataclass(frozen=True, slots=True)
class JsonNull:
    """The ``null`` literal.  Every instance compares equal to every other."""

    document_type: ClassVar[DocumentType] = DocumentType.NULL


@dataclass(frozen=True, slots=True)
class JsonBoolean:
    value: bool

    document_type: ClassVar[DocumentType] = DocumentType.BOOLEAN


@dataclass(frozen=True, slots=True)
class JsonNumber:
    """A number rendered with its own ``str()`` form (``37``, ``0.2``, ``1.0``)."""

    value: int | float | Decimal

    document_type: ClassVar[DocumentType] = DocumentType.NUMBER


@dataclass(frozen=True, slots=True)
class JsonString:
    value: str

    document_type: ClassVar[DocumentType] = DocumentType.STRING


@dataclass(frozen=True, slots=True)
class JsonArray:
    """Ordered sequence of documents.

    Attributes:
        elements: The children, frozen into a tuple at construction time.  Any
                  iterable is accepted; a list passed in can be mutated later
                  without affecting the array.
    """

    elements: tuple[Document, ...] = ()

    document_type: ClassVar[DocumentType] = DocumentType.ARRAY

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    @property
    def values(self) -> tuple[Document, ...]:
        """The elements in order.  Tuples are immutable, so no copy is needed."""
        return self.elements

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.elements)

    def map(self, transform: Callable[[Document], Document]) -> JsonArray:
        """Return a new array holding ``transform(element)`` for every element.

        Args:
            transform: Called once per element, in order.  Any exception it
                       raises propagates unchanged.

        Returns:
            A new ``JsonArray`` of the same length.  ``self`` is untouched.
        """
        return JsonArray(tuple(transform(element) for element in self.elements))

    def filter(self, predicate: Callable[[Document], bool]) -> JsonArray:
        """Return a new array with the elements for which ``predicate`` holds."""
        return JsonArray(
            tuple(element for element in self.elements if predicate(element))
        )


@dataclass(frozen=True, slots=True)
class JsonObject:
    """String-keyed members in insertion order.

    Attributes:
        members: Copied into a private dict at construction and exposed as a
                 read-only ``MappingProxyType``.  Keys are unique by
                 construction; insertion order drives serialization, while
                 equality ignores it (plain dict semantics).
    """

    members: Mapping[str, Document] = field(default_factory=dict)

    document_type: ClassVar[DocumentType] = DocumentType.OBJECT

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))

    @property
    def entries(self) -> Mapping[str, Document]:
        """Read-only view of the members; mutation attempts raise TypeError."""
        return self.members

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __getitem__(self, key: str) -> Document:
        return self.members[key]

    def filter(self, predicate: Callable[[str, Document], bool]) -> JsonObject:
        """Return a new object keeping the members for which ``predicate(key, value)`` holds.

        Survivors keep their relative insertion order.
        """
        return JsonObject(
            {key: value for key, value in self.members.items() if predicate(key, value)}
        )

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Document]]) -> JsonObject:
        """Build an object from ``(key, value)`` pairs; a repeated key keeps its last value."""
        return cls(dict(pairs))


Document = JsonNull | JsonBoolean | JsonNumber | JsonString | JsonArray | JsonObject
