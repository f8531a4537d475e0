"""Pre-order traversal over a document tree.

``accept`` calls the visitor on a node before any of its children, children
in element order (arrays) or insertion order (objects).  Scalars are leaves.
Each call starts a fresh walk; no cursor state outlives it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import assert_never

from json_document.model.nodes import (
    Document,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
)

__all__ = ["accept", "walk"]


def accept(document: Document, visitor: Callable[[Document], None]) -> None:
    """Invoke ``visitor`` once on every node of ``document`` in pre-order.

    Args:
        document: Root of the tree to walk.
        visitor:  Callback receiving each node.  Exceptions it raises abort the
                  walk and propagate to the caller.
    """
    for node in walk(document):
        visitor(node)


def walk(document: Document) -> Iterator[Document]:
    """Yield every node of ``document`` in pre-order.

    Uses an explicit stack so deep trees do not hit the recursion limit.
    Children are pushed in reverse so they pop in their natural order.
    """
    stack: list[Document] = [document]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, JsonArray):
            stack.extend(reversed(node.values))
        elif isinstance(node, JsonObject):
            stack.extend(reversed(tuple(node.entries.values())))
        elif isinstance(node, (JsonNull, JsonBoolean, JsonNumber, JsonString)):
            continue
        else:
            assert_never(node)
