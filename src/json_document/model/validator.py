"""Structural checks over a document tree.

Two rules, each checked independently at every node of the tree:

- Object key uniqueness: no JsonObject holds the same key twice.  Keys are
  compared per object, so sibling objects sharing a key are both valid.
- Array homogeneity: all elements of a non-empty JsonArray share the first
  element's DocumentType.  JsonNull is its own tag, so ``[null, 1]`` fails.

Neither rule is enforced when documents are built; serialization and the
map/filter transforms work on invalid trees too.
"""

from __future__ import annotations

from loguru import logger

from json_document.model.nodes import Document, JsonArray, JsonObject
from json_document.model.traversal import accept

__all__ = ["validate", "validate_arrays", "validate_objects"]


def validate(document: Document) -> bool:
    """Return True iff every object has unique keys and every array is homogeneous."""
    return validate_objects(document) and validate_arrays(document)


def validate_objects(document: Document) -> bool:
    """Return True iff no JsonObject in the tree repeats a key.

    Walks the full tree so every nested object is inspected, not only the root.
    """
    is_valid = True

    def visit(node: Document) -> None:
        nonlocal is_valid
        if isinstance(node, JsonObject):
            keys = list(node.entries.keys())
            if len(set(keys)) != len(keys):
                logger.debug(f"Duplicate keys in object with members {keys}")
                is_valid = False

    accept(document, visit)
    return is_valid


def validate_arrays(document: Document) -> bool:
    """Return True iff every non-empty JsonArray in the tree is homogeneous."""
    is_valid = True

    def visit(node: Document) -> None:
        nonlocal is_valid
        if isinstance(node, JsonArray) and len(node) > 0:
            first_type = node.values[0].document_type
            if not all(element.document_type == first_type for element in node.values):
                tags = [element.document_type.value for element in node.values]
                logger.debug(f"Mixed element types in array: {tags}")
                is_valid = False

    accept(document, visit)
    return is_valid
