"""Model subpackage: document variants, traversal and structural validation.

Re-exports the public API for the model module:
- Document: closed union of the six variants
- DocumentType: StrEnum tag carried by every variant
- JsonNull, JsonBoolean, JsonNumber, JsonString, JsonArray, JsonObject
- accept / walk: pre-order traversal
- validate / validate_objects / validate_arrays: structural checks
"""

from json_document.model.nodes import (
    Document,
    DocumentType,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
)
from json_document.model.traversal import accept, walk
from json_document.model.validator import validate, validate_arrays, validate_objects

__all__ = [
    "Document",
    "DocumentType",
    "JsonArray",
    "JsonBoolean",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "accept",
    "validate",
    "validate_arrays",
    "validate_objects",
    "walk",
]
