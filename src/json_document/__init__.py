"""JSON document model - typed documents, validation and compact serialization."""

from __future__ import annotations

from json_document.api import convert, stringify, to_json, validate
from json_document.convert.config import ConverterConfig, UnsupportedPolicy
from json_document.convert.converter import DocumentConverter
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
from json_document.model.traversal import accept

__version__: str = "0.1.0"
__all__: list[str] = [
    "ConverterConfig",
    "Document",
    "DocumentConverter",
    "DocumentType",
    "JsonArray",
    "JsonBoolean",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "UnsupportedPolicy",
    "accept",
    "convert",
    "stringify",
    "to_json",
    "validate",
]
