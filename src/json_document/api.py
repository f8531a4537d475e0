"""Public API functions for json-document-model.

This module provides the user-facing functions: convert, validate, stringify
and to_json.  Each call creates fresh collaborators (a new DocumentConverter,
a new sink tree) to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from typing import Any

from json_document.convert.config import ConverterConfig
from json_document.convert.converter import DocumentConverter
from json_document.model.nodes import Document
from json_document.model.validator import validate as _validate
from json_document.output.serializer import stringify as _stringify

__all__ = ["convert", "stringify", "to_json", "validate"]


def convert(value: Any, config: ConverterConfig | None = None) -> Document:
    """Convert a native Python value into a Document.

    Args:
        value:  None, bool, number, str, Enum member, sequence, str-keyed
                mapping, dataclass or plain object (recursively).
        config: Converter settings.  Defaults to ``ConverterConfig()`` when None.

    Returns:
        The Document tree mirroring ``value``; record fields keep their
        declared order.

    Raises:
        ValueError: ``"Map keys must be Strings"`` when a mapping has a
            non-str key.
        TypeError:  When an unsupported shape is met under the RAISE policy.
    """
    return DocumentConverter(config=config).convert(value)


def validate(document: Document) -> bool:
    """Return True if every object has unique keys and every array is homogeneous.

    Never raises; an invalid tree simply yields False.
    """
    return _validate(document)


def stringify(document: Document) -> str:
    """Return the compact JSON text of ``document``.

    Valid and invalid documents serialize alike.  Only ``"`` is escaped
    inside strings.
    """
    return _stringify(document)


def to_json(value: Any, config: ConverterConfig | None = None) -> str:
    """Convert a native value and serialize it in one step.

    Equivalent to ``stringify(convert(value, config))``; this is the path a
    request handler takes to turn a result object into a response body.
    """
    return _stringify(convert(value, config=config))
