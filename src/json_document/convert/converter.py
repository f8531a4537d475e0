"""DocumentConverter: lifts arbitrary in-memory Python values into documents.

Uses recursive dispatch on the runtime shape of the value.  The dispatch order
is critical:

- Enum MUST be checked before str and int: StrEnum and IntEnum members are
  str / int instances but convert to their member *name*.
- bool MUST be checked before int because bool subclasses int.
- Mappings and named tuples MUST be checked before generic sequences.
- The unsupported-shape check MUST come before the sequence check because
  bytes and bytearray are sequences.

Records (dataclasses and ordinary objects) become JsonObjects whose members
follow the declared field order, never alphabetical order:

- dataclass  -> the ``init=True`` fields, in definition order
- namedtuple -> ``_fields``
- any other  -> the parameters of the class ``__init__`` signature, each
                resolved to the same-named attribute; parameters without a
                matching attribute are skipped

Builtin and extension types that reach the record path (``datetime.date``,
dict views, ...) have no declared layout and are treated as unsupported.

Field layouts are discovered once per type and kept in a per-converter
``LRUCache``.
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Iterator, Mapping, Sequence
from decimal import Decimal
from enum import Enum
from types import ModuleType
from typing import Any

import numpy as np
from cachetools import LRUCache
from loguru import logger

from json_document.convert.config import ConverterConfig, UnsupportedPolicy
from json_document.model.nodes import (
    Document,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
)

__all__ = ["MAP_KEY_ERROR", "DocumentConverter"]

MAP_KEY_ERROR = "Map keys must be Strings"

_UNSUPPORTED_TYPES = (bytes, bytearray, memoryview, set, frozenset, complex, ModuleType)

_FIELD_PARAMETER_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)

_MISSING: Any = object()

# Py_TPFLAGS_HEAPTYPE: set on classes defined in Python, clear on builtin
# and extension types.
_HEAPTYPE_FLAG = 1 << 9


class DocumentConverter:
    """Converts native Python values into Document trees.

    Recognized shapes: None, bool, int, float, Decimal, str, Enum members,
    numpy scalars and arrays, string-keyed mappings, named tuples, sequences,
    dataclasses and plain Python objects.  Everything else, including builtin
    and extension types without a declared layout, is handled according to
    ``ConverterConfig.unsupported``.

    Each instance owns its layout cache; two converters never share state.

    Example::

        from dataclasses import dataclass
        from json_document.convert.converter import DocumentConverter

        @dataclass
        class Point:
            y: int
            x: int

        DocumentConverter().convert(Point(y=2, x=1))
        # JsonObject({"y": JsonNumber(2), "x": JsonNumber(1)})
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        """Initialise the converter.

        Args:
            config: Converter settings.  Defaults to ``ConverterConfig()``
                (RAISE on unsupported shapes, 256-entry layout cache).
        """
        self._config: ConverterConfig = config if config is not None else ConverterConfig()
        self._layouts: LRUCache[type, tuple[str, ...] | None] = LRUCache(
            maxsize=self._config.layout_cache_size
        )

    @property
    def config(self) -> ConverterConfig:
        return self._config

    @property
    def cached_layouts(self) -> int:
        """Number of record types whose field layout is currently cached."""
        return int(self._layouts.currsize)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def convert(self, value: Any) -> Document:
        """Convert ``value`` into a Document.

        Args:
            value: Any recognized native value (see class docstring).

        Returns:
            The corresponding Document tree.

        Raises:
            ValueError: If a mapping anywhere in ``value`` has a non-str key.
            TypeError:  If ``value`` contains an unsupported shape and the
                        policy is ``UnsupportedPolicy.RAISE``.
        """
        if value is None:
            return JsonNull()

        if isinstance(value, Document):
            return value

        if isinstance(value, np.generic):
            return self.convert(value.item())

        if isinstance(value, Enum):
            return JsonString(value.name)

        # CRITICAL: bool MUST be checked before int — bool subclasses int
        if isinstance(value, bool):
            return JsonBoolean(value)

        if isinstance(value, (int, float, Decimal)):
            return JsonNumber(value)

        if isinstance(value, str):
            return JsonString(value)

        if isinstance(value, np.ndarray):
            return self.convert(value.tolist())

        if isinstance(value, Mapping):
            return self._convert_mapping(value)

        if _is_namedtuple(value):
            return self._convert_record(value)

        if _is_unsupported(value):
            return self._unsupported(value)

        if isinstance(value, Sequence):
            return JsonArray(tuple(self.convert(item) for item in value))

        return self._convert_record(value)

    # ------------------------------------------------------------------
    # Composite shapes
    # ------------------------------------------------------------------

    def _convert_mapping(self, mapping: Mapping[Any, Any]) -> JsonObject:
        members: dict[str, Document] = {}
        for key, item in mapping.items():
            if not isinstance(key, str):
                raise ValueError(MAP_KEY_ERROR)
            members[key] = self.convert(item)
        return JsonObject(members)

    def _convert_record(self, record: Any) -> Document:
        layout = self._layout(type(record))
        if layout is None:
            return self._unsupported(record)
        members: dict[str, Document] = {}
        for name in layout:
            item = getattr(record, name, _MISSING)
            if item is _MISSING:
                continue
            members[name] = self.convert(item)
        return JsonObject(members)

    def _layout(self, cls: type) -> tuple[str, ...] | None:
        layout = self._layouts.get(cls, _MISSING)
        if layout is _MISSING:
            layout = _discover_layout(cls)
            self._layouts[cls] = layout
        return layout

    def _unsupported(self, value: Any) -> Document:
        if self._config.unsupported is UnsupportedPolicy.NULL:
            logger.warning(f"Replacing unsupported value of type {type(value)!r} with null")
            return JsonNull()
        msg = f"Unsupported value type: {type(value)!r}"
        raise TypeError(msg)


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _is_unsupported(value: Any) -> bool:
    return (
        isinstance(value, _UNSUPPORTED_TYPES)
        or isinstance(value, type)
        or isinstance(value, Iterator)
        or inspect.isroutine(value)
    )


def _discover_layout(cls: type) -> tuple[str, ...] | None:
    """Return the declared field names of ``cls`` in declaration order.

    Returns None when ``cls`` has no introspectable layout: builtin and
    extension types (``datetime.date``, dict views, ...) and classes whose
    signature cannot be read.
    """
    if dataclasses.is_dataclass(cls):
        return tuple(f.name for f in dataclasses.fields(cls) if f.init)

    fields = getattr(cls, "_fields", None)
    if isinstance(fields, tuple):
        return tuple(fields)

    if not cls.__flags__ & _HEAPTYPE_FLAG:
        return None

    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        if cls.__init__ is object.__init__ and cls.__new__ is object.__new__:
            return ()
        return None
    return tuple(
        name
        for name, parameter in signature.parameters.items()
        if parameter.kind in _FIELD_PARAMETER_KINDS
    )
