"""Compact JSON serializer driven through the sink pipeline.

``stringify`` never concatenates brackets, quotes or separators itself; it
picks the wrapper sinks for each variant and lets them decorate the text:

- JsonNull    -> ``null``
- JsonBoolean -> ``true`` / ``false``
- JsonNumber  -> ``str(value)`` (``37``, ``0.2``, ``9.18``)
- JsonString  -> QuoteSink, with only ``"`` escaped as ``\\"``
- JsonArray   -> elements through a CommaSink into a fresh buffer, then SquareSink
- JsonObject  -> ``"key":value`` fragments (PairSink) through a CommaSink,
                 then CurlySink

Output never contains whitespace added by the serializer.  Backslashes and
control characters inside strings are written verbatim, which can yield text
a strict JSON parser rejects; this is a known limitation kept for output
compatibility.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from json_document.model.nodes import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
)
from json_document.output.sinks import (
    BufferSink,
    CommaSink,
    CurlySink,
    PairSink,
    QuoteSink,
    SquareSink,
)

if TYPE_CHECKING:
    from json_document.model.nodes import Document
    from json_document.protocols import Sink

__all__ = ["escape", "stringify", "write_document"]


def escape(text: str) -> str:
    """Escape the double quote character and nothing else."""
    return text.replace('"', '\\"')


def stringify(document: Document, sink: Sink | None = None) -> str:
    """Serialize ``document`` as compact JSON text.

    Args:
        document: Any document, valid or not.
        sink:     Destination for the text.  A fresh ``BufferSink`` is used
                  when None.

    Returns:
        ``sink.snapshot()`` after writing, i.e. everything the destination has
        accumulated (for a fresh sink, exactly the serialized document).
    """
    if sink is None:
        sink = BufferSink()
    write_document(document, sink)
    return sink.snapshot()


def write_document(document: Document, sink: Sink) -> None:
    """Write ``document`` into ``sink`` without taking a snapshot.

    Composites snapshot only their own private buffers, once each, so the
    cost stays linear in the size of the output.
    """
    if isinstance(document, JsonNull):
        sink.write("null")
    elif isinstance(document, JsonBoolean):
        sink.write("true" if document.value else "false")
    elif isinstance(document, JsonNumber):
        sink.write(str(document.value))
    elif isinstance(document, JsonString):
        QuoteSink(sink).write(escape(document.value))
    elif isinstance(document, JsonArray):
        inner = BufferSink()
        commas = CommaSink(inner)
        for element in document.values:
            # Each element renders its own brackets/quotes before the comma
            # sink sees the fragment.
            write_document(element, commas)
        SquareSink(sink).write(inner.snapshot())
    elif isinstance(document, JsonObject):
        inner = BufferSink()
        commas = CommaSink(inner)
        for key, value in document.entries.items():
            pair = BufferSink()
            PairSink(pair).write_pair(key, value)
            commas.write(pair.snapshot())
        CurlySink(sink).write(inner.snapshot())
    else:
        assert_never(document)
