"""Concrete sinks for assembling JSON text.

``BufferSink`` is the only sink that stores text.  Every other sink wraps an
inner sink, decorates each ``write`` and forwards ``newline``/``snapshot``:

- QuoteSink  : ``text`` -> ``"text"``
- CurlySink  : ``text`` -> ``{text}``
- SquareSink : ``text`` -> ``[text]``
- CommaSink  : emits ``,`` before every fragment after the first
- PairSink   : adds ``write_pair`` producing ``"key":value``

Wrappers compose freely, e.g. ``SquareSink(QuoteSink(BufferSink()))`` turns
``a`` into ``"[a]"``.  Sinks carry per-call mutable state and are not meant
to be shared between threads or reused across documents.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_document.model.nodes import Document
    from json_document.protocols import Sink

__all__ = [
    "BufferSink",
    "CommaSink",
    "CurlySink",
    "PairSink",
    "QuoteSink",
    "SquareSink",
]


class BufferSink:
    """Accumulates fragments in memory."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> None:
        self._parts.append(text)

    def newline(self) -> None:
        self._parts.append("\n")

    def snapshot(self) -> str:
        return "".join(self._parts)


class QuoteSink:
    """Wraps each fragment in double quotes.  The fragment is not escaped here."""

    def __init__(self, inner: Sink) -> None:
        self.inner = inner

    def write(self, text: str) -> None:
        self.inner.write(f'"{text}"')

    def newline(self) -> None:
        self.inner.newline()

    def snapshot(self) -> str:
        return self.inner.snapshot()


class CurlySink:
    """Wraps each fragment in curly brackets."""

    def __init__(self, inner: Sink) -> None:
        self.inner = inner

    def write(self, text: str) -> None:
        self.inner.write(f"{{{text}}}")

    def newline(self) -> None:
        self.inner.newline()

    def snapshot(self) -> str:
        return self.inner.snapshot()


class SquareSink:
    """Wraps each fragment in square brackets."""

    def __init__(self, inner: Sink) -> None:
        self.inner = inner

    def write(self, text: str) -> None:
        self.inner.write(f"[{text}]")

    def newline(self) -> None:
        self.inner.newline()

    def snapshot(self) -> str:
        return self.inner.snapshot()


class CommaSink:
    """Separates fragments with a comma.

    One instance covers exactly one member list: the ``first`` flag is only
    ever reset by constructing a new CommaSink.
    """

    def __init__(self, inner: Sink) -> None:
        self.inner = inner
        self._first = True

    def write(self, text: str) -> None:
        if not self._first:
            self.inner.write(",")
        self.inner.write(text)
        self._first = False

    def newline(self) -> None:
        self.inner.newline()

    def snapshot(self) -> str:
        return self.inner.snapshot()


class PairSink:
    """Writes object members as ``"key":value``; plain writes pass through."""

    def __init__(self, inner: Sink) -> None:
        self.inner = inner

    def write_pair(self, key: str, value: Document) -> None:
        """Write the quoted key, a colon, then the serialization of ``value``."""
        # Deferred: the serializer module imports this one.
        from json_document.output.serializer import escape, write_document

        QuoteSink(self.inner).write(escape(key))
        self.inner.write(":")
        write_document(value, self.inner)

    def write(self, text: str) -> None:
        self.inner.write(text)

    def newline(self) -> None:
        self.inner.newline()

    def snapshot(self) -> str:
        return self.inner.snapshot()
