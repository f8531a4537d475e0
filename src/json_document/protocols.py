"""Sink Protocol: the text output extension point of the serializer.

Defines the structural interface every output sink satisfies.  Wrapper sinks
hold a reference to the sink they decorate; there is no base class, and any
object with conformant methods passes ``isinstance`` checks.

Example::

    from json_document.protocols import Sink

    class ListSink:
        def __init__(self) -> None:
            self.parts: list[str] = []

        def write(self, text: str) -> None:
            self.parts.append(text)

        def newline(self) -> None:
            self.parts.append("\\n")

        def snapshot(self) -> str:
            return "".join(self.parts)

    assert isinstance(ListSink(), Sink)  # True — structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Structural protocol for incremental text output.

    - ``write`` appends one fragment (wrappers may decorate it first).
    - ``newline`` appends a line break; wrappers forward it untouched.
    - ``snapshot`` returns everything written so far to the innermost buffer.
    """

    def write(self, text: str) -> None: ...

    def newline(self) -> None: ...

    def snapshot(self) -> str: ...
