"""Output subpackage: sinks and the compact JSON serializer.

Re-exports the public API for the output module:
- BufferSink, QuoteSink, CurlySink, SquareSink, CommaSink, PairSink
- stringify: serialize a document through the sink pipeline
"""

from json_document.output.serializer import stringify
from json_document.output.sinks import (
    BufferSink,
    CommaSink,
    CurlySink,
    PairSink,
    QuoteSink,
    SquareSink,
)

__all__ = [
    "BufferSink",
    "CommaSink",
    "CurlySink",
    "PairSink",
    "QuoteSink",
    "SquareSink",
    "stringify",
]
