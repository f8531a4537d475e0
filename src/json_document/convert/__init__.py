"""Convert subpackage: native Python values to documents.

Re-exports the public API for the convert module:
- DocumentConverter: recursive, shape-driven converter
- ConverterConfig: frozen converter settings
- UnsupportedPolicy: RAISE or NULL for unrecognized shapes
- MAP_KEY_ERROR: message of the ValueError raised for non-str mapping keys
"""

from json_document.convert.config import ConverterConfig, UnsupportedPolicy
from json_document.convert.converter import MAP_KEY_ERROR, DocumentConverter

__all__ = ["MAP_KEY_ERROR", "ConverterConfig", "DocumentConverter", "UnsupportedPolicy"]
