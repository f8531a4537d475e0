"""pytest plugin for json-document-model.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_document import ConverterConfig, Document, convert, stringify, validate


@pytest.fixture(scope="session")
def assert_json_text() -> Any:
    """Fixture that returns a callable asserting the serialized form of a value.

    The fixture is session-scoped because the returned callable is stateless
    (convert() builds a fresh DocumentConverter per call).

    Usage in tests::

        def test_course(assert_json_text):
            assert_json_text({"credits": 6}, '{"credits":6}')

    Returns:
        A callable ``_assert(value, expected, config=None) -> None`` that
        raises ``AssertionError`` when the JSON text differs from ``expected``.
    """

    def _assert(value: Any, expected: str, config: ConverterConfig | None = None) -> None:
        """Assert that ``value`` serializes to exactly ``expected``.

        Args:
            value:    A Document, or any native value convert() accepts.
            expected: The exact compact JSON text.
            config:   Optional ConverterConfig used when ``value`` is native.

        Raises:
            AssertionError: When the texts differ, with both texts in the message.
        """
        document = value if isinstance(value, Document) else convert(value, config=config)
        actual = stringify(document)
        if actual != expected:
            raise AssertionError(
                f"JSON text mismatch:\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}"
            )

    return _assert


@pytest.fixture(scope="session")
def assert_valid_document() -> Any:
    """Fixture that returns a callable asserting a document passes validate()."""

    def _assert(document: Document) -> None:
        if not validate(document):
            raise AssertionError(f"Document failed validation: {stringify(document)}")

    return _assert
