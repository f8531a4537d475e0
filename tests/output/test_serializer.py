"""Tests for stringify: compact JSON text through the sink pipeline."""

from __future__ import annotations

import time
from decimal import Decimal

import pytest

from json_document.model.nodes import (
    Document,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
)
from json_document.output.serializer import escape, stringify, write_document
from json_document.output.sinks import BufferSink


class TestScalars:
    def test_null(self) -> None:
        assert stringify(JsonNull()) == "null"

    def test_booleans(self) -> None:
        assert stringify(JsonBoolean(True)) == "true"
        assert stringify(JsonBoolean(False)) == "false"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (42, "42"),
            (37, "37"),
            (-5, "-5"),
            (0.2, "0.2"),
            (9.18, "9.18"),
            (1.0, "1.0"),
            (Decimal("1.50"), "1.50"),
        ],
    )
    def test_numbers_use_own_text_form(self, value: int | float | Decimal, expected: str) -> None:
        assert stringify(JsonNumber(value)) == expected

    def test_string(self) -> None:
        assert stringify(JsonString("Hello world!")) == '"Hello world!"'

    def test_empty_string(self) -> None:
        assert stringify(JsonString("")) == '""'

    def test_quotes_escaped(self) -> None:
        assert stringify(JsonString('hello "world"')) == '"hello \\"world\\""'

    def test_only_quotes_escaped(self) -> None:
        document = JsonString('line1\nline2\t"quoted"')
        assert stringify(document) == '"line1\nline2\t\\"quoted\\""'

    def test_backslash_left_verbatim(self) -> None:
        assert stringify(JsonString("a\\b")) == '"a\\b"'


class TestComposites:
    def test_empty_array(self) -> None:
        assert stringify(JsonArray()) == "[]"

    def test_empty_object(self) -> None:
        assert stringify(JsonObject()) == "{}"

    def test_number_array(self) -> None:
        array = JsonArray([JsonNumber(17), JsonNumber(15), JsonNumber(18)])
        assert stringify(array) == "[17,15,18]"

    def test_string_array(self) -> None:
        assert stringify(JsonArray([JsonString("a"), JsonString("b")])) == '["a","b"]'

    def test_object_members_in_insertion_order(self) -> None:
        document = JsonObject(
            {"x": JsonNumber(10), "y": JsonBoolean(True), "z": JsonNull()}
        )
        assert stringify(document) == '{"x":10,"y":true,"z":null}'

    def test_full_structure(self) -> None:
        document = JsonObject(
            {
                "name": JsonString("Catarina"),
                "age": JsonNumber(37),
                "isStudent": JsonBoolean(True),
                "scores": JsonArray([JsonNumber(17), JsonNumber(15), JsonNumber(18)]),
            }
        )
        assert (
            stringify(document)
            == '{"name":"Catarina","age":37,"isStudent":true,"scores":[17,15,18]}'
        )

    def test_deeply_nested(self) -> None:
        document = JsonObject(
            {
                "data": JsonArray(
                    [
                        JsonObject({"value": JsonString("ok")}),
                        JsonObject({"value": JsonString("fail")}),
                    ]
                )
            }
        )
        assert stringify(document) == '{"data":[{"value":"ok"},{"value":"fail"}]}'

    def test_nested_arrays(self) -> None:
        document = JsonArray([JsonArray(), JsonArray([JsonNull()]), JsonArray([JsonNumber(1)])])
        assert stringify(document) == "[[],[null],[1]]"

    def test_invalid_document_still_serializes(self) -> None:
        document = JsonArray([JsonNumber(1), JsonString("a"), JsonNull()])
        assert stringify(document) == '[1,"a",null]'

    def test_filtered_object(self) -> None:
        document = JsonObject({"a": JsonNumber(1), "b": JsonNumber(2)})
        assert stringify(document.filter(lambda key, value: key != "a")) == '{"b":2}'
        assert stringify(document.filter(lambda key, value: True)) == '{"a":1,"b":2}'
        assert stringify(document.filter(lambda key, value: False)) == "{}"

    def test_mapped_array(self) -> None:
        array = JsonArray([JsonNumber(1), JsonNumber(2), JsonNumber(3)])

        def double(node: Document) -> Document:
            return JsonNumber(node.value * 2) if isinstance(node, JsonNumber) else node

        assert stringify(array.map(double)) == "[2,4,6]"
        assert stringify(array.filter(lambda n: n != JsonNumber(1))) == "[2,3]"


class TestSinkArgument:
    def test_writes_into_given_sink(self) -> None:
        sink = BufferSink()
        result = stringify(JsonArray([JsonNumber(1)]), sink)
        assert result == "[1]"
        assert sink.snapshot() == "[1]"

    def test_returns_everything_in_given_sink(self) -> None:
        sink = BufferSink()
        sink.write("prefix=")
        assert stringify(JsonBoolean(True), sink) == "prefix=true"

    def test_idempotent(self) -> None:
        document = JsonObject({"a": JsonArray([JsonString("x")])})
        assert stringify(document) == stringify(document)

    @pytest.mark.parametrize(
        "leaf",
        [JsonNull(), JsonBoolean(False), JsonNumber(12), JsonString("word")],
    )
    def test_leaf_output_has_no_whitespace(self, leaf: Document) -> None:
        text = stringify(leaf)
        assert text == text.strip()
        assert " " not in text


class TestEscape:
    def test_escapes_every_quote(self) -> None:
        assert escape('""') == '\\"\\"'

    def test_leaves_other_characters(self) -> None:
        assert escape("a\\b\nc") == "a\\b\nc"


class _CountingSink(BufferSink):
    """BufferSink that records how often its snapshot is taken."""

    def __init__(self) -> None:
        super().__init__()
        self.snapshots = 0

    def snapshot(self) -> str:
        self.snapshots += 1
        return super().snapshot()


class TestScaling:
    def test_array_elements_do_not_snapshot_outer_sink(self) -> None:
        sink = _CountingSink()
        stringify(JsonArray([JsonNumber(i) for i in range(100)]), sink)
        assert sink.snapshots == 1

    def test_write_document_never_snapshots(self) -> None:
        sink = _CountingSink()
        write_document(JsonObject({"a": JsonArray([JsonNull(), JsonNull()])}), sink)
        assert sink.snapshots == 0
        assert sink.snapshot() == '{"a":[null,null]}'

    def test_large_array_serializes_quickly(self) -> None:
        array = JsonArray([JsonNumber(i) for i in range(50_000)])
        start = time.perf_counter()
        text = stringify(array)
        elapsed = time.perf_counter() - start
        assert text.startswith("[0,1,2,") and text.endswith(",49999]")
        assert elapsed < 5.0

    def test_large_array_of_strings(self) -> None:
        array = JsonArray([JsonString("x")] * 50_000)
        assert stringify(array) == "[" + ",".join(['"x"'] * 50_000) + "]"
