"""
Tests for the structured printer and the JSON-to-literal conversion.
"""

import pytest

from linesmith.exceptions import StructuredInputError
from linesmith.macros.printer import convert_json_to_literal, print_structured


class TestPrintStructured:

    def test_mapping_with_sequence(self):
        result = print_structured({"a": "x", "b": [1, 2]}, indent_size=4, level=1)
        lines = result.split("\n")

        assert lines[0] == "{"
        assert "    a: 'x'," in lines
        assert "    b: [" in lines
        assert lines[-1] == "}"
        assert result == "{\n    a: 'x',\n    b: [\n        1,\n        2\n    ]\n}"

    def test_nested_values_go_one_level_deeper(self):
        value = {"user": {"name": "a", "tags": ["x"]}, "ok": True, "n": None, "f": 1.5}
        assert print_structured(value, 4, 1) == (
            "{\n"
            "    user: {\n"
            "        name: 'a',\n"
            "        tags: [\n"
            "            'x'\n"
            "        ]\n"
            "    },\n"
            "    ok: true,\n"
            "    n: null,\n"
            "    f: 1.5\n"
            "}"
        )

    def test_mapping_elements_of_a_sequence(self):
        assert print_structured([{"a": 1}], 4, 1) == "[\n    {\n        a: 1\n    }\n]"

    def test_key_order_is_preserved(self):
        result = print_structured({"z": 1, "a": 2, "m": 3}, 2, 1)
        assert [line.strip().split(":")[0] for line in result.split("\n")[1:-1]] == ["z", "a", "m"]

    def test_empty_containers(self):
        assert print_structured({}) == "{}"
        assert print_structured([]) == "[]"
        assert print_structured({"a": {}, "b": []}, 2, 1) == "{\n  a: {},\n  b: []\n}"

    def test_strings_are_not_escaped(self):
        assert print_structured("it's") == "'it's'"

    @pytest.mark.parametrize("value, expected", [(3, "3"), (False, "false"), (None, "null"), (2.5, "2.5")])
    def test_scalars_use_json_text(self, value, expected):
        assert print_structured(value) == expected

    def test_closing_brace_at_outer_level(self):
        result = print_structured({"a": 1}, 4, 3)
        assert result.split("\n")[-1] == "        }"


class TestConvertJsonToLiteral:

    def test_members_one_level_deeper_than_the_line(self):
        assert convert_json_to_literal('{"a": "x"}', 4, 1) == "{\n        a: 'x'\n    }"

    def test_top_level_line(self):
        assert convert_json_to_literal('[1, {"b": 2}]', 2) == "[\n  1,\n  {\n    b: 2\n  }\n]"

    def test_invalid_json_raises(self):
        with pytest.raises(StructuredInputError) as exc_info:
            convert_json_to_literal("{a: 1}", 4, 0)

        assert exc_info.value.line == 1
        assert "Invalid JSON" in str(exc_info.value)
