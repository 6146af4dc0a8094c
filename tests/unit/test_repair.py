"""Unit tests for JSON repair."""

import json
from unittest.mock import patch

import pytest

from clip_content.repair import JSONRepairError, repair_json


class TestRepairJson:
    """Test best-effort JSON repair."""

    def test_valid_json_is_preserved(self):
        text = '{"a": [1, 2, {"b": null}]}'
        assert json.loads(repair_json(text)) == json.loads(text)

    def test_result_is_strict_json(self):
        repaired = repair_json("{a: 1,}")
        assert json.loads(repaired) == {"a": 1}

    def test_trailing_commas(self):
        assert json.loads(repair_json('{"a": [1, 2,], "b": 3,}')) == {"a": [1, 2], "b": 3}

    def test_unquoted_keys_and_single_quotes(self):
        repaired = repair_json("{name: 'Ann', tags: ['x', 'y']}")
        assert json.loads(repaired) == {"name": "Ann", "tags": ["x", "y"]}

    def test_missing_comma_between_members(self):
        assert json.loads(repair_json('{"a": 1 "b": 2}')) == {"a": 1, "b": 2}

    def test_missing_comma_between_items(self):
        assert json.loads(repair_json('{"a": [1, 2 3]}')) == {"a": [1, 2, 3]}

    def test_unquoted_keys_and_values(self):
        assert json.loads(repair_json("{name: John, age: 3}")) == {"name": "John", "age": 3}

    def test_unescaped_quotes_inside_string(self):
        assert json.loads(repair_json('{"text": "say "hi" now"}')) == {"text": 'say "hi" now'}

    def test_comments_are_removed(self):
        text = '{\n  // the answer\n  "a": 42, /* block */\n  "b": 1\n}'
        assert json.loads(repair_json(text)) == {"a": 42, "b": 1}

    def test_comment_markers_inside_strings_are_kept(self):
        assert json.loads(repair_json('{"url": "http://x.io/*", "n": 1,}')) == {
            "url": "http://x.io/*",
            "n": 1,
        }

    def test_unclosed_brackets_are_closed(self):
        assert json.loads(repair_json('{"a": [1, 2')) == {"a": [1, 2]}

    def test_non_ascii_is_kept(self):
        assert "Zoë" in repair_json("{'name': 'Zoë',}")

    def test_empty_container_is_accepted(self):
        assert repair_json("[ ]") == "[]"

    @pytest.mark.parametrize("text", ["", "   ", "plain words without brackets"])
    def test_text_without_json_raises(self, text):
        with pytest.raises(JSONRepairError):
            repair_json(text)

    def test_library_failure_is_wrapped(self):
        with patch("clip_content.repair.json_repair.repair_json", side_effect=RuntimeError("boom")):
            with pytest.raises(JSONRepairError, match="boom"):
                repair_json("{a: 1}")

    def test_everything_discarded_raises(self):
        with patch("clip_content.repair.json_repair.repair_json", return_value={}):
            with pytest.raises(JSONRepairError):
                repair_json("{???}")

    def test_repair_error_is_value_error(self):
        assert issubclass(JSONRepairError, ValueError)
