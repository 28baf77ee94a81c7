"""Tests for JSON payload recovery from model output."""

import pytest

from aideal_llm_sdk.core.normalization.json_extraction import (
    extract_json_payload,
    is_valid_json,
    looks_like_json,
)

pytestmark = pytest.mark.unit


class TestExtractJsonPayload:

    def test_raw_object_is_trimmed(self):
        assert extract_json_payload('  {"a": 1}  \n') == '{"a": 1}'

    def test_raw_array_is_trimmed(self):
        assert extract_json_payload("\n[1, 2, 3]") == "[1, 2, 3]"

    def test_raw_json_is_not_validated(self):
        # starts like JSON, so the first strategy wins even if it is broken
        assert extract_json_payload('{"a": ') == '{"a":'

    def test_json_fence(self):
        text = 'Here you go:\n```json\n{"questions": []}\n```\nEnjoy!'

        assert extract_json_payload(text) == '{"questions": []}'

    def test_json_fence_tag_is_case_insensitive(self):
        assert extract_json_payload('```JSON\n{"a": 1}\n```') == '{"a": 1}'

    def test_json_like_tag_is_not_a_json_fence(self):
        assert extract_json_payload('```jsonc\n{"a": 1}\n```') == '{"a": 1}'
        assert extract_json_payload('Note:\n```json5\n[1, 2]\n```') == "[1, 2]"

    def test_json_fence_without_newline(self):
        assert extract_json_payload('```json {"a": 1}```') == '{"a": 1}'

    def test_first_json_fence_wins(self):
        text = '```json\n{"first": true}\n```\n```json\n{"second": true}\n```'

        assert extract_json_payload(text) == '{"first": true}'

    def test_untagged_fence_with_valid_json(self):
        assert extract_json_payload('Result:\n```\n{"a": [1]}\n```') == '{"a": [1]}'

    def test_other_tag_fence_with_valid_json(self):
        assert extract_json_payload('See:\n```javascript\n[1, 2]\n```') == "[1, 2]"

    def test_fence_with_invalid_json_is_skipped(self):
        text = 'A:\n```\n{not json}\n```\nB:\n```\n{"ok": 1}\n```'

        assert extract_json_payload(text) == '{"ok": 1}'

    def test_no_match_returns_text_unchanged(self):
        text = "Sorry, I cannot help with that.  "

        assert extract_json_payload(text) == text

    def test_code_fence_without_json_returns_text_unchanged(self):
        text = "```python\nprint('hi')\n```"

        assert extract_json_payload(text) == text

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input(self, text):
        assert extract_json_payload(text) == text

    @pytest.mark.parametrize("text", [
        '```json\n{"a": 1}\n```',
        '  [1, 2]  ',
        "plain text",
        'Intro\n```\n{"b": 2}\n```',
    ])
    def test_extraction_is_idempotent(self, text):
        once = extract_json_payload(text)

        assert extract_json_payload(once) == once


class TestHelpers:

    def test_looks_like_json(self):
        assert looks_like_json('  {"a": 1}')
        assert looks_like_json("[")
        assert not looks_like_json("text {")

    def test_is_valid_json(self):
        assert is_valid_json('{"a": 1}')
        assert not is_valid_json("{a: 1}")
        assert not is_valid_json(None)
