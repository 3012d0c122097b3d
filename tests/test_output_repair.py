import pytest

from output_repair import repair_json, repair_json_object


def test_fenced_json():
    assert repair_json('```json\n{"a":1}\n```') == {"a": 1}


def test_bare_fence():
    assert repair_json('```\n[1, 2]\n```') == [1, 2]


def test_plain_json_with_whitespace():
    assert repair_json('  {"a": {"b": true}}  ') == {"a": {"b": True}}


def test_inner_fences_and_nul_are_stripped():
    assert repair_json('{"a": 1}```\x00') == {"a": 1}


def test_prose_prefix_is_rejected():
    assert repair_json('Sure! {"a":1}') is None


@pytest.mark.parametrize("raw", ["", "   ", None, 12, {"a": 1}, b'{"a":1}'])
def test_unusable_input(raw):
    assert repair_json(raw) is None


def test_malformed_json_returns_none():
    assert repair_json('```json\n{"a": 1,\n```') is None


def test_object_only():
    assert repair_json_object("[1, 2]") is None
    assert repair_json_object('{"x": 1}') == {"x": 1}


def test_deeply_nested_reply_is_rejected():
    assert repair_json("[" * 100000) is None
    assert repair_json("```json\n" + "{\"a\":" * 50000 + "\n```") is None
