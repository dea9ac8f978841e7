import io
from datetime import timedelta

import pytest

from cliconf.json_source import (
    JSONSource,
    new_json_source,
    new_json_source_from_file,
    new_json_source_from_flag_func,
    new_json_source_from_reader,
)


class FakeContext:
    def __init__(self, values):
        self.values = values

    def is_set(self, name):
        return name in self.values

    def string(self, name):
        return self.values.get(name, "")


SIMPLE = '{"test": 15}'
NESTED = '{"top": {"test": 15}}'


def test_simple_int():
    assert new_json_source(SIMPLE).int("test") == 15


def test_nested_int():
    assert new_json_source(NESTED).int("top.test") == 15


def test_int_from_float_truncates():
    assert new_json_source('{"test": 15.9}').int("test") == 15


def test_float_accepts_integral_number():
    assert new_json_source(SIMPLE).float("test") == 15.0


def test_missing_key_raises():
    source = new_json_source(SIMPLE)
    with pytest.raises(KeyError, match="missing key"):
        source.int("other")
    assert source.is_set("other") is False


def test_intermediate_value_raises():
    source = new_json_source(SIMPLE)
    with pytest.raises(TypeError, match="unexpected intermediate value"):
        source.int("test.deeper")
    assert source.is_set("test.deeper") is False


def test_wrong_type_raises():
    with pytest.raises(TypeError, match="unexpected type"):
        new_json_source(SIMPLE).string("test")


def test_strings_and_bools():
    source = new_json_source('{"name": "hello", "on": true}')
    assert source.string("name") == "hello"
    assert source.bool("on") is True
    assert source.is_set("name")


def test_string_slice():
    source = new_json_source('{"words": ["hello", "world"]}')
    assert source.string_slice("words") == ["hello", "world"]


def test_string_slice_bad_item_raises():
    with pytest.raises(TypeError, match="unexpected item type"):
        new_json_source('{"words": ["hello", 1]}').string_slice("words")


def test_int_slice():
    assert new_json_source('{"nums": [1, 2]}').int_slice("nums") == [1, 2]


def test_duration_is_never_a_json_value():
    with pytest.raises(TypeError, match="unexpected type"):
        new_json_source('{"d": "30s"}').duration("d")


def test_duration_from_prebuilt_mapping():
    source = JSONSource({"d": timedelta(seconds=30)})
    assert source.duration("d") == timedelta(seconds=30)


def test_generic_rejects_plain_value():
    with pytest.raises(TypeError):
        new_json_source(SIMPLE).generic("test")


def test_non_object_raises():
    with pytest.raises(ValueError):
        new_json_source("[1, 2]")


def test_invalid_json_raises():
    with pytest.raises(ValueError):
        new_json_source("{not json")


def test_from_reader():
    assert new_json_source_from_reader(io.StringIO(NESTED)).int("top.test") == 15


def test_from_file(tmp_path):
    target = tmp_path / "current.json"
    target.write_text(SIMPLE)
    source = new_json_source_from_file(str(target))
    assert source.int("test") == 15
    assert source.source() == ""


def test_flag_func_reads_named_file(tmp_path):
    target = tmp_path / "current.json"
    target.write_text(NESTED)
    source = new_json_source_from_flag_func("load")(FakeContext({"load": str(target)}))
    assert source.int("top.test") == 15


def test_flag_func_without_flag_gives_empty_source():
    source = new_json_source_from_flag_func("load")(FakeContext({}))
    assert source.is_set("test") is False