import json

import pytest

from genesis import jsonutil


def test_merge_overwrites_and_adds():
    dst = {"a": 1, "b": 2}
    result = jsonutil.merge(dst, {"b": 3, "c": 4})
    assert result is dst
    assert dst == {"a": 1, "b": 3, "c": 4}


def test_merge_changes_reports_only_differences():
    dst = {"a": 1, "b": "x"}
    changes = jsonutil.merge_changes(dst, {"a": 1, "b": "y", "c": [1, 2]})
    assert changes == {"b": "y", "c": [1, 2]}
    assert dst == {"a": 1, "b": "y", "c": [1, 2]}


def test_merge_changes_no_change():
    dst = {"k": {"n": [1, 2]}}
    assert jsonutil.merge_changes(dst, {"k": {"n": [1, 2]}}) == {}
    assert dst == {"k": {"n": [1, 2]}}


def test_merge_changes_distinguishes_number_kinds():
    dst = {"i": 1, "b": 1}
    changes = jsonutil.merge_changes(dst, {"i": 1.0, "b": True})
    assert changes == {"i": 1.0, "b": True}
    assert isinstance(dst["i"], float)
    assert dst["b"] is True


def test_merge_changes_nested_kind_difference():
    dst = {"n": [0]}
    changes = jsonutil.merge_changes(dst, {"n": [False]})
    assert changes == {"n": [False]}
    assert dst["n"][0] is False


def test_from_value():
    assert jsonutil.from_value("x") == ["x"]
    assert jsonutil.from_value({"a": 1}) == [{"a": 1}]


def test_from_list():
    assert jsonutil.from_list((1, 2, 3)) == [1, 2, 3]
    assert jsonutil.from_list([]) == []


def test_to_string_list():
    assert jsonutil.to_string_list(["a", "b"]) == ["a", "b"]


def test_to_string_list_rejects_non_strings():
    with pytest.raises(TypeError):
        jsonutil.to_string_list(["a", 1])


def test_load_object_round_trip(tmp_path):
    data = {"name": "app", "values": [1, 2.5, True, None]}
    target = tmp_path / "cfg.json"
    target.write_text(json.dumps(data), encoding="utf-8")
    assert jsonutil.load_object(target) == data


def test_load_array_round_trip(tmp_path):
    data = [1, "two", {"three": 3}]
    target = tmp_path / "arr.json"
    target.write_text(json.dumps(data), encoding="utf-8")
    assert jsonutil.load_array(target) == data


def test_load_object_wrong_kind(tmp_path):
    target = tmp_path / "arr.json"
    target.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(TypeError):
        jsonutil.load_object(target)


def test_load_array_wrong_kind(tmp_path):
    target = tmp_path / "obj.json"
    target.write_text('{"a": 1}', encoding="utf-8")
    with pytest.raises(TypeError):
        jsonutil.load_array(target)


def test_load_invalid_json(tmp_path):
    target = tmp_path / "bad.json"
    target.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        jsonutil.load_object(target)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        jsonutil.load_object(tmp_path / "missing.json")