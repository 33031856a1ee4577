# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from treepatch import patch, PatchSyntaxError, PatchPathError, PatchTestFailed
from treepatch.patch_format import (
    op_add, op_remove, op_test, op_iterate, op_join, op_sum,
)
from treepatch.patching import substitute_token

from .utils import check_patch


# iterate

def test_iterate_maps_over_array():
    doc = {"array": [1, 2, 3], "second_array": []}
    ops = [op_iterate("/array", [op_add("/second_array/$?", "banana")])]
    check_patch(doc, ops, {
        "array": [1, 2, 3],
        "second_array": ["banana", "banana", "banana"],
    })


def test_iterate_substitutes_index_in_order():
    doc = {"array": ["a", "b", "c"], "seen": []}
    ops = [op_iterate("/array", [
        {"op": "copy", "from": "/array/$?", "path": "/seen/-"},
    ])]
    check_patch(doc, ops, {"array": ["a", "b", "c"], "seen": ["a", "b", "c"]})


def test_iterate_allows_removal_in_iterated_array():
    doc = {"array": [
        {"first": "ba", "second": "na", "third": "na"},
        {"first": "pa", "second": "pa", "third": "ya"},
        {"first": "po", "second": "ta", "third": "to"},
    ]}
    ops = [op_iterate("/array", [op_remove("/array/$?/first")])]
    check_patch(doc, ops, {"array": [
        {"second": "na", "third": "na"},
        {"second": "pa", "third": "ya"},
        {"second": "ta", "third": "to"},
    ]})


def test_iterate_custom_replacement_character():
    doc = {"array": [1, 2, 3], "second_array": []}
    ops = [op_iterate("/array", [op_add("/second_array/*", "banana")],
                      replacement_character="*")]
    check_patch(doc, ops, {
        "array": [1, 2, 3],
        "second_array": ["banana", "banana", "banana"],
    })


def test_iterate_default_replacement_character_argument():
    doc = {"array": [1, 2], "out": []}
    ops = [op_iterate("/array", [op_add("/out/#", "x")])]
    assert patch(doc, ops, replacement_character="#") == {"array": [1, 2], "out": ["x", "x"]}


def test_iterate_nested():
    doc = {
        "array": [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
        "second_array": [[], [], []],
    }
    ops = [op_iterate("/array", [
        op_iterate("/array/$1", [
            op_add("/second_array/$1/$2", "banana"),
        ], replacement_character="$2"),
    ], replacement_character="$1")]
    check_patch(doc, ops, {
        "array": [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
        "second_array": [["banana"] * 3] * 3,
    })


def test_iterate_empty_array():
    doc = {"array": []}
    ops = [op_iterate("/array", [op_remove("/does/not/exist")])]
    check_patch(doc, ops, doc)


def test_iterate_missing_sub_operations():
    operation = {"op": "iterate", "path": "/array"}
    with pytest.raises(PatchSyntaxError) as excinfo:
        patch({"array": [1, 2, 3]}, [operation])
    assert excinfo.value.description == (
        "missing `sub_operations` (patches[0], {'op': 'iterate', 'path': '/array'})")

    operation = {"op": "iterate", "path": "/array", "sub_operations": {"op": "remove"}}
    with pytest.raises(PatchSyntaxError) as excinfo:
        patch({"array": [1, 2, 3]}, [operation])
    assert excinfo.value.description.startswith("missing `sub_operations`")


def test_iterate_invalid_replacement_character():
    for token in (1, None):
        operation = op_iterate("/array", [], replacement_character="*")
        operation["replacement_character"] = token
        with pytest.raises(PatchSyntaxError):
            patch({"array": [1]}, [operation])

    with pytest.raises(PatchSyntaxError) as excinfo:
        patch({"array": [1]}, [op_iterate("/array", [], replacement_character="")])
    assert excinfo.value.description.startswith("`replacement_character` must not be empty")


def test_iterate_over_non_array():
    with pytest.raises(PatchPathError) as excinfo:
        patch({"obj": {"a": 1}}, [op_iterate("/obj", [])])
    assert excinfo.value.description.startswith("can't iterate over value {'a': 1}")

    with pytest.raises(PatchPathError) as excinfo:
        patch({}, [op_iterate("/missing", [])])
    assert excinfo.value.description.startswith("missing key missing")


def test_iterate_failure_reports_sub_operation():
    doc = {"array": [1, 2, 3]}
    sub = op_test("/array/$?", 1)
    ops = [op_add("/x", 0), op_iterate("/array", [sub])]
    with pytest.raises(PatchTestFailed) as excinfo:
        patch(doc, ops)
    err = excinfo.value
    assert err.kind == "test_failed"
    # The second pass fails: its substituted operation is reported
    # relative to the sub-operations, then the iterate relative to the patch
    assert err.description == "test failed (patches[0], {!r}) (patches[1], {!r})".format(
        {"op": "test", "path": "/array/1", "value": 1}, ops[1])
    assert doc == {"array": [1, 2, 3]}


def test_substitute_token():
    ops = [
        {"op": "move", "from": "/a/$?", "path": "/b/$?/$?", "value": "$?"},
        {"op": "join", "from": ["/a/$?", "/c"], "path": "/d"},
        {"op": "iterate", "path": "/e/$?", "sub_operations": [
            {"op": "remove", "path": "/e/$?/#"},
        ], "replacement_character": "#"},
        "not an operation",
    ]
    result = substitute_token(ops, "$?", "3")
    assert result == [
        {"op": "move", "from": "/a/3", "path": "/b/3/3", "value": "$?"},
        {"op": "join", "from": ["/a/3", "/c"], "path": "/d"},
        {"op": "iterate", "path": "/e/3", "sub_operations": [
            {"op": "remove", "path": "/e/3/#"},
        ], "replacement_character": "#"},
        "not an operation",
    ]
    # Input is left untouched
    assert ops[0]["from"] == "/a/$?"
    assert ops[2]["sub_operations"][0]["path"] == "/e/$?/#"


# join

fruit = {"first": "ba", "second": "na", "third": "na"}
fruit_paths = ["/first", "/second", "/third"]


def test_join_default_joiner():
    check_patch(fruit, [op_join(fruit_paths, "/joined")],
                dict(fruit, joined="ba,na,na"))


def test_join_custom_joiner():
    check_patch(fruit, [op_join(fruit_paths, "/joined", joiner="")],
                dict(fruit, joined="banana"))
    assert patch(fruit, [op_join(fruit_paths, "/joined")], joiner=" ")["joined"] == "ba na na"


def test_join_numbers():
    doc = {"a": "x", "b": 1, "c": 2.5}
    assert patch(doc, [op_join(["/a", "/b", "/c"], "/j")])["j"] == "x,1,2.5"


def test_join_empty_from():
    assert patch({}, [op_join([], "/j")]) == {"j": ""}


def test_join_missing_from():
    operation = {"op": "join", "path": "/joined"}
    with pytest.raises(PatchSyntaxError) as excinfo:
        patch(fruit, [operation])
    assert excinfo.value.description == (
        "missing `from` (patches[0], {'op': 'join', 'path': '/joined'})")

    with pytest.raises(PatchSyntaxError) as excinfo:
        patch(fruit, [{"op": "join", "from": "/first", "path": "/joined"}])
    assert excinfo.value.description.startswith("missing `from`")


def test_join_errors():
    with pytest.raises(PatchPathError) as excinfo:
        patch(fruit, [op_join(["/first", "/fourth"], "/joined")])
    assert excinfo.value.description.startswith("missing key fourth")

    for value in ({"a": 1}, [1], None, True):
        with pytest.raises(PatchPathError) as excinfo:
            patch({"a": "x", "b": value}, [op_join(["/a", "/b"], "/j")])
        assert excinfo.value.description.startswith("can't join value {!r}".format(value))

    with pytest.raises(PatchSyntaxError):
        patch(fruit, [{"op": "join", "from": fruit_paths, "path": "/j", "joiner": 1}])


# sum

def test_sum():
    doc = {"first": 1, "second": 2, "third": 8.8}
    result = patch(doc, [op_sum(["/first", "/second", "/third"], "/total")])
    assert result["total"] == pytest.approx(11.8)
    assert doc == {"first": 1, "second": 2, "third": 8.8}


def test_sum_integers_stays_integer():
    result = patch({"a": [1, 2, 3]}, [op_sum(["/a/0", "/a/1", "/a/-"], "/a/-")])
    assert result == {"a": [1, 2, 3, 6]}
    assert isinstance(result["a"][-1], int)


def test_sum_empty_from():
    assert patch({}, [op_sum([], "/total")]) == {"total": 0}


def test_sum_errors():
    with pytest.raises(PatchSyntaxError) as excinfo:
        patch({}, [{"op": "sum", "path": "/total"}])
    assert excinfo.value.description.startswith("missing `from`")

    for value in ("1", True, None, [1]):
        with pytest.raises(PatchPathError) as excinfo:
            patch({"a": 1, "b": value}, [op_sum(["/a", "/b"], "/total")])
        assert excinfo.value.description.startswith("can't sum value {!r}".format(value))

    with pytest.raises(PatchPathError):
        patch({"a": 1}, [op_sum(["/a", "/b"], "/total")])
