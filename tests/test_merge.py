"""Tests for the merge engine used by update_item."""
import copy

from core.merge import ValueKind, kind_of, merge


DOC = {
    "id": "item-001",
    "status": "active",
    "value": 100,
    "tags": ["a", "b"],
    "nested": {"a": 1, "deep": {"x": 1, "y": 2}},
}


def test_empty_patch_is_identity():
    assert merge(DOC, {}) == DOC


def test_nested_objects_are_merged():
    result = merge(DOC, {"nested": {"b": 2, "deep": {"y": 20, "z": 30}}})
    assert result["nested"] == {"a": 1, "b": 2, "deep": {"x": 1, "y": 20, "z": 30}}
    assert result["status"] == "active"


def test_arrays_are_replaced_wholesale():
    result = merge(DOC, {"tags": ["c"]})
    assert result["tags"] == ["c"]


def test_scalar_replaces_object_and_object_replaces_scalar():
    result = merge(DOC, {"nested": 5, "status": {"code": "on"}})
    assert result["nested"] == 5
    assert result["status"] == {"code": "on"}


def test_null_overwrites_but_does_not_delete():
    result = merge(DOC, {"status": None})
    assert "status" in result
    assert result["status"] is None


def test_new_fields_are_added():
    result = merge({"id": "1"}, {"nested": {"a": 1}})
    assert result == {"id": "1", "nested": {"a": 1}}


def test_inputs_are_not_mutated_or_aliased():
    target = copy.deepcopy(DOC)
    patch = {"nested": {"deep": {"x": 99}}, "extra": {"k": [1, 2]}}
    patch_before = copy.deepcopy(patch)

    result = merge(target, patch)

    assert target == DOC
    assert patch == patch_before
    result["nested"]["deep"]["x"] = -1
    result["extra"]["k"].append(3)
    assert target["nested"]["deep"]["x"] == 1
    assert patch["extra"]["k"] == [1, 2]


def test_sequential_patches_are_right_biased():
    p = {"nested": {"a": 10, "deep": {"x": 10}}, "value": 1}
    q = {"nested": {"deep": {"x": 20, "w": 0}}, "tags": []}

    twice = merge(merge(DOC, p), q)

    assert twice["nested"]["a"] == 10
    assert twice["nested"]["deep"] == {"x": 20, "y": 2, "w": 0}
    assert twice["value"] == 1
    assert twice["tags"] == []
    # Same result as applying q on top of p in one go.
    assert twice == merge(DOC, merge(p, q))


def test_kind_of():
    assert kind_of({}) is ValueKind.OBJECT
    assert kind_of([1]) is ValueKind.ARRAY
    assert kind_of("x") is ValueKind.SCALAR
    assert kind_of(None) is ValueKind.SCALAR
    assert kind_of(3.5) is ValueKind.SCALAR
