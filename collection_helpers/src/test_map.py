import builtins
import copy
import types

import pytest

from collection_helpers.src.errors import InvalidArgumentError

# Ensure the module imports without side effects or name shadowing issues
def test_import_map_module():
    mod = __import__("collection_helpers.src.map", fromlist=["*"])
    assert isinstance(mod, types.ModuleType)
    assert not hasattr(mod, "map")

def test_builtin_map_not_shadowed():
    from collection_helpers.src import map as _mapping_module  # noqa: F401

    assert builtins.map is map  # noqa: F821 - checking runtime binding

def test_map_collection_even_odd():
    from collection_helpers.src.map import map_collection

    out = map_collection([11, 7, 4, 20, 15], lambda v, i: "even" if v % 2 == 0 else "odd")
    assert out == ["odd", "odd", "even", "even", "odd"]

def test_map_collection_mapping():
    from collection_helpers.src.map import map_collection

    out = map_collection({"state": "MA", "zip": "02111"}, lambda v, k: "I like " + v)
    assert out == {"state": "I like MA", "zip": "I like 02111"}

def test_map_collection_passes_index_and_key():
    from collection_helpers.src.map import map_collection

    assert map_collection(["a", "b", "c"], lambda v, i: f"{i}:{v}") == ["0:a", "1:b", "2:c"]
    assert map_collection({"x": 1, "y": 2}, lambda v, k: k * v) == {"x": "x", "y": "yy"}

def test_map_collection_preserves_cardinality_and_keys():
    from collection_helpers.src.map import map_collection

    seq = [3, 1, 4, 1, 5, 9, 2, 6]
    out = map_collection(seq, lambda v, i: v * i)
    assert len(out) == len(seq)
    assert all(out[i] == seq[i] * i for i in range(len(seq)))

    mapping = {"a": 1, "b": 2, 3: "c"}
    out_map = map_collection(mapping, lambda v, k: (k, v))
    assert set(out_map) == set(mapping)
    assert all(out_map[k] == (k, mapping[k]) for k in mapping)

def test_map_collection_returns_new_container():
    from collection_helpers.src.map import map_collection

    seq = [1, 2, 3]
    mapping = {"a": [1], "b": [2]}
    seq_snapshot = copy.deepcopy(seq)
    map_snapshot = copy.deepcopy(mapping)

    out_seq = map_collection(seq, lambda v, i: v)
    out_map = map_collection(mapping, lambda v, k: v)

    assert out_seq == seq and out_seq is not seq
    assert out_map == mapping and out_map is not mapping
    assert seq == seq_snapshot
    assert mapping == map_snapshot

def test_map_collection_tuple_becomes_list():
    from collection_helpers.src.map import map_collection

    assert map_collection((1, 2), lambda v, i: v + 1) == [2, 3]

def test_map_collection_empty_inputs():
    from collection_helpers.src.map import map_collection

    assert map_collection([], lambda v, i: v) == []
    assert map_collection({}, lambda v, k: v) == {}

def test_map_collection_call_order_follows_each():
    from collection_helpers.src.map import map_collection

    calls = []

    def transform(value, key):
        calls.append(key)
        return value

    map_collection({"z": 1, "a": 2, "m": 3}, transform)
    assert calls == ["z", "a", "m"]

def test_shape_specific_entry_points():
    from collection_helpers.src.map import map_mapping, map_sequence

    assert map_sequence([1, 2], lambda v, i: v * 10) == [10, 20]
    assert map_mapping({"k": 1}, lambda v, k: v - 1) == {"k": 0}

def test_type_errors(monkeypatch):
    monkeypatch.delenv("COLLECTION_HELPERS_UNSUPPORTED_INPUT", raising=False)
    from collection_helpers.src.map import map_collection

    with pytest.raises(TypeError):
        map_collection([1, 2], 123)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError) as ei:
        map_collection([1], None)  # type: ignore[arg-type]
    assert ei.value.detail["code"] == "NOT_CALLABLE"
    with pytest.raises(InvalidArgumentError) as ei:
        map_collection(42, lambda v, i: v)
    assert ei.value.detail["code"] == "INVALID_CONTAINER"

def test_transform_exception_propagates():
    from collection_helpers.src.map import map_collection

    def boom(value, index):
        raise ValueError("bad value")

    with pytest.raises(ValueError):
        map_collection([1], boom)

def test_map_collection_unsupported_as_empty(monkeypatch):
    monkeypatch.setenv("COLLECTION_HELPERS_UNSUPPORTED_INPUT", "empty")
    from collection_helpers.src.map import map_collection

    out = map_collection(7, lambda v, k: v)
    assert out == {}
    assert isinstance(out, dict)
