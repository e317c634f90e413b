# Copyright (c) Microsoft. All rights reserved.

from dataclasses import dataclass

from mistral_chat_options import FunctionTool
from mistral_chat_options.hashing import make_hashable


def test_scalars_unchanged():
    assert make_hashable("text") == "text"
    assert make_hashable(3) == 3
    assert make_hashable(None) is None


def test_nested_containers():
    value = {"a": [1, 2, {"b": {3, 4}}], "c": (5,)}

    result = make_hashable(value)

    hash(result)
    assert result == make_hashable({"c": [5], "a": [1, 2, {"b": {4, 3}}]})


def test_list_order_is_kept():
    assert make_hashable([1, 2]) != make_hashable([2, 1])


def test_set_order_is_ignored():
    assert make_hashable({"x", "y", "z"}) == make_hashable({"z", "y", "x"})


def test_pydantic_models():
    first = FunctionTool.from_function("lookup", parameters={"type": "object"})
    second = FunctionTool.from_function("lookup", parameters={"type": "object"})

    assert make_hashable(first) == make_hashable(second)
    assert hash(make_hashable(first)) == hash(make_hashable(second))


def test_self_reference():
    value: list = [1]
    value.append(value)

    result = make_hashable(value)

    hash(result)


@dataclass
class _Payload:
    user: str


def test_unhashable_leaves():
    assert make_hashable(_Payload("alice")) == make_hashable(_Payload("alice"))
    assert make_hashable(bytearray(b"raw")) == make_hashable(b"raw")

    hash(make_hashable({"payload": _Payload("alice"), "raw": bytearray(b"raw")}))
