# Copyright (c) Microsoft. All rights reserved.

from typing import Any

from pydantic import BaseModel


def make_hashable(input: Any, visited: dict[int, Any] | None = None) -> Any:
    """Recursively convert unhashable types to hashable equivalents.

    Sets and mappings become frozensets, so two equal containers always produce the
    same hashable value regardless of their iteration order. Lists and tuples keep
    their order.

    Args:
        input: The input to convert to a hashable type.
        visited: A dictionary of visited objects to prevent infinite recursion.

    Returns:
        Any: The input converted to a hashable type.
    """
    if visited is None:
        visited = {}

    # If we've seen this object before, return the stored placeholder or final result
    unique_obj_id = id(input)
    if unique_obj_id in visited:
        return visited[unique_obj_id]

    # Handle Pydantic models by manually traversing fields
    if isinstance(input, BaseModel):
        visited[unique_obj_id] = None
        data = tuple(
            (field_name, make_hashable(getattr(input, field_name), visited))
            for field_name in type(input).model_fields
        )
        result = (type(input).__name__, data)
        visited[unique_obj_id] = result
        return result

    if isinstance(input, dict):
        visited[unique_obj_id] = None
        items = frozenset((key, make_hashable(value, visited)) for key, value in input.items())
        visited[unique_obj_id] = items
        return items

    if isinstance(input, (set, frozenset)):
        visited[unique_obj_id] = None
        members = frozenset(make_hashable(item, visited) for item in input)
        visited[unique_obj_id] = members
        return members

    if isinstance(input, (list, tuple)):
        visited[unique_obj_id] = None
        sequence = tuple(make_hashable(item, visited) for item in input)
        visited[unique_obj_id] = sequence
        return sequence

    if isinstance(input, bytearray):
        return bytes(input)

    try:
        hash(input)
    except TypeError:
        # Equal objects share a type, so the type name keeps hashes consistent with equality
        return ("__unhashable__", type(input).__qualname__)
    return input
