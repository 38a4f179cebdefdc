"""Keyed merging of record collections.

This module merges freshly derived records into an existing collection,
matching entries by a key field and deep-merging their contents.
"""

from __future__ import annotations

from typing import Any

from core.errors import JoinError
from core.types import Record


def deep_merge(lhs: Any, rhs: Any) -> Any:
    """Merge ``rhs`` into ``lhs`` in place.

    Mappings merge recursively, lists are extended, and any other value is
    replaced by the right-hand side.

    Args:
        lhs: Value receiving the merge.
        rhs: Value merged into ``lhs``.

    Returns:
        The merged value; ``lhs`` itself for mappings and lists.

    Raises:
        JoinError: If one side is a mapping or list and the other is not.
    """
    if isinstance(lhs, dict) and isinstance(rhs, dict):
        for key, value in rhs.items():
            if key in lhs:
                lhs[key] = deep_merge(lhs[key], value)
            else:
                lhs[key] = value
        return lhs
    if isinstance(lhs, list) and isinstance(rhs, list):
        lhs.extend(rhs)
        return lhs
    if isinstance(lhs, (dict, list)) or isinstance(rhs, (dict, list)):
        raise JoinError(
            f"Cannot merge {type(rhs).__name__} into {type(lhs).__name__}: "
            "both sides of a field must be mappings, lists, or scalars."
        )
    return rhs


def join_array_data(key: str, lhs: list[Record], rhs: list[Record]) -> list[Record]:
    """Merge ``rhs`` records into ``lhs`` by ``key``.

    Entries of ``rhs`` whose key matches an ``lhs`` entry are deep-merged
    into it; the rest are appended.

    Args:
        key: Field identifying matching entries.
        lhs: Existing collection, updated in place.
        rhs: New entries to merge.

    Returns:
        The updated ``lhs`` list.

    Raises:
        JoinError: If inputs are not lists or an entry lacks ``key``.
    """
    if not isinstance(lhs, list) or not isinstance(rhs, list):
        raise JoinError(
            f"Cannot join on '{key}': both sides must be lists of records, "
            f"got {type(lhs).__name__} and {type(rhs).__name__}."
        )
    lhs_index: dict[Any, Record] = {}
    for entry in lhs:
        lhs_index[_join_value(entry, key, "lhs")] = entry
    for entry in rhs:
        value = _join_value(entry, key, "rhs")
        existing = lhs_index.get(value)
        if existing is None:
            lhs.append(entry)
            lhs_index[value] = entry
            continue
        deep_merge(existing, entry)
    return lhs


def _join_value(entry: Record, key: str, side: str) -> Any:
    """Return the join key value of one entry.

    Args:
        entry: Record from either side of the join.
        key: Field identifying matching entries.
        side: ``lhs`` or ``rhs``, used in the error message.

    Returns:
        The entry's ``key`` value.

    Raises:
        JoinError: If the entry has no ``key`` field.
    """
    if key not in entry:
        raise JoinError(f"Cannot join on '{key}': an {side} entry has no '{key}' field.")
    return entry[key]
