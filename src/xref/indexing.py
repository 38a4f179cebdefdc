"""Collection indexing helpers.

This module groups record collections by a key field and converts
unique-key indexes back into plain record lists.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from core.constants import PRIVATE_INDEX_KEY
from core.types import Index, Record, UniqueIndex


def create_index(collection: Iterable[Record] | None, key: str) -> Index:
    """Group records by the value of one field.

    Records lacking ``key``, or holding None for it, are dropped.

    Args:
        collection: Records from which to build the index.
        key: Field used to group records.

    Returns:
        Key value to records sharing that value, in input order.
    """
    index: Index = {}
    for record in collection or []:
        value = record.get(key)
        if value is None:
            continue
        index.setdefault(value, []).append(record)
    return index


def create_unique_index(collection: Iterable[Record] | None, key: str) -> UniqueIndex:
    """Map each key value to a single record.

    Later records with a duplicate key replace earlier ones.

    Args:
        collection: Records from which to build the index.
        key: Field whose values are expected to be unique.

    Returns:
        Key value to record.
    """
    index: UniqueIndex = {}
    for record in collection or []:
        value = record.get(key)
        if value is None:
            continue
        index[value] = record
    return index


def flatten_index(index: Mapping[str, object]) -> list[object]:
    """Return the records of a unique-key index as a list.

    The ``private`` entry holds its own name-to-record mapping and is
    emitted in place as ``{"private": [records...]}``.

    Args:
        index: Key to record mapping.

    Returns:
        Index values in index order.
    """
    flattened: list[object] = []
    for key, value in index.items():
        if key == PRIVATE_INDEX_KEY and isinstance(value, Mapping):
            flattened.append({PRIVATE_INDEX_KEY: list(value.values())})
            continue
        flattened.append(value)
    return flattened
