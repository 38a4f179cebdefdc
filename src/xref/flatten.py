"""Flattening of cross-referenced properties.

Cross-referenced records form cycles, which cannot be serialized or
usefully printed. These helpers replace lists of record references with
lists of one identifying field per record.
"""

from __future__ import annotations

from typing import Iterable

from core.types import Record


def flatten_property(
    collection: Iterable[Record], property_name: str, property_key: str
) -> list[Record]:
    """Return shallow copies of records with one property flattened.

    Args:
        collection: Records whose property should be flattened.
        property_name: Field holding a list of referenced records.
        property_key: Field of each referenced record to keep.

    Returns:
        Copied records; the input records are left untouched.
    """
    flattened: list[Record] = []
    for record in collection:
        item = dict(record)
        references = record.get(property_name)
        if references is not None:
            item[property_name] = [reference[property_key] for reference in references]
        flattened.append(item)
    return flattened


def flatten_property_in_place(
    collection: Iterable[Record], property_name: str, property_key: str
) -> None:
    """Flatten one property of every record, mutating the records.

    Useful to break reference cycles once the linked graph is no longer needed.
    """
    for record in collection:
        references = record.get(property_name)
        if references is not None:
            references[:] = [reference[property_key] for reference in references]


def property_map(
    collection: Iterable[Record],
    primary_key: str,
    property_name: str,
    property_key: str,
) -> dict[object, list[object]]:
    """Map each record's primary key to its flattened property values.

    Records without the property are omitted.

    Args:
        collection: Records to summarize.
        primary_key: Field identifying each record.
        property_name: Field holding a list of referenced records.
        property_key: Field of each referenced record to keep.

    Returns:
        Primary key value to list of referenced key values.
    """
    mapping: dict[object, list[object]] = {}
    for record in collection:
        references = record.get(property_name)
        if references is None:
            continue
        mapping[record.get(primary_key)] = [
            _reference_key(reference, property_key) for reference in references
        ]
    return mapping


def _reference_key(reference: object, property_key: str) -> object:
    """Return the key of a record reference, or an already-flattened value."""
    if isinstance(reference, dict):
        return reference[property_key]
    return reference
