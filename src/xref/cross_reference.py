"""Bidirectional cross-references between record collections.

This module replaces identifier lists on source records with references
to target records, and records the reverse link on each target.
Unresolved identifiers are dropped unless a caller asks for strict mode.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from core.errors import CrossReferenceNotFoundError
from core.logging_config import get_logger
from core.types import Record

_LOGGER = get_logger(__name__)


def resolve_reference(
    targets: Mapping[object, Record],
    identifier: object,
    *,
    strict: bool = False,
    collection: str = "targets",
) -> Record | None:
    """Look up one identifier in a target index.

    Args:
        targets: Index of records keyed by identifier.
        identifier: Key naming the wanted record.
        strict: Raise instead of returning None for a missing key.
        collection: Index name used in errors and log events.

    Returns:
        The target record, or None when absent and not strict.

    Raises:
        CrossReferenceNotFoundError: If strict and the key is missing.
    """
    target = targets.get(identifier)
    if target is not None:
        return target
    if strict:
        raise CrossReferenceNotFoundError(identifier, collection)
    _LOGGER.debug("xref_reference_dropped", identifier=str(identifier), collection=collection)
    return None


def create_xrefs(
    sources: Iterable[Record] | None,
    source_key: str,
    targets: Mapping[object, Record],
    target_key: str,
    *,
    strict: bool = False,
    collection: str = "targets",
) -> None:
    """Cross-reference source records with target records.

    Each source's ``source_key`` list of identifiers is rewritten in place
    into a list of target records, and each resolved target gains the
    source in its ``target_key`` list. Sources without ``source_key`` are
    skipped. Entries that are already records are kept, so running this
    twice over the same sources duplicates every reverse link. A source is
    only linked once all of its identifiers resolve, so a strict failure
    leaves that source and its targets unchanged.

    Args:
        sources: Records naming targets by identifier.
        source_key: Source field listing target identifiers.
        targets: Index of target records keyed by identifier.
        target_key: Target field collecting referring sources.
        strict: Raise on an unresolved identifier instead of dropping it.
        collection: Target index name used in errors and log events.

    Raises:
        CrossReferenceNotFoundError: If strict and an identifier is missing.
    """
    for source in sources or []:
        identifiers = source.get(source_key)
        if identifiers is None:
            continue
        resolved: list[Record] = []
        for identifier in identifiers:
            if isinstance(identifier, dict):
                target = identifier
            else:
                target = resolve_reference(
                    targets, identifier, strict=strict, collection=collection
                )
            if target is not None:
                resolved.append(target)
        for target in resolved:
            target.setdefault(target_key, []).append(source)
        identifiers[:] = resolved
