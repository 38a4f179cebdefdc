"""Shared typed models.

Records are open mappings whose field sets grow as cross-reference
passes run, so they are plain dicts rather than closed classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping

Record = dict[str, Any]
Index = dict[Any, list[Record]]
UniqueIndex = dict[Any, Record]
Snapshot = MutableMapping[str, Any]


@dataclass(frozen=True)
class CrossReferenceResult:
    """Outcome of a full cross-reference pipeline run.

    Attributes:
        snapshot: Site data snapshot, mutated in place by every pass.
        team_index: Team member name to member record.
        completed_passes: Pass names in the order they ran.
    """

    snapshot: Snapshot
    team_index: UniqueIndex
    completed_passes: tuple[str, ...]
