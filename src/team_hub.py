"""Public SDK surface for the team hub cross-referencer.

This module provides a stable import path for site build collaborators.
It re-exports the engine functions, the orchestrator, and config models.
"""

from __future__ import annotations

from core.config import TeamHubConfig
from core.errors import (
    CrossReferenceNotFoundError,
    CrossReferenceOrderError,
    JoinError,
    TeamHubConfigError,
    TeamHubError,
)
from core.types import CrossReferenceResult
from hub.cross_referencer import CrossReferencer
from hub.join import deep_merge, join_array_data
from hub.pipeline import run_cross_reference_pipeline
from xref.cross_reference import create_xrefs, resolve_reference
from xref.flatten import flatten_property, flatten_property_in_place, property_map
from xref.indexing import create_index, create_unique_index, flatten_index

__all__ = [
    "CrossReferenceNotFoundError",
    "CrossReferenceOrderError",
    "CrossReferenceResult",
    "CrossReferencer",
    "JoinError",
    "TeamHubConfig",
    "TeamHubConfigError",
    "TeamHubError",
    "create_index",
    "create_unique_index",
    "create_xrefs",
    "deep_merge",
    "flatten_index",
    "flatten_property",
    "flatten_property_in_place",
    "join_array_data",
    "property_map",
    "resolve_reference",
    "run_cross_reference_pipeline",
]
