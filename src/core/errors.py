"""Team hub exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class TeamHubError(Exception):
    """Base exception for all team hub failures."""


class TeamHubConfigError(TeamHubError):
    """Raised for invalid runtime configuration."""


class CrossReferenceNotFoundError(TeamHubError):
    """Raised when a strict lookup names a record that does not exist.

    Attributes:
        key: Identifier that could not be resolved.
        collection: Name of the index that was searched.
    """

    def __init__(self, key: object, collection: str) -> None:
        super().__init__(
            f"Referenced entity not found: '{key}' is not a key of '{collection}'. "
            "Fix the source data so every reference names an existing record."
        )
        self.key = key
        self.collection = collection


class CrossReferenceOrderError(TeamHubError):
    """Raised when a pass runs before the passes it depends on."""


class JoinError(TeamHubError):
    """Raised when collections cannot be merged by key."""
