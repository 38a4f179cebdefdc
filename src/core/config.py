"""Runtime configuration model for the team hub.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_GROUP_COLLECTIONS,
    DEFAULT_GROUP_MEMBER_FIELDS,
    DEFAULT_SKILL_CATEGORIES,
    DEFAULT_STRICT_SNIPPET_AUTHORS,
)
from core.errors import TeamHubConfigError

_TRUE_VALUES = ("1", "true", "yes")
_FALSE_VALUES = ("0", "false", "no")


@dataclass(frozen=True)
class TeamHubConfig:
    """Validated runtime configuration.

    Attributes:
        skill_categories: Skill category names; members carry the lowercased
            name as a field listing their skills.
        group_collections: Snapshot collections cross-referenced as groups.
        group_member_fields: Group fields listing member names.
        strict_snippet_authors: Fail when a snippet names an unknown author.
    """

    skill_categories: tuple[str, ...] = DEFAULT_SKILL_CATEGORIES
    group_collections: tuple[str, ...] = DEFAULT_GROUP_COLLECTIONS
    group_member_fields: tuple[str, ...] = DEFAULT_GROUP_MEMBER_FIELDS
    strict_snippet_authors: bool = DEFAULT_STRICT_SNIPPET_AUTHORS

    @classmethod
    def from_env(cls) -> "TeamHubConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            TeamHubConfigError: If environment values are invalid.
        """
        return cls(
            skill_categories=_parse_name_list(
                "TEAM_HUB_SKILL_CATEGORIES", DEFAULT_SKILL_CATEGORIES
            ),
            group_collections=_parse_name_list(
                "TEAM_HUB_GROUP_COLLECTIONS", DEFAULT_GROUP_COLLECTIONS
            ),
            group_member_fields=_parse_name_list(
                "TEAM_HUB_GROUP_MEMBER_FIELDS", DEFAULT_GROUP_MEMBER_FIELDS
            ),
            strict_snippet_authors=_parse_bool(
                "TEAM_HUB_STRICT_SNIPPET_AUTHORS", DEFAULT_STRICT_SNIPPET_AUTHORS
            ),
        )


def _parse_name_list(variable: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Parse a comma-separated environment value into names.

    Args:
        variable: Environment variable name.
        default: Names used when the variable is unset.

    Returns:
        Non-empty tuple of stripped names.

    Raises:
        TeamHubConfigError: If the value contains no names.
    """
    raw_value = os.getenv(variable)
    if raw_value is None:
        return default
    names = tuple(name.strip() for name in raw_value.split(",") if name.strip())
    if not names:
        raise TeamHubConfigError(
            f"Invalid {variable} value: expected comma-separated names, got '{raw_value}'. "
            f"Unset {variable} to use the defaults."
        )
    return names


def _parse_bool(variable: str, default: bool) -> bool:
    raw_value = os.getenv(variable)
    if raw_value is None:
        return default
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise TeamHubConfigError(
        f"Invalid {variable} value: expected true or false, got '{raw_value}'. "
        f"Set {variable} to 'true' or 'false'."
    )
