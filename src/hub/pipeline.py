"""Full cross-reference pipeline.

This module runs every team hub pass over one snapshot in dependency
order and reports what ran.
"""

from __future__ import annotations

from core.config import TeamHubConfig
from core.constants import WORKING_GROUPS_FIELD
from core.logging_config import get_logger
from core.types import CrossReferenceResult, Snapshot
from hub.cross_referencer import CrossReferencer

_LOGGER = get_logger(__name__)


def run_cross_reference_pipeline(
    site_data: Snapshot,
    config: TeamHubConfig | None = None,
) -> CrossReferenceResult:
    """Cross-reference a site data snapshot in place.

    Runs projects, working groups and each other configured group
    collection, locations, snippets, and skills, in that order.

    Args:
        site_data: Snapshot of named collections to mutate.
        config: Optional config; read from the environment when omitted.

    Returns:
        Pipeline result holding the snapshot and team index.

    Raises:
        CrossReferenceNotFoundError: If a snippet author is unknown and
            strict snippet authors are configured.
    """
    resolved_config = config or TeamHubConfig.from_env()
    referencer = CrossReferencer(site_data)
    referencer.xref_projects_and_team_members()
    for groups_name in _group_collections(resolved_config):
        referencer.xref_groups_and_team_members(
            groups_name, resolved_config.group_member_fields
        )
    referencer.xref_locations()
    referencer.xref_snippets_and_team_members(strict=resolved_config.strict_snippet_authors)
    referencer.xref_skills_and_team_members(resolved_config.skill_categories)
    _LOGGER.info(
        "xref_pipeline_completed",
        team_members=len(referencer.team),
        passes=list(referencer.completed_passes),
    )
    return CrossReferenceResult(
        snapshot=referencer.site_data,
        team_index=referencer.team,
        completed_passes=referencer.completed_passes,
    )


def _group_collections(config: TeamHubConfig) -> tuple[str, ...]:
    """Return configured group collections, with working groups always first.

    The locations pass summarizes working groups, so that pass always runs
    even when the collection is not configured or absent from the snapshot.
    """
    others = tuple(name for name in config.group_collections if name != WORKING_GROUPS_FIELD)
    return (WORKING_GROUPS_FIELD, *others)
