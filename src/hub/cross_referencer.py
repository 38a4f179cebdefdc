"""Team hub cross-reference passes.

This module links team members with the projects, groups, locations,
snippets, and skills that mention them. Passes mutate one site data
snapshot in place and must run in dependency order: projects and groups
before locations.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from core.constants import (
    CODE_FIELD,
    GROUPS_PASS_PREFIX,
    LOCATION_FIELD,
    LOCATION_SUMMARY_CATEGORIES,
    LOCATIONS_COLLECTION,
    LOCATIONS_PASS,
    NAME_FIELD,
    PROJECTS_FIELD,
    PROJECTS_PASS,
    SKILLS_KEY,
    SKILLS_PASS,
    SNIPPETS_FIELD,
    SNIPPETS_LATEST_KEY,
    SNIPPETS_PASS,
    SNIPPETS_TEAM_MEMBERS_KEY,
    TEAM_FIELD,
    TEAM_INDEX_NAME,
    TEAM_LIST_SEPARATOR_PATTERN,
    WORKING_GROUPS_FIELD,
)
from core.errors import CrossReferenceOrderError
from core.logging_config import get_logger
from core.types import Record, Snapshot, UniqueIndex
from hub.join import join_array_data
from xref.cross_reference import create_xrefs, resolve_reference
from xref.indexing import create_index, create_unique_index

_LOGGER = get_logger(__name__)


class CrossReferencer:
    """Stateful coordinator for cross-reference passes over one snapshot.

    The team index maps member names to member records and is built once;
    duplicate names keep the last record.
    """

    def __init__(self, site_data: Snapshot) -> None:
        self._site_data = site_data
        self._team = create_unique_index(site_data.get(TEAM_FIELD), NAME_FIELD)
        self._completed_passes: list[str] = []

    @property
    def site_data(self) -> Snapshot:
        """Snapshot being cross-referenced."""
        return self._site_data

    @property
    def team(self) -> UniqueIndex:
        """Team member name to member record."""
        return self._team

    @property
    def completed_passes(self) -> tuple[str, ...]:
        """Pass names in the order they ran."""
        return tuple(self._completed_passes)

    def xref_projects_and_team_members(self) -> None:
        """Replace project ``team`` names with member records.

        Comma-separated ``team`` strings are split into names first. Each
        resolved member gains the project in its ``projects`` list.
        """
        projects = self._site_data.get(PROJECTS_FIELD) or []
        for project in projects:
            team = project.get(TEAM_FIELD)
            if isinstance(team, str):
                project[TEAM_FIELD] = re.split(TEAM_LIST_SEPARATOR_PATTERN, team)
        create_xrefs(projects, TEAM_FIELD, self._team, PROJECTS_FIELD, collection=TEAM_INDEX_NAME)
        self._complete(PROJECTS_PASS, projects=len(projects))

    def xref_groups_and_team_members(
        self, groups_name: str, member_type_list_names: Sequence[str]
    ) -> None:
        """Cross-reference a group collection with team members.

        Args:
            groups_name: Snapshot key of the group collection, e.g.
                ``working_groups``; also the member field collecting groups.
            member_type_list_names: Group fields listing member names, e.g.
                ``["leads", "members"]``.
        """
        groups = self._site_data.get(groups_name)
        for member_type in member_type_list_names:
            create_xrefs(groups, member_type, self._team, groups_name, collection=TEAM_INDEX_NAME)
        for member in self._team.values():
            member_groups = member.get(groups_name)
            if member_groups:
                member_groups[:] = _unique_by_name(member_groups)
        self._complete(GROUPS_PASS_PREFIX + groups_name, groups=len(groups or []))

    def xref_locations(self) -> list[Record]:
        """Summarize team members, projects, and working groups per location.

        Summaries are sorted by location code and merged by ``code`` into
        the snapshot's ``locations`` collection.

        Returns:
            The merged ``locations`` collection.

        Raises:
            CrossReferenceOrderError: If the projects or working groups pass
                has not run yet.
        """
        self._require_passes(
            LOCATIONS_PASS, (PROJECTS_PASS, GROUPS_PASS_PREFIX + WORKING_GROUPS_FIELD)
        )
        index = create_index(self._site_data.get(TEAM_FIELD), LOCATION_FIELD)
        summaries = [
            _location_summary(code, index[code]) for code in sorted(index, key=str)
        ]
        existing = self._site_data.get(LOCATIONS_COLLECTION)
        if existing is None:
            self._site_data[LOCATIONS_COLLECTION] = summaries
            merged = summaries
        else:
            merged = join_array_data(CODE_FIELD, existing, summaries)
        self._complete(LOCATIONS_PASS, locations=len(summaries))
        return merged

    def xref_snippets_and_team_members(self, *, strict: bool = True) -> None:
        """Attach snippets to their authors.

        Snippet batches are processed in mapping order, which is expected to
        be chronological; the last batch key becomes ``snippets_latest``.

        Args:
            strict: Raise for a snippet whose author is not a team member;
                otherwise drop it.

        Raises:
            CrossReferenceNotFoundError: If strict and an author is unknown.
        """
        batches = self._site_data.get(SNIPPETS_FIELD) or {}
        snippet_count = 0
        for timestamp, snippets in batches.items():
            for snippet in snippets:
                author = resolve_reference(
                    self._team,
                    snippet.get(NAME_FIELD),
                    strict=strict,
                    collection=TEAM_INDEX_NAME,
                )
                if author is None:
                    continue
                author.setdefault(SNIPPETS_FIELD, []).append(snippet)
                snippet_count += 1
            self._site_data[SNIPPETS_LATEST_KEY] = timestamp
        if batches:
            self._site_data[SNIPPETS_TEAM_MEMBERS_KEY] = [
                member for member in self._team.values() if member.get(SNIPPETS_FIELD)
            ]
        self._complete(SNIPPETS_PASS, batches=len(batches), snippets=snippet_count)

    def xref_skills_and_team_members(self, categories: Iterable[str]) -> None:
        """Bucket team members by the skills they list per category.

        Members list skills under the lowercased category name, e.g. the
        ``Languages`` category reads each member's ``languages`` field.
        Empty categories are dropped; ``skills`` is only written when at
        least one category has members.

        Args:
            categories: Skill category names.
        """
        skills: dict[str, dict[str, list[Record]]] = {category: {} for category in categories}
        for member in self._team.values():
            for category, buckets in skills.items():
                for skill in member.get(category.lower()) or []:
                    buckets.setdefault(skill, []).append(member)
        skills = {category: buckets for category, buckets in skills.items() if buckets}
        if skills:
            self._site_data[SKILLS_KEY] = skills
        self._complete(SKILLS_PASS, categories=len(skills))

    def _complete(self, pass_name: str, **fields: object) -> None:
        self._completed_passes.append(pass_name)
        _LOGGER.info("xref_pass_completed", pass_name=pass_name, **fields)

    def _require_passes(self, pass_name: str, required: Sequence[str]) -> None:
        missing = [name for name in required if name not in self._completed_passes]
        if missing:
            raise CrossReferenceOrderError(
                f"Cannot run the {pass_name} pass before {', '.join(missing)}. "
                "Run the projects and working groups passes first."
            )


def _unique_by_name(records: list[Record]) -> list[Record]:
    """Drop records whose name was already seen, keeping first occurrences."""
    unique: list[Record] = []
    seen_names: set[object] = set()
    for record in records:
        name = record.get(NAME_FIELD)
        if name in seen_names:
            continue
        seen_names.add(name)
        unique.append(record)
    return unique


def _location_summary(code: object, team: list[Record]) -> Record:
    """Build the summary record for one location code."""
    summary: Record = {CODE_FIELD: code, TEAM_FIELD: team}
    for category in LOCATION_SUMMARY_CATEGORIES:
        items: list[Record] = []
        for member in team:
            items.extend(member.get(category) or [])
        items.sort(key=lambda item: str(item.get(NAME_FIELD, "")))
        items = _unique_by_name(items)
        if items:
            summary[category] = items
    return summary
