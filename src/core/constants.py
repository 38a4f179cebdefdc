"""Core constants used across team hub modules.

This module centralizes field names, pass names, and config defaults.
Keeping values here avoids magic literals in cross-reference logic.
"""

from __future__ import annotations

NAME_FIELD = "name"
LOCATION_FIELD = "location"
CODE_FIELD = "code"
TEAM_FIELD = "team"
PROJECTS_FIELD = "projects"
WORKING_GROUPS_FIELD = "working_groups"
LEADS_FIELD = "leads"
MEMBERS_FIELD = "members"
SNIPPETS_FIELD = "snippets"
LOCATIONS_COLLECTION = "locations"
SNIPPETS_LATEST_KEY = "snippets_latest"
SNIPPETS_TEAM_MEMBERS_KEY = "snippets_team_members"
SKILLS_KEY = "skills"
PRIVATE_INDEX_KEY = "private"
TEAM_INDEX_NAME = "team"
TEAM_LIST_SEPARATOR_PATTERN = r", ?"
LOCATION_SUMMARY_CATEGORIES = (PROJECTS_FIELD, WORKING_GROUPS_FIELD)

PROJECTS_PASS = "projects"
GROUPS_PASS_PREFIX = "groups:"
LOCATIONS_PASS = "locations"
SNIPPETS_PASS = "snippets"
SKILLS_PASS = "skills"

DEFAULT_SKILL_CATEGORIES = ("Languages", "Technologies", "Specialties")
DEFAULT_GROUP_COLLECTIONS = (WORKING_GROUPS_FIELD,)
DEFAULT_GROUP_MEMBER_FIELDS = (LEADS_FIELD, MEMBERS_FIELD)
DEFAULT_STRICT_SNIPPET_AUTHORS = True
