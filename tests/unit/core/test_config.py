"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import TeamHubConfig
from core.constants import DEFAULT_SKILL_CATEGORIES
from core.errors import TeamHubConfigError


def test_from_env_uses_defaults_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to default names without env overrides."""
    monkeypatch.delenv("TEAM_HUB_SKILL_CATEGORIES", raising=False)
    monkeypatch.delenv("TEAM_HUB_STRICT_SNIPPET_AUTHORS", raising=False)

    config = TeamHubConfig.from_env()

    assert config.skill_categories == DEFAULT_SKILL_CATEGORIES
    assert config.strict_snippet_authors is True


def test_from_env_reads_group_collections(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should split comma-separated collection names."""
    monkeypatch.setenv("TEAM_HUB_GROUP_COLLECTIONS", "working_groups, guilds")

    config = TeamHubConfig.from_env()

    assert config.group_collections == ("working_groups", "guilds")


def test_from_env_reads_strict_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should parse boolean strings case-insensitively."""
    monkeypatch.setenv("TEAM_HUB_STRICT_SNIPPET_AUTHORS", "False")

    config = TeamHubConfig.from_env()

    assert config.strict_snippet_authors is False


def test_from_env_raises_for_empty_name_list(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail when a name list has no entries."""
    monkeypatch.setenv("TEAM_HUB_GROUP_MEMBER_FIELDS", " , ")

    with pytest.raises(TeamHubConfigError):
        TeamHubConfig.from_env()


def test_from_env_raises_for_invalid_bool(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a non-boolean strict flag."""
    monkeypatch.setenv("TEAM_HUB_STRICT_SNIPPET_AUTHORS", "sometimes")

    with pytest.raises(TeamHubConfigError, match="TEAM_HUB_STRICT_SNIPPET_AUTHORS"):
        TeamHubConfig.from_env()
