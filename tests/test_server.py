"""Registry composition tests."""

from unittest.mock import AsyncMock

import pytest

from supa_config.settings import Settings
from supa_tools.platform import FeatureGroup, SupabasePlatform, parse_feature_groups
from supa_tools.server import build_tool_registry, build_tool_registry_from_settings

AUTH_TOOLS = {"list_users", "get_user", "create_user", "delete_user", "generate_link"}


def test_all_groups_registered(registry):
    """Every capability present contributes its tools."""
    assert len(registry) == 39
    assert AUTH_TOOLS <= set(registry.names())
    assert {"search_docs", "execute_sql", "run_script", "get_logs", "get_advisors"} <= set(
        registry.names()
    )


def test_absent_capability_yields_no_tools():
    platform = SupabasePlatform(auth=AsyncMock())

    registry = build_tool_registry(platform)

    assert set(registry.names()) == AUTH_TOOLS


def test_feature_gating(platform):
    registry = build_tool_registry(platform, features=["auth", "docs"])

    assert set(registry.names()) == AUTH_TOOLS | {"search_docs"}


def test_enabled_group_without_capability_is_skipped():
    platform = SupabasePlatform(docs=AsyncMock())

    registry = build_tool_registry(platform, features=[FeatureGroup.AUTH, FeatureGroup.DOCS])

    assert registry.names() == ["search_docs"]


def test_unknown_feature_rejected(platform):
    with pytest.raises(ValueError, match="account"):
        build_tool_registry(platform, features=["account"])


def test_parse_feature_groups_normalizes():
    groups = parse_feature_groups([" Auth", "docs", "", "auth"])

    assert groups == [FeatureGroup.AUTH, FeatureGroup.DOCS]


def test_platform_capabilities_lists_present_only():
    auth = AsyncMock()
    platform = SupabasePlatform(auth=auth)

    assert list(platform.capabilities()) == [(FeatureGroup.AUTH, auth)]
    assert platform.get(FeatureGroup.STORAGE) is None


def test_independent_registries_keep_their_own_flags(platform):
    """Two registries in one process do not share configuration."""
    writable = build_tool_registry(platform, read_only=False)
    locked = build_tool_registry(platform, read_only=True)

    assert writable.get("execute_sql").annotations.read_only_hint is False
    assert locked.get("execute_sql").annotations.read_only_hint is True


@pytest.mark.asyncio
async def test_build_from_settings(platform, auth, monkeypatch):
    monkeypatch.setenv("SUPABASE_PROJECT_ID", "proj-9")
    monkeypatch.setenv("READ_ONLY", "true")
    monkeypatch.setenv("FEATURES", "auth")
    settings = Settings(_env_file=None)

    registry = build_tool_registry_from_settings(platform, settings)

    assert set(registry.names()) == AUTH_TOOLS
    await registry.call("get_user", {"user_id": "u1"})
    auth.get_user.assert_awaited_once_with("proj-9", "u1")
