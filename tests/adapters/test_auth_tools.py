"""Tests for auth tools."""

from unittest.mock import AsyncMock

import pytest

from supa_tools.adapters.auth import (
    CreateUserOptions,
    GenerateLinkOptions,
    GenerateLinkResult,
    ListUsersOptions,
    User,
    get_auth_tools,
)
from supa_tools.exceptions import ReadOnlyModeError, ToolValidationError


@pytest.fixture
def mock_user():
    return User(id="u1", email="a@b.com", created_at="2025-11-03T00:00:00Z")


class TestListUsers:
    @pytest.mark.asyncio
    async def test_passes_pagination(self, auth, mock_user):
        auth.list_users.return_value = [mock_user]
        tools = get_auth_tools(auth, project_id="proj-1")

        result = await tools["list_users"].execute({"page": 2, "per_page": 10})

        assert result == [mock_user]
        auth.list_users.assert_awaited_once_with("proj-1", ListUsersOptions(page=2, per_page=10))


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_create_user_success(self, auth, mock_user):
        """Options contain only what the caller supplied; result is verbatim."""
        auth.create_user.return_value = mock_user
        tools = get_auth_tools(auth, project_id="proj-1", read_only=False)

        result = await tools["create_user"].execute({"email": "a@b.com"})

        assert result is mock_user
        auth.create_user.assert_awaited_once_with("proj-1", CreateUserOptions(email="a@b.com"))
        options = auth.create_user.await_args.args[1]
        assert options.model_dump(exclude_unset=True) == {"email": "a@b.com"}

    @pytest.mark.asyncio
    async def test_create_user_read_only(self, auth):
        tools = get_auth_tools(auth, project_id="proj-1", read_only=True)

        with pytest.raises(ReadOnlyModeError, match="Cannot create user in read-only mode."):
            await tools["create_user"].execute({"email": "a@b.com"})

        auth.create_user.assert_not_awaited()


class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_returns_success_marker(self, auth):
        auth.delete_user.return_value = None
        tools = get_auth_tools(auth, project_id="proj-1")

        result = await tools["delete_user"].execute({"user_id": "u1"})

        assert result == {"success": True}
        auth.delete_user.assert_awaited_once_with("proj-1", "u1")

    @pytest.mark.asyncio
    async def test_injected_project_wins(self, auth):
        tools = get_auth_tools(auth, project_id="proj-1")

        await tools["delete_user"].execute({"project_id": "proj-2", "user_id": "u1"})

        auth.delete_user.assert_awaited_once_with("proj-1", "u1")


class TestGenerateLink:
    @pytest.mark.asyncio
    async def test_invite_requires_email(self, auth):
        tools = get_auth_tools(auth, project_id="proj-1")

        with pytest.raises(ToolValidationError, match="email"):
            await tools["generate_link"].execute({"type": "invite"})

        auth.generate_link.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rejects_unknown_link_type(self, auth):
        tools = get_auth_tools(auth, project_id="proj-1")

        with pytest.raises(ToolValidationError):
            await tools["generate_link"].execute({"type": "password_reset", "email": "a@b.com"})

        auth.generate_link.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_generate_link_success(self, auth):
        link = GenerateLinkResult(action_link="https://example.test/verify?token=abc")
        auth.generate_link.return_value = link
        tools = get_auth_tools(auth, project_id="proj-1")

        result = await tools["generate_link"].execute(
            {"type": "recovery", "email": "a@b.com", "redirect_to": "https://app.test"}
        )

        assert result is link
        auth.generate_link.assert_awaited_once_with(
            "proj-1",
            GenerateLinkOptions(type="recovery", email="a@b.com", redirect_to="https://app.test"),
        )


def test_annotations():
    tools = get_auth_tools(AsyncMock())

    assert tools["list_users"].annotations.read_only_hint is True
    assert tools["delete_user"].annotations.destructive_hint is True
    assert tools["create_user"].annotations.destructive_hint is False
    assert "project_id" in tools["get_user"].input_schema["required"]
