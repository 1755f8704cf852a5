"""Tests for development tools."""

import pytest

from supa_tools.adapters.development import (
    ApiKey,
    GenerateTypescriptTypesResult,
    get_development_tools,
)


@pytest.fixture
def tools(development):
    return get_development_tools(development, project_id="proj-1", read_only=True)


@pytest.mark.asyncio
async def test_get_project_url(tools, development):
    development.get_project_url.return_value = "http://localhost:8000"

    assert await tools["get_project_url"].execute({}) == "http://localhost:8000"
    development.get_project_url.assert_awaited_once_with("proj-1")


@pytest.mark.asyncio
async def test_get_publishable_keys(tools, development):
    keys = [ApiKey(api_key="eyJhbGciOi", name="anon", type="legacy")]
    development.get_publishable_keys.return_value = keys

    assert await tools["get_publishable_keys"].execute({}) is keys


@pytest.mark.asyncio
async def test_generate_typescript_types(tools, development):
    types = GenerateTypescriptTypesResult(types="export type Json = string")
    development.generate_typescript_types.return_value = types

    assert await tools["generate_typescript_types"].execute({}) is types
