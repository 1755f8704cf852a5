"""Tests for docs tools."""

import pytest

from supa_tools.adapters.docs import DocsSearchResult, get_docs_tools


@pytest.mark.asyncio
async def test_search_docs(docs):
    hits = [DocsSearchResult(title="Row Level Security", url="https://supabase.com/docs/guides/rls", content="...")]
    docs.search_docs.return_value = hits
    tools = get_docs_tools(docs)

    result = await tools["search_docs"].execute({"query": "rls"})

    assert result is hits
    docs.search_docs.assert_awaited_once_with("rls")


def test_search_docs_is_not_project_scoped(docs):
    tool = get_docs_tools(docs)["search_docs"]

    assert tool.inject == {}
    assert set(tool.input_schema["properties"]) == {"query"}
    assert tool.annotations.open_world_hint is True
