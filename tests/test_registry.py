"""Tool Registry Tests."""

from unittest.mock import AsyncMock

import pytest

from supa_tools.base import ToolAnnotations, injectable_tool
from supa_tools.adapters.docs.schemas import SearchDocsInput
from supa_tools.exceptions import DuplicateToolError, ToolNotFoundError, ToolValidationError
from supa_tools.registry import ToolRegistry


def make_tool(name="mock_tool", read_only=True, handler=None):
    return injectable_tool(
        name=name,
        description="Mock tool",
        annotations=ToolAnnotations(title="Mock", read_only_hint=read_only),
        parameters=SearchDocsInput,
        execute=handler or AsyncMock(return_value=[]),
    )


def test_register_and_retrieve_tool():
    """Test tool registration and retrieval."""
    registry = ToolRegistry()
    tool = make_tool()

    registry.register(tool)
    retrieved = registry.get("mock_tool")

    assert retrieved is tool
    assert "mock_tool" in registry
    assert len(registry) == 1


def test_get_unknown_tool_returns_none():
    assert ToolRegistry().get("missing") is None


def test_duplicate_name_rejected():
    """Tool names are unique within a registry."""
    registry = ToolRegistry()
    registry.register(make_tool())

    with pytest.raises(DuplicateToolError):
        registry.register(make_tool())


def test_register_all_keeps_order():
    registry = ToolRegistry()
    tools = {name: make_tool(name) for name in ("b_tool", "a_tool")}

    registry.register_all(tools)

    assert registry.names() == ["b_tool", "a_tool"]


def test_filter_by_annotation():
    """Test read-only hint filtering."""
    registry = ToolRegistry()
    registry.register(make_tool("reader", read_only=True))
    registry.register(make_tool("writer", read_only=False))

    assert [t.name for t in registry.filter_by_annotation(read_only=True)] == ["reader"]
    assert [t.name for t in registry.filter_by_annotation(read_only=False)] == ["writer"]


def test_inventory_describes_every_tool():
    registry = ToolRegistry()
    registry.register(make_tool("reader"))

    inventory = registry.inventory()

    assert len(inventory) == 1
    assert inventory[0]["name"] == "reader"
    assert inventory[0]["inputSchema"]["required"] == ["query"]
    assert inventory[0]["annotations"]["readOnlyHint"] is True


class TestCall:
    """Invocation by name."""

    @pytest.mark.asyncio
    async def test_call_delegates_to_tool(self):
        handler = AsyncMock(return_value=["hit"])
        registry = ToolRegistry()
        registry.register(make_tool(handler=handler))

        result = await registry.call("mock_tool", {"query": "rls"})

        assert result == ["hit"]
        assert handler.await_args.args[0].query == "rls"

    @pytest.mark.asyncio
    async def test_call_unknown_tool(self):
        with pytest.raises(ToolNotFoundError, match="missing"):
            await ToolRegistry().call("missing", {})

    @pytest.mark.asyncio
    async def test_call_validates_input(self):
        handler = AsyncMock()
        registry = ToolRegistry()
        registry.register(make_tool(handler=handler))

        with pytest.raises(ToolValidationError):
            await registry.call("mock_tool")

        handler.assert_not_awaited()
