"""Tool Registry.

Unique-name tool map with lookup, introspection and invocation by name.
"""

from collections.abc import Mapping
from typing import Any

from supa_obs.logging import get_logger
from supa_tools.base import Tool
from supa_tools.exceptions import DuplicateToolError, ToolNotFoundError

logger = get_logger(__name__)


class ToolRegistry:
    """Tool registry with name-based lookup and invocation."""

    def __init__(self):
        self._tools: dict[str, Tool] = {}

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def register(self, tool: Tool) -> None:
        """Register a tool.

        Raises:
            DuplicateToolError: Name already registered
        """
        if tool.name in self._tools:
            raise DuplicateToolError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def register_all(self, tools: Mapping[str, Tool]) -> None:
        """Register every tool of a factory's name -> tool map."""
        for tool in tools.values():
            self.register(tool)

    def get(self, name: str) -> Tool | None:
        """Get tool by name."""
        return self._tools.get(name)

    def names(self) -> list[str]:
        """Registered tool names, in registration order."""
        return list(self._tools)

    def inventory(self) -> list[dict[str, Any]]:
        """Describe every tool without invoking any of them."""
        return [tool.to_mcp() for tool in self._tools.values()]

    def filter_by_annotation(self, read_only: bool) -> list[Tool]:
        """Filter tools by their read-only hint."""
        return [t for t in self._tools.values() if t.annotations.read_only_hint is read_only]

    async def call(self, name: str, input_data: Mapping[str, Any] | None = None) -> Any:
        """Invoke a tool by name.

        Raises:
            ToolNotFoundError: No tool with that name
        """
        tool = self.get(name)
        if tool is None:
            raise ToolNotFoundError(f"Unknown tool: {name}")

        return await tool.execute(input_data)
