"""Tool layer exceptions.

Platform failures are never wrapped in these; they propagate to the caller
exactly as the capability implementation raised them.
"""

from typing import Any

from pydantic import ValidationError


class ToolError(Exception):
    """Base exception for the tool layer."""

    pass


class ToolValidationError(ToolError):
    """Raw input does not satisfy a tool's parameter schema."""

    def __init__(self, tool_name: str, error: ValidationError):
        self.tool_name = tool_name
        self.errors: list[dict[str, Any]] = error.errors(include_url=False)
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<input>'}: {err['msg']}"
            for err in self.errors
        )
        super().__init__(f"Invalid input for tool '{tool_name}': {details}")


class ReadOnlyModeError(ToolError):
    """A mutating tool was invoked while read-only mode is active."""

    pass


class ToolNotFoundError(ToolError):
    """No tool is registered under the requested name."""

    pass


class DuplicateToolError(ToolError):
    """A tool name is already taken in the registry."""

    pass
