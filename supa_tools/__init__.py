"""Supa-Tools Tool System.

Tool invocation contract, registry, and the per-capability tool sets of a
self-hosted Supabase platform.
"""

from supa_tools.base import SUCCESS_RESPONSE, Tool, ToolAnnotations, injectable_tool
from supa_tools.exceptions import (
    DuplicateToolError,
    ReadOnlyModeError,
    ToolError,
    ToolNotFoundError,
    ToolValidationError,
)
from supa_tools.platform import FeatureGroup, SupabasePlatform
from supa_tools.registry import ToolRegistry
from supa_tools.server import build_tool_registry, build_tool_registry_from_settings

__all__ = [
    "DuplicateToolError",
    "FeatureGroup",
    "ReadOnlyModeError",
    "SUCCESS_RESPONSE",
    "SupabasePlatform",
    "Tool",
    "ToolAnnotations",
    "ToolError",
    "ToolNotFoundError",
    "ToolRegistry",
    "ToolValidationError",
    "build_tool_registry",
    "build_tool_registry_from_settings",
    "injectable_tool",
]
