"""Tool registry composition.

Builds one ToolRegistry from a platform's capabilities and the process-wide
configuration (pinned project id, read-only flag, enabled feature groups).
"""

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from supa_obs.logging import get_logger
from supa_tools.adapters.auth import get_auth_tools
from supa_tools.adapters.branching import get_branching_tools
from supa_tools.adapters.database import get_database_tools
from supa_tools.adapters.debugging import get_debugging_tools
from supa_tools.adapters.development import get_development_tools
from supa_tools.adapters.docs import get_docs_tools
from supa_tools.adapters.functions import get_edge_function_tools
from supa_tools.adapters.operations import get_operations_tools
from supa_tools.adapters.storage import get_storage_tools
from supa_tools.base import Tool
from supa_tools.platform import FeatureGroup, SupabasePlatform, parse_feature_groups
from supa_tools.registry import ToolRegistry

if TYPE_CHECKING:
    from supa_config.settings import Settings

logger = get_logger(__name__)

ToolFactory = Callable[[Any, str | None, bool], dict[str, Tool]]

TOOL_FACTORIES: dict[FeatureGroup, ToolFactory] = {
    FeatureGroup.DATABASE: get_database_tools,
    FeatureGroup.DEBUGGING: get_debugging_tools,
    FeatureGroup.DEVELOPMENT: get_development_tools,
    FeatureGroup.STORAGE: get_storage_tools,
    FeatureGroup.AUTH: get_auth_tools,
    FeatureGroup.FUNCTIONS: get_edge_function_tools,
    FeatureGroup.BRANCHING: get_branching_tools,
    FeatureGroup.DOCS: lambda docs, project_id, read_only: get_docs_tools(docs),
    FeatureGroup.OPERATIONS: get_operations_tools,
}


def build_tool_registry(
    platform: SupabasePlatform,
    project_id: str | None = None,
    read_only: bool = False,
    features: Iterable[FeatureGroup | str] | None = None,
) -> ToolRegistry:
    """Register the tools of every enabled feature group the platform supports.

    Args:
        platform: Capability implementations; absent ones are skipped
        project_id: Project id injected into every project-scoped tool
        read_only: Block mutating tools
        features: Groups to enable (default: all)

    Raises:
        ValueError: Unknown feature group name
        DuplicateToolError: Two groups produced the same tool name
    """
    groups = list(FeatureGroup) if features is None else parse_feature_groups(features)

    registry = ToolRegistry()
    for group in groups:
        capability = platform.get(group)
        if capability is None:
            logger.debug("feature_group_skipped", group=group.value, reason="capability_absent")
            continue

        tools = TOOL_FACTORIES[group](capability, project_id, read_only)
        registry.register_all(tools)
        logger.debug("feature_group_registered", group=group.value, tools=len(tools))

    logger.info(
        "tool_registry_built",
        tools=len(registry),
        read_only=read_only,
        project_pinned=project_id is not None,
    )
    return registry


def build_tool_registry_from_settings(
    platform: SupabasePlatform, settings: "Settings"
) -> ToolRegistry:
    """Build the registry from application settings."""
    return build_tool_registry(
        platform,
        project_id=settings.SUPABASE_PROJECT_ID,
        read_only=settings.READ_ONLY,
        features=settings.feature_groups(),
    )
