"""Auth adapter.

Provides tools for the platform's auth service:
- List and get users
- Create and delete users
- Generate signup, magic, recovery and invite links

Usage:
    from supa_tools.adapters.auth import get_auth_tools
    from supa_tools.registry import ToolRegistry

    registry = ToolRegistry()
    registry.register_all(get_auth_tools(auth, project_id="proj-1"))
"""

from .operations import AuthOperations
from .schemas import (
    CreateUserOptions,
    GenerateLinkOptions,
    GenerateLinkResult,
    ListUsersOptions,
    User,
)
from .tools import get_auth_tools

__all__ = [
    "AuthOperations",
    "CreateUserOptions",
    "GenerateLinkOptions",
    "GenerateLinkResult",
    "ListUsersOptions",
    "User",
    "get_auth_tools",
]
