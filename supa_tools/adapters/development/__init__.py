"""Development adapter: project URL, publishable keys, TypeScript types."""

from .operations import DevelopmentOperations
from .schemas import ApiKey, GenerateTypescriptTypesResult
from .tools import get_development_tools

__all__ = [
    "ApiKey",
    "DevelopmentOperations",
    "GenerateTypescriptTypesResult",
    "get_development_tools",
]
