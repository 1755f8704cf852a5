"""Development capability interface."""

from typing import Protocol

from .schemas import ApiKey, GenerateTypescriptTypesResult


class DevelopmentOperations(Protocol):
    """Project URL, client keys and generated types."""

    async def get_project_url(self, project_id: str) -> str: ...

    async def get_publishable_keys(self, project_id: str) -> list[ApiKey]: ...

    async def generate_typescript_types(self, project_id: str) -> GenerateTypescriptTypesResult: ...
