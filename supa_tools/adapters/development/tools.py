"""Development tools."""

from supa_tools.base import Tool, ToolAnnotations, injectable_tool, tool_map

from .operations import DevelopmentOperations
from .schemas import (
    ApiKey,
    GenerateTypescriptTypesInput,
    GenerateTypescriptTypesResult,
    GetProjectUrlInput,
    GetPublishableKeysInput,
)

GET_PUBLISHABLE_KEYS_DESCRIPTION = """Gets all publishable API keys for a project, including legacy anon keys.
Only keys that are not disabled should be handed to a client application.
Publishable keys are preferred over legacy anon keys."""


def get_development_tools(
    development: DevelopmentOperations,
    project_id: str | None = None,
    read_only: bool = False,
) -> dict[str, Tool]:
    """Build the development tool set. All tools are read-only."""

    async def get_project_url(params: GetProjectUrlInput) -> str:
        return await development.get_project_url(params.project_id)

    async def get_publishable_keys(params: GetPublishableKeysInput) -> list[ApiKey]:
        return await development.get_publishable_keys(params.project_id)

    async def generate_typescript_types(params: GenerateTypescriptTypesInput) -> GenerateTypescriptTypesResult:
        return await development.generate_typescript_types(params.project_id)

    inject = {"project_id": project_id}

    def annotations(title: str) -> ToolAnnotations:
        return ToolAnnotations(
            title=title,
            read_only_hint=True,
            destructive_hint=False,
            idempotent_hint=True,
            open_world_hint=False,
        )

    return tool_map(
        injectable_tool(
            name="get_project_url",
            description="Gets the API URL for a project.",
            annotations=annotations("Get project URL"),
            parameters=GetProjectUrlInput,
            inject=inject,
            execute=get_project_url,
        ),
        injectable_tool(
            name="get_publishable_keys",
            description=GET_PUBLISHABLE_KEYS_DESCRIPTION,
            annotations=annotations("Get publishable keys"),
            parameters=GetPublishableKeysInput,
            inject=inject,
            execute=get_publishable_keys,
        ),
        injectable_tool(
            name="generate_typescript_types",
            description="Generates TypeScript types for a project.",
            annotations=annotations("Generate TypeScript types"),
            parameters=GenerateTypescriptTypesInput,
            inject=inject,
            execute=generate_typescript_types,
        ),
    )
