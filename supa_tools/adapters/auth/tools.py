"""Auth tools.

List, inspect, create and delete users, and generate action links.
"""

from supa_tools.base import (
    Tool,
    ToolAnnotations,
    ensure_writable,
    injectable_tool,
    success_response,
    tool_map,
)

from .operations import AuthOperations
from .schemas import (
    CreateUserInput,
    CreateUserOptions,
    DeleteUserInput,
    GenerateLinkInput,
    GenerateLinkOptions,
    GenerateLinkResult,
    GetUserInput,
    ListUsersInput,
    ListUsersOptions,
    User,
)


def get_auth_tools(
    auth: AuthOperations,
    project_id: str | None = None,
    read_only: bool = False,
) -> dict[str, Tool]:
    """Build the auth tool set.

    Args:
        auth: AuthOperations implementation
        project_id: Project id injected into every call, if pinned
        read_only: Block create/delete/link generation
    """

    async def list_users(params: ListUsersInput) -> list[User]:
        options = ListUsersOptions(page=params.page, per_page=params.per_page)
        return await auth.list_users(params.project_id, options)

    async def get_user(params: GetUserInput) -> User:
        return await auth.get_user(params.project_id, params.user_id)

    async def create_user(params: CreateUserInput) -> User:
        ensure_writable(read_only, "create user")
        options = CreateUserOptions(
            **params.model_dump(exclude={"project_id"}, exclude_unset=True)
        )
        return await auth.create_user(params.project_id, options)

    async def delete_user(params: DeleteUserInput) -> dict[str, bool]:
        ensure_writable(read_only, "delete user")
        await auth.delete_user(params.project_id, params.user_id)
        return success_response()

    async def generate_link(params: GenerateLinkInput) -> GenerateLinkResult:
        ensure_writable(read_only, "generate link")
        options = GenerateLinkOptions(
            **params.model_dump(exclude={"project_id"}, exclude_unset=True)
        )
        return await auth.generate_link(params.project_id, options)

    inject = {"project_id": project_id}

    return tool_map(
        injectable_tool(
            name="list_users",
            description="Lists all users in the auth system.",
            annotations=ToolAnnotations(
                title="List users",
                read_only_hint=True,
                destructive_hint=False,
                idempotent_hint=True,
                open_world_hint=False,
            ),
            parameters=ListUsersInput,
            inject=inject,
            execute=list_users,
        ),
        injectable_tool(
            name="get_user",
            description="Gets a user by their ID.",
            annotations=ToolAnnotations(
                title="Get user",
                read_only_hint=True,
                destructive_hint=False,
                idempotent_hint=True,
                open_world_hint=False,
            ),
            parameters=GetUserInput,
            inject=inject,
            execute=get_user,
        ),
        injectable_tool(
            name="create_user",
            description="Creates a new user in the auth system.",
            annotations=ToolAnnotations(
                title="Create user",
                read_only_hint=False,
                destructive_hint=False,
                idempotent_hint=False,
                open_world_hint=True,
            ),
            parameters=CreateUserInput,
            inject=inject,
            execute=create_user,
        ),
        injectable_tool(
            name="delete_user",
            description="Deletes a user from the auth system.",
            annotations=ToolAnnotations(
                title="Delete user",
                read_only_hint=False,
                destructive_hint=True,
                idempotent_hint=False,
                open_world_hint=True,
            ),
            parameters=DeleteUserInput,
            inject=inject,
            execute=delete_user,
        ),
        injectable_tool(
            name="generate_link",
            description="Generates a magic link, recovery link, or invite link for a user.",
            annotations=ToolAnnotations(
                title="Generate link",
                read_only_hint=False,
                destructive_hint=False,
                idempotent_hint=False,
                open_world_hint=True,
            ),
            parameters=GenerateLinkInput,
            inject=inject,
            execute=generate_link,
        ),
    )
