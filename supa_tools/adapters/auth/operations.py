"""Auth capability interface."""

from typing import Protocol

from .schemas import (
    CreateUserOptions,
    GenerateLinkOptions,
    GenerateLinkResult,
    ListUsersOptions,
    User,
)


class AuthOperations(Protocol):
    """User management on the platform's auth service."""

    async def list_users(self, project_id: str, options: ListUsersOptions) -> list[User]: ...

    async def get_user(self, project_id: str, user_id: str) -> User: ...

    async def create_user(self, project_id: str, options: CreateUserOptions) -> User: ...

    async def delete_user(self, project_id: str, user_id: str) -> None: ...

    async def generate_link(
        self, project_id: str, options: GenerateLinkOptions
    ) -> GenerateLinkResult: ...
