"""Database capability interface."""

from typing import Any, Protocol

from .schemas import ApplyMigrationOptions, ExecuteSqlOptions, Migration


class DatabaseOperations(Protocol):
    """SQL execution and migrations against the project's Postgres."""

    async def execute_sql(
        self, project_id: str, options: ExecuteSqlOptions
    ) -> list[dict[str, Any]]: ...

    async def list_migrations(self, project_id: str) -> list[Migration]: ...

    async def apply_migration(self, project_id: str, options: ApplyMigrationOptions) -> None: ...
