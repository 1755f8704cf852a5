"""Database tools.

Catalog listings, migrations and raw SQL execution.
"""

import uuid
from typing import Any

from pydantic_core import to_json

from supa_tools.base import (
    Tool,
    ToolAnnotations,
    ensure_writable,
    injectable_tool,
    success_response,
    tool_map,
)

from .operations import DatabaseOperations
from .schemas import (
    ApplyMigrationInput,
    ApplyMigrationOptions,
    ExecuteSqlInput,
    ExecuteSqlOptions,
    ListExtensionsInput,
    ListMigrationsInput,
    ListTablesInput,
    Migration,
)
from .sql import list_extensions_sql, list_tables_sql

SQL_RESULT_TEMPLATE = """Below is the result of the SQL query.

<result-{marker}>
{payload}
</result-{marker}>"""


def format_sql_result(result: Any) -> str:
    """Fence a JSON copy of `result` between two matching per-call markers."""
    marker = uuid.uuid4()
    return SQL_RESULT_TEMPLATE.format(marker=marker, payload=to_json(result).decode())


def get_database_tools(
    database: DatabaseOperations,
    project_id: str | None = None,
    read_only: bool = False,
) -> dict[str, Tool]:
    """Build the database tool set.

    Catalog helpers always run with read_only=True. execute_sql passes the
    server's read-only flag down to the platform instead of refusing.
    """

    async def list_tables(params: ListTablesInput) -> list[dict[str, Any]]:
        options = ExecuteSqlOptions(query=list_tables_sql(params.schemas), read_only=True)
        return await database.execute_sql(params.project_id, options)

    async def list_extensions(params: ListExtensionsInput) -> list[dict[str, Any]]:
        options = ExecuteSqlOptions(query=list_extensions_sql(), read_only=True)
        return await database.execute_sql(params.project_id, options)

    async def list_migrations(params: ListMigrationsInput) -> list[Migration]:
        return await database.list_migrations(params.project_id)

    async def apply_migration(params: ApplyMigrationInput) -> dict[str, bool]:
        ensure_writable(read_only, "apply migration")
        options = ApplyMigrationOptions(name=params.name, query=params.query)
        await database.apply_migration(params.project_id, options)
        return success_response()

    async def execute_sql(params: ExecuteSqlInput) -> str:
        options = ExecuteSqlOptions(query=params.query, read_only=read_only)
        result = await database.execute_sql(params.project_id, options)
        return format_sql_result(result)

    inject = {"project_id": project_id}
    listing = dict(
        read_only_hint=True, destructive_hint=False, idempotent_hint=True, open_world_hint=False
    )

    return tool_map(
        injectable_tool(
            name="list_tables",
            description="Lists all tables in one or more schemas.",
            annotations=ToolAnnotations(title="List tables", **listing),
            parameters=ListTablesInput,
            inject=inject,
            execute=list_tables,
        ),
        injectable_tool(
            name="list_extensions",
            description="Lists all extensions in the database.",
            annotations=ToolAnnotations(title="List extensions", **listing),
            parameters=ListExtensionsInput,
            inject=inject,
            execute=list_extensions,
        ),
        injectable_tool(
            name="list_migrations",
            description="Lists all migrations in the database.",
            annotations=ToolAnnotations(title="List migrations", **listing),
            parameters=ListMigrationsInput,
            inject=inject,
            execute=list_migrations,
        ),
        injectable_tool(
            name="apply_migration",
            description=(
                "Applies a migration to the database. Use this when executing DDL operations."
            ),
            annotations=ToolAnnotations(
                title="Apply migration",
                read_only_hint=False,
                destructive_hint=True,
                idempotent_hint=False,
                open_world_hint=True,
            ),
            parameters=ApplyMigrationInput,
            inject=inject,
            execute=apply_migration,
        ),
        injectable_tool(
            name="execute_sql",
            description=(
                "Executes raw SQL in the Postgres database. "
                "Use `apply_migration` instead for DDL operations."
            ),
            annotations=ToolAnnotations(
                title="Execute SQL",
                read_only_hint=read_only,
                destructive_hint=True,
                idempotent_hint=False,
                open_world_hint=True,
            ),
            parameters=ExecuteSqlInput,
            inject=inject,
            execute=execute_sql,
        ),
    )
