"""Database adapter Pydantic schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from supa_tools.base import ProjectScopedInput


# ============================================================================
# DOMAIN VALUE OBJECTS
# ============================================================================


class Migration(BaseModel):
    """Applied migration."""

    model_config = ConfigDict(frozen=True)

    version: str
    name: str | None = None


# ============================================================================
# OPERATION OPTIONS
# ============================================================================


class ExecuteSqlOptions(BaseModel):
    """Options for DatabaseOperations.execute_sql."""

    query: str
    parameters: list[Any] | None = None
    read_only: bool | None = None


class ApplyMigrationOptions(BaseModel):
    """Options for DatabaseOperations.apply_migration."""

    name: str
    query: str


# ============================================================================
# TOOL INPUT SCHEMAS
# ============================================================================


class ListTablesInput(ProjectScopedInput):
    """Input schema for list_tables."""

    schemas: list[str] = Field(
        default_factory=lambda: ["public"],
        description="List of schemas to include. Defaults to all schemas.",
    )


class ListExtensionsInput(ProjectScopedInput):
    """Input schema for list_extensions."""


class ListMigrationsInput(ProjectScopedInput):
    """Input schema for list_migrations."""


class ApplyMigrationInput(ProjectScopedInput):
    """Input schema for apply_migration."""

    name: str = Field(..., description="The name of the migration in snake_case")
    query: str = Field(..., description="The SQL query to apply")


class ExecuteSqlInput(ProjectScopedInput):
    """Input schema for execute_sql."""

    query: str = Field(..., description="The SQL query to execute")
