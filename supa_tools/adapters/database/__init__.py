"""Database adapter.

Provides tools for the project's Postgres database:
- List tables, extensions and migrations
- Apply migrations
- Execute raw SQL
"""

from .operations import DatabaseOperations
from .schemas import ApplyMigrationOptions, ExecuteSqlOptions, Migration
from .tools import format_sql_result, get_database_tools

__all__ = [
    "ApplyMigrationOptions",
    "DatabaseOperations",
    "ExecuteSqlOptions",
    "Migration",
    "format_sql_result",
    "get_database_tools",
]
