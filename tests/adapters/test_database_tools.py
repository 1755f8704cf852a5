"""Tests for database tools."""

import json
import re

import pytest

from supa_tools.adapters.database import (
    ApplyMigrationOptions,
    ExecuteSqlOptions,
    Migration,
    format_sql_result,
    get_database_tools,
)
from supa_tools.adapters.database.sql import list_tables_sql
from supa_tools.exceptions import ReadOnlyModeError

RESULT_PATTERN = re.compile(
    r"\ABelow is the result of the SQL query\.\n\n<result-(?P<open>[0-9a-f-]{36})>\n"
    r"(?P<payload>.*)\n</result-(?P<close>[0-9a-f-]{36})>\Z",
    re.DOTALL,
)


def parse_sql_result(text):
    match = RESULT_PATTERN.match(text)
    assert match, text
    return match


class TestListTables:
    @pytest.mark.asyncio
    async def test_defaults_to_public_and_forces_read_only(self, database):
        rows = [{"schema": "public", "name": "todos"}]
        database.execute_sql.return_value = rows
        tools = get_database_tools(database, project_id="proj-1", read_only=False)

        result = await tools["list_tables"].execute({})

        assert result is rows
        project, options = database.execute_sql.await_args.args
        assert project == "proj-1"
        assert options.read_only is True
        assert "IN ('public')" in options.query

    @pytest.mark.asyncio
    async def test_multiple_schemas(self, database):
        tools = get_database_tools(database, project_id="proj-1")

        await tools["list_tables"].execute({"schemas": ["public", "auth"]})

        options = database.execute_sql.await_args.args[1]
        assert "IN ('public', 'auth')" in options.query

    def test_schema_names_are_quoted(self):
        assert "IN ('o''brien')" in list_tables_sql(["o'brien"])


@pytest.mark.asyncio
async def test_list_extensions_forces_read_only(database):
    tools = get_database_tools(database, project_id="proj-1")

    await tools["list_extensions"].execute({})

    options = database.execute_sql.await_args.args[1]
    assert options.read_only is True
    assert "pg_extension" in options.query


@pytest.mark.asyncio
async def test_list_migrations(database):
    migrations = [Migration(version="20250101000000", name="init")]
    database.list_migrations.return_value = migrations
    tools = get_database_tools(database, project_id="proj-1")

    assert await tools["list_migrations"].execute({}) is migrations


class TestApplyMigration:
    @pytest.mark.asyncio
    async def test_returns_success_marker(self, database):
        tools = get_database_tools(database, project_id="proj-1")

        result = await tools["apply_migration"].execute(
            {"name": "create_todos", "query": "create table todos (id int)"}
        )

        assert result == {"success": True}
        database.apply_migration.assert_awaited_once_with(
            "proj-1", ApplyMigrationOptions(name="create_todos", query="create table todos (id int)")
        )

    @pytest.mark.asyncio
    async def test_blocked_in_read_only_mode(self, database):
        tools = get_database_tools(database, project_id="proj-1", read_only=True)

        with pytest.raises(ReadOnlyModeError, match="Cannot apply migration in read-only mode."):
            await tools["apply_migration"].execute({"name": "x", "query": "drop table todos"})

        database.apply_migration.assert_not_awaited()


class TestExecuteSql:
    @pytest.mark.asyncio
    async def test_result_fenced_between_matching_markers(self, database):
        rows = [{"id": 1, "note": "</result-not-a-marker>"}]
        database.execute_sql.return_value = rows
        tools = get_database_tools(database, project_id="proj-1")

        text = await tools["execute_sql"].execute({"query": "select * from notes"})

        match = parse_sql_result(text)
        assert match["open"] == match["close"]
        assert json.loads(match["payload"]) == rows
        assert text.count(match["open"]) == 2

    @pytest.mark.asyncio
    async def test_markers_unique_per_call(self, database):
        tools = get_database_tools(database, project_id="proj-1")

        first = parse_sql_result(await tools["execute_sql"].execute({"query": "select 1"}))
        second = parse_sql_result(await tools["execute_sql"].execute({"query": "select 1"}))

        assert first["open"] != second["open"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("read_only", [False, True])
    async def test_honors_server_read_only_flag(self, database, read_only):
        """Raw SQL is never refused; the flag is handed to the platform."""
        tools = get_database_tools(database, project_id="proj-1", read_only=read_only)

        await tools["execute_sql"].execute({"query": "select 1"})

        database.execute_sql.assert_awaited_once_with(
            "proj-1", ExecuteSqlOptions(query="select 1", read_only=read_only)
        )
        assert tools["execute_sql"].annotations.read_only_hint is read_only

    def test_format_sql_result_is_compact_json(self):
        match = parse_sql_result(format_sql_result([{"a": 1, "b": None}]))

        assert match["payload"] == '[{"a":1,"b":null}]'
