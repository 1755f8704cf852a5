"""Debugging tools."""

from typing import Any

from supa_tools.base import Tool, ToolAnnotations, injectable_tool, tool_map

from .operations import DebuggingOperations
from .schemas import GetAdvisorsInput, GetLogsInput, GetLogsOptions

GET_LOGS_DESCRIPTION = """Gets logs for a project by service type.
Use this to help debug problems with your app. Pass iso_timestamp_start and
iso_timestamp_end to narrow the window; without them the platform decides how
far back to look."""

GET_ADVISORS_DESCRIPTION = """Gets a list of advisory notices for the project.
Use this to check for security vulnerabilities or performance improvements.
Include the remediation URL as a clickable link so that the user can reference the issue themselves.
It's recommended to run this tool regularly, especially after making DDL changes to the database,
since it will catch things like missing RLS policies."""


def get_debugging_tools(
    debugging: DebuggingOperations,
    project_id: str | None = None,
    read_only: bool = False,
) -> dict[str, Tool]:
    """Build the debugging tool set.

    Every debugging tool is read-only, so `read_only` gates nothing here.
    """

    async def get_logs(params: GetLogsInput) -> Any:
        options = GetLogsOptions(
            service=params.service,
            iso_timestamp_start=params.iso_timestamp_start,
            iso_timestamp_end=params.iso_timestamp_end,
        )
        return await debugging.get_logs(params.project_id, options)

    async def get_advisors(params: GetAdvisorsInput) -> Any:
        if params.type == "security":
            return await debugging.get_security_advisors(params.project_id)
        return await debugging.get_performance_advisors(params.project_id)

    inject = {"project_id": project_id}

    return tool_map(
        injectable_tool(
            name="get_logs",
            description=GET_LOGS_DESCRIPTION,
            annotations=ToolAnnotations(
                title="Get project logs",
                read_only_hint=True,
                destructive_hint=False,
                idempotent_hint=True,
                open_world_hint=False,
            ),
            parameters=GetLogsInput,
            inject=inject,
            execute=get_logs,
        ),
        injectable_tool(
            name="get_advisors",
            description=GET_ADVISORS_DESCRIPTION,
            annotations=ToolAnnotations(
                title="Get project advisors",
                read_only_hint=True,
                destructive_hint=False,
                idempotent_hint=True,
                open_world_hint=False,
            ),
            parameters=GetAdvisorsInput,
            inject=inject,
            execute=get_advisors,
        ),
    )
