"""Debugging adapter Pydantic schemas."""

from typing import Literal

from pydantic import BaseModel, Field

from supa_tools.base import ProjectScopedInput

LogsService = Literal["api", "postgres", "auth", "storage", "realtime", "functions"]

AdvisorType = Literal["security", "performance"]


class GetLogsOptions(BaseModel):
    """Options for DebuggingOperations.get_logs."""

    service: LogsService
    iso_timestamp_start: str | None = None
    iso_timestamp_end: str | None = None


class GetLogsInput(ProjectScopedInput):
    """Input schema for get_logs."""

    service: LogsService = Field(..., description="The service to fetch logs for")
    iso_timestamp_start: str | None = Field(
        None, description="Start of the log window (ISO 8601)"
    )
    iso_timestamp_end: str | None = Field(None, description="End of the log window (ISO 8601)")


class GetAdvisorsInput(ProjectScopedInput):
    """Input schema for get_advisors."""

    type: AdvisorType = Field(..., description="The type of advisors to fetch")
