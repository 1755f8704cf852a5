"""Debugging capability interface."""

from typing import Any, Protocol

from .schemas import GetLogsOptions


class DebuggingOperations(Protocol):
    """Service logs and database advisors."""

    async def get_logs(self, project_id: str, options: GetLogsOptions) -> Any: ...

    async def get_security_advisors(self, project_id: str) -> Any: ...

    async def get_performance_advisors(self, project_id: str) -> Any: ...
