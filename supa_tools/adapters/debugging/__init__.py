"""Debugging adapter: service logs and security/performance advisors."""

from .operations import DebuggingOperations
from .schemas import GetLogsOptions
from .tools import get_debugging_tools

__all__ = ["DebuggingOperations", "GetLogsOptions", "get_debugging_tools"]
