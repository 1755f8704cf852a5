"""Operations adapter.

Provides maintenance tools for a self-hosted instance:
- Health check and system statistics
- Immediate backups
- Secret rotation
- Predefined maintenance scripts
"""

from .operations import OperationsOperations
from .schemas import (
    BackupOptions,
    BackupResult,
    HealthCheckResult,
    RotateSecretOptions,
    RotateSecretResult,
    RunScriptOptions,
    ScriptResult,
    ServiceHealth,
    SystemStats,
)
from .tools import get_operations_tools

__all__ = [
    "BackupOptions",
    "BackupResult",
    "HealthCheckResult",
    "OperationsOperations",
    "RotateSecretOptions",
    "RotateSecretResult",
    "RunScriptOptions",
    "ScriptResult",
    "ServiceHealth",
    "SystemStats",
    "get_operations_tools",
]
