"""Operations capability interface."""

from typing import Protocol

from .schemas import (
    BackupOptions,
    BackupResult,
    HealthCheckResult,
    RotateSecretOptions,
    RotateSecretResult,
    RunScriptOptions,
    ScriptResult,
    SystemStats,
)


class OperationsOperations(Protocol):
    """Instance maintenance: health, backups, secrets, stats, scripts."""

    async def check_health(self, project_id: str) -> HealthCheckResult: ...

    async def backup_now(self, project_id: str, options: BackupOptions) -> BackupResult: ...

    async def rotate_secret(
        self, project_id: str, options: RotateSecretOptions
    ) -> RotateSecretResult: ...

    async def get_stats(self, project_id: str) -> SystemStats: ...

    async def run_script(self, project_id: str, options: RunScriptOptions) -> ScriptResult: ...
