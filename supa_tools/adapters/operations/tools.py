"""Operations tools."""

from supa_tools.base import Tool, ToolAnnotations, ensure_writable, injectable_tool, tool_map

from .operations import OperationsOperations
from .schemas import (
    BackupNowInput,
    BackupOptions,
    BackupResult,
    CheckHealthInput,
    GetStatsInput,
    HealthCheckResult,
    RotateSecretInput,
    RotateSecretOptions,
    RotateSecretResult,
    RunScriptInput,
    RunScriptOptions,
    ScriptResult,
    SystemStats,
)

# Scripts that write to the host and are refused in read-only mode
READ_ONLY_BLOCKED_SCRIPTS = frozenset({"backup"})

CHECK_HEALTH_DESCRIPTION = """Performs a comprehensive health check of the Supabase instance.
Checks:
- Container health status (db, kong, auth, rest, realtime, storage, meta, functions, pooler, studio)
- Service endpoint availability
- Secret synchronization between env and database"""

BACKUP_NOW_DESCRIPTION = """Creates an immediate database backup (pg_dumpall).
The backup includes all databases and can be restored with:
docker exec -i supabase-db psql -U postgres < backup_file.sql"""

ROTATE_SECRET_DESCRIPTION = """Rotates a secret/credential with zero-downtime.
Available secrets to rotate:
- jwt: JWT signing secret (requires service restart)
- postgres_password: Database password
- vault_key: Vault encryption key
- anon_key: Anonymous API key
- service_role_key: Service role API key

WARNING: This is a critical operation. Use dry_run=true first to preview changes."""

GET_STATS_DESCRIPTION = """Gets system statistics and metrics for the Supabase instance.
Includes:
- Database size and connection counts
- Storage bucket count and total size
- User count
- System uptime"""

RUN_SCRIPT_DESCRIPTION = """Executes a predefined maintenance script on the server.
Available scripts:
- check-health: Comprehensive health check
- backup: Create database backup
- env-info: Show environment information
- show-mcp: Show MCP configuration

This allows AI to trigger server-side maintenance operations."""


def get_operations_tools(
    operations: OperationsOperations,
    project_id: str | None = None,
    read_only: bool = False,
) -> dict[str, Tool]:
    """Build the operations tool set.

    run_script is gated per script: in read-only mode only scripts listed in
    READ_ONLY_BLOCKED_SCRIPTS are refused.
    """

    async def check_health(params: CheckHealthInput) -> HealthCheckResult:
        return await operations.check_health(params.project_id)

    async def backup_now(params: BackupNowInput) -> BackupResult:
        ensure_writable(read_only, "create backup")
        options = BackupOptions(
            output_path=params.output_path, include_storage=params.include_storage
        )
        return await operations.backup_now(params.project_id, options)

    async def rotate_secret(params: RotateSecretInput) -> RotateSecretResult:
        ensure_writable(read_only, "rotate secrets")
        options = RotateSecretOptions(secret_type=params.secret_type, dry_run=params.dry_run)
        return await operations.rotate_secret(params.project_id, options)

    async def get_stats(params: GetStatsInput) -> SystemStats:
        return await operations.get_stats(params.project_id)

    async def run_script(params: RunScriptInput) -> ScriptResult:
        if params.script_name in READ_ONLY_BLOCKED_SCRIPTS:
            ensure_writable(read_only, f"run {params.script_name} script")
        options = RunScriptOptions(script_name=params.script_name, args=params.args)
        return await operations.run_script(params.project_id, options)

    inject = {"project_id": project_id}
    inspecting = dict(
        read_only_hint=True, destructive_hint=False, idempotent_hint=True, open_world_hint=False
    )

    return tool_map(
        injectable_tool(
            name="check_health",
            description=CHECK_HEALTH_DESCRIPTION,
            annotations=ToolAnnotations(title="Check Health", **inspecting),
            parameters=CheckHealthInput,
            inject=inject,
            execute=check_health,
        ),
        injectable_tool(
            name="backup_now",
            description=BACKUP_NOW_DESCRIPTION,
            annotations=ToolAnnotations(
                title="Backup Now",
                read_only_hint=False,
                destructive_hint=False,
                idempotent_hint=False,
                open_world_hint=True,
            ),
            parameters=BackupNowInput,
            inject=inject,
            execute=backup_now,
        ),
        injectable_tool(
            name="rotate_secret",
            description=ROTATE_SECRET_DESCRIPTION,
            annotations=ToolAnnotations(
                title="Rotate Secret",
                read_only_hint=False,
                destructive_hint=True,
                idempotent_hint=False,
                open_world_hint=True,
            ),
            parameters=RotateSecretInput,
            inject=inject,
            execute=rotate_secret,
        ),
        injectable_tool(
            name="get_stats",
            description=GET_STATS_DESCRIPTION,
            annotations=ToolAnnotations(title="Get Stats", **inspecting),
            parameters=GetStatsInput,
            inject=inject,
            execute=get_stats,
        ),
        injectable_tool(
            name="run_script",
            description=RUN_SCRIPT_DESCRIPTION,
            annotations=ToolAnnotations(
                title="Run Script",
                read_only_hint=False,
                destructive_hint=False,
                idempotent_hint=False,
                open_world_hint=True,
            ),
            parameters=RunScriptInput,
            inject=inject,
            execute=run_script,
        ),
    )
