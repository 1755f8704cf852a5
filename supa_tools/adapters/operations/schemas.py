"""Operations adapter Pydantic schemas.

Health, backup, secret rotation, stats and maintenance script records.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from supa_tools.base import ProjectScopedInput

ServiceStatus = Literal["healthy", "unhealthy", "starting", "not_running", "unknown"]
OverallStatus = Literal["healthy", "degraded", "unhealthy"]
SecretType = Literal["jwt", "postgres_password", "vault_key", "anon_key", "service_role_key"]
ScriptName = Literal["check-health", "backup", "env-info", "show-mcp"]


# ============================================================================
# HEALTH CHECK
# ============================================================================


class ServiceHealth(BaseModel):
    """Health of one container or endpoint."""

    model_config = ConfigDict(frozen=True)

    name: str
    status: ServiceStatus
    message: str | None = None


class HealthCheckResult(BaseModel):
    """Instance-wide health report."""

    model_config = ConfigDict(frozen=True)

    overall: OverallStatus
    services: list[ServiceHealth]
    endpoints: list[ServiceHealth]
    secrets_synced: bool | None = None
    timestamp: str


# ============================================================================
# BACKUP
# ============================================================================


class BackupOptions(BaseModel):
    output_path: str | None = None
    include_storage: bool | None = None


class BackupResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    file_path: str | None = None
    file_size: str | None = None
    timestamp: str
    message: str


# ============================================================================
# SECRET ROTATION
# ============================================================================


class RotateSecretOptions(BaseModel):
    secret_type: SecretType
    dry_run: bool | None = None


class RotateSecretResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    secret_type: str
    message: str
    requires_restart: bool | None = None
    new_value_preview: str | None = None


# ============================================================================
# SYSTEM STATS
# ============================================================================


class DatabaseStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: str | None = None
    connections_active: int | None = None
    connections_max: int | None = None


class StorageStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    buckets_count: int | None = None
    total_size: str | None = None


class UserStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_count: int | None = None


class SystemStats(BaseModel):
    """Point-in-time instance statistics."""

    model_config = ConfigDict(frozen=True)

    database: DatabaseStats | None = None
    storage: StorageStats | None = None
    users: UserStats | None = None
    uptime: str | None = None
    timestamp: str


# ============================================================================
# MAINTENANCE SCRIPTS
# ============================================================================


class RunScriptOptions(BaseModel):
    script_name: ScriptName
    args: list[str] | None = None


class ScriptResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    exit_code: int
    stdout: str
    stderr: str | None = None


# ============================================================================
# TOOL INPUT SCHEMAS
# ============================================================================


class CheckHealthInput(ProjectScopedInput):
    """Input schema for check_health."""


class BackupNowInput(ProjectScopedInput):
    """Input schema for backup_now."""

    output_path: str | None = Field(None, description="Custom backup output path")
    include_storage: bool | None = Field(None, description="Include storage files in backup")


class RotateSecretInput(ProjectScopedInput):
    """Input schema for rotate_secret."""

    secret_type: SecretType = Field(..., description="Type of secret to rotate")
    dry_run: bool = Field(True, description="Preview changes without applying (default: true)")


class GetStatsInput(ProjectScopedInput):
    """Input schema for get_stats."""


class RunScriptInput(ProjectScopedInput):
    """Input schema for run_script."""

    script_name: ScriptName = Field(..., description="Name of the script to run")
    args: list[str] | None = Field(None, description="Additional arguments for the script")
