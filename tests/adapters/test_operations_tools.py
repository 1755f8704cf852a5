"""Tests for operations tools."""

import pytest

from supa_tools.adapters.operations import (
    BackupOptions,
    HealthCheckResult,
    RotateSecretOptions,
    RunScriptOptions,
    ScriptResult,
    ServiceHealth,
    get_operations_tools,
)
from supa_tools.exceptions import ReadOnlyModeError, ToolValidationError


@pytest.fixture
def tools(operations):
    return get_operations_tools(operations, project_id="proj-1")


@pytest.fixture
def read_only_tools(operations):
    return get_operations_tools(operations, project_id="proj-1", read_only=True)


@pytest.mark.asyncio
async def test_check_health(tools, operations):
    report = HealthCheckResult(
        overall="healthy",
        services=[ServiceHealth(name="db", status="healthy")],
        endpoints=[],
        timestamp="2025-11-03T00:00:00Z",
    )
    operations.check_health.return_value = report

    assert await tools["check_health"].execute({}) is report
    operations.check_health.assert_awaited_once_with("proj-1")


@pytest.mark.asyncio
async def test_backup_now(tools, operations):
    await tools["backup_now"].execute({"include_storage": True})

    operations.backup_now.assert_awaited_once_with("proj-1", BackupOptions(include_storage=True))


class TestRotateSecret:
    @pytest.mark.asyncio
    async def test_defaults_to_dry_run(self, tools, operations):
        await tools["rotate_secret"].execute({"secret_type": "anon_key"})

        operations.rotate_secret.assert_awaited_once_with(
            "proj-1", RotateSecretOptions(secret_type="anon_key", dry_run=True)
        )

    @pytest.mark.asyncio
    async def test_explicit_apply(self, tools, operations):
        await tools["rotate_secret"].execute({"secret_type": "jwt", "dry_run": False})

        options = operations.rotate_secret.await_args.args[1]
        assert options.dry_run is False

    @pytest.mark.asyncio
    async def test_rejects_unknown_secret(self, tools, operations):
        with pytest.raises(ToolValidationError):
            await tools["rotate_secret"].execute({"secret_type": "smtp_password"})

        operations.rotate_secret.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blocked_in_read_only_mode(self, read_only_tools, operations):
        with pytest.raises(ReadOnlyModeError, match="Cannot rotate secrets in read-only mode."):
            await read_only_tools["rotate_secret"].execute({"secret_type": "jwt"})

        operations.rotate_secret.assert_not_awaited()


class TestRunScript:
    @pytest.mark.asyncio
    async def test_backup_script_blocked_in_read_only_mode(self, read_only_tools, operations):
        with pytest.raises(ReadOnlyModeError, match="Cannot run backup script in read-only mode."):
            await read_only_tools["run_script"].execute({"script_name": "backup"})

        operations.run_script.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("script_name", ["check-health", "env-info", "show-mcp"])
    async def test_other_scripts_allowed_in_read_only_mode(
        self, read_only_tools, operations, script_name
    ):
        output = ScriptResult(success=True, exit_code=0, stdout="ok")
        operations.run_script.return_value = output

        result = await read_only_tools["run_script"].execute({"script_name": script_name})

        assert result is output
        operations.run_script.assert_awaited_once_with(
            "proj-1", RunScriptOptions(script_name=script_name)
        )

    @pytest.mark.asyncio
    async def test_backup_script_allowed_when_writable(self, tools, operations):
        await tools["run_script"].execute({"script_name": "backup", "args": ["--compress"]})

        operations.run_script.assert_awaited_once_with(
            "proj-1", RunScriptOptions(script_name="backup", args=["--compress"])
        )

    @pytest.mark.asyncio
    async def test_rejects_unknown_script(self, tools, operations):
        with pytest.raises(ToolValidationError):
            await tools["run_script"].execute({"script_name": "rm-rf"})

        operations.run_script.assert_not_awaited()
