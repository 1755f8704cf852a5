"""Branching adapter Pydantic schemas.

Branches are separate PostgreSQL schemas on a self-hosted instance.
"""

from pydantic import BaseModel, ConfigDict, Field

from supa_tools.base import ProjectScopedInput


class Branch(BaseModel):
    """Database branch."""

    model_config = ConfigDict(frozen=True)

    name: str
    schema_name: str
    created_at: str | None = None
    is_default: bool | None = None
    parent_branch: str | None = None
    migration_version: str | None = None


class MergeBranchResult(BaseModel):
    """Outcome of a branch merge."""

    model_config = ConfigDict(frozen=True)

    success: bool
    migrations_applied: list[str] | None = None
    conflicts: list[str] | None = None


class CreateBranchOptions(BaseModel):
    name: str
    parent_branch: str | None = None


class MergeBranchOptions(BaseModel):
    source_branch: str
    target_branch: str | None = None


class ResetBranchOptions(BaseModel):
    branch_name: str
    migration_version: str | None = None


class RebaseBranchOptions(BaseModel):
    branch_name: str
    target_branch: str | None = None


# ============================================================================
# TOOL INPUT SCHEMAS
# ============================================================================


class ListBranchesInput(ProjectScopedInput):
    """Input schema for list_branches."""


class CreateBranchInput(ProjectScopedInput):
    """Input schema for create_branch."""

    name: str = Field(..., description="Name of the new branch (will be used as schema name)")
    parent_branch: str | None = Field(
        None, description="Parent branch to copy structure from (default: public)"
    )


class DeleteBranchInput(ProjectScopedInput):
    """Input schema for delete_branch."""

    branch_name: str = Field(..., description="Name of the branch to delete")


class MergeBranchInput(ProjectScopedInput):
    """Input schema for merge_branch."""

    source_branch: str = Field(..., description="Branch to merge from")
    target_branch: str | None = Field(None, description="Branch to merge into (default: public)")


class ResetBranchInput(ProjectScopedInput):
    """Input schema for reset_branch."""

    branch_name: str = Field(..., description="Name of the branch to reset")
    migration_version: str | None = Field(
        None, description="Migration version to reset to (omit to reset to initial state)"
    )


class RebaseBranchInput(ProjectScopedInput):
    """Input schema for rebase_branch."""

    branch_name: str = Field(..., description="Name of the branch to rebase")
    target_branch: str | None = Field(None, description="Branch to rebase onto (default: public)")
