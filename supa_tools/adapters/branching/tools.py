"""Branching tools."""

from supa_tools.base import (
    Tool,
    ToolAnnotations,
    ensure_writable,
    injectable_tool,
    success_response,
    tool_map,
)

from .operations import BranchingOperations
from .schemas import (
    Branch,
    CreateBranchInput,
    CreateBranchOptions,
    DeleteBranchInput,
    ListBranchesInput,
    MergeBranchInput,
    MergeBranchOptions,
    MergeBranchResult,
    RebaseBranchInput,
    RebaseBranchOptions,
    ResetBranchInput,
    ResetBranchOptions,
)

CREATE_BRANCH_DESCRIPTION = """Creates a new database branch. In self-hosted mode, branches are implemented as separate PostgreSQL schemas.
This creates a new schema and optionally copies the structure from a parent branch.

Note: This is an experimental feature for self-hosted environments."""

MERGE_BRANCH_DESCRIPTION = """Merges changes from a source branch to a target branch.
This applies any migrations from the source branch to the target branch."""


def get_branching_tools(
    branching: BranchingOperations,
    project_id: str | None = None,
    read_only: bool = False,
) -> dict[str, Tool]:
    """Build the branching tool set."""

    async def list_branches(params: ListBranchesInput) -> list[Branch]:
        return await branching.list_branches(params.project_id)

    async def create_branch(params: CreateBranchInput) -> Branch:
        ensure_writable(read_only, "create branch")
        options = CreateBranchOptions(name=params.name, parent_branch=params.parent_branch)
        return await branching.create_branch(params.project_id, options)

    async def delete_branch(params: DeleteBranchInput) -> dict[str, bool]:
        ensure_writable(read_only, "delete branch")
        await branching.delete_branch(params.project_id, params.branch_name)
        return success_response()

    async def merge_branch(params: MergeBranchInput) -> MergeBranchResult:
        ensure_writable(read_only, "merge branch")
        options = MergeBranchOptions(
            source_branch=params.source_branch, target_branch=params.target_branch
        )
        return await branching.merge_branch(params.project_id, options)

    async def reset_branch(params: ResetBranchInput) -> dict[str, bool]:
        ensure_writable(read_only, "reset branch")
        options = ResetBranchOptions(
            branch_name=params.branch_name, migration_version=params.migration_version
        )
        await branching.reset_branch(params.project_id, options)
        return success_response()

    async def rebase_branch(params: RebaseBranchInput) -> dict[str, bool]:
        ensure_writable(read_only, "rebase branch")
        options = RebaseBranchOptions(
            branch_name=params.branch_name, target_branch=params.target_branch
        )
        await branching.rebase_branch(params.project_id, options)
        return success_response()

    inject = {"project_id": project_id}
    mutating = dict(read_only_hint=False, idempotent_hint=False, open_world_hint=True)

    return tool_map(
        injectable_tool(
            name="list_branches",
            description=(
                "Lists all database branches in the project. "
                "Branches are implemented as separate PostgreSQL schemas."
            ),
            annotations=ToolAnnotations(
                title="List branches",
                read_only_hint=True,
                destructive_hint=False,
                idempotent_hint=True,
                open_world_hint=False,
            ),
            parameters=ListBranchesInput,
            inject=inject,
            execute=list_branches,
        ),
        injectable_tool(
            name="create_branch",
            description=CREATE_BRANCH_DESCRIPTION,
            annotations=ToolAnnotations(title="Create branch", destructive_hint=False, **mutating),
            parameters=CreateBranchInput,
            inject=inject,
            execute=create_branch,
        ),
        injectable_tool(
            name="delete_branch",
            description=(
                "Deletes a database branch (drops the schema). "
                "Warning: This permanently removes all data in the branch."
            ),
            annotations=ToolAnnotations(title="Delete branch", destructive_hint=True, **mutating),
            parameters=DeleteBranchInput,
            inject=inject,
            execute=delete_branch,
        ),
        injectable_tool(
            name="merge_branch",
            description=MERGE_BRANCH_DESCRIPTION,
            annotations=ToolAnnotations(title="Merge branch", destructive_hint=True, **mutating),
            parameters=MergeBranchInput,
            inject=inject,
            execute=merge_branch,
        ),
        injectable_tool(
            name="reset_branch",
            description="Resets a branch to a specific migration version or to the initial state.",
            annotations=ToolAnnotations(title="Reset branch", destructive_hint=True, **mutating),
            parameters=ResetBranchInput,
            inject=inject,
            execute=reset_branch,
        ),
        injectable_tool(
            name="rebase_branch",
            description=(
                "Rebases a branch onto another branch, "
                "updating it with the latest changes from the target."
            ),
            annotations=ToolAnnotations(title="Rebase branch", destructive_hint=True, **mutating),
            parameters=RebaseBranchInput,
            inject=inject,
            execute=rebase_branch,
        ),
    )
