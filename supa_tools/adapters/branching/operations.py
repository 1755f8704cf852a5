"""Branching capability interface."""

from typing import Protocol

from .schemas import (
    Branch,
    CreateBranchOptions,
    MergeBranchOptions,
    MergeBranchResult,
    RebaseBranchOptions,
    ResetBranchOptions,
)


class BranchingOperations(Protocol):
    """Schema-per-branch management."""

    async def list_branches(self, project_id: str) -> list[Branch]: ...

    async def create_branch(self, project_id: str, options: CreateBranchOptions) -> Branch: ...

    async def delete_branch(self, project_id: str, branch_name: str) -> None: ...

    async def merge_branch(
        self, project_id: str, options: MergeBranchOptions
    ) -> MergeBranchResult: ...

    async def reset_branch(self, project_id: str, options: ResetBranchOptions) -> None: ...

    async def rebase_branch(self, project_id: str, options: RebaseBranchOptions) -> None: ...
