"""Branching adapter.

Branch tools for self-hosted instances, where every branch is a PostgreSQL
schema: list, create, delete, merge, reset and rebase.
"""

from .operations import BranchingOperations
from .schemas import (
    Branch,
    CreateBranchOptions,
    MergeBranchOptions,
    MergeBranchResult,
    RebaseBranchOptions,
    ResetBranchOptions,
)
from .tools import get_branching_tools

__all__ = [
    "Branch",
    "BranchingOperations",
    "CreateBranchOptions",
    "MergeBranchOptions",
    "MergeBranchResult",
    "RebaseBranchOptions",
    "ResetBranchOptions",
    "get_branching_tools",
]
