"""Platform capability set.

A platform implements any subset of the nine capability interfaces. The
aggregate holds one optional instance per feature group; absent capabilities
contribute no tools.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from supa_tools.adapters.auth.operations import AuthOperations
from supa_tools.adapters.branching.operations import BranchingOperations
from supa_tools.adapters.database.operations import DatabaseOperations
from supa_tools.adapters.debugging.operations import DebuggingOperations
from supa_tools.adapters.development.operations import DevelopmentOperations
from supa_tools.adapters.docs.operations import DocsOperations
from supa_tools.adapters.functions.operations import EdgeFunctionsOperations
from supa_tools.adapters.operations.operations import OperationsOperations
from supa_tools.adapters.storage.operations import StorageOperations


class FeatureGroup(str, Enum):
    """Feature groups gating which capability's tools are registered."""

    DATABASE = "database"
    DEBUGGING = "debugging"
    DEVELOPMENT = "development"
    STORAGE = "storage"
    AUTH = "auth"
    FUNCTIONS = "functions"
    BRANCHING = "branching"
    DOCS = "docs"
    OPERATIONS = "operations"


def parse_feature_groups(names: Iterable[str]) -> list[FeatureGroup]:
    """Parse feature group names, dropping blanks and duplicates.

    Raises:
        ValueError: Unknown feature group name
    """
    groups: list[FeatureGroup] = []
    for raw in names:
        name = raw.strip().lower()
        if not name:
            continue
        try:
            group = FeatureGroup(name)
        except ValueError:
            valid = ", ".join(g.value for g in FeatureGroup)
            raise ValueError(f"Unknown feature group '{name}'. Expected one of: {valid}") from None
        if group not in groups:
            groups.append(group)
    return groups


@dataclass(frozen=True)
class SupabasePlatform:
    """Self-hosted platform capabilities, one optional field per feature group."""

    database: DatabaseOperations | None = None
    debugging: DebuggingOperations | None = None
    development: DevelopmentOperations | None = None
    storage: StorageOperations | None = None
    auth: AuthOperations | None = None
    functions: EdgeFunctionsOperations | None = None
    branching: BranchingOperations | None = None
    docs: DocsOperations | None = None
    operations: OperationsOperations | None = None

    def get(self, group: FeatureGroup) -> Any | None:
        """Capability implementing `group`, or None when absent."""
        return getattr(self, FeatureGroup(group).value)

    def capabilities(self) -> Iterator[tuple[FeatureGroup, Any]]:
        """Yield (group, capability) for every capability present."""
        for field in fields(self):
            capability = getattr(self, field.name)
            if capability is not None:
                yield FeatureGroup(field.name), capability
