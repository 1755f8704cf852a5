"""Capability adapters.

One sub-package per feature group. Each exposes its capability Protocol, its
value objects, and a factory returning a name -> Tool map:

- auth: get_auth_tools
- branching: get_branching_tools
- database: get_database_tools
- debugging: get_debugging_tools
- development: get_development_tools
- docs: get_docs_tools
- functions: get_edge_function_tools
- operations: get_operations_tools
- storage: get_storage_tools
"""

__all__ = [
    "auth",
    "branching",
    "database",
    "debugging",
    "development",
    "docs",
    "functions",
    "operations",
    "storage",
]
