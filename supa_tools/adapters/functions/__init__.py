"""Edge Functions adapter.

Provides tools for Edge Functions on a self-hosted instance:
- List functions and get function details
- Invoke a function over HTTP
- Deploy or update a function
"""

from .operations import EdgeFunctionsOperations
from .schemas import (
    DeployEdgeFunctionOptions,
    DeployEdgeFunctionResult,
    EdgeFunction,
    EdgeFunctionDetails,
    InvokeEdgeFunctionOptions,
    InvokeEdgeFunctionResult,
)
from .tools import get_edge_function_tools

__all__ = [
    "DeployEdgeFunctionOptions",
    "DeployEdgeFunctionResult",
    "EdgeFunction",
    "EdgeFunctionDetails",
    "EdgeFunctionsOperations",
    "InvokeEdgeFunctionOptions",
    "InvokeEdgeFunctionResult",
    "get_edge_function_tools",
]
