"""Edge Functions capability interface."""

from typing import Protocol

from .schemas import (
    DeployEdgeFunctionOptions,
    DeployEdgeFunctionResult,
    EdgeFunction,
    EdgeFunctionDetails,
    InvokeEdgeFunctionOptions,
    InvokeEdgeFunctionResult,
)


class EdgeFunctionsOperations(Protocol):
    """Edge Function listing, invocation and deployment."""

    async def list_edge_functions(self, project_id: str) -> list[EdgeFunction]: ...

    async def get_edge_function(self, project_id: str, function_name: str) -> EdgeFunctionDetails: ...

    async def invoke_edge_function(
        self, project_id: str, options: InvokeEdgeFunctionOptions
    ) -> InvokeEdgeFunctionResult: ...

    async def deploy_edge_function(
        self, project_id: str, options: DeployEdgeFunctionOptions
    ) -> DeployEdgeFunctionResult: ...
