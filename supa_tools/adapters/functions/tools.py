"""Edge Functions tools."""

from supa_tools.base import Tool, ToolAnnotations, ensure_writable, injectable_tool, tool_map

from .operations import EdgeFunctionsOperations
from .schemas import (
    DeployEdgeFunctionInput,
    DeployEdgeFunctionOptions,
    DeployEdgeFunctionResult,
    EdgeFunction,
    EdgeFunctionDetails,
    GetEdgeFunctionInput,
    InvokeEdgeFunctionInput,
    InvokeEdgeFunctionOptions,
    InvokeEdgeFunctionResult,
    ListEdgeFunctionsInput,
)

DEPLOY_EDGE_FUNCTION_DESCRIPTION = """Deploys a new Edge Function or updates an existing one in self-hosted Supabase.
The function code should be valid Deno/TypeScript code.

Example function code:
```typescript
import { serve } from "https://deno.land/std@0.168.0/http/server.ts"

serve(async (req) => {
  const { name } = await req.json()
  return new Response(JSON.stringify({ message: `Hello ${name}!` }), {
    headers: { "Content-Type": "application/json" },
  })
})
```

Note: In self-hosted mode, deployment creates the function file in the functions volume.
The functions service will automatically detect and load the new function."""


def get_edge_function_tools(
    functions: EdgeFunctionsOperations,
    project_id: str | None = None,
    read_only: bool = False,
) -> dict[str, Tool]:
    """Build the Edge Functions tool set."""

    async def list_edge_functions(params: ListEdgeFunctionsInput) -> list[EdgeFunction]:
        return await functions.list_edge_functions(params.project_id)

    async def get_edge_function(params: GetEdgeFunctionInput) -> EdgeFunctionDetails:
        return await functions.get_edge_function(params.project_id, params.function_name)

    async def invoke_edge_function(params: InvokeEdgeFunctionInput) -> InvokeEdgeFunctionResult:
        ensure_writable(read_only, "invoke Edge Function")
        options = InvokeEdgeFunctionOptions(
            function_name=params.function_name,
            body=params.body,
            headers=params.headers,
            method=params.method,
        )
        return await functions.invoke_edge_function(params.project_id, options)

    async def deploy_edge_function(params: DeployEdgeFunctionInput) -> DeployEdgeFunctionResult:
        ensure_writable(read_only, "deploy Edge Function")
        options = DeployEdgeFunctionOptions(
            **params.model_dump(exclude={"project_id"}, exclude_unset=True)
        )
        return await functions.deploy_edge_function(params.project_id, options)

    inject = {"project_id": project_id}

    return tool_map(
        injectable_tool(
            name="list_edge_functions",
            description="Lists all Edge Functions deployed in the project.",
            annotations=ToolAnnotations(
                title="List Edge Functions",
                read_only_hint=True,
                destructive_hint=False,
                idempotent_hint=True,
                open_world_hint=False,
            ),
            parameters=ListEdgeFunctionsInput,
            inject=inject,
            execute=list_edge_functions,
        ),
        injectable_tool(
            name="get_edge_function",
            description="Gets details of a specific Edge Function including its code.",
            annotations=ToolAnnotations(
                title="Get Edge Function",
                read_only_hint=True,
                destructive_hint=False,
                idempotent_hint=True,
                open_world_hint=False,
            ),
            parameters=GetEdgeFunctionInput,
            inject=inject,
            execute=get_edge_function,
        ),
        injectable_tool(
            name="invoke_edge_function",
            description="Invokes an Edge Function with the given parameters.",
            annotations=ToolAnnotations(
                title="Invoke Edge Function",
                read_only_hint=False,
                destructive_hint=False,
                idempotent_hint=False,
                open_world_hint=True,
            ),
            parameters=InvokeEdgeFunctionInput,
            inject=inject,
            execute=invoke_edge_function,
        ),
        injectable_tool(
            name="deploy_edge_function",
            description=DEPLOY_EDGE_FUNCTION_DESCRIPTION,
            annotations=ToolAnnotations(
                title="Deploy Edge Function",
                read_only_hint=False,
                destructive_hint=False,
                idempotent_hint=False,
                open_world_hint=True,
            ),
            parameters=DeployEdgeFunctionInput,
            inject=inject,
            execute=deploy_edge_function,
        ),
    )
