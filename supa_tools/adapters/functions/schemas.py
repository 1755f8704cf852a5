"""Edge Functions adapter Pydantic schemas."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from supa_tools.base import ProjectScopedInput

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]


# ============================================================================
# DOMAIN VALUE OBJECTS
# ============================================================================


class EdgeFunction(BaseModel):
    """Deployed Edge Function."""

    model_config = ConfigDict(frozen=True)

    name: str
    slug: str | None = None
    status: str | None = None
    version: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


class EdgeFunctionDetails(EdgeFunction):
    """Edge Function with deployment details."""

    entrypoint_path: str | None = None
    import_map_path: str | None = None
    verify_jwt: bool | None = None


class InvokeEdgeFunctionResult(BaseModel):
    """HTTP response of an invoked function."""

    model_config = ConfigDict(frozen=True)

    status: int
    headers: dict[str, str] | None = None
    body: Any


class DeployEdgeFunctionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    status: str
    message: str
    deployment_path: str | None = None


# ============================================================================
# OPERATION OPTIONS
# ============================================================================


class InvokeEdgeFunctionOptions(BaseModel):
    function_name: str
    body: Any = None
    headers: dict[str, str] | None = None
    method: HttpMethod | None = None


class DeployEdgeFunctionOptions(BaseModel):
    name: str
    code: str
    entrypoint: str | None = None
    import_map: str | None = None
    verify_jwt: bool | None = None


# ============================================================================
# TOOL INPUT SCHEMAS
# ============================================================================


class ListEdgeFunctionsInput(ProjectScopedInput):
    """Input schema for list_edge_functions."""


class GetEdgeFunctionInput(ProjectScopedInput):
    """Input schema for get_edge_function."""

    function_name: str = Field(..., description="Name of the Edge Function")


class InvokeEdgeFunctionInput(ProjectScopedInput):
    """Input schema for invoke_edge_function."""

    function_name: str = Field(..., description="Name of the Edge Function to invoke")
    body: Any = Field(None, description="Request body (will be JSON stringified)")
    headers: dict[str, str] | None = Field(None, description="Additional headers")
    method: HttpMethod | None = Field(None, description="HTTP method (default: POST)")


class DeployEdgeFunctionInput(ProjectScopedInput):
    """Input schema for deploy_edge_function."""

    name: str = Field(..., description="Name of the function (used as the endpoint path)")
    code: str = Field(..., description="The TypeScript/Deno code for the function")
    entrypoint: str | None = Field(None, description="Entry point file name (default: index.ts)")
    import_map: str | None = Field(None, description="Optional import map JSON string")
    verify_jwt: bool | None = Field(
        None, description="Whether to verify JWT tokens (default: true)"
    )
