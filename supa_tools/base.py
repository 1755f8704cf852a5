"""Tool Interface & Invocation Contract.

A Tool wraps one asynchronous capability operation into a named, described,
annotated unit. Invocation runs four steps in order:

1. validate the raw input against the tool's input model
2. inject fixed parameters (e.g. a pinned project id) over the validated values
3. await the handler with the merged parameters
4. hand back the handler result, or let its exception propagate untouched
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model
from pydantic.alias_generators import to_camel

from supa_obs.logging import get_logger, tool_context
from supa_tools.exceptions import ReadOnlyModeError, ToolValidationError

logger = get_logger(__name__)

SUCCESS_RESPONSE: dict[str, bool] = {"success": True}

Handler = Callable[[Any], Awaitable[Any]]


class ToolAnnotations(BaseModel):
    """Behavioral hints advertised to the calling agent.

    Advisory only: the registry never enforces them.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    title: str
    read_only_hint: bool = False
    destructive_hint: bool = True
    idempotent_hint: bool = False
    open_world_hint: bool = True


class ProjectScopedInput(BaseModel):
    """Parameters shared by every project-scoped tool."""

    project_id: str = Field(..., description="The project ID")


def _omit_fields(model: type[BaseModel], names: set[str]) -> type[BaseModel]:
    """Derive a copy of `model` without the given fields."""
    if not names:
        return model

    fields = {
        name: (info.annotation, info)
        for name, info in model.model_fields.items()
        if name not in names
    }
    return create_model(
        model.__name__,
        __config__=model.model_config,
        __doc__=model.__doc__,
        **fields,
    )


class Tool:
    """A schema-validated, parameter-injectable, invocable operation."""

    def __init__(
        self,
        name: str,
        description: str,
        annotations: ToolAnnotations,
        parameters: type[BaseModel],
        handler: Handler,
        inject: Mapping[str, Any] | None = None,
    ):
        """Initialize Tool.

        Args:
            name: Unique tool name within a registry
            description: Text shown to the calling agent
            annotations: Behavioral hints
            parameters: Full parameter model the handler receives
            handler: Async callable taking a `parameters` instance
            inject: Fixed values merged over every call. Entries set to None
                are dropped, so the caller has to supply those keys instead.

        Raises:
            ValueError: An injected key is not a field of `parameters`
        """
        self.name = name
        self.description = description
        self.annotations = annotations
        self.parameters = parameters
        self.handler = handler
        self.inject = {key: value for key, value in (inject or {}).items() if value is not None}

        unknown = set(self.inject) - set(parameters.model_fields)
        if unknown:
            raise ValueError(
                f"Tool '{name}' injects unknown parameters: {', '.join(sorted(unknown))}"
            )

        # Injected keys are neither required from nor advertised to the caller
        self.input_model = _omit_fields(parameters, set(self.inject))

    def __repr__(self) -> str:
        return f"Tool(name={self.name!r})"

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the caller-facing parameters."""
        return self.input_model.model_json_schema()

    def to_mcp(self) -> dict[str, Any]:
        """Tool listing entry in MCP `tools/list` shape."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
            "annotations": self.annotations.model_dump(by_alias=True),
        }

    def validate_input(self, input_data: Any) -> BaseModel:
        """Validate raw caller input.

        Strict: "2" is not an int and "false" is not a bool.

        Raises:
            ToolValidationError: Missing field, wrong type or out-of-enum value
        """
        try:
            return self.input_model.model_validate(input_data, strict=True)
        except ValidationError as e:
            raise ToolValidationError(self.name, e) from e

    def inject_parameters(self, validated: BaseModel) -> BaseModel:
        """Merge injected values over validated input.

        Injected values always win over caller-supplied values for the same key.
        """
        merged = {**validated.model_dump(exclude_unset=True), **self.inject}
        return self.parameters.model_validate(merged)

    async def execute(self, input_data: Mapping[str, Any] | None = None) -> Any:
        """Execute tool action.

        Args:
            input_data: Raw, untyped caller input

        Returns:
            The handler result, unchanged

        Raises:
            ToolValidationError: Input rejected before the handler ran
            ReadOnlyModeError: Mutating tool blocked by read-only mode
            Exception: Whatever the capability implementation raised
        """
        validated = self.validate_input(input_data if input_data is not None else {})
        params = self.inject_parameters(validated)

        with tool_context(self.name):
            logger.debug("tool_invoked")
            return await self.handler(params)


def injectable_tool(
    *,
    name: str,
    description: str,
    annotations: ToolAnnotations,
    parameters: type[BaseModel],
    execute: Handler,
    inject: Mapping[str, Any] | None = None,
) -> Tool:
    """Build a Tool whose `inject` values are filled in after validation."""
    return Tool(
        name=name,
        description=description,
        annotations=annotations,
        parameters=parameters,
        handler=execute,
        inject=inject,
    )


def tool_map(*tools: Tool) -> dict[str, Tool]:
    """Key tools by name."""
    return {tool.name: tool for tool in tools}


def ensure_writable(read_only: bool, action: str) -> None:
    """Block a mutating operation while read-only mode is active.

    Raises:
        ReadOnlyModeError: `read_only` is set
    """
    if read_only:
        raise ReadOnlyModeError(f"Cannot {action} in read-only mode.")


def success_response() -> dict[str, bool]:
    """Fresh copy of the fixed success marker."""
    return dict(SUCCESS_RESPONSE)
