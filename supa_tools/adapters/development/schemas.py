"""Development adapter Pydantic schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from supa_tools.base import ProjectScopedInput

ApiKeyType = Literal["legacy", "publishable"]


class ApiKey(BaseModel):
    """Client-safe API key."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    name: str
    type: ApiKeyType
    description: str | None = None
    id: str | None = None
    disabled: bool | None = None


class GenerateTypescriptTypesResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    types: str


class GetProjectUrlInput(ProjectScopedInput):
    """Input schema for get_project_url."""


class GetPublishableKeysInput(ProjectScopedInput):
    """Input schema for get_publishable_keys."""


class GenerateTypescriptTypesInput(ProjectScopedInput):
    """Input schema for generate_typescript_types."""
