"""Auth adapter Pydantic schemas.

User records, operation options, and tool input schemas for the auth tools.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from supa_tools.base import ProjectScopedInput

LinkType = Literal[
    "signup",
    "magiclink",
    "recovery",
    "invite",
    "email_change_new",
    "email_change_current",
]


# ============================================================================
# DOMAIN VALUE OBJECTS
# ============================================================================


class User(BaseModel):
    """Auth user record."""

    model_config = ConfigDict(frozen=True)

    id: str
    email: str | None = None
    phone: str | None = None
    created_at: str
    updated_at: str | None = None
    last_sign_in_at: str | None = None
    email_confirmed_at: str | None = None
    phone_confirmed_at: str | None = None
    role: str | None = None
    app_metadata: dict[str, Any] | None = None
    user_metadata: dict[str, Any] | None = None


class GenerateLinkResult(BaseModel):
    """Generated action link."""

    model_config = ConfigDict(frozen=True)

    action_link: str
    email_otp: str | None = None
    hashed_token: str | None = None
    verification_type: str | None = None


# ============================================================================
# OPERATION OPTIONS
# ============================================================================


class ListUsersOptions(BaseModel):
    """Pagination for AuthOperations.list_users."""

    page: int | None = None
    per_page: int | None = None


class CreateUserOptions(BaseModel):
    """Options for AuthOperations.create_user."""

    email: str | None = None
    phone: str | None = None
    password: str | None = None
    email_confirm: bool | None = None
    phone_confirm: bool | None = None
    user_metadata: dict[str, Any] | None = None
    app_metadata: dict[str, Any] | None = None


class GenerateLinkOptions(BaseModel):
    """Options for AuthOperations.generate_link."""

    type: LinkType
    email: str
    password: str | None = None
    redirect_to: str | None = None


# ============================================================================
# TOOL INPUT SCHEMAS
# ============================================================================


class ListUsersInput(ProjectScopedInput):
    """Input schema for list_users."""

    page: int | None = Field(None, description="Page number (1-indexed)")
    per_page: int | None = Field(None, description="Number of users per page (default: 50)")


class GetUserInput(ProjectScopedInput):
    """Input schema for get_user."""

    user_id: str = Field(..., description="The UUID of the user")


class CreateUserInput(ProjectScopedInput):
    """Input schema for create_user."""

    email: str | None = Field(None, description="User email address")
    phone: str | None = Field(None, description="User phone number")
    password: str | None = Field(None, description="User password")
    email_confirm: bool | None = Field(None, description="Auto-confirm email")
    phone_confirm: bool | None = Field(None, description="Auto-confirm phone")
    user_metadata: dict[str, Any] | None = Field(None, description="Custom user metadata")


class DeleteUserInput(ProjectScopedInput):
    """Input schema for delete_user."""

    user_id: str = Field(..., description="The UUID of the user to delete")


class GenerateLinkInput(ProjectScopedInput):
    """Input schema for generate_link."""

    type: LinkType = Field(..., description="Type of link to generate")
    email: str = Field(..., description="Email address for the link")
    password: str | None = Field(None, description="Password for signup links")
    redirect_to: str | None = Field(None, description="URL to redirect after verification")
