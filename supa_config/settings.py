"""
Application Settings (Pydantic Settings).

Loads configuration from environment variables (.env file or system env).
Values are read once when the tool registry is built and never change for the
lifetime of the process.
"""

from typing import TYPE_CHECKING

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from supa_tools.platform import FeatureGroup

ALL_FEATURES = "database,debugging,development,storage,auth,functions,branching,docs,operations"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings documented in .env.example.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # PROJECT SCOPING
    # ========================================================================
    SUPABASE_PROJECT_ID: str | None = Field(
        default=None,
        description="Pin every tool to this project. When unset, callers pass project_id per call.",
    )

    # ========================================================================
    # SAFETY
    # ========================================================================
    READ_ONLY: bool = Field(
        default=False,
        description="Block every mutating tool before it reaches the platform",
    )

    # ========================================================================
    # FEATURE GROUPS
    # ========================================================================
    FEATURES: str = Field(
        default=ALL_FEATURES,
        description="Comma-separated feature groups to register",
    )

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")

    def feature_groups(self) -> list["FeatureGroup"]:
        """Parse FEATURES into FeatureGroup members.

        Raises:
            ValueError: A name is not a known feature group
        """
        from supa_tools.platform import parse_feature_groups

        return parse_feature_groups(self.FEATURES.split(","))
