"""
Supa-Tools Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from supa_config.settings import Settings

__all__ = ["Settings"]
